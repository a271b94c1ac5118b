from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Card:
    """
    A single flashcard.

    Attributes:
        word: Term being learned, exactly as the deck lists it
        translation: Translation shown on the back of the card
    """

    word: str
    translation: str


@dataclass(frozen=True, slots=True)
class DeckSet:
    """
    One page of cards retrieved from a deck.

    Attributes:
        name: Set title from the deck template
        cards: Cards in deck order
        index: Zero-based page number the set was retrieved from
    """

    name: str
    cards: tuple[Card, ...] = field(default_factory=tuple)
    index: int = 0
