from collections.abc import Iterator
from dataclasses import dataclass, field

from decksearch.models.card import DeckSet


@dataclass(frozen=True)
class DeckCollection:
    """
    Every set of a deck, in retrieval order.

    This is the unit of caching: an entry on disk always holds a whole
    collection, never part of one.
    """

    deck_id: str
    sets: tuple[DeckSet, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[DeckSet]:
        return iter(self.sets)

    def __len__(self) -> int:
        return len(self.sets)

    def total_cards(self) -> int:
        """Total number of cards across all sets."""
        return sum(len(deck_set.cards) for deck_set in self.sets)
