from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Match:
    """
    A card whose word contains the search query.

    Positions are 1-based, the way a person counts sets and words in the app.
    """

    set_index: int
    word_index: int
    word: str
    translation: str
