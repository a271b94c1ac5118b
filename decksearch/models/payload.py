"""
Wire and on-disk shapes of a deck set.

The remote template payload is ``{name, cards: [{word, translation}]}``.
The cache stores the same shape plus the stamped ``index``.
Missing or null fields fall back to empty values, and a null set list
is an empty one.
"""

from typing import Any

from pydantic import BaseModel, Field, TypeAdapter, field_validator

from decksearch.models.card import Card, DeckSet


class CardPayload(BaseModel):
    """A card as it appears in a payload."""

    word: str = ""
    translation: str = ""

    @field_validator("word", "translation", mode="before")
    @classmethod
    def _null_text_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    def to_card(self) -> Card:
        return Card(word=self.word, translation=self.translation)


class SetPayload(BaseModel):
    """A set as returned by the deck template endpoint."""

    name: str = ""
    cards: list[CardPayload] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def _null_name_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("cards", mode="before")
    @classmethod
    def _null_cards_are_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def to_deck_set(self, index: int) -> DeckSet:
        """Build the domain set, stamped with the page it came from."""
        return DeckSet(
            name=self.name,
            cards=tuple(card.to_card() for card in self.cards),
            index=index,
        )


class StoredSet(SetPayload):
    """A set as persisted in the cache, index included."""

    index: int = 0

    @classmethod
    def from_deck_set(cls, deck_set: DeckSet) -> "StoredSet":
        return cls(
            name=deck_set.name,
            cards=[
                CardPayload(word=card.word, translation=card.translation)
                for card in deck_set.cards
            ],
            index=deck_set.index,
        )


# A cache entry for a deck with no sets may hold a bare null
stored_sets_adapter: TypeAdapter[list[StoredSet] | None] = TypeAdapter(list[StoredSet] | None)
