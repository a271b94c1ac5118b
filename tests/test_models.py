import dataclasses

import pytest

from decksearch.models.card import Card, DeckSet
from decksearch.models.collection import DeckCollection
from decksearch.models.failure import (
    CacheIOError,
    DeckSearchError,
    DecodeError,
    FailureKind,
    PageLimitExceededError,
    TransportError,
)
from decksearch.models.payload import SetPayload, StoredSet


class TestCard:
    def test_is_immutable(self) -> None:
        card = Card(word="Je", translation="I")

        with pytest.raises(dataclasses.FrozenInstanceError):
            card.word = "Tu"  # type: ignore[misc]


class TestDeckCollection:
    def test_counts(self, french_collection: DeckCollection) -> None:
        assert len(french_collection) == 2
        assert french_collection.total_cards() == 6

    def test_iterates_in_order(self, french_collection: DeckCollection) -> None:
        assert [s.name for s in french_collection] == ["Pronoms", "Repas"]

    def test_empty(self) -> None:
        collection = DeckCollection(deck_id="abc")

        assert len(collection) == 0
        assert collection.total_cards() == 0


class TestPayloads:
    def test_to_deck_set_stamps_index(self) -> None:
        payload = SetPayload.model_validate(
            {"name": "A", "cards": [{"word": "un", "translation": "one"}]}
        )

        deck_set = payload.to_deck_set(index=5)

        assert deck_set == DeckSet(name="A", cards=(Card(word="un", translation="one"),), index=5)

    def test_missing_fields_default_to_empty(self) -> None:
        payload = SetPayload.model_validate({"cards": [{"word": "un"}]})

        assert payload.name == ""
        assert payload.cards[0].translation == ""

    def test_null_cards_are_empty(self) -> None:
        assert SetPayload.model_validate({"name": "A", "cards": None}).cards == []

    def test_stored_set_keeps_index(self) -> None:
        deck_set = DeckSet(name="A", cards=(Card(word="un", translation="one"),), index=3)

        stored = StoredSet.from_deck_set(deck_set)

        assert stored.index == 3
        assert stored.to_deck_set(index=stored.index) == deck_set


class TestFailures:
    @pytest.mark.parametrize(
        ("error_cls", "kind"),
        [
            (TransportError, FailureKind.TRANSPORT),
            (DecodeError, FailureKind.DECODE),
            (CacheIOError, FailureKind.CACHE_IO),
        ],
    )
    def test_kinds(self, error_cls: type[DeckSearchError], kind: FailureKind) -> None:
        error = error_cls("boom")

        assert isinstance(error, DeckSearchError)
        assert error.kind == kind
        assert str(error) == "boom"

    def test_describe(self) -> None:
        error = DecodeError("Bad cache.", detail="2 validation error(s)", suggestion="Delete it.")

        assert error.describe() == "[decode] Bad cache. (2 validation error(s)) - Delete it."

    def test_page_limit(self) -> None:
        error = PageLimitExceededError("abc", 10)

        assert error.kind == FailureKind.PAGE_LIMIT
        assert "within 10 pages" in error.message
