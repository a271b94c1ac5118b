import json
from collections.abc import Callable
from typing import Any

import pytest

from decksearch.models.card import Card, DeckSet
from decksearch.models.collection import DeckCollection

# Envelope bytes the deck template endpoint puts in front of its JSON
ENVELOPE = b"\xef\xbb\xbf"


@pytest.fixture
def make_page_body() -> Callable[[dict[str, Any]], bytes]:
    """Build a deck template response body for a set payload."""

    def _make(payload: dict[str, Any]) -> bytes:
        return ENVELOPE + json.dumps(payload).encode("utf-8")

    return _make


@pytest.fixture
def end_of_data_body() -> bytes:
    """Response body the endpoint returns past the last set."""
    return ENVELOPE + b"{}"


@pytest.fixture
def french_collection() -> DeckCollection:
    """Two small sets of French vocabulary."""
    return DeckCollection(
        deck_id="57a5f40fe02107451d3d3c81",
        sets=(
            DeckSet(
                name="Pronoms",
                cards=(
                    Card(word="Je", translation="I"),
                    Card(word="Tu", translation="you"),
                    Card(word="Nous", translation="we"),
                ),
                index=0,
            ),
            DeckSet(
                name="Repas",
                cards=(
                    Card(word="le déjeuner", translation="lunch"),
                    Card(word="le dîner", translation="dinner"),
                    Card(word="JEUDI", translation="Thursday"),
                ),
                index=1,
            ),
        ),
    )
