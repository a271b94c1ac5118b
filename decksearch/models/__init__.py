from decksearch.models.card import Card, DeckSet
from decksearch.models.collection import DeckCollection
from decksearch.models.failure import (
    CacheIOError,
    DeckSearchError,
    DecodeError,
    FailureKind,
    InvalidDeckIdError,
    PageLimitExceededError,
    TransportError,
)
from decksearch.models.match import Match

__all__ = [
    "CacheIOError",
    "Card",
    "DeckCollection",
    "DeckSearchError",
    "DeckSet",
    "DecodeError",
    "FailureKind",
    "InvalidDeckIdError",
    "Match",
    "PageLimitExceededError",
    "TransportError",
]
