"""
Failure taxonomy for deck retrieval, caching and search.

Every failure the core can produce is a DeckSearchError subclass carrying a
FailureKind, so the entry point decides how to present it and which exit code
to use. Nothing in the core retries or recovers locally.

End of pagination is not a failure: the client returns it as an outcome value
(see decksearch.clients.tofulearn.EndOfData).
"""

from enum import Enum


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Network, connection or HTTP status failure during a page fetch
    TRANSPORT = "transport"

    # Payload or cache content does not have the expected shape
    DECODE = "decode"

    # Cache read/write failure
    CACHE_IO = "cache_io"

    # Pagination did not terminate within the configured page cap
    PAGE_LIMIT = "page_limit"

    # Bad configuration or arguments
    INVALID_INPUT = "invalid_input"


class DeckSearchError(Exception):
    """
    Base class for known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    kind: FailureKind = FailureKind.INVALID_INPUT

    def __init__(
        self,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ):
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        super().__init__(message)

    def describe(self) -> str:
        """One-line description suitable for an operator."""
        parts = [f"[{self.kind.value}] {self.message}"]
        if self.detail:
            parts.append(f"({self.detail})")
        if self.suggestion:
            parts.append(f"- {self.suggestion}")
        return " ".join(parts)


class TransportError(DeckSearchError):
    """A page could not be fetched from the remote deck service."""

    kind = FailureKind.TRANSPORT


class DecodeError(DeckSearchError):
    """A payload or cache entry does not decode into deck sets."""

    kind = FailureKind.DECODE


class CacheIOError(DeckSearchError):
    """The cache namespace or an entry could not be read or written."""

    kind = FailureKind.CACHE_IO


class PageLimitExceededError(DeckSearchError):
    """
    The remote service kept returning sets past the page cap.

    Raised instead of looping forever when the end-of-data sentinel never shows up.
    """

    kind = FailureKind.PAGE_LIMIT

    def __init__(self, deck_id: str, max_pages: int):
        self.deck_id = deck_id
        self.max_pages = max_pages
        super().__init__(
            message=f"Deck {deck_id} did not end within {max_pages} pages.",
            suggestion="Raise --max-pages if the deck really is that large.",
        )


class InvalidDeckIdError(DeckSearchError):
    """A deck identifier cannot be used as a cache key or URL segment."""

    kind = FailureKind.INVALID_INPUT
