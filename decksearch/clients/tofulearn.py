"""
TofuLearn deck template client.

Fetches one set of a deck per request from the deck template endpoint:

    GET <base>/<deck_id>/<page_index>

The response body is a short non-JSON envelope prefix followed by the set
as JSON. A body of at most a few bytes means there is no set at that index.
Both constants are observed behavior of the endpoint; nothing more is known
about the envelope.
"""

import logging
from dataclasses import dataclass

import httpx
from pydantic import ValidationError

from decksearch.models.failure import DecodeError, TransportError
from decksearch.models.payload import SetPayload

logger = logging.getLogger(__name__)

TOFULEARN_DECK_TEMPLATE = "https://www.tofulearn.com/papi/getDeckTemplate"
USER_AGENT = "decksearch/1.0"

# Bodies this short carry no set: the end-of-data sentinel
END_OF_DATA_MAX_BYTES = 5

# Envelope bytes that precede the JSON body
ENVELOPE_PREFIX_BYTES = 3


@dataclass(frozen=True)
class PageFetched:
    """A page that held a set."""

    page_index: int
    payload: SetPayload


@dataclass(frozen=True)
class EndOfData:
    """No set exists at this page index; pagination is over."""

    page_index: int


PageOutcome = PageFetched | EndOfData


def build_page_url(deck_id: str, page_index: int, base_url: str = TOFULEARN_DECK_TEMPLATE) -> str:
    """Build the template URL for one page of a deck."""
    if page_index < 0:
        raise ValueError(f"Page index must be non-negative, got {page_index}")
    return f"{base_url.rstrip('/')}/{deck_id}/{page_index}"


def decode_page(body: bytes, page_index: int) -> PageOutcome:
    """
    Interpret a raw page body.

    Args:
        body: Response body exactly as received
        page_index: Page the body was fetched for

    Returns:
        EndOfData for sentinel bodies, otherwise PageFetched

    Raises:
        DecodeError: If the body past the envelope prefix is not a set
    """
    if len(body) <= END_OF_DATA_MAX_BYTES:
        return EndOfData(page_index=page_index)

    try:
        payload = SetPayload.model_validate_json(body[ENVELOPE_PREFIX_BYTES:])
    except ValidationError as e:
        raise DecodeError(
            f"Page {page_index} did not decode as a deck set.",
            detail=f"{e.error_count()} validation error(s)",
        ) from e

    return PageFetched(page_index=page_index, payload=payload)


def fetch_page(
    deck_id: str,
    page_index: int,
    client: httpx.Client | None = None,
    *,
    base_url: str = TOFULEARN_DECK_TEMPLATE,
) -> PageOutcome:
    """
    Fetch one page of a deck.

    Args:
        deck_id: Opaque deck identifier
        page_index: Zero-based page to fetch
        client: Optional httpx client for connection reuse
        base_url: Deck template endpoint

    Returns:
        PageFetched with the decoded set, or EndOfData past the last set.
        The set is not stamped with its index here.

    Raises:
        TransportError: If the request fails or returns an error status
        DecodeError: If the payload is not a deck set
    """
    url = build_page_url(deck_id, page_index, base_url)

    try:
        if client:
            response = client.get(url)
        else:
            response = httpx.get(url, headers={"User-Agent": USER_AGENT}, follow_redirects=True)
    except httpx.RequestError as e:
        raise TransportError(
            f"Failed to fetch page {page_index} of deck {deck_id}.",
            detail=str(e) or type(e).__name__,
        ) from e

    # Non-streaming responses are fully read and closed by now
    body = response.content
    logger.debug("GET %s -> %d (%d bytes)", url, response.status_code, len(body))

    # Short 4xx bodies still end pagination; short 5xx bodies are outages
    if len(body) > END_OF_DATA_MAX_BYTES or response.is_server_error:
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"Failed to fetch page {page_index} of deck {deck_id}.",
                detail=f"HTTP {e.response.status_code}",
            ) from e

    return decode_page(body, page_index)
