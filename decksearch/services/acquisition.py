"""
Deck acquisition.

Walks a deck's pages in order until the remote service signals there are
no more sets.
"""

import logging

import httpx

from decksearch.clients.tofulearn import (
    TOFULEARN_DECK_TEMPLATE,
    EndOfData,
    fetch_page,
)
from decksearch.models.card import DeckSet
from decksearch.models.failure import PageLimitExceededError

logger = logging.getLogger(__name__)

DEFAULT_MAX_PAGES = 1000


def acquire_all(
    deck_id: str,
    client: httpx.Client | None = None,
    *,
    max_pages: int = DEFAULT_MAX_PAGES,
    base_url: str = TOFULEARN_DECK_TEMPLATE,
) -> list[DeckSet]:
    """
    Fetch every set of a deck.

    Pages are requested one at a time, 0, 1, 2, ... until the end-of-data
    sentinel. Each set is stamped with the page index it came from.

    Args:
        deck_id: Opaque deck identifier
        client: Optional httpx client shared across pages
        max_pages: Most pages to request before giving up
        base_url: Deck template endpoint

    Returns:
        Sets in retrieval order (may be empty)

    Raises:
        TransportError: If any page fetch fails; earlier pages are discarded
        DecodeError: If any page is not a deck set
        PageLimitExceededError: If no sentinel arrives within max_pages
    """
    if max_pages < 1:
        raise ValueError(f"max_pages must be positive, got {max_pages}")

    sets: list[DeckSet] = []

    for page_index in range(max_pages):
        outcome = fetch_page(deck_id, page_index, client, base_url=base_url)

        if isinstance(outcome, EndOfData):
            logger.debug("Deck %s ends after %d sets", deck_id, len(sets))
            return sets

        sets.append(outcome.payload.to_deck_set(index=page_index))
        logger.info("Loaded set [%d].", page_index + 1)

    raise PageLimitExceededError(deck_id, max_pages)
