"""
Deck loading and search orchestration.

A deck is fetched from the remote service the first time it is needed and
read from the cache on every later run. Either way the caller gets the same
collection.
"""

import logging
from dataclasses import dataclass

import httpx

from decksearch.clients.tofulearn import TOFULEARN_DECK_TEMPLATE, USER_AGENT
from decksearch.config import Settings
from decksearch.models.collection import DeckCollection
from decksearch.models.match import Match
from decksearch.services.acquisition import DEFAULT_MAX_PAGES, acquire_all
from decksearch.services.cache_store import CacheStore
from decksearch.services.deck_search import search_collection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchOutcome:
    """A loaded collection and the matches found in it."""

    collection: DeckCollection
    query: str
    matches: list[Match]
    from_cache: bool


def load_collection(
    deck_id: str,
    cache: CacheStore,
    client: httpx.Client | None = None,
    *,
    refresh: bool = False,
    max_pages: int = DEFAULT_MAX_PAGES,
    base_url: str = TOFULEARN_DECK_TEMPLATE,
) -> tuple[DeckCollection, bool]:
    """
    Load a deck, from the cache if present, otherwise from the remote service.

    Args:
        deck_id: Opaque deck identifier
        cache: Cache store to read from and write to
        client: Optional httpx client shared across page fetches
        refresh: If True, fetch again even if the deck is cached
        max_pages: Page cap for acquisition
        base_url: Deck template endpoint

    Returns:
        Tuple of (collection, loaded_from_cache)

    Raises:
        DeckSearchError: On any fetch, decode or cache failure. A failed
            fetch leaves the cache untouched.
    """
    key = cache.key_for(deck_id)
    path = cache.path_for(key)

    if cache.has(key) and not refresh:
        logger.info("Cached file [%s] exists. Loading the content.", path)
        return cache.load(key), True

    if refresh:
        logger.info("Refreshing cached file [%s] from the TofuLearn API.", path)
    else:
        logger.info("Cached file [%s] does not exist. Using TofuLearn API to create it.", path)

    sets = acquire_all(deck_id, client, max_pages=max_pages, base_url=base_url)
    collection = DeckCollection(deck_id=deck_id, sets=tuple(sets))

    cache.save(key, collection)
    logger.info("Cached file [%s] created.", path)
    return collection, False


def run_search(
    settings: Settings,
    client: httpx.Client | None = None,
    *,
    refresh: bool = False,
) -> SearchOutcome:
    """
    Load the configured deck and search it for the configured query.

    Args:
        settings: Deck id, query, cache location and fetch limits
        client: Optional httpx client; one is created for the run if omitted
        refresh: If True, ignore an existing cache entry

    Returns:
        SearchOutcome with the collection and its matches
    """
    cache = CacheStore(settings.cache_dir)

    if client is None:
        with httpx.Client(
            headers={"User-Agent": USER_AGENT},
            follow_redirects=True,
            timeout=settings.request_timeout,
        ) as own_client:
            return run_search(settings, own_client, refresh=refresh)

    collection, from_cache = load_collection(
        settings.deck_id,
        cache,
        client,
        refresh=refresh,
        max_pages=settings.max_pages,
        base_url=settings.base_url,
    )
    matches = search_collection(collection, settings.query)

    logger.info(
        "Searched %d sets (%d cards) for %r: %d matches",
        len(collection),
        collection.total_cards(),
        settings.query,
        len(matches),
    )
    return SearchOutcome(
        collection=collection,
        query=settings.query,
        matches=matches,
        from_cache=from_cache,
    )
