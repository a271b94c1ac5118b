"""
decksearch services.

Deck acquisition, caching and search.
"""

from decksearch.services.acquisition import DEFAULT_MAX_PAGES, acquire_all
from decksearch.services.cache_store import CacheStore
from decksearch.services.deck_loader import SearchOutcome, load_collection, run_search
from decksearch.services.deck_search import format_matches, search_collection

__all__ = [
    "DEFAULT_MAX_PAGES",
    "CacheStore",
    "SearchOutcome",
    "acquire_all",
    "format_matches",
    "load_collection",
    "run_search",
    "search_collection",
]
