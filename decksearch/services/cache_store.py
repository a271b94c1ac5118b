"""
File cache for deck collections.

One file per deck under the cache directory, holding the whole collection as
a JSON array of sets. Entries are written in full or not at all and are never
expired.
"""

import contextlib
import logging
import os
import re
from pathlib import Path

from pydantic import ValidationError

from decksearch.models.card import DeckSet
from decksearch.models.collection import DeckCollection
from decksearch.models.failure import CacheIOError, DecodeError, InvalidDeckIdError
from decksearch.models.payload import StoredSet, stored_sets_adapter

logger = logging.getLogger(__name__)

DEFAULT_CACHE_DIR = Path("cache")

_SAFE_KEY = re.compile(r"[A-Za-z0-9][A-Za-z0-9._-]*")


class CacheStore:
    """Persists deck collections so a deck is only fetched once."""

    def __init__(self, cache_dir: Path | None = None) -> None:
        """Initialize store.

        Args:
            cache_dir: Directory holding cache files. Created on first save.
                      Defaults to ./cache.
        """
        self.cache_dir = cache_dir or DEFAULT_CACHE_DIR

    @staticmethod
    def key_for(deck_id: str) -> str:
        """
        Cache key for a deck.

        The key is the deck id itself, so it has to be a single safe
        path component.

        Raises:
            InvalidDeckIdError: If the id cannot name a file
        """
        if not _SAFE_KEY.fullmatch(deck_id):
            raise InvalidDeckIdError(
                f"Deck id {deck_id!r} cannot be used as a cache key.",
                suggestion="Use the id from the deck's URL.",
            )
        return deck_id

    def path_for(self, key: str) -> Path:
        """Cache file path for a key."""
        return self.cache_dir / key

    def has(self, key: str) -> bool:
        return self.path_for(key).is_file()

    def save(self, key: str, collection: DeckCollection) -> Path:
        """
        Write a collection to the cache.

        The data goes to a temporary sibling first and is then renamed over
        the entry, so readers see either the old entry or the complete new one.

        Args:
            key: Cache key from key_for
            collection: Collection to persist

        Returns:
            Path of the written entry

        Raises:
            CacheIOError: If the directory or file cannot be written
        """
        path = self.path_for(key)
        tmp_path = path.with_name(f".{path.name}.tmp")
        data = stored_sets_adapter.dump_json(
            [StoredSet.from_deck_set(deck_set) for deck_set in collection.sets]
        )

        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CacheIOError(
                f"Failed to create cache directory {self.cache_dir}.",
                detail=str(e),
            ) from e

        try:
            with open(tmp_path, "wb") as f:
                f.write(data)
            os.replace(tmp_path, path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            raise CacheIOError(
                f"Failed to write cache entry {path}.",
                detail=str(e),
            ) from e

        logger.debug("Wrote %d sets (%d bytes) to %s", len(collection), len(data), path)
        return path

    def load(self, key: str) -> DeckCollection:
        """
        Read a collection back from the cache.

        Raises:
            CacheIOError: If the entry cannot be read
            DecodeError: If the entry is not a list of sets
        """
        path = self.path_for(key)

        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise CacheIOError(f"Failed to read cache entry {path}.", detail=str(e)) from e

        try:
            stored = stored_sets_adapter.validate_json(data)
        except ValidationError as e:
            raise DecodeError(
                f"Cache entry {path} is not a valid deck collection.",
                detail=f"{e.error_count()} validation error(s)",
                suggestion="Delete the file or rerun with --refresh.",
            ) from e

        sets: list[DeckSet] = [item.to_deck_set(index=item.index) for item in stored or []]
        return DeckCollection(deck_id=key, sets=tuple(sets))

