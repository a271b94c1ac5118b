"""
Search a TofuLearn deck for a word.

Fetches the deck on first use, caches it, and prints every card whose word
contains the query. Settings come from DECKSEARCH_* environment variables or
.env; command-line flags override them.

Usage:
    python -m decksearch.jobs.search_deck --deck-id 57a5f40fe02107451d3d3c81 --query je
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from decksearch.config import Settings
from decksearch.models.failure import DeckSearchError
from decksearch.services.deck_loader import run_search
from decksearch.services.deck_search import format_matches

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Search a TofuLearn deck for a word")
    parser.add_argument("--deck-id", help="Deck to search (default: DECKSEARCH_DECK_ID)")
    parser.add_argument("--query", help="Substring to look for (default: DECKSEARCH_QUERY)")
    parser.add_argument(
        "--cache-dir",
        type=Path,
        help="Directory for cached decks (default: DECKSEARCH_CACHE_DIR or ./cache)",
    )
    parser.add_argument("--base-url", help="Deck template endpoint")
    parser.add_argument(
        "--max-pages",
        type=int,
        help="Give up if the deck has more pages than this",
    )
    parser.add_argument(
        "--refresh",
        action="store_true",
        help="Fetch the deck again even if it is cached",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Settings from the environment, overridden by any flags given."""
    overrides: dict[str, Any] = {
        "deck_id": args.deck_id,
        "query": args.query,
        "cache_dir": args.cache_dir,
        "base_url": args.base_url,
        "max_pages": args.max_pages,
    }
    return Settings(**{k: v for k, v in overrides.items() if v is not None})


def run(argv: list[str] | None = None) -> int:
    """Run a search and print the results. Returns the process exit code."""
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        settings = build_settings(args)
    except ValidationError as e:
        logger.error("Invalid settings: %s", e)
        return 2

    try:
        outcome = run_search(settings, refresh=args.refresh)
    except DeckSearchError as e:
        logger.error("Deck search failed: %s", e.describe())
        return 1

    print(format_matches(outcome.matches, outcome.query))
    return 0


def main() -> None:
    """CLI entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
