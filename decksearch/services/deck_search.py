"""
Deck search service.

Finds every card whose word contains a query, ignoring case.

Examples:
- "je" matches "Je", "jeune" and "Déjeuner"
- "" matches every card in the deck
"""

import logging

from decksearch.models.collection import DeckCollection
from decksearch.models.match import Match

logger = logging.getLogger(__name__)


def search_collection(collection: DeckCollection, query: str) -> list[Match]:
    """
    Search a collection for cards whose word contains the query.

    Matching is plain case-insensitive substring containment on the word
    only. Translations are not searched.

    Args:
        collection: Collection to search
        query: Substring to look for; empty matches every card

    Returns:
        Matches in set order, then card order within each set.
        Positions are 1-based; word and translation are returned verbatim.
    """
    query_lower = query.lower()
    matches: list[Match] = []

    for deck_set in collection:
        for position, card in enumerate(deck_set.cards):
            if query_lower not in card.word.lower():
                continue
            matches.append(
                Match(
                    set_index=deck_set.index + 1,
                    word_index=position + 1,
                    word=card.word,
                    translation=card.translation,
                )
            )

    logger.debug(
        "Query %r matched %d of %d cards", query, len(matches), collection.total_cards()
    )
    return matches


def format_matches(matches: list[Match], query: str | None = None) -> str:
    """
    Format matches as a human-readable listing.

    Args:
        matches: Search results
        query: Query that produced them, used in the header

    Returns:
        One line per match, e.g. "Set 3, word 5: Je = I".
    """
    if not matches:
        if query is not None:
            return f"No cards found containing {query!r}."
        return "No cards found."

    noun = "card" if len(matches) == 1 else "cards"
    header = f"Found {len(matches)} {noun}"
    if query is not None:
        header += f" containing {query!r}"
    lines = [header + ":"]

    for match in matches:
        lines.append(
            f"  Set {match.set_index}, word {match.word_index}: "
            f"{match.word} = {match.translation}"
        )

    return "\n".join(lines)
