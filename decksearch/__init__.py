"""Fetch, cache and search flashcard decks from TofuLearn."""
