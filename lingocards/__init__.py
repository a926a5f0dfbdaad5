"""Vocabulary flashcards with pronunciation practice scoring."""

__version__ = "0.1.0"
