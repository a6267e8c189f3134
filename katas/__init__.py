"""Small programming exercises: a card deck, interfaces, streams, a password vault and algorithm puzzles."""

__version__ = "0.1.0"