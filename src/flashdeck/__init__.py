"""flashdeck: a line-oriented flashcard manager."""

__version__ = "0.1.0"
