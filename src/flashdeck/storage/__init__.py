"""Persistence collaborators."""

from .json_storage import DeckStorage, JsonAdaptedCard, JsonDeckStorage, JsonSerializableDeck

__all__ = ["DeckStorage", "JsonAdaptedCard", "JsonDeckStorage", "JsonSerializableDeck"]
