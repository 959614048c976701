"""Card entities, filters and the in-memory model."""

from .card import Card, Difficulty
from .deck import Model
from .filters import (
    PREDICATE_SHOW_ALL_CARDS,
    AllOf,
    HasAllTags,
    QuestionStartsWith,
    ShowAllCards,
)
from .goal import Goal

__all__ = [
    "AllOf",
    "Card",
    "Difficulty",
    "Goal",
    "HasAllTags",
    "Model",
    "PREDICATE_SHOW_ALL_CARDS",
    "QuestionStartsWith",
    "ShowAllCards",
]
