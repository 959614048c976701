"""Predicates used to narrow the displayed card list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, FrozenSet, Iterable, Tuple

from flashdeck.model.card import Card

CardPredicate = Callable[[Card], bool]


@dataclass(frozen=True)
class ShowAllCards:
    def __call__(self, card: Card) -> bool:
        return True


@dataclass(frozen=True)
class QuestionStartsWith:
    prefix: str

    def __call__(self, card: Card) -> bool:
        return card.question.startswith(self.prefix)


@dataclass(frozen=True)
class HasAllTags:
    """Matches cards whose tags are a superset of ``tags``."""

    tags: FrozenSet[str]

    def __call__(self, card: Card) -> bool:
        return self.tags <= card.tags


@dataclass(frozen=True)
class AllOf:
    predicates: Tuple[CardPredicate, ...]

    @classmethod
    def of(cls, predicates: Iterable[CardPredicate]) -> "AllOf":
        return cls(tuple(predicates))

    def __call__(self, card: Card) -> bool:
        return all(predicate(card) for predicate in self.predicates)


PREDICATE_SHOW_ALL_CARDS = ShowAllCards()
