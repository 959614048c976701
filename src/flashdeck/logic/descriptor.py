from __future__ import annotations

from dataclasses import dataclass, replace
from typing import FrozenSet, Optional

from flashdeck.model.card import Card, Difficulty


@dataclass(frozen=True)
class EditCardDescriptor:
    """Fields supplied to ``edit``; ``None`` marks a field the user left out.

    ``None`` is never a legal card value for these fields (a cleared hint is
    ``""`` and no tags is an empty frozenset), so absence is unambiguous.
    """

    question: Optional[str] = None
    answer: Optional[str] = None
    tags: Optional[FrozenSet[str]] = None
    hint: Optional[str] = None

    def is_any_field_edited(self) -> bool:
        return any(value is not None for value in (self.question, self.answer, self.tags, self.hint))

    def apply_to(self, card: Card) -> Card:
        """Merge onto ``card``.

        Content edits reset the difficulty to NEW but keep the practice dates
        and solve count of the original card.
        """
        return replace(
            card,
            question=self.question if self.question is not None else card.question,
            answer=self.answer if self.answer is not None else card.answer,
            tags=self.tags if self.tags is not None else card.tags,
            hint=self.hint if self.hint is not None else card.hint,
            difficulty=Difficulty.NEW,
        )
