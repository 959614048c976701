"""Card value object and the validity rules for its fields."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import FrozenSet, Iterable, Optional

from flashdeck.errors import InvalidFieldError

MAX_TEXT_LENGTH = 500
MAX_TAG_LENGTH = 30

TAG_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

QUESTION_CONSTRAINTS = (
    f"Questions should not be blank and should be at most {MAX_TEXT_LENGTH} characters long."
)
ANSWER_CONSTRAINTS = (
    f"Answers should not be blank and should be at most {MAX_TEXT_LENGTH} characters long."
)
HINT_CONSTRAINTS = f"Hints should be at most {MAX_TEXT_LENGTH} characters long."
TAG_CONSTRAINTS = (
    f"Tags should be 1 to {MAX_TAG_LENGTH} characters of letters, digits, '-' or '_'."
)
SOLVE_COUNT_CONSTRAINTS = "Solve count should be a non-negative integer."


class Difficulty(str, Enum):
    NEW = "NEW"
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"

    @classmethod
    def from_label(cls, label: str) -> "Difficulty":
        try:
            return cls(label.strip().upper())
        except ValueError:
            raise InvalidFieldError(
                "Difficulty should be one of: " + ", ".join(member.value for member in cls)
            ) from None


def is_valid_text(value: object) -> bool:
    return isinstance(value, str) and bool(value.strip()) and len(value) <= MAX_TEXT_LENGTH


def is_valid_question(value: object) -> bool:
    return is_valid_text(value)


def is_valid_answer(value: object) -> bool:
    return is_valid_text(value)


def is_valid_hint(value: object) -> bool:
    return isinstance(value, str) and len(value) <= MAX_TEXT_LENGTH


def is_valid_tag(value: object) -> bool:
    return (
        isinstance(value, str)
        and 0 < len(value) <= MAX_TAG_LENGTH
        and TAG_PATTERN.match(value) is not None
    )


def make_tags(values: Iterable[str]) -> FrozenSet[str]:
    tags = frozenset(values)
    for tag in tags:
        if not is_valid_tag(tag):
            raise InvalidFieldError(TAG_CONSTRAINTS)
    return tags


def _render_date(value: Optional[date]) -> str:
    return value.isoformat() if value is not None else "never"


@dataclass(frozen=True)
class Card:
    """A single flashcard.

    Instances are immutable; edits and solves build a replacement card. Full
    equality covers every field, while :meth:`is_same_card` only looks at the
    question and answer and is what duplicate detection uses.
    """

    question: str
    answer: str
    difficulty: Difficulty = Difficulty.NEW
    tags: FrozenSet[str] = field(default_factory=frozenset)
    hint: str = ""
    next_practice_date: Optional[date] = None
    last_practice_date: Optional[date] = None
    solve_count: int = 0

    def __post_init__(self) -> None:
        if not is_valid_question(self.question):
            raise InvalidFieldError(QUESTION_CONSTRAINTS)
        if not is_valid_answer(self.answer):
            raise InvalidFieldError(ANSWER_CONSTRAINTS)
        if not is_valid_hint(self.hint):
            raise InvalidFieldError(HINT_CONSTRAINTS)
        if not isinstance(self.difficulty, Difficulty):
            object.__setattr__(self, "difficulty", Difficulty.from_label(str(self.difficulty)))
        # Accept any iterable of tags but always store a frozenset.
        object.__setattr__(self, "tags", make_tags(self.tags))
        if isinstance(self.solve_count, bool) or not isinstance(self.solve_count, int) or self.solve_count < 0:
            raise InvalidFieldError(SOLVE_COUNT_CONSTRAINTS)

    def is_same_card(self, other: Optional["Card"]) -> bool:
        if other is self:
            return True
        return (
            other is not None
            and other.question == self.question
            and other.answer == self.answer
        )

    def with_solve(self) -> "Card":
        """Return a copy of this card with one more recorded solve."""
        return replace(self, solve_count=self.solve_count + 1)

    @property
    def has_hint(self) -> bool:
        return bool(self.hint.strip())

    def sorted_tags(self) -> list[str]:
        return sorted(self.tags, key=str.lower)

    def describe(self) -> str:
        parts = [
            f"Question: {self.question}",
            f"Answer: {self.answer}",
            f"Difficulty: {self.difficulty.value}",
            f"Solve count: {self.solve_count}",
            f"Next practice: {_render_date(self.next_practice_date)}",
            f"Last practice: {_render_date(self.last_practice_date)}",
        ]
        if self.tags:
            parts.append("Tags: " + "".join(f"[{tag}]" for tag in self.sorted_tags()))
        if self.has_hint:
            parts.append(f"Hint: {self.hint}")
        return "; ".join(parts)
