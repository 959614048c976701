"""Field parsers shared by the per-verb argument parsers.

Each helper raises :class:`~flashdeck.errors.ParseError` with the field's
constraint message, tagged with the verb ``usage`` so the caller can show it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional

from flashdeck.errors import InvalidFieldError, ParseError
from flashdeck.logic.messages import invalid_format
from flashdeck.model.card import (
    ANSWER_CONSTRAINTS,
    HINT_CONSTRAINTS,
    QUESTION_CONSTRAINTS,
    Difficulty,
    is_valid_answer,
    is_valid_hint,
    is_valid_question,
    make_tags,
)

INDEX_PATTERN = re.compile(r"^\d+$")

MESSAGE_INVALID_DIFFICULTY = "Difficulty should be one of: easy, medium, hard"


@dataclass(frozen=True)
class Index:
    """A 1-based position in the displayed card list."""

    one_based: int

    @property
    def zero_based(self) -> int:
        return self.one_based - 1

    def __str__(self) -> str:
        return str(self.one_based)


def parse_index(text: str, usage: str) -> Index:
    """Parse an unsigned integer; range checks happen against the model later."""
    trimmed = text.strip()
    if not INDEX_PATTERN.match(trimmed):
        raise ParseError(invalid_format(usage), usage=usage)
    return Index(int(trimmed))


def parse_question(text: str, usage: Optional[str] = None) -> str:
    trimmed = text.strip()
    if not is_valid_question(trimmed):
        raise ParseError(QUESTION_CONSTRAINTS, usage=usage)
    return trimmed


def parse_answer(text: str, usage: Optional[str] = None) -> str:
    trimmed = text.strip()
    if not is_valid_answer(trimmed):
        raise ParseError(ANSWER_CONSTRAINTS, usage=usage)
    return trimmed


def parse_hint(text: str, usage: Optional[str] = None) -> str:
    trimmed = text.strip()
    if not is_valid_hint(trimmed):
        raise ParseError(HINT_CONSTRAINTS, usage=usage)
    return trimmed


def parse_tags(values: Iterable[str], usage: Optional[str] = None) -> FrozenSet[str]:
    try:
        return make_tags(value.strip() for value in values)
    except InvalidFieldError as exc:
        raise ParseError(str(exc), usage=usage) from exc


def parse_difficulty(text: str, usage: Optional[str] = None) -> Difficulty:
    try:
        difficulty = Difficulty.from_label(text)
    except InvalidFieldError:
        raise ParseError(MESSAGE_INVALID_DIFFICULTY, usage=usage) from None
    if difficulty is Difficulty.NEW:
        raise ParseError(MESSAGE_INVALID_DIFFICULTY, usage=usage)
    return difficulty
