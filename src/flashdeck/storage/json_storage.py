"""JSON persistence for the deck, validated through pydantic models."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional, Protocol

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from flashdeck.errors import DataConstraintError, DataLoadingError, InvalidFieldError
from flashdeck.model.card import (
    ANSWER_CONSTRAINTS,
    QUESTION_CONSTRAINTS,
    Card,
    Difficulty,
    is_valid_answer,
    is_valid_question,
)

LOGGER = logging.getLogger(__name__)

MISSING_FIELD_MESSAGE_FORMAT = "Card's {field} field is missing!"
MESSAGE_DUPLICATE_CARD = "Cards list contains duplicate card(s)."


class DeckStorage(Protocol):
    def load_cards(self) -> List[Card]:
        ...

    def save_cards(self, cards: Iterable[Card]) -> None:
        ...


class JsonAdaptedCard(BaseModel):
    """Serialised form of a :class:`Card`."""

    model_config = ConfigDict(extra="ignore")

    question: Optional[str] = None
    answer: Optional[str] = None
    difficulty: str = Difficulty.NEW.value
    tags: List[str] = Field(default_factory=list)
    hint: str = ""
    next_practice_date: Optional[date] = None
    last_practice_date: Optional[date] = None
    solve_count: int = 0

    @classmethod
    def from_card(cls, card: Card) -> "JsonAdaptedCard":
        return cls(
            question=card.question,
            answer=card.answer,
            difficulty=card.difficulty.value,
            tags=card.sorted_tags(),
            hint=card.hint,
            next_practice_date=card.next_practice_date,
            last_practice_date=card.last_practice_date,
            solve_count=card.solve_count,
        )

    def to_model_type(self) -> Card:
        if self.question is None:
            raise DataConstraintError(MISSING_FIELD_MESSAGE_FORMAT.format(field="question"))
        if not is_valid_question(self.question):
            raise DataConstraintError(QUESTION_CONSTRAINTS)
        if self.answer is None:
            raise DataConstraintError(MISSING_FIELD_MESSAGE_FORMAT.format(field="answer"))
        if not is_valid_answer(self.answer):
            raise DataConstraintError(ANSWER_CONSTRAINTS)
        try:
            return Card(
                question=self.question,
                answer=self.answer,
                difficulty=Difficulty.from_label(self.difficulty),
                tags=frozenset(self.tags),
                hint=self.hint,
                next_practice_date=self.next_practice_date,
                last_practice_date=self.last_practice_date,
                solve_count=self.solve_count,
            )
        except InvalidFieldError as exc:
            raise DataConstraintError(str(exc)) from exc


class JsonSerializableDeck(BaseModel):
    cards: List[JsonAdaptedCard] = Field(default_factory=list)

    def to_model_cards(self) -> List[Card]:
        cards: List[Card] = []
        for adapted in self.cards:
            card = adapted.to_model_type()
            if any(existing.is_same_card(card) for existing in cards):
                raise DataConstraintError(MESSAGE_DUPLICATE_CARD)
            cards.append(card)
        return cards


class JsonDeckStorage:
    """Reads and writes the deck as a single JSON document."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load_cards(self) -> List[Card]:
        if not self.path.exists():
            LOGGER.info("Deck file %s not found; starting with no cards", self.path)
            return []
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise DataLoadingError(f"Could not read deck file {self.path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise DataLoadingError(f"Deck file {self.path} must contain a JSON object")
        try:
            deck = JsonSerializableDeck.model_validate(raw)
        except ValidationError as exc:
            raise DataConstraintError(f"Invalid card data in {self.path}: {exc}") from exc
        cards = deck.to_model_cards()
        LOGGER.info("Loaded %d cards from %s", len(cards), self.path)
        return cards

    def save_cards(self, cards: Iterable[Card]) -> None:
        deck = JsonSerializableDeck(cards=[JsonAdaptedCard.from_card(card) for card in cards])
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # A crash mid-write leaves the previous deck file intact.
        handle = tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp", delete=False
        )
        try:
            with handle:
                handle.write(deck.model_dump_json(indent=2) + "\n")
            os.replace(handle.name, self.path)
        except BaseException:
            Path(handle.name).unlink(missing_ok=True)
            raise
        LOGGER.debug("Saved %d cards to %s", len(deck.cards), self.path)
