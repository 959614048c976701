"""FastAPI service that accepts command lines and exposes the displayed deck."""

from __future__ import annotations

import logging
import threading
from typing import List, Optional

from fastapi import Depends, FastAPI
from pydantic import BaseModel, Field

from flashdeck.config import load_config
from flashdeck.logic.manager import LogicManager
from flashdeck.model.card import Card

LOGGER = logging.getLogger(__name__)


class CommandRequest(BaseModel):
    """Incoming payload for the command endpoint."""

    input: str = Field(..., description="One command line, e.g. 'solve 1'.")


class CardModel(BaseModel):
    """Serialized card returned to clients."""

    question: str
    answer: str
    difficulty: str
    tags: List[str]
    hint: str
    next_practice_date: Optional[str]
    last_practice_date: Optional[str]
    solve_count: int


class CommandResponse(BaseModel):
    feedback: str
    success: bool
    error_kind: Optional[str] = None
    show_help: bool = False
    exit: bool = False
    cards: List[CardModel]


class CardsResponse(BaseModel):
    cards: List[CardModel]


_LOGIC: Optional[LogicManager] = None
_LOCK = threading.Lock()
_INIT_LOCK = threading.Lock()


def get_logic() -> LogicManager:
    global _LOGIC
    # Sync dependencies run in a threadpool; build the manager exactly once.
    with _INIT_LOCK:
        if _LOGIC is None:
            _LOGIC = LogicManager.from_config(load_config())
            LOGGER.info("Loaded deck with %d cards", len(_LOGIC.model.cards))
        return _LOGIC


app = FastAPI(title="flashdeck", version="0.1.0")


@app.post("/commands", response_model=CommandResponse)
def run_command(
    payload: CommandRequest,
    logic: LogicManager = Depends(get_logic),
) -> CommandResponse:
    # One command at a time against the shared model.
    with _LOCK:
        result = logic.execute(payload.input)
        cards = [_serialize_card(card) for card in logic.filtered_cards]
    return CommandResponse(
        feedback=result.feedback,
        success=result.success,
        error_kind=result.error_kind.value if result.error_kind else None,
        show_help=result.show_help,
        exit=result.exit,
        cards=cards,
    )


@app.get("/cards", response_model=CardsResponse)
def list_cards(
    logic: LogicManager = Depends(get_logic),
) -> CardsResponse:
    with _LOCK:
        cards = [_serialize_card(card) for card in logic.filtered_cards]
    return CardsResponse(cards=cards)


def _serialize_card(card: Card) -> CardModel:
    return CardModel(
        question=card.question,
        answer=card.answer,
        difficulty=card.difficulty.value,
        tags=card.sorted_tags(),
        hint=card.hint,
        next_practice_date=card.next_practice_date.isoformat() if card.next_practice_date else None,
        last_practice_date=card.last_practice_date.isoformat() if card.last_practice_date else None,
        solve_count=card.solve_count,
    )
