from __future__ import annotations

from datetime import date
from typing import List

import pytest

from flashdeck.logic.dispatcher import DeckParser
from flashdeck.model.card import Card, Difficulty
from flashdeck.model.deck import Model
from flashdeck.model.goal import Goal

TODAY = date(2026, 10, 19)


def fixed_clock() -> date:
    return TODAY


def make_model(cards: List[Card], goal_target: int = 5) -> Model:
    return Model(cards, goal=Goal(target=goal_target), clock=fixed_clock)


def run(model: Model, line: str):
    return DeckParser().parse_command(line).execute(model)


@pytest.fixture
def sample_cards() -> List[Card]:
    return [
        Card("What is 2+2?", "4", tags={"math"}, next_practice_date=date(2026, 10, 1)),
        Card(
            "What is the capital of France?",
            "Paris",
            difficulty=Difficulty.EASY,
            tags={"geo", "europe"},
            hint="City of light",
            last_practice_date=date(2026, 10, 10),
            solve_count=3,
        ),
        Card("What is H2O?", "Water", tags={"science"}),
    ]


@pytest.fixture
def model(sample_cards: List[Card]) -> Model:
    return make_model(sample_cards)
