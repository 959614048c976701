from __future__ import annotations

import json
from pathlib import Path
from typing import List

from conftest import make_model

from flashdeck.config import AppConfig
from flashdeck.errors import ErrorKind
from flashdeck.logic.commands import AddCommand, ListCommand
from flashdeck.logic.manager import LogicManager
from flashdeck.model.card import Card


class _RecordingStorage:
    def __init__(self, fail: bool = False) -> None:
        self.saves: List[tuple] = []
        self.fail = fail

    def load_cards(self) -> List[Card]:
        return []

    def save_cards(self, cards) -> None:
        if self.fail:
            raise OSError("disk full")
        self.saves.append(tuple(cards))


def test_mutation_is_saved_once(sample_cards) -> None:
    storage = _RecordingStorage()
    logic = LogicManager(make_model(sample_cards), storage)

    result = logic.execute("solve 1")

    assert result.success
    assert len(storage.saves) == 1
    assert storage.saves[0][0].solve_count == 1
    assert logic.last_result is result


def test_read_only_commands_are_not_saved(sample_cards) -> None:
    storage = _RecordingStorage()
    logic = LogicManager(make_model(sample_cards), storage)

    logic.execute("list t/math")
    logic.execute("hint 1")
    logic.execute("practise 1")

    assert storage.saves == []
    assert len(logic.filtered_cards) == 1


def test_errors_become_failed_results(sample_cards) -> None:
    storage = _RecordingStorage()
    logic = LogicManager(make_model(sample_cards), storage)

    result = logic.execute("solve 99")

    assert not result.success
    assert result.error_kind is ErrorKind.INVALID_DISPLAYED_INDEX
    assert result.feedback == "The card index provided is invalid"
    assert storage.saves == []


def test_invalid_arguments_carry_usage() -> None:
    logic = LogicManager(make_model([]))

    listed = logic.execute("list q/")
    assert listed.error_kind is ErrorKind.INVALID_ARGUMENTS
    assert ListCommand.MESSAGE_USAGE in listed.feedback

    added = logic.execute("add q/   a/4")
    assert added.error_kind is ErrorKind.INVALID_ARGUMENTS
    assert added.feedback.startswith("Questions should not be blank")
    assert AddCommand.MESSAGE_USAGE in added.feedback


def test_unknown_and_malformed_input() -> None:
    logic = LogicManager(make_model([]))
    assert logic.execute("   ").error_kind is ErrorKind.MALFORMED_INPUT
    assert logic.execute("dance").error_kind is ErrorKind.UNKNOWN_COMMAND


def test_failed_save_is_reported(sample_cards) -> None:
    logic = LogicManager(make_model(sample_cards), _RecordingStorage(fail=True))

    result = logic.execute("clear")

    assert not result.success
    assert result.error_kind is ErrorKind.STORAGE
    assert "disk full" in result.feedback
    assert logic.model.cards == ()


def test_from_config_loads_deck(tmp_path: Path) -> None:
    deck = tmp_path / "deck.json"
    deck.write_text(json.dumps({"cards": [{"question": "Q", "answer": "A"}]}), encoding="utf-8")

    logic = LogicManager.from_config(AppConfig(deck_file=deck, goal_target=3))

    assert logic.model.cards == (Card("Q", "A"),)
    assert logic.model.goal.target == 3
    logic.execute("add q/Q2 a/A2")
    saved = json.loads(deck.read_text(encoding="utf-8"))
    assert [card["question"] for card in saved["cards"]] == ["Q", "Q2"]


def test_from_config_starts_empty_on_bad_data(tmp_path: Path) -> None:
    deck = tmp_path / "deck.json"
    deck.write_text(json.dumps({"cards": [{"answer": "A"}]}), encoding="utf-8")

    logic = LogicManager.from_config(AppConfig(deck_file=deck))

    assert logic.model.cards == ()
