from __future__ import annotations

import pytest

from flashdeck.errors import ErrorKind, ParseError
from flashdeck.logic.commands import (
    AddCommand,
    EditCommand,
    ListCommand,
    SetDifficultyCommand,
    SolveCommand,
)
from flashdeck.logic.descriptor import EditCardDescriptor
from flashdeck.logic.parser_util import Index
from flashdeck.logic.parsers import (
    parse_add,
    parse_edit,
    parse_list,
    parse_set_difficulty,
    parse_solve,
)
from flashdeck.model.card import Card, Difficulty
from flashdeck.model.filters import PREDICATE_SHOW_ALL_CARDS, HasAllTags, QuestionStartsWith


# ------------------------------------------------------------------
# list
# ------------------------------------------------------------------
def test_list_without_flags_shows_all() -> None:
    assert parse_list("") == ListCommand((PREDICATE_SHOW_ALL_CARDS,))


def test_list_builds_prefix_and_tag_predicates() -> None:
    command = parse_list(" q/What t/math t/easy")
    assert command == ListCommand(
        (
            PREDICATE_SHOW_ALL_CARDS,
            QuestionStartsWith("What"),
            HasAllTags(frozenset({"math", "easy"})),
        )
    )


def test_list_empty_question_prefix_is_invalid() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_list(" q/")
    assert excinfo.value.kind is ErrorKind.INVALID_ARGUMENTS
    assert ListCommand.MESSAGE_USAGE in str(excinfo.value)


def test_list_rejects_repeated_question_prefix() -> None:
    with pytest.raises(ParseError):
        parse_list(" q/What q/Who")


def test_list_rejects_empty_tag() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_list(" t/")
    assert excinfo.value.kind is ErrorKind.INVALID_ARGUMENTS


# ------------------------------------------------------------------
# edit
# ------------------------------------------------------------------
def test_edit_with_one_field() -> None:
    assert parse_edit(" 1 q/3+3") == EditCommand(Index(1), EditCardDescriptor(question="3+3"))


def test_edit_without_fields_is_rejected() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_edit(" 1")
    assert excinfo.value.kind is ErrorKind.NO_FIELD_SPECIFIED
    assert str(excinfo.value) == EditCommand.MESSAGE_NOT_EDITED


def test_edit_empty_tag_and_hint_clear_them() -> None:
    command = parse_edit(" 2 t/ h/")
    assert command.descriptor == EditCardDescriptor(tags=frozenset(), hint="")
    assert command.descriptor.is_any_field_edited()


@pytest.mark.parametrize("args", [" q/3+3", " -1 q/3+3", " one q/3+3", " 1 q/"])
def test_edit_invalid_arguments(args: str) -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_edit(args)
    assert excinfo.value.kind is ErrorKind.INVALID_ARGUMENTS
    assert excinfo.value.usage == EditCommand.MESSAGE_USAGE


# ------------------------------------------------------------------
# solve
# ------------------------------------------------------------------
def test_solve_takes_one_index() -> None:
    assert parse_solve(" 3") == SolveCommand(Index(3))


def test_solve_zero_parses_and_is_range_checked_later() -> None:
    assert parse_solve(" 0") == SolveCommand(Index(0))


@pytest.mark.parametrize("args", ["", " 1 2", " abc", " 1 q/x", " +1"])
def test_solve_rejects_anything_but_a_single_index(args: str) -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_solve(args)
    assert SolveCommand.MESSAGE_USAGE in str(excinfo.value)


# ------------------------------------------------------------------
# add / set-difficulty
# ------------------------------------------------------------------
def test_add_builds_card() -> None:
    command = parse_add(" q/What is 2+2? a/4 t/math h/count")
    assert command == AddCommand(Card("What is 2+2?", "4", tags={"math"}, hint="count"))


@pytest.mark.parametrize("args", [" q/What", " a/4", " junk q/What a/4", " q/A q/B a/4"])
def test_add_invalid_arguments(args: str) -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_add(args)
    assert excinfo.value.usage == AddCommand.MESSAGE_USAGE


def test_set_difficulty_is_case_insensitive() -> None:
    assert parse_set_difficulty(" 1 d/Easy") == SetDifficultyCommand(Index(1), Difficulty.EASY)


@pytest.mark.parametrize("args", [" 1", " 1 d/new", " 1 d/trivial", " d/easy"])
def test_set_difficulty_invalid(args: str) -> None:
    with pytest.raises(ParseError):
        parse_set_difficulty(args)
