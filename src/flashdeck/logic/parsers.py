"""Per-verb argument parsers.

Each ``parse_*`` function receives the argument tail exactly as typed after
the command word and returns a command, or raises ``ParseError``.
"""

from __future__ import annotations

from typing import FrozenSet, List, Optional

from flashdeck.errors import ErrorKind, ParseError
from flashdeck.logic.commands import (
    AddCommand,
    DeleteCommand,
    EditCommand,
    HintCommand,
    ListCommand,
    PractiseCommand,
    SetDifficultyCommand,
    SolveCommand,
)
from flashdeck.logic.descriptor import EditCardDescriptor
from flashdeck.logic.messages import invalid_format
from flashdeck.logic.parser_util import (
    parse_answer,
    parse_difficulty,
    parse_hint,
    parse_index,
    parse_question,
    parse_tags,
)
from flashdeck.logic.syntax import (
    PREFIX_ANSWER,
    PREFIX_DIFFICULTY,
    PREFIX_HINT,
    PREFIX_QUESTION,
    PREFIX_TAG,
)
from flashdeck.logic.tokenizer import tokenize
from flashdeck.model.card import Card
from flashdeck.model.filters import (
    PREDICATE_SHOW_ALL_CARDS,
    CardPredicate,
    HasAllTags,
    QuestionStartsWith,
)


def parse_add(args: str) -> AddCommand:
    usage = AddCommand.MESSAGE_USAGE
    tokens = tokenize(args, PREFIX_QUESTION, PREFIX_ANSWER, PREFIX_TAG, PREFIX_HINT)
    if tokens.preamble or not (tokens.has(PREFIX_QUESTION) and tokens.has(PREFIX_ANSWER)):
        raise ParseError(invalid_format(usage), usage=usage)
    tokens.verify_no_duplicate_prefixes_for(PREFIX_QUESTION, PREFIX_ANSWER, PREFIX_HINT, usage=usage)

    hint = tokens.get_value(PREFIX_HINT)
    card = Card(
        question=parse_question(tokens.get_value(PREFIX_QUESTION), usage),
        answer=parse_answer(tokens.get_value(PREFIX_ANSWER), usage),
        tags=parse_tags(tokens.get_all_values(PREFIX_TAG), usage),
        hint=parse_hint(hint, usage) if hint is not None else "",
    )
    return AddCommand(card)


def parse_edit(args: str) -> EditCommand:
    usage = EditCommand.MESSAGE_USAGE
    tokens = tokenize(args, PREFIX_QUESTION, PREFIX_ANSWER, PREFIX_TAG, PREFIX_HINT)
    index = parse_index(tokens.preamble, usage)
    tokens.verify_no_duplicate_prefixes_for(PREFIX_QUESTION, PREFIX_ANSWER, PREFIX_HINT, usage=usage)

    question = tokens.get_value(PREFIX_QUESTION)
    answer = tokens.get_value(PREFIX_ANSWER)
    hint = tokens.get_value(PREFIX_HINT)
    tag_values = tokens.get_all_values(PREFIX_TAG)

    descriptor = EditCardDescriptor(
        question=parse_question(question, usage) if question is not None else None,
        answer=parse_answer(answer, usage) if answer is not None else None,
        tags=_parse_tags_for_edit(tag_values, usage),
        hint=parse_hint(hint, usage) if hint is not None else None,
    )
    if not descriptor.is_any_field_edited():
        raise ParseError(EditCommand.MESSAGE_NOT_EDITED, kind=ErrorKind.NO_FIELD_SPECIFIED, usage=usage)
    return EditCommand(index, descriptor)


def _parse_tags_for_edit(values: List[str], usage: str) -> Optional[FrozenSet[str]]:
    if not values:
        return None
    # A lone empty ``t/`` clears every tag.
    if values == [""]:
        return frozenset()
    return parse_tags(values, usage)


def parse_list(args: str) -> ListCommand:
    usage = ListCommand.MESSAGE_USAGE
    tokens = tokenize(args, PREFIX_QUESTION, PREFIX_TAG)
    tokens.verify_no_duplicate_prefixes_for(PREFIX_QUESTION, usage=usage)

    predicates: List[CardPredicate] = [PREDICATE_SHOW_ALL_CARDS]
    prefix = tokens.get_value(PREFIX_QUESTION)
    if prefix is not None:
        if not prefix:
            raise ParseError(invalid_format(usage), usage=usage)
        predicates.append(QuestionStartsWith(prefix))

    tag_values = tokens.get_all_values(PREFIX_TAG)
    if tag_values:
        predicates.append(HasAllTags(parse_tags(tag_values, usage)))
    return ListCommand(tuple(predicates))


def parse_delete(args: str) -> DeleteCommand:
    return DeleteCommand(parse_index(args, DeleteCommand.MESSAGE_USAGE))


def parse_practise(args: str) -> PractiseCommand:
    return PractiseCommand(parse_index(args, PractiseCommand.MESSAGE_USAGE))


def parse_solve(args: str) -> SolveCommand:
    return SolveCommand(parse_index(args, SolveCommand.MESSAGE_USAGE))


def parse_hint_command(args: str) -> HintCommand:
    return HintCommand(parse_index(args, HintCommand.MESSAGE_USAGE))


def parse_set_difficulty(args: str) -> SetDifficultyCommand:
    usage = SetDifficultyCommand.MESSAGE_USAGE
    tokens = tokenize(args, PREFIX_DIFFICULTY)
    index = parse_index(tokens.preamble, usage)
    if not tokens.has(PREFIX_DIFFICULTY):
        raise ParseError(invalid_format(usage), usage=usage)
    tokens.verify_no_duplicate_prefixes_for(PREFIX_DIFFICULTY, usage=usage)
    return SetDifficultyCommand(index, parse_difficulty(tokens.get_value(PREFIX_DIFFICULTY), usage))
