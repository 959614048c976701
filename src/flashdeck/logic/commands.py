"""The command family: one frozen dataclass per verb.

Every command validates against the model completely before it mutates
anything, so a failed command leaves the model untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import ClassVar, Tuple, Union

from flashdeck.errors import DuplicateCardError, IndexOutOfRangeError
from flashdeck.logic.descriptor import EditCardDescriptor
from flashdeck.logic.messages import (
    MESSAGE_DUPLICATE_CARD,
    MESSAGE_INVALID_CARD_DISPLAYED_INDEX,
    format_card,
    format_solve,
)
from flashdeck.logic.parser_util import Index
from flashdeck.logic.result import CommandResult
from flashdeck.logic.syntax import (
    PREFIX_ANSWER,
    PREFIX_DIFFICULTY,
    PREFIX_HINT,
    PREFIX_QUESTION,
    PREFIX_TAG,
)
from flashdeck.model.card import Card, Difficulty
from flashdeck.model.deck import Model
from flashdeck.model.filters import AllOf, CardPredicate

LOGGER = logging.getLogger(__name__)


def _card_at(model: Model, index: Index) -> Card:
    shown = model.filtered_cards
    if index.one_based < 1 or index.one_based > len(shown):
        raise IndexOutOfRangeError(MESSAGE_INVALID_CARD_DISPLAYED_INDEX)
    return shown[index.zero_based]


@dataclass(frozen=True)
class AddCommand:
    COMMAND_WORD: ClassVar[str] = "add"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Adds a card to the Deck.\n"
        f"Parameters: {PREFIX_QUESTION}QUESTION {PREFIX_ANSWER}ANSWER "
        f"[{PREFIX_TAG}TAG]... [{PREFIX_HINT}HINT]\n"
        f"Example: {COMMAND_WORD} {PREFIX_QUESTION}What is 2+2? {PREFIX_ANSWER}4 {PREFIX_TAG}math"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "New card added: {card}"

    card: Card

    def execute(self, model: Model) -> CommandResult:
        if model.has_card(self.card):
            raise DuplicateCardError(MESSAGE_DUPLICATE_CARD)
        to_add = replace(self.card, next_practice_date=model.today())
        model.add_card(to_add)
        LOGGER.info("Added card %r", to_add.question)
        return CommandResult(self.MESSAGE_SUCCESS.format(card=format_card(to_add)))


@dataclass(frozen=True)
class EditCommand:
    COMMAND_WORD: ClassVar[str] = "edit"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Edits the card identified by its index in the displayed card list. "
        "Existing values will be overwritten by the input values.\n"
        f"Parameters: INDEX (must be a positive integer) [{PREFIX_QUESTION}QUESTION] "
        f"[{PREFIX_ANSWER}ANSWER] [{PREFIX_TAG}TAG]... [{PREFIX_HINT}[HINT]]\n"
        f"Example: {COMMAND_WORD} 1 {PREFIX_QUESTION}What is 3+3?"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Edited Card: {card}"
    MESSAGE_NOT_EDITED: ClassVar[str] = "At least one field to edit must be provided."

    index: Index
    descriptor: EditCardDescriptor

    def execute(self, model: Model) -> CommandResult:
        target = _card_at(model, self.index)
        edited = self.descriptor.apply_to(target)
        if not target.is_same_card(edited) and model.has_card(edited):
            raise DuplicateCardError(MESSAGE_DUPLICATE_CARD)
        model.set_card(target, edited)
        LOGGER.info("Edited card #%s", self.index)
        return CommandResult(self.MESSAGE_SUCCESS.format(card=format_card(edited)))


@dataclass(frozen=True)
class DeleteCommand:
    COMMAND_WORD: ClassVar[str] = "delete"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Deletes the card identified by its index in the displayed card list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Deleted Card: {card}"

    index: Index

    def execute(self, model: Model) -> CommandResult:
        target = _card_at(model, self.index)
        model.delete_card(target)
        LOGGER.info("Deleted card #%s", self.index)
        return CommandResult(self.MESSAGE_SUCCESS.format(card=format_card(target)))


@dataclass(frozen=True)
class ListCommand:
    COMMAND_WORD: ClassVar[str] = "list"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Lists the cards whose question starts with the given prefix "
        "and which carry all of the given tags.\n"
        f"Parameters: [{PREFIX_QUESTION}QUESTION_PREFIX] [{PREFIX_TAG}TAG]...\n"
        f"Example: {COMMAND_WORD} {PREFIX_QUESTION}What {PREFIX_TAG}math"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Listed {count} card(s)."

    predicates: Tuple[CardPredicate, ...]

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_card_list(AllOf.of(self.predicates))
        return CommandResult(self.MESSAGE_SUCCESS.format(count=len(model.filtered_cards)))


@dataclass(frozen=True)
class PractiseCommand:
    COMMAND_WORD: ClassVar[str] = "practise"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Shows the question of the card identified by its index "
        "in the displayed card list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )

    index: Index

    def execute(self, model: Model) -> CommandResult:
        card = _card_at(model, self.index)
        lines = [f"Practising card #{self.index}:", f"Question: {card.question}"]
        if card.has_hint:
            lines.append(f"A hint is available: {HintCommand.COMMAND_WORD} {self.index}")
        lines.append(
            f"Rate it with: {SetDifficultyCommand.COMMAND_WORD} {self.index} "
            f"{PREFIX_DIFFICULTY}easy|medium|hard"
        )
        return CommandResult("\n".join(lines))


@dataclass(frozen=True)
class SolveCommand:
    COMMAND_WORD: ClassVar[str] = "solve"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Records a solve of the card identified by its index "
        "in the displayed card list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )

    index: Index

    def execute(self, model: Model) -> CommandResult:
        target = _card_at(model, self.index)
        solved = target.with_solve()
        model.set_card(target, solved)
        model.goal.solved_card()
        LOGGER.info("Solved card #%s (%d solves)", self.index, solved.solve_count)
        return CommandResult(f"{format_solve(solved, self.index.one_based)}\n{model.goal.progress()}")


@dataclass(frozen=True)
class SetDifficultyCommand:
    COMMAND_WORD: ClassVar[str] = "set-difficulty"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Rates the card identified by its index in the displayed card list "
        "and reveals its answer.\n"
        f"Parameters: INDEX (must be a positive integer) {PREFIX_DIFFICULTY}easy|medium|hard\n"
        f"Example: {COMMAND_WORD} 1 {PREFIX_DIFFICULTY}easy"
    )

    index: Index
    difficulty: Difficulty

    def execute(self, model: Model) -> CommandResult:
        target = _card_at(model, self.index)
        rated = replace(target, difficulty=self.difficulty, last_practice_date=model.today())
        model.set_card(target, rated)
        return CommandResult(
            f"Set difficulty of card #{self.index} to {self.difficulty.value}.\n"
            f"Answer: {rated.answer}"
        )


@dataclass(frozen=True)
class HintCommand:
    COMMAND_WORD: ClassVar[str] = "hint"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Shows the hint of the card identified by its index "
        "in the displayed card list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )

    index: Index

    def execute(self, model: Model) -> CommandResult:
        card = _card_at(model, self.index)
        if not card.has_hint:
            return CommandResult(f"Card #{self.index} has no hint.")
        return CommandResult(f"Hint for card #{self.index}: {card.hint}")


@dataclass(frozen=True)
class ClearCommand:
    COMMAND_WORD: ClassVar[str] = "clear"
    MESSAGE_USAGE: ClassVar[str] = f"{COMMAND_WORD}: Deletes every card in the Deck."
    MESSAGE_SUCCESS: ClassVar[str] = "Deck has been cleared!"

    def execute(self, model: Model) -> CommandResult:
        model.clear()
        LOGGER.info("Deck cleared")
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class ExitCommand:
    COMMAND_WORD: ClassVar[str] = "exit"
    MESSAGE_USAGE: ClassVar[str] = f"{COMMAND_WORD}: Exits the program."
    MESSAGE_EXIT_ACKNOWLEDGEMENT: ClassVar[str] = "Exiting Deck as requested ..."

    def execute(self, model: Model) -> CommandResult:
        return CommandResult(self.MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True)


@dataclass(frozen=True)
class HelpCommand:
    COMMAND_WORD: ClassVar[str] = "help"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Shows program usage instructions.\nExample: {COMMAND_WORD}"
    )

    def execute(self, model: Model) -> CommandResult:
        usages = "\n\n".join(command.MESSAGE_USAGE for command in COMMAND_TYPES)
        return CommandResult(usages, show_help=True)


Command = Union[
    AddCommand,
    EditCommand,
    DeleteCommand,
    ListCommand,
    PractiseCommand,
    SolveCommand,
    SetDifficultyCommand,
    HintCommand,
    ClearCommand,
    ExitCommand,
    HelpCommand,
]

COMMAND_TYPES = (
    AddCommand,
    EditCommand,
    DeleteCommand,
    ListCommand,
    PractiseCommand,
    SolveCommand,
    SetDifficultyCommand,
    HintCommand,
    ClearCommand,
    ExitCommand,
    HelpCommand,
)
