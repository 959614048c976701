"""Turns a raw input line into a command."""

from __future__ import annotations

import logging
import re
from typing import Callable, Dict, Optional

from flashdeck.errors import ErrorKind, ParseError
from flashdeck.logic import parsers
from flashdeck.logic.commands import (
    AddCommand,
    ClearCommand,
    Command,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    HelpCommand,
    HintCommand,
    ListCommand,
    PractiseCommand,
    SetDifficultyCommand,
    SolveCommand,
)
from flashdeck.logic.messages import MESSAGE_UNKNOWN_COMMAND, invalid_format

BASIC_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL)

ArgumentParser = Callable[[str], Command]

COMMAND_PARSERS: Dict[str, ArgumentParser] = {
    AddCommand.COMMAND_WORD: parsers.parse_add,
    EditCommand.COMMAND_WORD: parsers.parse_edit,
    DeleteCommand.COMMAND_WORD: parsers.parse_delete,
    ListCommand.COMMAND_WORD: parsers.parse_list,
    PractiseCommand.COMMAND_WORD: parsers.parse_practise,
    SolveCommand.COMMAND_WORD: parsers.parse_solve,
    SetDifficultyCommand.COMMAND_WORD: parsers.parse_set_difficulty,
    HintCommand.COMMAND_WORD: parsers.parse_hint_command,
    ClearCommand.COMMAND_WORD: lambda _args: ClearCommand(),
    ExitCommand.COMMAND_WORD: lambda _args: ExitCommand(),
    HelpCommand.COMMAND_WORD: lambda _args: HelpCommand(),
}


class DeckParser:
    """Splits user input into a command word and arguments and routes it.

    Diagnostics go to the injected ``logger``.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def parse_command(self, user_input: str) -> Command:
        match = BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())
        if match is None:
            raise ParseError(
                invalid_format(HelpCommand.MESSAGE_USAGE),
                kind=ErrorKind.MALFORMED_INPUT,
                usage=HelpCommand.MESSAGE_USAGE,
            )

        command_word = match.group("command_word")
        arguments = match.group("arguments")
        self._logger.debug("Command word: %s; Arguments: %s", command_word, arguments)

        parser = COMMAND_PARSERS.get(command_word)
        if parser is None:
            self._logger.debug("This user input caused a ParseError: %s", user_input)
            raise ParseError(MESSAGE_UNKNOWN_COMMAND, kind=ErrorKind.UNKNOWN_COMMAND)
        return parser(arguments)
