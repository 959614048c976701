"""Runs one command line end to end: parse, execute, persist."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from flashdeck.config import AppConfig
from flashdeck.errors import DataConstraintError, DataLoadingError, ErrorKind, FlashdeckError
from flashdeck.logic.dispatcher import DeckParser
from flashdeck.logic.messages import MESSAGE_FILE_OPS_ERROR
from flashdeck.logic.result import CommandResult
from flashdeck.model.card import Card
from flashdeck.model.deck import Model
from flashdeck.model.goal import Goal
from flashdeck.storage.json_storage import DeckStorage, JsonDeckStorage

LOGGER = logging.getLogger(__name__)


class LogicManager:
    """Boundary between the command core and its callers.

    Errors never escape :meth:`execute`; they come back as failed
    ``CommandResult`` values. The deck is saved after a command completes and
    only when the collection changed.
    """

    def __init__(
        self,
        model: Model,
        storage: Optional[DeckStorage] = None,
        parser: Optional[DeckParser] = None,
    ) -> None:
        self.model = model
        self._storage = storage
        self._parser = parser or DeckParser()
        self.last_result: Optional[CommandResult] = None

    @classmethod
    def from_config(cls, config: AppConfig) -> "LogicManager":
        """Load the deck named by ``config``; unreadable data starts an empty deck."""
        storage = JsonDeckStorage(config.deck_file)
        try:
            cards = storage.load_cards()
        except (DataConstraintError, DataLoadingError) as exc:
            LOGGER.warning("Data file could not be loaded (%s). Starting with an empty deck.", exc)
            cards = []
        model = Model(cards, goal=Goal(target=config.goal_target))
        return cls(model, storage)

    @property
    def filtered_cards(self) -> Tuple[Card, ...]:
        return self.model.filtered_cards

    def execute(self, command_text: str) -> CommandResult:
        LOGGER.debug("----------------[USER COMMAND][%s]", command_text)
        before = self.model.cards
        try:
            command = self._parser.parse_command(command_text)
            result = command.execute(self.model)
        except FlashdeckError as exc:
            LOGGER.info("Command %r rejected (%s): %s", command_text, exc.kind.value, exc)
            result = CommandResult.failure(exc)
        else:
            if self.model.cards != before:
                result = self._save(result)
        self.last_result = result
        return result

    def _save(self, result: CommandResult) -> CommandResult:
        if self._storage is None:
            return result
        try:
            self._storage.save_cards(self.model.cards)
        except OSError as exc:
            LOGGER.error("Saving the deck failed: %s", exc)
            return CommandResult(
                MESSAGE_FILE_OPS_ERROR.format(error=exc),
                success=False,
                error_kind=ErrorKind.STORAGE,
            )
        return result
