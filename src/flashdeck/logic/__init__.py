"""Command parsing and execution."""

from .commands import Command
from .dispatcher import DeckParser
from .manager import LogicManager
from .result import CommandResult

__all__ = ["Command", "CommandResult", "DeckParser", "LogicManager"]
