from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from flashdeck.errors import ErrorKind, FlashdeckError


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one command, as shown to the user."""

    feedback: str
    success: bool = True
    error_kind: Optional[ErrorKind] = None
    show_help: bool = False
    exit: bool = False

    @classmethod
    def failure(cls, error: FlashdeckError) -> "CommandResult":
        feedback = str(error)
        usage = getattr(error, "usage", None)
        if usage and usage not in feedback:
            feedback = f"{feedback}\n{usage}"
        return cls(feedback=feedback, success=False, error_kind=error.kind)
