from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Goal:
    """Session counter of solved cards against a target."""

    target: int = 10
    solved: int = 0

    def solved_card(self) -> None:
        self.solved += 1

    @property
    def is_reached(self) -> bool:
        return self.solved >= self.target

    def progress(self) -> str:
        if self.is_reached:
            return f"Goal reached: {self.solved}/{self.target} cards solved this session."
        remaining = self.target - self.solved
        return f"Goal progress: {self.solved}/{self.target} cards solved, {remaining} to go."
