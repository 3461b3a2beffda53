"""Level counter and per-level bomb budget."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass
class LevelSystem:
    bomb_count_for_level: Callable[[int], int]
    level: int = 0
    # Not including the bomb held by the bomber, if any.
    undropped_bomb_count: int = 0

    def has_undropped_bombs(self) -> bool:
        return self.undropped_bomb_count > 0

    def take_bomb(self) -> None:
        if self.undropped_bomb_count <= 0:
            raise ValueError("No undropped bombs left this level")
        self.undropped_bomb_count -= 1

    def advance(self) -> int:
        self.level += 1
        self.undropped_bomb_count = self.bomb_count_for_level(self.level)
        return self.level
