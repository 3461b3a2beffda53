"""Score keeping."""

from dataclasses import dataclass


@dataclass
class ScoreSystem:
    score: int = 0
    bombs_caught: int = 0

    def record_catch(self, points: int) -> None:
        if points < 0:
            raise ValueError("points must be non-negative")
        self.bombs_caught += 1
        self.score += points
