"""Falling bomb entity."""

from __future__ import annotations

from dataclasses import dataclass

from bombcatch.entities.body import Body


@dataclass
class BombPose:
    body: Body
    vy: float = 0.0
    is_exploding: bool = False

    @classmethod
    def spawn(cls, x: float, y: float, width: float, height: float) -> "BombPose":
        return cls(body=Body(x=x, y=y, width=width, height=height))

    def advance(self, elapsed: float, gravity: float, max_speed: float, screen_height: float) -> None:
        self.vy = min(self.vy + gravity * elapsed, max_speed)
        self.body.y = min(self.body.y + self.vy * elapsed, self.ground_y(screen_height))

    def ground_y(self, screen_height: float) -> float:
        return screen_height - self.body.height / 2

    def has_landed(self, screen_height: float) -> bool:
        return self.body.y >= self.ground_y(screen_height)

    def detonate(self) -> None:
        self.is_exploding = True
