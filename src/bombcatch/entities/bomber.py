"""Bomber entity pacing along the top of the screen."""

from __future__ import annotations

from dataclasses import dataclass

from bombcatch.entities.body import Body


@dataclass
class BomberPose:
    body: Body
    is_holding_bomb: bool = False

    @classmethod
    def spawn(cls, screen_width: float, y: float, width: float, height: float) -> "BomberPose":
        return cls(body=Body(x=screen_width / 3, y=y, width=width, height=height))

    def move_toward(self, target_x: float, speed: float, elapsed: float) -> None:
        step = speed * elapsed
        if self.body.x < target_x:
            self.body.x = min(self.body.x + step, target_x)
        else:
            self.body.x = max(target_x, self.body.x - step)

    def is_at(self, target_x: float) -> bool:
        return abs(self.body.x - target_x) < 1
