"""Axis-aligned box standing in for a host sprite."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Body:
    x: float
    y: float
    width: float
    height: float
    visible: bool = True
    destroyed: bool = False

    @property
    def left(self) -> float:
        return self.x - self.width / 2

    @property
    def right(self) -> float:
        return self.x + self.width / 2

    @property
    def top(self) -> float:
        return self.y - self.height / 2

    @property
    def bottom(self) -> float:
        return self.y + self.height / 2

    def overlaps(self, other: "Body") -> bool:
        if self.destroyed or other.destroyed:
            return False
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )

    def destroy(self) -> None:
        self.destroyed = True
