"""Overlap checks between falling bombs and the bucket stack."""

from __future__ import annotations

from dataclasses import dataclass

from bombcatch.entities.body import Body
from bombcatch.entities.bomb import BombPose


@dataclass
class CatchResult:
    caught: list[BombPose]
    uncaught: list[BombPose]


class CatchSystem:
    def resolve(self, bombs: list[BombPose], buckets: list[Body]) -> CatchResult:
        caught: list[BombPose] = []
        uncaught: list[BombPose] = []
        for bomb in bombs:
            if any(bomb.body.overlaps(bucket) for bucket in buckets):
                caught.append(bomb)
            else:
                uncaught.append(bomb)
        return CatchResult(caught=caught, uncaught=uncaught)

    @staticmethod
    def landed(bombs: list[BombPose], screen_height: float) -> bool:
        return any(bomb.has_landed(screen_height) for bomb in bombs)
