"""Phase definitions for the update state machine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union

from bombcatch.entities.bomb import BombPose


class PhaseKind(str, Enum):
    PREPPING = "prepping"
    BOMBING = "bombing"
    EXPLODING = "exploding"
    LOST = "lost"


@dataclass
class PreppingPhase:
    """Pause before the bomber starts dropping the next batch."""

    kind: ClassVar[PhaseKind] = PhaseKind.PREPPING


@dataclass
class BombingPhase:
    kind: ClassVar[PhaseKind] = PhaseKind.BOMBING

    bomber_target_x: float
    bombs: list[BombPose] = field(default_factory=list)


@dataclass
class ExplodingPhase:
    """One bomb detonates per explosion window.

    ``bombs`` is the backlog, ordered so that ``pop()`` yields the next bomb
    to explode.
    """

    kind: ClassVar[PhaseKind] = PhaseKind.EXPLODING

    explosion: BombPose
    bombs: list[BombPose] = field(default_factory=list)

    @classmethod
    def from_backlog(cls, backlog: list[BombPose]) -> "ExplodingPhase":
        if not backlog:
            raise ValueError("Exploding phase requires at least one bomb")
        explosion = backlog.pop()
        explosion.detonate()
        return cls(explosion=explosion, bombs=backlog)


@dataclass
class LostPhase:
    kind: ClassVar[PhaseKind] = PhaseKind.LOST


Phase = Union[PreppingPhase, BombingPhase, ExplodingPhase, LostPhase]
