"""Random pacing targets for the bomber."""

from __future__ import annotations

from dataclasses import dataclass, field
import random

from bombcatch.entities.body import Body


@dataclass
class BomberPilot:
    screen_width: float
    rng: random.Random = field(default_factory=random.Random)

    def next_target_x(self, bomber: Body) -> float:
        """Pick a target at least two bomber widths away on the far side.

        The proposal is drawn from a band narrowed by ``2 * margin``; proposals
        to the right of the bomber are shifted right by that amount so the
        bomber never settles next to where it already is.
        """
        margin = 2 * bomber.width
        proposal = bomber.width / 2 + self.rng.random() * (self.screen_width - bomber.width - 2 * margin)
        adjustment = 0.0 if proposal <= bomber.x else 2 * margin
        return proposal + adjustment
