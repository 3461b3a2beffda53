"""Deterministic headless player used for simulations."""

from __future__ import annotations

from dataclasses import dataclass

from bombcatch.game import BombCatchGame


@dataclass
class Autopilot:
    """Chases the lowest bomb on screen, or shadows the bomber when none are falling."""

    dead_zone: float = 2.0
    fast_distance: float = 24.0

    def target_x(self, game: BombCatchGame) -> float:
        bombs = [bomb for bomb in game.bombs_on_screen() if not bomb.is_exploding]
        if not bombs:
            return game.bomber.body.x
        return max(bombs, key=lambda bomb: bomb.body.y).body.x

    def steer(self, game: BombCatchGame) -> None:
        offset = self.target_x(game) - game.player.paddle.x
        if abs(offset) <= self.dead_zone:
            game.set_controls(left=False, right=False, fast=False)
            return
        game.set_controls(left=offset < 0, right=offset > 0, fast=abs(offset) > self.fast_distance)


def run_simulation(
    game: BombCatchGame,
    fps: int = 60,
    max_seconds: float = 120.0,
    pilot: Autopilot | None = None,
) -> dict[str, int | str | bool]:
    if fps <= 0:
        raise ValueError("fps must be positive")
    if max_seconds <= 0:
        raise ValueError("max_seconds must be positive")

    pilot = pilot or Autopilot()
    start = game.time_updated
    frame = 0
    now = start
    while not game.is_over and now - start < max_seconds:
        frame += 1
        now = start + frame / fps
        pilot.steer(game)
        game.update(now)

    summary = game.snapshot()
    summary["seconds"] = round(now - start, 3)
    return summary
