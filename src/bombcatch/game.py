"""Per-frame game state and update loop for Bomb Catch."""

from __future__ import annotations

import logging
import math
import random

from bombcatch.config import GameConfig, load_game_config
from bombcatch.core.event_bus import EventBus
from bombcatch.core.phase import (
    BombingPhase,
    ExplodingPhase,
    LostPhase,
    Phase,
    PhaseKind,
    PreppingPhase,
)
from bombcatch.entities.bomb import BombPose
from bombcatch.entities.bomber import BomberPose
from bombcatch.entities.player import PlayerPose
from bombcatch.systems.bomber_pilot import BomberPilot
from bombcatch.systems.catch_system import CatchSystem
from bombcatch.systems.level_system import LevelSystem
from bombcatch.systems.score_system import ScoreSystem


logger = logging.getLogger(__name__)


class BombCatchGame:
    """Engine-agnostic game model; the host calls ``update(now)`` once per frame.

    All times are absolute seconds on the host's clock. ``phase_end_time`` is
    shared by every timed transition: the prepping pause, bomb pickup and
    drop, and each explosion window.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        now: float = 0.0,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config or load_game_config()
        self.events = EventBus()

        self.phase_end_time = 0.0
        self.time_updated = now

        self.player = PlayerPose.spawn(self.config)
        layout = self.config.layout
        self.bomber = BomberPose.spawn(
            screen_width=self.config.screen.width,
            y=layout.bomber_y,
            width=layout.bomber_size.width,
            height=layout.bomber_size.height,
        )
        self.levels = LevelSystem(bomb_count_for_level=self.config.bomb_count_for_level)
        self.score = ScoreSystem()
        self.pilot = BomberPilot(screen_width=self.config.screen.width, rng=rng or random.Random())
        self.catcher = CatchSystem()

        self.phase: Phase = BombingPhase(bomber_target_x=self.bomber.body.x)
        self._advance_level_if_needed(now)

    # ------------------------------------------------------------------
    @property
    def level(self) -> int:
        return self.levels.level

    @property
    def undropped_bomb_count(self) -> int:
        return self.levels.undropped_bomb_count

    @property
    def is_over(self) -> bool:
        return self.phase.kind == PhaseKind.LOST

    def bombs_on_screen(self) -> list[BombPose]:
        if isinstance(self.phase, BombingPhase):
            return list(self.phase.bombs)
        if isinstance(self.phase, ExplodingPhase):
            return [self.phase.explosion, *self.phase.bombs]
        return []

    def set_controls(self, left: bool, right: bool, fast: bool) -> None:
        physics = self.config.physics
        speed = physics.paddle_speed_fast if fast else physics.paddle_speed_slow
        if left:
            self.player.vx_target = -speed
        elif right:
            self.player.vx_target = speed
        else:
            self.player.vx_target = 0.0

    def update(self, now: float) -> None:
        if now < self.time_updated:
            raise ValueError(f"update time went backwards: {now} < {self.time_updated}")

        elapsed = now - self.time_updated
        self._advance_player_pose(elapsed)
        self._advance_bomber_position(elapsed)
        self._advance_bomb_poses(elapsed)
        self._catch_bombs(now)
        self._start_exploding_if_needed(now)
        self._continue_exploding_if_needed(now)
        self._pick_up_bomb_if_needed(now)
        self._drop_bomb_if_needed(now)
        self._finish_prepping_if_needed(now)
        self._advance_level_if_needed(now)
        self.time_updated = now

    def snapshot(self) -> dict[str, int | str | bool]:
        return {
            "phase": self.phase.kind.value,
            "level": self.level,
            "score": self.score.score,
            "bombs_caught": self.score.bombs_caught,
            "buckets": self.player.bucket_count,
            "bombs_on_screen": len(self.bombs_on_screen()),
            "undropped_bombs": self.undropped_bomb_count,
            "bomber_holding_bomb": self.bomber.is_holding_bomb,
            "game_over": self.is_over,
        }

    # ------------------------------------------------------------------
    def _enter_phase(self, phase: Phase, now: float, end_time: float) -> None:
        previous = self.phase.kind
        self.phase = phase
        self.phase_end_time = end_time
        logger.debug("phase %s -> %s at %.3f (ends %.3f)", previous.value, phase.kind.value, now, end_time)
        self.events.emit("phase_changed", now, phase=phase.kind.value, previous=previous.value)

    def _advance_player_pose(self, elapsed: float) -> None:
        if self.phase.kind not in {PhaseKind.PREPPING, PhaseKind.BOMBING}:
            return
        self.player.advance(elapsed, self.config.screen.width)

    def _advance_bomber_position(self, elapsed: float) -> None:
        if not isinstance(self.phase, BombingPhase):
            return
        if not self.levels.has_undropped_bombs() and not self.bomber.is_holding_bomb:
            return

        if self.bomber.is_at(self.phase.bomber_target_x):
            self.phase.bomber_target_x = self.pilot.next_target_x(self.bomber.body)
        else:
            self.bomber.move_toward(self.phase.bomber_target_x, self.config.physics.bomber_speed, elapsed)

    def _advance_bomb_poses(self, elapsed: float) -> None:
        if not isinstance(self.phase, BombingPhase):
            return
        physics = self.config.physics
        for bomb in self.phase.bombs:
            bomb.advance(elapsed, physics.gravity, physics.bomb_max_speed, self.config.screen.height)

    def _catch_bombs(self, now: float) -> None:
        if not isinstance(self.phase, BombingPhase):
            return

        result = self.catcher.resolve(self.phase.bombs, self.player.buckets)
        self.phase.bombs = result.uncaught

        for bomb in result.caught:
            bomb.body.destroy()
            self.score.record_catch(self.config.scoring.points_per_catch)
            self.events.emit(
                "bomb_caught",
                now,
                x=bomb.body.x,
                points=self.config.scoring.points_per_catch,
                score=self.score.score,
            )

    def _start_exploding_if_needed(self, now: float) -> None:
        if not isinstance(self.phase, BombingPhase):
            return
        if not self.catcher.landed(self.phase.bombs, self.config.screen.height):
            return

        self.player.lose_bucket()
        logger.info("bomb hit the ground, %d bucket(s) left", self.player.bucket_count)
        self.events.emit("bucket_lost", now, buckets_left=self.player.bucket_count)

        # Oldest bomb explodes first.
        exploding = ExplodingPhase.from_backlog(list(reversed(self.phase.bombs)))
        self._enter_phase(exploding, now, now + self.config.timing.single_explosion_duration)
        self._emit_explosion(now, exploding)

    def _continue_exploding_if_needed(self, now: float) -> None:
        if now < self.phase_end_time or not isinstance(self.phase, ExplodingPhase):
            return

        self.phase.explosion.body.destroy()

        if self.phase.bombs:
            exploding = ExplodingPhase.from_backlog(self.phase.bombs)
            self._enter_phase(exploding, now, now + self.config.timing.single_explosion_duration)
            self._emit_explosion(now, exploding)
            return

        if self.player.buckets:
            self._enter_phase(PreppingPhase(), now, now + self.config.timing.prepping_duration)
            return

        self._enter_phase(LostPhase(), now, math.inf)
        logger.info("game over at level %d with score %d", self.level, self.score.score)
        self.events.emit("game_over", now, level=self.level, score=self.score.score)

    def _emit_explosion(self, now: float, phase: ExplodingPhase) -> None:
        body = phase.explosion.body
        self.events.emit("explosion", now, x=body.x, y=body.y, remaining=len(phase.bombs))

    def _pick_up_bomb_if_needed(self, now: float) -> None:
        if (
            now < self.phase_end_time
            or self.bomber.is_holding_bomb
            or not self.levels.has_undropped_bombs()
            or not isinstance(self.phase, BombingPhase)
        ):
            return

        self.levels.take_bomb()
        self.bomber.is_holding_bomb = True
        self.phase_end_time = now + self.config.timing.bomb_holding_duration
        self.events.emit("bomb_picked_up", now, undropped_bombs=self.undropped_bomb_count)

    def _drop_bomb_if_needed(self, now: float) -> None:
        if (
            now < self.phase_end_time
            or not self.bomber.is_holding_bomb
            or not isinstance(self.phase, BombingPhase)
        ):
            return

        layout = self.config.layout
        self.bomber.is_holding_bomb = False
        bomb = BombPose.spawn(
            x=self.bomber.body.x,
            y=self.bomber.body.y + layout.bomb_drop_offset,
            width=layout.bomb_size.width,
            height=layout.bomb_size.height,
        )
        self.phase.bombs.append(bomb)
        self.phase_end_time = now + self.config.timing.reloading_duration
        self.events.emit("bomb_dropped", now, x=bomb.body.x, y=bomb.body.y)

    def _finish_prepping_if_needed(self, now: float) -> None:
        if now < self.phase_end_time or self.phase.kind != PhaseKind.PREPPING:
            return

        timing = self.config.timing
        wait = timing.bomb_holding_duration if self.bomber.is_holding_bomb else timing.reloading_duration
        self._enter_phase(BombingPhase(bomber_target_x=self.bomber.body.x), now, now + wait)

    def _advance_level_if_needed(self, now: float) -> None:
        if (
            now < self.phase_end_time
            or not isinstance(self.phase, BombingPhase)
            or self.phase.bombs
            or self.bomber.is_holding_bomb
            or self.levels.has_undropped_bombs()
        ):
            return

        level = self.levels.advance()
        self._enter_phase(PreppingPhase(), now, now + self.config.timing.prepping_duration)
        logger.info("level %d: %d bombs", level, self.undropped_bomb_count)
        self.events.emit("level_start", now, level=level, bombs=self.undropped_bomb_count)
