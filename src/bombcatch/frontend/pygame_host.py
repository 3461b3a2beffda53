"""pygame host runtime: window, clock, keyboard and drawing.

The game model never touches pygame. This host feeds it the clock and the
three logical buttons (left, right, A) and draws every body as a plain shape
on a low-resolution surface that is scaled up to the window.
"""

from __future__ import annotations

import logging
import random

import pygame

from bombcatch.config import GameConfig
from bombcatch.core.phase import PhaseKind
from bombcatch.entities.body import Body
from bombcatch.game import BombCatchGame


logger = logging.getLogger(__name__)

SKY = (92, 148, 252)
GROUND = (60, 120, 60)
BOMBER = (40, 40, 40)
BOMB = (20, 20, 20)
FUSE = (255, 208, 0)
EXPLOSION = (255, 160, 40)
BUCKET = (30, 90, 200)
BUCKET_RIM = (200, 220, 255)
TEXT = (245, 245, 245)
FLASH = (230, 60, 60)

LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
FAST_KEYS = (pygame.K_SPACE, pygame.K_z)
RESTART_KEYS = (pygame.K_RETURN, pygame.K_r)

FLASH_SECONDS = 0.15


def _rect(body: Body) -> pygame.Rect:
    return pygame.Rect(round(body.left), round(body.top), round(body.width), round(body.height))


class PygameHost:
    def __init__(self, config: GameConfig, seed: int | None = None) -> None:
        self.config = config
        self.seed = seed

        pygame.init()
        pygame.display.set_caption("Bomb Catch")
        width = int(config.screen.width)
        height = int(config.screen.height)
        scale = config.screen.window_scale
        self.window = pygame.display.set_mode((width * scale, height * scale))
        self.canvas = pygame.Surface((width, height))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 12)

        self.game = self._new_game()
        self._flash_until = 0.0

    def _now(self) -> float:
        return pygame.time.get_ticks() / 1000.0

    def _new_game(self) -> BombCatchGame:
        rng = random.Random(self.seed)
        return BombCatchGame(config=self.config, now=self._now(), rng=rng)

    # ------------------------------------------------------------------
    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            if event.type == pygame.KEYDOWN and event.key in RESTART_KEYS and self.game.is_over:
                logger.info("restarting")
                self.game = self._new_game()
            if event.type in (pygame.KEYDOWN, pygame.KEYUP):
                self._apply_buttons()
        return True

    def _apply_buttons(self) -> None:
        keys = pygame.key.get_pressed()
        self.game.set_controls(
            left=any(keys[k] for k in LEFT_KEYS),
            right=any(keys[k] for k in RIGHT_KEYS),
            fast=any(keys[k] for k in FAST_KEYS),
        )

    # ------------------------------------------------------------------
    def update(self) -> None:
        now = self._now()
        self.game.update(now)
        for event in self.game.events.drain():
            if event.name == "bucket_lost":
                self._flash_until = event.time + FLASH_SECONDS
            elif event.name == "game_over":
                logger.info("final score %s", event.payload["score"])

    # ------------------------------------------------------------------
    def render(self) -> None:  # pragma: no cover - visual
        canvas = self.canvas
        game = self.game
        width, height = canvas.get_size()

        canvas.fill(FLASH if self._now() < self._flash_until else SKY)
        pygame.draw.rect(canvas, GROUND, pygame.Rect(0, height - 2, width, 2))

        bomber = game.bomber.body
        pygame.draw.rect(canvas, BOMBER, _rect(bomber))
        if game.bomber.is_holding_bomb:
            pygame.draw.circle(canvas, BOMB, (round(bomber.x), round(bomber.bottom)), 3)

        for bomb in game.bombs_on_screen():
            center = (round(bomb.body.x), round(bomb.body.y))
            if bomb.is_exploding:
                pygame.draw.circle(canvas, EXPLOSION, center, round(bomb.body.width * 1.5))
            else:
                pygame.draw.circle(canvas, BOMB, center, round(bomb.body.width / 2))
                pygame.draw.line(canvas, FUSE, center, (center[0], round(bomb.body.top) - 1))

        for bucket in game.player.buckets:
            rect = _rect(bucket)
            pygame.draw.rect(canvas, BUCKET, rect)
            pygame.draw.line(canvas, BUCKET_RIM, rect.topleft, rect.topright)

        hud = self.font.render(f"L{game.level}  {game.score.score}", False, TEXT)
        canvas.blit(hud, (2, 2))

        if game.phase.kind == PhaseKind.LOST:
            message = self.font.render("GAME OVER - press R", False, TEXT)
            canvas.blit(message, message.get_rect(center=(width // 2, height // 2)))

        pygame.transform.scale(canvas, self.window.get_size(), self.window)
        pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self) -> None:  # pragma: no cover - visual
        running = True
        try:
            while running:
                self.clock.tick(self.config.screen.fps)
                running = self.handle_events()
                self.update()
                self.render()
        finally:
            pygame.quit()
