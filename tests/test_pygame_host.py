import os
import random
from collections import defaultdict

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
pygame = pytest.importorskip("pygame")

from bombcatch.config import load_game_config
from bombcatch.core.phase import PhaseKind
from bombcatch.entities.bomb import BombPose
from bombcatch.frontend.pygame_host import PygameHost
from bombcatch.game import BombCatchGame


@pytest.fixture
def host():
    host = PygameHost(load_game_config(), seed=1)
    host.game = BombCatchGame(config=host.config, now=0.0, rng=random.Random(1))
    yield host
    pygame.quit()


def _press(monkeypatch, *keys: int) -> None:
    pressed = defaultdict(bool, {key: True for key in keys})
    monkeypatch.setattr(pygame.key, "get_pressed", lambda: pressed)


def test_keys_map_to_buttons(host, monkeypatch) -> None:
    _press(monkeypatch, pygame.K_LEFT)
    host._apply_buttons()
    assert host.game.player.vx_target == -200

    _press(monkeypatch, pygame.K_d, pygame.K_SPACE)
    host._apply_buttons()
    assert host.game.player.vx_target == 300

    _press(monkeypatch)
    host._apply_buttons()
    assert host.game.player.vx_target == 0


def test_update_drains_events_and_flashes_on_lost_bucket(host, monkeypatch) -> None:
    monkeypatch.setattr(host, "_now", lambda: 0.6)
    host.update()
    assert host.game.phase.kind == PhaseKind.BOMBING
    assert host.game.events.events == []

    host.game.phase.bombs.append(BombPose.spawn(x=10, y=116, width=6, height=8))
    monkeypatch.setattr(host, "_now", lambda: 0.61)
    host.update()

    assert host.game.phase.kind == PhaseKind.EXPLODING
    assert host._flash_until == pytest.approx(0.76)
    assert host.game.events.events == []
