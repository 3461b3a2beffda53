import random

import pytest

from bombcatch.core.event_bus import EventBus
from bombcatch.entities.body import Body
from bombcatch.entities.bomb import BombPose
from bombcatch.systems.bomber_pilot import BomberPilot
from bombcatch.systems.catch_system import CatchSystem
from bombcatch.systems.level_system import LevelSystem
from bombcatch.systems.score_system import ScoreSystem


class _FixedRandom(random.Random):
    def __init__(self, value: float) -> None:
        super().__init__()
        self.value = value

    def random(self) -> float:
        return self.value


def _bomber(x: float) -> Body:
    return Body(x=x, y=19, width=16, height=16)


def test_pilot_keeps_left_proposals() -> None:
    pilot = BomberPilot(screen_width=160, rng=_FixedRandom(0.5))
    assert pilot.next_target_x(_bomber(60)) == 48


def test_pilot_shifts_right_proposals_past_margin() -> None:
    pilot = BomberPilot(screen_width=160, rng=_FixedRandom(0.5))
    assert pilot.next_target_x(_bomber(30)) == 48 + 64


def test_pilot_targets_stay_on_screen() -> None:
    pilot = BomberPilot(screen_width=160, rng=random.Random(11))
    for x in (8, 40, 80, 120, 152):
        for _ in range(50):
            target = pilot.next_target_x(_bomber(x))
            assert 8 <= target <= 152


def test_catch_system_splits_bombs() -> None:
    buckets = [Body(x=80, y=97, width=16, height=6), Body(x=80, y=105, width=16, height=6)]
    inside = BombPose.spawn(x=84, y=104, width=6, height=8)
    beside = BombPose.spawn(x=100, y=104, width=6, height=8)

    result = CatchSystem().resolve([inside, beside], buckets)

    assert result.caught == [inside]
    assert result.uncaught == [beside]


def test_catch_system_detects_landing() -> None:
    falling = BombPose.spawn(x=10, y=60, width=6, height=8)
    landed = BombPose.spawn(x=20, y=116, width=6, height=8)
    assert not CatchSystem.landed([falling], 120)
    assert CatchSystem.landed([falling, landed], 120)
    assert not CatchSystem.landed([], 120)


def test_level_system_budget() -> None:
    levels = LevelSystem(bomb_count_for_level=lambda level: 5 * (level + 1))
    assert levels.advance() == 1
    assert levels.undropped_bomb_count == 10

    levels.take_bomb()
    assert levels.undropped_bomb_count == 9

    levels.undropped_bomb_count = 0
    assert not levels.has_undropped_bombs()
    with pytest.raises(ValueError):
        levels.take_bomb()


def test_score_system_counts_catches() -> None:
    score = ScoreSystem()
    score.record_catch(1)
    score.record_catch(3)
    assert score.score == 4
    assert score.bombs_caught == 2
    with pytest.raises(ValueError):
        score.record_catch(-1)


def test_event_bus_filters_and_drains() -> None:
    bus = EventBus()
    bus.emit("bomb_caught", 1.0, score=1)
    bus.emit("bucket_lost", 2.0, buckets_left=2)
    bus.emit("bomb_caught", 3.0, score=2)

    assert [e.payload["score"] for e in bus.of("bomb_caught")] == [1, 2]

    drained = bus.drain()
    assert [e.name for e in drained] == ["bomb_caught", "bucket_lost", "bomb_caught"]
    assert drained[1].time == 2.0
    assert bus.events == []
