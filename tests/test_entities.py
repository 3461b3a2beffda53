import pytest

from bombcatch.config import load_game_config
from bombcatch.entities.body import Body
from bombcatch.entities.bomb import BombPose
from bombcatch.entities.bomber import BomberPose
from bombcatch.entities.player import PlayerPose


def test_bodies_overlap_only_when_boxes_intersect() -> None:
    a = Body(x=10, y=10, width=4, height=4)
    assert a.overlaps(Body(x=13, y=10, width=4, height=4))
    assert not a.overlaps(Body(x=14, y=10, width=4, height=4))

    b = Body(x=11, y=11, width=4, height=4)
    b.destroy()
    assert not a.overlaps(b)


def test_bomb_accelerates_and_caps_speed() -> None:
    bomb = BombPose.spawn(x=50, y=20, width=6, height=8)
    bomb.advance(0.1, gravity=200, max_speed=200, screen_height=120)
    assert bomb.vy == pytest.approx(20)
    assert bomb.body.y == pytest.approx(22)

    for _ in range(5):
        bomb.advance(0.25, gravity=200, max_speed=200, screen_height=1000)
    assert bomb.vy == 200


def test_bomb_stops_at_ground() -> None:
    bomb = BombPose.spawn(x=50, y=100, width=6, height=8)
    assert not bomb.has_landed(120)
    bomb.advance(1.0, gravity=200, max_speed=200, screen_height=120)
    assert bomb.body.y == 116
    assert bomb.has_landed(120)


def test_bomber_moves_toward_target_without_overshoot() -> None:
    bomber = BomberPose.spawn(screen_width=160, y=19, width=16, height=16)
    assert bomber.body.x == pytest.approx(160 / 3)

    bomber.move_toward(60, speed=80, elapsed=1.0)
    assert bomber.body.x == 60
    assert bomber.is_at(60)

    bomber.move_toward(20, speed=80, elapsed=0.25)
    assert bomber.body.x == 40
    assert not bomber.is_at(20)


def test_player_buckets_stack_above_invisible_paddle() -> None:
    player = PlayerPose.spawn(load_game_config())
    assert not player.paddle.visible
    assert player.paddle.x == 80
    assert player.paddle.y == 116
    assert player.bucket_count == 3
    # Lowest bucket is last.
    assert [bucket.y for bucket in player.buckets] == [97, 105, 113]


def test_player_velocity_smooths_toward_target() -> None:
    player = PlayerPose.spawn(load_game_config())
    player.vx_target = 200
    player.advance(0.01, screen_width=160)
    assert player.vx == 100
    assert player.paddle.x == pytest.approx(81)
    assert all(bucket.x == player.paddle.x for bucket in player.buckets)

    player.advance(0.01, screen_width=160)
    assert player.vx == 150


def test_player_is_clamped_to_screen() -> None:
    player = PlayerPose.spawn(load_game_config())
    player.vx_target = -300
    for _ in range(20):
        player.advance(0.1, screen_width=160)
    assert player.paddle.x == 8

    player.vx_target = 300
    for _ in range(20):
        player.advance(0.1, screen_width=160)
    assert player.paddle.x == 152


def test_lowest_bucket_is_lost_first() -> None:
    player = PlayerPose.spawn(load_game_config())
    lowest = player.buckets[-1]
    assert player.lose_bucket() is lowest
    assert lowest.destroyed
    assert player.bucket_count == 2

    player.lose_bucket()
    player.lose_bucket()
    assert player.lose_bucket() is None


def test_player_without_buckets_stays_put() -> None:
    player = PlayerPose.spawn(load_game_config())
    player.buckets.clear()
    player.vx_target = 200
    player.advance(1.0, screen_width=160)
    assert player.paddle.x == 80
    assert player.vx == 0
