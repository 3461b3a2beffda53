"""Config loading and validation for the Bomb Catch game."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import json


@dataclass
class Size:
    width: float
    height: float


@dataclass
class ScreenConfig:
    width: float
    height: float
    window_scale: int = 4
    fps: int = 60


@dataclass
class TimingConfig:
    prepping_duration: float
    single_explosion_duration: float
    bomb_holding_duration: float
    reloading_duration: float


@dataclass
class PhysicsConfig:
    bomber_speed: float
    gravity: float
    bomb_max_speed: float
    paddle_speed_slow: float
    paddle_speed_fast: float


@dataclass
class LayoutConfig:
    bucket_count: int
    bucket_gap: float
    bucket_size: Size
    paddle_size: Size
    paddle_offset: float
    bomber_size: Size
    bomber_y: float
    bomb_size: Size
    bomb_drop_offset: float


@dataclass
class ScoringConfig:
    points_per_catch: int
    bombs_per_level: int


@dataclass
class GameConfig:
    screen: ScreenConfig
    timing: TimingConfig
    physics: PhysicsConfig
    layout: LayoutConfig
    scoring: ScoringConfig

    def bomb_count_for_level(self, level: int) -> int:
        return self.scoring.bombs_per_level * (level + 1)


DEFAULT_DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_CONFIG_PATH = DEFAULT_DATA_DIR / "game.json"


def _load_json(path: Path) -> dict:
    if not path.exists():
        raise ValueError(f"Missing config file: {path}")
    try:
        return json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"Malformed config file {path}: {exc}") from exc


def _require_keys(data: dict, keys: set[str], context: str) -> None:
    if not isinstance(data, dict):
        raise ValueError(f"{context}: expected an object, got {type(data).__name__}")
    missing = keys - set(data.keys())
    if missing:
        raise ValueError(f"{context}: missing keys {sorted(missing)}")


def _size(raw: dict, context: str) -> Size:
    _require_keys(raw, {"width", "height"}, context)
    return Size(width=float(raw["width"]), height=float(raw["height"]))


def validate_game_config(config: GameConfig) -> None:
    """Reject configurations the update loop cannot run with."""
    if config.screen.width <= 0 or config.screen.height <= 0:
        raise ValueError("screen size must be positive")
    if config.screen.window_scale < 1:
        raise ValueError("window_scale must be at least 1")
    if config.screen.fps <= 0:
        raise ValueError("fps must be positive")

    for name, value in vars(config.timing).items():
        if value < 0:
            raise ValueError(f"{name} must be non-negative")
    if config.timing.single_explosion_duration <= 0:
        raise ValueError("single_explosion_duration must be positive")

    for name, value in vars(config.physics).items():
        if value <= 0:
            raise ValueError(f"{name} must be positive")

    layout = config.layout
    if layout.bucket_count < 1:
        raise ValueError("bucket_count must be at least 1")
    for name in ("bucket_size", "paddle_size", "bomber_size", "bomb_size"):
        size = getattr(layout, name)
        if size.width <= 0 or size.height <= 0:
            raise ValueError(f"{name} must be positive")
    if layout.bucket_size.width > config.screen.width:
        raise ValueError("bucket_size is wider than the screen")
    # The bomber paces inside a band that leaves two widths of margin on each side.
    if layout.bomber_size.width * 5 > config.screen.width:
        raise ValueError("bomber_size is too wide for the screen")
    stack_height = layout.bucket_count * (layout.bucket_size.height + layout.bucket_gap)
    if layout.bomber_y + stack_height >= config.screen.height:
        raise ValueError("bucket stack overlaps the bomber lane")

    if config.scoring.points_per_catch < 0:
        raise ValueError("points_per_catch must be non-negative")
    if config.scoring.bombs_per_level < 1:
        raise ValueError("bombs_per_level must be at least 1")


def load_game_config(path: Path | None = None) -> GameConfig:
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH

    raw = _load_json(config_path)
    _require_keys(raw, {"screen", "timing", "physics", "layout", "scoring"}, config_path.name)

    screen_raw = raw["screen"]
    _require_keys(screen_raw, {"width", "height"}, "screen")
    screen = ScreenConfig(
        width=float(screen_raw["width"]),
        height=float(screen_raw["height"]),
        window_scale=int(screen_raw.get("window_scale", 4)),
        fps=int(screen_raw.get("fps", 60)),
    )

    timing_raw = raw["timing"]
    _require_keys(
        timing_raw,
        {
            "prepping_duration",
            "single_explosion_duration",
            "bomb_holding_duration",
            "reloading_duration",
        },
        "timing",
    )
    timing = TimingConfig(
        prepping_duration=float(timing_raw["prepping_duration"]),
        single_explosion_duration=float(timing_raw["single_explosion_duration"]),
        bomb_holding_duration=float(timing_raw["bomb_holding_duration"]),
        reloading_duration=float(timing_raw["reloading_duration"]),
    )

    physics_raw = raw["physics"]
    _require_keys(
        physics_raw,
        {"bomber_speed", "gravity", "bomb_max_speed", "paddle_speed_slow", "paddle_speed_fast"},
        "physics",
    )
    physics = PhysicsConfig(
        bomber_speed=float(physics_raw["bomber_speed"]),
        gravity=float(physics_raw["gravity"]),
        bomb_max_speed=float(physics_raw["bomb_max_speed"]),
        paddle_speed_slow=float(physics_raw["paddle_speed_slow"]),
        paddle_speed_fast=float(physics_raw["paddle_speed_fast"]),
    )

    layout_raw = raw["layout"]
    _require_keys(
        layout_raw,
        {
            "bucket_count",
            "bucket_gap",
            "bucket_size",
            "paddle_size",
            "paddle_offset",
            "bomber_size",
            "bomber_y",
            "bomb_size",
            "bomb_drop_offset",
        },
        "layout",
    )
    layout = LayoutConfig(
        bucket_count=int(layout_raw["bucket_count"]),
        bucket_gap=float(layout_raw["bucket_gap"]),
        bucket_size=_size(layout_raw["bucket_size"], "layout.bucket_size"),
        paddle_size=_size(layout_raw["paddle_size"], "layout.paddle_size"),
        paddle_offset=float(layout_raw["paddle_offset"]),
        bomber_size=_size(layout_raw["bomber_size"], "layout.bomber_size"),
        bomber_y=float(layout_raw["bomber_y"]),
        bomb_size=_size(layout_raw["bomb_size"], "layout.bomb_size"),
        bomb_drop_offset=float(layout_raw["bomb_drop_offset"]),
    )

    scoring_raw = raw["scoring"]
    _require_keys(scoring_raw, {"points_per_catch", "bombs_per_level"}, "scoring")
    scoring = ScoringConfig(
        points_per_catch=int(scoring_raw["points_per_catch"]),
        bombs_per_level=int(scoring_raw["bombs_per_level"]),
    )

    config = GameConfig(screen=screen, timing=timing, physics=physics, layout=layout, scoring=scoring)
    validate_game_config(config)
    return config
