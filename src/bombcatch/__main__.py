"""CLI entry point for Bomb Catch."""

from __future__ import annotations

from pathlib import Path
import argparse
import logging
import random

from bombcatch.autopilot import run_simulation
from bombcatch.config import load_game_config
from bombcatch.game import BombCatchGame


def _build_parser() -> argparse.ArgumentParser:
    # Shared options are accepted before or after the subcommand. SUPPRESS keeps a
    # subcommand from overwriting a value given ahead of it.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", type=Path, default=argparse.SUPPRESS, help="path to a game.json override")
    common.add_argument("--seed", type=int, default=argparse.SUPPRESS, help="seed for the bomber's pacing")
    common.add_argument("--log-level", default=argparse.SUPPRESS, help="logging level (DEBUG, INFO, ...)")

    parser = argparse.ArgumentParser(
        prog="bombcatch",
        description="Catch the bombs before they hit the ground.",
        parents=[common],
    )
    parser.set_defaults(config=None, seed=None, log_level="WARNING")

    commands = parser.add_subparsers(dest="command")
    commands.add_parser("play", parents=[common], help="open a window and play (default)")
    simulate = commands.add_parser("simulate", parents=[common], help="run a headless game with the autopilot")
    simulate.add_argument("--fps", type=int, default=60)
    simulate.add_argument("--max-seconds", type=float, default=120.0)
    return parser


def _simulate(args: argparse.Namespace) -> None:
    config = load_game_config(args.config)
    game = BombCatchGame(config=config, rng=random.Random(args.seed))
    summary = run_simulation(game, fps=args.fps, max_seconds=args.max_seconds)

    print("Bomb Catch Simulation")
    print(f"phase={summary['phase']}")
    print(f"level={summary['level']}")
    print(f"score={summary['score']}")
    print(f"buckets={summary['buckets']}")
    print(f"seconds={summary['seconds']}")


def _play(args: argparse.Namespace) -> None:
    # pygame is only needed with a display.
    from bombcatch.frontend.pygame_host import PygameHost

    config = load_game_config(args.config)
    PygameHost(config, seed=args.seed).run()


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "simulate":
        _simulate(args)
    else:
        _play(args)


if __name__ == "__main__":
    main()
