from bombcatch.__main__ import main


def test_simulate_prints_summary(capsys) -> None:
    main(["--seed", "3", "simulate", "--max-seconds", "2"])

    out = capsys.readouterr().out
    assert out.startswith("Bomb Catch Simulation")
    assert "level=1" in out
    assert "buckets=" in out


def test_shared_options_follow_the_subcommand(capsys) -> None:
    main(["simulate", "--seed", "3", "--log-level", "INFO", "--max-seconds", "1"])

    out = capsys.readouterr().out
    assert out.startswith("Bomb Catch Simulation")
    assert "seconds=1.0" in out


def test_parser_keeps_options_given_before_the_subcommand() -> None:
    from bombcatch.__main__ import _build_parser

    args = _build_parser().parse_args(["--seed", "4", "simulate", "--fps", "30"])
    assert args.seed == 4
    assert args.fps == 30
    assert args.config is None
    assert args.log_level == "WARNING"

    args = _build_parser().parse_args(["play", "--seed", "8"])
    assert args.command == "play"
    assert args.seed == 8
