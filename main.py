"""Main entry point for the platformer (thin wrapper)."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from functools import partial

from core.config import DEFAULT_MAX_TIME
from core.parser import LevelParser, build_actor_dict
from game import PlatformerGame
from levels import create_level, list_available_levels


@dataclass
class RunConfig:
    level_name: str
    headless: bool
    max_time: float | None
    max_steps: int | None
    seed: int | None


def _format_list(title: str, items: list[str]) -> str:
    if not items:
        return f"{title}:\n  (none)"
    joined = "\n  ".join(items)
    return f"{title}:\n  {joined}"


def _build_parser() -> argparse.ArgumentParser:
    levels = list_available_levels()

    parser = argparse.ArgumentParser(
        description="Tile platformer",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog=_format_list("Available levels", levels),
    )
    parser.add_argument(
        "level_name",
        nargs="?",
        choices=levels,
        default=levels[0] if levels else None,
        help="Level module name",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run without graphics or input",
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=None,
        help="Limit simulation to N steps",
    )
    parser.add_argument(
        "--time",
        type=float,
        default=None,
        help="Headless: limit simulation to S seconds (default: 300)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for coin phases")
    return parser


def _parse_args(args: argparse.Namespace) -> RunConfig:
    max_time = args.time
    if args.headless and max_time is None:
        max_time = DEFAULT_MAX_TIME

    return RunConfig(
        level_name=args.level_name,
        headless=args.headless,
        max_time=max_time,
        max_steps=args.steps,
        seed=args.seed,
    )


def _announce_config(config: RunConfig) -> None:
    print(f"Using level {config.level_name}")
    if config.headless:
        print("Running in headless mode")
    if config.max_time is not None:
        print(f"Max time: {config.max_time}s")
    if config.max_steps is not None:
        print(f"Max steps: {config.max_steps}")
    if config.seed is not None:
        print(f"Using seed: {config.seed}")


def _print_results(result: dict) -> None:
    print("\n" + "=" * 60)
    print("FINAL RESULTS")
    print("=" * 60)
    for key in ("status", "time", "steps", "coins_left"):
        if key in result:
            val = result[key]
            label = key.replace("_", " ").capitalize()
            if isinstance(val, float):
                print(f"{label:<18}{val:.2f}")
            else:
                print(f"{label:<18}{val if val is not None else 'in progress'}")
    print("=" * 60)


def main(argv: list[str] | None = None) -> None:
    """Entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.level_name is None:
        parser.error("No levels available")
    config = _parse_args(args)

    _announce_config(config)

    rng = random.Random(config.seed)
    level_parser = LevelParser(build_actor_dict(rng))
    game = PlatformerGame(
        partial(create_level, config.level_name, level_parser),
        headless=config.headless,
    )
    result = game.run(max_steps=config.max_steps, max_time=config.max_time)
    _print_results(result)


if __name__ == "__main__":
    main()
