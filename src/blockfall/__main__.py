"""Command line entry point.

Run with: `python -m blockfall`

Modes:

- ``ascii`` prints a single frame of a fresh game (board plus active piece),
  a minimal smoke test that the engine spawns correctly.
- ``auto`` plays ``--steps`` random commands headlessly and logs a summary.
- ``play`` opens the pygame window.
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import Optional, Sequence

from .autoplay import log_summary, run
from .config import GameConfig
from .engine import GameEngine
from .events import LoggingListener
from .utils import format_grid, render_grid


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="blockfall", description=__doc__)
    parser.add_argument("--mode", choices=("ascii", "auto", "play"), default="ascii")
    parser.add_argument("--steps", type=int, default=1000, help="Commands to issue in auto mode.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for piece selection and autoplay.")
    parser.add_argument("--width", type=int, default=GameConfig.width)
    parser.add_argument("--height", type=int, default=GameConfig.height)
    parser.add_argument(
        "--all-kinds",
        action="store_true",
        help="Spawn all seven kinds instead of the six the reference selection yields.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    config = GameConfig(
        width=args.width,
        height=args.height,
        random_seed=args.seed,
        all_kinds=args.all_kinds,
    )

    if args.mode == "play":
        from .run_pygame import main as play

        play(config)
        return

    engine = GameEngine(config)
    if args.mode == "auto":
        engine.subscribe(LoggingListener())
        stats = run(engine, args.steps, rng=random.Random(args.seed))
        log_summary(stats)
        return

    print(format_grid(render_grid(engine.board, engine.active)))


if __name__ == "__main__":
    main()
