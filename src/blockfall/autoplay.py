"""Headless driver that plays the engine with random commands.

Useful as a smoke test of the whole command/gravity/lock cycle and as the
``auto`` mode of ``python -m blockfall``.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from .engine import Command, GameEngine
from .events import GameListener


LOGGER = logging.getLogger(__name__)

# Commands the driver picks from on each step.  Drops are rarer so pieces get
# moved around before landing.
DEFAULT_WEIGHTS: Dict[Command, int] = {
    Command.LEFT: 3,
    Command.RIGHT: 3,
    Command.ROTATE: 2,
    Command.DROP: 1,
    Command.TICK: 4,
}


@dataclass
class RunStats:
    steps: int = 0
    pieces: int = 0
    lines: int = 0
    games: int = 0
    best_score: int = 0
    final_score: int = 0


class _StatsListener(GameListener):
    def __init__(self, stats: RunStats) -> None:
        self.stats = stats

    def piece_locked(self, blocks) -> None:
        self.stats.pieces += 1

    def rows_cleared(self, count, blocks, board) -> None:
        self.stats.lines += count

    def score_changed(self, score) -> None:
        self.stats.best_score = max(self.stats.best_score, score)

    def game_reset(self) -> None:
        self.stats.games += 1


def run(
    engine: GameEngine,
    steps: int,
    *,
    rng: Optional[random.Random] = None,
    weights: Optional[Dict[Command, int]] = None,
    step_ms: float = 100.0,
) -> RunStats:
    """Feed ``steps`` random commands through ``engine``'s queue.

    Each command is submitted and followed by ``engine.update(step_ms)``, so
    gravity advances with simulated time the way it does in a frame loop.
    """

    rng = rng or random.Random()
    weights = weights or DEFAULT_WEIGHTS
    commands: Sequence[Command] = list(weights)
    stats = RunStats()
    listener = _StatsListener(stats)
    engine.subscribe(listener)
    engine.start()
    try:
        for _ in range(steps):
            command = rng.choices(commands, weights=[weights[c] for c in commands])[0]
            engine.submit(command)
            engine.update(step_ms)
            stats.steps += 1
    finally:
        engine.stop()
        engine.events.unsubscribe(listener)
    stats.final_score = engine.score
    return stats


def log_summary(stats: RunStats, *, index: int = 1) -> str:
    """Log and return a one-line summary of ``stats``."""

    message = (
        f"steps={stats.steps}, pieces={stats.pieces}, lines={stats.lines}, "
        f"games_over={stats.games}, best_score={stats.best_score}, "
        f"final_score={stats.final_score}"
    )
    LOGGER.info("Run %d: %s", index, message)
    return message
