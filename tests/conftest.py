import pytest

from blockfall.engine import GameEngine
from blockfall.events import GameListener


class RecordingListener(GameListener):
    """Keep every notification as a ``(name, payload)`` tuple."""

    def __init__(self, engine=None):
        self.events = []
        self.engine = engine

    def names(self):
        return [name for name, _ in self.events]

    def piece_changed(self, kind, orientation, anchor):
        self.events.append(("piece_changed", (kind, orientation, anchor)))

    def piece_locked(self, blocks):
        running = self.engine.timer.running if self.engine else None
        self.events.append(("piece_locked", (list(blocks), running)))

    def rows_cleared(self, count, blocks, board):
        self.events.append(("rows_cleared", (count, list(blocks), board)))

    def score_changed(self, score):
        self.events.append(("score_changed", score))

    def game_reset(self):
        self.events.append(("game_reset", None))


@pytest.fixture
def engine():
    return GameEngine()


@pytest.fixture
def recorder(engine):
    listener = RecordingListener(engine)
    engine.subscribe(listener)
    return listener
