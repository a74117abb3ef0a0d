"""State-change notifications emitted by the engine.

Presentation layers subclass :class:`GameListener`, override the callbacks
they care about and subscribe the instance to a :class:`GameEngine`.  All
payloads are copies, so listeners may keep them without observing later
mutations.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from .blocks import SettledBlock
from .board import Board
from .pieces import PieceKind, Position


LOGGER = logging.getLogger(__name__)


class GameListener:
    """Receiver of engine notifications.  Every callback defaults to a no-op."""

    def piece_changed(self, kind: PieceKind, orientation: int, anchor: Position) -> None:
        pass

    def piece_locked(self, blocks: Sequence[SettledBlock]) -> None:
        pass

    def rows_cleared(self, count: int, blocks: Sequence[SettledBlock], board: Board) -> None:
        pass

    def score_changed(self, score: int) -> None:
        pass

    def game_reset(self) -> None:
        pass


class LoggingListener(GameListener):
    """Write every notification to the ``blockfall.events`` logger."""

    def __init__(self, logger: logging.Logger = LOGGER) -> None:
        self.logger = logger

    def piece_changed(self, kind, orientation, anchor) -> None:
        self.logger.debug("Piece %s orientation=%d at %s", kind.value, orientation, anchor)

    def piece_locked(self, blocks) -> None:
        self.logger.debug("Locked blocks %s", [b.id for b in blocks])

    def rows_cleared(self, count, blocks, board) -> None:
        self.logger.debug("Cleared %d row(s); %d block(s) remain", count, len(blocks))

    def score_changed(self, score) -> None:
        self.logger.info("Score: %d", score)

    def game_reset(self) -> None:
        self.logger.info("Game reset")


class EventDispatcher(GameListener):
    """Fan notifications out to the subscribed listeners in order."""

    def __init__(self, listeners: Sequence[GameListener] = ()) -> None:
        self._listeners: List[GameListener] = list(listeners)

    @property
    def listeners(self) -> List[GameListener]:
        return list(self._listeners)

    def subscribe(self, listener: GameListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: GameListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def piece_changed(self, kind, orientation, anchor) -> None:
        for listener in list(self._listeners):
            listener.piece_changed(kind, orientation, anchor)

    def piece_locked(self, blocks) -> None:
        for listener in list(self._listeners):
            listener.piece_locked(blocks)

    def rows_cleared(self, count, blocks, board) -> None:
        for listener in list(self._listeners):
            listener.rows_cleared(count, blocks, board)

    def score_changed(self, score) -> None:
        for listener in list(self._listeners):
            listener.score_changed(score)

    def game_reset(self) -> None:
        for listener in list(self._listeners):
            listener.game_reset()
