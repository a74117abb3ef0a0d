"""Game loop: the single writer of :class:`GameState`.

Player commands and gravity ticks reach the state only through
:class:`GameEngine`.  Front-ends either call the command methods directly or
:meth:`GameEngine.submit` them and let :meth:`GameEngine.update` drain the
queue before applying due gravity ticks.  Gravity is suspended for the whole
of a hard drop and of every lock-and-clear sequence.
"""

from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import replace
from enum import Enum
from typing import Deque, Iterable, Optional

from .blocks import BlockStore
from .board import Board
from .config import GameConfig
from .events import EventDispatcher, GameListener
from .game_state import GameState
from .line_clear import LineClearResult, clear_lines
from .pieces import ActivePiece, PieceKind
from .timer import GravityTimer
from .utils import piece_collides


LOGGER = logging.getLogger(__name__)


class Command(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    ROTATE = "rotate"
    DROP = "drop"
    TICK = "tick"


class GameEngine:
    """Apply commands and gravity to a single game."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        listeners: Iterable[GameListener] = (),
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.events = EventDispatcher(list(listeners))
        self.timer = GravityTimer(self.config.gravity_ms)
        self._queue: Deque[Command] = deque()
        self._state = GameState(
            config=self.config,
            rng=rng or random.Random(self.config.random_seed),
        )
        self._state.reset_game()
        self.games_played = 0
        self._piece_changed()

    # ------------------------------------------------------------ accessors
    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def blocks(self) -> BlockStore:
        return self._state.blocks

    @property
    def active(self) -> Optional[ActivePiece]:
        return self._state.active

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def next_id(self) -> int:
        return self._state.next_id

    @property
    def paused(self) -> bool:
        return not self.timer.running

    def subscribe(self, listener: GameListener) -> None:
        self.events.subscribe(listener)

    # ---------------------------------------------------------------- timer
    def start(self) -> None:
        """Start (or resume) the gravity driver."""

        self.timer.start()
        LOGGER.debug("Gravity started (%.0f ms)", self.timer.interval_ms)

    def stop(self) -> None:
        """Stop the gravity driver; commands are still accepted."""

        self.timer.stop()
        LOGGER.debug("Gravity stopped")

    # ------------------------------------------------------------- commands
    def move_left(self) -> bool:
        return self._shift(-1)

    def move_right(self) -> bool:
        return self._shift(1)

    def _shift(self, dx: int) -> bool:
        piece = self._state.active
        if piece is None:
            LOGGER.debug("Move ignored: no active piece")
            return False
        piece.move(dx, 0)
        if piece_collides(self._state.board, piece):
            piece.move(-dx, 0)
            return False
        self._piece_changed()
        return True

    def rotate(self) -> bool:
        """Advance the orientation, rolling back if the new one collides."""

        piece = self._state.active
        if piece is None:
            LOGGER.debug("Rotate ignored: no active piece")
            return False
        piece.rotate(1)
        if piece_collides(self._state.board, piece):
            piece.rotate(-1)
            return False
        self._piece_changed()
        return True

    def hard_drop(self) -> Optional[LineClearResult]:
        """Drop the piece to its lowest free position and lock it there."""

        piece = self._state.active
        if piece is None:
            LOGGER.debug("Drop ignored: no active piece")
            return None
        with self.timer.suspended():
            while True:
                piece.move(0, 1)
                if piece_collides(self._state.board, piece):
                    break
            piece.move(0, -1)
            self._piece_changed()
            return self._lock_sequence()

    def gravity_tick(self) -> Optional[LineClearResult]:
        """Move the piece down one row, locking it if it cannot fall.

        Returns the line-clear result when the tick caused a lock, ``None``
        otherwise.
        """

        piece = self._state.active
        if piece is None:
            LOGGER.debug("Tick ignored: no active piece")
            return None
        piece.move(0, 1)
        if piece_collides(self._state.board, piece):
            piece.move(0, -1)
            with self.timer.suspended():
                return self._lock_sequence()
        self._piece_changed()
        return None

    def reset(self, kind: Optional[PieceKind] = None) -> None:
        """Start a new game: empty board, zero score, fresh piece."""

        self._restart(kind)
        self.events.game_reset()
        self._piece_changed()

    # ---------------------------------------------------------------- queue
    def submit(self, command: Command) -> None:
        """Queue ``command`` for the next :meth:`process_commands` call."""

        self._queue.append(Command(command))

    @property
    def pending(self) -> int:
        return len(self._queue)

    def process_commands(self) -> int:
        """Apply queued commands in submission order and return how many ran."""

        handled = 0
        while self._queue:
            self.execute(self._queue.popleft())
            handled += 1
        return handled

    def execute(self, command: Command) -> None:
        handler = {
            Command.LEFT: self.move_left,
            Command.RIGHT: self.move_right,
            Command.ROTATE: self.rotate,
            Command.DROP: self.hard_drop,
            Command.TICK: self.gravity_tick,
        }[Command(command)]
        handler()

    def update(self, dt_ms: float) -> int:
        """Advance the game by ``dt_ms`` milliseconds.

        Queued commands run first, then each gravity tick the timer reports
        as due, with the queue drained again before every tick.  Returns the
        number of gravity ticks applied.
        """

        self.process_commands()
        ticks = self.timer.advance(dt_ms)
        applied = 0
        for _ in range(ticks):
            # listeners may have queued commands during the previous tick
            self.process_commands()
            applied += 1
            # A lock restarts the interval; ticks owed from before it lapse.
            if self.gravity_tick() is not None:
                break
        return applied

    # -------------------------------------------------------------- helpers
    def _piece_changed(self) -> None:
        piece = self._state.active
        if piece is not None:
            self.events.piece_changed(piece.kind, piece.orientation, piece.anchor)

    def _restart(self, kind: Optional[PieceKind] = None) -> None:
        self._state.reset_game(kind)
        self._queue.clear()
        self.games_played += 1

    def _lock_sequence(self) -> LineClearResult:
        # Lock, clear and spawn all settle before any listener is notified.
        state = self._state
        locked = [replace(b) for b in state.lock_active()]
        result = clear_lines(state.board, state.blocks, state.tracker)
        cleared = None
        if result.count:
            cleared = (state.blocks.snapshot(), state.board.copy(), state.score)

        state.spawn_piece()
        game_over = piece_collides(state.board, state.active)
        if game_over:
            LOGGER.info(
                "Game over after %d line(s), score %d. Resetting.",
                state.tracker.lines,
                state.score,
            )
            self._restart()

        self.events.piece_locked(locked)
        if cleared is not None:
            blocks, board, score = cleared
            self.events.rows_cleared(result.count, blocks, board)
            self.events.score_changed(score)
        if game_over:
            self.events.game_reset()
        self._piece_changed()
        return result
