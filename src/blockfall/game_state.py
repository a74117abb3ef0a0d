"""High level game state container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence
import random

from .blocks import BlockStore, SettledBlock
from .board import Board
from .config import GameConfig
from .pieces import ActivePiece, PieceKind
from .scoring import ScoreTracker


@dataclass
class GameState:
    """Mutable state for one game session.

    ``active`` is ``None`` only between locking a piece and spawning the next
    one.  ``next_id`` is the id the next settled block will receive.
    """

    config: GameConfig = field(default_factory=GameConfig)
    board: Board = field(init=False)
    blocks: BlockStore = field(default_factory=BlockStore)
    active: Optional[ActivePiece] = None
    next_id: int = 0
    tracker: ScoreTracker = field(default_factory=ScoreTracker)
    rng: random.Random = field(default_factory=random.Random)

    def __post_init__(self) -> None:
        self.board = Board(self.config.width, self.config.height)

    @property
    def score(self) -> int:
        return self.tracker.score

    def _random_kind(self) -> PieceKind:
        """Return a kind drawn uniformly from the configured spawn kinds."""

        return self.rng.choice(self.config.spawn_kinds)

    def spawn_piece(self, kind: Optional[PieceKind] = None) -> ActivePiece:
        """Create and return a new active piece at the spawn anchor."""

        self.active = ActivePiece(
            kind or self._random_kind(),
            orientation=0,
            anchor=self.config.spawn_anchor,
        )
        return self.active

    def lock_active(self) -> List[SettledBlock]:
        """Turn the active piece into four settled blocks and return them.

        Each block takes the next id from the counter.  Blocks above the top
        row join the store but have no board cell.
        """

        assert self.active is not None, "no active piece to lock"
        piece = self.active
        locked: List[SettledBlock] = []
        for col, row in piece.blocks():
            block = SettledBlock(id=self.next_id, position=(col, row), color=piece.color)
            self.next_id += 1
            self.blocks.add(block)
            if row >= 0:
                self.board.set_cell(col, row, block.id)
            locked.append(block)
        self.active = None
        return locked

    def reset_game(self, kind: Optional[PieceKind] = None) -> None:
        """Reset the entire game state and spawn one piece."""

        self.board = Board(self.config.width, self.config.height)
        self.blocks.clear()
        self.next_id = 0
        self.tracker.reset()
        self.active = None
        self.spawn_piece(kind)

    def place_blocks(self, positions: Sequence[tuple], color: str = "gray") -> List[SettledBlock]:
        """Settle blocks at ``positions`` directly, bypassing piece locking.

        Used to set up boards for scenarios and tests; ids come from the same
        counter as locked pieces.
        """

        positions = [tuple(p) for p in positions]
        for col, row in positions:
            if not self.board.in_bounds(col, row):
                raise IndexError(f"Cell {(col, row)} is outside the board")
            if not self.board.is_empty(col, row):
                raise ValueError(f"Cell {(col, row)} is already occupied")
        if len(set(positions)) != len(positions):
            raise ValueError("Duplicate cells in placement")

        placed: List[SettledBlock] = []
        for col, row in positions:
            block = SettledBlock(id=self.next_id, position=(col, row), color=color)
            self.next_id += 1
            self.blocks.add(block)
            self.board.set_cell(col, row, block.id)
            placed.append(block)
        return placed
