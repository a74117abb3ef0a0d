"""Falling-block puzzle engine: board, pieces, collisions, line clears and gravity."""

from .board import Board, EMPTY
from .blocks import BlockStore, SettledBlock
from .config import GameConfig
from .engine import Command, GameEngine
from .events import EventDispatcher, GameListener, LoggingListener
from .game_state import GameState
from .line_clear import LineClearResult, clear_lines
from .pieces import (
    PIECE_COLORS,
    ActivePiece,
    PieceKind,
    absolute_positions,
    piece_offsets,
    relative_offset,
)
from .scoring import ScoreTracker
from .timer import GravityTimer
from .utils import has_collision, render_grid

__all__ = [
    "Board",
    "EMPTY",
    "BlockStore",
    "SettledBlock",
    "GameConfig",
    "Command",
    "GameEngine",
    "EventDispatcher",
    "GameListener",
    "LoggingListener",
    "GameState",
    "LineClearResult",
    "clear_lines",
    "PIECE_COLORS",
    "ActivePiece",
    "PieceKind",
    "absolute_positions",
    "piece_offsets",
    "relative_offset",
    "ScoreTracker",
    "GravityTimer",
    "has_collision",
    "render_grid",
]
