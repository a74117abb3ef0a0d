"""Utility helpers for the game engine."""

from __future__ import annotations

from typing import List, Optional

from .board import EMPTY, Board
from .pieces import ActivePiece, PieceKind, Position, absolute_positions


GRAVITY_MS = 500


def has_collision(board: Board, kind: PieceKind, orientation: int, anchor: Position) -> bool:
    """Return ``True`` if the piece would overlap a wall, the floor or a block.

    A block collides when its column is left of the board or at the right
    wall, when its row is the floor row (``board.height``), or when the cell it
    lands on is occupied.  There is no ceiling: blocks above row ``0`` are
    legal.  This predicate validates moves, rotations, drops and spawns alike
    and never mutates ``board``.
    """

    for col, row in absolute_positions(kind, orientation, anchor):
        if col < 0 or col >= board.width or row >= board.height:
            return True
        if not board.is_empty(col, row):
            return True
    return False


def piece_collides(board: Board, piece: ActivePiece) -> bool:
    """Shorthand for :func:`has_collision` on an :class:`ActivePiece`."""

    return has_collision(board, piece.kind, piece.orientation, piece.anchor)


def render_grid(board: Board, active: Optional[ActivePiece] = None) -> List[List[int]]:
    """Return an occupancy grid with the active piece overlaid.

    Cells are ``0`` when empty, ``1`` for settled blocks and ``2`` for blocks
    of the active piece.  Rows are listed top to bottom.  The board itself is
    not modified.
    """

    grid = [[0 if v == EMPTY else 1 for v in row] for row in board.grid.tolist()]
    if active is not None:
        for c, r in active.blocks():
            if board.in_bounds(c, r):
                grid[r][c] = 2
    return grid


def format_grid(grid: List[List[int]]) -> str:
    """Render a grid from :func:`render_grid` as text, one line per row."""

    chars = {0: ".", 1: "#", 2: "@"}
    return "\n".join("".join(chars[cell] for cell in row) for row in grid)
