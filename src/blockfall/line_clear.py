"""Detection and removal of completed rows.

Rows are scanned bottom to top, stopping short of row ``0`` which is never
checked.  After each removal the scan restarts from the bottom because the
shift may have moved a complete row into a position that was already passed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .blocks import BlockStore
from .board import Board
from .scoring import ScoreTracker


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineClearResult:
    """Outcome of one clearing pass."""

    count: int = 0
    points: int = 0
    # Board row index of each removal, in removal order.  Indices refer to the
    # board as it was at the moment of that removal.
    rows: List[int] = field(default_factory=list)


def find_complete_row(board: Board) -> Optional[int]:
    """Return the lowest complete row in ``1..height-1`` or ``None``."""

    for row in range(board.height - 1, 0, -1):
        if board.is_row_complete(row):
            return row
    return None


def remove_row(board: Board, blocks: BlockStore, row: int) -> None:
    """Delete the blocks in ``row`` and drop everything above it by one."""

    for block_id in board.row_ids(row):
        blocks.remove(block_id)
    board.shift_down(row)
    blocks.shift_down_above(row)
    # Blocks locked above the top edge have no cell until they fall into row 0.
    for block in blocks.in_row(0):
        board.set_cell(block.column, 0, block.id)


def clear_lines(board: Board, blocks: BlockStore, score: ScoreTracker) -> LineClearResult:
    """Remove every complete row and award the points to ``score``.

    Scoring happens once per call: ``n`` rows cleared together are worth
    ``10*n + 5*n**2``.  Calling this on a board without complete rows changes
    nothing.
    """

    rows: List[int] = []
    row = find_complete_row(board)
    while row is not None:
        remove_row(board, blocks, row)
        rows.append(row)
        row = find_complete_row(board)

    if not rows:
        return LineClearResult()

    points = score.record_clear(len(rows))
    LOGGER.debug("Cleared rows %s for %d points", rows, points)
    return LineClearResult(count=len(rows), points=points, rows=rows)
