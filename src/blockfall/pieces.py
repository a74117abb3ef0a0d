"""Piece kinds, their geometry tables and the active falling piece.

The offset table is hand-authored: each orientation is stored verbatim rather
than derived by rotating the spawn orientation, so pieces whose orientations
are not exact 90 degree rotations of one another keep their shapes.
Offsets are ``(dx, dy)`` pairs where ``dx`` is a column delta and ``dy`` a row
delta (rows grow downwards).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

Offset = Tuple[int, int]
Position = Tuple[int, int]  # (column, row)
OrientationState = Tuple[Offset, Offset, Offset, Offset]

NUM_ORIENTATIONS = 4
BLOCKS_PER_PIECE = 4


class PieceKind(str, Enum):
    """Enumeration of the seven piece shapes."""

    SQUARE = "square"
    LINE = "line"
    ZIGZAG_DOWN = "zigzagdown"
    ZIGZAG_UP = "zigzagup"
    T = "t"
    L = "l"
    J = "j"


# Index order used by random selection.  Only the first six entries can be
# produced by the reference selection range; see ``GameConfig.spawn_kinds``.
SELECTION_ORDER: Tuple[PieceKind, ...] = (
    PieceKind.LINE,
    PieceKind.ZIGZAG_DOWN,
    PieceKind.ZIGZAG_UP,
    PieceKind.SQUARE,
    PieceKind.T,
    PieceKind.L,
    PieceKind.J,
)

PIECE_COLORS: Dict[PieceKind, str] = {
    PieceKind.LINE: "blue",
    PieceKind.ZIGZAG_DOWN: "orange",
    PieceKind.ZIGZAG_UP: "maroon",
    PieceKind.SQUARE: "green",
    PieceKind.T: "red",
    PieceKind.L: "purple",
    PieceKind.J: "orangered",
}


PIECE_OFFSETS: Dict[PieceKind, Tuple[OrientationState, ...]] = {
    PieceKind.SQUARE: (
        ((0, 0), (1, 0), (0, 1), (1, 1)),
        ((1, 0), (1, 1), (0, 0), (0, 1)),
        ((1, 1), (0, 1), (1, 0), (0, 0)),
        ((0, 1), (0, 0), (1, 1), (1, 0)),
    ),
    PieceKind.LINE: (
        ((-1, 0), (0, 0), (1, 0), (2, 0)),
        ((0, -1), (0, 0), (0, 1), (0, 2)),
        ((1, 0), (0, 0), (-1, 0), (-2, 0)),
        ((0, 1), (0, 0), (0, -1), (0, -2)),
    ),
    PieceKind.ZIGZAG_DOWN: (
        ((-1, 0), (0, 0), (0, 1), (1, 1)),
        ((0, -1), (0, 0), (-1, 0), (-1, 1)),
        ((1, 0), (0, 0), (0, -1), (-1, -1)),
        ((0, 1), (0, 0), (1, 0), (1, -1)),
    ),
    PieceKind.ZIGZAG_UP: (
        ((-1, 0), (0, 0), (0, -1), (1, -1)),
        ((0, -1), (0, 0), (1, 0), (1, 1)),
        ((1, 0), (0, 0), (0, 1), (-1, 1)),
        ((0, 1), (0, 0), (-1, 0), (-1, -1)),
    ),
    PieceKind.T: (
        ((-1, 0), (0, 0), (1, 0), (0, 1)),
        ((0, -1), (0, 0), (0, 1), (-1, 0)),
        ((1, 0), (0, 0), (-1, 0), (0, -1)),
        ((0, 1), (0, 0), (0, -1), (1, 0)),
    ),
    PieceKind.L: (
        ((0, -1), (0, 0), (0, 1), (1, 1)),
        ((1, 0), (0, 0), (-1, 0), (-1, 1)),
        ((0, 1), (0, 0), (0, -1), (-1, -1)),
        ((-1, 0), (0, 0), (1, 0), (1, -1)),
    ),
    PieceKind.J: (
        ((0, -1), (0, 0), (0, 1), (-1, 1)),
        ((1, 0), (0, 0), (-1, 0), (-1, -1)),
        ((0, 1), (0, 0), (0, -1), (1, -1)),
        ((-1, 0), (0, 0), (1, 0), (1, 1)),
    ),
}


def piece_offsets(kind: PieceKind, orientation: int) -> OrientationState:
    """Return the four block offsets for ``kind`` at ``orientation``.

    Unlike the modular rotation helpers, ``orientation`` must already be in
    ``0..3``; anything else is a caller bug and fails immediately.
    """

    assert 0 <= orientation < NUM_ORIENTATIONS, f"bad orientation {orientation!r}"
    return PIECE_OFFSETS[PieceKind(kind)][orientation]


def relative_offset(kind: PieceKind, orientation: int, block_index: int) -> Offset:
    """Return the offset of block ``block_index`` of ``kind`` at ``orientation``."""

    assert 0 <= block_index < BLOCKS_PER_PIECE, f"bad block index {block_index!r}"
    return piece_offsets(kind, orientation)[block_index]


def absolute_positions(kind: PieceKind, orientation: int, anchor: Position) -> List[Position]:
    """Return the board positions of the four blocks anchored at ``anchor``."""

    col, row = anchor
    return [(col + dx, row + dy) for dx, dy in piece_offsets(kind, orientation)]


@dataclass
class ActivePiece:
    """The single piece currently under player control."""

    kind: PieceKind
    orientation: int = 0
    anchor: Position = (0, 0)  # (column, row)

    @property
    def color(self) -> str:
        return PIECE_COLORS[self.kind]

    def rotate(self, direction: int = 1) -> None:
        """Advance (positive ``direction``) or roll back the orientation."""

        self.orientation = (self.orientation + direction) % NUM_ORIENTATIONS

    def move(self, dx: int, dy: int) -> None:
        """Translate the anchor by ``dx`` columns and ``dy`` rows."""

        col, row = self.anchor
        self.anchor = (col + dx, row + dy)

    def blocks(self) -> List[Position]:
        """Return the absolute ``(column, row)`` positions of the four blocks."""

        return absolute_positions(self.kind, self.orientation, self.anchor)
