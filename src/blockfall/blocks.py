"""Settled blocks and the store that owns them."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Iterator, List

from .pieces import Position


@dataclass
class SettledBlock:
    """A single locked block.

    ``id`` is unique for the lifetime of a game and is what the board stores
    in the cell the block occupies.
    """

    id: int
    position: Position  # (column, row)
    color: str

    @property
    def column(self) -> int:
        return self.position[0]

    @property
    def row(self) -> int:
        return self.position[1]


class BlockStore:
    """Collection of settled blocks indexed by id, in lock order."""

    def __init__(self) -> None:
        self._blocks: Dict[int, SettledBlock] = {}

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[SettledBlock]:
        return iter(list(self._blocks.values()))

    def __contains__(self, block_id: object) -> bool:
        return block_id in self._blocks

    def add(self, block: SettledBlock) -> None:
        """Insert ``block``.

        Raises:
            ValueError: If a block with the same id is already stored.
        """
        if block.id in self._blocks:
            raise ValueError(f"Duplicate block id {block.id}")
        self._blocks[block.id] = block

    def get(self, block_id: int) -> SettledBlock:
        return self._blocks[block_id]

    def remove(self, block_id: int) -> SettledBlock:
        return self._blocks.pop(block_id)

    def in_row(self, row: int) -> List[SettledBlock]:
        return [b for b in self._blocks.values() if b.row == row]

    def shift_down_above(self, cleared_row: int) -> None:
        """Move every block whose row is above ``cleared_row`` down one row."""

        for block in self._blocks.values():
            col, row = block.position
            if row < cleared_row:
                block.position = (col, row + 1)

    def clear(self) -> None:
        self._blocks.clear()

    def snapshot(self) -> List[SettledBlock]:
        """Return copies of all blocks, safe to hand to listeners."""

        return [replace(b) for b in self._blocks.values()]
