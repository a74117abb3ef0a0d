"""Game configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .board import HEIGHT, WIDTH
from .pieces import SELECTION_ORDER, PieceKind
from .utils import GRAVITY_MS


# The reference selection draws an index from ``range(6)``, so the last kind
# in ``SELECTION_ORDER`` (``J``) is never spawned.
REFERENCE_SPAWN_KINDS: Tuple[PieceKind, ...] = SELECTION_ORDER[:6]


@dataclass
class GameConfig:
    width: int = WIDTH
    height: int = HEIGHT
    gravity_ms: float = GRAVITY_MS
    random_seed: Optional[int] = None
    all_kinds: bool = False
    spawn_kinds: Tuple[PieceKind, ...] = field(default=REFERENCE_SPAWN_KINDS)

    def __post_init__(self) -> None:
        if self.width < 5 or self.height < 4:
            raise ValueError("Board must be at least 5 columns by 4 rows")
        if self.gravity_ms <= 0:
            raise ValueError("gravity_ms must be positive")
        if self.all_kinds:
            self.spawn_kinds = SELECTION_ORDER
        self.spawn_kinds = tuple(PieceKind(k) for k in self.spawn_kinds)
        if not self.spawn_kinds:
            raise ValueError("spawn_kinds must not be empty")

    @property
    def spawn_anchor(self) -> Tuple[int, int]:
        """Column and row at which new pieces appear."""

        return (self.width // 2, 1)
