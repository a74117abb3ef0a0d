"""Simple pygame front-end for the engine.

Keys are translated into engine commands and queued; each frame the engine
drains the queue and applies due gravity.  Drawing is driven by the engine's
notifications: the renderer keeps its own copy of the settled blocks and of
the score, and shows the score for a few seconds after every clear.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, List, Optional, Sequence

import pygame

from .blocks import SettledBlock
from .config import GameConfig
from .engine import Command, GameEngine
from .events import GameListener, LoggingListener
from .pieces import PIECE_COLORS, PieceKind, Position, absolute_positions

LOGGER = logging.getLogger(__name__)

# Size of a single board cell in pixels
CELL_SIZE = 30
# Coloured margin around the board and inner padding
BORDER = 5
PADDING = 3
# Frames per second to run the game loop at
FPS = 60
# Milliseconds the score stays visible after a clear
SCORE_FADE_MS = 3000

BACKGROUND = (238, 238, 238)
BOARD_COLOR = (68, 68, 68)

KEY_COMMANDS: Dict[int, Command] = {
    pygame.K_LEFT: Command.LEFT,
    pygame.K_RIGHT: Command.RIGHT,
    pygame.K_UP: Command.ROTATE,
    pygame.K_DOWN: Command.DROP,
    pygame.K_SPACE: Command.DROP,
}


def handle_key(key: int, engine: GameEngine) -> Optional[Command]:
    """Queue the command bound to ``key`` and return it, if any."""

    command = KEY_COMMANDS.get(key)
    if command is not None:
        engine.submit(command)
    return command


class BoardView(GameListener):
    """Rendering model rebuilt from engine notifications."""

    def __init__(self) -> None:
        self.piece: Optional[tuple] = None
        self.blocks: Dict[int, SettledBlock] = {}
        self.score = 0
        self.score_timer = 0.0

    def piece_changed(self, kind: PieceKind, orientation: int, anchor: Position) -> None:
        self.piece = (kind, orientation, anchor)

    def piece_locked(self, blocks: Sequence[SettledBlock]) -> None:
        self.piece = None
        for block in blocks:
            self.blocks[block.id] = block

    def rows_cleared(self, count, blocks, board) -> None:
        self.blocks = {b.id: b for b in blocks}

    def score_changed(self, score: int) -> None:
        self.score = score
        self.score_timer = SCORE_FADE_MS

    def game_reset(self) -> None:
        self.blocks.clear()
        self.score = 0
        self.score_timer = 0.0

    def advance(self, dt_ms: float) -> None:
        self.score_timer = max(0.0, self.score_timer - dt_ms)

    @property
    def score_alpha(self) -> int:
        """Opacity of the score text, fading linearly to zero."""

        return int(255 * self.score_timer / SCORE_FADE_MS)

    def piece_cells(self) -> List[Position]:
        if self.piece is None:
            return []
        kind, orientation, anchor = self.piece
        return absolute_positions(kind, orientation, anchor)


def _cell_center(col: int, row: int) -> tuple:
    return (
        BORDER + PADDING + col * CELL_SIZE + CELL_SIZE // 2,
        BORDER + PADDING + row * CELL_SIZE + CELL_SIZE // 2,
    )


def draw(screen: pygame.Surface, view: BoardView, config: GameConfig, font) -> None:
    """Render the board, settled blocks, the active piece and the score."""

    screen.fill(BACKGROUND)
    inner = pygame.Rect(
        BORDER,
        BORDER,
        config.width * CELL_SIZE + 2 * PADDING,
        config.height * CELL_SIZE + 2 * PADDING,
    )
    pygame.draw.rect(screen, BOARD_COLOR, inner)
    radius = CELL_SIZE // 2 - 2
    for block in view.blocks.values():
        if block.row >= 0:
            pygame.draw.circle(screen, pygame.Color(block.color), _cell_center(*block.position), radius)
    if view.piece is not None:
        color = pygame.Color(PIECE_COLORS[view.piece[0]])
        for col, row in view.piece_cells():
            if row >= 0:
                pygame.draw.circle(screen, color, _cell_center(col, row), radius)
    if view.score_alpha:
        text = font.render(f"Score: {view.score}", True, (0, 0, 0))
        text.set_alpha(view.score_alpha)
        rect = text.get_rect(center=(screen.get_width() // 2, screen.get_height() // 2))
        screen.blit(text, rect)


class GameRunner:
    """Manage the game loop with start/pause/resume/stop controls."""

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self.view = BoardView()
        self.engine = GameEngine(self.config, listeners=[self.view, LoggingListener()])
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    async def _run_loop(self) -> None:
        pygame.init()
        size = (
            self.config.width * CELL_SIZE + 2 * (BORDER + PADDING),
            self.config.height * CELL_SIZE + 2 * (BORDER + PADDING),
        )
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption("blockfall")
        font = pygame.font.SysFont(None, 36)
        clock = pygame.time.Clock()

        self.engine.reset()
        self.engine.start()
        LOGGER.info("Game started")
        self._running = True
        while self._running:
            dt = clock.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self._running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_p:
                        self.toggle_pause()
                    elif event.key == pygame.K_r:
                        self.engine.reset()
                    elif not self.engine.paused:
                        handle_key(event.key, self.engine)

            self.engine.update(dt)
            self.view.advance(dt)
            draw(screen, self.view, self.config, font)
            pygame.display.set_caption(
                f"blockfall - {'Paused - ' if self.engine.paused else ''}Score: {self.engine.score}"
            )
            pygame.display.flip()
            await asyncio.sleep(0)

        pygame.quit()
        LOGGER.info("Game stopped")

    def toggle_pause(self) -> None:
        if self.engine.paused:
            self.engine.start()
            LOGGER.info("Resumed")
        else:
            self.engine.stop()
            LOGGER.info("Paused")

    def start(self) -> None:
        if self._running:
            LOGGER.info("Game already running")
            return
        asyncio.run(self._run_loop())

    def stop(self) -> None:
        if not self._running:
            LOGGER.info("Stop ignored: game not running")
            return
        self._running = False


def main(config: Optional[GameConfig] = None) -> None:
    GameRunner(config).start()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
