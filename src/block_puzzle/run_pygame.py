"""Simple pygame front-end for the block puzzle engine.

The window only observes :class:`~block_puzzle.game_state.GameState`: key
presses are translated to :class:`~block_puzzle.game_state.Command` values and
the board is drawn from :meth:`GameState.visible_grid`.  Automatic descent is
driven by a :class:`~block_puzzle.scheduler.TickScheduler` on the same event
loop as the input handling.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, List, Optional

import pygame

from .config import GameConfig
from .game_state import Command, GameState
from .scheduler import TickScheduler
from .shapes import Color

# Size of a single board cell in pixels
CELL_SIZE = 30
# Width of the score and controls panel
SIDEBAR_WIDTH = 180
# Frames per second to run the game loop at
FPS = 60

BACKGROUND = (0, 0, 0)
GRID_LINE = (50, 50, 50)
TEXT_COLOR = (255, 255, 255)

# Mapping from the integer stored in the board grid to a colour
CELL_COLORS = {0: BACKGROUND}
for color in Color:
    CELL_COLORS[int(color)] = color.rgb

KEY_TO_COMMAND: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.MOVE_DOWN,
    pygame.K_UP: Command.ROTATE,
}

CONTROLS = [
    "Controls:",
    "Left: Move Left",
    "Right: Move Right",
    "Down: Move Down",
    "Up: Rotate",
]


LOGGER = logging.getLogger(__name__)


def handle_key(event: pygame.event.Event, state: GameState) -> bool:
    """Apply the command bound to ``event.key``, if any.

    ``R`` starts a new game once the current one is over.  Returns ``True``
    when the key changed the game.
    """

    if state.game_over:
        if event.key == pygame.K_r:
            state.reset()
            return True
        return False
    command = KEY_TO_COMMAND.get(event.key)
    if command is None:
        return False
    return state.on_command(command)


def draw_grid(screen: pygame.Surface, grid: List[List[int]]) -> None:
    """Render the visible grid."""

    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            rect = pygame.Rect(c * CELL_SIZE, r * CELL_SIZE, CELL_SIZE, CELL_SIZE)
            pygame.draw.rect(screen, CELL_COLORS[value], rect)
            pygame.draw.rect(screen, GRID_LINE, rect, 1)


def draw_sidebar(screen: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    left = state.board.width * CELL_SIZE + 10
    lines = [f"Score: {state.score}", ""] + CONTROLS
    for i, text in enumerate(lines):
        surface = font.render(text, True, TEXT_COLOR)
        screen.blit(surface, (left, 10 + i * (font.get_linesize() + 2)))


def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    text = font.render("Game Over", True, TEXT_COLOR)
    center = (state.board.width * CELL_SIZE // 2, state.board.height * CELL_SIZE // 2)
    screen.blit(text, text.get_rect(center=center))


class GameRunner:
    """Own the window, the game state and the tick scheduler."""

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self._running = False
        self._screen: Optional[pygame.Surface] = None
        self._state: Optional[GameState] = None
        self._clock: Optional[pygame.time.Clock] = None

    @property
    def running(self) -> bool:
        return self._running

    @property
    def state(self) -> Optional[GameState]:
        return self._state

    def _draw(self, font: pygame.font.Font, big_font: pygame.font.Font) -> None:
        if not self._screen or not self._state:
            return
        self._screen.fill(BACKGROUND)
        draw_grid(self._screen, self._state.visible_grid())
        draw_sidebar(self._screen, font, self._state)
        if self._state.game_over:
            draw_game_over(self._screen, big_font, self._state)
        pygame.display.flip()

    async def _run_loop(self) -> None:
        pygame.init()
        try:
            board_px = self.config.width * CELL_SIZE + SIDEBAR_WIDTH
            board_py = self.config.height * CELL_SIZE
            self._screen = pygame.display.set_mode((board_px, board_py))
            pygame.display.set_caption("Block Puzzle")
            self._clock = pygame.time.Clock()
            font = pygame.font.SysFont(None, 24)
            big_font = pygame.font.SysFont(None, 48)

            self._state = GameState(self.config)
            self._running = True
            async with TickScheduler(self._state, self.config.fall_interval_ms):
                while self._running:
                    for event in pygame.event.get():
                        if event.type == pygame.QUIT:
                            self._running = False
                        elif event.type == pygame.KEYDOWN:
                            if event.key == pygame.K_ESCAPE:
                                self._running = False
                            else:
                                handle_key(event, self._state)
                    self._draw(font, big_font)
                    # Yield so the scheduler task can deliver ticks
                    await asyncio.sleep(1.0 / FPS)
        finally:
            self._running = False
            pygame.quit()
            LOGGER.info("Game stopped")

    def stop(self) -> None:
        self._running = False

    def run(self) -> None:
        """Run the window until it is closed."""

        asyncio.run(self._run_loop())


def main(config: Optional[GameConfig] = None) -> None:
    GameRunner(config).run()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
