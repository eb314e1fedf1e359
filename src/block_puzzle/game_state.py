"""High level game state: spawning, movement, locking and line clears."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from .board import Board
from .config import POINTS_PER_LINE, GameConfig
from .piece import Piece
from .shapes import random_shape
from .utils import is_valid, render_grid, try_move, try_rotate


LOGGER = logging.getLogger(__name__)


class Phase(str, Enum):
    """Where the game currently is in its spawn/fall/lock cycle."""

    SPAWNING = "spawning"
    FALLING = "falling"
    LOCKING = "locking"
    GAME_OVER = "game_over"


class Command(str, Enum):
    """Abstract player commands accepted by :meth:`GameState.on_command`."""

    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MOVE_DOWN = "move_down"
    ROTATE = "rotate"


@dataclass(frozen=True)
class LockResult:
    lines_cleared: int
    score_delta: int


def lock_piece(
    piece: Optional[Piece], board: Board, points_per_line: int = POINTS_PER_LINE
) -> LockResult:
    """Merge ``piece`` into ``board`` and clear any completed rows.

    Cells of the piece above the top row are dropped.  Scoring is linear:
    every cleared row is worth ``points_per_line`` regardless of how many
    rows clear together.

    Raises:
        RuntimeError: If there is no piece to lock.
    """

    if piece is None:
        raise RuntimeError("No active piece to lock")
    color = int(piece.color)
    board.write_cells((x, y, color) for x, y in piece.cells() if y >= 0)
    cleared = board.clear_full_rows()
    return LockResult(lines_cleared=cleared, score_delta=cleared * points_per_line)


class GameState:
    """Mutable state for a block puzzle game session.

    The state owns the board, the falling piece and the score.  All changes go
    through :meth:`tick` and :meth:`on_command`; renderers only read
    :meth:`visible_grid`, :attr:`score` and :attr:`game_over`.

    Parameters
    ----------
    config:
        Board size and scoring settings.  Defaults to :class:`GameConfig`.
    rng:
        Random source used to deal pieces.  Defaults to a ``random.Random``
        seeded from ``config.seed``.
    board:
        Optional pre-filled board for the first game.  :meth:`reset` always
        starts from an empty one.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        board: Optional[Board] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.board = board if board is not None else Board(self.config.width, self.config.height)
        if (self.board.width, self.board.height) != (self.config.width, self.config.height):
            raise ValueError("Board dimensions do not match the configuration")
        self.active: Optional[Piece] = None
        self.phase = Phase.SPAWNING
        self.score = 0
        self.lines_cleared = 0
        self.pieces = 0
        self._commands: Dict[Command, Callable[[], bool]] = {
            Command.MOVE_LEFT: lambda: self.move_horizontal(-1),
            Command.MOVE_RIGHT: lambda: self.move_horizontal(1),
            Command.MOVE_DOWN: self.move_down,
            Command.ROTATE: self.rotate,
        }
        LOGGER.info("Game started on a %dx%d board", self.board.width, self.board.height)
        self.spawn()

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    def reset(self) -> None:
        """Start a new game on an empty board."""

        self.board = Board(self.config.width, self.config.height)
        self.active = None
        self.phase = Phase.SPAWNING
        self.score = 0
        self.lines_cleared = 0
        self.pieces = 0
        LOGGER.info("Game reset")
        self.spawn()

    def spawn(self) -> Optional[Piece]:
        """Deal the next piece at the top centre of the board.

        If the new piece does not fit the game is over and ``None`` is
        returned.

        Raises:
            RuntimeError: If called while a piece is still falling or after
                the game has ended.
        """

        if self.phase is not Phase.SPAWNING:
            raise RuntimeError(f"Cannot spawn while {self.phase.value}")
        shape, color = random_shape(self.rng)
        piece = Piece(shape, color)
        piece = piece.moved((self.board.width - piece.width) // 2, 0)
        if not is_valid(piece, self.board):
            self.phase = Phase.GAME_OVER
            LOGGER.info("Game over. Final score: %d", self.score)
            return None
        self.active = piece
        self.phase = Phase.FALLING
        LOGGER.debug("Spawned %s piece at (%d, %d)", color.name, piece.x, piece.y)
        return piece

    def move_horizontal(self, direction: int) -> bool:
        """Shift the piece one column left (``-1``) or right (``1``)."""

        if direction not in (-1, 1):
            raise ValueError(f"direction must be -1 or 1, got {direction}")
        if self.phase is not Phase.FALLING or self.active is None:
            return False
        candidate = try_move(self.active, self.board, direction, 0)
        if candidate is None:
            return False
        self.active = candidate
        return True

    def rotate(self) -> bool:
        """Rotate the piece clockwise if the rotated shape fits."""

        if self.phase is not Phase.FALLING or self.active is None:
            return False
        candidate = try_rotate(self.active, self.board)
        if candidate is None:
            return False
        self.active = candidate
        return True

    def move_down(self) -> bool:
        """Move the piece down one row, locking it if it has landed.

        Returns ``True`` if the piece moved.  When it could not, the piece is
        locked, rows are cleared and the next piece is spawned before
        returning ``False``.
        """

        if self.phase is not Phase.FALLING or self.active is None:
            return False
        candidate = try_move(self.active, self.board, 0, 1)
        if candidate is not None:
            self.active = candidate
            return True
        self._lock_and_spawn()
        return False

    def _lock_and_spawn(self) -> None:
        self.phase = Phase.LOCKING
        result = lock_piece(self.active, self.board, self.config.points_per_line)
        self.active = None
        self.pieces += 1
        if result.lines_cleared:
            self.lines_cleared += result.lines_cleared
            self.score += result.score_delta
            LOGGER.info("Cleared %d row(s). Score: %d", result.lines_cleared, self.score)
        LOGGER.debug("Locked piece #%d", self.pieces)
        self.phase = Phase.SPAWNING
        self.spawn()

    def tick(self) -> bool:
        """Advance the game by one timer step."""

        if self.game_over:
            return False
        return self.move_down()

    def on_command(self, command: Union[Command, str]) -> bool:
        """Apply a player command; ignored once the game is over.

        Raises:
            ValueError: If ``command`` is not a known :class:`Command`.
        """

        command = Command(command)
        if self.game_over:
            return False
        return self._commands[command]()

    def visible_grid(self) -> List[List[int]]:
        """Return the locked grid with the falling piece drawn on top."""

        return render_grid(self.board, self.active)
