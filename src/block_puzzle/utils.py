"""Placement checks and transforms for the block puzzle engine."""

from __future__ import annotations

from typing import List, Optional

from .board import EMPTY, Board
from .piece import Piece


def is_valid(piece: Piece, board: Board) -> bool:
    """Return ``True`` if ``piece`` may occupy its current position on ``board``.

    A placement is rejected when any occupied cell falls outside the side
    walls, at or below the floor, or onto a locked cell.  Cells above the top
    row are allowed so a shape may poke out of the board while spawning or
    rotating.
    """

    for x, y in piece.cells():
        if not 0 <= x < board.width or y >= board.height:
            return False
        if y >= 0 and not board.is_empty(x, y):
            return False
    return True


def try_move(piece: Piece, board: Board, dx: int, dy: int) -> Optional[Piece]:
    """Return ``piece`` shifted by ``(dx, dy)`` or ``None`` if that is invalid."""

    candidate = piece.moved(dx, dy)
    return candidate if is_valid(candidate, board) else None


def try_rotate(piece: Piece, board: Board) -> Optional[Piece]:
    """Return ``piece`` rotated clockwise in place or ``None`` if blocked.

    No offsets are searched: a rotation that collides at the same anchor is
    rejected outright.
    """

    candidate = piece.rotated()
    return candidate if is_valid(candidate, board) else None


def render_grid(board: Board, active: Optional[Piece] = None) -> List[List[int]]:
    """Return a copy of the board grid with the active piece overlaid.

    This is a convenience for renderers that want a single 2D array to draw
    without mutating the underlying board state.  Cells of the active piece
    above the top row are not shown.
    """

    grid = board.rows()
    if active is not None:
        for x, y in active.cells():
            if 0 <= y < board.height and 0 <= x < board.width:
                grid[y][x] = int(active.color)
    return grid


def render_ascii(grid: List[List[int]]) -> str:
    """Render ``grid`` as text, ``#`` for filled cells and ``.`` for empty ones."""

    return "\n".join("".join("." if cell == EMPTY else "#" for cell in row) for row in grid)
