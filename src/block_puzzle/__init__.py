"""Falling-block puzzle engine."""

from .board import Board
from .config import GameConfig
from .game_state import Command, GameState, LockResult, Phase, lock_piece
from .piece import Piece, rotate_shape
from .scheduler import TickScheduler
from .shapes import SHAPES, Color, ShapeKind, random_shape
from .utils import is_valid, render_ascii, render_grid, try_move, try_rotate

__all__ = [
    "Board",
    "Color",
    "Command",
    "GameConfig",
    "GameState",
    "LockResult",
    "Phase",
    "Piece",
    "SHAPES",
    "ShapeKind",
    "TickScheduler",
    "is_valid",
    "lock_piece",
    "random_shape",
    "render_ascii",
    "render_grid",
    "rotate_shape",
    "try_move",
    "try_rotate",
]
