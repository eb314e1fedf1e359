"""Piece shapes and colours.

Shapes are stored as tuples of tuples so catalog entries can never be changed
by a transform; rotating a piece always builds a new matrix.
"""

from __future__ import annotations

import random
from enum import Enum, IntEnum
from typing import Dict, Tuple

Shape = Tuple[Tuple[int, ...], ...]


class ShapeKind(str, Enum):
    """The five shapes that can be dealt."""

    I = "I"
    O = "O"
    T = "T"
    Z = "Z"
    S = "S"


class Color(IntEnum):
    """Colour token written into the grid when a piece locks.

    ``0`` is reserved for empty cells, so the members start at ``1``.
    """

    RED = 1
    GREEN = 2
    BLUE = 3
    YELLOW = 4
    MAGENTA = 5
    CYAN = 6

    @property
    def hex(self) -> str:
        return COLOR_HEX[self]

    @property
    def rgb(self) -> Tuple[int, int, int]:
        value = COLOR_HEX[self].lstrip("#")
        return tuple(int(value[i:i + 2], 16) for i in (0, 2, 4))  # type: ignore[return-value]


COLOR_HEX: Dict[Color, str] = {
    Color.RED: "#FF0000",
    Color.GREEN: "#00FF00",
    Color.BLUE: "#0000FF",
    Color.YELLOW: "#FFFF00",
    Color.MAGENTA: "#FF00FF",
    Color.CYAN: "#00FFFF",
}


SHAPES: Dict[ShapeKind, Shape] = {
    ShapeKind.I: ((1, 1, 1, 1),),
    ShapeKind.O: ((1, 1), (1, 1)),
    ShapeKind.T: ((1, 1, 1), (0, 1, 0)),
    ShapeKind.Z: ((1, 1, 0), (0, 1, 1)),
    ShapeKind.S: ((0, 1, 1), (1, 1, 0)),
}


def shape_width(shape: Shape) -> int:
    """Return the number of columns in ``shape``."""

    return len(shape[0]) if shape else 0


def random_shape(rng: random.Random) -> Tuple[Shape, Color]:
    """Draw a shape and a colour from ``rng``.

    Both draws are uniform and independent of each other.  ``rng`` only needs
    a ``choice`` method, so tests may pass a scripted stand-in.
    """

    kind = rng.choice(list(ShapeKind))
    color = rng.choice(list(Color))
    return SHAPES[kind], color
