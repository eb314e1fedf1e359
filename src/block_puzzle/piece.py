"""The falling piece and its transforms.

A :class:`Piece` is a value: moving or rotating one returns a new candidate
and leaves the original untouched, so a rejected candidate can simply be
dropped.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, Tuple

from .shapes import Color, Shape, shape_width


def rotate_shape(shape: Shape) -> Shape:
    """Return ``shape`` rotated 90 degrees clockwise.

    Cell ``(i, j)`` of the result is cell ``(rows - 1 - j, i)`` of ``shape``,
    i.e. the matrix is transposed and each resulting row reversed.  Rows and
    columns swap, so non-square shapes change dimensions.
    """

    return tuple(tuple(column) for column in zip(*shape[::-1]))


@dataclass(frozen=True)
class Piece:
    """Shape, anchor and colour of the piece currently falling."""

    shape: Shape
    color: Color
    x: int = 0
    y: int = 0

    @property
    def width(self) -> int:
        return shape_width(self.shape)

    @property
    def height(self) -> int:
        return len(self.shape)

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield the absolute ``(x, y)`` of every occupied cell."""

        for dy, row in enumerate(self.shape):
            for dx, value in enumerate(row):
                if value:
                    yield self.x + dx, self.y + dy

    def moved(self, dx: int, dy: int) -> "Piece":
        return replace(self, x=self.x + dx, y=self.y + dy)

    def rotated(self) -> "Piece":
        """Return the piece rotated clockwise about its unchanged anchor."""

        return replace(self, shape=rotate_shape(self.shape))
