from __future__ import annotations

import random

from block_puzzle.shapes import COLOR_HEX, SHAPES, Color, ShapeKind, random_shape, shape_width


def test_catalog_contains_the_five_shapes() -> None:
    assert set(SHAPES) == set(ShapeKind)
    assert SHAPES[ShapeKind.I] == ((1, 1, 1, 1),)
    assert SHAPES[ShapeKind.O] == ((1, 1), (1, 1))
    assert SHAPES[ShapeKind.T] == ((1, 1, 1), (0, 1, 0))
    assert shape_width(SHAPES[ShapeKind.I]) == 4
    for shape in SHAPES.values():
        assert sum(map(sum, shape)) == 4


def test_palette_has_six_colours() -> None:
    assert len(Color) == 6
    assert min(int(c) for c in Color) == 1
    assert Color.RED.hex == "#FF0000"
    assert Color.CYAN.rgb == (0, 255, 255)
    assert set(COLOR_HEX) == set(Color)


def test_random_shape_uses_injected_source() -> None:
    class Scripted:
        def __init__(self) -> None:
            self.calls = []

        def choice(self, seq):
            self.calls.append(list(seq))
            return seq[-1]

    rng = Scripted()
    shape, color = random_shape(rng)
    assert shape == SHAPES[ShapeKind.S]
    assert color is Color.CYAN
    assert rng.calls == [list(ShapeKind), list(Color)]


def test_random_shape_is_reproducible_and_covers_catalog() -> None:
    draws_a = [random_shape(random.Random(7)) for _ in range(3)]
    draws_b = [random_shape(random.Random(7)) for _ in range(3)]
    assert draws_a == draws_b

    rng = random.Random(0)
    seen_shapes = set()
    seen_colors = set()
    for _ in range(500):
        shape, color = random_shape(rng)
        seen_shapes.add(shape)
        seen_colors.add(color)
    assert seen_shapes == set(SHAPES.values())
    assert seen_colors == set(Color)
