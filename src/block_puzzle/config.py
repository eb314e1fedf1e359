"""Configuration for a block puzzle game session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# Dimensions of the standard playfield.
WIDTH = 10
HEIGHT = 20

# Milliseconds between automatic downward moves.
FALL_INTERVAL_MS = 1000

POINTS_PER_LINE = 100


@dataclass(frozen=True)
class GameConfig:
    """Static settings shared by the engine, scheduler and front-ends."""

    width: int = WIDTH
    height: int = HEIGHT
    fall_interval_ms: int = FALL_INTERVAL_MS
    points_per_line: int = POINTS_PER_LINE
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {self.width}x{self.height}")
        if self.fall_interval_ms <= 0:
            raise ValueError("fall_interval_ms must be positive")
        if self.points_per_line < 0:
            raise ValueError("points_per_line must not be negative")
