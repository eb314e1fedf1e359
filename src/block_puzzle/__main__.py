"""Command line entry point for the block puzzle engine.

Run with: `python -m block_puzzle`

By default this prints the board as ASCII after a number of timer ticks, which
is handy as a smoke test of the engine without a display.  Pass ``--pygame``
to open the playable window instead.
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .config import GameConfig
from .game_state import GameState
from .utils import render_ascii


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="block_puzzle", description=__doc__)
    parser.add_argument("--width", type=int, default=GameConfig.width, help="Board width in cells.")
    parser.add_argument("--height", type=int, default=GameConfig.height, help="Board height in cells.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece generator.")
    parser.add_argument("--ticks", type=int, default=0, help="Timer ticks to simulate before printing.")
    parser.add_argument(
        "--interval-ms",
        type=int,
        default=GameConfig.fall_interval_ms,
        help="Milliseconds between automatic drops in the pygame window.",
    )
    parser.add_argument("--pygame", action="store_true", help="Open the pygame window.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def run_ascii(config: GameConfig, ticks: int) -> GameState:
    state = GameState(config)
    for _ in range(max(0, ticks)):
        if state.game_over:
            break
        state.tick()
    print(render_ascii(state.visible_grid()))
    print(f"Score: {state.score}{'  GAME OVER' if state.game_over else ''}")
    return state


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")
    config = GameConfig(
        width=args.width,
        height=args.height,
        fall_interval_ms=args.interval_ms,
        seed=args.seed,
    )
    if args.pygame:
        from .run_pygame import main as run_window

        run_window(config)
    else:
        run_ascii(config, args.ticks)


if __name__ == "__main__":
    main()
