from __future__ import annotations

import asyncio

import pytest

from block_puzzle.game_state import Command, GameState
from block_puzzle.scheduler import TickScheduler
from block_puzzle.shapes import Color, ShapeKind


class CountingState:
    def __init__(self) -> None:
        self.ticks = 0
        self.commands = []

    def tick(self) -> bool:
        self.ticks += 1
        return True

    def on_command(self, command) -> bool:
        self.commands.append(command)
        return True


async def _yield_sleep(_seconds: float) -> None:
    await asyncio.sleep(0)


class OneShape:
    def choice(self, seq):
        return ShapeKind.O if ShapeKind.O in seq else Color.RED


def test_ticks_are_delivered_until_stop() -> None:
    state = CountingState()

    async def scenario() -> tuple[int, int]:
        scheduler = TickScheduler(state, interval_ms=1000, sleep=_yield_sleep)
        scheduler.start()
        for _ in range(10):
            await asyncio.sleep(0)
        await scheduler.stop()
        delivered = state.ticks
        for _ in range(10):
            await asyncio.sleep(0)
        return delivered, scheduler.ticks

    delivered, counted = asyncio.run(scenario())
    assert delivered > 0
    assert counted == delivered
    assert state.ticks == delivered


def test_stop_cancels_a_pending_interval() -> None:
    state = CountingState()

    async def scenario() -> TickScheduler:
        scheduler = TickScheduler(state, interval_ms=60_000)
        task = scheduler.start()
        await asyncio.sleep(0)
        await scheduler.stop()
        assert task.done()
        return scheduler

    scheduler = asyncio.run(scenario())
    assert state.ticks == 0
    assert not scheduler.running


def test_real_timer_drives_the_game() -> None:
    state = GameState(rng=OneShape())

    async def scenario() -> TickScheduler:
        async with TickScheduler(state, interval_ms=1) as scheduler:
            while scheduler.ticks < 3:
                await asyncio.sleep(0.005)
        return scheduler

    scheduler = asyncio.run(scenario())
    assert not scheduler.running
    assert scheduler.ticks >= 3
    assert (state.active.y, state.pieces) != (0, 0)


def test_commands_from_other_threads_run_on_the_loop() -> None:
    state = GameState(rng=OneShape())
    start_x = state.active.x

    async def scenario() -> None:
        async with TickScheduler(state, interval_ms=60_000) as scheduler:
            await asyncio.to_thread(scheduler.post_command, Command.MOVE_LEFT)
            await asyncio.sleep(0)
            assert scheduler.submit(Command.MOVE_LEFT)

    asyncio.run(scenario())
    assert state.active.x == start_x - 2


def test_post_command_requires_running_scheduler() -> None:
    scheduler = TickScheduler(CountingState())
    with pytest.raises(RuntimeError):
        scheduler.post_command(Command.ROTATE)


def test_start_outside_event_loop_raises() -> None:
    scheduler = TickScheduler(CountingState())
    with pytest.raises(RuntimeError):
        scheduler.start()


def test_interval_must_be_positive() -> None:
    with pytest.raises(ValueError):
        TickScheduler(CountingState(), interval_ms=0)
