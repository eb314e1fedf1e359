"""Timer that drives automatic descent on an ``asyncio`` event loop.

Every change to a :class:`~block_puzzle.game_state.GameState` happens on the
loop that runs the scheduler: timer ticks run there directly, and commands
coming from other threads are handed over with
:meth:`TickScheduler.post_command`.  Because each engine call is synchronous a
lock-and-clear step can never interleave with a command.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional, Union

from .config import FALL_INTERVAL_MS
from .game_state import Command, GameState


LOGGER = logging.getLogger(__name__)


class TickScheduler:
    """Call ``state.tick()`` every ``interval_ms`` until stopped."""

    def __init__(
        self,
        state: GameState,
        interval_ms: float = FALL_INTERVAL_MS,
        *,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        self.state = state
        self.interval_ms = interval_ms
        self.ticks = 0
        self._sleep = sleep
        self._running = False
        self._task: Optional[asyncio.Task] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    @property
    def running(self) -> bool:
        return self._running

    async def _run_loop(self) -> None:
        while self._running:
            await self._sleep(self.interval_ms / 1000.0)
            # stop() may have been called while sleeping
            if not self._running:
                break
            self.state.tick()
            self.ticks += 1

    def start(self) -> asyncio.Task:
        """Start ticking on the running event loop and return the task.

        Raises:
            RuntimeError: If called outside a running event loop.
        """

        if self._task is not None and not self._task.done():
            LOGGER.debug("Scheduler already running")
            return self._task
        self._loop = asyncio.get_running_loop()
        self._running = True
        self._task = self._loop.create_task(self._run_loop())
        LOGGER.debug("Scheduler started with a %s ms interval", self.interval_ms)
        return self._task

    async def stop(self) -> None:
        """Stop the timer; no tick is delivered once this returns."""

        self._running = False
        task, self._task = self._task, None
        if task is None:
            return
        if not task.done():
            task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        LOGGER.debug("Scheduler stopped after %d tick(s)", self.ticks)

    def submit(self, command: Union[Command, str]) -> bool:
        """Apply ``command`` immediately; call from the loop's own thread."""

        return self.state.on_command(command)

    def post_command(self, command: Union[Command, str]) -> None:
        """Queue ``command`` from any thread to run on the scheduler's loop.

        Raises:
            RuntimeError: If the scheduler has not been started.
        """

        if self._loop is None or not self._running:
            raise RuntimeError("Scheduler is not running")
        self._loop.call_soon_threadsafe(self._apply_posted, Command(command))

    def _apply_posted(self, command: Command) -> None:
        if self._running:
            self.state.on_command(command)

    async def __aenter__(self) -> "TickScheduler":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()
