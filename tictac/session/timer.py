"""
Timers - Single-shot, cancellable delayed callbacks.

The game loop uses a Scheduler to pace the automated player's move.
Schedulers never run callbacks concurrently with the caller: the
asyncio scheduler runs them on the event loop thread, the immediate
scheduler runs them inline.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable
import asyncio


class TimerHandle(ABC):
    """A pending callback that can be cancelled before it fires."""

    @abstractmethod
    def cancel(self) -> None:
        pass


class Scheduler(ABC):
    """Abstract source of delayed callbacks."""

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """
        Run callback once after delay seconds.

        Returns a handle whose cancel() prevents the callback from running.
        """
        pass


class _AsyncioHandle(TimerHandle):
    def __init__(self, handle: asyncio.TimerHandle):
        self._handle = handle

    def cancel(self) -> None:
        self._handle.cancel()


class AsyncioScheduler(Scheduler):
    """
    Scheduler backed by an asyncio event loop.

    Usage:
        loop = GameLoop(scheduler=AsyncioScheduler())
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        return _AsyncioHandle(self.loop.call_later(delay, callback))


class _DoneHandle(TimerHandle):
    def cancel(self) -> None:
        pass


class ImmediateScheduler(Scheduler):
    """
    Runs callbacks synchronously, ignoring the delay.

    Used for scripted and headless play.
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        callback()
        return _DoneHandle()
