"""Bridge from callback-style APIs to awaitables."""

import asyncio
import threading
from typing import Generic, TypeVar

from geosearch.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class OneShotBridge(Generic[T]):
    """First-call-wins bridge from a callback to a single awaitable result.

    resolve()/fail() may be called from any thread and any number of
    times; only the first call settles the result, later calls return
    False and change nothing. Settlement always happens on the event loop
    the bridge was created on. If the waiter was cancelled, a late callback
    is dropped, as is a first callback arriving after the loop closed.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop or asyncio.get_running_loop()
        self._future: asyncio.Future[T] = self._loop.create_future()
        self._lock = threading.Lock()
        self._fired = False

    @property
    def fired(self) -> bool:
        """Whether a callback has already claimed the result."""
        return self._fired

    def resolve(self, value: T) -> bool:
        """Settle with value. Returns False if already settled."""
        return self._fire(value, None)

    def fail(self, error: BaseException) -> bool:
        """Settle with error. Returns False if already settled."""
        return self._fire(None, error)

    def _fire(self, value: T | None, error: BaseException | None) -> bool:
        with self._lock:
            if self._fired:
                return False
            self._fired = True
        if self._loop.is_closed():
            logger.debug("Event loop closed, dropping callback result")
            return True
        self._loop.call_soon_threadsafe(self._settle, value, error)
        return True

    def _settle(self, value: T | None, error: BaseException | None) -> None:
        if self._future.done():
            return
        if error is not None:
            self._future.set_exception(error)
        else:
            self._future.set_result(value)  # type: ignore[arg-type]

    async def wait(self) -> T:
        """Wait for the first callback. Cancelling the waiter cancels the result."""
        return await self._future
