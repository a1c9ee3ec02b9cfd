"""Single-flight execution of an async operation.

Concurrent callers of ``Coalescer.execute`` share one running execution of
the wrapped operation instead of each starting their own. Uses an
``asyncio.Task`` held in a single slot so only one execution runs while the
others await its result.
"""

import asyncio
from collections.abc import Awaitable, Callable
from logging import getLogger
from typing import Generic, TypeVar

from .constants import LOGGER_NAME

T = TypeVar("T")


class Coalescer(Generic[T]):
    """Runs at most one execution of ``operation`` at a time.

    Callers arriving while an execution is running join it and receive the
    same value, or the very same exception instance. Once an execution
    finishes the slot is released before any caller is resumed, so a caller
    arriving afterwards starts a fresh execution. A caller arriving in the
    short window between completion and release joins the finished task and
    gets its result.

    Cancelling one caller's wait does not cancel the shared execution.

    Attributes:
        executions: Number of times the operation has been started.
    """

    def __init__(self, operation: Callable[[], Awaitable[T]]) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._operation = operation
        self._task: asyncio.Future[T] | None = None
        self.executions = 0

    @property
    def is_running(self) -> bool:
        return self._task is not None

    async def execute(self) -> T:
        """Run the operation, or join the execution already in flight.

        Returns:
            The operation's result.

        Raises:
            Exception: Whatever the operation raised, shared by every caller
                of that execution.
        """
        task = self._task
        if task is None:
            task = asyncio.ensure_future(self._operation())
            # Registered before anyone awaits, so it runs ahead of the waiters.
            task.add_done_callback(self._release)
            self._task = task
            self.executions += 1
        else:
            self._logger.debug("Joining in-flight execution")

        return await asyncio.shield(task)

    def _release(self, task: "asyncio.Future[T]") -> None:
        if self._task is task:
            self._task = None
