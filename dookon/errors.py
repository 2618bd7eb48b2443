"""
Application Errors

`AppError` tags a failure with an HTTP status and whether it is an expected,
client-facing condition (operational) or a defect. `catch_async` adapts
`(request, response, next)` handlers so that a failing coroutine reaches
`next` instead of being dropped.
"""

import asyncio
import functools
import inspect
import traceback
from typing import Any, Awaitable, Callable, Optional, TypeVar

import structlog

logger = structlog.get_logger(__name__)

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")

NextFunction = Callable[[BaseException], Any]
AsyncHandler = Callable[[RequestT, ResponseT, NextFunction], Awaitable[Any]]
TaskHandler = Callable[[RequestT, ResponseT, NextFunction], "asyncio.Task[Any]"]


class AppError(Exception):
    """
    Error carrying an HTTP status code.

    Attributes:
        message: Human readable message
        status_code: HTTP status to answer with
        is_operational: True for expected conditions safe to show a client
        stack: Call stack at construction, without the constructor frames
    """

    def __init__(self, message: str, status_code: int, is_operational: bool = True):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.is_operational = is_operational
        self.stack = self._capture_stack()

    def _capture_stack(self) -> traceback.StackSummary:
        frame = inspect.currentframe()
        # Skip this method and every __init__ in the constructor chain
        while frame is not None and (
            frame.f_code is AppError._capture_stack.__code__
            or (frame.f_code.co_name == "__init__" and frame.f_locals.get("self") is self)
        ):
            frame = frame.f_back
        stack = traceback.StackSummary.extract(traceback.walk_stack(frame))
        stack.reverse()
        return stack

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, status_code={self.status_code}, "
            f"is_operational={self.is_operational})"
        )


def catch_async(handler: AsyncHandler) -> TaskHandler:
    """
    Wrap an async `(request, response, next)` handler.

    The returned handler does not suspend: it schedules `handler` as a task on
    the running loop and returns that task. If the task fails, `next` is
    called with the exception exactly once. Cancellation is not forwarded.

    Example:
        @catch_async
        async def show_store(request, response, next):
            raise AppError("Store not found", 404)
    """

    @functools.wraps(handler)
    def wrapper(request, response, next: NextFunction) -> "asyncio.Task[Any]":
        task = asyncio.ensure_future(handler(request, response, next))

        def forward_failure(done: "asyncio.Future[Any]") -> None:
            if done.cancelled():
                return
            exc: Optional[BaseException] = done.exception()
            if exc is not None:
                logger.debug("Forwarding handler failure", error_type=type(exc).__name__)
                next(exc)

        task.add_done_callback(forward_failure)
        return task

    return wrapper
