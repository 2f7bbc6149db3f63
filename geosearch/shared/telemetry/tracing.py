"""Span decorator for coordinator and provider coroutines."""

import asyncio
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

_tracer = trace.get_tracer("geosearch")


async def run_in_span(span: trace.Span, coro: Awaitable[Any]) -> Any:
    """Await coro and record its outcome on span.

    Cancellation is an event, not an error: a preempted search is normal.
    Domain and provider failures mark the span as an error.
    """
    try:
        result = await coro
    except asyncio.CancelledError:
        span.add_event("cancelled")
        raise
    except Exception as e:
        span.set_status(Status(StatusCode.ERROR, str(e)))
        span.record_exception(e)
        raise
    span.set_status(Status(StatusCode.OK))
    return result


def traced(span_name: str) -> Callable:
    """Run the decorated coroutine function inside a span named span_name."""

    def decorator(func: Callable[..., Awaitable[Any]]) -> Callable[..., Awaitable[Any]]:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            with _tracer.start_as_current_span(
                span_name, record_exception=False, set_status_on_exception=False
            ) as span:
                return await run_in_span(span, func(*args, **kwargs))

        return wrapper

    return decorator


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Set attributes on the current span if it is recording."""
    span = trace.get_current_span()
    if span.is_recording():
        span.set_attributes(attributes)
