from __future__ import annotations
import asyncio
import inspect
from typing import Any, Awaitable, Callable


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Restrict value to [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def ms_to_s(milliseconds: float) -> float:
    """Convert a millisecond duration to seconds, never negative."""
    return max(0.0, float(milliseconds)) / 1000.0


async def call_maybe_async(fn: Callable[..., Any], *args: Any) -> Any:
    """Call fn and await its result if it returned an awaitable."""
    result = fn(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


def sleep_ms(milliseconds: float) -> Awaitable[None]:
    return asyncio.sleep(ms_to_s(milliseconds))
