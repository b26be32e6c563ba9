"""Sample library module shipped with the package scaffold.

Integer results follow 64-bit signed two's-complement arithmetic, so
overflow wraps around exactly like native fixed-width integers.
"""

from __future__ import annotations

import asyncio

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _wrap_int64(value: int) -> int:
    return (value - INT64_MIN) % 2**64 + INT64_MIN


def add(a: int, b: int) -> int:
    """Add two numbers.

    Example:
        >>> add(2, 3)
        5
    """
    return _wrap_int64(a + b)


def multiply(a: int, b: int) -> int:
    """Multiply two numbers.

    Example:
        >>> multiply(2, 3)
        6
    """
    return _wrap_int64(a * b)


async def delay(seconds: float) -> None:
    """Suspend the calling task for the given number of seconds.

    Cancelling the awaiting task aborts the wait early with
    asyncio.CancelledError.

    Raises:
        ValueError: If seconds is negative
    """
    if seconds < 0:
        raise ValueError(f"delay must be non-negative, got {seconds}")
    await asyncio.sleep(seconds)
