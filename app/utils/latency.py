import asyncio
import random
from typing import Callable, Tuple, TypeVar

T = TypeVar("T")

NO_DELAY: Tuple[float, float] = (0.0, 0.0)


class ProcessingTimeout(Exception):
    """Raised when a simulated operation does not finish inside its timeout window."""


def pick_delay(delay_range: Tuple[float, float]) -> float:
    """Return a uniform random delay in [low, high] seconds (order of the bounds does not matter)."""
    low, high = delay_range
    return random.uniform(min(low, high), max(low, high))


async def simulate_processing(
    fn: Callable[[], T],
    *,
    delay_range: Tuple[float, float] = NO_DELAY,
    timeout_seconds: float,
    timeout_message: str = "Processing timeout - please try again",
) -> T:
    """Sleep for a random delay, then run the blocking fn(), racing both against timeout_seconds. Raises ProcessingTimeout(timeout_message) when the timeout wins; exceptions from fn() propagate unchanged.
    Why available: Emulates AI latency in the API layer so the summarizer itself stays a plain synchronous function."""

    async def _run() -> T:
        await asyncio.sleep(pick_delay(delay_range))
        return fn()

    try:
        return await asyncio.wait_for(_run(), timeout=timeout_seconds)
    except asyncio.TimeoutError as e:
        raise ProcessingTimeout(timeout_message) from e


async def simulate_delay(delay_range: Tuple[float, float] = NO_DELAY) -> None:
    """Await a random delay in delay_range. Used for the simulated email send."""
    await asyncio.sleep(pick_delay(delay_range))
