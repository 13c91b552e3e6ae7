"""Profiling hooks for development.

Off by default. When enabled, engine startup and every docs tool call are
recorded with pyinstrument and written as text reports to the profiles
directory.
"""

from collections.abc import Awaitable, Callable, Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from functools import wraps
from pathlib import Path
from typing import ParamSpec, TypeVar

import structlog

log = structlog.get_logger()

P = ParamSpec("P")
T = TypeVar("T")

_profiles_dir: Path | None = None


def configure_profiling(enabled: bool, profiles_dir: Path | None = None) -> None:
    """Turn profiling on or off.

    Args:
        enabled: Whether to record profiles.
        profiles_dir: Where reports go. Defaults to ./profiles.
    """
    global _profiles_dir
    if not enabled:
        _profiles_dir = None
        return

    _profiles_dir = profiles_dir or Path("profiles")
    _profiles_dir.mkdir(parents=True, exist_ok=True)
    log.info("profiling_enabled", profiles_dir=str(_profiles_dir))


@contextmanager
def profiled(name: str, async_mode: str = "disabled") -> Iterator[None]:
    """Record the enclosed block when profiling is on; otherwise do nothing."""
    if _profiles_dir is None:
        yield
        return

    # pyinstrument is a dev dependency; only import it when asked to profile
    from pyinstrument import Profiler  # noqa: PLC0415

    profiler = Profiler(async_mode=async_mode)
    profiler.start()
    try:
        yield
    finally:
        profiler.stop()
        timestamp = datetime.now(tz=UTC).strftime("%Y%m%d_%H%M%S_%f")
        report = _profiles_dir / f"{name}_{timestamp}.txt"
        report.write_text(profiler.output_text(unicode=True, color=False))
        log.debug("profile_saved", path=str(report))


def profile_async(name: str) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """Decorator recording an async tool call under ``name``."""

    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            with profiled(name, async_mode="enabled"):
                return await func(*args, **kwargs)

        return wrapper

    return decorator
