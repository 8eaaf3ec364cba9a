"""Clock abstraction and the scoped "current instant" override.

``Date.today()`` and ``Time.now()`` never read the wall clock directly; they
go through :func:`now_instant`, which honours an override bound with
:func:`override_now` or :func:`with_override`.  The binding lives in a
:class:`~contextvars.ContextVar`, so it is visible only to the current
thread / asyncio task (and tasks spawned from it) and is always restored when
the scope exits.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Protocol, TypeVar

logger = logging.getLogger(__name__)

R = TypeVar("R")

Now = Callable[[], datetime]
"""A zero-argument function returning the current instant."""


class Clock(Protocol):
    """Protocol for getting the current time.  Inject a fake in tests."""

    def now(self) -> datetime: ...


class SystemClock:
    """Default clock backed by the real system time."""

    def now(self) -> datetime:
        return datetime.now(UTC)


_system_clock = SystemClock()

now_key: ContextVar[Now | None] = ContextVar("date_and_time.now", default=None)


def to_utc(instant: datetime) -> datetime:
    """Convert *instant* to an aware UTC datetime.

    Naive datetimes are interpreted as local wall-clock time of the running
    process.
    """
    if not isinstance(instant, datetime):
        raise TypeError(f"expected datetime, got {type(instant).__name__}")
    return instant.astimezone(UTC)


def now_instant() -> datetime:
    """Return the current instant in UTC, honouring any active override."""
    provider = now_key.get()
    if provider is None:
        return _system_clock.now()
    return to_utc(provider())


@contextmanager
def override_now(provider: Now) -> Iterator[Now]:
    """Bind *provider* as the current-instant source for the ``with`` block.

    Nested blocks shadow outer ones; leaving a block restores whatever was
    bound before it, whether the block exits normally or by raising.
    """
    token = now_key.set(provider)
    logger.debug("Installed now override %r", provider)
    try:
        yield provider
    finally:
        now_key.reset(token)
        logger.debug("Restored now override to %r", now_key.get())


def with_override(provider: Now, body: Callable[[], R]) -> R:
    """Run *body* with *provider* bound as the current-instant source."""
    with override_now(provider):
        return body()
