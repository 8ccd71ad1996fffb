"""Clock utilities.

This module provides a small clock abstraction. Rather than consulting
process-wide state, code that needs the current time accepts a clock
object, which makes it trivial to freeze time in tests::

    from httpmessage.util import clock

    frozen = clock.FrozenClock(datetime.datetime(1994, 11, 15, 12, 45, 26))
    assert clock.http_now(frozen) == 'Tue, 15 Nov 1994 12:45:26 GMT'
"""

from __future__ import annotations

import datetime
import functools
from typing import Callable, Optional, Protocol

__all__ = (
    'Clock',
    'dt_to_http',
    'FrozenClock',
    'http_now',
    'SystemClock',
)

_utcnow: Callable[[], datetime.datetime] = functools.partial(
    datetime.datetime.now, datetime.timezone.utc
)


class Clock(Protocol):
    """Protocol for objects that can tell the current time."""

    def now(self) -> datetime.datetime: ...


class SystemClock:
    """Clock that always reports the current system time, in UTC."""

    __slots__ = ()

    def now(self) -> datetime.datetime:
        return _utcnow()


class FrozenClock:
    """Clock that always reports the same instant.

    Args:
        frozen (datetime.datetime): The instant to report. A naive
            ``datetime`` is assumed to be UTC.
    """

    __slots__ = ('_frozen',)

    def __init__(self, frozen: datetime.datetime) -> None:
        if frozen.tzinfo is None:
            frozen = frozen.replace(tzinfo=datetime.timezone.utc)
        self._frozen = frozen

    def now(self) -> datetime.datetime:
        return self._frozen


def dt_to_http(dt: datetime.datetime) -> str:
    """Convert a ``datetime`` instance to an HTTP date string.

    Args:
        dt (datetime): A ``datetime`` instance to convert. An aware
            ``datetime`` is converted to UTC first; a naive one is assumed
            to be UTC.

    Returns:
        str: An RFC 1123 date string, e.g.: "Tue, 15 Nov 1994 12:45:26 GMT".

    """

    if dt.tzinfo is not None:
        dt = dt.astimezone(datetime.timezone.utc)

    # Tue, 15 Nov 1994 12:45:26 GMT
    return dt.strftime('%a, %d %b %Y %H:%M:%S GMT')


def http_now(clock: Optional[Clock] = None) -> str:
    """Return the current UTC time as an IMF-fixdate.

    Args:
        clock (Clock): The clock to consult (default: a
            :class:`SystemClock`).

    Returns:
        str: The current UTC time as an IMF-fixdate,
        e.g., 'Tue, 15 Nov 1994 12:45:26 GMT'.
    """

    if clock is None:
        clock = SystemClock()

    return dt_to_http(clock.now())
