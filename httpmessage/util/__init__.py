"""General utilities.

This package includes the modules that do the actual work behind the
front-door `httpmessage` module.

The clock utilities are imported directly into the `httpmessage` module
for convenience::

    import httpmessage

    now = httpmessage.http_now()

Conversely, the `parts` and `uri` modules must be imported explicitly::

    from httpmessage.util import parts

    record = parts.parse_from_string('http://example.org/')
"""

from httpmessage.util.clock import Clock
from httpmessage.util.clock import dt_to_http
from httpmessage.util.clock import FrozenClock
from httpmessage.util.clock import http_now
from httpmessage.util.clock import SystemClock

__all__ = (
    'Clock',
    'dt_to_http',
    'FrozenClock',
    'http_now',
    'SystemClock',
)
