import sys

__all__ = (
    'PORT_MAX',
    'PORT_MIN',
    'PYTHON_VERSION',
    'URI_DELIMITERS',
    'URI_PART_KEYS',
)

PYTHON_VERSION = tuple(sys.version_info[:3])
"""Python version information triplet: (major, minor, micro)."""

HTTPMESSAGE_SUPPORTED = PYTHON_VERSION >= (3, 8, 0)
"""Whether this version of httpmessage supports the current Python version."""

if not HTTPMESSAGE_SUPPORTED:  # pragma: nocover
    raise ImportError(
        'httpmessage requires Python 3.8+. '
        '(Recent Pip should automatically pick a suitable httpmessage version.)'
    )

URI_PART_KEYS = (
    'scheme',
    'user',
    'pass',
    'host',
    'port',
    'path',
    'query',
    'fragment',
)
"""Keys of a canonical URI parts record, in rendering order."""

# NOTE: Runs of characters outside this set are percent-encoded before the
#   structural split, and decoded again afterwards.
URI_DELIMITERS = ':/@?&=#'

PORT_MIN = 1
PORT_MAX = 65535
