# Copyright 2013 by Rackspace Hosting, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Parse URIs into canonical parts records.

This module turns a URI string, or any loosely-typed mapping of URI
components, into a fully populated :data:`~httpmessage.typing.URIParts`
record. It backs :class:`httpmessage.URI`, but may also be used on its
own::

    from httpmessage.util import parts

    record = parts.parse_from_string('HTTP://example.org:8080/a?q=1')
    assert record['scheme'] == 'http'
    assert record['port'] == 8080

Malformed components are never rejected; they are normalized to an empty
default instead. Only a URI that can not be split at all raises
:class:`~httpmessage.MalformedURI`.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Dict, Mapping, Optional, Union
from urllib.parse import urlsplit

from httpmessage.constants import PORT_MAX
from httpmessage.constants import PORT_MIN
from httpmessage.constants import URI_DELIMITERS
from httpmessage.constants import URI_PART_KEYS
from httpmessage.errors import MalformedURI
from httpmessage.typing import URIParts
from httpmessage.util import uri as uri_util

__all__ = (
    'parse_from_mapping',
    'parse_from_string',
    'parse_with_overlay',
    'split_uri',
)

_logger = logging.getLogger(__name__)

# NOTE: A literal IPv6 host collides with the scheme and port delimiters,
#   so anything up to and including the closing bracket is set aside
#   before the rest of the URI is protected.
_IPV6_PREFIX_PATTERN = re.compile(r'^(.*://\[[0-9A-Fa-f:]+\])(.*)$', re.DOTALL)

_NON_DELIMITER_RUN_PATTERN = re.compile(
    '[^' + re.escape(URI_DELIMITERS) + ']+', re.DOTALL
)

# NOTE: At most five significant digits, so that int() never sees a
#   string longer than the interpreter allows.
_PORT_PATTERN = re.compile(r'([+-]?)0*([0-9]{1,5})')


def _protect_match(match: re.Match) -> str:
    return uri_util.protect(match.group(0))


def _unprotect(value: str) -> str:
    return uri_util.decode(value, unquote_plus=False)


def split_uri(uri: str) -> Dict[str, str]:
    """Split a URI string into its structural components.

    Non-ASCII text is protected by percent-encoding every run of
    non-delimiter characters before the string is handed to
    :func:`urllib.parse.urlsplit`; the resulting components are decoded
    again afterwards, so that they contain the original text.

    Args:
        uri (str): The URI string to split.

    Returns:
        dict: Only the components that were found, among ``'scheme'``,
        ``'user'``, ``'pass'``, ``'host'``, ``'port'``, ``'path'``,
        ``'query'`` and ``'fragment'``. All values, including the port,
        are strings.

    Raises:
        MalformedURI: `uri` could not be split at all.
    """

    prefix = ''
    remainder = uri

    match = _IPV6_PREFIX_PATTERN.match(uri)
    if match:
        prefix, remainder = match.groups()

    protected = prefix + _NON_DELIMITER_RUN_PATTERN.sub(_protect_match, remainder)

    try:
        result = urlsplit(protected)
        netloc = result.netloc
        user, password, host, port = uri_util.parse_netloc(netloc)
    except ValueError as ex:
        _logger.debug('Unable to split URI %r: %s', uri, ex)
        raise MalformedURI(uri) from ex

    found = {}

    if result.scheme:
        found['scheme'] = result.scheme

    if netloc:
        if user is not None:
            found['user'] = user
        if password is not None:
            found['pass'] = password
        found['host'] = host
        if port is not None:
            found['port'] = port

    if result.path:
        found['path'] = result.path
    if result.query:
        found['query'] = result.query
    if result.fragment:
        found['fragment'] = result.fragment

    return {key: _unprotect(value) for key, value in found.items()}


def _filter_scheme(scheme: Any) -> str:
    # NOTE: Unknown schemes are not rejected; the scheme is merely trimmed
    #   and lower-cased.
    if isinstance(scheme, str):
        return scheme.lower().strip(':/')
    return ''


def _filter_port(port: Any) -> Optional[int]:
    # NOTE: bool is a subclass of int, but True is not port 1.
    if isinstance(port, bool):
        return None

    if isinstance(port, str):
        match = _PORT_PATTERN.fullmatch(port)
        if not match:
            return None

        sign, digits = match.groups()
        port = -int(digits) if sign == '-' else int(digits)
    elif not isinstance(port, int):
        return None

    if PORT_MIN <= port <= PORT_MAX:
        return port
    return None


def _filter_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    return ''


_FILTERS: Dict[str, Callable[[Any], Any]] = {
    key: _filter_string for key in URI_PART_KEYS
}
_FILTERS.update(scheme=_filter_scheme, port=_filter_port)


def parse_from_mapping(parts: Mapping[Any, Any]) -> URIParts:
    """Assemble a canonical parts record from an arbitrary mapping.

    Each known key is normalized independently; keys that are missing
    from `parts` take their empty default (``''``, or ``None`` for the
    port), and unknown keys are ignored. Values of an unsuitable type are
    treated as empty.

    Args:
        parts (Mapping): A mapping of URI components, e.g., the result of
            :func:`split_uri`, or a caller-supplied set of overrides.

    Returns:
        dict: A fully populated :data:`~httpmessage.typing.URIParts`
        record.
    """

    record: Dict[str, Union[str, Optional[int]]] = {}
    for key in URI_PART_KEYS:
        if key in parts:
            record[key] = _FILTERS[key](parts[key])
        else:
            record[key] = None if key == 'port' else ''

    return record  # type: ignore[return-value]


def parse_from_string(uri: str) -> URIParts:
    """Parse a URI string into a canonical parts record.

    Args:
        uri (str): The URI string to parse.

    Returns:
        dict: A fully populated :data:`~httpmessage.typing.URIParts`
        record.

    Raises:
        MalformedURI: `uri` could not be split at all.
        TypeError: `uri` was not a ``str``.
    """

    if not isinstance(uri, str):
        raise TypeError('uri must be a str, not ' + type(uri).__name__)

    return parse_from_mapping(split_uri(uri))


def parse_with_overlay(uri: Any, overrides: Mapping[Any, Any]) -> URIParts:
    """Derive a canonical parts record by overlaying new parts on a URI.

    The existing URI is rendered with ``str()`` and parsed anew. The
    overrides then replace the same-named parts, and the merged mapping
    is normalized once more as a whole, so that the result is validated
    exactly like a freshly parsed URI.

    Args:
        uri: The existing URI; either a ``str``, or an object (such as
            :class:`httpmessage.URI`) whose ``str()`` is its canonical
            string form.
        overrides (Mapping): The parts to replace.

    Returns:
        dict: A fully populated :data:`~httpmessage.typing.URIParts`
        record.

    Raises:
        MalformedURI: The rendered `uri` could not be split at all.
    """

    merged = dict(parse_from_string(str(uri)))
    merged.update(overrides)
    return parse_from_mapping(merged)
