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

"""Immutable URI value type."""

from __future__ import annotations

import ipaddress
from typing import Any, Mapping, Optional

from httpmessage.typing import URIParts
from httpmessage.util.parts import parse_from_mapping
from httpmessage.util.parts import parse_from_string
from httpmessage.util.parts import parse_with_overlay

__all__ = ('URI',)


def _is_ipv6_literal(host: str) -> bool:
    # NOTE: Hosts such as 'a:1:2' also come out of the splitter; those are
    #   rendered as they are, since urlsplit() rejects them in brackets.
    if ':' not in host:
        return False

    try:
        ipaddress.IPv6Address(host)
    except ValueError:
        return False
    return True


class URI:
    """Represents an immutable, normalized URI.

    The URI is decomposed into its parts when the instance is created,
    normalizing each one of them (see also:
    :func:`httpmessage.util.parts.parse_from_mapping`). Instances can not
    be modified; the ``with_*()`` methods return a new instance instead::

        uri = httpmessage.URI('HTTP://example.org/a?q=1')
        assert uri.scheme == 'http'

        other = uri.with_path('/b')
        assert str(other) == 'http://example.org/b?q=1'
        assert uri.path == '/a'

    No percent-encoding is applied when the URI is rendered back to a
    string; the parts are joined as they are.

    Args:
        value (str): URI string to parse (default ``''``).

    Raises:
        MalformedURI: `value` could not be split into parts.
    """

    __slots__ = ('_parts',)

    def __init__(self, value: str = '') -> None:
        self._parts = parse_from_string(value)

    @classmethod
    def from_parts(cls, parts: Mapping[Any, Any]) -> URI:
        """Create a URI from a mapping of its parts.

        Args:
            parts (Mapping): Any of the ``'scheme'``, ``'user'``,
                ``'pass'``, ``'host'``, ``'port'``, ``'path'``,
                ``'query'`` and ``'fragment'`` keys. Other keys are
                ignored.

        Returns:
            URI: A new instance.
        """

        return cls._from_record(parse_from_mapping(parts))

    @classmethod
    def _from_record(cls, record: URIParts) -> URI:
        instance = cls.__new__(cls)
        instance._parts = record
        return instance

    @property
    def parts(self) -> URIParts:
        """A copy of the canonical parts record of this URI."""
        return self._parts.copy()

    @property
    def scheme(self) -> str:
        return self._parts['scheme']

    @property
    def user(self) -> str:
        return self._parts['user']

    @property
    def password(self) -> str:
        return self._parts['pass']

    @property
    def user_info(self) -> str:
        """User name and password joined by ``':'``, or ``''``."""
        user_info = self._parts['user']
        if self._parts['pass']:
            user_info += ':' + self._parts['pass']
        return user_info

    @property
    def host(self) -> str:
        return self._parts['host']

    @property
    def port(self) -> Optional[int]:
        return self._parts['port']

    @property
    def authority(self) -> str:
        """The authority component, i.e. ``[user-info@]host[:port]``.

        IPv6 literal hosts are enclosed in brackets. If there is no host,
        the authority is empty.
        """

        host = self._parts['host']
        if not host:
            return ''

        if _is_ipv6_literal(host):
            host = '[' + host + ']'

        user_info = self.user_info
        if user_info:
            host = user_info + '@' + host

        port = self._parts['port']
        if port is not None:
            host += ':' + str(port)

        return host

    @property
    def path(self) -> str:
        return self._parts['path']

    @property
    def query(self) -> str:
        return self._parts['query']

    @property
    def fragment(self) -> str:
        return self._parts['fragment']

    def replace(self, **overrides: Any) -> URI:
        """Return a copy of this URI with the given parts replaced.

        Keyword Arguments:
            The parts to replace, such as ``path='/b'``. Since ``pass``
            is a keyword, use :meth:`with_user_info` or
            :meth:`with_parts` to replace the password.

        Returns:
            URI: A new instance.
        """

        return self.with_parts(overrides)

    def with_parts(self, parts: Mapping[Any, Any]) -> URI:
        """Return a copy of this URI with the parts in a mapping replaced.

        The resulting URI is re-validated as a whole, just as if it was
        parsed from scratch.

        Args:
            parts (Mapping): The parts to replace.

        Returns:
            URI: A new instance.

        Raises:
            MalformedURI: This URI could not be rendered and split again.
        """

        return self._from_record(parse_with_overlay(self, parts))

    def with_scheme(self, scheme: str) -> URI:
        return self.with_parts({'scheme': scheme})

    def with_user_info(self, user: str, password: Optional[str] = None) -> URI:
        return self.with_parts({'user': user, 'pass': password or ''})

    def with_host(self, host: str) -> URI:
        return self.with_parts({'host': host})

    def with_port(self, port: Optional[int]) -> URI:
        return self.with_parts({'port': port})

    def with_path(self, path: str) -> URI:
        return self.with_parts({'path': path})

    def with_query(self, query: str) -> URI:
        if isinstance(query, str) and query.startswith('?'):
            query = query[1:]
        return self.with_parts({'query': query})

    def with_fragment(self, fragment: str) -> URI:
        if isinstance(fragment, str) and fragment.startswith('#'):
            fragment = fragment[1:]
        return self.with_parts({'fragment': fragment})

    def __str__(self) -> str:
        # NOTE: See also RFC 3986, Section 5.3
        uri = ''

        scheme = self._parts['scheme']
        if scheme:
            uri += scheme + ':'

        authority = self.authority
        path = self._parts['path']

        if authority:
            uri += '//' + authority
            if path and not path.startswith('/'):
                path = '/' + path
        elif path.startswith('//'):
            # NOTE: Otherwise the first path segment would be taken for an
            #   authority when parsed again.
            path = '/' + path.lstrip('/')

        uri += path

        if self._parts['query']:
            uri += '?' + self._parts['query']

        if self._parts['fragment']:
            uri += '#' + self._parts['fragment']

        return uri

    def __repr__(self) -> str:
        return '<{}: {!r}>'.format(self.__class__.__name__, str(self))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, URI):
            return NotImplemented
        return self._parts == other._parts

    def __hash__(self) -> int:
        return hash(tuple(self._parts.values()))
