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

"""URI utilities.

This module provides the low-level string helpers used when splitting a
URI into parts: percent-encoding of delimiter-free runs, decoding, and
splitting of the network location. These functions are not hoisted into
the `httpmessage` module, and so must be explicitly imported::

    from httpmessage.util import uri

    name, port = uri.parse_host('example.org:8080')
"""

# NOTE(kgriffs): See also RFC 3986
_UNRESERVED = 'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~'

# NOTE: RFC 3986 sub-delimiters that do not double as structural delimiters
#   for the splitter. These may safely pass through the splitter as-is.
_PASSIVE_SUB_DELIMITERS = "!$'()*+,;"
_PROTECT_ALLOWED = _UNRESERVED + _PASSIVE_SUB_DELIMITERS

_HEX_DIGITS = '0123456789ABCDEFabcdef'

# This map construction is based on urllib's implementation
_HEX_TO_BYTE = {
    (a + b).encode(): bytes([int(a + b, 16)]) for a in _HEX_DIGITS for b in _HEX_DIGITS
}


def _create_char_encoder(allowed_chars):

    lookup = {}

    for code_point in range(256):
        if chr(code_point) in allowed_chars:
            encoded_char = chr(code_point)
        else:
            encoded_char = '%{0:02X}'.format(code_point)

        lookup[code_point] = encoded_char

    return lookup.__getitem__


def _create_str_encoder(allowed_chars):

    encode_char = _create_char_encoder(allowed_chars)

    def encoder(uri):
        # PERF(kgriffs): Very fast way to check, learned from urlib.quote
        if not uri.rstrip(allowed_chars):
            return uri

        uri = uri.encode()

        # Use our map to encode each char and join the result into a new uri
        return ''.join(map(encode_char, uri))

    return encoder


protect = _create_str_encoder(_PROTECT_ALLOWED)
protect.__name__ = 'protect'
protect.__doc__ = """Percent-encode a run of URI text that contains no delimiters.

Every character other than the RFC 3986 unreserved characters and the
sub-delimiters ``!$'()*+,;`` is percent-encoded as UTF-8. In particular,
``%``, ``[``, ``]``, whitespace and all non-ASCII characters are escaped,
so that the standard library splitter never sees them.

Passing the result through :func:`decode` (with `unquote_plus` set to
``False``) yields the original text.

Args:
    uri (str): Run of URI text to protect. It is assumed not to cross
        delimiter boundaries.

Returns:
    str: The protected text.

"""


def decode(encoded_uri, unquote_plus=True):
    """Decode percent-encoded characters in a URI or query string.

    This function models the behavior of `urllib.parse.unquote_plus`,
    albeit in a faster, more straightforward manner.

    Args:
        encoded_uri (str): An encoded URI (full or partial).

    Keyword Arguments:
        unquote_plus (bool): Set to ``False`` to retain any plus ('+')
            characters in the given string, rather than converting them to
            spaces (default ``True``). Typically you should set this
            to ``False`` when decoding any part of a URI other than the
            query string.

    Returns:
        str: A decoded URL. If the URL contains escaped non-ASCII
        characters, UTF-8 is assumed per RFC 3986.

    """

    decoded_uri = encoded_uri

    # PERF(kgriffs): Don't take the time to instantiate a new
    # string unless we have to.
    if '+' in decoded_uri and unquote_plus:
        decoded_uri = decoded_uri.replace('+', ' ')

    # Short-circuit if we can
    if '%' not in decoded_uri:
        return decoded_uri

    # NOTE(kgriffs): Clients should never submit a URI that has
    # unescaped non-ASCII chars in them, but just in case they
    # do, let's encode into a non-lossy format.
    decoded_uri = decoded_uri.encode()

    # PERF(kgriffs): This was found to be faster than using
    # a regex sub call or list comprehension with a join.
    tokens = decoded_uri.split(b'%')
    decoded = bytearray(tokens[0])
    for token in tokens[1:]:
        token_partial = token[:2]
        try:
            decoded += _HEX_TO_BYTE[token_partial] + token[2:]
        except KeyError:
            # malformed percentage like "x=%" or "y=%+"
            decoded += b'%' + token

    # Convert back to str
    return decoded.decode('utf-8', 'replace')


def parse_host(host):
    """Parse a 'host:port' string into parts.

    Parse a host string (which may or may not contain a port) into
    parts, taking into account that the string may contain
    either a domain name or an IP address. In the latter case,
    both IPv4 and IPv6 addresses are supported. Brackets around an
    IPv6 literal are removed, unless anything other than a port follows
    the closing bracket, in which case the host is returned verbatim.

    Unlike the port found in a Host header, the port is not converted
    here; it is returned verbatim so that a caller can decide what to
    do with a non-numeric value.

    Args:
        host (str): Host string to parse, optionally containing a
            port number.

    Returns:
        tuple: A parsed (*host*, *port*) tuple from the given
        host string, where *port* is a ``str``. If the host string does
        not specify a port, or the port is empty, *port* is ``None``.

    """

    # NOTE(kgriff): The host may contain a port, so check that and strip
    # it if necessary. This is complicated by the fact that
    # a hostname may be specified either as an IP address
    # or as a domain name, and in the case of IPv6 there
    # may be multiple colons in the string.

    if host.startswith('['):
        pos = host.rfind(']:')
        if pos != -1:
            # IPv6 address with a port
            return (host[1:pos], host[pos + 2 :] or None)

        if host.endswith(']'):
            return (host[1:-1], None)

        return (host, None)

    pos = host.rfind(':')
    if (pos == -1) or (pos != host.find(':')):
        # Bare domain name or IP address
        return (host, None)

    # NOTE(kgriffs): At this point we know that there was
    # only a single colon, so we should have an IPv4 address
    # or a domain name plus a port
    name, _, port = host.partition(':')
    return (name, port or None)


def parse_netloc(netloc):
    """Split a network location into user info, host and port.

    Args:
        netloc (str): The authority component of a URI, without the
            leading ``//``.

    Returns:
        tuple: A (*user*, *password*, *host*, *port*) tuple. *user* is
        ``None`` when the authority has no user info, *password* is
        ``None`` when the user info contains no ``:``, and *port* is
        either ``None`` or the verbatim port string (see also
        :func:`parse_host`).

    """

    user = password = None

    userinfo, has_at, hostinfo = netloc.rpartition('@')
    if has_at:
        user, has_colon, password = userinfo.partition(':')
        if not has_colon:
            password = None

    host, port = parse_host(hostinfo)
    return (user, password, host, port)


__all__ = [
    'decode',
    'parse_host',
    'parse_netloc',
    'protect',
]
