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

"""Errors raised by httpmessage.

All classes are available directly from the `httpmessage` package
namespace::

    import httpmessage

    try:
        uri = httpmessage.URI(raw)
    except httpmessage.MalformedURI as ex:
        log.warning('Rejecting %r', ex.uri)
"""

from __future__ import annotations

__all__ = ('MalformedURI',)


# NOTE: This inherits from ValueError to be consistent with the type
#   raised by urllib.parse when a URI can not be split.
class MalformedURI(ValueError):
    """The URI string could not be decomposed into its components.

    Args:
        uri (str): The original, unmodified input string.

    Attributes:
        uri (str): The original, unmodified input string.
    """

    uri: str

    def __init__(self, uri: str) -> None:
        super().__init__('Seriously malformed URI has been provided: ' + uri)
        self.uri = uri
