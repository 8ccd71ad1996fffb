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
"""Module that defines public httpmessage type definitions."""

from __future__ import annotations

from typing import Optional, TypedDict

# NOTE: 'pass' is a keyword, hence the functional syntax.
URIParts = TypedDict(
    'URIParts',
    {
        'scheme': str,
        'user': str,
        'pass': str,
        'host': str,
        'port': Optional[int],
        'path': str,
        'query': str,
        'fragment': str,
    },
)
"""Canonical parts record of a URI.

Every key is always present. An absent component is represented by an
empty string, or by ``None`` in the case of the port.
"""
