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

"""Primary package for httpmessage.

The `httpmessage` package can be used to directly access the URI value
type, its errors, and the clock helpers::

    import httpmessage

    uri = httpmessage.URI('https://example.org/things?limit=10')
    uri = uri.with_path('/stuff')
"""

import logging as _logging

__all__ = (
    'Clock',
    'dt_to_http',
    'FrozenClock',
    'http_now',
    'MalformedURI',
    'PYTHON_VERSION',
    'SystemClock',
    'URI',
    'URIParts',
)

from httpmessage.constants import PYTHON_VERSION
from httpmessage.errors import MalformedURI
from httpmessage.typing import URIParts
from httpmessage.uri import URI
from httpmessage.util import Clock
from httpmessage.util import clock
from httpmessage.util import dt_to_http
from httpmessage.util import FrozenClock
from httpmessage.util import http_now
from httpmessage.util import parts
from httpmessage.util import SystemClock

# Package version
from httpmessage.version import __version__  # NOQA: F401

# NOTE: Only to be used internally on the rare occasion that we
#   need to log something that we can't communicate any other way.
_logger = _logging.getLogger('httpmessage')
_logger.addHandler(_logging.NullHandler())
