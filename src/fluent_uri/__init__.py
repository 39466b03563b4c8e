# Copyright 2025 Softwell S.r.l.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""fluent-uri - Build new URIs from existing ones, one component at a time.

Main components:
    Uri: Immutable URI value (AbsoluteUri or RelativeUri), see parse_uri()
    QueryParams: Read-only multi-valued view of a query string
    editor functions: with_scheme, with_path, with_query_parameter, ...

Query strings:
    parse_query_string: raw query -> dict[str, list[str]]
    serialize_query_string: mapping / object / pairs -> "k=v&k2=v2"

Usage:
    from fluent_uri import parse_uri

    uri = parse_uri("http://api.example.com/v1")
    uri = uri.with_path("users/{}", 42).with_query_parameter("fields", ["id", "name"])
    str(uri)  # "http://api.example.com/v1/users/42?fields=id&fields=name"

All functions are pure; values are immutable and safe to share between threads.
"""

__version__ = "0.1.0"

from .config import UriConfig, default_config
from .datastructures import (
    DEFAULT_PORTS,
    AbsoluteUri,
    QueryParams,
    RelativeUri,
    Uri,
    parse_query_string,
    parse_uri,
    serialize_query_string,
)
from .editor import (
    is_http,
    is_https,
    with_host,
    with_http,
    with_https,
    with_path,
    with_port,
    with_query,
    with_query_parameter,
    with_scheme,
    without_path,
    without_path_and_query,
    without_port,
    without_query,
    without_query_parameter,
)
from .exceptions import InvalidArgument, MalformedResult

__all__ = [
    # Data structures
    "Uri",
    "AbsoluteUri",
    "RelativeUri",
    "QueryParams",
    "DEFAULT_PORTS",
    "parse_uri",
    # Query strings
    "parse_query_string",
    "serialize_query_string",
    # Editor
    "is_http",
    "is_https",
    "with_scheme",
    "with_http",
    "with_https",
    "with_host",
    "with_port",
    "without_port",
    "with_path",
    "without_path",
    "without_path_and_query",
    "with_query",
    "without_query",
    "with_query_parameter",
    "without_query_parameter",
    # Configuration
    "UriConfig",
    "default_config",
    # Exceptions
    "InvalidArgument",
    "MalformedResult",
]
