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

"""
URI component editor.

Purpose
=======
Stateless functions, each taking a URI (``Uri`` or string) and returning a
new ``Uri`` with one component added, replaced or removed. The input is never
modified. Scheme, host and port are edited here directly; path and query
edits go through ``fluent_uri.composer``.

Definition::

    def is_http(uri) -> bool
    def is_https(uri) -> bool
    def with_scheme(uri, scheme: str) -> AbsoluteUri
    def with_http(uri) -> AbsoluteUri
    def with_https(uri) -> AbsoluteUri
    def with_host(uri, host: str) -> AbsoluteUri
    def with_port(uri, port: int) -> AbsoluteUri
    def without_port(uri) -> AbsoluteUri
    def with_path(uri, path: str | None, *args, **kwargs) -> Uri
    def without_path(uri) -> AbsoluteUri
    def without_path_and_query(uri) -> AbsoluteUri
    def with_query(uri, query) -> Uri
    def without_query(uri) -> Uri
    def with_query_parameter(uri, key: str, value) -> Uri
    def without_query_parameter(uri, key: str) -> Uri

Example::

    from fluent_uri import with_https, with_path, with_query_parameter

    uri = with_path("http://api.example.com:80/v1/", "users/{}/repos", "jo hn")
    uri = with_query_parameter(uri, "page", 2)
    uri = with_https(uri)
    print(uri)  # https://api.example.com/v1/users/jo%20hn/repos?page=2

Design Notes
============
- ``None`` (or a non-string) URI raises ``InvalidArgument`` before any work
- Scheme, host, port and path removal need an authority: a relative URI
  raises ``InvalidArgument`` instead of being promoted to absolute
- ``is_http``/``is_https`` never raise
- Plain ``with_path`` expects a pre-escaped path; only characters that
  cannot appear in a path are escaped. Template arguments are fully escaped.
"""

from __future__ import annotations

from typing import Any

from . import composer
from .datastructures import AbsoluteUri, Uri, is_multi_value, parse_uri, serialize_query_string
from .exceptions import InvalidArgument

__all__ = [
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
]


def _require_uri(uri: Uri | str | None) -> Uri:
    if uri is None:
        raise InvalidArgument("uri is required")
    return parse_uri(uri)


def _require_absolute(uri: Uri | str | None, operation: str) -> AbsoluteUri:
    parsed = _require_uri(uri)
    if not isinstance(parsed, AbsoluteUri):
        raise InvalidArgument(f"{operation} requires an absolute URI, got {str(parsed)!r}")
    return parsed


def _scheme_of(uri: Uri | str | None) -> str | None:
    if uri is None:
        return None
    try:
        parsed = parse_uri(uri)
    except ValueError:
        return None
    return parsed.scheme if isinstance(parsed, AbsoluteUri) else None


def is_http(uri: Uri | str | None) -> bool:
    """True if the scheme is exactly "http". False for None or relative URIs."""
    return _scheme_of(uri) == "http"


def is_https(uri: Uri | str | None) -> bool:
    """True if the scheme is exactly "https". False for None or relative URIs."""
    return _scheme_of(uri) == "https"


def with_scheme(uri: Uri | str | None, scheme: str) -> AbsoluteUri:
    """
    Replace the scheme.

    A port that was the default for the old scheme (written or implied) is
    dropped, so ``http://h:80`` becomes ``https://h``, not ``https://h:80``.
    Other explicit ports are kept.

    The scheme is stored exactly as given. Scheme checks and default-port
    lookups are case-sensitive, so pass it in lowercase: ``"HTTPS"`` gives a
    URI for which ``is_https`` is False and ``port`` has no default.

    Args:
        uri: Absolute URI.
        scheme: New scheme, e.g. "https".

    Returns:
        New AbsoluteUri.

    Raises:
        InvalidArgument: If ``uri`` is None or relative.
        MalformedResult: If ``scheme`` is not a valid scheme.
    """
    absolute = _require_absolute(uri, "with_scheme")
    port = None if absolute.is_default_port else absolute.explicit_port
    return absolute.replace(scheme=scheme, explicit_port=port)


def with_http(uri: Uri | str | None) -> AbsoluteUri:
    return with_scheme(uri, "http")


def with_https(uri: Uri | str | None) -> AbsoluteUri:
    return with_scheme(uri, "https")


def with_host(uri: Uri | str | None, host: str) -> AbsoluteUri:
    """Replace the host. Raises MalformedResult for an invalid host."""
    return _require_absolute(uri, "with_host").replace(host=host)


def with_port(uri: Uri | str | None, port: int) -> AbsoluteUri:
    """Set an explicit port. Raises MalformedResult outside 0..65535."""
    absolute = _require_absolute(uri, "with_port")
    if port is None:
        raise InvalidArgument("port is required, use without_port() to drop it", argument="port")
    return absolute.replace(explicit_port=port)


def without_port(uri: Uri | str | None) -> AbsoluteUri:
    """Copy of ``uri`` with no explicit port; ``port`` falls back to the default."""
    return _require_absolute(uri, "without_port").replace(explicit_port=None)


def with_path(uri: Uri | str | None, path: str | None, *args: Any, **kwargs: Any) -> Uri:
    """
    Replace or extend the path.

    Without extra arguments ``path`` is used as given (pre-escaped). With
    arguments it is a ``str.format`` template whose arguments are each
    percent-encoded before substitution.

    A path starting with "/" replaces the current one; any other path is
    appended with a single "/" separator. An empty path changes nothing.

    Args:
        uri: Absolute or relative URI.
        path: Path, or path template when ``args``/``kwargs`` are given.
        *args: Positional template arguments.
        **kwargs: Keyword template arguments.

    Returns:
        New Uri of the same variant as ``uri``.

    Raises:
        InvalidArgument: If ``uri`` is None or the template is invalid.
        MalformedResult: If a relative URI would gain a scheme (``"a:b"``).

    Example:
        >>> str(with_path("http://h/a/", "b"))
        'http://h/a/b'
        >>> str(with_path("http://h/a", "/{}", "x/y"))
        'http://h/x%2Fy'
    """
    target = _require_uri(uri)
    if args or kwargs:
        path = composer.render_path(path, *args, **kwargs)
    return composer.set_path(target, path)


def without_path(uri: Uri | str | None) -> AbsoluteUri:
    """Copy of an absolute ``uri`` with an empty path. Query is kept."""
    return composer.remove_path(_require_absolute(uri, "without_path"))


def without_path_and_query(uri: Uri | str | None) -> AbsoluteUri:
    """Copy of an absolute ``uri`` with neither path nor query."""
    return composer.remove_path(_require_absolute(uri, "without_path_and_query"), with_query=True)


def with_query(uri: Uri | str | None, query: Any) -> Uri:
    """
    Replace the whole query.

    Args:
        uri: Absolute or relative URI.
        query: Raw query string (leading "?" optional), mapping, QueryParams,
               sequence of pairs, dataclass or plain object. None or empty
               data removes the query.

    Returns:
        New Uri of the same variant as ``uri``.

    Example:
        >>> str(with_query("/search", {"q": "a b"}))
        '/search?q=a%20b'
    """
    target = _require_uri(uri)
    return composer.set_query(target, serialize_query_string(query))


def without_query(uri: Uri | str | None) -> Uri:
    return composer.set_query(_require_uri(uri), "")


def with_query_parameter(uri: Uri | str | None, key: str, value: Any) -> Uri:
    """
    Add a query parameter, keeping existing values of the same name.

    Args:
        uri: Absolute or relative URI.
        key: Parameter name (non-empty).
        value: A value or an iterable of values (list, tuple, set, generator).
               Strings and bytes count as one value. Non-strings are converted
               with ``str()``, None becomes "".

    Returns:
        New Uri; ``k=1`` plus ``("k", 2)`` gives ``k=1&k=2``.

    Raises:
        InvalidArgument: If ``uri`` is None or ``key`` is empty.
    """
    target = _require_uri(uri)
    if not key:
        raise InvalidArgument("query parameter name is required", argument="key")
    items = value if is_multi_value(value) else [value]
    values = ["" if item is None else str(item) for item in items]
    return composer.merge_query_parameter(target, str(key), values)


def without_query_parameter(uri: Uri | str | None, key: str) -> Uri:
    """Remove every value of ``key``. No-op if the parameter is absent."""
    target = _require_uri(uri)
    if not key:
        return target
    return composer.remove_query_parameter(target, str(key))
