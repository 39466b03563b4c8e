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

"""Path and query composition for absolute and relative URIs.

Every operation dispatches on the URI variant:

    AbsoluteUri  →  component replacement (``AbsoluteUri.replace``)
    RelativeUri  →  splice on the original text (path | ?query | #fragment)

Path rules (both variants):
    - empty path: no-op
    - path starting with "/": replaces the current path
    - otherwise: appended, joined with exactly one "/"

Query rules:
    - ``set_query``: replaces the whole query, "" removes it (no bare "?")
    - ``merge_query_parameter``: appends values to an existing name
    - ``remove_query_parameter``: drops a name, no-op if absent

Functions here expect an already parsed ``Uri``; argument checking is done
by ``fluent_uri.editor``.
"""

from __future__ import annotations

import logging
from functools import singledispatch
from string import Formatter
from typing import Any
from urllib.parse import quote, urlsplit

from .datastructures import (
    AbsoluteUri,
    RelativeUri,
    Uri,
    parse_query_string,
    serialize_query_string,
)
from .exceptions import InvalidArgument, MalformedResult

__all__ = [
    "escape_path",
    "render_path",
    "set_path",
    "remove_path",
    "set_query",
    "merge_query_parameter",
    "remove_query_parameter",
]

logger = logging.getLogger("fluent_uri.composer")

# RFC 3986 pchar plus "/" and "%": pre-escaped input passes through untouched.
PATH_SAFE = "/%:@!$&'()*+,;=-._~"


def escape_path(path: str) -> str:
    """Percent-encode only the characters that cannot appear in a path."""
    return quote(path, safe=PATH_SAFE)


def render_path(template: str | None, *args: Any, **kwargs: Any) -> str:
    """
    Substitute escaped arguments into a ``str.format`` path template.

    Each argument is stringified and percent-encoded on its own, with nothing
    marked safe, so "/", "?", "&", "%" and spaces inside an argument cannot
    change the path structure.

    Args:
        template: Format string, e.g. "/users/{}/files/{name}".
        *args: Positional arguments.
        **kwargs: Keyword arguments.

    Returns:
        The rendered path.

    Raises:
        InvalidArgument: If ``template`` is None, malformed, needs a missing
            argument, or uses attribute or index lookups ("{0.x}", "{0[1]}").

    Example:
        >>> render_path("/users/{}/files/{name}", 5, name="a b/c")
        '/users/5/files/a%20b%2Fc'
    """
    if template is None:
        raise InvalidArgument("path template is required", argument="path")
    try:
        fields = [field for _, field, _, _ in Formatter().parse(template) if field]
    except ValueError as exc:
        raise InvalidArgument(f"malformed path template {template!r}: {exc}", argument="path") from exc
    for field in fields:
        if "." in field or "[" in field:
            raise InvalidArgument(f"path template field {{{field}}} must be a plain name or index", argument="path")

    escaped_args = [quote(str(arg), safe="") for arg in args]
    escaped_kwargs = {key: quote(str(value), safe="") for key, value in kwargs.items()}
    try:
        return template.format(*escaped_args, **escaped_kwargs)
    except (IndexError, KeyError) as exc:
        raise InvalidArgument(f"path template {template!r} is missing argument {exc}", argument="path") from exc
    except ValueError as exc:
        raise InvalidArgument(f"malformed path template {template!r}: {exc}", argument="path") from exc


def _join_path(current: str, path: str) -> str:
    if path.startswith("/"):
        return path
    return current.rstrip("/") + "/" + path.lstrip("/")


@singledispatch
def set_path(uri: Uri, path: str | None) -> Uri:
    """Replace or extend the path of ``uri`` (see module rules)."""
    raise InvalidArgument(f"unsupported URI type: {type(uri).__name__}")


@set_path.register(AbsoluteUri)
def _set_absolute_path(uri: AbsoluteUri, path: str | None) -> AbsoluteUri:
    if not path:
        return uri
    logger.debug(f"set_path: component replace on {uri}")
    return uri.replace(path=_join_path(uri.path, escape_path(path)))


@set_path.register(RelativeUri)
def _set_relative_path(uri: RelativeUri, path: str | None) -> RelativeUri:
    if not path:
        return uri
    logger.debug(f"set_path: text splice on {uri}")
    current, query, fragment = uri.split()
    path = escape_path(path)
    if current or path.startswith("/"):
        new_path = _join_path(current, path)
    else:
        new_path = path
    text = new_path + query + fragment
    if _scheme_of(text) != _scheme_of(uri.text):
        raise MalformedResult(f"path {path!r} would turn {uri.text!r} into {text!r}", value=text)
    return RelativeUri(text)


def _scheme_of(text: str) -> str:
    try:
        return urlsplit(text).scheme
    except ValueError as exc:
        raise MalformedResult(f"invalid URI: {text!r} ({exc})", value=text) from exc


@singledispatch
def remove_path(uri: Uri, *, with_query: bool = False) -> AbsoluteUri:
    """Drop the path (and optionally the query) of an absolute URI."""
    raise InvalidArgument(f"cannot remove the path of a relative URI: {uri}")


@remove_path.register(AbsoluteUri)
def _remove_absolute_path(uri: AbsoluteUri, *, with_query: bool = False) -> AbsoluteUri:
    if with_query:
        return uri.replace(path="", query="")
    return uri.replace(path="")


@singledispatch
def set_query(uri: Uri, query: str) -> Uri:
    """Replace the whole query of ``uri`` with an already serialized string."""
    raise InvalidArgument(f"unsupported URI type: {type(uri).__name__}")


@set_query.register(AbsoluteUri)
def _set_absolute_query(uri: AbsoluteUri, query: str) -> AbsoluteUri:
    logger.debug(f"set_query: component replace on {uri}")
    return uri.replace(query=query)


@set_query.register(RelativeUri)
def _set_relative_query(uri: RelativeUri, query: str) -> RelativeUri:
    logger.debug(f"set_query: text splice on {uri}")
    path, _, fragment = uri.split()
    if query:
        return RelativeUri(f"{path}?{query}{fragment}")
    return RelativeUri(path + fragment)


def merge_query_parameter(uri: Uri, key: str, values: list[str]) -> Uri:
    """
    Add ``values`` under ``key``, after any values already present.

    Example:
        >>> str(merge_query_parameter(parse_uri("/s?k=1"), "k", ["2"]))
        '/s?k=1&k=2'
    """
    data = parse_query_string(uri.query)
    data.setdefault(key, []).extend(values)
    return set_query(uri, serialize_query_string(data))


def remove_query_parameter(uri: Uri, key: str) -> Uri:
    """Drop every value of ``key``; the URI is returned unchanged if absent."""
    data = parse_query_string(uri.query)
    if key not in data:
        return uri
    del data[key]
    return set_query(uri, serialize_query_string(data))
