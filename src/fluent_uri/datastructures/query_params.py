# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Query string parsing and serialization with multi-value support.

Purpose
=======
Query parameters are case-sensitive and may repeat. This module turns a raw
query string into an ordered multi-valued map and turns arbitrary data shapes
back into a percent-encoded query string.

This module provides:
- ``parse_query_string()``: raw query → ``dict[str, list[str]]``
- ``serialize_query_string()``: data → canonical ``k=v&k2=v2`` string
- ``QueryParams``: read-only view over a parsed query string

Parsing Schema::

    Query string: "?name=john&tags=python&tags=web&empty="
                        ↓
                urllib.parse.parse_qsl (leading "?" stripped)
                        ↓
    Ordered dict: {
        "name": ["john"],
        "tags": ["python", "web"],
        "empty": [""]
    }

Serialization Schema::

    "raw=string"                  →  "raw=string"   (pass-through)
    {"q": "a b"}                  →  "q=a%20b"
    {"tag": ["x", "y"]}           →  "tag=x&tag=y"
    QueryParams("a=1&a=2")        →  "a=1&a=2"
    [("a", 1), ("b", None)]       →  "a=1"          (None skipped)
    {"k": {"x"}}                  →  "k=x"          (any non-text iterable is multi-valued)
    Search(q="x", page=2)         →  "q=x&page=2"   (dataclass / object)
    {} / None                     →  ""

Definition::

    def parse_query_string(raw: str | bytes | None, *, config: UriConfig | None = None)
        -> dict[str, list[str]]
    def serialize_query_string(data: Any, *, config: UriConfig | None = None) -> str

    class QueryParams:
        __slots__ = ("_params",)

        def __init__(self, query_string: bytes | str = "", *, config=None) -> None
        def get(self, key: str, default: str | None = None) -> str | None
        def getlist(self, key: str) -> list[str]
        def keys(self) -> list[str]
        def values(self) -> list[str]
        def items(self) -> list[tuple[str, str]]
        def multi_items(self) -> list[tuple[str, str]]
        def as_dict(self) -> dict[str, list[str]]

Design Notes
============
- Keys and values are percent-encoded with nothing marked safe, so ``/``,
  ``&``, ``=`` and ``?`` inside a value cannot break the query structure.
- Spaces become ``%20`` unless ``UriConfig.plus_spaces`` is set.
- Empty names (``=value``) are dropped when parsing.
- Empty values are preserved (``?key=`` → ``""``  not ``None``).
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Any, Iterator
from urllib.parse import parse_qsl, quote, quote_plus, urlencode

from ..config import UriConfig, default_config
from ..exceptions import InvalidArgument

__all__ = ["QueryParams", "is_multi_value", "parse_query_string", "serialize_query_string"]


def parse_query_string(
    raw: str | bytes | None, *, config: UriConfig | None = None
) -> dict[str, list[str]]:
    """
    Parse a query string into an ordered multi-valued map.

    Args:
        raw: Query string, with or without the leading "?". Bytes are decoded
             as Latin-1 before percent-decoding.
        config: Codec options (default: ``default_config()``).

    Returns:
        Dict of name → values in original order. Empty dict for empty input.
    """
    if not raw:
        return {}
    config = config or default_config()
    if isinstance(raw, bytes):
        raw = raw.decode("latin-1")
    if raw.startswith("?"):
        raw = raw[1:]

    result: dict[str, list[str]] = {}
    for key, value in parse_qsl(
        raw, keep_blank_values=True, encoding=config.encoding, errors=config.errors
    ):
        if key:
            result.setdefault(key, []).append(value)
    return result


def is_multi_value(value: Any) -> bool:
    """True for a collection of query values (any iterable except text and bytes)."""
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes, bytearray))


def serialize_query_string(data: Any, *, config: UriConfig | None = None) -> str:
    """
    Serialize query data into a percent-encoded query string.

    Args:
        data: A raw query string (returned as-is, minus a leading "?"), a
              mapping of name → value or list of values, a ``QueryParams``,
              a sequence of ``(name, value)`` pairs, a dataclass instance or
              any object with public attributes. ``None`` gives "".
        config: Codec options (default: ``default_config()``).

    Returns:
        The query string without a leading "?". Empty string for empty data.

    Raises:
        InvalidArgument: If ``data`` has an unsupported type, or a pair
            sequence holds something other than (name, value) pairs.
    """
    if data is None:
        return ""
    if isinstance(data, str):
        return data[1:] if data.startswith("?") else data
    config = config or default_config()

    pairs: list[tuple[str, str]] = []
    for key, value in _iter_query_items(data):
        values = value if is_multi_value(value) else [value]
        for item in values:
            if item is None:
                if config.skip_none:
                    continue
                item = ""
            pairs.append((str(key), str(item)))

    quote_via = quote_plus if config.plus_spaces else quote
    return urlencode(
        pairs, safe="", encoding=config.encoding, errors=config.errors, quote_via=quote_via
    )


def _iter_query_items(data: Any) -> Iterable[tuple[Any, Any]]:
    if isinstance(data, QueryParams):
        return data.multi_items()
    if isinstance(data, Mapping):
        return data.items()
    if isinstance(data, (list, tuple)):
        for pair in data:
            if not isinstance(pair, (list, tuple)) or len(pair) != 2:
                raise InvalidArgument(f"query pair must be (name, value), got {pair!r}", argument="query")
        return data
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return [(f.name, getattr(data, f.name)) for f in dataclasses.fields(data)]
    if hasattr(data, "__dict__"):
        return [(k, v) for k, v in vars(data).items() if not k.startswith("_")]
    raise InvalidArgument(f"unsupported query data: {type(data).__name__}", argument="query")


class QueryParams:
    """
    Parsed query string parameters with multi-value support.

    Parameter names are case-sensitive. Parsing goes through
    ``parse_query_string``, so percent-escapes are decoded.

    Example:
        >>> params = QueryParams("name=john&tags=python&tags=web")
        >>> params.get("name")
        'john'
        >>> params.getlist("tags")
        ['python', 'web']
        >>> "tags" in params
        True
    """

    __slots__ = ("_params",)

    def __init__(self, query_string: bytes | str = "", *, config: UriConfig | None = None) -> None:
        """
        Initialize QueryParams from a query string.

        Args:
            query_string: The query string to parse (bytes or str, leading
                          "?" optional).
            config: Codec options (default: ``default_config()``).
        """
        self._params = parse_query_string(query_string, config=config)

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the first value for ``key``, or ``default``."""
        values = self._params.get(key)
        if values:
            return values[0]
        return default

    def getlist(self, key: str) -> list[str]:
        """Return all values for ``key`` (empty list if absent)."""
        return list(self._params.get(key, []))

    def keys(self) -> list[str]:
        return list(self._params.keys())

    def values(self) -> list[str]:
        """Return the first value for each parameter."""
        return [v[0] for v in self._params.values() if v]

    def items(self) -> list[tuple[str, str]]:
        """Return (name, first_value) pairs."""
        return [(k, v[0]) for k, v in self._params.items() if v]

    def multi_items(self) -> list[tuple[str, str]]:
        """
        Return all (name, value) pairs including duplicates.

        Example:
            >>> QueryParams("a=1&a=2&b=3").multi_items()
            [('a', '1'), ('a', '2'), ('b', '3')]
        """
        result: list[tuple[str, str]] = []
        for key, values in self._params.items():
            for value in values:
                result.append((key, value))
        return result

    def as_dict(self) -> dict[str, list[str]]:
        """Return a copy of the underlying name → values map."""
        return {k: list(v) for k, v in self._params.items()}

    def __getitem__(self, key: str) -> str:
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return value

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return key in self._params

    def __iter__(self) -> Iterator[str]:
        return iter(self._params)

    def __len__(self) -> int:
        """Return number of unique parameters."""
        return len(self._params)

    def __bool__(self) -> bool:
        return bool(self._params)

    def __str__(self) -> str:
        """Return the canonical serialized form."""
        return serialize_query_string(self)

    def __repr__(self) -> str:
        return f"QueryParams({self._params!r})"
