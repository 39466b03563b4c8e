# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Data structures for fluent-uri.

Values handed to and returned by every editing function::

    "https://example.com/x?a=1"    →  AbsoluteUri (components)
    "/search?q=1"                  →  RelativeUri (original text)
    "a=1&a=2&b=3"                  →  QueryParams (parsed, multi-valued)

Public Exports
==============
::

    from fluent_uri.datastructures import (
        AbsoluteUri,
        DEFAULT_PORTS,
        QueryParams,
        RelativeUri,
        Uri,
        is_multi_value,
        parse_query_string,
        parse_uri,
        serialize_query_string,
    )

Modules
=======
- ``uri``: Immutable absolute/relative URI values
- ``query_params``: Query string parsing, serialization and read-only view
"""

from .query_params import QueryParams, is_multi_value, parse_query_string, serialize_query_string
from .uri import DEFAULT_PORTS, AbsoluteUri, RelativeUri, Uri, parse_uri

__all__ = [
    "AbsoluteUri",
    "DEFAULT_PORTS",
    "QueryParams",
    "RelativeUri",
    "Uri",
    "is_multi_value",
    "parse_query_string",
    "parse_uri",
    "serialize_query_string",
]
