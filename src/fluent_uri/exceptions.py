# Copyright 2025 Softwell S.r.l.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Exception classes for fluent-uri.

Module Structure
----------------
Two exception classes, both inheriting directly from ValueError:

1. InvalidArgument - The caller passed something the operation cannot accept
2. MalformedResult - The composed URI was rejected while building it

Design Decisions
----------------
- ValueError base: both errors describe a bad value, so existing
  ``except ValueError`` handlers keep working.
- No common base: catch both with ``except (InvalidArgument, MalformedResult)``.
- Raised synchronously, before (InvalidArgument) or at the end of
  (MalformedResult) a transformation. No partial URI is ever returned.

InvalidArgument
---------------
Raised when the URI argument is missing (``None``) or of the wrong type, when
a query parameter name is empty, or when an operation that needs an authority
(scheme, host, port, path removal) is applied to a relative URI.

Attributes:
    argument (str): Name of the offending argument (default: "uri")
    detail (str): Error detail message

Example:
    >>> with_path(None, "/users")
    Traceback (most recent call last):
    ...
    fluent_uri.exceptions.InvalidArgument: uri is required

MalformedResult
---------------
Raised when the new URI cannot be represented: invalid scheme, invalid host,
port out of range, or unparsable input text. The ``urllib.parse`` error, when
there is one, is chained as ``__cause__``.

Attributes:
    value (str): The rejected value
    detail (str): Error detail message

Example:
    >>> with_host("http://example.com", "bad host")
    Traceback (most recent call last):
    ...
    fluent_uri.exceptions.MalformedResult: invalid host: 'bad host'
"""

__all__ = ["InvalidArgument", "MalformedResult"]


class InvalidArgument(ValueError):
    """
    Invalid argument passed to a URI operation.

    Attributes:
        argument: Name of the offending argument.
        detail: Error detail message.

    Example:
        >>> raise InvalidArgument("uri is required")
        >>> raise InvalidArgument("query parameter name is required", argument="key")
    """

    def __init__(self, detail: str, argument: str = "uri") -> None:
        """
        Initialize invalid argument exception.

        Args:
            detail: Error detail message.
            argument: Name of the offending argument (default: "uri").
        """
        self.argument = argument
        self.detail = detail
        super().__init__(detail)

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"InvalidArgument(argument={self.argument!r}, detail={self.detail!r})"


class MalformedResult(ValueError):
    """
    The composed URI was rejected.

    Attributes:
        value: The rejected value (host, port, scheme or URI text).
        detail: Error detail message.

    Example:
        >>> raise MalformedResult("invalid port: 70000", value="70000")
    """

    def __init__(self, detail: str, value: str = "") -> None:
        """
        Initialize malformed result exception.

        Args:
            detail: Error detail message.
            value: The rejected value (default: "").
        """
        self.value = value
        self.detail = detail
        super().__init__(detail)

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"MalformedResult(value={self.value!r}, detail={self.detail!r})"
