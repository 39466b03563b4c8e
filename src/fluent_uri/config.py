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
Query-string codec configuration for fluent-uri.

Options are merged with genro-toolbox ``SmartOptions``, priority:

    hardcoded DEFAULTS < environment variables (FLUENT_URI_*) < constructor arguments

Options:
    encoding (str): Charset used to percent-encode and decode. Default "utf-8".
    errors (str): Codec error handler for encoding and decoding. Default
        "surrogateescape", so undecodable escapes such as %FF survive a round trip.
    plus_spaces (bool): Serialize spaces as "+" instead of "%20". Default False.
    skip_none (bool): Omit ``None`` values when serializing. Default True.

Example:
    >>> config = UriConfig(plus_spaces=True)
    >>> serialize_query_string({"q": "a b"}, config=config)
    'q=a+b'
"""

from __future__ import annotations

from functools import lru_cache

from genro_toolbox import SmartOptions  # type: ignore[import-untyped]

__all__ = ["UriConfig", "default_config", "DEFAULTS"]

DEFAULTS = {"encoding": "utf-8", "errors": "surrogateescape", "plus_spaces": False, "skip_none": True}


def _uri_opts_spec(
    encoding: str,
    errors: str,
    plus_spaces: bool,
    skip_none: bool,
) -> None:
    """Reference function for SmartOptions type extraction (no defaults)."""


class UriConfig:
    """Read-only query-string codec options."""

    __slots__ = ("_opts",)

    def __init__(
        self,
        encoding: str | None = None,
        errors: str | None = None,
        plus_spaces: bool | None = None,
        skip_none: bool | None = None,
    ) -> None:
        env_opts = SmartOptions(_uri_opts_spec, env="FLUENT_URI", argv=[])
        caller_opts = SmartOptions(
            dict(encoding=encoding, errors=errors, plus_spaces=plus_spaces, skip_none=skip_none),
            ignore_none=True,
        )
        self._opts = SmartOptions(DEFAULTS) + env_opts + caller_opts

    @property
    def encoding(self) -> str:
        """Charset for percent-encoding and decoding."""
        return str(self._opts["encoding"] or DEFAULTS["encoding"])

    @property
    def errors(self) -> str:
        """Codec error handler used when decoding."""
        return str(self._opts["errors"] or DEFAULTS["errors"])

    @property
    def plus_spaces(self) -> bool:
        """True if spaces are serialized as '+'."""
        return bool(self._opts["plus_spaces"])

    @property
    def skip_none(self) -> bool:
        """True if None values are left out of serialized queries."""
        value = self._opts["skip_none"]
        return bool(DEFAULTS["skip_none"] if value is None else value)

    def __repr__(self) -> str:
        return (
            f"UriConfig(encoding={self.encoding!r}, errors={self.errors!r}, "
            f"plus_spaces={self.plus_spaces}, skip_none={self.skip_none})"
        )


@lru_cache(maxsize=1)
def default_config() -> UriConfig:
    """Return the process-wide configuration, built on first use."""
    return UriConfig()
