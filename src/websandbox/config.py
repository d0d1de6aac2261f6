"""Sandbox configuration.

SandboxConfig is a frozen dataclass. Every adapter takes an optional
``config=`` and falls back to ``DEFAULT_CONFIG``.
"""

import codecs
from dataclasses import dataclass

from websandbox.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class SandboxConfig:
    """Header and stream adapter configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = SandboxConfig(header_encoding="utf-8")
    """

    # Headers
    cookie_header: str = "set-cookie"  # Matched case-insensitively
    header_encoding: str = "latin-1"
    combine_separator: str = ", "  # Fetch-style join for repeated headers

    # Streams
    skip_empty_chunks: bool = True

    def __post_init__(self) -> None:
        if not self.cookie_header.strip():
            raise ConfigurationError("cookie_header must be a non-empty header name")
        try:
            codecs.lookup(self.header_encoding)
        except LookupError as exc:
            raise ConfigurationError(
                f"Unknown header_encoding {self.header_encoding!r}"
            ) from exc


DEFAULT_CONFIG = SandboxConfig()
