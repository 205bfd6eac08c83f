"""
SwissRaptor Exception Hierarchy.

RaptorError (base, Exception)
└── RaptorConfigError(RaptorError, ValueError)   ← config validation
    ├── UnsupportedVariantError                  ← unknown parameter-set type
    └── MalformedScalarError                     ← text does not parse as the field type

RaptorConfigError multi-inherits from ValueError so pydantic validators can
raise it directly and callers can keep catching ``ValueError``.
"""

from __future__ import annotations


class RaptorError(Exception):
    """Base exception for all SwissRaptor configuration errors."""


class RaptorConfigError(RaptorError, ValueError):
    """Configuration validation error (backward-compatible with ValueError)."""


class UnsupportedVariantError(RaptorConfigError):
    """Parameter-set type tag or runtime variant outside the supported set."""


class MalformedScalarError(RaptorConfigError):
    """
    Raw text that cannot be converted to a scalar field's declared type.

    Attributes:
        key: External key of the offending field.
        raw: The raw text as received from the loader.
    """

    def __init__(self, key: str, raw: str | None, reason: str = "") -> None:
        self.key = key
        self.raw = raw
        message = f"Malformed value for '{key}': {raw!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
