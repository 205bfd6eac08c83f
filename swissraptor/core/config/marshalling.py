"""
String Marshalling for Scalar Fields.

Bidirectional, locale-independent conversion between the textual values of
the host config file and typed Python values. Every supported kind
round-trips: ``parse_scalar(k, kind, format_scalar(kind, v)) == v``.

Rules:
    * bool: ``"true"`` / ``"false"`` (parsing ignores case and surrounding blanks)
    * int: optional sign followed by base-10 digits
    * float: shortest round-tripping decimal (``repr``), ``NaN``/``Infinity`` accepted
    * str: verbatim, ``"null"`` stands for an unset optional value
    * set: items joined by commas in sorted order, empty text is the empty set
"""

from __future__ import annotations

import math
import re
from typing import Any, Literal

from ...exceptions import MalformedScalarError
from ..constants import LIST_SEPARATOR, NULL_LITERAL

ScalarKind = Literal["bool", "int", "float", "str", "set"]

_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_FLOAT_SPECIALS = {
    "nan": math.nan,
    "infinity": math.inf,
    "+infinity": math.inf,
    "-infinity": -math.inf,
    "inf": math.inf,
    "+inf": math.inf,
    "-inf": -math.inf,
}


# SETS
def parse_string_set(text: str) -> set[str]:
    """
    Split a comma-separated list into a set of trimmed, non-empty names.

    Args:
        text: Raw list text, e.g. ``"commuters, students"``.

    Returns:
        Set of names; empty when ``text`` is blank.
    """
    return {item.strip() for item in text.split(LIST_SEPARATOR) if item.strip()}


def format_string_set(values: set[str] | frozenset[str]) -> str:
    """Join names with commas in sorted order."""
    return LIST_SEPARATOR.join(sorted(values))


# SCALARS
def format_scalar(kind: ScalarKind, value: Any) -> str:
    """
    Render a typed value as config-file text.

    Args:
        kind: Declared field kind.
        value: Typed value (``None`` allowed for optional fields).

    Returns:
        Text representation that ``parse_scalar`` maps back to ``value``.
    """
    if value is None:
        return NULL_LITERAL
    if kind == "bool":
        return "true" if value else "false"
    if kind == "int":
        return str(int(value))
    if kind == "float":
        return _format_float(float(value))
    if kind == "set":
        return format_string_set(value)
    return str(value)


def parse_scalar(key: str, kind: ScalarKind, text: str | None, optional: bool = False) -> Any:
    """
    Convert config-file text to a typed value.

    Args:
        key: External key of the field (reported on failure).
        kind: Declared field kind.
        text: Raw text as read by the loader (None counts as unset).
        optional: Whether ``"null"`` maps to ``None``.

    Returns:
        The typed value.

    Raises:
        MalformedScalarError: If ``text`` does not parse as ``kind``.
    """
    if text is None:
        if optional:
            return None
        if kind == "set":
            return set()
        raise MalformedScalarError(key, text, f"expected {kind}, got nothing")

    if optional and text.strip() == NULL_LITERAL:
        return None

    if kind == "bool":
        normalized = text.strip().lower()
        if normalized == "true":
            return True
        if normalized == "false":
            return False
        raise MalformedScalarError(key, text, "expected 'true' or 'false'")

    if kind == "int":
        stripped = text.strip()
        if not _INT_RE.match(stripped):
            raise MalformedScalarError(key, text, "expected an integer")
        return int(stripped)

    if kind == "float":
        return _parse_float(key, text)

    if kind == "set":
        return parse_string_set(text)

    return text


# INTERNAL HELPERS
def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return repr(value)


def _parse_float(key: str, text: str) -> float:
    stripped = text.strip()
    special = _FLOAT_SPECIALS.get(stripped.lower())
    if special is not None:
        return special
    if not _FLOAT_RE.match(stripped):
        raise MalformedScalarError(key, text, "expected a decimal number")
    return float(stripped)
