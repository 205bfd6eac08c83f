"""
Semantic Type Definitions & Validation Primitives.

Annotated types shared by the routing configuration schemas. Constraints are
enforced by pydantic both at construction and on attribute assignment, so an
invalid departure window or radius never reaches the routing engine.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from .marshalling import parse_string_set


# VALIDATORS
def _coerce_subpopulations(v: Any) -> Any:
    """
    Accept subpopulations as comma-separated text or any iterable of names.

    Args:
        v: Raw input (``None``, text or iterable).

    Returns:
        A set of names, or the untouched input for pydantic to reject.
    """
    if v is None:
        return set()
    if isinstance(v, str):
        return parse_string_set(v)
    if isinstance(v, (list, tuple, set, frozenset)):
        return {str(item).strip() for item in v if str(item).strip()}
    return v


# ROUTING
DepartureWindow = Annotated[int, Field(ge=0)]
SearchRadius = Annotated[float, Field(ge=0.0)]
Subpopulations = Annotated[set[str], BeforeValidator(_coerce_subpopulations)]
