"""
Configuration Package Initialization.

Provides a flat public API for the routing configuration schemas while
deferring the pydantic model construction until a component is used.

Architecture:

- Lazy Import Pattern (PEP 562): Uses __getattr__ for on-demand loading
- Flat API: All components accessible from swissraptor.core.config namespace
- Caching: Loaded attributes cached in globals() for subsequent access

Example:
    >>> from swissraptor.core.config import SwissRailRaptorConfig, ModeMapping
    >>> cfg = SwissRailRaptorConfig()
    >>> cfg.add_mode_mapping_for_passengers(ModeMapping("rail", "train"))
"""

from importlib import import_module
from typing import Any

__all__ = [
    "SwissRailRaptorConfig",
    "ParameterSetRegistry",
    "ParameterSet",
    "ParameterSetConfig",
    "RangeQuerySettings",
    "IntermodalAccessEgress",
    "ModeMapping",
    "ReflectiveConfig",
    "ScalarField",
    "create_parameter_set",
    "type_tag_of",
    "supported_type_tags",
    "format_scalar",
    "parse_scalar",
]

# LAZY IMPORTS MAPPING
_PKG = "swissraptor.core.config"
_SETS_MOD = f"{_PKG}.parameter_sets"
_FACTORY_MOD = f"{_PKG}.factory"
_REFLECTIVE_MOD = f"{_PKG}.reflective"
_MARSHALLING_MOD = f"{_PKG}.marshalling"

_LAZY_IMPORTS: dict[str, str] = {
    "SwissRailRaptorConfig": f"{_PKG}.raptor_config",
    "ParameterSetRegistry": f"{_PKG}.registry",
    "ParameterSet": _SETS_MOD,
    "ParameterSetConfig": _SETS_MOD,
    "RangeQuerySettings": _SETS_MOD,
    "IntermodalAccessEgress": _SETS_MOD,
    "ModeMapping": _SETS_MOD,
    "ReflectiveConfig": _REFLECTIVE_MOD,
    "ScalarField": _REFLECTIVE_MOD,
    "create_parameter_set": _FACTORY_MOD,
    "type_tag_of": _FACTORY_MOD,
    "supported_type_tags": _FACTORY_MOD,
    "format_scalar": _MARSHALLING_MOD,
    "parse_scalar": _MARSHALLING_MOD,
}


# LAZY LOADER FUNCTION
def __getattr__(name: str) -> Any:
    """
    Lazily import configuration components on first access.

    Args:
        name: Name of the configuration component to import.

    Returns:
        The requested class or function.

    Raises:
        AttributeError: If name is not in the public API (__all__).
    """
    if name not in _LAZY_IMPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module = import_module(_LAZY_IMPORTS[name])
    attr = getattr(module, name)

    # Cache on module for future access
    globals()[name] = attr
    return attr


# DIR SUPPORT
def __dir__() -> list[str]:
    """
    Support for dir() and IDE auto-completion.

    Returns:
        Sorted list of public configuration component names
    """
    return sorted(__all__)
