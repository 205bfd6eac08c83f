"""
Parameter-Set Factory Module.

Registry-based dispatch from a type tag to the matching parameter-set
variant. The set of variants is closed: adding a family means adding one
entry to ``_VARIANT_REGISTRY`` and nothing else.

Key Components:

- ``create_parameter_set``: type tag -> fresh instance with default values
- ``type_tag_of``: runtime instance -> type tag
- ``supported_type_tags``: tags accepted by the factory

Example:
    >>> from swissraptor.core.config.factory import create_parameter_set
    >>> settings = create_parameter_set("rangeQuerySettings")
    >>> settings.max_earlier_departure
    600
"""

from __future__ import annotations

import logging

from ...exceptions import UnsupportedVariantError
from ..constants import LOGGER_NAME
from .parameter_sets import IntermodalAccessEgress, ModeMapping, ParameterSet, RangeQuerySettings

# LOGGER CONFIGURATION
logger = logging.getLogger(LOGGER_NAME)

_VARIANT_REGISTRY: dict[str, type[ParameterSet]] = {
    RangeQuerySettings.NAME: RangeQuerySettings,
    IntermodalAccessEgress.NAME: IntermodalAccessEgress,
    ModeMapping.NAME: ModeMapping,
}

VARIANT_TYPES: tuple[type[ParameterSet], ...] = tuple(_VARIANT_REGISTRY.values())


def create_parameter_set(type_tag: str) -> ParameterSet:
    """
    Instantiate the parameter-set variant registered under ``type_tag``.

    Args:
        type_tag: Type discriminator read from the config file.

    Returns:
        New variant instance with all fields at their defaults.

    Raises:
        UnsupportedVariantError: If ``type_tag`` is not a known variant.
    """
    variant = _VARIANT_REGISTRY.get(type_tag)
    if variant is None:
        error_msg = f"Unsupported parameterset-type: {type_tag}"
        logger.error(error_msg)
        raise UnsupportedVariantError(error_msg)
    return variant()


def type_tag_of(parameter_set: object) -> str:
    """
    Resolve the type tag of a runtime parameter-set instance.

    Args:
        parameter_set: Candidate parameter set.

    Returns:
        The variant's type tag.

    Raises:
        UnsupportedVariantError: If the instance is not one of the known variants.
    """
    for tag, variant in _VARIANT_REGISTRY.items():
        if isinstance(parameter_set, variant):
            return tag
    raise UnsupportedVariantError(f"Unsupported parameterset: {type(parameter_set).__name__}")


def supported_type_tags() -> tuple[str, ...]:
    """Type tags accepted by ``create_parameter_set``, in registration order."""
    return tuple(_VARIANT_REGISTRY)
