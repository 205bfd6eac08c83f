"""
SwissRailRaptor Root Configuration Group.

Root of the routing configuration: four scalar switches plus a registry of
nested parameter sets. The group is constructed explicitly by whoever sets up
routing and passed by reference to the engine; there is no module-level
instance.

Typical setup flow (as driven by a config-file loader)::

    cfg = SwissRailRaptorConfig()
    cfg.set_value("useRangeQuery", "true")
    settings = cfg.create_parameter_set("rangeQuerySettings")
    settings.set_value("maxEarlierDeparture_sec", "300")
    cfg.add_parameter_set(settings)
"""

from __future__ import annotations

import logging
from collections.abc import ValuesView
from typing import Any, ClassVar

from pydantic import Field, PrivateAttr

from ...exceptions import RaptorConfigError, UnsupportedVariantError
from ..constants import (
    DEFAULT_SUBPOPULATION,
    GROUP_NAME,
    LIST_SEPARATOR,
    LOGGER_NAME,
    PARAM_TRANSFER_PENALTY_FACTOR,
    PARAM_USE_INTERMODAL_ACCESS_EGRESS,
    PARAM_USE_MODE_MAPPING,
    PARAM_USE_RANGE_QUERY,
)
from .factory import VARIANT_TYPES, create_parameter_set
from .parameter_sets import IntermodalAccessEgress, ModeMapping, ParameterSet, RangeQuerySettings
from .reflective import ReflectiveConfig
from .registry import ParameterSetRegistry

# LOGGER CONFIGURATION
logger = logging.getLogger(LOGGER_NAME)

_PARAMS_KEY = "params"
_SETS_KEY = "parametersets"
_TYPE_KEY = "type"


# ROOT CONFIGURATION
class SwissRailRaptorConfig(ReflectiveConfig):
    """
    Routing configuration group ``swissRailRaptor``.

    Attributes:
        use_range_query: Enable range queries (departure windows).
        use_intermodal_access_egress: Enable intermodal access/egress modes.
        use_mode_mapping_for_passengers: Record passengers with mapped modes.
        transfer_penalty_travel_time_to_cost_factor: Converts transfer travel
            time into a cost penalty.
    """

    NAME: ClassVar[str] = GROUP_NAME

    use_range_query: bool = Field(default=False, alias=PARAM_USE_RANGE_QUERY)
    use_intermodal_access_egress: bool = Field(
        default=False, alias=PARAM_USE_INTERMODAL_ACCESS_EGRESS
    )
    use_mode_mapping_for_passengers: bool = Field(default=False, alias=PARAM_USE_MODE_MAPPING)
    transfer_penalty_travel_time_to_cost_factor: float = Field(
        default=0.0, alias=PARAM_TRANSFER_PENALTY_FACTOR
    )

    _registry: ParameterSetRegistry = PrivateAttr(default_factory=ParameterSetRegistry)

    @property
    def registry(self) -> ParameterSetRegistry:
        """The registry holding all nested parameter sets."""
        return self._registry

    def model_copy(
        self, *, update: dict[str, Any] | None = None, deep: bool = False
    ) -> "SwissRailRaptorConfig":
        """
        Copy the group; the copy always owns a separate registry.

        A shallow copy registers the same parameter-set instances in a new
        registry, so adding or removing sets on one group does not affect the
        other. A deep copy also duplicates the parameter sets.
        """
        copied = super().model_copy(update=update, deep=deep)
        if not deep:
            registry = ParameterSetRegistry()
            for parameter_set in self._registry:
                registry.add(parameter_set)
            copied._registry = registry
        return copied

    # ==================== Generic Parameter-Set API ====================

    def create_parameter_set(self, type_tag: str) -> ParameterSet:
        """
        Create an empty parameter set for ``type_tag`` (not yet registered).

        Raises:
            UnsupportedVariantError: If ``type_tag`` is unknown.
        """
        return create_parameter_set(type_tag)

    def add_parameter_set(self, parameter_set: ParameterSet) -> None:
        """
        Register a parameter set of any supported variant.

        Args:
            parameter_set: Instance produced by ``create_parameter_set`` or
                constructed directly.

        Raises:
            UnsupportedVariantError: If the instance is not a supported variant.
        """
        if not isinstance(parameter_set, VARIANT_TYPES):
            raise UnsupportedVariantError(
                f"Unsupported parameterset: {type(parameter_set).__name__}"
            )
        self._registry.add(parameter_set)

    def remove_parameter_set(self, parameter_set: ParameterSet) -> ParameterSet | None:
        """Remove a registered instance; returns it, or None if absent."""
        return self._registry.remove(parameter_set)

    def parameter_sets(self, type_tag: str | None = None) -> tuple[ParameterSet, ...]:
        """Registered parameter sets in insertion order, optionally by type."""
        return self._registry.parameter_sets(type_tag)

    # ==================== Range Query ====================

    def add_range_query_settings(self, settings: RangeQuerySettings) -> None:
        self._registry.add(settings)

    def get_range_query_settings(
        self, subpopulation: str | None = DEFAULT_SUBPOPULATION
    ) -> RangeQuerySettings | None:
        """
        Range-query settings stored under ``subpopulation``.

        No fallback is applied: settings without subpopulations are only
        returned for ``DEFAULT_SUBPOPULATION``.
        """
        return self._registry.lookup_range_query(subpopulation)

    def remove_range_query_settings(self, subpopulation: str | None) -> RangeQuerySettings | None:
        return self._registry.remove_range_query(subpopulation)

    # ==================== Intermodal Access / Egress ====================

    def add_intermodal_access_egress(self, parameter_set: IntermodalAccessEgress) -> None:
        self._registry.add(parameter_set)

    def get_intermodal_access_egress_sets(self) -> tuple[IntermodalAccessEgress, ...]:
        return self._registry.all_intermodal()

    # ==================== Mode Mapping ====================

    def add_mode_mapping_for_passengers(self, mapping: ModeMapping) -> None:
        self._registry.add(mapping)

    def get_mode_mapping_for_passengers(self, route_mode: str) -> ModeMapping | None:
        return self._registry.lookup_mode_mapping(route_mode)

    def get_all_mode_mappings(self) -> ValuesView[ModeMapping]:
        return self._registry.all_mode_mappings()

    # ==================== Portable Representation ====================

    def to_portable_dict(self) -> dict[str, Any]:
        """
        Convert to a plain nested dict of strings for config-file writers.

        Parameter sets are listed in registration order so that loading the
        result reproduces the same indices.

        Returns:
            ``{"params": {key: text}, "parametersets": [{"type": tag, "params": {...}}]}``
        """
        return {
            _PARAMS_KEY: self.params(),
            _SETS_KEY: [
                {_TYPE_KEY: parameter_set.NAME, _PARAMS_KEY: parameter_set.params()}
                for parameter_set in self._registry
            ],
        }

    @classmethod
    def from_portable_dict(cls, data: dict[str, Any] | None) -> "SwissRailRaptorConfig":
        """
        Build a configuration group from the layout of ``to_portable_dict``.

        Values may be strings or plain YAML scalars; both go through the same
        text parser.

        Args:
            data: Portable dict (None or empty yields the defaults).

        Returns:
            Populated configuration group.

        Raises:
            UnsupportedVariantError: On an unknown parameter-set type.
            MalformedScalarError: On a value that does not parse.
            RaptorConfigError: On unknown keys or a malformed layout.
        """
        cfg = cls()
        if not data:
            return cfg

        unknown = set(data) - {_PARAMS_KEY, _SETS_KEY}
        if unknown:
            raise RaptorConfigError(f"Unknown sections in '{GROUP_NAME}': {sorted(unknown)}")

        for key, value in (data.get(_PARAMS_KEY) or {}).items():
            cfg.set_value(key, _as_text(value))

        for entry in data.get(_SETS_KEY) or []:
            if not isinstance(entry, dict) or _TYPE_KEY not in entry:
                raise RaptorConfigError(f"Parameter set entry without '{_TYPE_KEY}': {entry!r}")
            parameter_set = cfg.create_parameter_set(entry[_TYPE_KEY])
            for key, value in (entry.get(_PARAMS_KEY) or {}).items():
                parameter_set.set_value(key, _as_text(value))
            cfg.add_parameter_set(parameter_set)

        logger.debug(f"Loaded '{GROUP_NAME}' with {len(cfg.registry)} parameter sets")
        return cfg


# INTERNAL HELPERS
def _as_text(value: Any) -> str | None:
    """Normalize a YAML scalar to the text form expected by ``set_value``."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set)):
        return LIST_SEPARATOR.join(str(item) for item in value)
    return str(value)
