"""
Parameter-Set Registry.

Owns the canonical, insertion-ordered collection of every parameter set
attached to the routing configuration and keeps one derived index per
variant family in step with it:

    * range-query settings by subpopulation, fanned out to one key per named
      subpopulation or stored once under ``DEFAULT_SUBPOPULATION`` (``None``)
    * intermodal access/egress sets as an ordered list, duplicates allowed
    * mode mappings by route mode, last write wins

Indices are updated eagerly inside ``add``/``remove``; when any public method
returns, the sequence and the indices are consistent. Lookups never fall back
from a named subpopulation to the default key: callers wanting default
behaviour query ``DEFAULT_SUBPOPULATION`` explicitly.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, ValuesView

from ...exceptions import RaptorConfigError, UnsupportedVariantError
from ..constants import DEFAULT_SUBPOPULATION, LOGGER_NAME
from .parameter_sets import IntermodalAccessEgress, ModeMapping, ParameterSet, RangeQuerySettings

# LOGGER CONFIGURATION
logger = logging.getLogger(LOGGER_NAME)


class ParameterSetRegistry:
    """
    Heterogeneous parameter-set collection with per-family lookup indices.

    Instances are compared by identity throughout: two parameter sets with
    equal field values are still distinct registry entries.

    Index keys (``subpopulations`` of range-query settings, ``route_mode`` of
    mode mappings) are read once on ``add``. Changing them on a registered
    instance leaves the indices stale; remove the instance, edit it, then
    add it again.

    Example:
        >>> registry = ParameterSetRegistry()
        >>> registry.add(RangeQuerySettings(subpopulations="commuters,students"))
        >>> registry.lookup_range_query("students") is registry.lookup_range_query("commuters")
        True
    """

    def __init__(self) -> None:
        self._sets: list[ParameterSet] = []
        self._range_query_by_subpop: dict[str | None, RangeQuerySettings] = {}
        self._intermodal: list[IntermodalAccessEgress] = []
        self._mode_mapping_by_route_mode: dict[str, ModeMapping] = {}

    # ==================== Mutation ====================

    def add(self, parameter_set: ParameterSet) -> None:
        """
        Register a parameter set and index it under its family.

        Args:
            parameter_set: Instance of one of the three variants.

        Raises:
            UnsupportedVariantError: If the instance is not a known variant.
            RaptorConfigError: If a mode mapping has no route mode, or the
                very same instance is already registered.
        """
        if parameter_set in self:
            raise RaptorConfigError(
                f"{parameter_set.NAME} parameter set is already registered; remove it first"
            )

        if isinstance(parameter_set, RangeQuerySettings):
            self._sets.append(parameter_set)
            for key in self._range_query_keys(parameter_set):
                self._range_query_by_subpop[key] = parameter_set
        elif isinstance(parameter_set, IntermodalAccessEgress):
            self._sets.append(parameter_set)
            self._intermodal.append(parameter_set)
        elif isinstance(parameter_set, ModeMapping):
            if parameter_set.route_mode is None:
                raise RaptorConfigError("modeMapping parameter set requires a routeMode")
            previous = self._mode_mapping_by_route_mode.get(parameter_set.route_mode)
            if previous is not None and previous is not parameter_set:
                logger.debug(f"Mode mapping for route mode '{parameter_set.route_mode}' replaced")
            self._sets.append(parameter_set)
            self._mode_mapping_by_route_mode[parameter_set.route_mode] = parameter_set
        else:
            raise UnsupportedVariantError(
                f"Unsupported parameterset: {type(parameter_set).__name__}"
            )
        logger.debug(f"Registered {parameter_set.NAME} parameter set ({len(self._sets)} total)")

    def remove(self, parameter_set: ParameterSet) -> ParameterSet | None:
        """
        Remove a registered instance from the sequence and from every index slot.

        Keys the instance held are handed back to the latest remaining set of
        the same family that claims them, so the indices match a fresh replay
        of the sequence.

        Args:
            parameter_set: The instance to remove (matched by identity).

        Returns:
            The removed instance, or None if it was not registered.
        """
        if not self._discard(parameter_set):
            return None

        if isinstance(parameter_set, RangeQuerySettings):
            freed = _drop_values(self._range_query_by_subpop, parameter_set)
            self._restore_range_query(freed)
        elif isinstance(parameter_set, IntermodalAccessEgress):
            self._intermodal[:] = [s for s in self._intermodal if s is not parameter_set]
        elif isinstance(parameter_set, ModeMapping):
            freed = _drop_values(self._mode_mapping_by_route_mode, parameter_set)
            self._restore_mode_mapping(freed)
        logger.debug(f"Removed {parameter_set.NAME} parameter set ({len(self._sets)} left)")
        return parameter_set

    def remove_range_query(self, subpopulation: str | None) -> RangeQuerySettings | None:
        """
        Remove the range-query settings indexed under ``subpopulation``.

        The settings are scrubbed from every key they were fanned out to and
        from the ordered sequence.

        Args:
            subpopulation: Subpopulation name, or ``DEFAULT_SUBPOPULATION``.

        Returns:
            The removed settings, or None if no settings were indexed there.
        """
        settings = self._range_query_by_subpop.get(subpopulation)
        if settings is None:
            return None
        return self.remove(settings)

    # ==================== Lookups ====================

    def lookup_range_query(self, subpopulation: str | None) -> RangeQuerySettings | None:
        """
        Exact-key lookup of range-query settings.

        Args:
            subpopulation: Subpopulation name, or ``DEFAULT_SUBPOPULATION`` for
                the settings that apply to all agents.

        Returns:
            The settings stored under that key, or None.
        """
        return self._range_query_by_subpop.get(subpopulation)

    def lookup_mode_mapping(self, route_mode: str) -> ModeMapping | None:
        """Exact-key lookup of the mode mapping for ``route_mode``."""
        return self._mode_mapping_by_route_mode.get(route_mode)

    def all_intermodal(self) -> tuple[IntermodalAccessEgress, ...]:
        """Intermodal access/egress sets in insertion order."""
        return tuple(self._intermodal)

    def all_mode_mappings(self) -> ValuesView[ModeMapping]:
        """Live view over the mode mappings currently reachable by route mode."""
        return self._mode_mapping_by_route_mode.values()

    def range_query_keys(self) -> tuple[str | None, ...]:
        """Subpopulation keys that currently hold range-query settings."""
        return tuple(self._range_query_by_subpop)

    def parameter_sets(self, type_tag: str | None = None) -> tuple[ParameterSet, ...]:
        """
        Registered parameter sets in insertion order.

        Args:
            type_tag: Restrict the result to one variant family (None = all).

        Returns:
            tuple of parameter sets.
        """
        if type_tag is None:
            return tuple(self._sets)
        return tuple(s for s in self._sets if s.NAME == type_tag)

    # ==================== Container Protocol ====================

    def __len__(self) -> int:
        return len(self._sets)

    def __iter__(self) -> Iterator[ParameterSet]:
        return iter(tuple(self._sets))

    def __contains__(self, parameter_set: object) -> bool:
        return any(s is parameter_set for s in self._sets)

    def __repr__(self) -> str:
        return (
            f"ParameterSetRegistry(sets={len(self._sets)}, "
            f"range_query_keys={len(self._range_query_by_subpop)}, "
            f"intermodal={len(self._intermodal)}, "
            f"mode_mappings={len(self._mode_mapping_by_route_mode)})"
        )

    # ==================== Internal Helpers ====================

    @staticmethod
    def _range_query_keys(settings: RangeQuerySettings) -> list[str | None]:
        if not settings.subpopulations:
            return [DEFAULT_SUBPOPULATION]
        return sorted(settings.subpopulations)

    def _discard(self, parameter_set: object) -> bool:
        for index, registered in enumerate(self._sets):
            if registered is parameter_set:
                del self._sets[index]
                return True
        return False

    def _restore_range_query(self, keys: list[str | None]) -> None:
        """Re-bind freed keys to the latest remaining settings that claim them."""
        for registered in self._sets:
            if isinstance(registered, RangeQuerySettings):
                for key in self._range_query_keys(registered):
                    if key in keys:
                        self._range_query_by_subpop[key] = registered

    def _restore_mode_mapping(self, keys: list[str]) -> None:
        for registered in self._sets:
            if isinstance(registered, ModeMapping) and registered.route_mode in keys:
                self._mode_mapping_by_route_mode[registered.route_mode] = registered


def _drop_values(index: dict, value: object) -> list:
    """Delete, in place, every key of ``index`` bound to ``value``; return the keys."""
    keys = [k for k, v in index.items() if v is value]
    for key in keys:
        del index[key]
    return keys
