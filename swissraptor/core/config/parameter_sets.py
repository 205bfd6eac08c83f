"""
Parameter-Set Variant Schemas.

The routing configuration nests three families of parameter sets inside its
root group. Each family is a closed pydantic schema identified by a constant
type tag, with field aliases matching the external config-file keys.

Variants:

- ``RangeQuerySettings``: departure window searched by range queries,
  optionally restricted to subpopulations.
- ``IntermodalAccessEgress``: a mode usable to reach or leave transit stops,
  with search radius and optional stop filter.
- ``ModeMapping``: maps a transit route mode to the mode passengers are
  recorded with.
"""

from __future__ import annotations

from typing import ClassVar, Union

from pydantic import Field

from ..constants import (
    PARAM_FILTER_ATTRIBUTE,
    PARAM_FILTER_VALUE,
    PARAM_LINKID_ATTRIBUTE,
    PARAM_MAX_EARLIER_DEPARTURE,
    PARAM_MAX_LATER_DEPARTURE,
    PARAM_MODE,
    PARAM_PASSENGER_MODE,
    PARAM_RADIUS,
    PARAM_ROUTE_MODE,
    PARAM_SUBPOPS,
    TYPE_INTERMODAL_ACCESS_EGRESS,
    TYPE_MODE_MAPPING,
    TYPE_RANGE_QUERY,
)
from .reflective import ReflectiveConfig
from .types import DepartureWindow, SearchRadius, Subpopulations


# BASE PARAMETER SET
class ParameterSetConfig(ReflectiveConfig):
    """
    Common base of all parameter-set variants.

    Subclasses set ``NAME`` to their type tag; the tag is a class constant,
    never a field, so it does not show up in ``params()``.
    """

    @property
    def type_tag(self) -> str:
        """Type discriminator of this variant."""
        return self.NAME


# RANGE QUERY
class RangeQuerySettings(ParameterSetConfig):
    """
    Departure window for range queries.

    Attributes:
        subpopulations: Subpopulations the settings apply to (empty = all agents).
        max_earlier_departure: Seconds the search may depart before the requested time.
        max_later_departure: Seconds the search may depart after the requested time.
    """

    NAME: ClassVar[str] = TYPE_RANGE_QUERY

    subpopulations: Subpopulations = Field(default_factory=set, alias=PARAM_SUBPOPS)
    max_earlier_departure: DepartureWindow = Field(default=600, alias=PARAM_MAX_EARLIER_DEPARTURE)
    max_later_departure: DepartureWindow = Field(default=900, alias=PARAM_MAX_LATER_DEPARTURE)


# INTERMODAL ACCESS / EGRESS
class IntermodalAccessEgress(ParameterSetConfig):
    """
    Access/egress mode for intermodal routing.

    Attributes:
        subpopulations: Subpopulations the mode is available to (empty = all agents).
        mode: Access/egress mode identifier (e.g. ``'bike'``).
        radius: Search radius around the agent's location, in meters.
        link_id_attribute: Stop attribute naming the access link in the mode's network.
        filter_attribute: Stop attribute used to restrict candidate stops.
        filter_value: Required value of ``filter_attribute``.
    """

    NAME: ClassVar[str] = TYPE_INTERMODAL_ACCESS_EGRESS

    subpopulations: Subpopulations = Field(
        default_factory=set,
        alias=PARAM_SUBPOPS,
        description=(
            "Comma-separated list of names of subpopulations to which this mode is available. "
            "Leaving it empty applies to all agents."
        ),
    )
    mode: str | None = Field(default=None, alias=PARAM_MODE)
    radius: SearchRadius = Field(default=0.0, alias=PARAM_RADIUS)
    link_id_attribute: str | None = Field(
        default=None,
        alias=PARAM_LINKID_ATTRIBUTE,
        description=(
            "If the mode is routed on the network, specify which linkId acts as access link "
            "to this stop in the transport modes sub-network."
        ),
    )
    filter_attribute: str | None = Field(
        default=None,
        alias=PARAM_FILTER_ATTRIBUTE,
        description=(
            "Name of the transit stop attribute used to filter stops that should be included "
            "in the set of potential stops for access and egress. The attribute should be of "
            "type String. 'null' disables the filter and all stops within the specified "
            "radius will be used."
        ),
    )
    filter_value: str | None = Field(
        default=None,
        alias=PARAM_FILTER_VALUE,
        description=(
            "Only stops where the filter attribute has the value specified here will be "
            "considered as access or egress stops."
        ),
    )


# MODE MAPPING
class ModeMapping(ParameterSetConfig):
    """
    Passenger mode recorded for legs on routes of a given transit mode.

    Attributes:
        route_mode: Transit route mode (unique key within the registry).
        passenger_mode: Mode assigned to passengers travelling on such routes.

    Example:
        >>> ModeMapping("rail", "train").passenger_mode
        'train'
    """

    NAME: ClassVar[str] = TYPE_MODE_MAPPING

    route_mode: str | None = Field(default=None, alias=PARAM_ROUTE_MODE)
    passenger_mode: str | None = Field(default=None, alias=PARAM_PASSENGER_MODE)

    def __init__(
        self, route_mode: str | None = None, passenger_mode: str | None = None, **data
    ) -> None:
        if route_mode is not None:
            data.setdefault("route_mode", route_mode)
        if passenger_mode is not None:
            data.setdefault("passenger_mode", passenger_mode)
        super().__init__(**data)


# Closed set of variants accepted by the registry
ParameterSet = Union[RangeQuerySettings, IntermodalAccessEgress, ModeMapping]
