"""
Project-wide Constants.

Single source of truth for the external names of the routing configuration:
group name, scalar keys, parameter-set type tags and per-variant keys. These
strings form the textual boundary with the host application's config file
and must never change.

Module Attributes:
    LOGGER_NAME: Global logger identity used by all modules.
    GROUP_NAME: Name of the root configuration group.
    DEFAULT_SUBPOPULATION: Index key for range-query settings without subpopulations.
    NULL_LITERAL: Text used for unset optional string values.
"""

from typing import Final

# GLOBAL CONSTANTS
# Global logger identity used by all modules to ensure log synchronization
LOGGER_NAME: Final[str] = "SwissRaptor"

# ROOT GROUP
GROUP_NAME: Final[str] = "swissRailRaptor"

PARAM_USE_RANGE_QUERY: Final[str] = "useRangeQuery"
PARAM_USE_INTERMODAL_ACCESS_EGRESS: Final[str] = "useIntermodalAccessEgress"
PARAM_USE_MODE_MAPPING: Final[str] = "useModeMappingForPassengers"
PARAM_TRANSFER_PENALTY_FACTOR: Final[str] = "transferPenaltyTravelTimeToCostFactor"

# PARAMETER-SET TYPE TAGS
TYPE_RANGE_QUERY: Final[str] = "rangeQuerySettings"
TYPE_INTERMODAL_ACCESS_EGRESS: Final[str] = "intermodalAccessEgress"
TYPE_MODE_MAPPING: Final[str] = "modeMapping"

# PER-VARIANT KEYS
PARAM_SUBPOPS: Final[str] = "subpopulations"
PARAM_MAX_EARLIER_DEPARTURE: Final[str] = "maxEarlierDeparture_sec"
PARAM_MAX_LATER_DEPARTURE: Final[str] = "maxLaterDeparture_sec"
PARAM_MODE: Final[str] = "mode"
PARAM_RADIUS: Final[str] = "radius"
PARAM_LINKID_ATTRIBUTE: Final[str] = "linkIdAttribute"
PARAM_FILTER_ATTRIBUTE: Final[str] = "filterAttribute"
PARAM_FILTER_VALUE: Final[str] = "filterValue"
PARAM_ROUTE_MODE: Final[str] = "routeMode"
PARAM_PASSENGER_MODE: Final[str] = "passengerMode"

# INDEXING & MARSHALLING
# Range-query settings that apply to all agents are indexed under this key
DEFAULT_SUBPOPULATION: Final[None] = None

NULL_LITERAL: Final[str] = "null"
LIST_SEPARATOR: Final[str] = ","
