"""
Core Utilities Package

This package exposes the essential components for the routing configuration:
the typed configuration groups and parameter-set registry, logging, YAML
persistence, and the project constants that name every external key.
"""

# Configuration
from .config import (
    IntermodalAccessEgress,
    ModeMapping,
    ParameterSetRegistry,
    RangeQuerySettings,
    SwissRailRaptorConfig,
    create_parameter_set,
    supported_type_tags,
    type_tag_of,
)

# Project Constants
from .constants import (
    DEFAULT_SUBPOPULATION,
    GROUP_NAME,
    LOGGER_NAME,
    TYPE_INTERMODAL_ACCESS_EGRESS,
    TYPE_MODE_MAPPING,
    TYPE_RANGE_QUERY,
)

# Input/Output Utilities
from .io import load_config_from_yaml, load_raptor_config, save_config_as_yaml

# Logging
from .logger import Logger, LogStyle, log_raptor_summary

__all__ = [
    # Configuration
    "SwissRailRaptorConfig",
    "ParameterSetRegistry",
    "RangeQuerySettings",
    "IntermodalAccessEgress",
    "ModeMapping",
    "create_parameter_set",
    "type_tag_of",
    "supported_type_tags",
    # Constants
    "DEFAULT_SUBPOPULATION",
    "GROUP_NAME",
    "LOGGER_NAME",
    "TYPE_RANGE_QUERY",
    "TYPE_INTERMODAL_ACCESS_EGRESS",
    "TYPE_MODE_MAPPING",
    # I/O
    "save_config_as_yaml",
    "load_config_from_yaml",
    "load_raptor_config",
    # Logging
    "Logger",
    "LogStyle",
    "log_raptor_summary",
]
