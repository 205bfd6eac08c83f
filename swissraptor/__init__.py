"""
SwissRaptor Config: typed configuration for the SwissRailRaptor transit router.

Top-level convenience API re-exporting the most commonly used components
from subpackages, so host applications can write:

    from swissraptor import SwissRailRaptorConfig, RangeQuerySettings
"""

from importlib.metadata import version as _pkg_version

__version__ = _pkg_version("swissraptor-config")

from .core import (
    DEFAULT_SUBPOPULATION,
    IntermodalAccessEgress,
    Logger,
    LogStyle,
    ModeMapping,
    RangeQuerySettings,
    SwissRailRaptorConfig,
    create_parameter_set,
    load_raptor_config,
    log_raptor_summary,
    save_config_as_yaml,
)
from .exceptions import (
    MalformedScalarError,
    RaptorConfigError,
    RaptorError,
    UnsupportedVariantError,
)

__all__ = [
    "__version__",
    # Configuration
    "SwissRailRaptorConfig",
    "RangeQuerySettings",
    "IntermodalAccessEgress",
    "ModeMapping",
    "create_parameter_set",
    "DEFAULT_SUBPOPULATION",
    # I/O
    "save_config_as_yaml",
    "load_raptor_config",
    # Logging
    "Logger",
    "LogStyle",
    "log_raptor_summary",
    # Exceptions
    "RaptorError",
    "RaptorConfigError",
    "UnsupportedVariantError",
    "MalformedScalarError",
]
