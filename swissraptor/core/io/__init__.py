"""
Input/Output & Persistence Utilities.

YAML persistence of the routing configuration group.
"""

from .serialization import load_config_from_yaml, load_raptor_config, save_config_as_yaml

__all__ = [
    "save_config_as_yaml",
    "load_config_from_yaml",
    "load_raptor_config",
]
