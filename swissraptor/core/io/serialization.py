"""
Configuration Serialization & Persistence Utilities.

Reads and writes the routing configuration group as YAML using the portable
layout of ``SwissRailRaptorConfig.to_portable_dict``. The YAML document may
hold other groups of the host application; only the ``swissRailRaptor``
section is touched when loading.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from ...exceptions import RaptorConfigError
from ..constants import GROUP_NAME, LOGGER_NAME

if TYPE_CHECKING:  # pragma: no cover
    from ..config import SwissRailRaptorConfig

logger = logging.getLogger(LOGGER_NAME)


# YAML ORCHESTRATION
def save_config_as_yaml(cfg: "SwissRailRaptorConfig", yaml_path: Path) -> Path:
    """
    Serialize the routing configuration group to a YAML file.

    Args:
        cfg: Configuration group to persist.
        yaml_path: Destination filesystem path.

    Returns:
        Path: The path the YAML was written to.

    Raises:
        OSError: If a filesystem-level error occurs (permissions, disk full).
    """
    data = {GROUP_NAME: cfg.to_portable_dict()}

    try:
        _persist_yaml_atomic(data, yaml_path)
    except OSError as e:
        logger.error(f"IO Error: Could not write YAML to {yaml_path}. Error: {e}")
        raise

    logger.debug(f"Routing configuration written to {yaml_path.name}")
    return yaml_path


def load_config_from_yaml(yaml_path: Path) -> dict[str, Any]:
    """
    Load a raw configuration dictionary from a YAML file.

    Args:
        yaml_path: Path to the source YAML file.

    Returns:
        The loaded document (empty dict for an empty file).

    Raises:
        FileNotFoundError: If the specified path does not exist.
        RaptorConfigError: If the document is not a mapping.
    """
    if not yaml_path.exists():
        raise FileNotFoundError(f"YAML configuration file not found at: {yaml_path}")

    with open(yaml_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RaptorConfigError(f"Expected a mapping at the top of {yaml_path}")
    return data


def load_raptor_config(yaml_path: Path) -> "SwissRailRaptorConfig":
    """
    Build the routing configuration group from the ``swissRailRaptor``
    section of a YAML file. A missing section yields the defaults.

    Args:
        yaml_path: Path to the source YAML file.

    Returns:
        Populated SwissRailRaptorConfig.
    """
    from ..config import SwissRailRaptorConfig

    section = load_config_from_yaml(yaml_path).get(GROUP_NAME)
    if section is None:
        logger.warning(f"No '{GROUP_NAME}' section in {yaml_path}; using defaults")
    return SwissRailRaptorConfig.from_portable_dict(section)


def _persist_yaml_atomic(data: Any, path: Path) -> None:
    """
    Write to a temporary sibling file, fsync, then rename over the target.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(f".{path.name}.tmp")

    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise
