"""
Routing Configuration Summary Reporter.

Logs the resolved routing settings once configuration setup is complete, so
that runs record which range-query windows, access/egress modes and
passenger mode mappings the router actually used.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..constants import DEFAULT_SUBPOPULATION, LOGGER_NAME
from .styles import LogStyle

if TYPE_CHECKING:  # pragma: no cover
    from ..config import SwissRailRaptorConfig

logger = logging.getLogger(LOGGER_NAME)


def _subpop_label(subpopulation: str | None) -> str:
    """Display name of a range-query index key."""
    return "<all agents>" if subpopulation is DEFAULT_SUBPOPULATION else subpopulation


def log_raptor_summary(
    cfg: "SwissRailRaptorConfig", logger_instance: logging.Logger | None = None
) -> None:
    """
    Log scalar switches and the contents of every parameter-set family.

    Args:
        cfg: Routing configuration to summarize.
        logger_instance: Logger instance to use (defaults to module logger)
    """
    log = logger_instance or logger
    I = LogStyle.INDENT  # noqa: E741
    B = LogStyle.BULLET
    registry = cfg.registry

    LogStyle.log_phase_header(log, cfg.NAME)
    for key, text in cfg.params().items():
        log.info(f"{I}{LogStyle.ARROW} {key:<38}: {text}")

    log.info(LogStyle.LIGHT)
    log.info(f"{I}[Range Query]")
    for key in registry.range_query_keys():
        settings = registry.lookup_range_query(key)
        log.info(
            f"{I}{B} {_subpop_label(key):<20}: "
            f"-{settings.max_earlier_departure}s / +{settings.max_later_departure}s"
        )
    if cfg.use_range_query and registry.lookup_range_query(DEFAULT_SUBPOPULATION) is None:
        log.warning(
            f"{I}{LogStyle.WARNING} Range queries enabled without default settings "
            f"for agents outside the listed subpopulations"
        )

    log.info(f"{I}[Intermodal Access/Egress]")
    for access in registry.all_intermodal():
        subpops = access.get_value("subpopulations") or _subpop_label(DEFAULT_SUBPOPULATION)
        log.info(f"{I}{B} {access.mode or '?':<20}: radius={access.radius:g} | {subpops}")

    log.info(f"{I}[Mode Mapping]")
    for mapping in registry.all_mode_mappings():
        log.info(f"{I}{B} {mapping.route_mode:<20}: {mapping.passenger_mode}")
