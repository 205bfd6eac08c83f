"""
Shared fixtures for the routing configuration test suite.
"""

from __future__ import annotations

import logging

import pytest

from swissraptor.core.config import (
    IntermodalAccessEgress,
    ModeMapping,
    RangeQuerySettings,
    SwissRailRaptorConfig,
)
from swissraptor.core.constants import LOGGER_NAME


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "integration: tests touching the filesystem or logging")


@pytest.fixture
def cfg() -> SwissRailRaptorConfig:
    """Empty root configuration group."""
    return SwissRailRaptorConfig()


@pytest.fixture
def populated_cfg() -> SwissRailRaptorConfig:
    """Root group with one set of every family registered."""
    cfg = SwissRailRaptorConfig(useRangeQuery=True, useIntermodalAccessEgress=True)
    cfg.add_range_query_settings(RangeQuerySettings())
    cfg.add_range_query_settings(
        RangeQuerySettings(
            subpopulations={"commuters", "students"}, max_earlier_departure=300
        )
    )
    cfg.add_intermodal_access_egress(IntermodalAccessEgress(mode="bike", radius=2000.0))
    cfg.add_mode_mapping_for_passengers(ModeMapping("rail", "train"))
    return cfg


@pytest.fixture
def package_logger():
    """Package logger with propagation enabled so caplog sees its records."""
    log = logging.getLogger(LOGGER_NAME)
    previous = log.propagate
    log.propagate = True
    yield log
    log.propagate = previous
