"""
Test Suite for the Routing Configuration Summary.

Tests LogStyle constants and the content of log_raptor_summary.
"""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest

from swissraptor.core.config import ModeMapping, RangeQuerySettings
from swissraptor.core.constants import LOGGER_NAME
from swissraptor.core.logger import LogStyle, log_raptor_summary


# LOGSTYLE: CONSTANTS
@pytest.mark.unit
def test_logstyle_separators():
    """Test separators span the header width."""
    assert LogStyle.HEAVY == "━" * LogStyle.HEADER_WIDTH
    assert LogStyle.LIGHT == "─" * LogStyle.HEADER_WIDTH


@pytest.mark.unit
def test_logstyle_symbols():
    """Test LogStyle symbols are defined correctly."""
    assert LogStyle.ARROW == "»"
    assert LogStyle.BULLET == "•"
    assert LogStyle.WARNING == "⚠"
    assert len(LogStyle.DOUBLE_INDENT) == 2 * len(LogStyle.INDENT)


@pytest.mark.unit
def test_log_phase_header():
    """Test the header is centered between two separators."""
    log = MagicMock()
    LogStyle.log_phase_header(log, "swissRailRaptor")

    lines = [call.args[0] for call in log.info.call_args_list]
    assert lines[0] == lines[2] == LogStyle.HEAVY
    assert lines[1].strip() == "swissRailRaptor"


# SUMMARY
@pytest.mark.unit
def test_summary_lists_every_family(populated_cfg):
    """Test params and each parameter-set family appear in the summary."""
    log = MagicMock()
    log_raptor_summary(populated_cfg, logger_instance=log)

    text = "\n".join(call.args[0] for call in log.info.call_args_list)
    assert "useRangeQuery" in text
    assert "<all agents>" in text
    assert "commuters" in text and "students" in text
    assert "-300s / +900s" in text
    assert "bike" in text and "radius=2000" in text
    assert "rail" in text and "train" in text
    log.warning.assert_not_called()


@pytest.mark.unit
def test_summary_warns_without_default_range_query(cfg):
    """Test a warning when range queries lack settings for all agents."""
    cfg.use_range_query = True
    cfg.add_range_query_settings(RangeQuerySettings(subpopulations={"students"}))
    log = MagicMock()

    log_raptor_summary(cfg, logger_instance=log)

    log.warning.assert_called_once()
    assert "without default settings" in log.warning.call_args.args[0]


@pytest.mark.unit
def test_summary_no_warning_when_range_queries_disabled(cfg):
    """Test missing defaults are fine while range queries are off."""
    cfg.add_range_query_settings(RangeQuerySettings(subpopulations={"students"}))
    log = MagicMock()

    log_raptor_summary(cfg, logger_instance=log)

    log.warning.assert_not_called()


@pytest.mark.integration
def test_summary_uses_package_logger(cfg, package_logger, caplog):
    """Test the summary goes to the package logger by default."""
    cfg.add_mode_mapping_for_passengers(ModeMapping("ferry", "pt"))

    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        log_raptor_summary(cfg)

    assert any("ferry" in record.getMessage() for record in caplog.records)
    assert all(record.name == LOGGER_NAME for record in caplog.records)
