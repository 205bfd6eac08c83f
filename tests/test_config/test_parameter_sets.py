"""
Test Suite for Parameter-Set Variants.

Tests defaults, external key aliases, documentation strings, field
constraints and the reflective text interface of RangeQuerySettings,
IntermodalAccessEgress and ModeMapping.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from swissraptor.core.config import IntermodalAccessEgress, ModeMapping, RangeQuerySettings
from swissraptor.exceptions import MalformedScalarError, RaptorConfigError


# RANGE QUERY: DEFAULTS
@pytest.mark.unit
def test_range_query_defaults():
    """Test RangeQuerySettings with default values."""
    settings = RangeQuerySettings()

    assert settings.type_tag == "rangeQuerySettings"
    assert settings.subpopulations == set()
    assert settings.max_earlier_departure == 600
    assert settings.max_later_departure == 900


@pytest.mark.unit
def test_range_query_params_use_external_keys():
    """Test params() exposes the config-file keys in declaration order."""
    settings = RangeQuerySettings(subpopulations={"students", "commuters"})

    assert settings.params() == {
        "subpopulations": "commuters,students",
        "maxEarlierDeparture_sec": "600",
        "maxLaterDeparture_sec": "900",
    }


@pytest.mark.unit
def test_range_query_accepts_alias_and_attribute_names():
    """Test construction works with either the key or the attribute name."""
    by_alias = RangeQuerySettings(maxEarlierDeparture_sec=120)
    by_name = RangeQuerySettings(max_earlier_departure=120)

    assert by_alias.max_earlier_departure == by_name.max_earlier_departure == 120


@pytest.mark.unit
def test_range_query_subpopulations_from_text():
    """Test subpopulations given as comma-separated text are split."""
    settings = RangeQuerySettings(subpopulations="commuters, students")
    assert settings.subpopulations == {"commuters", "students"}


# RANGE QUERY: CONSTRAINTS
@pytest.mark.unit
def test_range_query_rejects_negative_window():
    """Test negative departure windows are rejected at construction."""
    with pytest.raises(ValidationError):
        RangeQuerySettings(max_later_departure=-1)


@pytest.mark.unit
def test_range_query_assignment_is_validated():
    """Test assignment re-validates constraints."""
    settings = RangeQuerySettings()
    with pytest.raises(ValidationError):
        settings.max_earlier_departure = -10


@pytest.mark.unit
def test_range_query_rejects_unknown_fields():
    """Test extra fields are forbidden."""
    with pytest.raises(ValidationError):
        RangeQuerySettings(maxDeparture=10)


# REFLECTIVE TEXT INTERFACE
@pytest.mark.unit
def test_set_value_and_get_value():
    """Test text round trip through set_value/get_value."""
    settings = RangeQuerySettings()
    settings.set_value("maxEarlierDeparture_sec", "300")
    settings.set_value("subpopulations", "students,commuters")

    assert settings.max_earlier_departure == 300
    assert settings.get_value("maxEarlierDeparture_sec") == "300"
    assert settings.get_value("subpopulations") == "commuters,students"


@pytest.mark.unit
def test_set_value_malformed_text():
    """Test unparseable text raises MalformedScalarError naming the key."""
    settings = RangeQuerySettings()
    with pytest.raises(MalformedScalarError) as exc_info:
        settings.set_value("maxEarlierDeparture_sec", "ten minutes")

    assert exc_info.value.key == "maxEarlierDeparture_sec"
    assert settings.max_earlier_departure == 600


@pytest.mark.unit
def test_set_value_constraint_violation():
    """Test a parseable but invalid value is reported as malformed."""
    settings = IntermodalAccessEgress()
    with pytest.raises(MalformedScalarError):
        settings.set_value("radius", "-5.0")
    assert settings.radius == 0.0


@pytest.mark.unit
def test_unknown_key_is_rejected():
    """Test unknown keys raise RaptorConfigError."""
    settings = RangeQuerySettings()
    with pytest.raises(RaptorConfigError, match="Unknown parameter"):
        settings.set_value("maxWalkingDistance", "100")
    with pytest.raises(RaptorConfigError):
        settings.get_value("maxWalkingDistance")


@pytest.mark.unit
def test_scalar_fields_describe_kinds():
    """Test field descriptors expose key, kind, optionality and default."""
    fields = {field.name: field for field in IntermodalAccessEgress.scalar_fields()}

    assert list(fields) == [
        "subpopulations",
        "mode",
        "radius",
        "linkIdAttribute",
        "filterAttribute",
        "filterValue",
    ]
    assert fields["subpopulations"].kind == "set"
    assert fields["radius"].kind == "float"
    assert fields["radius"].default == 0.0
    assert fields["mode"].kind == "str"
    assert fields["mode"].optional is True


# INTERMODAL ACCESS / EGRESS
@pytest.mark.unit
def test_intermodal_defaults():
    """Test IntermodalAccessEgress default values."""
    access = IntermodalAccessEgress()

    assert access.type_tag == "intermodalAccessEgress"
    assert access.subpopulations == set()
    assert access.mode is None
    assert access.radius == 0.0
    assert access.link_id_attribute is None
    assert access.filter_attribute is None
    assert access.filter_value is None


@pytest.mark.unit
def test_intermodal_null_strings():
    """Test unset optional strings are written as 'null' and read back."""
    access = IntermodalAccessEgress(mode="bike")
    assert access.get_value("filterAttribute") == "null"

    access.set_value("filterAttribute", "bikeAccessible")
    access.set_value("filterAttribute", "null")
    assert access.filter_attribute is None


@pytest.mark.unit
def test_intermodal_comments_are_verbatim():
    """Test documentation strings are returned unchanged."""
    comments = IntermodalAccessEgress().comments()

    assert set(comments) == {
        "subpopulations",
        "linkIdAttribute",
        "filterAttribute",
        "filterValue",
    }
    assert comments["subpopulations"] == (
        "Comma-separated list of names of subpopulations to which this mode is available. "
        "Leaving it empty applies to all agents."
    )
    assert comments["filterValue"] == (
        "Only stops where the filter attribute has the value specified here will be "
        "considered as access or egress stops."
    )


@pytest.mark.unit
def test_range_query_has_no_comments():
    """Test groups without documented fields return no comments."""
    assert RangeQuerySettings().comments() == {}


# MODE MAPPING
@pytest.mark.unit
def test_mode_mapping_positional_constructor():
    """Test ModeMapping(route_mode, passenger_mode)."""
    mapping = ModeMapping("rail", "train")

    assert mapping.type_tag == "modeMapping"
    assert mapping.route_mode == "rail"
    assert mapping.passenger_mode == "train"
    assert mapping.params() == {"routeMode": "rail", "passengerMode": "train"}


@pytest.mark.unit
def test_mode_mapping_empty_constructor():
    """Test the factory-style empty mapping is populated via set_value."""
    mapping = ModeMapping()
    assert mapping.route_mode is None

    mapping.set_value("routeMode", "bus")
    mapping.set_value("passengerMode", "pt")
    assert (mapping.route_mode, mapping.passenger_mode) == ("bus", "pt")


@pytest.mark.unit
def test_equal_parameter_sets_are_distinct_objects():
    """Test equal field values do not make two sets the same object."""
    first, second = ModeMapping("rail", "train"), ModeMapping("rail", "train")
    assert first == second
    assert first is not second
