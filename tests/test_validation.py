"""Parameter validation and advisory compliance tests."""
import sys
import os
import math
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from validators.parameters import (
    ParameterValidationError,
    parse_positive,
    validate_fields,
    validate_levels,
    validate_single_stair,
    validate_stairwell,
    SINGLE_STAIR_FIELDS,
)
from validators.building_regs import PartKValidator


class TestParsePositive:
    @pytest.mark.parametrize("value,expected", [
        (200, 200.0), (180.5, 180.5), ("250", 250.0), (" 900.25 ", 900.25), ("1e3", 1000.0),
    ])
    def test_accepts(self, value, expected):
        assert parse_positive(value) == expected

    @pytest.mark.parametrize("value", [
        0, -1, "0", "-5", "abc", "", None, True, "nan", "inf", math.inf, math.nan, [200],
    ])
    def test_rejects(self, value):
        assert parse_positive(value) is None


class TestSingleStairFields:
    def _raw(self, **overrides):
        raw = {"overall_height": "2000", "step_height": "200",
               "step_length": "250", "stair_width": "900"}
        raw.update(overrides)
        return raw

    def test_valid(self):
        config = validate_single_stair(self._raw())
        assert config == {"overall_height": 2000.0, "step_height": 200.0,
                          "step_length": 250.0, "stair_width": 900.0}

    @pytest.mark.parametrize("field,message", [
        ("overall_height", "Invalid overall height"),
        ("step_height", "Invalid step height"),
        ("step_length", "Invalid step length"),
        ("stair_width", "Invalid stair width"),
    ])
    def test_field_message(self, field, message):
        with pytest.raises(ParameterValidationError) as exc:
            validate_single_stair(self._raw(**{field: "-1"}))
        assert str(exc.value) == message
        assert exc.value.field == field
        assert exc.value.value == "-1"

    def test_first_bad_field_wins(self):
        """Fields are checked in form order; only the first failure is reported."""
        with pytest.raises(ParameterValidationError) as exc:
            validate_single_stair(self._raw(step_length="x", step_height="0"))
        assert exc.value.field == "step_height"

    def test_missing_field(self):
        raw = self._raw()
        del raw["stair_width"]
        with pytest.raises(ParameterValidationError, match="Invalid stair width"):
            validate_single_stair(raw)

    def test_input_not_modified(self):
        raw = self._raw()
        validate_fields(raw, SINGLE_STAIR_FIELDS)
        assert raw["overall_height"] == "2000"


class TestStairwellFields:
    def _raw(self, **overrides):
        raw = {"step_height": 180, "step_length": 280, "stair_width": 1000,
               "platform_width": 1200, "platform_depth": 1200, "levels": [8, 8]}
        raw.update(overrides)
        return raw

    def test_valid(self):
        config = validate_stairwell(self._raw(levels=["8", 6.0, {"step_count": 3}]))
        assert config["levels"] == [8, 6, 3]
        assert config["platform_depth"] == 1200.0

    @pytest.mark.parametrize("field,message", [
        ("platform_width", "Invalid platform width"),
        ("platform_depth", "Invalid platform depth"),
    ])
    def test_platform_messages(self, field, message):
        with pytest.raises(ParameterValidationError, match=message):
            validate_stairwell(self._raw(**{field: 0}))

    @pytest.mark.parametrize("levels,message", [
        ([8, 0], "Invalid step count for level 2"),
        (["x"], "Invalid step count for level 1"),
        ([8, 8, 2.5], "Invalid step count for level 3"),
        ([], "Stairwell needs at least one level"),
        (None, "Stairwell needs at least one level"),
    ])
    def test_level_messages(self, levels, message):
        with pytest.raises(ParameterValidationError, match=message):
            validate_stairwell(self._raw(levels=levels))

    def test_dimensions_checked_before_levels(self):
        with pytest.raises(ParameterValidationError) as exc:
            validate_stairwell(self._raw(step_height="", levels=[]))
        assert exc.value.field == "step_height"

    def test_validate_levels_returns_ints(self):
        assert validate_levels([1, "2", 3.0]) == [1, 2, 3]


class TestPartK:
    def test_compliant_flight(self):
        assert PartKValidator.check_flight(200, 250) == []

    def test_steep_flight(self):
        notes = PartKValidator.check_flight(250, 200)
        assert any("Riser height" in n for n in notes)
        assert any("Pitch" in n for n in notes)

    def test_single_stair_uses_actual_rise(self):
        """2050 at 220 target -> 10 risers of 205 mm, which is compliant."""
        config = {"overall_height": 2050.0, "step_height": 220.0,
                  "step_length": 250.0, "stair_width": 900.0}
        assert PartKValidator.check_single_stair(config) == []

    def test_stairwell_landing_notes(self):
        config = {"step_height": 180.0, "step_length": 280.0, "stair_width": 1000.0,
                  "platform_width": 900.0, "platform_depth": 800.0}
        notes = PartKValidator.check_stairwell(config)
        assert any("Landing depth" in n for n in notes)
        assert any("Landing width" in n for n in notes)
