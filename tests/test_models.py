"""
Tests - Value Types and Validators
===================================
Unit tests for :mod:`china_coord_converter.models`,
:mod:`china_coord_converter.validators` and the exception hierarchy.
"""

from __future__ import annotations

import dataclasses
import math

import pytest

from china_coord_converter.exceptions import (
    ConvergenceError,
    ConvertError,
    CoordConverterError,
    InputValidationError,
    OutOfChinaError,
    UnknownCoordSystemError,
    UnsupportedConversionError,
)
from china_coord_converter.models import Coordinate, CoordSystem
from china_coord_converter.validators import Validators


class TestCoordinate:
    def test_equality_is_component_wise(self) -> None:
        assert Coordinate(114.0, 30.0) == Coordinate(114.0, 30.0)
        assert Coordinate(114.0, 30.0) != Coordinate(30.0, 114.0)

    def test_is_immutable(self) -> None:
        point = Coordinate(114.0, 30.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            point.longitude = 0.0  # type: ignore[misc]

    def test_no_range_validation(self) -> None:
        """Construction accepts anything; only transforms check ranges."""
        point = Coordinate(999.0, -999.0)
        assert point.as_tuple() == (999.0, -999.0)

    def test_tuple_helpers(self) -> None:
        point = Coordinate.from_tuple(("116.4", 39.9))
        assert point == Coordinate(116.4, 39.9)
        assert point.as_tuple() == (116.4, 39.9)

    def test_str_representation(self) -> None:
        assert str(Coordinate(114.3, 30.5)) == "(114.300000, 30.500000)"


class TestCoordSystem:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("WGS84", CoordSystem.WGS84),
            ("wgs-84", CoordSystem.WGS84),
            ("gcj02", CoordSystem.GCJ02),
            ("GCJ_02", CoordSystem.GCJ02),
            ("bd09", CoordSystem.BD09),
            ("BD 09", CoordSystem.BD09),
        ],
    )
    def test_from_name(self, name: str, expected: CoordSystem) -> None:
        assert CoordSystem.from_name(name) is expected

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(UnknownCoordSystemError) as exc_info:
            CoordSystem.from_name("nad83")
        assert exc_info.value.name == "nad83"
        assert exc_info.value.available == ["WGS84", "GCJ02", "BD09"]
        assert isinstance(exc_info.value, InputValidationError)

    def test_closed_set(self) -> None:
        assert [m.value for m in CoordSystem] == ["WGS84", "GCJ02", "BD09"]


class TestExceptions:
    """The hierarchy callers rely on when catching errors."""

    @pytest.mark.parametrize(
        "exc",
        [
            OutOfChinaError(Coordinate(0.0, 0.0)),
            UnsupportedConversionError(CoordSystem.WGS84, CoordSystem.BD09),
            ConvergenceError(Coordinate(114.0, 30.0), 20),
        ],
        ids=lambda e: type(e).__name__,
    )
    def test_convert_errors(self, exc: ConvertError) -> None:
        assert isinstance(exc, ConvertError)
        assert isinstance(exc, CoordConverterError)
        assert exc.message == str(exc)

    def test_unsupported_conversion_message(self) -> None:
        exc = UnsupportedConversionError(CoordSystem.WGS84, CoordSystem.BD09)
        assert "WGS84" in exc.message and "BD09" in exc.message
        assert exc.from_system is CoordSystem.WGS84

    def test_repr(self) -> None:
        exc = InputValidationError("bad")
        assert repr(exc) == "InputValidationError('bad')"


class TestValidators:
    def test_assert_finite_returns_float(self) -> None:
        assert Validators.assert_finite("114.5", "longitude") == 114.5

    @pytest.mark.parametrize("value", [math.nan, math.inf, "abc", None, True])
    def test_assert_finite_rejects(self, value: object) -> None:
        with pytest.raises(InputValidationError):
            Validators.assert_finite(value, "longitude")

    def test_assert_in_range(self) -> None:
        Validators.assert_in_range(6, 0, 15, "precision")
        with pytest.raises(InputValidationError):
            Validators.assert_in_range(16, 0, 15, "precision")

    def test_assert_choice(self) -> None:
        Validators.assert_choice("json", ("text", "json"), "output format")
        with pytest.raises(InputValidationError):
            Validators.assert_choice("xml", ("text", "json"), "output format")

    def test_parse_coord_system_passes_members_through(self) -> None:
        assert Validators.parse_coord_system(CoordSystem.BD09) is CoordSystem.BD09
        assert Validators.parse_coord_system("gcj-02") is CoordSystem.GCJ02
