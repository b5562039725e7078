"""
China Coordinate Converter - Input Validators
==============================================
Static precondition checks used by the tool layer before any conversion
runs.

All methods raise an exception from :mod:`china_coord_converter.exceptions`
rather than returning booleans, which keeps ``validate_inputs``
implementations short::

    class MyTool(ConverterTool):
        def validate_inputs(self) -> None:
            Validators.assert_finite(self.longitude, "longitude")
            self.system = Validators.parse_coord_system(self.raw_system)
"""

from __future__ import annotations

import math
from typing import Sequence

from china_coord_converter.exceptions import InputValidationError
from china_coord_converter.models import CoordSystem


class Validators:
    """Collection of static precondition checks.

    All methods are ``@staticmethod``; this class is never instantiated.
    """

    # ------------------------------------------------------------------
    # Numeric checks
    # ------------------------------------------------------------------

    @staticmethod
    def assert_finite(value: object, label: str) -> float:
        """Assert that *value* is a finite real number and return it as float.

        Args:
            value: Value to check.
            label: Name used in the error message (e.g. ``"longitude"``).

        Raises:
            InputValidationError: If *value* is not numeric, or is NaN or
                infinite.
        """
        if isinstance(value, bool):
            raise InputValidationError(f"{label} must be a number, got {value!r}.")
        try:
            number = float(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            raise InputValidationError(
                f"{label} must be a number, got {value!r}."
            ) from None
        if not math.isfinite(number):
            raise InputValidationError(f"{label} must be finite, got {number}.")
        return number

    @staticmethod
    def assert_in_range(value: float, low: float, high: float, label: str) -> None:
        """Assert that ``low <= value <= high``.

        Raises:
            InputValidationError: If *value* is outside the closed range.
        """
        if not low <= value <= high:
            raise InputValidationError(
                f"{label} must be between {low} and {high}, got {value}."
            )

    # ------------------------------------------------------------------
    # Option checks
    # ------------------------------------------------------------------

    @staticmethod
    def assert_choice(value: str, choices: Sequence[str], label: str) -> None:
        """Assert that *value* is one of *choices*.

        Raises:
            InputValidationError: If *value* is not an allowed choice.
        """
        if value not in choices:
            raise InputValidationError(
                f"Unsupported {label} '{value}'. Accepted values: {', '.join(choices)}"
            )

    @staticmethod
    def parse_coord_system(name: str | CoordSystem) -> CoordSystem:
        """Resolve *name* to a :class:`CoordSystem`.

        Members are passed through as-is.

        Raises:
            UnknownCoordSystemError: If *name* matches no system.
        """
        if isinstance(name, CoordSystem):
            return name
        return CoordSystem.from_name(name)
