"""
China Coordinate Converter - Exception Hierarchy
=================================================
Every error raised by the converter comes from this module so callers can
catch them at the right level of granularity.

Hierarchy::

    CoordConverterError                  ← catch-all base
    ├── InputValidationError             ← bad CLI / tool inputs
    │   └── UnknownCoordSystemError      ← unrecognised datum name
    └── ConvertError                     ← a conversion could not be made
        ├── OutOfChinaError              ← outside the WGS84↔GCJ02 envelope
        ├── UnsupportedConversionError   ← no route between two systems
        └── ConvergenceError             ← GCJ02→WGS84 inverse did not settle

Usage::

    from china_coord_converter.exceptions import OutOfChinaError

    try:
        transform(point, CoordSystem.WGS84, CoordSystem.GCJ02)
    except OutOfChinaError as exc:
        print(exc.coordinate)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from china_coord_converter.models import Coordinate, CoordSystem


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


class CoordConverterError(Exception):
    """Base exception for the converter.

    Catch this to handle any converter error without caring about the
    exact subtype.

    Args:
        message: Human-readable description of the error.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------


class InputValidationError(CoordConverterError):
    """Raised when tool or CLI inputs fail pre-processing validation."""


class UnknownCoordSystemError(InputValidationError):
    """Raised when a coordinate system name cannot be matched.

    Args:
        name: The raw name that failed to parse.
        available: Names of the systems that ARE supported.

    Example::

        raise UnknownCoordSystemError("nad83", ["WGS84", "GCJ02", "BD09"])
    """

    def __init__(self, name: str, available: Sequence[str]) -> None:
        available_str = ", ".join(f"'{n}'" for n in available)
        super().__init__(
            f"Unknown coordinate system '{name}'. Available systems: {available_str}"
        )
        self.name: str = name
        self.available: list[str] = list(available)


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------


class ConvertError(CoordConverterError):
    """Raised when a coordinate cannot be converted between two systems.

    Parent of every failure the conversion engine itself can produce.
    """


class OutOfChinaError(ConvertError):
    """Raised when a coordinate falls outside the China bounding box.

    Only the WGS84↔GCJ02 transform (and any route composed through it)
    is gated by the box.

    Args:
        coordinate: The offending coordinate.
    """

    def __init__(self, coordinate: Coordinate) -> None:
        super().__init__(
            f"Coordinate ({coordinate.longitude}, {coordinate.latitude}) "
            "is outside the China bounding box."
        )
        self.coordinate: Coordinate = coordinate


class UnsupportedConversionError(ConvertError):
    """Raised when no conversion route exists between two systems.

    The current conversion matrix covers every pair of known systems, so
    nothing raises this today.  It is kept for datums added later.

    Args:
        from_system: Source coordinate system.
        to_system: Target coordinate system.
    """

    def __init__(self, from_system: CoordSystem, to_system: CoordSystem) -> None:
        super().__init__(
            f"Conversion from {from_system.value} to {to_system.value} is not supported."
        )
        self.from_system: CoordSystem = from_system
        self.to_system: CoordSystem = to_system


class ConvergenceError(ConvertError):
    """Raised when the GCJ02→WGS84 fixed-point iteration fails to settle.

    Args:
        coordinate: The GCJ02 coordinate being inverted.
        iterations: Number of iterations attempted before giving up.
    """

    def __init__(self, coordinate: Coordinate, iterations: int) -> None:
        super().__init__(
            f"GCJ02→WGS84 inversion of ({coordinate.longitude}, "
            f"{coordinate.latitude}) did not converge after {iterations} iterations."
        )
        self.coordinate: Coordinate = coordinate
        self.iterations: int = iterations
