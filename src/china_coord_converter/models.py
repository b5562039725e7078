"""
China Coordinate Converter - Value Types
=========================================
Immutable value types shared by every transform.

Classes:
    CoordSystem     Closed set of supported geodetic datums.
    Coordinate      Longitude / latitude pair in decimal degrees.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Sequence

from china_coord_converter.exceptions import UnknownCoordSystemError


class CoordSystem(enum.Enum):
    """Coordinate reference systems used in and around China.

    Members are tags only; they carry no data beyond their name.
    """

    WGS84 = "WGS84"
    GCJ02 = "GCJ02"
    BD09 = "BD09"

    @classmethod
    def from_name(cls, name: str) -> CoordSystem:
        """Parse a user-supplied system name.

        Matching is case-insensitive and ignores ``-``, ``_`` and spaces,
        so ``"gcj-02"``, ``"GCJ_02"`` and ``"gcj02"`` all resolve to
        :attr:`GCJ02`.

        Args:
            name: Raw system name.

        Returns:
            The matching :class:`CoordSystem` member.

        Raises:
            UnknownCoordSystemError: If *name* matches no member.
        """
        key = "".join(ch for ch in str(name) if ch not in "-_ ").upper()
        try:
            return cls(key)
        except ValueError:
            raise UnknownCoordSystemError(name, [m.value for m in cls]) from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Coordinate:
    """A point in decimal degrees.

    No range validation is performed at construction time; a coordinate
    only gets checked when a transform that needs it runs.

    Attributes:
        longitude: East-west position in degrees.
        latitude: North-south position in degrees.
    """

    longitude: float
    latitude: float

    @classmethod
    def from_tuple(cls, pair: Sequence[float]) -> Coordinate:
        """Build a coordinate from a ``(longitude, latitude)`` pair."""
        lng, lat = pair
        return cls(float(lng), float(lat))

    def as_tuple(self) -> tuple[float, float]:
        """Return ``(longitude, latitude)``."""
        return (self.longitude, self.latitude)

    def __str__(self) -> str:
        return f"({self.longitude:.6f}, {self.latitude:.6f})"
