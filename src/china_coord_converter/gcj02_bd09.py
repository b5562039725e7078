"""
GCJ02 ↔ BD09 Transform
=======================
Closed-form polar offset between the GCJ02 datum and the BD09 datum layered
on top of it.  Both directions accept any coordinate and never fail.

The two functions are approximate inverses of each other: the offset is
applied in polar form and undone after subtracting the additive shift, so a
round trip drifts by well under a micro-degree.
"""

from __future__ import annotations

import math

from china_coord_converter.models import Coordinate

BAIDU_FACTOR = math.pi * 3000.0 / 180.0

BD_LNG_OFFSET = 0.0065
BD_LAT_OFFSET = 0.006


def gcj02_to_bd09(coord: Coordinate) -> Coordinate:
    """Convert a GCJ02 coordinate to BD09."""
    x = coord.longitude
    y = coord.latitude
    z = math.sqrt(x * x + y * y) + 0.00002 * math.sin(y * BAIDU_FACTOR)
    theta = math.atan2(y, x) + 0.000003 * math.cos(x * BAIDU_FACTOR)

    return Coordinate(
        z * math.cos(theta) + BD_LNG_OFFSET,
        z * math.sin(theta) + BD_LAT_OFFSET,
    )


def bd09_to_gcj02(coord: Coordinate) -> Coordinate:
    """Convert a BD09 coordinate back to GCJ02."""
    x = coord.longitude - BD_LNG_OFFSET
    y = coord.latitude - BD_LAT_OFFSET
    z = math.sqrt(x * x + y * y) - 0.00002 * math.sin(y * BAIDU_FACTOR)
    theta = math.atan2(y, x) - 0.000003 * math.cos(x * BAIDU_FACTOR)

    return Coordinate(z * math.cos(theta), z * math.sin(theta))
