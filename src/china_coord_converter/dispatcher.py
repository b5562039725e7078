"""
China Coordinate Converter - Dispatcher
========================================
Routes a coordinate between any two :class:`CoordSystem` members.

Direct pairs delegate to :mod:`gcj02_wgs84` and :mod:`gcj02_bd09`.  The two
WGS84↔BD09 routes are composed through GCJ02; if the first leg raises, the
second leg never runs and the error propagates unchanged.

The routing table is keyed by every ordered ``(from, to)`` pair and is
checked for completeness at import time, so a datum added to
:class:`CoordSystem` without routes fails immediately.

Usage::

    from china_coord_converter import Coordinate, CoordSystem, transform

    gcj = transform(Coordinate(114.304569, 30.593354), CoordSystem.WGS84, CoordSystem.GCJ02)
"""

from __future__ import annotations

import itertools
import logging
from typing import Callable

from china_coord_converter.gcj02_bd09 import bd09_to_gcj02, gcj02_to_bd09
from china_coord_converter.gcj02_wgs84 import gcj02_to_wgs84, wgs84_to_gcj02
from china_coord_converter.models import Coordinate, CoordSystem

logger = logging.getLogger("china_coord_converter.dispatcher")

Route = Callable[[Coordinate], Coordinate]


def _identity(coord: Coordinate) -> Coordinate:
    return coord


def wgs84_to_bd09(coord: Coordinate) -> Coordinate:
    """Convert WGS84 to BD09 by way of GCJ02."""
    return gcj02_to_bd09(wgs84_to_gcj02(coord))


def bd09_to_wgs84(coord: Coordinate) -> Coordinate:
    """Convert BD09 to WGS84 by way of GCJ02."""
    return gcj02_to_wgs84(bd09_to_gcj02(coord))


_ROUTES: dict[tuple[CoordSystem, CoordSystem], Route] = {
    (CoordSystem.WGS84, CoordSystem.WGS84): _identity,
    (CoordSystem.GCJ02, CoordSystem.GCJ02): _identity,
    (CoordSystem.BD09, CoordSystem.BD09): _identity,
    (CoordSystem.WGS84, CoordSystem.GCJ02): wgs84_to_gcj02,
    (CoordSystem.GCJ02, CoordSystem.WGS84): gcj02_to_wgs84,
    (CoordSystem.GCJ02, CoordSystem.BD09): gcj02_to_bd09,
    (CoordSystem.BD09, CoordSystem.GCJ02): bd09_to_gcj02,
    (CoordSystem.WGS84, CoordSystem.BD09): wgs84_to_bd09,
    (CoordSystem.BD09, CoordSystem.WGS84): bd09_to_wgs84,
}


def _check_routes(routes: dict[tuple[CoordSystem, CoordSystem], Route]) -> None:
    """Raise ``RuntimeError`` unless *routes* covers every ordered system pair."""
    missing = set(itertools.product(CoordSystem, repeat=2)) - set(routes)
    if missing:
        raise RuntimeError(
            "Conversion matrix is incomplete; no route for: "
            + ", ".join(f"{a.value}->{b.value}" for a, b in sorted(missing, key=str))
        )


_check_routes(_ROUTES)


def transform(
    coord: Coordinate,
    from_system: CoordSystem,
    to_system: CoordSystem,
) -> Coordinate:
    """Express *coord* (given in *from_system*) in *to_system*.

    When both systems are the same the input is returned untouched, with
    no bounding-box check.

    Args:
        coord: Coordinate in the source system.
        from_system: System *coord* is expressed in.
        to_system: System to convert into.

    Returns:
        The coordinate in *to_system*.

    Raises:
        OutOfChinaError: If the route passes through WGS84↔GCJ02 and a
            point falls outside the China bounding box.
        ConvergenceError: If a GCJ02→WGS84 leg fails to converge.
    """
    route = _ROUTES[(from_system, to_system)]
    logger.debug("Converting %s from %s to %s.", coord, from_system, to_system)
    return route(coord)
