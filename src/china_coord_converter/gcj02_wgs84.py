"""
WGS84 ↔ GCJ02 Transform
========================
Applies and removes the GCJ02 perturbation.  The forward direction is an
empirical polynomial-plus-harmonics offset scaled through the Krasovsky 1940
ellipsoid; the inverse has no closed form and is recovered by fixed-point
iteration on the forward transform.

Both directions are only defined inside a rectangular envelope around
China.  Anything outside raises :class:`OutOfChinaError` before any
numeric work is done.

Functions:
    in_china_bbox   Envelope predicate.
    wgs84_to_gcj02  Forward transform.
    gcj02_to_wgs84  Iterative inverse.
"""

from __future__ import annotations

import logging
import math

from china_coord_converter.exceptions import ConvergenceError, OutOfChinaError
from china_coord_converter.models import Coordinate

logger = logging.getLogger("china_coord_converter.gcj02_wgs84")

# ---------------------------------------------------------------------------
# Krasovsky 1940 ellipsoid
# ---------------------------------------------------------------------------
A = 6378245.0
EE = 0.006693421622965823

# ---------------------------------------------------------------------------
# China bounding box (inclusive edges)
# ---------------------------------------------------------------------------
MIN_LNG = 72.004
MAX_LNG = 137.8347
MIN_LAT = 0.8293
MAX_LAT = 55.8271

# Inverse iteration stops once both residual components are below this.
CONVERGENCE_EPSILON = 1e-6
# Real inputs settle in one or two passes.
MAX_ITERATIONS = 20


def in_china_bbox(coord: Coordinate) -> bool:
    """Return ``True`` when *coord* lies inside the China bounding box."""
    return (
        MIN_LNG <= coord.longitude <= MAX_LNG
        and MIN_LAT <= coord.latitude <= MAX_LAT
    )


def _check_in_china(coord: Coordinate) -> None:
    if not in_china_bbox(coord):
        logger.debug("Rejected %s: outside China bounding box.", coord)
        raise OutOfChinaError(coord)


def _transform_lat(x: float, y: float) -> float:
    ret = -100.0 + 2.0 * x + 3.0 * y + 0.2 * y * y + 0.1 * x * y + 0.2 * math.sqrt(abs(x))
    ret += ((20.0 * math.sin(6.0 * x * math.pi) + 20.0 * math.sin(2.0 * x * math.pi)) * 2.0) / 3.0
    ret += ((20.0 * math.sin(y * math.pi) + 40.0 * math.sin(y / 3.0 * math.pi)) * 2.0) / 3.0
    ret += ((160.0 * math.sin(y / 12.0 * math.pi) + 320.0 * math.sin(y * math.pi / 30.0)) * 2.0) / 3.0
    return ret


def _transform_lon(x: float, y: float) -> float:
    ret = 300.0 + x + 2.0 * y + 0.1 * x * x + 0.1 * x * y + 0.1 * math.sqrt(abs(x))
    ret += ((20.0 * math.sin(6.0 * x * math.pi) + 20.0 * math.sin(2.0 * x * math.pi)) * 2.0) / 3.0
    ret += ((20.0 * math.sin(x * math.pi) + 40.0 * math.sin(x / 3.0 * math.pi)) * 2.0) / 3.0
    ret += ((150.0 * math.sin(x / 12.0 * math.pi) + 300.0 * math.sin(x / 30.0 * math.pi)) * 2.0) / 3.0
    return ret


def _delta(lng: float, lat: float) -> tuple[float, float]:
    """Return the ``(d_lng, d_lat)`` offset in degrees at a WGS84 point."""
    d_lng = _transform_lon(lng - 105.0, lat - 35.0)
    d_lat = _transform_lat(lng - 105.0, lat - 35.0)

    rad_lat = lat / 180.0 * math.pi
    magic = math.sin(rad_lat)
    magic = 1.0 - EE * magic * magic
    sqrt_magic = math.sqrt(magic)

    d_lng = (d_lng * 180.0) / ((A / sqrt_magic) * math.cos(rad_lat) * math.pi)
    d_lat = (d_lat * 180.0) / (((A * (1.0 - EE)) / (magic * sqrt_magic)) * math.pi)
    return d_lng, d_lat


def wgs84_to_gcj02(coord: Coordinate) -> Coordinate:
    """Convert a WGS84 coordinate to GCJ02.

    Args:
        coord: WGS84 coordinate.

    Returns:
        A new GCJ02 coordinate.

    Raises:
        OutOfChinaError: If *coord* is outside the China bounding box.
    """
    _check_in_china(coord)

    d_lng, d_lat = _delta(coord.longitude, coord.latitude)
    return Coordinate(coord.longitude + d_lng, coord.latitude + d_lat)


def gcj02_to_wgs84(coord: Coordinate) -> Coordinate:
    """Convert a GCJ02 coordinate back to WGS84 by fixed-point iteration.

    Starting from the GCJ02 point itself, the candidate is pushed through
    :func:`wgs84_to_gcj02` and corrected by the residual against *coord*
    until both residual components drop below ``CONVERGENCE_EPSILON``.

    Args:
        coord: GCJ02 coordinate.

    Returns:
        A new WGS84 coordinate.

    Raises:
        OutOfChinaError: If *coord*, or any intermediate candidate, is
            outside the China bounding box.
        ConvergenceError: If the residual is still too large after
            ``MAX_ITERATIONS`` passes.
    """
    _check_in_china(coord)

    wgs_lng, wgs_lat = coord.longitude, coord.latitude
    for iteration in range(1, MAX_ITERATIONS + 1):
        # Re-gates the candidate on every pass.
        probe = wgs84_to_gcj02(Coordinate(wgs_lng, wgs_lat))
        dx = probe.longitude - coord.longitude
        dy = probe.latitude - coord.latitude

        if abs(dx) < CONVERGENCE_EPSILON and abs(dy) < CONVERGENCE_EPSILON:
            logger.debug(
                "GCJ02→WGS84 for %s converged after %d iteration(s).",
                coord,
                iteration,
            )
            return Coordinate(wgs_lng, wgs_lat)

        wgs_lng -= dx
        wgs_lat -= dy

    raise ConvergenceError(coord, MAX_ITERATIONS)
