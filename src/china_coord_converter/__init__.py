"""
China Coordinate Converter
===========================
Converts longitude/latitude pairs between WGS84, GCJ02 and BD09.

Public API::

    from china_coord_converter import Coordinate, CoordSystem, transform

    bd = transform(Coordinate(114.304569, 30.593354), CoordSystem.WGS84, CoordSystem.BD09)
"""

from china_coord_converter.dispatcher import bd09_to_wgs84, transform, wgs84_to_bd09
from china_coord_converter.exceptions import (
    ConvergenceError,
    ConvertError,
    CoordConverterError,
    InputValidationError,
    OutOfChinaError,
    UnknownCoordSystemError,
    UnsupportedConversionError,
)
from china_coord_converter.gcj02_bd09 import bd09_to_gcj02, gcj02_to_bd09
from china_coord_converter.gcj02_wgs84 import gcj02_to_wgs84, in_china_bbox, wgs84_to_gcj02
from china_coord_converter.models import Coordinate, CoordSystem

__all__ = [
    "Coordinate",
    "CoordSystem",
    "transform",
    "wgs84_to_gcj02",
    "gcj02_to_wgs84",
    "gcj02_to_bd09",
    "bd09_to_gcj02",
    "wgs84_to_bd09",
    "bd09_to_wgs84",
    "in_china_bbox",
    "CoordConverterError",
    "InputValidationError",
    "UnknownCoordSystemError",
    "ConvertError",
    "OutOfChinaError",
    "UnsupportedConversionError",
    "ConvergenceError",
]
__version__ = "1.0.0"
