"""
China Coordinate Converter - Point Converter Tool
==================================================
Provides the :class:`PointConverter` class, which validates a single
longitude/latitude pair plus source/target system names, converts it with
:func:`~china_coord_converter.dispatcher.transform`, and renders the result
as text or JSON.

Classes:
    ConversionResult    Immutable record of one completed conversion.
    ConverterConfig     Configuration bundle for the tool.
    PointConverter      Primary tool class (inherits ConverterTool).

Typical usage::

    from china_coord_converter.converter import ConverterConfig, PointConverter

    tool = PointConverter(
        114.304569,
        30.593354,
        ConverterConfig(from_system="wgs84", to_system="bd09"),
    )
    tool.run()
    print(tool.render())
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Literal

from china_coord_converter.base_tool import ConverterTool
from china_coord_converter.dispatcher import transform
from china_coord_converter.exceptions import InputValidationError
from china_coord_converter.models import Coordinate, CoordSystem
from china_coord_converter.validators import Validators

logger = logging.getLogger("china_coord_converter.converter")

OUTPUT_FORMATS = ("text", "json")
MAX_PRECISION = 15


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ConversionResult:
    """Immutable record of a completed conversion.

    Attributes:
        source: Input coordinate, in ``from_system``.
        target: Output coordinate, in ``to_system``.
        from_system: Source coordinate system.
        to_system: Target coordinate system.
    """

    source: Coordinate
    target: Coordinate
    from_system: CoordSystem
    to_system: CoordSystem

    def summary(self) -> str:
        """Return a human-readable summary string for logging or display."""
        return (
            f"{self.from_system} {self.source} → "
            f"{self.to_system} {self.target}"
        )

    def to_dict(self, precision: int = 6) -> dict[str, object]:
        """Return a JSON-serialisable mapping, rounding to *precision* places."""
        return {
            "from": self.from_system.value,
            "to": self.to_system.value,
            "source": [
                round(self.source.longitude, precision),
                round(self.source.latitude, precision),
            ],
            "target": [
                round(self.target.longitude, precision),
                round(self.target.latitude, precision),
            ],
        }


@dataclass
class ConverterConfig:
    """Configuration bundle for :class:`PointConverter`.

    Attributes:
        from_system: Source system, as a :class:`CoordSystem` or a name such
                     as ``"wgs84"`` / ``"gcj-02"``.
        to_system: Target system, same forms as ``from_system``.
        precision: Decimal places used when rendering output.
        output_format: ``"text"`` for ``lng,lat`` or ``"json"`` for a
                       single-line JSON object.
    """

    from_system: str | CoordSystem
    to_system: str | CoordSystem
    precision: int = 6
    output_format: Literal["text", "json"] = "text"


# ---------------------------------------------------------------------------
# Main tool class
# ---------------------------------------------------------------------------


class PointConverter(ConverterTool):
    """Convert one coordinate between WGS84, GCJ02 and BD09.

    Inherits the Template Method pipeline from :class:`ConverterTool`:
    ``validate_inputs`` → ``process`` → ``_report_success``.

    Args:
        longitude: Longitude of the input point, in the source system.
        latitude: Latitude of the input point, in the source system.
        config: A :class:`ConverterConfig` naming the systems and output
                settings.
        verbose: Enable DEBUG-level logging.  Defaults to ``False``.
    """

    def __init__(
        self,
        longitude: float,
        latitude: float,
        config: ConverterConfig,
        *,
        verbose: bool = False,
    ) -> None:
        super().__init__(verbose=verbose)
        self.longitude = longitude
        self.latitude = latitude
        self.config: ConverterConfig = config

        # Set in validate_inputs() / process()
        self._coordinate: Coordinate | None = None
        self._from_system: CoordSystem | None = None
        self._to_system: CoordSystem | None = None
        self._result: ConversionResult | None = None

    # ------------------------------------------------------------------
    # ConverterTool abstract method implementations
    # ------------------------------------------------------------------

    def validate_inputs(self) -> None:
        """Check the point, the system names and the output settings.

        Raises:
            InputValidationError: If the point is not finite, the precision
                is out of range, or the output format is unknown.
            UnknownCoordSystemError: If either system name cannot be parsed.
        """
        lng = Validators.assert_finite(self.longitude, "longitude")
        lat = Validators.assert_finite(self.latitude, "latitude")
        self._from_system = Validators.parse_coord_system(self.config.from_system)
        self._to_system = Validators.parse_coord_system(self.config.to_system)

        if isinstance(self.config.precision, bool) or not isinstance(
            self.config.precision, int
        ):
            raise InputValidationError(
                f"precision must be an integer, got {self.config.precision!r}."
            )
        Validators.assert_in_range(self.config.precision, 0, MAX_PRECISION, "precision")
        Validators.assert_choice(self.config.output_format, OUTPUT_FORMATS, "output format")

        self._coordinate = Coordinate(lng, lat)
        logger.debug("Inputs validated successfully.")

    def process(self) -> None:
        """Run the conversion and store a :class:`ConversionResult`.

        Raises:
            OutOfChinaError: If the route touches WGS84↔GCJ02 and the point
                is outside the China bounding box.
            ConvergenceError: If a GCJ02→WGS84 leg fails to converge.
        """
        assert self._coordinate is not None
        assert self._from_system is not None and self._to_system is not None

        target = transform(self._coordinate, self._from_system, self._to_system)
        self._result = ConversionResult(
            source=self._coordinate,
            target=target,
            from_system=self._from_system,
            to_system=self._to_system,
        )
        logger.info(self._result.summary())

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def render(self) -> str:
        """Format the last result according to ``config.output_format``.

        Raises:
            RuntimeError: If :meth:`run` has not completed yet.
        """
        if self._result is None:
            raise RuntimeError("PointConverter.render() called before run().")

        precision = self.config.precision
        if self.config.output_format == "json":
            return json.dumps(self._result.to_dict(precision))

        target = self._result.target
        return f"{target.longitude:.{precision}f},{target.latitude:.{precision}f}"

    @property
    def result(self) -> ConversionResult | None:
        """The :class:`ConversionResult` from the last :meth:`run` call.

        Returns ``None`` if :meth:`run` has not been called yet.
        """
        return self._result
