"""
China Coordinate Converter - CLI Entry Point
=============================================
Command-line interface built with Click.  Installed as the
``geo-cn-convert`` command via ``pyproject.toml``.

Usage:
    geo-cn-convert --from wgs84 --to gcj02 --lng 114.304569 --lat 30.593354
    geo-cn-convert --from bd09 --to wgs84 --lng 116.420033 --lat 39.911844 --format json

Run ``geo-cn-convert --help`` for a full list of options.
"""

from __future__ import annotations

import sys

import click

from china_coord_converter.converter import ConverterConfig, PointConverter
from china_coord_converter.exceptions import CoordConverterError
from china_coord_converter.models import CoordSystem

_SYSTEM_CHOICES = [m.value.lower() for m in CoordSystem]


@click.command(
    name="geo-cn-convert",
    help=(
        "Convert a longitude/latitude pair between the WGS84, GCJ02 and BD09 "
        "coordinate systems.\n\n"
        "Conversions touching WGS84 only work inside the China bounding box."
    ),
)
# ---------------------------------------------------------------------------
# Required arguments
# ---------------------------------------------------------------------------
@click.option(
    "--from", "-f",
    "from_system",
    required=True,
    type=click.Choice(_SYSTEM_CHOICES, case_sensitive=False),
    help="Coordinate system the input point is expressed in.",
)
@click.option(
    "--to", "-t",
    "to_system",
    required=True,
    type=click.Choice(_SYSTEM_CHOICES, case_sensitive=False),
    help="Coordinate system to convert into.",
)
@click.option("--lng", required=True, type=float, help="Longitude in decimal degrees.")
@click.option("--lat", required=True, type=float, help="Latitude in decimal degrees.")
# ---------------------------------------------------------------------------
# Optional arguments
# ---------------------------------------------------------------------------
@click.option(
    "--precision", "-p",
    default=6,
    show_default=True,
    type=click.IntRange(0, 15),
    help="Decimal places in the printed result.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Print 'lng,lat' text or a JSON object with source and target.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable debug-level logging output.",
)
def main(
    from_system: str,
    to_system: str,
    lng: float,
    lat: float,
    precision: int,
    output_format: str,
    verbose: bool,
) -> None:
    """CLI entry point: wires Click options into PointConverter."""
    config = ConverterConfig(
        from_system=from_system,
        to_system=to_system,
        precision=precision,
        output_format=output_format.lower(),  # type: ignore[arg-type]
    )

    tool = PointConverter(lng, lat, config, verbose=verbose)

    try:
        tool.run()
    except CoordConverterError as exc:
        # User-facing errors: print a clean message, no stack trace
        click.echo(f"Error: {exc.message}", err=True)
        sys.exit(1)

    click.echo(tool.render())


if __name__ == "__main__":
    main()
