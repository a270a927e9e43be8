# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for solar position.

Usage:
    # Sun position in San Francisco, 10:45 PDT
    sunpos --lat 37.7749 --lon -122.4194 --date 2019-09-23 --time 10:45 --utc-offset -07:00

    # Geometric position (no refraction) with the light direction vector
    sunpos --lat 52.0 --lon 4.4 --date 2024-06-21 --time 12:00 --no-refraction --direction

    # Sample a day every 15 minutes and export
    sunpos --lat 52.0 --lon 4.4 --date 2024-06-21 --time 00:00 --utc-offset +02:00 \\
        --step-minutes 15 --count 96 --export-csv path.csv --export-json path.json
"""
import argparse
import json
import logging
import math
import re
import sys
from datetime import date, datetime, time, timedelta

from sunpos.domain.config import OffsetConvention, PositionSettings
from sunpos.domain.direction import az_el_to_direction
from sunpos.domain.observer import Observer
from sunpos.domain.solar_position import SunPositionCalculator, SunSample
from sunpos.domain.validation import ValidationError
from sunpos.adapters.csv_exporter import CsvSunPathExporter
from sunpos.adapters.json_exporter import JsonSunPathExporter

_OFFSET_PATTERN = re.compile(r'^([+-])(\d{1,2}):?(\d{2})$')


def parse_utc_offset(text: str) -> int:
    """
    Parse a UTC offset given as ``±HH:MM``, ``±HHMM``, ``Z`` or seconds.

    Returns:
        Offset in seconds east of UTC.
    """
    text = text.strip()
    if text in ('Z', 'z'):
        return 0
    match = _OFFSET_PATTERN.match(text)
    if match:
        sign, hours, minutes = match.groups()
        if int(minutes) >= 60:
            raise argparse.ArgumentTypeError(
                f"invalid UTC offset {text!r}, minutes must be below 60"
            )
        seconds = int(hours) * 3600 + int(minutes) * 60
        return -seconds if sign == '-' else seconds
    try:
        return int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid UTC offset {text!r}, expected ±HH:MM or seconds"
        ) from None


def parse_step_minutes(text: str) -> float:
    """Parse the sampling interval in minutes; must be a finite number."""
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid step {text!r}, expected minutes"
        ) from None
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(f"step must be finite, got {text!r}")
    return value


def _join_option_values(argv: list[str], options: tuple[str, ...]) -> list[str]:
    """Rewrite ``--opt VALUE`` as ``--opt=VALUE`` so a value like -07:00 is not read as a flag."""
    joined: list[str] = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg in options and i + 1 < len(argv):
            joined.append(f"{arg}={argv[i + 1]}")
            i += 2
            continue
        joined.append(arg)
        i += 1
    return joined


def run(
    lat_deg: float,
    lon_deg: float,
    local_date: date,
    local_time: time,
    utc_offset_seconds: int = 0,
    settings: PositionSettings | None = None,
    step_minutes: float = 60.0,
    count: int = 1,
    export_csv: str | None = None,
    export_json: str | None = None,
) -> tuple[Observer, list[SunSample]]:
    """
    Compute solar positions and write requested exports.

    Returns:
        (observer, samples): the validated observer and its samples.

    Raises:
        ValidationError: invalid coordinates, offset, step or count.
    """
    observer = Observer(
        lat_deg=lat_deg,
        lon_deg=lon_deg,
        utc_offset_seconds=utc_offset_seconds,
    )
    calculator = SunPositionCalculator(observer, settings or PositionSettings())
    start = datetime.combine(local_date, local_time)
    samples = calculator.track(start, timedelta(minutes=step_minutes), count)

    if export_csv:
        CsvSunPathExporter().export(observer, samples, export_csv)
    if export_json:
        JsonSunPathExporter().export(observer, samples, export_json)

    return observer, samples


def _format_sample(sample: SunSample, with_direction: bool) -> str:
    pos = sample.position
    lines = [
        f"Time:      {sample.when.to_datetime().isoformat()}",
        f"Azimuth:   {pos.azimuth_deg:.4f}°",
        f"Zenith:    {pos.zenith_deg:.4f}°",
        f"Elevation: {pos.elevation_deg:.4f}°",
    ]
    if with_direction:
        x, y, z = az_el_to_direction(pos.azimuth_deg, pos.elevation_deg)
        lines.append(f"Direction: ({x:.5f}, {y:.5f}, {z:.5f})")
    return "\n".join(lines)


def _sample_dict(sample: SunSample, with_direction: bool) -> dict:
    pos = sample.position
    record = {
        'local_time': sample.when.to_datetime().isoformat(),
        'azimuth_deg': pos.azimuth_deg,
        'zenith_deg': pos.zenith_deg,
        'elevation_deg': pos.elevation_deg,
    }
    if with_direction:
        record['direction'] = list(
            az_el_to_direction(pos.azimuth_deg, pos.elevation_deg)
        )
    return record


def main():
    parser = argparse.ArgumentParser(
        description="Compute the apparent position of the Sun for an observer"
    )
    parser.add_argument(
        '--lat', type=float, required=True,
        help="Observer latitude in degrees, north positive"
    )
    parser.add_argument(
        '--lon', type=float, required=True,
        help="Observer longitude in degrees, east positive"
    )
    parser.add_argument(
        '--date', type=date.fromisoformat, required=True,
        help="Local civil date (YYYY-MM-DD)"
    )
    parser.add_argument(
        '--time', type=time.fromisoformat, default=time(12, 0),
        help="Local clock time (HH:MM[:SS], default: 12:00)"
    )
    parser.add_argument(
        '--utc-offset', type=parse_utc_offset, default=0,
        help="Fixed clock offset east of UTC, ±HH:MM or seconds (default: 0)"
    )
    parser.add_argument(
        '--no-refraction', action='store_true', default=False,
        help="Report the geometric position without atmospheric refraction"
    )
    parser.add_argument(
        '--legacy-offset', action='store_true', default=False,
        help="Scale the UTC offset like the historical NOAA port (seconds x 60)"
    )
    parser.add_argument(
        '--direction', action='store_true', default=False,
        help="Also print the unit light-direction vector (x east, y up, z north)"
    )
    parser.add_argument(
        '--json', action='store_true', default=False,
        help="Print results as JSON"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Enable debug logging"
    )

    track_group = parser.add_argument_group('sun path')
    track_group.add_argument(
        '--step-minutes', type=parse_step_minutes, default=60.0,
        help="Interval between samples in minutes (default: 60)"
    )
    track_group.add_argument(
        '--count', type=int, default=1,
        help="Number of samples starting at --time (default: 1)"
    )
    track_group.add_argument(
        '--export-csv',
        help="Export the sampled positions to CSV"
    )
    track_group.add_argument(
        '--export-json',
        help="Export the sampled positions to JSON"
    )

    args = parser.parse_args(_join_option_values(sys.argv[1:], ('--utc-offset',)))

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    settings = PositionSettings(
        offset_convention=(
            OffsetConvention.LEGACY if args.legacy_offset else OffsetConvention.CIVIL
        ),
        apply_refraction=not args.no_refraction,
    )

    try:
        _, samples = run(
            lat_deg=args.lat,
            lon_deg=args.lon,
            local_date=args.date,
            local_time=args.time,
            utc_offset_seconds=args.utc_offset,
            settings=settings,
            step_minutes=args.step_minutes,
            count=args.count,
            export_csv=args.export_csv,
            export_json=args.export_json,
        )
    except (ValidationError, OverflowError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: cannot write export: {e}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(json.dumps(
            [_sample_dict(s, args.direction) for s in samples], indent=2,
        ))
        return

    print("\n\n".join(_format_sample(s, args.direction) for s in samples))
    if args.export_csv:
        print(f"Exported {len(samples)} positions to {args.export_csv}")
    if args.export_json:
        print(f"Exported {len(samples)} positions to {args.export_json}")


if __name__ == '__main__':
    main()
