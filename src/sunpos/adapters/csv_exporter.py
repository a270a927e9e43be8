# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV sun path exporter.

Exports sampled solar positions as CSV, one row per instant.
External dependencies (csv, file I/O) are confined to this adapter.
"""
import csv
import logging

from sunpos.ports.export import SunPathExporter
from sunpos.domain.observer import Observer
from sunpos.domain.solar_position import SunSample

logger = logging.getLogger(__name__)

_HEADER = [
    'local_time', 'utc_offset_seconds',
    'azimuth_deg', 'zenith_deg', 'elevation_deg',
]


class CsvSunPathExporter(SunPathExporter):
    """Exports solar positions to CSV."""

    def export(
        self,
        observer: Observer,
        samples: list[SunSample],
        path: str,
    ) -> int:
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_HEADER)
            for sample in samples:
                pos = sample.position
                writer.writerow([
                    sample.when.to_datetime().isoformat(),
                    sample.when.utc_offset_seconds,
                    f'{pos.azimuth_deg:.6f}',
                    f'{pos.zenith_deg:.6f}',
                    f'{pos.elevation_deg:.6f}',
                ])

        logger.info(
            "Wrote %d solar positions for (%.4f, %.4f) to %s",
            len(samples), observer.lat_deg, observer.lon_deg, path,
        )
        return len(samples)
