# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON sun path exporter.

Writes the observer and its sampled solar positions, each with the
matching unit light-direction vector, as one JSON document.
"""
import json
import logging
from typing import Any

from sunpos.ports.export import SunPathExporter
from sunpos.domain.direction import az_el_to_direction
from sunpos.domain.observer import Observer
from sunpos.domain.solar_position import SunSample

logger = logging.getLogger(__name__)


def _sample_record(sample: SunSample) -> dict[str, Any]:
    pos = sample.position
    return {
        'local_time': sample.when.to_datetime().isoformat(),
        'azimuth_deg': pos.azimuth_deg,
        'zenith_deg': pos.zenith_deg,
        'elevation_deg': pos.elevation_deg,
        'hour_angle_deg': pos.hour_angle_deg,
        'declination_deg': pos.declination_deg,
        'equation_of_time_min': pos.equation_of_time_min,
        'direction': list(az_el_to_direction(pos.azimuth_deg, pos.elevation_deg)),
    }


class JsonSunPathExporter(SunPathExporter):
    """Exports solar positions to a JSON document."""

    def __init__(self, indent: int | None = 2):
        self._indent = indent

    def export(
        self,
        observer: Observer,
        samples: list[SunSample],
        path: str,
    ) -> int:
        doc = {
            'observer': {
                'name': observer.name,
                'lat_deg': observer.lat_deg,
                'lon_deg': observer.lon_deg,
                'utc_offset_seconds': observer.utc_offset_seconds,
            },
            'samples': [_sample_record(s) for s in samples],
        }
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(doc, f, indent=self._indent)

        logger.info("Wrote %d solar positions to %s", len(samples), path)
        return len(samples)
