# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Observer on the Earth's surface with a fixed clock offset."""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from sunpos.domain.astro_time import CivilDateTime
from sunpos.domain.validation import (
    check_latitude,
    check_longitude,
    check_utc_offset,
)


@dataclass(frozen=True)
class Observer:
    """Geodetic position of an observer and the UTC offset of its clock.

    Raises:
        ValidationError: latitude outside [-90, 90], longitude outside
            [-180, 180], or an offset of a day or more.
    """
    lat_deg: float
    lon_deg: float
    utc_offset_seconds: int = 0
    name: str = ""

    def __post_init__(self) -> None:
        check_latitude(self.lat_deg)
        check_longitude(self.lon_deg)
        check_utc_offset(self.utc_offset_seconds)

    def local_time(self, dt: datetime) -> CivilDateTime:
        """Civil date/time of ``dt`` on this observer's clock.

        Naive datetimes are read as local clock time; aware ones are
        converted to the observer's offset first.
        """
        tz = timezone(timedelta(seconds=self.utc_offset_seconds))
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=tz)
        else:
            dt = dt.astimezone(tz)
        return CivilDateTime.from_datetime(dt)
