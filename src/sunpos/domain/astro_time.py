# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Calendar to Julian time conversion.

Converts a civil date and time-of-day with a fixed UTC offset into the
Julian Day and into fractional Julian centuries since J2000.0, the time
argument of every solar ephemeris polynomial.

Uses the standard algorithm (Meeus, Astronomical Algorithms, Ch. 7).
"""
import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone

from sunpos.domain.config import OffsetConvention
from sunpos.domain.validation import check_utc_offset

J2000_JD: float = 2451545.0
"""Julian Date of the J2000.0 epoch (2000-01-01 12:00:00 UTC)."""

DAYS_PER_JULIAN_CENTURY: float = 36525.0

MINUTES_PER_DAY: float = 1440.0

_SECONDS_PER_DAY: float = 86400.0


@dataclass(frozen=True)
class CivilDateTime:
    """Calendar date and wall-clock time at a fixed offset east of UTC."""
    date: date
    time: time
    utc_offset_seconds: int = 0

    def __post_init__(self) -> None:
        check_utc_offset(self.utc_offset_seconds)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "CivilDateTime":
        """Split a datetime into its civil parts.

        Aware datetimes keep their UTC offset; naive ones are treated as UTC.
        """
        offset = dt.utcoffset()
        offset_seconds = 0 if offset is None else int(offset.total_seconds())
        return cls(
            date=dt.date(),
            time=dt.time().replace(tzinfo=None),
            utc_offset_seconds=offset_seconds,
        )

    def to_datetime(self) -> datetime:
        """Aware datetime carrying the fixed offset."""
        tz = timezone(timedelta(seconds=self.utc_offset_seconds))
        return datetime.combine(self.date, self.time, tzinfo=tz)


def julian_day_number(d: date) -> float:
    """Julian Day at 0h of a proleptic Gregorian date.

    January and February count as months 13 and 14 of the preceding year.
    """
    year = d.year
    month = d.month
    day = d.day

    if month <= 2:
        year -= 1
        month += 12

    a = math.floor(year / 100.0)
    b = 2 - a + math.floor(a / 4)

    return (math.floor(365.25 * (year + 4716))
            + math.floor(30.6001 * (month + 1))
            + day + b - 1524.5)


def minutes_of_day(t: time) -> float:
    """Fractional minutes since midnight."""
    seconds = t.second + t.microsecond / 1_000_000.0
    return t.hour * 60.0 + t.minute + seconds / 60.0


def offset_days(offset_seconds: float, convention: OffsetConvention) -> float:
    """UTC offset as the day fraction subtracted from the Julian day."""
    if convention is OffsetConvention.LEGACY:
        return offset_seconds * 60.0
    return offset_seconds / _SECONDS_PER_DAY


def offset_minutes(offset_seconds: float, convention: OffsetConvention) -> float:
    """UTC offset as the minutes subtracted from the true solar time."""
    if convention is OffsetConvention.LEGACY:
        return offset_seconds * 60.0
    return offset_seconds / 60.0


def julian_day(
    when: CivilDateTime,
    convention: OffsetConvention = OffsetConvention.CIVIL,
) -> float:
    """Continuous Julian Day of a civil date/time."""
    day_fraction = minutes_of_day(when.time) / MINUTES_PER_DAY
    return (julian_day_number(when.date) + day_fraction
            - offset_days(when.utc_offset_seconds, convention))


def julian_centuries(jd: float) -> float:
    """Julian centuries elapsed since J2000.0 for a Julian Day."""
    return (jd - J2000_JD) / DAYS_PER_JULIAN_CENTURY


def julian_century_time(
    when: CivilDateTime,
    convention: OffsetConvention = OffsetConvention.CIVIL,
) -> float:
    """Fractional Julian centuries since J2000.0 of a civil date/time."""
    return julian_centuries(julian_day(when, convention))
