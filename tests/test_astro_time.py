# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for calendar to Julian time conversion."""
import ast
from datetime import date, datetime, time, timedelta, timezone

import pytest

from sunpos.domain.astro_time import (
    CivilDateTime,
    J2000_JD,
    julian_century_time,
    julian_centuries,
    julian_day,
    julian_day_number,
    minutes_of_day,
    offset_days,
    offset_minutes,
)
from sunpos.domain.config import OffsetConvention
from sunpos.domain.validation import ValidationError


# ── Julian Day Number ─────────────────────────────────────────────

class TestJulianDayNumber:

    def test_j2000_date(self):
        """2000-01-01 0h UT is JD 2451544.5."""
        assert julian_day_number(date(2000, 1, 1)) == 2451544.5

    def test_meeus_sputnik_example(self):
        """Meeus example 7.a: 1957-10-04 0h is JD 2436115.5."""
        assert julian_day_number(date(1957, 10, 4)) == 2436115.5

    def test_gregorian_reform(self):
        """First Gregorian day 1582-10-15 is JD 2299160.5."""
        assert julian_day_number(date(1582, 10, 15)) == 2299160.5

    def test_january_and_february_use_previous_year(self):
        """Feb 28 → Mar 1 is one day in a common year, two across Feb 29."""
        assert (julian_day_number(date(2019, 3, 1))
                - julian_day_number(date(2019, 2, 28))) == 1.0
        assert (julian_day_number(date(2020, 3, 1))
                - julian_day_number(date(2020, 2, 28))) == 2.0

    def test_increases_by_one_per_day(self):
        """Consecutive days differ by exactly 1.0 across months, years and centuries."""
        d = date(1899, 12, 1)
        prev = julian_day_number(d)
        for _ in range(2000):
            d += timedelta(days=1)
            jd = julian_day_number(d)
            assert jd - prev == 1.0, f"step at {d.isoformat()}"
            prev = jd

    def test_century_non_leap_year(self):
        """1900 is not a Gregorian leap year."""
        assert (julian_day_number(date(1900, 3, 1))
                - julian_day_number(date(1900, 2, 28))) == 1.0


# ── Minutes of day ────────────────────────────────────────────────

class TestMinutesOfDay:

    def test_midnight(self):
        assert minutes_of_day(time(0, 0)) == 0.0

    def test_hours_minutes_seconds(self):
        assert minutes_of_day(time(10, 45, 30)) == pytest.approx(645.5)

    def test_microseconds(self):
        assert minutes_of_day(time(0, 0, 0, 500_000)) == pytest.approx(0.5 / 60.0)

    def test_last_second(self):
        assert minutes_of_day(time(23, 59, 59)) == pytest.approx(1440.0 - 1.0 / 60.0)


# ── Offsets ───────────────────────────────────────────────────────

class TestOffsetScaling:

    def test_civil_offset_days(self):
        assert offset_days(-25200, OffsetConvention.CIVIL) == pytest.approx(-7.0 / 24.0)

    def test_civil_offset_minutes(self):
        assert offset_minutes(-25200, OffsetConvention.CIVIL) == pytest.approx(-420.0)

    def test_legacy_scaling(self):
        assert offset_days(-25200, OffsetConvention.LEGACY) == -1512000.0
        assert offset_minutes(-25200, OffsetConvention.LEGACY) == -1512000.0

    def test_zero_offset_identical_in_both_conventions(self):
        for convention in OffsetConvention:
            assert offset_days(0, convention) == 0.0
            assert offset_minutes(0, convention) == 0.0


# ── Julian century time ───────────────────────────────────────────

class TestJulianCenturyTime:

    def test_j2000_epoch_is_zero(self):
        """2000-01-01T12:00:00 UTC → T = 0.0."""
        when = CivilDateTime(date(2000, 1, 1), time(12, 0))
        assert julian_century_time(when) == pytest.approx(0.0, abs=1e-12)

    def test_j2000_epoch_with_offset_is_zero(self):
        """13:00 at UTC+1 is the same instant as 12:00 UTC."""
        when = CivilDateTime(date(2000, 1, 1), time(13, 0), utc_offset_seconds=3600)
        assert julian_century_time(when) == pytest.approx(0.0, abs=1e-9)

    def test_julian_day_of_epoch(self):
        when = CivilDateTime(date(2000, 1, 1), time(12, 0))
        assert julian_day(when) == J2000_JD

    def test_one_century(self):
        assert julian_centuries(J2000_JD + 36525.0) == 1.0

    def test_san_francisco_instant(self):
        """2019-09-23 10:45 PDT = 17:45 UTC."""
        when = CivilDateTime(date(2019, 9, 23), time(10, 45), utc_offset_seconds=-25200)
        assert julian_day(when) == pytest.approx(2458750.239583333, abs=1e-8)
        assert julian_century_time(when) == pytest.approx(0.197268708647037, abs=1e-12)

    def test_offset_equivalent_instants_agree(self):
        a = CivilDateTime(date(2019, 9, 23), time(10, 45), utc_offset_seconds=-25200)
        b = CivilDateTime(date(2019, 9, 23), time(17, 45))
        assert julian_century_time(a) == pytest.approx(julian_century_time(b), abs=1e-12)

    def test_legacy_convention_shifts_by_offset_times_sixty_days(self):
        when = CivilDateTime(date(2019, 9, 23), time(10, 45), utc_offset_seconds=-25200)
        shift = julian_day(when, OffsetConvention.LEGACY) - julian_day(when)
        assert shift == pytest.approx(1512000.0 - 7.0 / 24.0, abs=1e-6)


# ── CivilDateTime ─────────────────────────────────────────────────

class TestCivilDateTime:

    def test_frozen(self):
        when = CivilDateTime(date(2020, 1, 1), time(0, 0))
        with pytest.raises(AttributeError):
            when.utc_offset_seconds = 3600

    def test_from_aware_datetime_keeps_offset(self):
        tz = timezone(timedelta(hours=-7))
        when = CivilDateTime.from_datetime(datetime(2019, 9, 23, 10, 45, tzinfo=tz))
        assert when.date == date(2019, 9, 23)
        assert when.time == time(10, 45)
        assert when.utc_offset_seconds == -25200

    def test_from_naive_datetime_is_utc(self):
        when = CivilDateTime.from_datetime(datetime(2019, 9, 23, 10, 45))
        assert when.utc_offset_seconds == 0

    def test_to_datetime_is_aware(self):
        when = CivilDateTime(date(2019, 9, 23), time(10, 45), utc_offset_seconds=-25200)
        dt = when.to_datetime()
        assert dt.utcoffset() == timedelta(hours=-7)
        assert dt.astimezone(timezone.utc).hour == 17

    def test_offset_of_a_day_rejected(self):
        with pytest.raises(ValidationError):
            CivilDateTime(date(2020, 1, 1), time(0, 0), utc_offset_seconds=86400)


# ── Domain purity ─────────────────────────────────────────────────

class TestAstroTimePurity:

    def test_astro_time_module_pure(self):
        """astro_time.py must only import stdlib modules."""
        import sunpos.domain.astro_time as mod

        allowed = {'math', 'dataclasses', 'typing', 'enum', '__future__', 'datetime'}
        with open(mod.__file__) as f:
            tree = ast.parse(f.read())

        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    root = alias.name.split('.')[0]
                    assert root in allowed, f"Disallowed import '{alias.name}'"
            if isinstance(node, ast.ImportFrom):
                if node.module and node.level == 0:
                    root = node.module.split('.')[0]
                    if root not in allowed and root != 'sunpos':
                        assert False, f"Disallowed import from '{node.module}'"
