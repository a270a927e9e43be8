# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
sunpos

Apparent position of the Sun (azimuth, zenith angle, elevation) for an
observer anywhere on Earth at a civil date/time with a fixed UTC offset,
using the NOAA solar position algorithm: Julian time conversion, solar
ephemeris, equation of time, hour angle and atmospheric refraction.
"""

from sunpos.domain.config import (
    OffsetConvention,
    PositionSettings,
    DEFAULT_SETTINGS,
)
from sunpos.domain.validation import ValidationError
from sunpos.domain.astro_time import (
    CivilDateTime,
    julian_day_number,
    minutes_of_day,
    julian_day,
    julian_century_time,
)
from sunpos.domain.ephemeris import (
    EphemerisSnapshot,
    SunEphemeris,
    EphemerisCache,
)
from sunpos.domain.observer import Observer
from sunpos.domain.topocentric import (
    SolarPositionResult,
    refraction_correction,
    resolve_position,
)
from sunpos.domain.solar_position import (
    SolarPosition,
    SunPositionCalculator,
    SunSample,
    compute_solar_position,
)
from sunpos.domain.direction import az_el_to_direction

__version__ = "0.1.0"

__all__ = [
    "OffsetConvention",
    "PositionSettings",
    "DEFAULT_SETTINGS",
    "ValidationError",
    "CivilDateTime",
    "julian_day_number",
    "minutes_of_day",
    "julian_day",
    "julian_century_time",
    "EphemerisSnapshot",
    "SunEphemeris",
    "EphemerisCache",
    "Observer",
    "SolarPositionResult",
    "refraction_correction",
    "resolve_position",
    "SolarPosition",
    "SunPositionCalculator",
    "SunSample",
    "compute_solar_position",
    "az_el_to_direction",
]
