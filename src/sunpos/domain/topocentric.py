# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Topocentric solar position.

Turns the ephemeris quantities for an instant into the hour angle,
zenith angle, azimuth and refraction-corrected elevation seen by an
observer (NOAA solar calculator).

Azimuth is measured clockwise from north in [0, 360). Every branch is
total over the validated input domain: ratios are clamped before acos
and the polar/zenith case where the azimuth is undefined gets an
explicit value, so no NaN ever leaves this module.
"""
import logging
from dataclasses import dataclass

import numpy as np

from sunpos.domain.astro_time import (
    CivilDateTime,
    MINUTES_PER_DAY,
    minutes_of_day,
    offset_minutes,
)
from sunpos.domain.config import DEFAULT_SETTINGS, OffsetConvention, PositionSettings
from sunpos.domain.ephemeris import SunEphemeris
from sunpos.domain.observer import Observer

logger = logging.getLogger(__name__)

AZIMUTH_DENOMINATOR_EPS: float = 0.001
"""Below this |cos(lat)·sin(zenith)| the azimuth is undefined."""

_ARCSEC_PER_DEG: float = 3600.0


@dataclass(frozen=True)
class SolarPositionResult:
    """Apparent Sun position for one observer and instant."""
    azimuth_deg: float  # clockwise from north, [0, 360)
    zenith_deg: float  # refraction corrected
    elevation_deg: float  # 90 - zenith_deg
    hour_angle_deg: float
    declination_deg: float
    equation_of_time_min: float
    refraction_deg: float  # correction subtracted from the geometric zenith


def clamp_unit(value: float) -> float:
    """Clamp a cosine/sine ratio into [-1, 1]."""
    if value > 1.0:
        return 1.0
    if value < -1.0:
        return -1.0
    return value


def solar_time_fix(
    equation_of_time_min: float,
    lon_deg: float,
    utc_offset_seconds: float,
    convention: OffsetConvention = OffsetConvention.CIVIL,
) -> float:
    """Minutes from local clock time to true solar time.

    Four minutes per degree of longitude, minus the clock's UTC offset.
    """
    return (equation_of_time_min + 4.0 * lon_deg
            - offset_minutes(utc_offset_seconds, convention))


def true_solar_time(clock_minutes: float, time_fix_min: float) -> float:
    """True solar time in minutes, wrapped into [0, 1440)."""
    tst = clock_minutes + time_fix_min
    while tst >= MINUTES_PER_DAY:
        tst -= MINUTES_PER_DAY
    while tst < 0.0:
        tst += MINUTES_PER_DAY
    return tst


def hour_angle(true_solar_time_min: float) -> float:
    """Hour angle in degrees, negative before local solar noon."""
    ha = true_solar_time_min / 4.0 - 180.0
    if ha < -180.0:
        ha += 360.0
    return ha


def cos_zenith(lat_deg: float, declination_deg: float, hour_angle_deg: float) -> float:
    """Cosine of the geometric zenith angle, clamped into [-1, 1]."""
    lat_rad = float(np.radians(lat_deg))
    decl_rad = float(np.radians(declination_deg))
    ha_rad = float(np.radians(hour_angle_deg))
    csz = (float(np.sin(lat_rad)) * float(np.sin(decl_rad))
           + float(np.cos(lat_rad)) * float(np.cos(decl_rad)) * float(np.cos(ha_rad)))
    return clamp_unit(csz)


def zenith_angle(lat_deg: float, declination_deg: float, hour_angle_deg: float) -> float:
    """Geometric (exo-atmospheric) zenith angle in degrees."""
    return float(np.degrees(np.arccos(cos_zenith(lat_deg, declination_deg, hour_angle_deg))))


def azimuth(
    lat_deg: float,
    declination_deg: float,
    zenith_deg: float,
    hour_angle_deg: float,
) -> float:
    """Solar azimuth in degrees clockwise from north, in [0, 360).

    With the observer at a pole or the Sun at the zenith the azimuth is
    undefined; it is then 180 in the northern hemisphere and 0 otherwise.
    """
    lat_rad = float(np.radians(lat_deg))
    zen_rad = float(np.radians(zenith_deg))
    denom = float(np.cos(lat_rad)) * float(np.sin(zen_rad))

    if abs(denom) > AZIMUTH_DENOMINATOR_EPS:
        ratio = ((float(np.sin(lat_rad)) * float(np.cos(zen_rad))
                  - float(np.sin(np.radians(declination_deg)))) / denom)
        az = 180.0 - float(np.degrees(np.arccos(clamp_unit(ratio))))
        if hour_angle_deg > 0.0:
            az = -az
    else:
        logger.debug(
            "Azimuth undefined (lat=%.6f, zenith=%.6f), using meridian",
            lat_deg, zenith_deg,
        )
        az = 180.0 if lat_deg > 0.0 else 0.0

    if az < 0.0:
        az += 360.0
    # a tiny negative azimuth rounds to 360.0 above
    if az >= 360.0:
        az -= 360.0
    return az


def refraction_correction(exo_elevation_deg: float) -> float:
    """Atmospheric refraction in degrees for a geometric elevation.

    Piecewise NOAA approximation: none above 85 degrees, a tangent series
    down to 5 degrees, a quartic near the horizon and a tangent law below
    -0.575 degrees.
    """
    e = exo_elevation_deg
    if e > 85.0:
        return 0.0

    te = float(np.tan(np.radians(e)))
    if e > 5.0:
        arcsec = 58.1 / te - 0.07 / te ** 3 + 0.000086 / te ** 5
    elif e > -0.575:
        arcsec = 1735.0 + e * (-518.2 + e * (103.4 + e * (-12.79 + e * 0.711)))
    else:
        arcsec = -20.774 / te
    return arcsec / _ARCSEC_PER_DEG


def resolve_position(
    observer: Observer,
    when: CivilDateTime,
    ephemeris: SunEphemeris,
    settings: PositionSettings = DEFAULT_SETTINGS,
) -> SolarPositionResult:
    """Run the topocentric pipeline for one observer and instant.

    Args:
        observer: Observer position.
        when: Civil date/time; its own UTC offset sets the clock the
            solar time correction removes.
        ephemeris: Ephemeris at the Julian-century time of ``when``.
        settings: Offset convention and refraction switch.

    Returns:
        SolarPositionResult with azimuth, refraction-corrected zenith and
        elevation = 90 - zenith.
    """
    eq_time = ephemeris.equation_of_time()
    decl = ephemeris.declination()

    fix = solar_time_fix(
        eq_time, observer.lon_deg, when.utc_offset_seconds,
        settings.offset_convention,
    )
    tst = true_solar_time(minutes_of_day(when.time), fix)
    ha = hour_angle(tst)

    geometric_zenith = zenith_angle(observer.lat_deg, decl, ha)
    az = azimuth(observer.lat_deg, decl, geometric_zenith, ha)

    refraction = 0.0
    if settings.apply_refraction:
        refraction = refraction_correction(90.0 - geometric_zenith)
    zenith = geometric_zenith - refraction

    return SolarPositionResult(
        azimuth_deg=az,
        zenith_deg=zenith,
        elevation_deg=90.0 - zenith,
        hour_angle_deg=ha,
        declination_deg=decl,
        equation_of_time_min=eq_time,
        refraction_deg=refraction,
    )
