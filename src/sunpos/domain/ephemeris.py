# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
NOAA solar ephemeris.

Orbital quantities of the Sun as polynomial/trigonometric functions of
the time T in Julian centuries since J2000.0 (Meeus "Astronomical
Algorithms" Ch. 25, as used by the NOAA solar calculator). Accuracy is a
fraction of an arcminute for dates between 1800 and 2100.

Every quantity depends only on T and on quantities listed before it, so
each one is computed at most once per SunEphemeris and memoized.
All angles are in degrees, except the equation of time (minutes) and
the radius vector (AU).
"""
import functools
import logging
import threading
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)


def _memoized(method):
    """Cache a zero-argument quantity in the instance's value table.

    The first computation runs under the instance lock; populated values
    are read without locking. The lock is re-entrant because quantities
    call each other.
    """
    name = method.__name__

    @functools.wraps(method)
    def wrapper(self) -> float:
        try:
            return self._values[name]
        except KeyError:
            pass
        with self._lock:
            if name not in self._values:
                self._values[name] = method(self)
            return self._values[name]

    return wrapper


def _sin_deg(angle_deg: float) -> float:
    return float(np.sin(np.radians(angle_deg)))


def _cos_deg(angle_deg: float) -> float:
    return float(np.cos(np.radians(angle_deg)))


@dataclass(frozen=True)
class EphemerisSnapshot:
    """All ephemeris quantities for one time value."""
    t: float  # Julian centuries since J2000.0
    eccentricity: float
    mean_longitude_deg: float
    mean_anomaly_deg: float
    equation_of_center_deg: float
    true_longitude_deg: float
    true_anomaly_deg: float
    apparent_longitude_deg: float
    mean_obliquity_deg: float
    corrected_obliquity_deg: float
    declination_deg: float
    equation_of_time_min: float
    radius_vector_au: float


class SunEphemeris:
    """Memoized solar quantities at a fixed Julian-century time ``t``."""

    def __init__(self, t: float):
        self.t = t
        self._values: dict[str, float] = {}
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return f"SunEphemeris(t={self.t!r})"

    @property
    def cached_quantities(self) -> frozenset[str]:
        """Names of the quantities computed so far."""
        return frozenset(self._values)

    @_memoized
    def eccentricity(self) -> float:
        """Eccentricity of Earth's orbit (unitless)."""
        t = self.t
        return 0.016708634 - t * (0.000042037 + 0.0000001267 * t)

    @_memoized
    def mean_longitude(self) -> float:
        """Geometric mean longitude L0, wrapped into [0, 360)."""
        t = self.t
        l0 = 280.46646 + t * (36000.76983 + t * 0.0003032)
        while l0 >= 360.0:
            l0 -= 360.0
        while l0 < 0.0:
            l0 += 360.0
        return l0

    @_memoized
    def mean_anomaly(self) -> float:
        """Geometric mean anomaly M (unwrapped)."""
        t = self.t
        return 357.52911 + t * (35999.05029 - 0.0001537 * t)

    @_memoized
    def equation_of_center(self) -> float:
        """Equation of the center C."""
        t = self.t
        m_rad = float(np.radians(self.mean_anomaly()))
        sin_m = float(np.sin(m_rad))
        sin_2m = float(np.sin(2.0 * m_rad))
        sin_3m = float(np.sin(3.0 * m_rad))
        return (sin_m * (1.914602 - t * (0.004817 + 0.000014 * t))
                + sin_2m * (0.019993 - 0.000101 * t)
                + sin_3m * 0.000289)

    @_memoized
    def true_longitude(self) -> float:
        return self.mean_longitude() + self.equation_of_center()

    @_memoized
    def true_anomaly(self) -> float:
        return self.mean_anomaly() + self.equation_of_center()

    @_memoized
    def omega(self) -> float:
        """Longitude of the Moon's ascending node, drives the nutation terms."""
        return 125.04 - 1934.136 * self.t

    @_memoized
    def apparent_longitude(self) -> float:
        """True longitude corrected for nutation and aberration."""
        return self.true_longitude() - 0.00569 - 0.00478 * _sin_deg(self.omega())

    @_memoized
    def mean_obliquity(self) -> float:
        """Mean obliquity of the ecliptic e0."""
        t = self.t
        seconds = 21.448 - t * (46.815 + t * (0.00059 - t * 0.001813))
        return 23.0 + (26.0 + seconds / 60.0) / 60.0

    @_memoized
    def corrected_obliquity(self) -> float:
        return self.mean_obliquity() + 0.00256 * _cos_deg(self.omega())

    @_memoized
    def declination(self) -> float:
        """Apparent declination of the Sun."""
        sin_decl = (_sin_deg(self.corrected_obliquity())
                    * _sin_deg(self.apparent_longitude()))
        return float(np.degrees(np.arcsin(sin_decl)))

    @_memoized
    def equation_of_time(self) -> float:
        """Apparent minus mean solar time, in minutes."""
        epsilon = self.corrected_obliquity()
        l0_rad = float(np.radians(self.mean_longitude()))
        e = self.eccentricity()
        m_rad = float(np.radians(self.mean_anomaly()))

        y = float(np.tan(np.radians(epsilon) / 2.0))
        y *= y

        sin_2l0 = float(np.sin(2.0 * l0_rad))
        cos_2l0 = float(np.cos(2.0 * l0_rad))
        sin_4l0 = float(np.sin(4.0 * l0_rad))
        sin_m = float(np.sin(m_rad))
        sin_2m = float(np.sin(2.0 * m_rad))

        e_time = (y * sin_2l0
                  - 2.0 * e * sin_m
                  + 4.0 * e * y * sin_m * cos_2l0
                  - 0.5 * y * y * sin_4l0
                  - 1.25 * e * e * sin_2m)

        return float(np.degrees(e_time)) * 4.0

    @_memoized
    def radius_vector(self) -> float:
        """Earth-Sun distance R in AU."""
        e = self.eccentricity()
        return (1.000001018 * (1.0 - e * e)) / (1.0 + e * _cos_deg(self.true_anomaly()))

    def snapshot(self) -> EphemerisSnapshot:
        """Freeze every quantity into an EphemerisSnapshot."""
        return EphemerisSnapshot(
            t=self.t,
            eccentricity=self.eccentricity(),
            mean_longitude_deg=self.mean_longitude(),
            mean_anomaly_deg=self.mean_anomaly(),
            equation_of_center_deg=self.equation_of_center(),
            true_longitude_deg=self.true_longitude(),
            true_anomaly_deg=self.true_anomaly(),
            apparent_longitude_deg=self.apparent_longitude(),
            mean_obliquity_deg=self.mean_obliquity(),
            corrected_obliquity_deg=self.corrected_obliquity(),
            declination_deg=self.declination(),
            equation_of_time_min=self.equation_of_time(),
            radius_vector_au=self.radius_vector(),
        )


class EphemerisCache:
    """One SunEphemeris per distinct time value, created on first request.

    Entries are never evicted. Creation is serialized so concurrent first
    requests for the same ``t`` receive the same instance.
    """

    def __init__(self):
        self._entries: dict[float, SunEphemeris] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, t: float) -> bool:
        return t in self._entries

    def get(self, t: float) -> SunEphemeris:
        try:
            return self._entries[t]
        except KeyError:
            pass
        with self._lock:
            eph = self._entries.get(t)
            if eph is None:
                logger.debug("Creating solar ephemeris for T=%.12f", t)
                eph = SunEphemeris(t)
                self._entries[t] = eph
            return eph
