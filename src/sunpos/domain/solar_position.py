# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Solar position facade.

SolarPosition binds one observer to one civil date/time and runs the
ephemeris + topocentric pipeline once, on the first read of azimuth,
zenith or elevation. SunPositionCalculator binds an observer and hands
out SolarPosition objects that share one ephemeris cache.
"""
import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Union

from sunpos.domain.astro_time import CivilDateTime, julian_century_time
from sunpos.domain.config import DEFAULT_SETTINGS, OffsetConvention, PositionSettings
from sunpos.domain.ephemeris import EphemerisCache
from sunpos.domain.observer import Observer
from sunpos.domain.topocentric import SolarPositionResult, resolve_position
from sunpos.domain.validation import ValidationError

logger = logging.getLogger(__name__)

Instant = Union[datetime, CivilDateTime]


@dataclass(frozen=True)
class SunSample:
    """Solar position at one sampled instant."""
    when: CivilDateTime
    position: SolarPositionResult


def _on_observer_clock(observer: Observer, when: Instant) -> CivilDateTime:
    """Express ``when`` in the observer's fixed UTC offset."""
    if isinstance(when, CivilDateTime):
        if when.utc_offset_seconds == observer.utc_offset_seconds:
            return when
        when = when.to_datetime()
    return observer.local_time(when)


def _warn_if_legacy(observer: Observer, settings: PositionSettings) -> None:
    if (settings.offset_convention is OffsetConvention.LEGACY
            and observer.utc_offset_seconds != 0):
        logger.warning(
            "Legacy UTC offset scaling with offset %d s shifts the Julian "
            "time by %.0f days",
            observer.utc_offset_seconds, observer.utc_offset_seconds * 60.0,
        )


class SolarPosition:
    """Sun position for a fixed observer and instant, computed once.

    The first call to any accessor computes all values; later calls
    return the cached result. A new instant needs a new instance.
    """

    def __init__(
        self,
        observer: Observer,
        when: Instant,
        settings: PositionSettings = DEFAULT_SETTINGS,
        ephemeris_cache: Optional[EphemerisCache] = None,
    ):
        self.observer = observer
        self.when = _on_observer_clock(observer, when)
        self.settings = settings
        if ephemeris_cache is None:
            _warn_if_legacy(observer, settings)
            ephemeris_cache = EphemerisCache()
        self._ephemeris_cache = ephemeris_cache
        self._result: Optional[SolarPositionResult] = None
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return (f"SolarPosition(observer={self.observer!r}, "
                f"when={self.when.to_datetime().isoformat()})")

    @property
    def julian_century_time(self) -> float:
        return julian_century_time(self.when, self.settings.offset_convention)

    def result(self) -> SolarPositionResult:
        """Full pipeline output, computed on first access."""
        result = self._result
        if result is not None:
            return result
        with self._lock:
            if self._result is None:
                self._result = self._compute()
            return self._result

    def _compute(self) -> SolarPositionResult:
        t = self.julian_century_time
        ephemeris = self._ephemeris_cache.get(t)
        result = resolve_position(self.observer, self.when, ephemeris, self.settings)
        logger.debug(
            "Sun at %s for (%.4f, %.4f): az=%.4f zen=%.4f el=%.4f",
            self.when.to_datetime().isoformat(),
            self.observer.lat_deg, self.observer.lon_deg,
            result.azimuth_deg, result.zenith_deg, result.elevation_deg,
        )
        return result

    def azimuth(self) -> float:
        """Degrees clockwise from north, in [0, 360)."""
        return self.result().azimuth_deg

    def zenith(self) -> float:
        """Refraction-corrected zenith angle in degrees."""
        return self.result().zenith_deg

    def elevation(self) -> float:
        """Refraction-corrected elevation, 90 - zenith, in degrees."""
        return self.result().elevation_deg


class SunPositionCalculator:
    """Solar positions for one observer at arbitrary instants.

    All positions handed out share one ephemeris cache, so instants that
    map to the same Julian-century time reuse the same ephemeris.
    """

    def __init__(
        self,
        observer: Observer,
        settings: PositionSettings = DEFAULT_SETTINGS,
    ):
        self.observer = observer
        self.settings = settings
        self.ephemeris_cache = EphemerisCache()
        _warn_if_legacy(observer, settings)

    def at(self, when: Instant) -> SolarPosition:
        """Position at ``when``; naive datetimes are read on the observer's clock."""
        return SolarPosition(
            self.observer, when,
            settings=self.settings,
            ephemeris_cache=self.ephemeris_cache,
        )

    def track(
        self,
        start: Instant,
        step: timedelta,
        count: int,
    ) -> list[SunSample]:
        """
        Sample the Sun's position at fixed intervals.

        Args:
            start: First sampled instant.
            step: Interval between samples; must be positive.
            count: Number of samples; must be positive.

        Returns:
            List of SunSample in time order.

        Raises:
            ValidationError: non-positive step or count.
        """
        if step <= timedelta(0):
            raise ValidationError(f"track step must be positive, got {step}")
        if count <= 0:
            raise ValidationError(f"track count must be positive, got {count}")

        first = _on_observer_clock(self.observer, start).to_datetime()
        samples: list[SunSample] = []
        for i in range(count):
            position = self.at(first + i * step)
            samples.append(SunSample(when=position.when, position=position.result()))
        return samples


def compute_solar_position(
    observer: Observer,
    when: Instant,
    settings: PositionSettings = DEFAULT_SETTINGS,
) -> SolarPositionResult:
    """One-shot solar position for an observer and instant."""
    return SolarPosition(observer, when, settings=settings).result()
