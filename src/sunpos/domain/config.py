# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Pipeline configuration.

PositionSettings selects how the clock's UTC offset enters the time
arguments and whether the atmospheric refraction correction is applied.
"""
from dataclasses import dataclass
from enum import Enum


class OffsetConvention(Enum):
    """How a UTC offset in seconds is scaled before it is subtracted.

    CIVIL: seconds / 86400 in the Julian day, seconds / 60 in the
    true-solar-time correction. Local clock time becomes UTC exactly once.

    LEGACY: seconds * 60 in both places, as in the NOAA-derived code this
    package replaces. Only whole-day multiples survive the wrap of the true
    solar time, and the Julian day is shifted by thousands of years for any
    non-zero offset. Kept for reproducing historical output.
    """
    CIVIL = "civil"
    LEGACY = "legacy"


@dataclass(frozen=True)
class PositionSettings:
    """Knobs of the solar position pipeline."""
    offset_convention: OffsetConvention = OffsetConvention.CIVIL
    apply_refraction: bool = True


DEFAULT_SETTINGS = PositionSettings()
