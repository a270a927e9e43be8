# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Input validation for observer coordinates and clock offsets."""
import math


class ValidationError(ValueError):
    """Input outside the physically meaningful domain."""


MAX_UTC_OFFSET_SECONDS: int = 86400


def check_latitude(lat_deg: float) -> float:
    """Latitude must be a finite value in [-90, 90] degrees."""
    if not math.isfinite(lat_deg) or not -90.0 <= lat_deg <= 90.0:
        raise ValidationError(
            f"latitude must be within [-90, 90] degrees, got {lat_deg}"
        )
    return lat_deg


def check_longitude(lon_deg: float) -> float:
    """Longitude must be a finite value in [-180, 180] degrees."""
    if not math.isfinite(lon_deg) or not -180.0 <= lon_deg <= 180.0:
        raise ValidationError(
            f"longitude must be within [-180, 180] degrees, got {lon_deg}"
        )
    return lon_deg


def check_utc_offset(offset_seconds: int) -> int:
    if not -MAX_UTC_OFFSET_SECONDS < offset_seconds < MAX_UTC_OFFSET_SECONDS:
        raise ValidationError(
            f"UTC offset must be strictly within ±{MAX_UTC_OFFSET_SECONDS} s, "
            f"got {offset_seconds}"
        )
    return offset_seconds
