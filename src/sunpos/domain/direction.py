# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Azimuth/elevation to Cartesian direction.

Unit vector pointing from the observer towards the Sun in a local
frame with x east, y up and z north, the form a scene's directional
light consumes.
"""
import numpy as np


def az_el_to_direction(
    azimuth_deg: float,
    elevation_deg: float,
) -> tuple[float, float, float]:
    """
    Convert azimuth/elevation to a unit direction vector.

    Args:
        azimuth_deg: Degrees clockwise from north.
        elevation_deg: Degrees above the horizon.

    Returns:
        (x, y, z) = (cos(el)·sin(az), sin(el), cos(el)·cos(az)).
    """
    az_rad = float(np.radians(azimuth_deg))
    el_rad = float(np.radians(elevation_deg))
    horizontal = float(np.cos(el_rad))
    return (
        horizontal * float(np.sin(az_rad)),
        float(np.sin(el_rad)),
        horizontal * float(np.cos(az_rad)),
    )
