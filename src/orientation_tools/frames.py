"""VSOP87 frame conversion of WGCCRE orientation triples.

Offsets from Stellarium (StelCore.cpp): the pole declination is shifted by
90 degrees less the Earth's axial tilt, and the right ascension plus the
prime-meridian angle is shifted by a half turn and a small epoch offset.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from orientation_tools.angle_utils import normalize_degrees, resolve_dtype, to_precision
from orientation_tools.constants import (
    EARTH_AXIAL_TILT_DEG,
    HALF_CIRCLE_DEGREES,
    RIGHT_ANGLE_DEGREES,
    VSOP87_EPOCH_OFFSET_DEG,
)
from orientation_tools.reports.base import Triple


def axial_tilt(dtype: Any = None) -> Any:
    """Return the Earth's axial tilt in degrees (23.4392803055555555556)."""
    return resolve_dtype(dtype)(EARTH_AXIAL_TILT_DEG)


def to_vsop87(alpha_delta_w: Triple, dtype: Any = None) -> Triple:
    """Map a raw (alpha, delta, W) triple into the VSOP87 frame convention.

    Parameters:
        alpha_delta_w: Pole RA, pole declination and prime-meridian angle (degrees).
        dtype: Working precision; None uses the configured default.

    Returns:
        ((delta + 90 - tilt) mod 360, (alpha + W - 180 + offset) mod 360, 0),
        the first two in [0, 360). The frame defines no third rotation.
    """
    dtype = resolve_dtype(dtype)
    ra, de, correction = (to_precision(v, dtype) for v in alpha_delta_w)
    x_offset = dtype(RIGHT_ANGLE_DEGREES) - axial_tilt(dtype)
    y_offset = dtype(VSOP87_EPOCH_OFFSET_DEG)
    return (
        normalize_degrees(de + x_offset, dtype),
        normalize_degrees((ra + correction) - dtype(HALF_CIRCLE_DEGREES) + y_offset, dtype),
        np.zeros(np.shape(correction), dtype=dtype)[()],
    )
