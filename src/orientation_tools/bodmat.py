"""Body-fixed rotation matrix and pole vector from WGCCRE orientation angles."""

from __future__ import annotations

import logging
import math

import cspyce
import numpy as np

from orientation_tools.constants import RIGHT_ANGLE_DEGREES
from orientation_tools.orientation import Body, raw_orientation

logger = logging.getLogger(__name__)


def pole_vector(name: str | Body, elapsed_time: float) -> np.ndarray:
    """Return the unit J2000 vector of the body's north pole.

    Parameters:
        name: Body identifier.
        elapsed_time: Julian millennia since the reference epoch.

    Returns:
        3-element unit vector.

    Raises:
        UnsupportedBodyError: If name is not a supported identifier.
    """
    ra, dec, _w = raw_orientation(name, elapsed_time, dtype=np.float64)
    vec = cspyce.radrec(1.0, math.radians(float(ra)), math.radians(float(dec)))
    return np.array(vec, dtype=np.float64)


def rotation_matrix(name: str | Body, elapsed_time: float) -> np.ndarray:
    """Return the rotation matrix from J2000 to the body-fixed frame.

    The matrix is [W]_3 [90 - delta]_1 [90 + alpha]_3, built from the raw
    report angles (not the VSOP87 remapping). Its third row is the pole.

    Parameters:
        name: Body identifier.
        elapsed_time: Julian millennia since the reference epoch.

    Returns:
        3x3 rotation matrix (J2000 to body-fixed).

    Raises:
        UnsupportedBodyError: If name is not a supported identifier.
    """
    ra, dec, w = raw_orientation(name, elapsed_time, dtype=np.float64)
    logger.debug('Body matrix for %s: alpha=%s delta=%s W=%s', name, ra, dec, w)
    rot = cspyce.eul2m(
        math.radians(float(w) % 360.0),
        math.radians(RIGHT_ANGLE_DEGREES - float(dec)),
        math.radians(RIGHT_ANGLE_DEGREES + float(ra)),
        3,
        1,
        3,
    )
    return np.array(rot, dtype=np.float64)
