"""Degree-based trigonometry and angle formatting at a chosen working precision."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

import numpy as np

from orientation_tools.config import get_default_dtype
from orientation_tools.constants import DEGREES_PER_CIRCLE, HALF_CIRCLE_DEGREES


def resolve_dtype(dtype: Any = None) -> type[np.floating]:
    """Return dtype as a numpy floating type, or the configured default if None."""
    if dtype is None:
        return get_default_dtype()
    return np.dtype(dtype).type


def to_precision(value: Any, dtype: Any = None) -> Any:
    """Cast a scalar or array to the working precision.

    Scalars come back as numpy scalars, sequences as arrays.
    """
    return np.asarray(value, dtype=resolve_dtype(dtype))[()]


@lru_cache(maxsize=None)
def _conversion_factors(dtype: type[np.floating]) -> tuple[np.floating, np.floating]:
    """Return (D2R, R2D) computed from pi at the given precision."""
    pi = dtype(4.0) * np.arctan(dtype(1.0))
    half_circle = dtype(HALF_CIRCLE_DEGREES)
    return pi / half_circle, half_circle / pi


def normalize_degrees(value: Any, dtype: Any = None) -> Any:
    """Reduce an angle in degrees to [0, 360) using a floored modulo.

    Parameters:
        value: Angle (scalar or array) in degrees.
        dtype: Working precision; None uses the configured default.

    Returns:
        Reduced angle at the working precision.
    """
    dtype = resolve_dtype(dtype)
    full = dtype(DEGREES_PER_CIRCLE)
    reduced = np.mod(to_precision(value, dtype), full)
    # Tiny negative inputs round up to exactly 360.
    return np.where(reduced >= full, reduced - full, reduced)[()]


def sin_d(value: Any, dtype: Any = None) -> Any:
    """Sine of an angle in degrees, scaled back to the degree scale.

    The angle is reduced modulo 360 before conversion, so unbounded inputs
    (e.g. rotation accumulated over millennia) lose no precision in the
    native range reduction. The result is sin(x) * 180/pi.

    Parameters:
        value: Angle (scalar or array) in degrees.
        dtype: Working precision; None uses the configured default.

    Returns:
        sin(x) expressed in degrees, at the working precision.
    """
    dtype = resolve_dtype(dtype)
    d2r, r2d = _conversion_factors(dtype)
    reduced = np.mod(to_precision(value, dtype), dtype(DEGREES_PER_CIRCLE))
    return np.sin(reduced * d2r) * r2d


def cos_d(value: Any, dtype: Any = None) -> Any:
    """Cosine of an angle in degrees, scaled back to the degree scale (see sin_d)."""
    dtype = resolve_dtype(dtype)
    d2r, r2d = _conversion_factors(dtype)
    reduced = np.mod(to_precision(value, dtype), dtype(DEGREES_PER_CIRCLE))
    return np.cos(reduced * d2r) * r2d


def dms_string(value: float, separator: str = 'dms', ndecimal: int = 3) -> str:
    """Format an angle as degrees, minutes and seconds.

    Parameters:
        value: Angle in degrees.
        separator: 3-character string for separators (e.g. 'dms' or ':: ').
        ndecimal: Decimal places for seconds.

    Returns:
        Formatted string (e.g. "-15d 10m 30.000s").
    """
    if len(separator) < 3:
        sep_deg = sep_min = sep_sec = ' '
    else:
        sep_deg, sep_min, sep_sec = separator[0], separator[1], separator[2]
    scale = 10**ndecimal
    ticks = round(abs(float(value)) * 3600.0 * scale)
    whole_secs, frac = divmod(ticks, scale)
    whole_mins, secs = divmod(whole_secs, 60)
    degs, mins = divmod(whole_mins, 60)
    sign = '-' if value < 0 and ticks > 0 else ''
    frac_str = f'.{frac:0{ndecimal}d}' if ndecimal > 0 else ''
    return f'{sign}{degs}{sep_deg} {mins:02d}{sep_min} {secs:02d}{frac_str}{sep_sec}'.rstrip()
