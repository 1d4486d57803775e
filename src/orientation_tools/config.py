"""Configuration: working precision and leap-seconds path from environment."""

from __future__ import annotations

import logging
import os

import numpy as np

logger = logging.getLogger(__name__)

# Env var overrides with sensible defaults.
DEFAULT_DTYPE_NAME = 'float64'

_DTYPES: dict[str, type[np.floating]] = {
    'float32': np.float32,
    'single': np.float32,
    'float64': np.float64,
    'double': np.float64,
    'longdouble': np.longdouble,
}


def dtype_from_name(name: str) -> type[np.floating]:
    """Return the numpy floating type for a precision name.

    Parameters:
        name: One of 'float32'/'single', 'float64'/'double', 'longdouble'
            (case-insensitive).

    Returns:
        numpy floating scalar type.

    Raises:
        ValueError: If name is not a supported precision.
    """
    key = name.strip().lower()
    if key not in _DTYPES:
        raise ValueError(
            f'Invalid precision {name!r}; expected one of {", ".join(sorted(_DTYPES))}'
        )
    return _DTYPES[key]


def get_default_dtype() -> type[np.floating]:
    """Return working precision (ORIENTATION_TOOLS_DTYPE env var or float64).

    Unknown names are logged and ignored.

    Returns:
        numpy floating scalar type.
    """
    name = os.environ.get('ORIENTATION_TOOLS_DTYPE', '').strip()
    if not name:
        return _DTYPES[DEFAULT_DTYPE_NAME]
    try:
        return dtype_from_name(name)
    except ValueError:
        logger.warning(
            'Ignoring ORIENTATION_TOOLS_DTYPE=%r; using %s', name, DEFAULT_DTYPE_NAME
        )
        return _DTYPES[DEFAULT_DTYPE_NAME]


def get_leapsecs_path() -> str | None:
    """Return path to a NAIF LSK leap seconds file for rms-julian.

    Returns:
        JULIAN_LEAPSECS value, or None to use the LSK bundled with rms-julian.
    """
    path = os.environ.get('JULIAN_LEAPSECS', '').strip()
    return path or None
