"""Body dispatch: select a WGCCRE model by name and convert to the VSOP87 frame."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from orientation_tools.frames import axial_tilt, to_vsop87
from orientation_tools.reports import BodyModel, Triple, get_body_model

logger = logging.getLogger(__name__)


class UnsupportedBodyError(ValueError):
    """Requested body identifier is not one of the supported bodies."""

    def __init__(self, name: object) -> None:
        self.name = name
        supported = ', '.join(body.value for body in Body)
        super().__init__(f'Unsupported body {name!r}; expected one of {supported}')


class Body(Enum):
    """Supported bodies; values are the exact, case-sensitive identifiers."""

    SOL = 'Sol'
    MERCURY = 'Mercury'
    VENUS = 'Venus'
    EARTH = 'Earth'
    MOON = 'Moon'
    MARS = 'Mars'
    JUPITER = 'Jupiter'
    SATURN = 'Saturn'
    URANUS = 'Uranus'
    NEPTUNE = 'Neptune'


# Dispatch goes through the report registry.
_FORMULAS: dict[Body, BodyModel] = {body: get_body_model(body.value) for body in Body}


def parse_body(name: str | Body) -> Body:
    """Return the Body for an identifier (exact match, no aliases).

    Parameters:
        name: Body member or identifier such as 'Saturn'.

    Returns:
        Matching Body.

    Raises:
        UnsupportedBodyError: If name is not a supported identifier.
    """
    if isinstance(name, Body):
        return name
    if not isinstance(name, str):
        raise UnsupportedBodyError(name)
    try:
        return Body(name)
    except ValueError:
        raise UnsupportedBodyError(name) from None


def body_model(name: str | Body) -> BodyModel:
    """Return the coefficient model used for a body.

    Raises:
        UnsupportedBodyError: If name is not a supported identifier.
    """
    return _FORMULAS[parse_body(name)]


def raw_orientation(name: str | Body, elapsed_time: Any, *, dtype: Any = None) -> Triple:
    """Return the body's (alpha, delta, W) in its report's native convention.

    Parameters:
        name: Body identifier (e.g. 'Mars').
        elapsed_time: Julian millennia since the reference epoch (scalar or array).
        dtype: Working precision; None uses the configured default.

    Returns:
        Tuple (alpha, delta, W) in degrees.

    Raises:
        UnsupportedBodyError: If name is not a supported identifier.
    """
    model = body_model(name)
    logger.debug('Evaluating %s orientation (%s) at T=%s', model.name, model.report, elapsed_time)
    return model.evaluate(elapsed_time, dtype)


def orientation(name: str | Body, elapsed_time: Any, *, dtype: Any = None) -> Triple:
    """Return the body's orientation in the VSOP87 frame convention.

    Selects the WGCCRE 2015 or 2009 model for the body, evaluates it at
    elapsed_time Julian millennia and passes the result through to_vsop87.

    Parameters:
        name: Body identifier, one of Sol, Mercury, Venus, Earth, Moon, Mars,
            Jupiter, Saturn, Uranus, Neptune (case-sensitive).
        elapsed_time: Julian millennia since the reference epoch (scalar or array).
        dtype: Working precision; None uses the configured default.

    Returns:
        Tuple of three angles in degrees; the first two are in [0, 360) and
        the third is always 0.

    Raises:
        UnsupportedBodyError: If name is not a supported identifier.
    """
    return to_vsop87(raw_orientation(name, elapsed_time, dtype=dtype), dtype)


__all__ = [
    'Body',
    'UnsupportedBodyError',
    'axial_tilt',
    'body_model',
    'orientation',
    'parse_body',
    'raw_orientation',
]
