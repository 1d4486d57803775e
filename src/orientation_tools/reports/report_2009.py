"""Orientation models from the 2009 WGCCRE report (Archinal et al. 2011).

Earth and the Moon keep their 2009 expressions; the Moon model carries
thirteen arguments E1..E13 (linear in d) and a secular d**2 term on W.
"""

from __future__ import annotations

from typing import Any

from orientation_tools.constants import REPORT_2009
from orientation_tools.reports.base import (
    AngleExpression,
    Argument,
    BodyModel,
    PeriodicTerm,
    TimeUnit,
    Triple,
)

DAYS = TimeUnit.DAYS

EARTH = BodyModel(
    name='Earth',
    report=REPORT_2009,
    ra=AngleExpression(0.00, -0.641),
    dec=AngleExpression(90.00, -0.557),
    w=AngleExpression(190.147, 360.9856235, DAYS),
)

E1 = Argument(125.045, -0.0529921, DAYS)
E2 = Argument(250.089, -0.1059842, DAYS)
E3 = Argument(260.008, 13.0120009, DAYS)
E4 = Argument(176.625, 13.3407154, DAYS)
E5 = Argument(357.529, 0.9856003, DAYS)
E6 = Argument(311.589, 26.4057084, DAYS)
E7 = Argument(134.963, 13.0649930, DAYS)
E8 = Argument(276.617, 0.3287146, DAYS)
E9 = Argument(34.226, 1.7484877, DAYS)
E10 = Argument(15.134, -0.1589763, DAYS)
E11 = Argument(119.743, 0.0036096, DAYS)
E12 = Argument(239.961, 0.1643573, DAYS)
E13 = Argument(25.053, 12.9590088, DAYS)

MOON_ARGUMENTS = (E1, E2, E3, E4, E5, E6, E7, E8, E9, E10, E11, E12, E13)

MOON = BodyModel(
    name='Moon',
    report=REPORT_2009,
    ra=AngleExpression(
        269.9949,
        0.0031,
        terms=(
            PeriodicTerm(-3.8787, 'sin', E1),
            PeriodicTerm(-0.1204, 'sin', E2),
            PeriodicTerm(0.0700, 'sin', E3),
            PeriodicTerm(-0.0172, 'sin', E4),
            PeriodicTerm(0.0072, 'sin', E6),
            PeriodicTerm(-0.0052, 'sin', E10),
            PeriodicTerm(0.0043, 'sin', E13),
        ),
    ),
    dec=AngleExpression(
        66.5392,
        0.0130,
        terms=(
            PeriodicTerm(1.5419, 'cos', E1),
            PeriodicTerm(0.0239, 'cos', E2),
            PeriodicTerm(-0.0278, 'cos', E3),
            PeriodicTerm(0.0068, 'cos', E4),
            PeriodicTerm(-0.0029, 'cos', E6),
            PeriodicTerm(0.0009, 'cos', E7),
            PeriodicTerm(0.0008, 'cos', E10),
            PeriodicTerm(-0.0009, 'cos', E13),
        ),
    ),
    w=AngleExpression(
        38.3213,
        13.17635815,
        DAYS,
        quadratic=-1.4e-12,
        terms=(
            PeriodicTerm(3.5610, 'sin', E1),
            PeriodicTerm(0.1208, 'sin', E2),
            PeriodicTerm(-0.0642, 'sin', E3),
            PeriodicTerm(0.0158, 'sin', E4),
            PeriodicTerm(0.0252, 'sin', E5),
            PeriodicTerm(-0.0066, 'sin', E6),
            PeriodicTerm(-0.0047, 'sin', E7),
            PeriodicTerm(-0.0046, 'sin', E8),
            PeriodicTerm(0.0028, 'sin', E9),
            PeriodicTerm(0.0052, 'sin', E10),
            PeriodicTerm(0.0040, 'sin', E11),
            PeriodicTerm(0.0019, 'sin', E12),
            PeriodicTerm(-0.0044, 'sin', E13),
        ),
    ),
)

MODELS: tuple[BodyModel, ...] = (EARTH, MOON)


def earth(t: Any, dtype: Any = None) -> Triple:
    """Raw (alpha, delta, W) of the Earth at t Julian millennia."""
    return EARTH.evaluate(t, dtype)


def moon(t: Any, dtype: Any = None) -> Triple:
    """Raw (alpha, delta, W) of the Moon, including the secular d**2 drift on W."""
    return MOON.evaluate(t, dtype)
