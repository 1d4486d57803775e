"""Orientation models from the 2015 WGCCRE report (Archinal et al. 2018).

T is elapsed Julian millennia, d = T * 365250 elapsed days. Angles in degrees.
"""

from __future__ import annotations

from typing import Any

from orientation_tools.constants import REPORT_2015
from orientation_tools.reports.base import (
    AngleExpression,
    Argument,
    BodyModel,
    PeriodicTerm,
    TimeUnit,
    Triple,
)

DAYS = TimeUnit.DAYS

SOL = BodyModel(
    name='Sol',
    report=REPORT_2015,
    ra=AngleExpression(286.13),
    dec=AngleExpression(63.87),
    w=AngleExpression(84.176, 14.1844000, DAYS),
)

# Mercury libration arguments (rates in d)
M1 = Argument(174.7910857, 4.092335, DAYS)
M2 = Argument(349.5821714, 8.184670, DAYS)
M3 = Argument(164.3732571, 12.277005, DAYS)
M4 = Argument(339.1643429, 16.369340, DAYS)
M5 = Argument(153.9554286, 20.461675, DAYS)

MERCURY = BodyModel(
    name='Mercury',
    report=REPORT_2015,
    ra=AngleExpression(281.0103, -0.0328),
    dec=AngleExpression(61.4155, -0.0049),
    w=AngleExpression(
        329.5988,
        6.1385108,  # (+/- 0.0037)
        DAYS,
        terms=(
            PeriodicTerm(0.01067257, 'sin', M1),
            PeriodicTerm(-0.00112309, 'sin', M2),
            PeriodicTerm(-0.00011040, 'sin', M3),
            PeriodicTerm(-0.00002539, 'sin', M4),
            PeriodicTerm(-0.00000571, 'sin', M5),
        ),
    ),
)

VENUS = BodyModel(
    name='Venus',
    report=REPORT_2015,
    ra=AngleExpression(272.76),
    dec=AngleExpression(67.16),
    w=AngleExpression(160.20, -1.4813688, DAYS),
)

# Mars: alpha, delta and W each carry their own argument set (rates in T).
MARS = BodyModel(
    name='Mars',
    report=REPORT_2015,
    ra=AngleExpression(
        317.269202,
        -0.10927547,
        terms=(
            PeriodicTerm(0.000068, 'sin', Argument(198.991226, 19139.4819985)),
            PeriodicTerm(0.000238, 'sin', Argument(226.292679, 38280.8511281)),
            PeriodicTerm(0.000052, 'sin', Argument(249.663391, 57420.7251593)),
            PeriodicTerm(0.000009, 'sin', Argument(266.183510, 76560.6367950)),
            PeriodicTerm(0.419057, 'sin', Argument(79.398797, 0.5042615)),
        ),
    ),
    dec=AngleExpression(
        54.432516,
        -0.05827105,
        terms=(
            PeriodicTerm(0.000051, 'cos', Argument(122.433576, 19139.9407476)),
            PeriodicTerm(0.000141, 'cos', Argument(43.058401, 38280.8753272)),
            PeriodicTerm(0.000031, 'cos', Argument(57.663379, 57420.7517205)),
            PeriodicTerm(0.000005, 'cos', Argument(79.476401, 76560.6495004)),
            PeriodicTerm(1.591274, 'cos', Argument(166.325722, 0.5042615)),
        ),
    ),
    w=AngleExpression(
        176.049863,
        350.891982443297,
        DAYS,
        terms=(
            PeriodicTerm(0.000145, 'sin', Argument(129.071773, 19140.0328244)),
            PeriodicTerm(0.000157, 'sin', Argument(36.352167, 38281.0473591)),
            PeriodicTerm(0.000040, 'sin', Argument(56.668646, 57420.9295360)),
            PeriodicTerm(0.000001, 'sin', Argument(67.364003, 76560.2552215)),
            PeriodicTerm(0.000001, 'sin', Argument(104.792680, 95700.4387578)),
            PeriodicTerm(0.584542, 'sin', Argument(95.391654, 0.5042615)),
        ),
    ),
)

# Jupiter nutation/precession arguments (rates in T)
JA = Argument(99.360714, 4850.4046)
JB = Argument(175.895369, 1191.9605)
JC = Argument(300.323162, 262.5475)
JD = Argument(114.012305, 6070.2476)
JE = Argument(49.511251, 64.3000)

JUPITER = BodyModel(
    name='Jupiter',
    report=REPORT_2015,
    ra=AngleExpression(
        268.056595,
        -0.006499,
        terms=(
            PeriodicTerm(0.000117, 'sin', JA),
            PeriodicTerm(0.000938, 'sin', JB),
            PeriodicTerm(0.001432, 'sin', JC),
            PeriodicTerm(0.000030, 'sin', JD),
            PeriodicTerm(0.002150, 'sin', JE),
        ),
    ),
    dec=AngleExpression(
        64.495303,
        0.002413,
        terms=(
            PeriodicTerm(0.000050, 'cos', JA),
            PeriodicTerm(0.000404, 'cos', JB),
            PeriodicTerm(0.000617, 'cos', JC),
            PeriodicTerm(-0.000013, 'cos', JD),
            PeriodicTerm(0.000926, 'cos', JE),
        ),
    ),
    w=AngleExpression(284.95, 870.5360000, DAYS),
)

SATURN = BodyModel(
    name='Saturn',
    report=REPORT_2015,
    ra=AngleExpression(40.589, -0.036),
    dec=AngleExpression(83.537, -0.004),
    w=AngleExpression(38.90, 810.7939024, DAYS),
)

URANUS = BodyModel(
    name='Uranus',
    report=REPORT_2015,
    ra=AngleExpression(257.311),
    dec=AngleExpression(-15.175),
    w=AngleExpression(203.81, -501.1600928, DAYS),
)

N = Argument(357.85, 52.316)

NEPTUNE = BodyModel(
    name='Neptune',
    report=REPORT_2015,
    ra=AngleExpression(299.36, terms=(PeriodicTerm(0.70, 'sin', N),)),
    dec=AngleExpression(43.46, terms=(PeriodicTerm(-0.51, 'cos', N),)),
    w=AngleExpression(249.978, 541.1397757, DAYS, terms=(PeriodicTerm(-0.48, 'sin', N),)),
)

MODELS: tuple[BodyModel, ...] = (SOL, MERCURY, VENUS, MARS, JUPITER, SATURN, URANUS, NEPTUNE)


def sol(t: Any, dtype: Any = None) -> Triple:
    """Raw (alpha, delta, W) of the Sun at t Julian millennia."""
    return SOL.evaluate(t, dtype)


def mercury(t: Any, dtype: Any = None) -> Triple:
    """Raw (alpha, delta, W) of Mercury, with five libration terms on W."""
    return MERCURY.evaluate(t, dtype)


def venus(t: Any, dtype: Any = None) -> Triple:
    """Raw (alpha, delta, W) of Venus (retrograde rotation)."""
    return VENUS.evaluate(t, dtype)


def mars(t: Any, dtype: Any = None) -> Triple:
    """Raw (alpha, delta, W) of Mars."""
    return MARS.evaluate(t, dtype)


def jupiter(t: Any, dtype: Any = None) -> Triple:
    """Raw (alpha, delta, W) of Jupiter (System III meridian)."""
    return JUPITER.evaluate(t, dtype)


def saturn(t: Any, dtype: Any = None) -> Triple:
    """Raw (alpha, delta, W) of Saturn (System III meridian)."""
    return SATURN.evaluate(t, dtype)


def uranus(t: Any, dtype: Any = None) -> Triple:
    """Raw (alpha, delta, W) of Uranus (retrograde rotation, no periodic terms)."""
    return URANUS.evaluate(t, dtype)


def neptune(t: Any, dtype: Any = None) -> Triple:
    """Raw (alpha, delta, W) of Neptune."""
    return NEPTUNE.evaluate(t, dtype)
