"""Tests for the WGCCRE 2015 and 2009 coefficient tables."""

from __future__ import annotations

import dataclasses
import math

import numpy as np
import pytest

from orientation_tools.constants import BODY_NAMES, REPORT_2009, REPORT_2015
from orientation_tools.reports import (
    get_body_model,
    iter_body_models,
    report_2009,
    report_2015,
    report_for,
)


def _sin_d(x: float) -> float:
    return math.sin(math.radians(x % 360.0)) * 180.0 / math.pi


def _cos_d(x: float) -> float:
    return math.cos(math.radians(x % 360.0)) * 180.0 / math.pi


@pytest.mark.parametrize(
    ('func', 'expected'),
    [
        (report_2015.sol, (286.13, 63.87, 84.176)),
        (report_2015.saturn, (40.589, 83.537, 38.90)),
        (report_2015.uranus, (257.311, -15.175, 203.81)),
        (report_2015.venus, (272.76, 67.16, 160.20)),
        (report_2009.earth, (0.00, 90.00, 190.147)),
    ],
)
def test_reference_values_at_epoch(func, expected) -> None:  # type: ignore[no-untyped-def]
    """Polynomial-only bodies return their constant terms at T=0."""
    result = func(0.0, np.float64)
    assert tuple(float(v) for v in result) == pytest.approx(expected)


def test_linear_terms_use_millennia_and_days() -> None:
    """Pole rates multiply T; prime-meridian rates multiply d = T * 365250."""
    ra, dec, w = report_2015.saturn(1.0, np.float64)
    assert ra == pytest.approx(40.589 - 0.036)
    assert dec == pytest.approx(83.537 - 0.004)
    assert w == pytest.approx(38.90 + 810.7939024 * 365250.0)

    ra, dec, w = report_2009.earth(-0.5, np.float64)
    assert ra == pytest.approx(0.641 * 0.5)
    assert dec == pytest.approx(90.0 + 0.557 * 0.5)
    assert w == pytest.approx(190.147 - 360.9856235 * 182625.0)


def test_uranus_and_venus_rotate_retrograde() -> None:
    """Negative W rates for Venus and Uranus."""
    assert report_2015.uranus(0.001, np.float64)[2] < 203.81
    assert report_2015.venus(0.001, np.float64)[2] < 160.20


def test_mercury_libration_terms_at_epoch() -> None:
    """Mercury W adds five sin terms in M1..M5 at T=0."""
    expected = (
        329.5988
        + 0.01067257 * _sin_d(174.7910857)
        - 0.00112309 * _sin_d(349.5821714)
        - 0.00011040 * _sin_d(164.3732571)
        - 0.00002539 * _sin_d(339.1643429)
        - 0.00000571 * _sin_d(153.9554286)
    )
    ra, dec, w = report_2015.mercury(0.0, np.float64)
    assert (ra, dec) == pytest.approx((281.0103, 61.4155))
    assert w == pytest.approx(expected, abs=1e-10)
    assert len(report_2015.MERCURY.w.terms) == 5
    assert not report_2015.MERCURY.ra.terms
    assert not report_2015.MERCURY.dec.terms


def test_neptune_shares_one_argument_across_angles() -> None:
    """Neptune's N feeds alpha (sin), delta (cos) and W (sin)."""
    t = 0.02
    n = 357.85 + 52.316 * t
    ra, dec, w = report_2015.neptune(t, np.float64)
    assert ra == pytest.approx(299.36 + 0.70 * _sin_d(n), abs=1e-9)
    assert dec == pytest.approx(43.46 - 0.51 * _cos_d(n), abs=1e-9)
    assert w == pytest.approx(249.978 + 541.1397757 * t * 365250.0 - 0.48 * _sin_d(n), rel=1e-12)


def test_jupiter_uses_shared_arguments_with_distinct_amplitudes() -> None:
    """Ja..Je feed both alpha and delta; amplitudes differ per angle."""
    model = report_2015.JUPITER
    ra_args = [term.argument for term in model.ra.terms]
    dec_args = [term.argument for term in model.dec.terms]
    assert ra_args == dec_args == [
        report_2015.JA,
        report_2015.JB,
        report_2015.JC,
        report_2015.JD,
        report_2015.JE,
    ]
    assert [t.amplitude for t in model.ra.terms] != [t.amplitude for t in model.dec.terms]
    assert all(t.function == 'sin' for t in model.ra.terms)
    assert all(t.function == 'cos' for t in model.dec.terms)
    assert not model.w.terms


def test_mars_angles_have_independent_arguments() -> None:
    """Mars alpha, delta and W each evaluate their own argument set."""
    model = report_2015.MARS
    ra_args = {term.argument for term in model.ra.terms}
    dec_args = {term.argument for term in model.dec.terms}
    w_args = {term.argument for term in model.w.terms}
    assert len(ra_args) == 5
    assert len(dec_args) == 5
    assert len(w_args) == 6
    assert ra_args.isdisjoint(dec_args)
    assert ra_args.isdisjoint(w_args)
    assert dec_args.isdisjoint(w_args)


def test_mars_at_epoch() -> None:
    """Mars alpha at T=0 is the base plus every sin term in order."""
    expected = (
        317.269202
        + 0.000068 * _sin_d(198.991226)
        + 0.000238 * _sin_d(226.292679)
        + 0.000052 * _sin_d(249.663391)
        + 0.000009 * _sin_d(266.183510)
        + 0.419057 * _sin_d(79.398797)
    )
    assert report_2015.mars(0.0, np.float64)[0] == pytest.approx(expected, abs=1e-10)


def test_moon_argument_subsets() -> None:
    """Moon alpha, delta and W use differing subsets of E1..E13."""
    e = report_2009.MOON_ARGUMENTS
    model = report_2009.MOON
    assert [t.argument for t in model.ra.terms] == [e[0], e[1], e[2], e[3], e[5], e[9], e[12]]
    assert [t.argument for t in model.dec.terms] == [
        e[0], e[1], e[2], e[3], e[5], e[6], e[9], e[12],
    ]
    assert [t.argument for t in model.w.terms] == list(e)


def test_moon_secular_quadratic_term() -> None:
    """Moon W carries -1.4e-12 * d**2."""
    t = 1.0
    d = 365250.0
    no_drift_w = dataclasses.replace(report_2009.MOON.w, quadratic=0.0)
    without = dataclasses.replace(report_2009.MOON, w=no_drift_w)
    drift = report_2009.MOON.evaluate(t, np.float64)[2] - without.evaluate(t, np.float64)[2]
    assert drift == pytest.approx(-1.4e-12 * d * d, rel=1e-6)
    assert drift < 0


def test_moon_at_epoch() -> None:
    """Moon alpha at T=0 matches a direct evaluation of the 2009 expression."""
    expected = (
        269.9949
        - 3.8787 * _sin_d(125.045)
        - 0.1204 * _sin_d(250.089)
        + 0.0700 * _sin_d(260.008)
        - 0.0172 * _sin_d(176.625)
        + 0.0072 * _sin_d(311.589)
        - 0.0052 * _sin_d(15.134)
        + 0.0043 * _sin_d(25.053)
    )
    assert report_2009.moon(0.0, np.float64)[0] == pytest.approx(expected, abs=1e-10)


def test_vectorized_evaluation_matches_scalar() -> None:
    """Arrays of elapsed time evaluate elementwise."""
    times = np.array([0.0, 0.01, -0.2])
    ra, dec, w = report_2015.MARS.evaluate(times, np.float64)
    assert ra.shape == dec.shape == w.shape == (3,)
    for i, t in enumerate(times):
        scalar = report_2015.MARS.evaluate(float(t), np.float64)
        assert (ra[i], dec[i], w[i]) == pytest.approx(scalar, rel=1e-14)


def test_single_precision_evaluation() -> None:
    """float32 evaluation stays float32 and agrees with float64 to single precision."""
    single = report_2015.JUPITER.evaluate(0.0, np.float32)
    double = report_2015.JUPITER.evaluate(0.0, np.float64)
    for s, d in zip(single, double):
        assert s.dtype == np.float32
        assert float(s) == pytest.approx(float(d), rel=1e-6)


def test_registry_covers_every_body() -> None:
    """Every supported name resolves to a model of the same name and report."""
    names = [model.name for model in iter_body_models()]
    assert tuple(names) == BODY_NAMES
    for name in BODY_NAMES:
        assert get_body_model(name).name == name  # type: ignore[union-attr]
    assert report_for('Moon') == REPORT_2009
    assert report_for('Earth') == REPORT_2009
    assert report_for('Neptune') == REPORT_2015
    assert get_body_model('Pluto') is None
    assert get_body_model('saturn') is None
    assert report_for('') is None
