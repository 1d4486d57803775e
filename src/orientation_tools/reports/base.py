"""Coefficient-table dataclasses for WGCCRE orientation models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal

from orientation_tools.angle_utils import cos_d, resolve_dtype, sin_d, to_precision
from orientation_tools.constants import DAYS_PER_JULIAN_MILLENNIUM

# (alpha, delta, W) in degrees
Triple = tuple[Any, Any, Any]


class TimeUnit(Enum):
    """Time variable a rate multiplies: T (Julian millennia) or d (days)."""

    MILLENNIA = 'T'
    DAYS = 'd'


@dataclass(frozen=True)
class Argument:
    """Linear-in-time angle in degrees: offset + rate * T (or * d)."""

    offset: float
    rate: float
    unit: TimeUnit = TimeUnit.MILLENNIA

    def evaluate(self, t: Any, d: Any, dtype: type) -> Any:
        """Return the argument at elapsed millennia t / elapsed days d."""
        x = d if self.unit is TimeUnit.DAYS else t
        return dtype(self.offset) + dtype(self.rate) * x


@dataclass(frozen=True)
class PeriodicTerm:
    """amplitude * sin_d(argument) or amplitude * cos_d(argument).

    A negative amplitude is a subtracted term in the published expression.
    """

    amplitude: float
    function: Literal['sin', 'cos']
    argument: Argument

    def evaluate(self, t: Any, d: Any, dtype: type) -> Any:
        """Return the term's contribution in degrees."""
        trig = sin_d if self.function == 'sin' else cos_d
        return dtype(self.amplitude) * trig(self.argument.evaluate(t, d, dtype), dtype)


@dataclass(frozen=True)
class AngleExpression:
    """constant + rate * x + quadratic * d**2 + sum of periodic terms.

    Terms are added strictly left to right in published order; floating-point
    addition is not associative and reference digits depend on it.
    """

    constant: float
    rate: float = 0.0
    rate_unit: TimeUnit = TimeUnit.MILLENNIA
    quadratic: float = 0.0
    terms: tuple[PeriodicTerm, ...] = ()

    def evaluate(self, t: Any, d: Any, dtype: type) -> Any:
        """Return the angle in degrees at elapsed millennia t / elapsed days d."""
        x = d if self.rate_unit is TimeUnit.DAYS else t
        value = dtype(self.constant) + dtype(self.rate) * x
        if self.quadratic:
            value = value + dtype(self.quadratic) * (d * d)
        for term in self.terms:
            value = value + term.evaluate(t, d, dtype)
        return value


@dataclass(frozen=True)
class BodyModel:
    """Orientation model of one body: pole RA, pole declination, prime meridian."""

    name: str
    report: str
    ra: AngleExpression
    dec: AngleExpression
    w: AngleExpression

    def evaluate(self, elapsed_time: Any, dtype: Any = None) -> Triple:
        """Return the raw (alpha, delta, W) triple in degrees.

        Parameters:
            elapsed_time: Julian millennia since the reference epoch (scalar or array).
            dtype: Working precision; None uses the configured default.

        Returns:
            Tuple (alpha, delta, W) in the report's native convention.
        """
        dtype = resolve_dtype(dtype)
        t = to_precision(elapsed_time, dtype)
        d = t * dtype(DAYS_PER_JULIAN_MILLENNIUM)
        return (
            self.ra.evaluate(t, d, dtype),
            self.dec.evaluate(t, d, dtype),
            self.w.evaluate(t, d, dtype),
        )
