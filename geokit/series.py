"""Taylor polynomial and Fourier series evaluation (Horner and Clenshaw)."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

__all__ = [
    "POLYNOMIAL_ORDER",
    "PolynomialCoefficients",
    "FourierCoefficients",
    "horner",
    "fourier_coefficients",
    "fourier_sin",
    "fourier_cos",
    "complex_sin",
    "sin_optimized_for_tmerc",
    "complex_sin_optimized_for_tmerc",
]

POLYNOMIAL_ORDER = 6


def _zero_matrix() -> tuple[tuple[float, ...], ...]:
    return tuple((0.0,) * POLYNOMIAL_ORDER for _ in range(POLYNOMIAL_ORDER))


@dataclass(frozen=True)
class PolynomialCoefficients:
    """Two upper triangular matrices of polynomial coefficients."""

    fwd: tuple[tuple[float, ...], ...] = field(default_factory=_zero_matrix)
    inv: tuple[tuple[float, ...], ...] = field(default_factory=_zero_matrix)


@dataclass(frozen=True)
class FourierCoefficients:
    """Fourier coefficients, e.g. for auxiliary latitude computations."""

    fwd: tuple[float, ...] = (0.0,) * POLYNOMIAL_ORDER
    inv: tuple[float, ...] = (0.0,) * POLYNOMIAL_ORDER
    etc: tuple[float, ...] = (0.0, 0.0)


def horner(arg: float, coefficients: Sequence[float]) -> float:
    """Evaluate sum of c_i * arg**i using Horner's scheme."""
    if not coefficients:
        return 0.0
    reversed_coefficients = iter(reversed(coefficients))
    value = float(next(reversed_coefficients))
    for c in reversed_coefficients:
        value = value * arg + c
    return value


def fourier_coefficients(
    arg: float, coefficients: PolynomialCoefficients
) -> FourierCoefficients:
    """Compute Fourier coefficients by evaluating their Taylor polynomials."""
    fwd = tuple(arg * horner(arg, row) for row in coefficients.fwd[:POLYNOMIAL_ORDER])
    inv = tuple(arg * horner(arg, row) for row in coefficients.inv[:POLYNOMIAL_ORDER])
    return FourierCoefficients(fwd=fwd, inv=inv)


def _clenshaw(x: float, coefficients: Sequence[float]) -> tuple[float, float]:
    c0 = 0.0
    c1 = 0.0
    for c in reversed(coefficients):
        c1, c0 = c0, x * c0 + (c - c1)
    return c0, c1


def fourier_sin(arg: float, coefficients: Sequence[float]) -> float:
    """Evaluate sum of c_i * sin(i * arg) by Clenshaw summation."""
    c0, _ = _clenshaw(2.0 * math.cos(arg), coefficients)
    return math.sin(arg) * c0


def fourier_cos(arg: float, coefficients: Sequence[float]) -> float:
    """Evaluate sum of c_i * cos(i * arg) by Clenshaw summation."""
    cos_arg = math.cos(arg)
    c0, c1 = _clenshaw(2.0 * cos_arg, coefficients)
    return cos_arg * c0 - c1


def _complex_clenshaw(
    sin_r: float,
    cos_r: float,
    sinh_i: float,
    cosh_i: float,
    coefficients: Sequence[float],
) -> tuple[float, float]:
    r = 2.0 * cos_r * cosh_i
    i = -2.0 * sin_r * sinh_i
    reversed_coefficients = iter(reversed(coefficients))
    first = next(reversed_coefficients, None)
    if first is None:
        return (0.0, 0.0)

    hr1 = hi1 = 0.0
    hr, hi = float(first), 0.0
    for c in reversed_coefficients:
        hr2, hi2, hr1, hi1 = hr1, hi1, hr, hi
        hr = -hr2 + r * hr1 - i * hi1 + c
        hi = -hi2 + i * hr1 + r * hi1

    r = sin_r * cosh_i
    i = cos_r * sinh_i
    return (r * hr - i * hi, r * hi + i * hr)


def complex_sin(arg: Sequence[float], coefficients: Sequence[float]) -> tuple[float, float]:
    """Evaluate sum of c_i * sin(i * z) for complex z = arg[0] + j*arg[1]."""
    re, im = arg[0], arg[1]
    return _complex_clenshaw(
        math.sin(re), math.cos(re), math.sinh(im), math.cosh(im), coefficients
    )


def sin_optimized_for_tmerc(trig: Sequence[float], coefficients: Sequence[float]) -> float:
    """As fourier_sin, but taking precomputed (sin(arg), cos(arg))."""
    sin_arg, cos_arg = trig[0], trig[1]
    c0, _ = _clenshaw(2.0 * cos_arg, coefficients)
    return sin_arg * c0


def complex_sin_optimized_for_tmerc(
    trig: Sequence[float], hyp: Sequence[float], coefficients: Sequence[float]
) -> tuple[float, float]:
    """As complex_sin, but taking precomputed (sin, cos) and (sinh, cosh) factors."""
    return _complex_clenshaw(trig[0], trig[1], hyp[0], hyp[1], coefficients)