"""Ancillary functions shared by several projections and latitude conversions."""

from __future__ import annotations

import math
import sys
from typing import Sequence

__all__ = [
    "gudermannian_fwd",
    "gudermannian_inv",
    "ts",
    "pj_msfn",
    "pj_phi2",
    "qs",
    "sinhpsi_to_tanphi",
]

_ROOTEPS = math.sqrt(sys.float_info.epsilon)
# The criterion for Newton's method
_TOL = _ROOTEPS / 10.0
# Threshold for the large argument limit to be exact
_TMAX = 2.0 / _ROOTEPS
_MAX_ITER = 5


def _atanh(x: float) -> float:
    if x == 1.0:
        return math.inf
    if x == -1.0:
        return -math.inf
    if abs(x) > 1.0:
        return math.nan
    return math.atanh(x)


def _exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def _sinh(x: float) -> float:
    try:
        return math.sinh(x)
    except OverflowError:
        return math.copysign(math.inf, x)


def _log(x: float) -> float:
    if x == 0.0:
        return -math.inf
    if x < 0.0:
        return math.nan
    return math.log(x)


def _div(num: float, den: float) -> float:
    if den == 0.0:
        if num == 0.0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


def gudermannian_fwd(arg: float) -> float:
    """The Gudermannian function, gd(x) = atan(sinh(x))."""
    return math.atan(_sinh(arg))


def gudermannian_inv(arg: float) -> float:
    """The inverse Gudermannian function, asinh(tan(x))."""
    return math.asinh(math.tan(arg))


def ts(sincos: Sequence[float], e: float) -> float:
    """Return exp(-psi), psi being the isometric latitude.

    ``sincos`` holds (sin(phi), cos(phi)) of the geographic latitude and
    ``e`` is the eccentricity of the ellipsoid.
    """
    sin_phi, cos_phi = sincos[0], sincos[1]
    if sin_phi > 0.0:
        factor = cos_phi / (1.0 + sin_phi)
    else:
        factor = _div(1.0 - sin_phi, cos_phi)
    return _exp(e * _atanh(e * sin_phi)) * factor


def pj_msfn(sincos: Sequence[float], es: float) -> float:
    """Snyder (1982) eq. 12-15."""
    sin_phi, cos_phi = sincos[0], sincos[1]
    return cos_phi / math.sqrt(1.0 - sin_phi * sin_phi * es)


def pj_phi2(ts0: float, e: float) -> float:
    """Recover the geographic latitude from ts = exp(-psi)."""
    return math.atan(sinhpsi_to_tanphi((_div(1.0, ts0) - ts0) / 2.0, e))


def qs(sinphi: float, e: float) -> float:
    """The q function of the authalic latitude computations."""
    es = e * e
    one_es = 1.0 - es

    if e < 1e-7:
        return 2.0 * sinphi

    con = e * sinphi
    div1 = 1.0 - con * con
    div2 = 1.0 + con

    return one_es * (_div(sinphi, div1) - (0.5 / e) * _log(_div(1.0 - con, div2)))


def sinhpsi_to_tanphi(taup: float, e: float) -> float:
    """Compute tan(phi) from sinh(psi), psi being the isometric latitude.

    Newton iteration; returns NaN if it fails to converge.
    """
    e2m = 1.0 - e * e
    stol = _TOL * max(abs(taup), 1.0)

    # The initial guess. 70 corresponds to chi = 89.18 deg
    if abs(taup) > 70.0:
        tau = taup * _exp(e * _atanh(e))
    else:
        tau = _div(taup, e2m)

    # Handle +/-inf, nan, and e = 1
    if math.isnan(tau) or abs(tau) >= _TMAX:
        return tau

    for _ in range(_MAX_ITER):
        tau1 = math.sqrt(1.0 + tau * tau)
        sig = _sinh(e * _atanh(e * tau / tau1))
        taupa = math.sqrt(1.0 + sig * sig) * tau - sig * tau1
        dtau = (
            (taup - taupa)
            * (1.0 + e2m * (tau * tau))
            / (e2m * tau1 * math.sqrt(1.0 + taupa * taupa))
        )
        tau += dtau

        if abs(dtau) < stol or math.isnan(tau):
            return tau
    return math.nan