"""Swiss Oblique Mercator projection."""

from __future__ import annotations

import math
from typing import MutableSequence, Sequence

from geokit.core import Direction, GeodesyError

__all__ = ["SwissObliqueMercator"]

Coordinates = Sequence[MutableSequence[float]]

_GRS80_A = 6378137.0
_GRS80_F = 1.0 / 298.257222101
_FRAC_PI_2 = math.pi / 2
_FRAC_PI_4 = math.pi / 4
_EPS_10 = 1.0e-10
_MAX_ITERATIONS = 20


def _log(x: float) -> float:
    if x == 0.0:
        return -math.inf
    if x < 0.0 or math.isnan(x):
        return math.nan
    return math.log(x)


def _asin(x: float) -> float:
    if math.isnan(x) or abs(x) > 1.0:
        return math.nan
    return math.asin(x)


def _exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def _div(num: float, den: float) -> float:
    if den == 0.0:
        if num == 0.0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


class SwissObliqueMercator:
    """Swiss oblique Mercator projection of (longitude, latitude) in radians.

    Angular parameters are given in degrees.
    """

    def __init__(
        self,
        *,
        a: float = _GRS80_A,
        f: float = _GRS80_F,
        lat_0: float = 0.0,
        lon_0: float = 0.0,
        x_0: float = 0.0,
        y_0: float = 0.0,
        k_0: float = 1.0,
    ) -> None:
        es = f * (2.0 - f)
        e = math.sqrt(es)
        hlf_e = 0.5 * e

        phi_0 = math.radians(lat_0)
        sin_phi_0, cos_phi_0 = math.sin(phi_0), math.cos(phi_0)

        c = math.sqrt(1.0 + es * cos_phi_0**4 / (1.0 - es))
        sin_phi_0_p = sin_phi_0 / c
        phi_0_p = math.asin(sin_phi_0_p)
        cos_phi_0_p = math.cos(phi_0_p)

        radius = k_0 * a * math.sqrt(1.0 - es) / (1.0 - es * sin_phi_0**2)

        k1 = _log(math.tan(_FRAC_PI_4 + 0.5 * math.asin(sin_phi_0 / c)))
        k2 = _log(math.tan(_FRAC_PI_4 + 0.5 * phi_0))
        k3 = _log((1.0 + e * sin_phi_0) / (1.0 - e * sin_phi_0))

        self.a = float(a)
        self.f = float(f)
        self.e = e
        self.lat_0 = phi_0
        self.lon_0 = math.radians(lon_0)
        self.x_0 = float(x_0)
        self.y_0 = float(y_0)
        self.k_0 = float(k_0)
        self.c = c
        self.K = k1 - c * k2 + c * hlf_e * k3
        self.R = radius
        self.sin_phi_0_p = sin_phi_0_p
        self.cos_phi_0_p = cos_phi_0_p

    def __repr__(self) -> str:
        return (
            f"SwissObliqueMercator(lat_0={math.degrees(self.lat_0)!r}, "
            f"lon_0={math.degrees(self.lon_0)!r}, x_0={self.x_0!r}, y_0={self.y_0!r})"
        )

    def apply(self, coords: Coordinates, direction: Direction) -> int:
        """Transform ``coords`` in place; return the number of successes.

        Raises GeodesyError if the inverse latitude iteration does not converge.
        """
        if direction is Direction.FWD:
            return self._forward(coords)
        return self._inverse(coords)

    def _forward(self, coords: Coordinates) -> int:
        e = self.e
        hlf_e = 0.5 * e
        c, k, r = self.c, self.K, self.R
        successes = 0
        for coord in coords:
            lam, phi = coord[0], coord[1]
            sp = e * math.sin(phi)
            exponent = (
                c * (_log(math.tan(_FRAC_PI_4 + 0.5 * phi)) - hlf_e * _log((1.0 + sp) / (1.0 - sp)))
                + k
            )
            phi_p = 2.0 * math.atan(_exp(exponent)) - _FRAC_PI_2

            lam_p = c * (lam - self.lon_0)
            sin_lam_p, cos_lam_p = math.sin(lam_p), math.cos(lam_p)
            sin_phi_p, cos_phi_p = math.sin(phi_p), math.cos(phi_p)

            phi_pp = _asin(
                self.cos_phi_0_p * sin_phi_p - self.sin_phi_0_p * cos_phi_p * cos_lam_p
            )
            lam_pp = _asin(_div(cos_phi_p * sin_lam_p, math.cos(phi_pp)))

            coord[0] = r * lam_pp + self.x_0
            coord[1] = r * _log(math.tan(_FRAC_PI_4 + 0.5 * phi_pp)) + self.y_0
            successes += 1
        return successes

    def _inverse(self, coords: Coordinates) -> int:
        e = self.e
        c, k, r = self.c, self.K, self.R
        successes = 0
        for coord in coords:
            big_x = coord[0] - self.x_0
            big_y = coord[1] - self.y_0

            phi_pp = 2.0 * (math.atan(_exp(big_y / r)) - _FRAC_PI_4)
            lam_pp = big_x / r

            sin_phi_p = (
                self.cos_phi_0_p * math.sin(phi_pp)
                + self.sin_phi_0_p * math.cos(phi_pp) * math.cos(lam_pp)
            )
            phi_p = _asin(sin_phi_p)
            sin_lam_p = _div(math.cos(phi_pp) * math.sin(lam_pp), math.cos(phi_p))
            lam_p = _asin(sin_lam_p)

            big_c = (k - _log(math.tan(_FRAC_PI_4 + 0.5 * phi_p))) / c
            lam = lam_p / c + self.lon_0

            phi = phi_p
            prev_phi = phi_p
            for _ in range(_MAX_ITERATIONS):
                if abs(phi - prev_phi) < _EPS_10:
                    break
                s = big_c + e * _log(
                    math.tan(_FRAC_PI_4 + _asin(e * math.sin(phi)) / 2.0)
                )
                prev_phi = phi
                phi = 2.0 * math.atan(_exp(s)) - _FRAC_PI_2
            else:
                raise GeodesyError("somerc - inverse: Too many iterations")

            coord[0] = lam
            coord[1] = phi_p
            successes += 1
        return successes