"""Lambert Conformal Conic projection, one or two standard parallels."""

from __future__ import annotations

import math
from typing import MutableSequence, Sequence

from geokit.ancillary import pj_msfn, pj_phi2, ts
from geokit.core import Direction, GeodesyError

__all__ = ["LambertConformalConic"]

Coordinates = Sequence[MutableSequence[float]]

_EPS10 = 1e-10
_GRS80_A = 6378137.0
_GRS80_F = 1.0 / 298.257222101


def _powf(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except ValueError:
        return math.nan
    except OverflowError:
        return math.inf


def _sin_cos(angle: float) -> tuple[float, float]:
    return math.sin(angle), math.cos(angle)


def _set_nan(coord: MutableSequence[float]) -> None:
    for k in range(len(coord)):
        coord[k] = math.nan


class LambertConformalConic:
    """Lambert conformal conic projection of (longitude, latitude) in radians.

    Angular parameters are given in degrees. ``lat_2`` defaults to ``lat_1``
    (tangent case); a missing ``lat_0`` means the equator, or ``lat_1`` in
    the tangent case.
    """

    def __init__(
        self,
        *,
        a: float = _GRS80_A,
        f: float = _GRS80_F,
        lat_1: float = 0.0,
        lat_2: float = math.nan,
        lat_0: float = math.nan,
        lon_0: float = 0.0,
        k_0: float = 1.0,
        x_0: float = 0.0,
        y_0: float = 0.0,
    ) -> None:
        phi1 = math.radians(lat_1)
        phi2 = math.radians(lat_2)
        if math.isnan(phi2):
            phi2 = phi1

        lat_0_rad = math.radians(lat_0)
        if math.isnan(lat_0_rad):
            lat_0_rad = phi1 if abs(phi1 - phi2) < _EPS10 else 0.0

        es = f * (2.0 - f)
        e = math.sqrt(es)

        sc = _sin_cos(phi1)
        if abs(phi1 + phi2) < _EPS10:
            raise GeodesyError(
                "Lcc: Invalid value for lat_1 and lat_2: |lat_1 + lat_2| should be > 0"
            )
        if abs(sc[1]) < _EPS10 or abs(phi1) >= math.pi / 2:
            raise GeodesyError("Lcc: Invalid value for lat_1: |lat_1| should be < 90°")
        if abs(math.cos(phi2)) < _EPS10 or abs(phi2) >= math.pi / 2:
            raise GeodesyError("Lcc: Invalid value for lat_2: |lat_2| should be < 90°")

        n = sc[0]
        # Snyder (1982) eq. 12-15
        m1 = pj_msfn(sc, es)
        # Snyder (1982) eq. 7-10: exp(-psi)
        ml1 = ts(sc, e)

        # Secant case
        if abs(phi1 - phi2) >= _EPS10:
            sc2 = _sin_cos(phi2)
            n = math.log(m1 / pj_msfn(sc2, es))
            if n == 0.0:
                raise GeodesyError("Lcc: Invalid value for eccentricity")
            ml2 = ts(sc2, e)
            denom = math.log(ml1 / ml2)
            if denom == 0.0:
                raise GeodesyError("Lcc: Invalid value for eccentricity")
            n /= denom

        c = m1 * _powf(ml1, -n) / n
        rho0 = 0.0
        if abs(abs(lat_0_rad) - math.pi / 2) > _EPS10:
            rho0 = c * _powf(ts(_sin_cos(lat_0_rad), e), n)

        self.a = float(a)
        self.f = float(f)
        self.e = e
        self.es = es
        self.lat_1 = phi1
        self.lat_2 = phi2
        self.lat_0 = lat_0_rad
        self.lon_0 = math.radians(lon_0)
        self.k_0 = float(k_0)
        self.x_0 = float(x_0)
        self.y_0 = float(y_0)
        self.n = n
        self.c = c
        self.rho0 = rho0

    def __repr__(self) -> str:
        return (
            f"LambertConformalConic(lat_1={math.degrees(self.lat_1)!r}, "
            f"lat_2={math.degrees(self.lat_2)!r}, lat_0={math.degrees(self.lat_0)!r}, "
            f"lon_0={math.degrees(self.lon_0)!r})"
        )

    def apply(self, coords: Coordinates, direction: Direction) -> int:
        """Transform ``coords`` in place; return the number of successes."""
        if direction is Direction.FWD:
            return self._forward(coords)
        return self._inverse(coords)

    def _forward(self, coords: Coordinates) -> int:
        ak = self.a * self.k_0
        n = self.n
        successes = 0
        for coord in coords:
            lam = coord[0] - self.lon_0
            phi = coord[1]
            rho = 0.0
            if abs(abs(phi) - math.pi / 2) < _EPS10:
                if phi * n <= 0.0:
                    _set_nan(coord)
                    continue
            else:
                rho = self.c * _powf(ts(_sin_cos(phi), self.e), n)
            s, c = _sin_cos(lam * n)
            coord[0] = ak * rho * s + self.x_0
            coord[1] = ak * (self.rho0 - rho * c) + self.y_0
            successes += 1
        return successes

    def _inverse(self, coords: Coordinates) -> int:
        ak = self.a * self.k_0
        n = self.n
        successes = 0
        for coord in coords:
            x = (coord[0] - self.x_0) / ak
            y = self.rho0 - (coord[1] - self.y_0) / ak
            rho = math.hypot(x, y)

            # On one of the poles
            if rho == 0.0:
                coord[0] = 0.0
                coord[1] = math.copysign(math.pi / 2, n)
                successes += 1
                continue

            # Standard parallel on the southern hemisphere
            if n < 0.0:
                rho, x, y = -rho, -x, -y

            ts0 = _powf(rho / self.c, 1.0 / n)
            phi = pj_phi2(ts0, self.e)
            if math.isinf(phi) or math.isnan(phi):
                _set_nan(coord)
                continue
            coord[0] = math.atan2(x, y) / n + self.lon_0
            coord[1] = phi
            successes += 1
        return successes