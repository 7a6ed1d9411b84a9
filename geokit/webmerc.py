"""Web Mercator: the spherical Mercator projection on the semimajor axis."""

from __future__ import annotations

import math
from typing import MutableSequence, Sequence

from geokit.core import Direction

__all__ = ["WebMercator"]

Coordinates = Sequence[MutableSequence[float]]

_WGS84_SEMIMAJOR_AXIS = 6378137.0


class WebMercator:
    """Project (longitude, latitude) in radians to Web Mercator metres and back."""

    def __init__(self, a: float = _WGS84_SEMIMAJOR_AXIS) -> None:
        self.a = float(a)

    def apply(self, coords: Coordinates, direction: Direction) -> int:
        """Transform ``coords`` in place; return the number of successes."""
        a = self.a
        count = 0
        for coord in coords:
            if direction is Direction.FWD:
                coord[0] *= a
                coord[1] = a * math.log(math.tan(math.pi / 4 + coord[1] / 2.0))
            else:
                coord[0] /= a
                coord[1] = math.pi / 2 - 2.0 * math.atan(math.exp(-coord[1] / a))
            count += 1
        return count