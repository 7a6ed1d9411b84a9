"""The Helmert transformation: reference frame shifts in 3D cartesian space."""

from __future__ import annotations

import math
from typing import MutableSequence, Sequence

from geokit.core import BadParameterError, Direction, MissingParameterError

__all__ = ["Helmert", "rotation_matrix"]

Coordinates = Sequence[MutableSequence[float]]
Matrix = tuple[tuple[float, float, float], ...]

_CONVENTIONS = ("position_vector", "coordinate_frame")


def _arcsec_to_radians(value: float) -> float:
    return math.radians(value / 3600.0)


def rotation_matrix(r: Sequence[float], exact: bool, position_vector: bool) -> Matrix:
    """Build the 3x3 rotation matrix for rotations ``r`` (radians) about x, y, z.

    Uses small-angle approximations unless ``exact`` is set. The
    ``position_vector`` convention yields the transpose of the
    ``coordinate_frame`` convention.
    """
    rx, ry, rz = r[0], r[1], r[2]

    # Small-angle approximations: sin(r) = r, cos(r) = 1
    sx, sy, sz = rx, ry, rz
    cx = cy = cz = 1.0
    if exact:
        sx, cx = math.sin(rx), math.cos(rx)
        sy, cy = math.sin(ry), math.cos(ry)
        sz, cz = math.sin(rz), math.cos(rz)

    r11 = cy * cz
    r12 = cx * sz
    r13 = -cx * sy * cz

    r21 = -cy * sz
    r22 = cx * cz
    r23 = sx * cz

    r31 = sy
    r32 = -sx * cy
    r33 = cx * cy

    # Second order terms are only applied in the exact case
    if exact:
        r12 += sx * sy * cz
        r13 += sx * sz
        r22 -= sx * sy * sz
        r23 += cx * sy * sz

    if position_vector:
        return ((r11, r21, r31), (r12, r22, r32), (r13, r23, r33))
    return ((r11, r12, r13), (r21, r22, r23), (r31, r32, r33))


class Helmert:
    """Static or time dependent 7 (or 14) parameter Helmert transformation.

    Translations are in metres, rotations in arc seconds, scale in ppm.
    Time evolutions are given per unit of the fourth coordinate.
    """

    def __init__(
        self,
        *,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        dx: float = 0.0,
        dy: float = 0.0,
        dz: float = 0.0,
        rx: float = 0.0,
        ry: float = 0.0,
        rz: float = 0.0,
        drx: float = 0.0,
        dry: float = 0.0,
        drz: float = 0.0,
        convention: str = "",
        exact: bool = False,
        s: float = 0.0,
        ds: float = 0.0,
        t_epoch: float = math.nan,
        t_obs: float = math.nan,
    ) -> None:
        translation = [float(x), float(y), float(z)]
        translation_rate = (float(dx), float(dy), float(dz))
        rotation = [_arcsec_to_radians(v) for v in (rx, ry, rz)]
        rotation_rate = tuple(_arcsec_to_radians(v) for v in (drx, dry, drz))

        rotated = any(v != 0.0 for v in rotation) or any(v != 0.0 for v in rotation_rate)
        position_vector = True
        if rotated:
            if convention not in _CONVENTIONS:
                raise BadParameterError("convention", convention)
            position_vector = convention != "coordinate_frame"

        scale = 1.0 + s * 1e-6
        scale_rate = ds * 1e-6

        dynamic = (
            any(v != 0.0 for v in translation_rate)
            or any(v != 0.0 for v in rotation_rate)
            or scale_rate != 0.0
        )
        fixed_time = False
        if dynamic:
            if math.isnan(t_epoch):
                raise MissingParameterError("t_epoch")
            if not math.isnan(t_obs):
                fixed_time = True
                elapsed = t_obs - t_epoch
                for i in range(3):
                    translation[i] += translation_rate[i] * elapsed
                    rotation[i] += rotation_rate[i] * elapsed
                    scale += scale_rate * elapsed

        self.convention = convention
        self.exact = bool(exact)
        self.rotated = rotated
        self.position_vector = position_vector
        self.dynamic = dynamic
        self.fixed_time = fixed_time
        self.t_epoch = float(t_epoch)
        self.t_obs = float(t_obs)
        self.translation = tuple(translation)
        self.translation_rate = translation_rate
        self.rotation = tuple(rotation)
        self.rotation_rate = rotation_rate
        self.scale = scale
        self.scale_rate = scale_rate
        self.rotation_matrix = rotation_matrix(self.rotation, self.exact, position_vector)

    def apply(self, coords: Coordinates, direction: Direction) -> int:
        """Transform cartesian ``coords`` in place; return the number handled."""
        tt = list(self.translation)
        ss = self.scale
        rot = self.rotation_matrix
        epoch = 0.0 if math.isnan(self.t_epoch) else self.t_epoch
        time_varying = self.dynamic and not self.fixed_time

        prev_t = math.nan
        count = 0
        for c in coords:
            count += 1
            if time_varying:
                t = c[3] if len(c) > 3 else math.nan
                if t != prev_t:
                    prev_t = t
                    dt = t - epoch
                    for k in range(3):
                        tt[k] += dt * self.translation_rate[k]
                    if self.rotated:
                        rr = [
                            self.rotation[k] + dt * self.rotation_rate[k] for k in range(3)
                        ]
                        rot = rotation_matrix(rr, self.exact, self.position_vector)
                    ss = self.scale + dt * self.scale_rate

            if direction is Direction.FWD:
                if self.rotated:
                    x = c[0] * rot[0][0] + c[1] * rot[0][1] + c[2] * rot[0][2]
                    y = c[0] * rot[1][0] + c[1] * rot[1][1] + c[2] * rot[1][2]
                    z = c[0] * rot[2][0] + c[1] * rot[2][1] + c[2] * rot[2][2]
                else:
                    x, y, z = c[0], c[1], c[2]
                c[0] = ss * x + tt[0]
                c[1] = ss * y + tt[1]
                c[2] = ss * z + tt[2]
                continue

            x = (c[0] - tt[0]) / ss
            y = (c[1] - tt[1]) / ss
            z = (c[2] - tt[2]) / ss
            if self.rotated:
                # Inverse rotation by transposed multiplication
                c[0] = x * rot[0][0] + y * rot[1][0] + z * rot[2][0]
                c[1] = x * rot[0][1] + y * rot[1][1] + z * rot[2][1]
                c[2] = x * rot[0][2] + y * rot[1][2] + z * rot[2][2]
            else:
                c[0], c[1], c[2] = x, y, z
        return count