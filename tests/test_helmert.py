import math

import pytest

from geokit.core import BadParameterError, Direction, MissingParameterError
from geokit.helmert import Helmert, rotation_matrix

GDA94 = (-4052051.7643, 4212836.2017, -2545106.0245, 0.0)
GDA2020A = (-4052052.7379, 4212835.9897, -2545104.5898, 0.0)
GDA2020B = (-4052052.7373, 4212835.9835, -2545104.5867, 2020.0)
ITRF2014 = (-4052052.6588, 4212835.9938, -2545104.6946, 2018.0)


def hypot3(a, b):
    return math.dist(a[:3], b[:3])


def test_translation():
    op = Helmert(x=-87, y=-96, z=-120)
    operands = [[0.0, 0.0, 0.0, 0.0]]
    assert op.apply(operands, Direction.FWD) == 1
    assert operands[0][:3] == [-87.0, -96.0, -120.0]
    op.apply(operands, Direction.INV)
    assert operands[0][:3] == [0.0, 0.0, 0.0]


def test_translation_rotation_and_scale():
    op = Helmert(
        convention="coordinate_frame",
        x=0.06155, rx=-0.0394924,
        y=-0.01087, ry=-0.0327221,
        z=-0.04019, rz=-0.0328979,
        s=-0.009994, exact=True,
    )
    operands = [list(GDA94)]
    op.apply(operands, Direction.FWD)
    assert hypot3(GDA2020A, operands[0]) < 75e-6
    op.apply(operands, Direction.INV)
    assert hypot3(GDA94, operands[0]) < 75e-7


def test_dynamic():
    op = Helmert(
        exact=True,
        convention="coordinate_frame",
        drx=0.00150379, dry=0.00118346, drz=0.00120716,
        t_epoch=2020.0,
    )
    operands = [list(ITRF2014)]
    op.apply(operands, Direction.FWD)
    assert hypot3(GDA2020B, operands[0]) < 40e-6
    op.apply(operands, Direction.INV)
    assert hypot3(ITRF2014, operands[0]) < 40e-8


def test_fixed_dynamic():
    op = Helmert(
        exact=True,
        convention="coordinate_frame",
        drx=0.00150379, dry=0.00118346, drz=0.00120716,
        t_epoch=2020.0, t_obs=2018,
    )
    operands = [list(ITRF2014)]
    operands[0][3] = 2030.0
    op.apply(operands, Direction.FWD)
    assert hypot3(GDA2020B, operands[0]) < 40e-6
    op.apply(operands, Direction.INV)
    assert hypot3(ITRF2014, operands[0]) < 40e-8


def test_rotation_requires_convention():
    with pytest.raises(BadParameterError) as info:
        Helmert(rx=1.0)
    assert info.value.key == "convention"


def test_dynamic_requires_epoch():
    with pytest.raises(MissingParameterError) as info:
        Helmert(dx=0.1)
    assert info.value.key == "t_epoch"


def test_scale_only():
    op = Helmert(s=1.0)
    operands = [[1e6, 0.0, 0.0, 0.0]]
    op.apply(operands, Direction.FWD)
    assert operands[0][0] == pytest.approx(1e6 + 1.0, abs=1e-9)


def test_rotation_matrix_conventions_are_transposes():
    r = (1e-5, -2e-5, 3e-5)
    pv = rotation_matrix(r, True, True)
    cf = rotation_matrix(r, True, False)
    for i in range(3):
        for j in range(3):
            assert pv[i][j] == cf[j][i]


def test_exact_rotation_matrix_is_orthonormal():
    m = rotation_matrix((0.3, -0.2, 0.1), True, False)
    for i in range(3):
        for j in range(3):
            dot = sum(m[i][k] * m[j][k] for k in range(3))
            assert dot == pytest.approx(1.0 if i == j else 0.0, abs=1e-12)


def test_zero_rotation_is_identity():
    m = rotation_matrix((0.0, 0.0, 0.0), False, True)
    assert m == ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))