import math

import pytest

from geokit.core import Direction
from geokit.somerc import SwissObliqueMercator

BESSEL_A = 6377397.155
BESSEL_F = 1.0 / 299.1528128


def _swiss():
    return SwissObliqueMercator(
        a=BESSEL_A,
        f=BESSEL_F,
        lat_0=46.9524055555556,
        lon_0=7.43958333333333,
        k_0=1.0,
        x_0=2600000.0,
        y_0=1200000.0,
    )


def test_somerc_inv():
    op = _swiss()
    operands = [[2531098.0, 1167363.0, 452.0, 0.0]]
    assert op.apply(operands, Direction.INV) == 1
    assert operands[0][0] == pytest.approx(0.11413236074541264, abs=1e-9)
    assert operands[0][2] == 452.0


def test_somerc_fwd_and_round_trip():
    op = _swiss()
    start = [0.11413236074541264, 0.814287372550452, 452.0, 0.0]
    operands = [list(start)]
    assert op.apply(operands, Direction.FWD) == 1
    assert operands[0][0] == pytest.approx(2531098.0, abs=1e-9)

    op.apply(operands, Direction.INV)
    assert operands[0][0] == pytest.approx(start[0], abs=1e-9)


def test_somerc_el():
    op = SwissObliqueMercator()
    start = [
        [math.radians(2.0), math.radians(1.0), 0.0, 0.0],
        [math.radians(2.0), math.radians(-1.0), 0.0, 0.0],
        [math.radians(-2.0), math.radians(1.0), 0.0, 0.0],
        [math.radians(-2.0), math.radians(-1.0), 0.0, 0.0],
    ]
    expected = [
        [222638.98158654713, 110579.96521824898, 0.0, 0.0],
        [222638.98158654713, -110579.96521825089, 0.0, 0.0],
        [-222638.98158654713, 110579.96521824898, 0.0, 0.0],
        [-222638.98158654713, -110579.96521825089, 0.0, 0.0],
    ]
    operands = [list(c) for c in start]

    successes = op.apply(operands, Direction.FWD)
    assert successes == 4
    for got, want in zip(operands, expected):
        for k in range(4):
            assert got[k] == pytest.approx(want[k], abs=1e-8)

    inverse_successes = op.apply(operands, Direction.INV)
    assert inverse_successes == 4
    for got, want in zip(operands, start):
        for k in range(4):
            assert got[k] == pytest.approx(want[k], abs=1e-4)


def test_origin_maps_to_false_origin():
    op = _swiss()
    operands = [[op.lon_0, op.lat_0]]
    op.apply(operands, Direction.FWD)
    assert operands[0][0] == pytest.approx(2600000.0, abs=1e-6)
    assert operands[0][1] == pytest.approx(1200000.0, abs=1e-6)