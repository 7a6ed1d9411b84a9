# geokit

Geodetic coordinate operations in pure Python: map projections, reference
frame shifts, and the series and ancillary functions they are built on.
No third-party dependencies.

## Installation

```
pip install .
```

## Coordinates and directions

Operators work on sequences of mutable coordinate sequences (for example a
list of lists) and transform them in place. Angular values are in radians,
with longitude first and latitude second; the third element is height and
the fourth is time. Every operator has an `apply(coords, direction)` method,
where `direction` is `geokit.core.Direction.FWD` or `Direction.INV`, and
returns the number of coordinates handled successfully. Coordinates that
cannot be projected are set to NaN.

Operator parameters are given as keyword arguments; angular parameters of the
projections are in degrees, and the ellipsoid is given by its semimajor axis
`a` and flattening `f` (GRS80 by default).

## What is included

- `geokit.helmert.Helmert` – 3, 7 and 14 parameter Helmert transformations of
  3D cartesian coordinates, static or time dependent (`t_epoch`, and `t_obs`
  for a fixed observation time), in the `position_vector` or
  `coordinate_frame` convention, with an `exact` or small-angle rotation
  matrix. Rotations are in arc seconds, scale in ppm.
  `geokit.helmert.rotation_matrix` builds the rotation matrix on its own.
- `geokit.webmerc.WebMercator` – the Web Mercator projection (WGS84
  semimajor axis by default).
- `geokit.lcc.LambertConformalConic` – Lambert conformal conic with one or two
  standard parallels (`lat_1`, `lat_2`), `lat_0`, `lon_0`, `k_0`, `x_0`, `y_0`.
- `geokit.somerc.SwissObliqueMercator` – the Swiss oblique Mercator.
- `geokit.series` – Horner evaluation of Taylor polynomials, Clenshaw
  summation of real and complex Fourier sine and cosine series, and the
  `PolynomialCoefficients` / `FourierCoefficients` containers.
- `geokit.ancillary` – the Gudermannian function and its inverse, `ts`,
  `pj_msfn`, `pj_phi2`, `qs` and `sinhpsi_to_tanphi`.
- `geokit.core` – `Direction` and the error classes.

## Example

```python
import math

from geokit.core import Direction
from geokit.helmert import Helmert
from geokit.lcc import LambertConformalConic

shift = Helmert(x=-87, y=-96, z=-120)
coords = [[0.0, 0.0, 0.0, 0.0]]
shift.apply(coords, Direction.FWD)      # coords is now [[-87.0, -96.0, -120.0, 0.0]]
shift.apply(coords, Direction.INV)      # and back to the origin

lcc = LambertConformalConic(lat_1=33, lat_2=45, lon_0=10)
points = [[math.radians(12), math.radians(40), 0.0, 0.0]]
lcc.apply(points, Direction.FWD)        # easting, northing in metres
```

## Errors

Invalid operator definitions raise `geokit.core.GeodesyError` or one of its
subclasses: `BadParameterError` (for example an unknown Helmert
`convention`), `MissingParameterError` (a time dependent Helmert without
`t_epoch`) and `NotFoundError`. `SwissObliqueMercator.apply` raises
`GeodesyError` if the inverse latitude iteration does not converge.

## What this package does not do

There is no parser for textual operator definitions and no operator
registry: operators are built by calling their classes directly. There is no
pipeline for chaining operators, no unit conversion operator or unit tables,
no ISO-6709 angle reading and writing, no sexagesimal angle parsing, and no
Hotine oblique Mercator. There is no command line tool.

## Running the tests

```
pip install ".[test]"
pytest
```