"""Geodetic coordinate operations: Helmert shifts, map projections and series helpers."""

__version__ = "0.1.0"