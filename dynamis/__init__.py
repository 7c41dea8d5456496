"""Geometry, measurement records, random source, option parsing and solver bases for independent sets of rectangular labels."""

__version__ = "0.1.0"
__all__ = ["config", "geometry", "jsonm", "rng", "solver_grid", "solver_line"]