"""Read SDF file headers and type codes, build particle distributions and write grids as text."""

__version__ = "0.1.0"