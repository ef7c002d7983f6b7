"""Build-time generator for tile kinds, property flags and symbol lookups."""

__version__ = "0.1.0"
