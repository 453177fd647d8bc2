"""Solutions to short algorithmic problems on numbers, arrays, strings and constructions."""

__version__ = "0.1.0"