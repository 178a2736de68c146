"""Levenshtein edit distance.

``levenshtein_distance(a, b)`` compares text as UTF-8 code units, bytes-like
objects byte by byte and other sequences element by element. ``code_units``
shows the units a value is reduced to.
"""
from importlib.metadata import version, PackageNotFoundError

from .distance import code_units, levenshtein_distance

try:
    __version__ = version("levenshtein-distance")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["__version__", "code_units", "levenshtein_distance"]
