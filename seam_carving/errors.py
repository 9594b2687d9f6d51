"""
Errors raised by the seam carving engine.

All of them are precondition violations detected before any pixel is removed,
so a failed resize never leaves a half-carved image behind.
"""


class SeamCarvingError(ValueError):
    """Base class for seam carving precondition errors."""


class InvalidReductionError(SeamCarvingError):
    """Requested reduction is negative or would remove the whole image."""


class DegenerateGridError(SeamCarvingError):
    """Pixel grid (or a table derived from it) has a zero dimension."""
