"""Exceptions raised by the shade generator."""


class ShadeError(ValueError):
    """Base class for invalid shade generator input."""


class InvalidColorFormat(ShadeError):
    """Hex color is not '#RGB' or '#RRGGBB'."""


class InvalidStepCount(ShadeError):
    """Step count is not a positive even integer."""


class InvalidExportName(ShadeError):
    """Export name has no usable file name characters."""
