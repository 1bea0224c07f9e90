"""
Parse errors raised while validating a PSF2 buffer.
"""


class ParseError(ValueError):
    """Why data might not be a valid PSF2 font."""


class UnexpectedEnd(ParseError):
    """Input data ended prematurely, or the glyph table does not fit."""


class BadMagic(ParseError):
    """Missing magic number; probably not PSF2 data."""
