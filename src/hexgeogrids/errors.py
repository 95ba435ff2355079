"""
Error taxonomy for hex grid construction and index decoding.

Every error is a ValueError so callers that only care about "bad input"
can catch that.
"""


class HexGridError(ValueError):
    """Base class for all hex grid errors."""


class InvalidCenterError(HexGridError):
    """HexSystem anchor at or beyond the poles, or longitude out of range."""


class InvalidSizeError(HexGridError):
    """HexSystem size outside [1, 65535]."""


class OutOfRangeError(HexGridError):
    """Integer outside the range a packing/unpacking step can represent."""


class InvalidLengthError(HexGridError):
    """Index, prefix or body string of the wrong length."""


class MalformedHashError(HexGridError):
    """Non-hex characters or a missing separator in an index string."""
