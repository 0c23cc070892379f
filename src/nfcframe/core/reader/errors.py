"""Frame reassembly and decode errors.

Every error here is terminal for the frame in progress: the accumulator
drops the source's buffer before the exception reaches the caller.
"""

from __future__ import annotations


class FrameError(ValueError):
    """Base class for all reassembly and decode failures."""


class InvalidInput(FrameError):
    """Chunk is not a non-empty, even-length hex string."""


class HeaderTooShort(FrameError):
    """Long-header flag set but not enough bytes for the 32-bit length."""


class UnknownTagType(FrameError):
    """TLV tag byte, or TLV length prefix, outside the accepted set."""


class MissingInterface(FrameError):
    """TagInfo refers to an interface id with no table entry."""


class InvalidLength(FrameError):
    """TagInfo value is not exactly 4 bytes."""


class ExcessData(FrameError):
    """More payload accumulated than the header declared."""


class TruncatedTlv(FrameError):
    """TLV length field or value runs past the end of the payload."""
