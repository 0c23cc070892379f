from nfcframe.core.reader.errors import (
    ExcessData,
    FrameError,
    HeaderTooShort,
    InvalidInput,
    InvalidLength,
    MissingInterface,
    TruncatedTlv,
    UnknownTagType,
)
from nfcframe.core.reader.logging import PROTOCOL, TRACE
from nfcframe.core.reader.tlv import TLV
from nfcframe.core.reader.types import (
    ApduFrame,
    ApduHeader,
    CardRecord,
    Code,
    Known,
    Pending,
    SimpleFrame,
    TagInfo,
    TagRecord,
    Unknown,
)

__all__ = [
    "ApduFrame",
    "ApduHeader",
    "CardRecord",
    "Code",
    "ExcessData",
    "FrameError",
    "HeaderTooShort",
    "InvalidInput",
    "InvalidLength",
    "Known",
    "MissingInterface",
    "PROTOCOL",
    "Pending",
    "SimpleFrame",
    "TLV",
    "TRACE",
    "TagInfo",
    "TagRecord",
    "TruncatedTlv",
    "Unknown",
    "UnknownTagType",
]
