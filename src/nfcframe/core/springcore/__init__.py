from nfcframe.core.springcore.accumulator import (
    SpringCoreAccumulator,
    assemble,
    decode,
    decode_tag_info,
)
from nfcframe.core.springcore.header import parse_header
from nfcframe.core.springcore.tables import CLASS_NAMES, EVENT_NAMES, INTERFACES, TAG_NAMES

__all__ = [
    "CLASS_NAMES",
    "EVENT_NAMES",
    "INTERFACES",
    "SpringCoreAccumulator",
    "TAG_NAMES",
    "assemble",
    "decode",
    "decode_tag_info",
    "parse_header",
]
