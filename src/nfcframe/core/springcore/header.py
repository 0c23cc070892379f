from __future__ import annotations

from nfcframe.core.reader.errors import HeaderTooShort
from nfcframe.core.reader.types import ApduHeader

HEADER_LONG = 0x10

# PCB, class and at least a 16-bit length before the header is looked at.
MIN_PREFIX = 4
SHORT_HEADER = 5
LONG_HEADER = 7
LONG_LENGTH_END = 6


def parse_header(data: bytes) -> ApduHeader | None:
    """Parse the APDU header at the start of *data*.

    Returns None until enough bytes are buffered. A long header with
    fewer than 6 bytes is rejected rather than waited for.
    """
    if len(data) < MIN_PREFIX:
        return None
    pcb, cla = data[0], data[1]
    if pcb & HEADER_LONG:
        if len(data) < LONG_LENGTH_END:
            raise HeaderTooShort(f"Header too short[{len(data)}]")
        if len(data) < LONG_HEADER:
            return None
        length = int.from_bytes(data[2:6], "big")
        evt = data[6]
    else:
        if len(data) < SHORT_HEADER:
            return None
        length = int.from_bytes(data[2:4], "big")
        evt = data[4]
    return ApduHeader(pcb=pcb, cla=cla, length=length, evt=evt)
