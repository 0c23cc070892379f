"""SpringCore APDU framing (SocketMobile S550).

``[PCB][CLA][LEN 2 or 4 bytes][EVT][TLV...]``. The frame is complete
once exactly LEN payload bytes follow the header.
"""

from __future__ import annotations

import logging

from nfcframe.core.base.accumulator import Accumulator
from nfcframe.core.reader.errors import ExcessData, InvalidLength, MissingInterface
from nfcframe.core.reader.tlv import parse as parse_tlv
from nfcframe.core.reader.types import ApduFrame, Known, TagInfo, TagRecord, lookup
from nfcframe.core.springcore.header import parse_header
from nfcframe.core.springcore.tables import (
    CLASS_NAMES,
    EVENT_NAMES,
    INTERFACES,
    TAG_DATA,
    TAG_DETAILS,
    TAG_ID,
    TAG_INDEX,
    TAG_INFO,
    TAG_INTERFACES_AND_PROTOCOLS,
    TAG_NAMES,
)

lg = logging.getLogger(__name__)

TAG_INFO_LENGTH = 4

# TagInfo byte 0
TAG_NEW = 0x80
DATA_UTF8 = 0x20
DETAILS_UTF8 = 0x10


def assemble(data: bytes) -> ApduFrame | None:
    """Parse header and TLVs once *data* holds exactly one frame."""
    header = parse_header(data)
    if header is None:
        return None
    received = len(data) - header.size
    if received < header.length:
        return None
    if received > header.length:
        raise ExcessData(f"payload is {received} bytes, header declares {header.length}")
    tlvs = parse_tlv(bytes(data[header.size:]), TAG_NAMES)
    for node in tlvs:
        lg.debug("%s", node.format(TAG_NAMES))
    return ApduFrame(header=header, tlvs=tlvs)


def decode_tag_info(value: bytes) -> TagInfo:
    """Decode the 4-byte TagInfo value: flags, interface, protocol, template."""
    if len(value) != TAG_INFO_LENGTH:
        raise InvalidLength(f"tag Info is not 4 bytes[{len(value)}]")
    flags, interface_id, protocol_id, template = value
    interface = INTERFACES.get(interface_id)
    if interface is None:
        raise MissingInterface(f"tag Info has no known Interface ID[0x{interface_id:02x}]")
    return TagInfo(
        new=bool(flags & TAG_NEW),
        data_utf8=bool(flags & DATA_UTF8),
        details_utf8=bool(flags & DETAILS_UTF8),
        interface=Known(interface_id, interface.desc),
        protocol=lookup(interface.protocols, protocol_id, "protocol"),
        template=template,
    )


def _text(value: bytes, utf8: bool) -> str:
    if utf8:
        return value.decode("utf-8", errors="replace")
    return value.hex()


def decode(frame: ApduFrame) -> TagRecord:
    """Expand header flags and TLVs into a TagRecord."""
    header = frame.header
    values = frame.values
    record = TagRecord(
        way=header.way,
        channel_interrupt=header.channel_interrupt,
        secure=header.secure,
        header_long=header.header_long,
        sequence=header.sequence,
        cla=lookup(CLASS_NAMES, header.cla, "class"),
        length=header.length,
        event=lookup(EVENT_NAMES, header.evt, "event"),
    )

    if TAG_INTERFACES_AND_PROTOCOLS in values:
        record.interfaces_and_protocols = values[TAG_INTERFACES_AND_PROTOCOLS].hex()
    if TAG_INDEX in values:
        record.tag_index = values[TAG_INDEX].hex()
    if TAG_INFO in values:
        record.tag_info = decode_tag_info(values[TAG_INFO])
    if TAG_ID in values:
        record.tag_id = values[TAG_ID].hex()

    info = record.tag_info
    if TAG_DATA in values:
        record.tag_data = _text(values[TAG_DATA], info is not None and info.data_utf8)
    if TAG_DETAILS in values:
        record.tag_details = _text(values[TAG_DETAILS], info is not None and info.details_utf8)
    return record


class SpringCoreAccumulator(Accumulator):
    """Accumulator for SpringCore APDU/TLV frames."""

    def complete(self, data: bytearray) -> ApduFrame | None:
        return assemble(data)

    def decode(self, frame: ApduFrame) -> TagRecord:
        return decode(frame)
