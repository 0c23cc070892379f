"""D600 simple framing.

A frame is ``[2-byte ASCII hex type tag][payload][00]``. The reader
splits frames across BLE indications at arbitrary points; a frame is
complete when the last buffered byte is the 00 terminator.
"""

from __future__ import annotations

import logging
import re

from nfcframe.core.base.accumulator import Accumulator
from nfcframe.core.d600.tables import CARD_TYPES, URL_PREFIX, URL_TYPE
from nfcframe.core.reader.types import CardRecord, Known, SimpleFrame, Unknown

lg = logging.getLogger(__name__)

TERMINATOR = 0x00
TAG_LENGTH = 2

_TYPE_TAG = re.compile(r"[0-9a-fA-F]{2}")


def split(data: bytes) -> SimpleFrame:
    """Split a terminated frame into its type tag and payload."""
    body = bytes(data[:-1])
    tag = body[:TAG_LENGTH].decode("ascii", errors="replace")
    return SimpleFrame(tag=tag, payload=body[TAG_LENGTH:])


def decode(frame: SimpleFrame) -> CardRecord:
    """Resolve the card type and render the payload as text or hex."""
    if frame.tag.startswith(URL_PREFIX):
        code = URL_TYPE
    elif _TYPE_TAG.fullmatch(frame.tag):
        code = int(frame.tag, 16)
    else:
        code = None

    entry = CARD_TYPES.get(code) if code is not None else None
    if entry is None:
        lg.debug("unknown card type tag %r", frame.tag)
        return CardRecord(card_type=Unknown(frame.tag), utf8=False, card_data=frame.payload.hex())

    if entry.utf8:
        data = frame.payload.decode("utf-8", errors="replace")
    else:
        data = frame.payload.hex()
    return CardRecord(card_type=Known(code, entry.name), utf8=entry.utf8, card_data=data)


class D600Accumulator(Accumulator):
    """Accumulator for the SocketMobile D600 simple framing."""

    def complete(self, data: bytearray) -> SimpleFrame | None:
        if data[-1] != TERMINATOR:
            return None
        return split(data)

    def decode(self, frame: SimpleFrame) -> CardRecord:
        return decode(frame)
