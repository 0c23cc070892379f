"""D600 card types, keyed by the 2-digit hex tag that opens each frame."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from nfcframe.core.base.tables import NFC_FORUM, NFC_HF_TYPES


@dataclass(frozen=True)
class CardType:
    name: str
    utf8: bool


CARD_TYPES = MappingProxyType({
    code: CardType(name=name, utf8=code == NFC_FORUM)
    for code, name in NFC_HF_TYPES.items()
})

# Firmware sends URL reads without a type tag, so the frame opens with "ht".
URL_PREFIX = "ht"
URL_TYPE = NFC_FORUM
