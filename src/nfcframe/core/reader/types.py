from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from typing import Union

from nfcframe.core.reader.tlv import TLV


@dataclass(frozen=True)
class Known:
    """A code found in a lookup table."""

    code: int
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Unknown:
    """A code with no table entry, kept so newer firmware still decodes."""

    code: int | str
    kind: str = "type"

    def __str__(self) -> str:
        raw = self.code if isinstance(self.code, str) else f"0x{self.code:02X}"
        return f"Unknown {self.kind}[{raw}]"


Code = Union[Known, Unknown]


def lookup(table: Mapping[int, str], code: int, kind: str) -> Code:
    """Resolve *code* against *table*, falling back to Unknown."""
    name = table.get(code)
    if name is None:
        return Unknown(code, kind)
    return Known(code, name)


@dataclass(frozen=True)
class Pending:
    """Frame for *source* is incomplete; *buffered* bytes are held."""

    source: Hashable
    buffered: int


@dataclass(frozen=True)
class SimpleFrame:
    """Terminator-delimited D600 frame, terminator stripped."""

    tag: str
    payload: bytes

    def __repr__(self) -> str:
        return f"SimpleFrame({self.tag!r}, {self.payload.hex().upper()})"


@dataclass(frozen=True)
class ApduHeader:
    """SpringCore APDU header."""

    pcb: int
    cla: int
    length: int
    evt: int

    @property
    def way(self) -> bool:
        return bool(self.pcb & 0x80)

    @property
    def channel_interrupt(self) -> bool:
        return bool(self.pcb & 0x40)

    @property
    def secure(self) -> bool:
        return bool(self.pcb & 0x20)

    @property
    def header_long(self) -> bool:
        return bool(self.pcb & 0x10)

    @property
    def sequence(self) -> int:
        return self.pcb & 0x0F

    @property
    def size(self) -> int:
        """Header size in bytes: 7 for a 32-bit length, else 5."""
        return 7 if self.header_long else 5


@dataclass(frozen=True)
class ApduFrame:
    """SpringCore frame: header plus its TLVs in wire order."""

    header: ApduHeader
    tlvs: list[TLV] = field(default_factory=list)

    @property
    def values(self) -> dict[int, bytes]:
        """TLV values by tag; a repeated tag keeps its last value."""
        return {node.tag: node.value for node in self.tlvs}


@dataclass
class CardRecord:
    """Decoded D600 card read."""

    card_type: Code
    utf8: bool
    card_data: str


@dataclass
class TagInfo:
    """Decoded 4-byte TagInfo (C1) value."""

    new: bool
    data_utf8: bool
    details_utf8: bool
    interface: Known
    protocol: Code
    template: int


@dataclass
class TagRecord:
    """Decoded SpringCore frame."""

    way: bool
    channel_interrupt: bool
    secure: bool
    header_long: bool
    sequence: int
    cla: Code
    length: int
    event: Code
    interfaces_and_protocols: str | None = None
    tag_index: str | None = None
    tag_info: TagInfo | None = None
    tag_id: str | None = None
    tag_data: str | None = None
    tag_details: str | None = None
