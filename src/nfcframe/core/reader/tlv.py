from __future__ import annotations

from collections.abc import Collection, Mapping
from dataclasses import dataclass

from nfcframe.core.reader.errors import TruncatedTlv, UnknownTagType

# Long-form prefixes 0x81..0x84 carry 1..4 big-endian length bytes.
MAX_LENGTH_BYTES = 4


@dataclass(frozen=True)
class TLV:
    """A single-byte-tag TLV node."""

    tag: int
    value: bytes = b""

    def format(self, tag_names: Mapping[int, str] | None = None, indent: int = 0) -> str:
        """Format this TLV node as one human-readable line."""
        names = tag_names or {}
        name = names.get(self.tag, "")
        prefix = "  " * indent
        return f"{prefix}{self.tag:02X} {name}: {self.value.hex(' ').upper()}".rstrip()

    def __repr__(self) -> str:
        return f"TLV({self.tag:02X}, {self.value.hex().upper()})"


def parse(data: bytes, tags: Collection[int]) -> list[TLV]:
    """Parse *data* into TLV nodes whose tags must all be in *tags*."""
    nodes: list[TLV] = []
    offset = 0
    while offset < len(data):
        tag = data[offset]
        if tag not in tags:
            raise UnknownTagType(f"unknown tag type[0x{tag:02x}]")
        length, offset = read_length(data, offset + 1)
        end = offset + length
        if end > len(data):
            raise TruncatedTlv(
                f"tag 0x{tag:02x} value needs {length} bytes, {len(data) - offset} left"
            )
        nodes.append(TLV(tag=tag, value=data[offset:end]))
        offset = end
    return nodes


def read_length(data: bytes, offset: int) -> tuple[int, int]:
    """Read a short- or long-form length and return (length, new_offset)."""
    if offset >= len(data):
        raise TruncatedTlv("missing TLV length")
    b = data[offset]
    offset += 1
    if b < 0x80:
        return b, offset
    num_bytes = b & 0x7F
    if num_bytes == 0 or num_bytes > MAX_LENGTH_BYTES:
        raise UnknownTagType(f"unknown tag type[0x{b:02x}]")
    if offset + num_bytes > len(data):
        raise TruncatedTlv(f"length needs {num_bytes} bytes, {len(data) - offset} left")
    length = int.from_bytes(data[offset : offset + num_bytes], "big")
    return length, offset + num_bytes
