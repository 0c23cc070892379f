"""SpringCore lookup tables: TLV tags, classes, events, interfaces."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from nfcframe.core.base.tables import NFC_HF_TYPES

# TLV tags
TAG_INTERFACES_AND_PROTOCOLS = 0x85
TAG_INDEX = 0xC0
TAG_INFO = 0xC1
TAG_ID = 0xC2
TAG_DATA = 0xC3
TAG_DETAILS = 0xC4

TAG_NAMES = MappingProxyType({
    TAG_INTERFACES_AND_PROTOCOLS: "InterfaceAndProtocols",
    TAG_INDEX: "TagIndex",
    TAG_INFO: "TagInfo",
    TAG_ID: "TagId",
    TAG_DATA: "TagData",
    TAG_DETAILS: "TagDetails",
})

CLASS_NAMES = MappingProxyType({
    0x00: "PROTOCOL",
    0x58: "CONTROL",
    0x59: "ATCRYPTO",
    0x5A: "SAMAV",
    0x5B: "READER",
    0x5D: "DFR",
    0x5E: "ECHO",
})

EVENT_NAMES = MappingProxyType({
    0x8B: "Reader starting/stopping",
    0xB0: "Tag read",
    0xB1: "Tag inserted/removed",
})


@dataclass(frozen=True)
class Interface:
    """A reader interface and the protocols it can report."""

    desc: str
    protocols: MappingProxyType


UNKNOWN_PROTOCOLS = MappingProxyType({
    0x00: "Unknown protocol",
})

UHF_PROTOCOLS = MappingProxyType({
    0x03: "ISO/IEC 18000-6C / EPC Class 1 Gen2 UHF",
})

BLE_PROTOCOLS = MappingProxyType({
    0x10: "Generic BLE advertising object",
    0x11: "iBeacon-compliant BLE advertising object",
    0x12: "Eddystone-compliant BLE advertising object",
})

INTERFACES = MappingProxyType({
    0x00: Interface("Unknown interface", UNKNOWN_PROTOCOLS),
    0x03: Interface("NFC/RFID HF interface (13.56MHz)", NFC_HF_TYPES),
    0x06: Interface("RFID UHF interface (868MHz / 910MHz)", UHF_PROTOCOLS),
    0x84: Interface("Bluetooth interface", BLE_PROTOCOLS),
})
