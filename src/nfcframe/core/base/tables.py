"""NFC/RFID HF card and protocol types shared by D600 and SpringCore."""

from types import MappingProxyType

NFC_HF_TYPES = MappingProxyType({
    0x01: "NFC-A (ISO/IEC 14443-A)",
    0x02: "NFC-B (ISO/IEC 14443-B)",
    0x03: "NFC-Felica",
    0x04: "NFC-V (ISO/IEC 15693, ISO/IEC 18000-3M1)",
    0x08: "NXP ICODE1",
    0x10: "Inside Secure Picopass/Picotag",
    0x11: "Broadcom / Innovision Jewels / Topaz",
    0x14: "EM MicroElectronic 4134",
    0x18: "ThinFilm / Kovio RF Barcode",
    0x20: "ST MicroElectronics Short Range",
    0x34: "ISO/IEC 18000-3M3 / EPC Class 1 Gen2 HF",
    0x40: "ASK (now Paragon ID) contactless tickets B",
    0x4F: "NFC Forum",
    0x80: "Innovatron 14443-B",
})

# Types whose payload is text (NDEF records on an NFC Forum tag).
NFC_FORUM = 0x4F
