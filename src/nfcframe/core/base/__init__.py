from nfcframe.core.base.accumulator import DEFAULT_SOURCE, Accumulator, unhex
from nfcframe.core.base.tables import NFC_FORUM, NFC_HF_TYPES

__all__ = ["Accumulator", "DEFAULT_SOURCE", "NFC_FORUM", "NFC_HF_TYPES", "unhex"]
