from nfcframe.core.d600.accumulator import D600Accumulator, decode, split
from nfcframe.core.d600.tables import CARD_TYPES

__all__ = ["CARD_TYPES", "D600Accumulator", "decode", "split"]
