import pytest

from nfcframe.core.d600 import D600Accumulator
from nfcframe.core.springcore import SpringCoreAccumulator


def apdu(payload: bytes, pcb: int = 0x0C, cla: int = 0x5B, evt: int = 0xB0,
         length: int | None = None) -> str:
    """Build a SpringCore frame as hex; long header when pcb has 0x10 set."""
    declared = len(payload) if length is None else length
    size = 4 if pcb & 0x10 else 2
    header = bytes([pcb, cla]) + declared.to_bytes(size, "big") + bytes([evt])
    return (header + payload).hex()


@pytest.fixture
def d600():
    return D600Accumulator()


@pytest.fixture
def springcore():
    return SpringCoreAccumulator()
