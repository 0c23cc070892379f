import pytest

from nfcframe.core.reader import (
    ApduHeader,
    ExcessData,
    HeaderTooShort,
    InvalidLength,
    Known,
    MissingInterface,
    Pending,
    TruncatedTlv,
    Unknown,
    UnknownTagType,
)
from nfcframe.core.springcore import decode_tag_info, parse_header

from captures import S550_MULTI, S550_SHORT, S550_URL, URL
from conftest import apdu

TAG_INFO_HF = "c10420030100"


def test_short_read(springcore):
    frame = springcore.submit(S550_SHORT)
    assert frame.header == ApduHeader(pcb=0xCC, cla=0x5B, length=32, evt=0xB0)
    record = springcore.decode(frame)
    assert record.way and record.channel_interrupt
    assert not record.secure and not record.header_long
    assert record.sequence == 12
    assert record.cla == Known(0x5B, "READER")
    assert record.length == 32
    assert str(record.event) == "Tag read"
    assert record.tag_id == "02c40044f99db6"
    assert record.tag_data == "st.com/nfc-rfid"
    assert record.tag_details is None

    info = record.tag_info
    assert info.new is False
    assert info.data_utf8 is True
    assert info.details_utf8 is False
    assert str(info.interface) == "NFC/RFID HF interface (13.56MHz)"
    assert info.protocol == Known(0x01, "NFC-A (ISO/IEC 14443-A)")
    assert info.template == 0


def test_url_read(springcore):
    record = springcore.feed(S550_URL)
    assert record.sequence == 11
    assert record.tag_id == "04c16802c84080"
    assert record.tag_data == URL


def test_multi_segment_read(springcore):
    for chunk in S550_MULTI[:-1]:
        assert isinstance(springcore.submit(chunk), Pending)
    record = springcore.decode(springcore.submit(S550_MULTI[-1]))
    assert record.length == 947
    assert record.sequence == 13
    assert record.tag_id == "044f7dd24a3e80"
    assert record.tag_data.startswith("!\"#$%&")
    assert record.tag_data.endswith("™")
    assert len(record.tag_data.encode()) == 928


def test_pending_until_declared_length(springcore):
    data = apdu(bytes.fromhex(TAG_INFO_HF + "c2020102"))
    pieces = [data[:6], data[6:14], data[14:22], data[22:]]
    seen = []
    for piece in pieces[:-1]:
        result = springcore.submit(piece, "r1")
        assert isinstance(result, Pending)
        seen.append(result.buffered)
    assert seen == [3, 7, 11]
    assert springcore.decode(springcore.submit(pieces[-1], "r1")).tag_id == "0102"


@pytest.mark.parametrize("size", [1, 2, 5, 100])
def test_chunk_boundaries_do_not_matter(springcore, size):
    step = size * 2
    chunks = [S550_URL[i:i + step] for i in range(0, len(S550_URL), step)]
    for chunk in chunks[:-1]:
        assert isinstance(springcore.submit(chunk), Pending)
    assert springcore.feed(chunks[-1]).tag_data == URL


def test_unknown_tag_discards_frame(springcore):
    with pytest.raises(UnknownTagType):
        springcore.submit(apdu(bytes.fromhex("ff0100")), "r1")
    assert springcore.buffered("r1") == 0
    assert springcore.feed(S550_SHORT, "r1").tag_data == "st.com/nfc-rfid"


def test_unknown_length_prefix(springcore):
    with pytest.raises(UnknownTagType):
        springcore.submit(apdu(bytes.fromhex("c385010203040506")))
    assert springcore.sources() == []


def test_truncated_value(springcore):
    with pytest.raises(TruncatedTlv):
        springcore.submit(apdu(bytes.fromhex("c3056162")))
    assert springcore.sources() == []


def test_excess_data(springcore):
    with pytest.raises(ExcessData):
        springcore.submit(apdu(bytes.fromhex("c0010500"), length=3))
    assert springcore.buffered() == 0


def test_excess_data_across_chunks(springcore):
    data = apdu(bytes.fromhex("c00105"))
    assert isinstance(springcore.submit(data[:8]), Pending)
    with pytest.raises(ExcessData):
        springcore.submit(data[8:] + "c0")
    assert springcore.buffered() == 0


def test_short_header_waits():
    assert parse_header(bytes.fromhex("0c5b00")) is None
    assert parse_header(bytes.fromhex("0c5b0000")) is None
    assert parse_header(bytes.fromhex("0c5b0000b0")).length == 0


def test_long_header():
    header = parse_header(bytes.fromhex("1c5b00000102b0"))
    assert header == ApduHeader(pcb=0x1C, cla=0x5B, length=0x102, evt=0xB0)
    assert header.header_long and header.size == 7
    assert parse_header(bytes.fromhex("1c5b00000102")) is None


def test_long_header_too_short(springcore):
    assert isinstance(springcore.submit("1c5b00"), Pending)
    with pytest.raises(HeaderTooShort, match=r"\[4\]"):
        springcore.submit("00")
    assert springcore.buffered() == 0


def test_long_header_frame(springcore):
    payload = bytes.fromhex(TAG_INFO_HF + "c38200" + "03" + "616263")
    record = springcore.feed(apdu(payload, pcb=0x9C))
    assert record.header_long
    assert record.sequence == 12
    assert record.tag_data == "abc"


def test_length_is_unsigned(springcore):
    header = parse_header(bytes.fromhex("0c5b8000b0"))
    assert header.length == 0x8000


def test_empty_payload(springcore):
    record = springcore.feed("0c5b0000b1")
    assert str(record.event) == "Tag inserted/removed"
    assert record.tag_info is None
    assert record.tag_data is None


def test_unknown_codes_are_placeholders(springcore):
    record = springcore.feed(apdu(bytes.fromhex("c10420039900"), cla=0x42, evt=0x01))
    assert record.cla == Unknown(0x42, "class")
    assert str(record.cla) == "Unknown class[0x42]"
    assert str(record.event) == "Unknown event[0x01]"
    assert record.tag_info.protocol == Unknown(0x99, "protocol")


def test_pass_through_tags(springcore):
    payload = bytes.fromhex("85020301" "c00105" "c2030a0b0c")
    record = springcore.feed(apdu(payload))
    assert record.interfaces_and_protocols == "0301"
    assert record.tag_index == "05"
    assert record.tag_id == "0a0b0c"


def test_repeated_tag_last_wins(springcore):
    frame = springcore.submit(apdu(bytes.fromhex("c201aac201bb")))
    assert len(frame.tlvs) == 2
    assert springcore.decode(frame).tag_id == "bb"


def test_data_without_tag_info_stays_hex(springcore):
    record = springcore.feed(apdu(bytes.fromhex("c3026869")))
    assert record.tag_data == "6869"


def test_details_utf8(springcore):
    payload = bytes.fromhex("c10490840000" "c3026869" "c4026869")
    record = springcore.feed(apdu(payload))
    info = record.tag_info
    assert info.new and info.details_utf8 and not info.data_utf8
    assert str(info.interface) == "Bluetooth interface"
    assert str(info.protocol) == "Unknown protocol[0x00]"
    assert record.tag_data == "6869"
    assert record.tag_details == "hi"


def test_tag_info_bad_length(springcore):
    frame = springcore.submit(apdu(bytes.fromhex("c103200301")))
    assert springcore.buffered() == 0
    with pytest.raises(InvalidLength, match=r"\[3\]"):
        springcore.decode(frame)


def test_tag_info_missing_interface(springcore):
    with pytest.raises(MissingInterface):
        springcore.feed(apdu(bytes.fromhex("c10420070100")))
    assert springcore.sources() == []


def test_decode_tag_info_uhf():
    info = decode_tag_info(bytes.fromhex("00060302"))
    assert str(info.protocol) == "ISO/IEC 18000-6C / EPC Class 1 Gen2 UHF"
    assert info.template == 2


def test_long_header_across_chunks(springcore):
    data = apdu(bytes.fromhex(TAG_INFO_HF + "c303616263"), pcb=0x9C)
    assert springcore.submit(data[:12], "r1") == Pending(source="r1", buffered=6)
    assert springcore.submit(data[12:18], "r1") == Pending(source="r1", buffered=9)
    record = springcore.feed(data[18:], "r1")
    assert record.header_long
    assert record.length == len(data) // 2 - 7
    assert record.tag_data == "abc"
    assert springcore.sources() == []
