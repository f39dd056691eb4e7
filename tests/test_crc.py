import pytest

from netlab import crc


def test_textbook_example():
    assert crc.encode("100100", "1101") == "100100001"


@pytest.mark.parametrize("key", ["1101", "1011", crc.CRC_12, crc.CRC_16])
@pytest.mark.parametrize("data", ["1", "100100", "1101011011", "0000", "1111111111111111"])
def test_encoded_frame_has_no_error(data, key):
    frame = crc.encode(data, key)
    assert frame.startswith(data)
    assert len(frame) == len(data) + len(key) - 1
    assert not crc.has_error(frame, key)


@pytest.mark.parametrize("key", ["1101", crc.CRC_12, crc.CRC_16])
def test_single_bit_flip_is_detected(key):
    frame = crc.encode("1101011011", key)
    for position, bit in enumerate(frame):
        flipped = frame[:position] + ("0" if bit == "1" else "1") + frame[position + 1:]
        assert crc.has_error(flipped, key)


def test_remainder_length_is_key_length_minus_one():
    for key in ("11", "1101", crc.CRC_12, crc.CRC_16):
        assert len(crc.mod2div("1011011101" * 3, key)) == len(key) - 1


def test_remainder_of_encoded_frame_is_all_zero():
    frame = crc.encode("1010101", crc.CRC_16)
    assert crc.mod2div(frame, crc.CRC_16) == "0" * (len(crc.CRC_16) - 1)


def test_remainder_of_key_itself_is_zero():
    assert crc.mod2div(crc.CRC_12, crc.CRC_12) == "0" * (len(crc.CRC_12) - 1)


def test_non_binary_input_rejected():
    with pytest.raises(ValueError):
        crc.mod2div("10201", "1101")
    with pytest.raises(ValueError):
        crc.encode("1010", "11a1")


def test_empty_key_rejected():
    with pytest.raises(ValueError):
        crc.encode("1010", "")