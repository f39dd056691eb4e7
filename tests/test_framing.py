import pytest

from netlab.framing import char_count_deframe, char_count_frame


def test_frame_splits_evenly():
    assert char_count_frame("abcdef", 4) == "4abc4def"


def test_frame_short_last_frame():
    assert char_count_frame("abcde", 4) == "4abc3de"


def test_frame_empty_data():
    assert char_count_frame("", 5) == ""


@pytest.mark.parametrize("size", [0, 1, 11, -3])
def test_frame_rejects_bad_size(size):
    with pytest.raises(ValueError):
        char_count_frame("data", size)


def test_deframe_truncated_frame_keeps_available():
    assert char_count_deframe("5ab") == "ab"


def test_deframe_rejects_non_digit_count():
    with pytest.raises(ValueError):
        char_count_deframe("x12")