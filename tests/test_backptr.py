import pytest
from hypothesis import given, strategies as st

from lavutil.backptr import memcpy_backptr


def test_repeating_pattern_period_two():
    buf = bytearray(b"ab" + bytes(6))
    memcpy_backptr(buf, 2, 2, 6)
    assert buf == bytearray(b"abababab")


def test_back_one_fills_with_single_byte():
    buf = bytearray(b"x" + bytes(9))
    memcpy_backptr(buf, 1, 1, 9)
    assert buf == bytearray(b"x" * 10)


def test_back_zero_leaves_buffer_untouched():
    buf = bytearray(b"hello")
    memcpy_backptr(buf, 2, 0, 3)
    assert buf == bytearray(b"hello")


def test_non_overlapping_copy():
    buf = bytearray(b"abcdef" + bytes(3))
    memcpy_backptr(buf, 6, 6, 3)
    assert buf == bytearray(b"abcdefabc")


def test_back_before_start_rejected():
    with pytest.raises(ValueError):
        memcpy_backptr(bytearray(10), 2, 3, 1)


def test_copy_past_end_rejected():
    with pytest.raises(ValueError):
        memcpy_backptr(bytearray(4), 2, 1, 3)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        memcpy_backptr(bytearray(4), 2, 1, -1)


@given(
    prefix=st.binary(min_size=1, max_size=40),
    tail=st.binary(max_size=10),
    count=st.integers(min_value=0, max_value=80),
    data=st.data(),
)
def test_each_output_byte_repeats_back_distance(prefix, tail, count, data):
    back = data.draw(st.integers(min_value=1, max_value=len(prefix)))
    pos = len(prefix)
    buf = bytearray(prefix + bytes(count) + tail)
    memcpy_backptr(buf, pos, back, count)
    assert bytes(buf[:pos]) == prefix
    assert bytes(buf[pos + count:]) == tail
    assert all(buf[i] == buf[i - back] for i in range(pos, pos + count))