"""Overlapping back-reference copy, as used by LZ-style decoders."""

from __future__ import annotations


def memcpy_backptr(buf: bytearray, pos: int, back: int, count: int) -> None:
    """Copy ``count`` bytes to ``buf[pos:]`` from ``back`` bytes earlier.

    The copy is allowed to overlap its own output: when ``count`` exceeds
    ``back`` the bytes just written are copied again, giving a pattern that
    repeats with period ``back``. A ``back`` of zero does nothing.
    """
    if back == 0:
        return
    if back < 0:
        raise ValueError("back distance must not be negative")
    if count < 0:
        raise ValueError("count must not be negative")
    if back > pos:
        raise ValueError(f"back distance {back} reaches before the buffer start")
    if pos + count > len(buf):
        raise ValueError("copy runs past the end of the buffer")

    pattern = bytes(buf[pos - back:pos])
    repeats, rest = divmod(count, back)
    buf[pos:pos + count] = pattern * repeats + pattern[:rest]