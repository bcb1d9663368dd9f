"""Size-checked buffer allocation helpers built on ``bytearray``.

Every allocation is bounded by a configurable maximum block size. A request
that cannot be satisfied raises :class:`MemoryError`.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

INT_MAX = 2**31 - 1
SIZE_MAX = 2**64 - 1

_Buffer = bytearray
_Text = Union[str, bytes, bytearray]


def size_mult(a: int, b: int) -> int:
    """Return ``a * b``; raise ValueError if it does not fit in a size_t."""
    if a < 0 or b < 0:
        raise ValueError("sizes must be non-negative")
    product = a * b
    if product > SIZE_MAX:
        raise ValueError(f"size overflow: {a} * {b}")
    return product


def grown_size(min_size: int) -> int:
    """Return the padded size used when a buffer has to grow to ``min_size``."""
    padded = (17 * min_size) & SIZE_MAX
    padded = (padded // 16 + 32) & SIZE_MAX
    return max(padded, min_size)


def strndup(s: Optional[_Text], length: int) -> Optional[_Text]:
    """Copy at most ``length`` characters of ``s``, stopping at a NUL."""
    if s is None:
        return None
    if isinstance(s, (bytes, bytearray)):
        head = bytes(s[:length])
        nul = head.find(b"\0")
    else:
        head = s[:length]
        nul = head.find("\0")
    return head if nul < 0 else head[:nul]


def _array_size(nmemb: int, size: int) -> int:
    if size <= 0 or nmemb >= INT_MAX // size:
        raise MemoryError(f"array of {nmemb} x {size} bytes is too large")
    return nmemb * size


class Allocator:
    """Hands out ``bytearray`` blocks no larger than a configured maximum."""

    def __init__(self, max_alloc_size: int = INT_MAX) -> None:
        self.max_alloc_size = max_alloc_size

    def set_max_alloc(self, size: int) -> None:
        """Set the maximum size that may be allocated in one block."""
        self.max_alloc_size = size

    def _check(self, size: int) -> None:
        # The limit is computed in size_t arithmetic, so a tiny maximum wraps.
        limit = (self.max_alloc_size - 32) & SIZE_MAX
        if size < 0 or size > limit:
            raise MemoryError(f"allocation of {size} bytes exceeds the limit")

    def malloc(self, size: int) -> _Buffer:
        """Allocate a block of ``size`` bytes; a zero size yields one byte."""
        self._check(size)
        return bytearray(size if size else 1)

    def mallocz(self, size: int) -> _Buffer:
        """Allocate a zero-filled block of ``size`` bytes."""
        return self.malloc(size)

    def realloc(self, buf: Optional[_Buffer], size: int) -> _Buffer:
        """Resize ``buf`` in place to ``size`` bytes, or allocate if None.

        The contents up to the smaller of the two sizes are kept; a zero size
        yields a one-byte block.
        """
        self._check(size)
        target = size if size else 1
        if buf is None:
            return bytearray(target)
        current = len(buf)
        if target < current:
            del buf[target:]
        elif target > current:
            buf.extend(bytes(target - current))
        return buf

    def realloc_f(self, buf: Optional[_Buffer], nelem: int, elsize: int) -> _Buffer:
        """Resize ``buf`` to ``nelem * elsize`` bytes, checking for overflow."""
        try:
            size = size_mult(elsize, nelem)
        except ValueError as exc:
            raise MemoryError(str(exc)) from exc
        return self.realloc(buf, size)

    def realloc_array(self, buf: Optional[_Buffer], nmemb: int, size: int) -> _Buffer:
        """Resize ``buf`` to hold ``nmemb`` elements of ``size`` bytes."""
        return self.realloc(buf, _array_size(nmemb, size))

    def malloc_array(self, nmemb: int, size: int) -> _Buffer:
        """Allocate room for ``nmemb`` elements of ``size`` bytes."""
        return self.malloc(_array_size(nmemb, size))

    def mallocz_array(self, nmemb: int, size: int) -> _Buffer:
        """Allocate zeroed room for ``nmemb`` elements of ``size`` bytes."""
        return self.mallocz(_array_size(nmemb, size))

    def calloc(self, nmemb: int, size: int) -> _Buffer:
        """Allocate a zeroed block of ``nmemb * size`` bytes."""
        return self.mallocz(_array_size(nmemb, size))

    def memdup(self, data: Optional[Union[bytes, bytearray, memoryview]]) -> Optional[_Buffer]:
        """Return a freshly allocated copy of ``data``, or None for None."""
        if data is None:
            return None
        raw = bytes(data)
        buf = self.malloc(len(raw))
        buf[: len(raw)] = raw
        return buf

    def fast_realloc(
        self, buf: Optional[_Buffer], allocated: int, min_size: int
    ) -> Tuple[Optional[_Buffer], int]:
        """Grow ``buf`` only if it is smaller than ``min_size``.

        Returns the buffer and its new allocated size; contents are kept.
        """
        if min_size < allocated:
            return buf, allocated
        new_size = grown_size(min_size)
        return self.realloc(buf, new_size), new_size

    def fast_malloc(
        self,
        buf: Optional[_Buffer],
        allocated: int,
        min_size: int,
        zero: bool = False,
    ) -> Tuple[Optional[_Buffer], int]:
        """Reuse ``buf`` if large enough, otherwise allocate a new block.

        Unlike :meth:`fast_realloc` the old contents are not preserved.
        """
        if min_size < allocated:
            return buf, allocated
        new_size = grown_size(min_size)
        fresh = self.mallocz(new_size) if zero else self.malloc(new_size)
        return fresh, new_size