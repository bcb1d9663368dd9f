"""Software floating point with a 32-bit mantissa and a separate exponent."""

from __future__ import annotations

from dataclasses import dataclass

MIN_EXP = -126
MAX_EXP = 126
ONE_BITS = 29


def _i32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _trunc_div(n: int, d: int) -> int:
    q = abs(n) // abs(d)
    return -q if (n < 0) != (d < 0) else q


@dataclass(frozen=True)
class SoftFloat:
    """The value ``mant * 2**(exp - ONE_BITS)``."""

    exp: int
    mant: int

    def normalize(self) -> "SoftFloat":
        """Shift the mantissa up until it uses its full precision."""
        if not self.mant:
            return SoftFloat(MIN_EXP, self.mant)
        exp, mant = self.exp, _i32(self.mant)
        while -0x20000000 <= mant < 0x20000000:
            mant += mant
            exp -= 1
        if exp < MIN_EXP:
            return SoftFloat(MIN_EXP, 0)
        return SoftFloat(exp, mant)

    def normalize1(self) -> "SoftFloat":
        """Bring a mantissa that overflowed by one bit back into range."""
        if _i32(self.mant + 0x40000000) < 0:
            return SoftFloat(self.exp + 1, self.mant >> 1)
        return self

    def mul(self, other: "SoftFloat") -> "SoftFloat":
        """Multiply; the result is no less normalized than the inputs."""
        mant = _i32((self.mant * other.mant) >> ONE_BITS)
        return SoftFloat(self.exp + other.exp, mant).normalize1()

    def div(self, other: "SoftFloat") -> "SoftFloat":
        """Divide by a normalized, non-zero ``other``."""
        if other.mant == 0:
            raise ZeroDivisionError("SoftFloat division by zero")
        mant = _i32(_trunc_div(self.mant << (ONE_BITS + 1), other.mant))
        return SoftFloat(self.exp - (other.exp + 1), mant).normalize1()

    def cmp(self, other: "SoftFloat") -> int:
        """Return a value whose sign gives the ordering of self and other."""
        t = self.exp - other.exp
        if t < 0:
            return (self.mant >> -t) - other.mant
        return self.mant - (other.mant >> t)

    def add(self, other: "SoftFloat") -> "SoftFloat":
        """Add ``other``; an operand far smaller than the other is dropped."""
        t = self.exp - other.exp
        if t < -31:
            return other
        if t < 0:
            return SoftFloat(other.exp, _i32(other.mant + (self.mant >> -t))).normalize1()
        if t < 32:
            return SoftFloat(self.exp, _i32(self.mant + (other.mant >> t))).normalize1()
        return self

    def sub(self, other: "SoftFloat") -> "SoftFloat":
        """Subtract ``other``."""
        return self.add(SoftFloat(other.exp, -other.mant))

    def to_int(self, frac_bits: int) -> int:
        """Convert to a fixed-point integer, rounding towards minus infinity."""
        exp = self.exp + frac_bits - ONE_BITS
        if exp >= 0:
            return _i32(self.mant << exp)
        return self.mant >> -exp

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __truediv__ = div


def int_to_sf(value: int, frac_bits: int) -> SoftFloat:
    """Build a normalized SoftFloat from a fixed-point integer."""
    return SoftFloat(ONE_BITS - frac_bits, value).normalize()