"""Rational numbers as a numerator/denominator pair."""

from __future__ import annotations

import math
from dataclasses import dataclass

INT_MIN = -(2**31)


@dataclass(frozen=True)
class Rational:
    """A rational number ``num / den``; it is not reduced."""

    num: int
    den: int

    def compare(self, other: "Rational") -> int:
        """Compare with ``other``; see :func:`cmp_q`."""
        return cmp_q(self, other)

    def to_float(self) -> float:
        """Return the value as a float; a zero denominator gives inf or nan."""
        if self.den == 0:
            if self.num == 0:
                return math.nan
            return math.inf if self.num > 0 else -math.inf
        return self.num / self.den

    def inverse(self) -> "Rational":
        """Return ``1 / self`` by swapping numerator and denominator."""
        return Rational(self.den, self.num)

    def __float__(self) -> float:
        return self.to_float()


def cmp_q(a: Rational, b: Rational) -> int:
    """Return 0 if a == b, 1 if a > b, -1 if a < b.

    INT_MIN is returned when one of the values is of the form 0/0.
    """
    tmp = a.num * b.den - b.num * a.den
    if tmp:
        return -1 if (tmp ^ a.den ^ b.den) < 0 else 1
    if b.den and a.den:
        return 0
    if a.num and b.num:
        return (-1 if a.num < 0 else 0) - (-1 if b.num < 0 else 0)
    return INT_MIN