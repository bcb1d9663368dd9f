import math
from fractions import Fraction

from hypothesis import given, strategies as st

from lavutil.rational import INT_MIN, Rational, cmp_q

int32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)
nonzero32 = int32.filter(lambda v: v != 0)


def test_greater_and_less():
    assert cmp_q(Rational(1, 2), Rational(1, 3)) == 1
    assert cmp_q(Rational(1, 3), Rational(1, 2)) == -1


def test_equal_unreduced_fractions():
    assert cmp_q(Rational(1, 2), Rational(2, 4)) == 0


def test_negative_denominator():
    assert cmp_q(Rational(1, -2), Rational(0, 1)) == -1


def test_zero_over_zero_is_int_min():
    assert cmp_q(Rational(0, 0), Rational(1, 2)) == INT_MIN


def test_infinities_ordering():
    assert cmp_q(Rational(1, 0), Rational(-1, 0)) == 1
    assert cmp_q(Rational(1, 0), Rational(2, 0)) == 0
    assert cmp_q(Rational(1, 0), Rational(5, 1)) == 1


def test_compare_method_matches_function():
    a, b = Rational(3, 7), Rational(2, 5)
    assert a.compare(b) == cmp_q(a, b)


def test_to_float():
    assert Rational(1, 4).to_float() == 0.25
    assert Rational(1, 0).to_float() == math.inf
    assert Rational(-1, 0).to_float() == -math.inf
    assert math.isnan(Rational(0, 0).to_float())


def test_inverse_swaps_terms():
    assert Rational(3, 7).inverse() == Rational(7, 3)


@given(int32, nonzero32, int32, nonzero32)
def test_cmp_matches_exact_comparison(an, ad, bn, bd):
    fa, fb = Fraction(an, ad), Fraction(bn, bd)
    expected = (fa > fb) - (fa < fb)
    assert cmp_q(Rational(an, ad), Rational(bn, bd)) == expected


@given(int32, nonzero32, int32, nonzero32)
def test_cmp_is_antisymmetric(an, ad, bn, bd):
    a, b = Rational(an, ad), Rational(bn, bd)
    assert cmp_q(a, b) == -cmp_q(b, a)


@given(int32, nonzero32)
def test_inverse_twice_is_identity(num, den):
    r = Rational(num, den)
    assert r.inverse().inverse() == r