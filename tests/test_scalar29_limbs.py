import pytest
from hypothesis import given, strategies as st

from curvefield.scalar29_limbs import (
    L,
    L_VALUE,
    R_BITS,
    add_limbs,
    montgomery_reduce,
    mul_internal,
    split,
    square_internal,
    sub_limbs,
)

X = (
    0x1FFFFFFF, 0x1FFFFFFF, 0x1FFFFFFF, 0x1FFFFFFF,
    0x1FFFFFFF, 0x1FFFFFFF, 0x1FFFFFFF, 0x1FFFFFFF,
    0x001FFFFF,
)
XX_MONT = (
    0x152B4D2E, 0x0571D53B, 0x1DA6D964, 0x188663B6,
    0x1D1B5F92, 0x19D50E3F, 0x12306C29, 0x0C6F26FE,
    0x00030EDB,
)
Y = (
    0x1E1458FA, 0x165BA838, 0x1D787B36, 0x0E577F3A,
    0x1D2BAF06, 0x1D689A19, 0x1FFF3047, 0x117704AB,
    0x000D9601,
)
XY_MONT = (
    0x077B51E1, 0x1C64E119, 0x02A19EF5, 0x18D2129E,
    0x00DE0430, 0x045A7BC8, 0x04CFC7C9, 0x1C002681,
    0x000BDC1C,
)
A = (
    0x07B3BE89, 0x02291B60, 0x14A99F03, 0x07DC3787,
    0x0A782AAE, 0x16262525, 0x0CFDB93F, 0x13F5718D,
    0x000532DA,
)
B = (
    0x15421564, 0x1E69FD72, 0x093D9692, 0x161785BE,
    0x1587D69F, 0x09D9DADA, 0x130246C0, 0x0C0A8E72,
    0x000ACD25,
)
AB = (
    0x0F677D12, 0x045236C0, 0x09533E06, 0x0FB86F0F,
    0x14F0555C, 0x0C4C4A4A, 0x19FB727F, 0x07EAE31A,
    0x000A65B5,
)
ZERO = (0,) * 9


def value(limbs):
    return sum(limb << (29 * i) for i, limb in enumerate(limbs))


scalars = st.integers(min_value=0, max_value=L_VALUE - 1)


def test_montgomery_mul_max():
    assert montgomery_reduce(mul_internal(X, X)) == XX_MONT


def test_montgomery_square_max():
    assert montgomery_reduce(square_internal(X)) == XX_MONT


def test_montgomery_mul():
    assert montgomery_reduce(mul_internal(X, Y)) == XY_MONT


def test_add_to_zero():
    assert add_limbs(A, B) == ZERO


def test_sub():
    assert sub_limbs(A, B) == AB


def test_l_limbs_encode_l():
    assert value(L) == L_VALUE
    assert sub_limbs(L, L) == ZERO


def test_square_internal_matches_mul_internal_for_max():
    assert square_internal(X) == mul_internal(X, X)


@given(scalars, scalars)
def test_add_is_modular(a, b):
    assert value(add_limbs(split(a), split(b))) == (a + b) % L_VALUE


@given(scalars, scalars)
def test_sub_is_modular(a, b):
    assert value(sub_limbs(split(a), split(b))) == (a - b) % L_VALUE


@given(scalars, scalars)
def test_add_then_sub_round_trip(a, b):
    total = add_limbs(split(a), split(b))
    assert sub_limbs(total, split(b)) == split(a)


@given(scalars, scalars)
def test_mul_internal_preserves_product(a, b):
    assert value(mul_internal(split(a), split(b))) == a * b


@given(scalars)
def test_square_internal_preserves_square(a):
    assert value(square_internal(split(a))) == a * a


@given(scalars, scalars)
def test_montgomery_reduce_divides_by_r(a, b):
    reduced = montgomery_reduce(mul_internal(split(a), split(b)))
    result = value(reduced)
    assert result < L_VALUE
    assert (result << R_BITS) % L_VALUE == (a * b) % L_VALUE


@given(scalars)
def test_reduced_limbs_fit_in_29_bits(a):
    reduced = montgomery_reduce(square_internal(split(a)))
    assert all(0 <= limb < (1 << 29) for limb in reduced)


def test_wrong_limb_count_rejected():
    with pytest.raises(ValueError):
        add_limbs(X[:8], Y)
    with pytest.raises(ValueError):
        mul_internal(X, Y + (0,))
    with pytest.raises(ValueError):
        montgomery_reduce([0] * 9)


def test_negative_limb_rejected():
    with pytest.raises(ValueError):
        sub_limbs((-1,) + (0,) * 8, ZERO)