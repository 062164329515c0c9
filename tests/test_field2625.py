import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from curvefield.field51 import FieldElement51
from curvefield.field2625 import FieldElement2625

P = 2**255 - 19

elements = st.integers(min_value=0, max_value=P - 1)


def fe(value: int) -> FieldElement2625:
    return FieldElement2625.from_bytes(value.to_bytes(32, "little"))


def value_of(element: FieldElement2625) -> int:
    return int.from_bytes(element.to_bytes(), "little")


def test_zero_and_one_encodings():
    assert FieldElement2625.zero().to_bytes() == bytes(32)
    assert FieldElement2625.one().to_bytes() == b"\x01" + bytes(31)


def test_minus_one_encodes_p_minus_one():
    assert FieldElement2625.minus_one().to_bytes() == (P - 1).to_bytes(32, "little")


def test_minus_one_plus_one_is_zero():
    total = FieldElement2625.minus_one() + FieldElement2625.one()
    assert total == FieldElement2625.zero()


def test_non_canonical_input_decodes_to_one():
    data = (2**255 - 18).to_bytes(32, "little")
    assert FieldElement2625.from_bytes(data) == FieldElement2625.one()


def test_high_bit_is_ignored():
    data = bytearray((5).to_bytes(32, "little"))
    data[31] |= 0x80
    assert value_of(FieldElement2625.from_bytes(bytes(data))) == 5


def test_from_bytes_rejects_wrong_length():
    with pytest.raises(ValueError):
        FieldElement2625.from_bytes(bytes(31))


def test_constructor_rejects_wrong_limb_count():
    with pytest.raises(ValueError):
        FieldElement2625([0] * 9)


def test_constructor_rejects_negative_limbs():
    with pytest.raises(ValueError):
        FieldElement2625([-1] + [0] * 9)


def test_pow2k_rejects_zero():
    with pytest.raises(ValueError):
        FieldElement2625.one().pow2k(0)


def test_conditional_select_rejects_bad_choice():
    with pytest.raises(ValueError):
        FieldElement2625.conditional_select(
            FieldElement2625.zero(), FieldElement2625.one(), 2
        )


def test_conditional_select_picks_operand():
    a, b = fe(7), fe(11)
    assert FieldElement2625.conditional_select(a, b, 0).limbs == a.limbs
    assert FieldElement2625.conditional_select(a, b, 1).limbs == b.limbs


def test_conditional_swap():
    a, b = fe(7), fe(11)
    kept = FieldElement2625.conditional_swap(a, b, 0)
    swapped = FieldElement2625.conditional_swap(a, b, 1)
    assert (kept[0].limbs, kept[1].limbs) == (a.limbs, b.limbs)
    assert (swapped[0].limbs, swapped[1].limbs) == (b.limbs, a.limbs)


def test_arithmetic_with_other_types_is_rejected():
    with pytest.raises(TypeError):
        FieldElement2625.one() + 1


@settings(max_examples=50)
@given(elements)
def test_bytes_round_trip(x):
    assert value_of(fe(x)) == x


@settings(max_examples=50)
@given(elements, elements)
def test_add_sub_mul_match_integers(x, y):
    a, b = fe(x), fe(y)
    assert value_of(a + b) == (x + y) % P
    assert value_of(a - b) == (x - y) % P
    assert value_of(a * b) == (x * y) % P


@settings(max_examples=50)
@given(elements)
def test_negation(x):
    assert value_of(-fe(x)) == (-x) % P
    assert fe(x) + (-fe(x)) == FieldElement2625.zero()


@settings(max_examples=50)
@given(elements)
def test_square_and_square2(x):
    a = fe(x)
    assert a.square() == a * a
    assert value_of(a.square2()) == (2 * x * x) % P


@settings(max_examples=25)
@given(elements, st.integers(min_value=1, max_value=8))
def test_pow2k(x, k):
    assert value_of(fe(x).pow2k(k)) == pow(x, 2**k, P)


@settings(max_examples=50)
@given(elements, elements)
def test_agrees_with_field51(x, y):
    data_x = x.to_bytes(32, "little")
    data_y = y.to_bytes(32, "little")
    a, b = FieldElement2625.from_bytes(data_x), FieldElement2625.from_bytes(data_y)
    c, d = FieldElement51.from_bytes(data_x), FieldElement51.from_bytes(data_y)
    assert (a * b - a.square2()).to_bytes() == (c * d - c.square2()).to_bytes()


@settings(max_examples=30)
@given(elements, elements, elements)
def test_chained_operations_stay_correct(x, y, z):
    a, b, c = fe(x), fe(y), fe(z)
    result = (a + b + c) * (a - c) - b.square()
    expected = ((x + y + z) * (x - z) - y * y) % P
    assert value_of(result) == expected


@settings(max_examples=30)
@given(elements)
def test_equal_values_hash_equally(x):
    a = fe(x)
    b = (a + FieldElement2625.one()) - FieldElement2625.one()
    assert a == b
    assert hash(a) == hash(b)