# curvefield

Pure-Python arithmetic building blocks for Curve25519, with no dependencies
outside the standard library:

- `curvefield.field51.FieldElement51` is an element of GF(2^255 - 19), held as
  five 51-bit limbs.
- `curvefield.field2625.FieldElement2625` is the same field, held as ten limbs
  that alternate between 26 and 25 bits. Its limb helpers `reduce`, `unpack`
  and `pack` are in `curvefield.limbs2625`.
- `curvefield.scalar52.Scalar52` is an integer modulo the group order
  l = 2^252 + 27742317777372353535851937790883648493, held as five 52-bit limbs.
- `curvefield.scalar29_limbs` holds functions that work on scalars modulo l
  written as nine 29-bit limbs.

The two field classes give the same results; they differ only in how the
limbs are laid out.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Field elements

```python
from curvefield.field51 import FieldElement51

a = FieldElement51.from_bytes(bytes([9]) + bytes(31))
b = FieldElement51.one()

c = a * a + b           # addition, subtraction, multiplication, negation
assert c == a.square() + b
assert (-b) == FieldElement51.minus_one()
assert a.pow2k(3) == a.square().square().square()

encoded = c.to_bytes()  # canonical 32-byte little-endian encoding
```

`from_bytes` takes exactly 32 bytes, reads the low 255 bits and ignores the
top bit. It does not check that the input is canonical, so the encoding of
2^255 - 18 decodes to 1. `to_bytes` always returns the canonical encoding,
and `==` compares canonical encodings, so two elements with different limbs
but the same value are equal. The raw limbs are available as `.limbs`.

`square2()` returns 2 * self^2. `pow2k(k)` needs k > 0 and raises
`ValueError` otherwise.

`conditional_select(a, b, choice)` returns `a` when `choice` is 0 and `b` when
`choice` is 1. `conditional_swap(a, b, choice)` returns the pair, swapped when
`choice` is 1. Any other `choice` raises `ValueError`.

`FieldElement2625` in `curvefield.field2625` has the same interface.

## Scalars

```python
from curvefield.scalar52 import Scalar52

x = Scalar52.from_bytes(bytes([2]) + bytes(31))
y = Scalar52.from_bytes_wide(bytes([0xFF]) * 64)   # reduces a 512-bit value mod l

product = Scalar52.mul(x, y)
total = Scalar52.add(x, y)
difference = Scalar52.sub(x, y)

mont = x.to_montgomery()
assert mont.from_montgomery().to_bytes() == x.to_bytes()
```

`from_bytes` unpacks 32 bytes without reducing them; `add` and `sub` expect
inputs that are already below l. `montgomery_mul`, `montgomery_square` and
`montgomery_reduce` work with values in Montgomery form, where R = 2^260.
`mul_internal` returns the nine unreduced product coefficients. Indexing a
scalar, as in `x[0]`, gives back one of its limbs.

## 29-bit scalar limbs

`curvefield.scalar29_limbs` works on plain sequences of nine limbs, with
R = 2^261:

- `split(value)` turns an integer below 2^261 into nine limbs;
  `L`, `R` and `RR` are l, R mod l and R^2 mod l in that form.
- `add_limbs(a, b)` and `sub_limbs(a, b)` compute a + b and a - b mod l.
- `mul_internal(a, b)` and `square_internal(a)` return the seventeen
  unreduced product coefficients.
- `montgomery_reduce(limbs)` takes seventeen coefficients and returns
  limbs / R mod l.

There is no scalar class over these limbs: byte encoding and decoding, full
multiplication mod l and Montgomery-form conversion are offered only by
`Scalar52`.