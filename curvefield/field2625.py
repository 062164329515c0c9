"""Arithmetic in GF(2^255 - 19) using ten limbs in radix 2^25.5."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from curvefield.limbs2625 import pack, reduce, unpack

_U32_MASK = (1 << 32) - 1

# 16 * p split into radix-2^25.5 limbs; added before subtracting to avoid underflow.
_SIXTEEN_P = (
    0x3FFFFED << 4,
    0x1FFFFFF << 4,
    0x3FFFFFF << 4,
    0x1FFFFFF << 4,
    0x3FFFFFF << 4,
    0x1FFFFFF << 4,
    0x3FFFFFF << 4,
    0x1FFFFFF << 4,
    0x3FFFFFF << 4,
    0x1FFFFFF << 4,
)


def _check_choice(choice: int) -> int:
    if choice not in (0, 1):
        raise ValueError(f"choice must be 0 or 1, got {choice!r}")
    return int(choice)


def _product_coefficients(x: Tuple[int, ...], y: Tuple[int, ...]) -> List[int]:
    """Return the ten unreduced coefficients of x * y.

    A product x[i] * y[j] lands in limb (i + j) mod 10.  It is doubled when
    both i and j are odd (the radix is fractional) and multiplied by 19 when
    it wraps past 2^255, since 2^255 = 19 mod p.
    """
    z = [0] * 10
    for i, xi in enumerate(x):
        for j, yj in enumerate(y):
            term = xi * yj
            if i % 2 and j % 2:
                term *= 2
            if i + j >= 10:
                term *= 19
            z[(i + j) % 10] += term
    return z


class FieldElement2625:
    """An element of the field Z / (2^255 - 19), held as ten limbs.

    Limbs alternate between 26 and 25 bits and may grow somewhat between
    reductions; equality compares canonical encodings.
    """

    __slots__ = ("_limbs",)

    def __init__(self, limbs: Iterable[int]) -> None:
        values = tuple(int(x) for x in limbs)
        if len(values) != 10:
            raise ValueError(f"expected 10 limbs, got {len(values)}")
        if any(x < 0 for x in values):
            raise ValueError("limbs must be non-negative")
        self._limbs = values

    @property
    def limbs(self) -> Tuple[int, ...]:
        """The raw (possibly unreduced) limbs."""
        return self._limbs

    def __repr__(self) -> str:
        return f"FieldElement2625({list(self._limbs)!r})"

    @classmethod
    def zero(cls) -> "FieldElement2625":
        """Return zero."""
        return cls((0,) * 10)

    @classmethod
    def one(cls) -> "FieldElement2625":
        """Return one."""
        return cls((1,) + (0,) * 9)

    @classmethod
    def minus_one(cls) -> "FieldElement2625":
        """Return -1, i.e. p - 1."""
        return cls(
            (
                0x3FFFFEC, 0x1FFFFFF, 0x3FFFFFF, 0x1FFFFFF, 0x3FFFFFF,
                0x1FFFFFF, 0x3FFFFFF, 0x1FFFFFF, 0x3FFFFFF, 0x1FFFFFF,
            )
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "FieldElement2625":
        """Load an element from the low 255 bits of 32 little-endian bytes.

        The high bit is ignored and non-canonical inputs are accepted:
        2^255 - 18 decodes to 1.
        """
        return cls(unpack(data))

    def to_bytes(self) -> bytes:
        """Return the canonical 32-byte little-endian encoding."""
        return pack(self._limbs)

    def pow2k(self, k: int) -> "FieldElement2625":
        """Given k > 0, return self^(2^k)."""
        if k <= 0:
            raise ValueError(f"k must be positive, got {k}")
        result = self.square()
        for _ in range(k - 1):
            result = result.square()
        return result

    def square(self) -> "FieldElement2625":
        """Return self^2."""
        return type(self)(reduce(_product_coefficients(self._limbs, self._limbs)))

    def square2(self) -> "FieldElement2625":
        """Return 2 * self^2."""
        coeffs = _product_coefficients(self._limbs, self._limbs)
        return type(self)(reduce(2 * c for c in coeffs))

    @classmethod
    def conditional_select(
        cls, a: "FieldElement2625", b: "FieldElement2625", choice: int
    ) -> "FieldElement2625":
        """Return a when choice is 0 and b when choice is 1."""
        mask = -_check_choice(choice) & _U32_MASK
        return cls(x ^ ((x ^ y) & mask) for x, y in zip(a._limbs, b._limbs))

    @classmethod
    def conditional_swap(
        cls, a: "FieldElement2625", b: "FieldElement2625", choice: int
    ) -> Tuple["FieldElement2625", "FieldElement2625"]:
        """Return (a, b), or (b, a) when choice is 1."""
        flag = _check_choice(choice)
        return (
            cls.conditional_select(a, b, flag),
            cls.conditional_select(b, a, flag),
        )

    def __add__(self, other: object) -> "FieldElement2625":
        if not isinstance(other, FieldElement2625):
            return NotImplemented
        return type(self)(x + y for x, y in zip(self._limbs, other._limbs))

    def __sub__(self, other: object) -> "FieldElement2625":
        if not isinstance(other, FieldElement2625):
            return NotImplemented
        return type(self)(
            reduce(
                (x + off) - y
                for x, y, off in zip(self._limbs, other._limbs, _SIXTEEN_P)
            )
        )

    def __mul__(self, other: object) -> "FieldElement2625":
        if not isinstance(other, FieldElement2625):
            return NotImplemented
        return type(self)(reduce(_product_coefficients(self._limbs, other._limbs)))

    def __neg__(self) -> "FieldElement2625":
        return type(self)(reduce(off - x for x, off in zip(self._limbs, _SIXTEEN_P)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldElement2625):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __hash__(self) -> int:
        return hash(self.to_bytes())