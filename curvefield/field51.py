"""Arithmetic in GF(2^255 - 19) using five 51-bit limbs."""

from __future__ import annotations

from typing import Iterable, Tuple

_LOW_51_BIT_MASK = (1 << 51) - 1
_U64_MASK = (1 << 64) - 1

# 16 * p, split into radix-2^51 limbs; added before subtracting to avoid underflow.
_SIXTEEN_P0 = 36028797018963664
_SIXTEEN_P = 36028797018963952


def _check_choice(choice: int) -> int:
    if choice not in (0, 1):
        raise ValueError(f"choice must be 0 or 1, got {choice!r}")
    return int(choice)


def _reduce(limbs: Iterable[int]) -> Tuple[int, int, int, int, int]:
    """Weakly reduce limbs so that each is bounded by 2^(51 + epsilon)."""
    l0, l1, l2, l3, l4 = limbs
    c0, c1, c2, c3, c4 = (l >> 51 for l in (l0, l1, l2, l3, l4))
    return (
        (l0 & _LOW_51_BIT_MASK) + c4 * 19,
        (l1 & _LOW_51_BIT_MASK) + c0,
        (l2 & _LOW_51_BIT_MASK) + c1,
        (l3 & _LOW_51_BIT_MASK) + c2,
        (l4 & _LOW_51_BIT_MASK) + c3,
    )


def _carry_out(c0: int, c1: int, c2: int, c3: int, c4: int) -> Tuple[int, int, int, int, int]:
    """Carry wide coefficients down to limbs of about 51 bits."""
    c1 += (c0 >> 51) & _U64_MASK
    out0 = c0 & _LOW_51_BIT_MASK
    c2 += (c1 >> 51) & _U64_MASK
    out1 = c1 & _LOW_51_BIT_MASK
    c3 += (c2 >> 51) & _U64_MASK
    out2 = c2 & _LOW_51_BIT_MASK
    c4 += (c3 >> 51) & _U64_MASK
    out3 = c3 & _LOW_51_BIT_MASK
    carry = (c4 >> 51) & _U64_MASK
    out4 = c4 & _LOW_51_BIT_MASK

    out0 += carry * 19
    out1 += out0 >> 51
    out0 &= _LOW_51_BIT_MASK
    return out0, out1, out2, out3, out4


class FieldElement51:
    """An element of the field Z / (2^255 - 19), held as five 51-bit limbs.

    Limbs may grow up to about 2^54 between reductions; equality compares
    the canonical encodings, so different limb forms of one value are equal.
    """

    __slots__ = ("_limbs",)

    def __init__(self, limbs: Iterable[int]) -> None:
        values = tuple(int(x) for x in limbs)
        if len(values) != 5:
            raise ValueError(f"expected 5 limbs, got {len(values)}")
        if any(x < 0 for x in values):
            raise ValueError("limbs must be non-negative")
        self._limbs = values

    @property
    def limbs(self) -> Tuple[int, ...]:
        """The raw (possibly unreduced) limbs."""
        return self._limbs

    def __repr__(self) -> str:
        return f"FieldElement51({list(self._limbs)!r})"

    @classmethod
    def zero(cls) -> "FieldElement51":
        """Return zero."""
        return cls((0, 0, 0, 0, 0))

    @classmethod
    def one(cls) -> "FieldElement51":
        """Return one."""
        return cls((1, 0, 0, 0, 0))

    @classmethod
    def minus_one(cls) -> "FieldElement51":
        """Return -1, i.e. p - 1."""
        full = _LOW_51_BIT_MASK
        return cls((full - 19, full, full, full, full))

    @classmethod
    def from_bytes(cls, data: bytes) -> "FieldElement51":
        """Load an element from the low 255 bits of 32 little-endian bytes.

        The high bit is ignored and non-canonical inputs are accepted:
        2^255 - 18 decodes to 1.
        """
        data = bytes(data)
        if len(data) != 32:
            raise ValueError(f"expected 32 bytes, got {len(data)}")
        value = int.from_bytes(data, "little")
        return cls(
            (value >> (51 * i)) & _LOW_51_BIT_MASK for i in range(5)
        )

    def to_bytes(self) -> bytes:
        """Return the canonical 32-byte little-endian encoding."""
        limbs = list(_reduce(self._limbs))

        # q is the carry bit of h + 19, which is 1 exactly when h >= p.
        q = (limbs[0] + 19) >> 51
        for limb in limbs[1:]:
            q = (limb + q) >> 51

        limbs[0] += 19 * q
        for i in range(4):
            limbs[i + 1] += limbs[i] >> 51
            limbs[i] &= _LOW_51_BIT_MASK
        # Dropping the top carry subtracts q * 2^255.
        limbs[4] &= _LOW_51_BIT_MASK

        value = sum(limb << (51 * i) for i, limb in enumerate(limbs))
        return value.to_bytes(32, "little")

    def pow2k(self, k: int) -> "FieldElement51":
        """Given k > 0, return self^(2^k)."""
        if k <= 0:
            raise ValueError(f"k must be positive, got {k}")
        a0, a1, a2, a3, a4 = self._limbs
        for _ in range(k):
            a3_19 = 19 * a3
            a4_19 = 19 * a4
            c0 = a0 * a0 + 2 * (a1 * a4_19 + a2 * a3_19)
            c1 = a3 * a3_19 + 2 * (a0 * a1 + a2 * a4_19)
            c2 = a1 * a1 + 2 * (a0 * a2 + a4 * a3_19)
            c3 = a4 * a4_19 + 2 * (a0 * a3 + a1 * a2)
            c4 = a2 * a2 + 2 * (a0 * a4 + a1 * a3)
            a0, a1, a2, a3, a4 = _carry_out(c0, c1, c2, c3, c4)
        return type(self)((a0, a1, a2, a3, a4))

    def square(self) -> "FieldElement51":
        """Return self^2."""
        return self.pow2k(1)

    def square2(self) -> "FieldElement51":
        """Return 2 * self^2."""
        return type(self)(2 * limb for limb in self.pow2k(1)._limbs)

    @classmethod
    def conditional_select(
        cls, a: "FieldElement51", b: "FieldElement51", choice: int
    ) -> "FieldElement51":
        """Return a when choice is 0 and b when choice is 1."""
        flag = _check_choice(choice)
        mask = -flag & _U64_MASK
        return cls(
            x ^ ((x ^ y) & mask) for x, y in zip(a._limbs, b._limbs)
        )

    @classmethod
    def conditional_swap(
        cls, a: "FieldElement51", b: "FieldElement51", choice: int
    ) -> Tuple["FieldElement51", "FieldElement51"]:
        """Return (a, b), or (b, a) when choice is 1."""
        flag = _check_choice(choice)
        return (
            cls.conditional_select(a, b, flag),
            cls.conditional_select(b, a, flag),
        )

    def __add__(self, other: object) -> "FieldElement51":
        if not isinstance(other, FieldElement51):
            return NotImplemented
        return type(self)(x + y for x, y in zip(self._limbs, other._limbs))

    def __sub__(self, other: object) -> "FieldElement51":
        if not isinstance(other, FieldElement51):
            return NotImplemented
        offsets = (_SIXTEEN_P0, _SIXTEEN_P, _SIXTEEN_P, _SIXTEEN_P, _SIXTEEN_P)
        return type(self)(
            _reduce(
                (x + off) - y
                for x, y, off in zip(self._limbs, other._limbs, offsets)
            )
        )

    def __mul__(self, other: object) -> "FieldElement51":
        if not isinstance(other, FieldElement51):
            return NotImplemented
        a0, a1, a2, a3, a4 = self._limbs
        b0, b1, b2, b3, b4 = other._limbs
        b1_19 = b1 * 19
        b2_19 = b2 * 19
        b3_19 = b3 * 19
        b4_19 = b4 * 19
        c0 = a0 * b0 + a4 * b1_19 + a3 * b2_19 + a2 * b3_19 + a1 * b4_19
        c1 = a1 * b0 + a0 * b1 + a4 * b2_19 + a3 * b3_19 + a2 * b4_19
        c2 = a2 * b0 + a1 * b1 + a0 * b2 + a4 * b3_19 + a3 * b4_19
        c3 = a3 * b0 + a2 * b1 + a1 * b2 + a0 * b3 + a4 * b4_19
        c4 = a4 * b0 + a3 * b1 + a2 * b2 + a1 * b3 + a0 * b4
        return type(self)(_carry_out(c0, c1, c2, c3, c4))

    def __neg__(self) -> "FieldElement51":
        offsets = (_SIXTEEN_P0, _SIXTEEN_P, _SIXTEEN_P, _SIXTEEN_P, _SIXTEEN_P)
        return type(self)(
            _reduce(off - x for x, off in zip(self._limbs, offsets))
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldElement51):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __hash__(self) -> int:
        return hash(self.to_bytes())