"""Arithmetic modulo the group order l = 2^252 + 27742317777372353535851937790883648493.

Scalars are held as five 52-bit limbs.  Reduction of 512-bit inputs and
multiplication both go through Montgomery reduction with R = 2^260.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

_LIMB_BITS = 52
_MASK = (1 << _LIMB_BITS) - 1
_TOP_MASK = (1 << 48) - 1
_U64_MASK = (1 << 64) - 1

#: The order of the prime-order subgroup.
L_VALUE = 2**252 + 27742317777372353535851937790883648493
#: The Montgomery modulus exponent: R = 2^260.
_R_BITS = 260


def _split(value: int) -> Tuple[int, int, int, int, int]:
    return tuple(  # type: ignore[return-value]
        (value >> (_LIMB_BITS * i)) & _MASK for i in range(5)
    )


_L = _split(L_VALUE)
# -l^(-1) mod 2^52, used to pick the Montgomery adjustment per limb.
_LFACTOR = (-pow(L_VALUE, -1, 1 << _LIMB_BITS)) % (1 << _LIMB_BITS)
# R mod l and R^2 mod l.
_R = _split(pow(2, _R_BITS, L_VALUE))
_RR = _split(pow(2, 2 * _R_BITS, L_VALUE))


def _part1(total: int) -> Tuple[int, int]:
    p = ((total & _U64_MASK) * _LFACTOR) & _U64_MASK & _MASK
    return (total + p * _L[0]) >> _LIMB_BITS, p


def _part2(total: int) -> Tuple[int, int]:
    return total >> _LIMB_BITS, total & _MASK


class Scalar52:
    """An element of Z / lZ held as five 52-bit limbs."""

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
        """The raw limbs, least significant first."""
        return self._limbs

    def __getitem__(self, index: int) -> int:
        return self._limbs[index]

    def __len__(self) -> int:
        return 5

    def __repr__(self) -> str:
        return f"Scalar52({[hex(x) for x in self._limbs]!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scalar52):
            return NotImplemented
        return self._limbs == other._limbs

    def __hash__(self) -> int:
        return hash(self._limbs)

    @classmethod
    def zero(cls) -> "Scalar52":
        """Return the zero scalar."""
        return cls((0, 0, 0, 0, 0))

    @classmethod
    def from_bytes(cls, data: bytes) -> "Scalar52":
        """Unpack 32 little-endian bytes into five 52-bit limbs, unreduced."""
        data = bytes(data)
        if len(data) != 32:
            raise ValueError(f"expected 32 bytes, got {len(data)}")
        value = int.from_bytes(data, "little")
        limbs = list(_split(value))
        limbs[4] = (value >> (_LIMB_BITS * 4)) & _TOP_MASK
        return cls(limbs)

    @classmethod
    def from_bytes_wide(cls, data: bytes) -> "Scalar52":
        """Reduce 64 little-endian bytes (a 512-bit integer) mod l."""
        data = bytes(data)
        if len(data) != 64:
            raise ValueError(f"expected 64 bytes, got {len(data)}")
        value = int.from_bytes(data, "little")
        lo = cls(_split(value))
        high = value >> _R_BITS
        hi_limbs = [(high >> (_LIMB_BITS * i)) & _MASK for i in range(4)]
        hi_limbs.append(high >> (_LIMB_BITS * 4))
        hi = cls(hi_limbs)

        lo = cls.montgomery_mul(lo, cls(_R))  # (lo * R) / R = lo
        hi = cls.montgomery_mul(hi, cls(_RR))  # (hi * R^2) / R = hi * R
        return cls.add(hi, lo)

    def to_bytes(self) -> bytes:
        """Pack the limbs into 32 little-endian bytes."""
        value = 0
        for i, limb in enumerate(self._limbs[:4]):
            value |= (limb & ((1 << 56) - 1)) << (_LIMB_BITS * i)
        value |= (self._limbs[4] & _TOP_MASK) << (_LIMB_BITS * 4)
        return (value & ((1 << 256) - 1)).to_bytes(32, "little")

    @staticmethod
    def add(a: "Scalar52", b: "Scalar52") -> "Scalar52":
        """Compute a + b (mod l)."""
        total = []
        carry = 0
        for x, y in zip(a._limbs, b._limbs):
            carry = (x + y + (carry >> _LIMB_BITS)) & _U64_MASK
            total.append(carry & _MASK)
        # Subtract l if the sum is at least l.
        return Scalar52.sub(Scalar52(total), Scalar52(_L))

    @staticmethod
    def sub(a: "Scalar52", b: "Scalar52") -> "Scalar52":
        """Compute a - b (mod l)."""
        difference = []
        borrow = 0
        for x, y in zip(a._limbs, b._limbs):
            borrow = (x - (y + (borrow >> 63))) & _U64_MASK
            difference.append(borrow & _MASK)

        # Add l back when the difference went negative.
        underflow_mask = (((borrow >> 63) ^ 1) - 1) & _U64_MASK
        result = []
        carry = 0
        for d, l_limb in zip(difference, _L):
            carry = (carry >> _LIMB_BITS) + d + (l_limb & underflow_mask)
            result.append(carry & _MASK)
        return Scalar52(result)

    @staticmethod
    def mul_internal(a: "Scalar52", b: "Scalar52") -> List[int]:
        """Return the nine unreduced coefficients of a * b."""
        z = [0] * 9
        for i, x in enumerate(a._limbs):
            for j, y in enumerate(b._limbs):
                z[i + j] += x * y
        return z

    @staticmethod
    def _square_internal(a: "Scalar52") -> List[int]:
        z = [0] * 9
        limbs = a._limbs
        for i, x in enumerate(limbs):
            z[2 * i] += x * x
            for j in range(i + 1, 5):
                z[i + j] += 2 * x * limbs[j]
        return z

    @staticmethod
    def montgomery_reduce(limbs: Sequence[int]) -> "Scalar52":
        """Compute limbs / R (mod l), where R = 2^260."""
        values = [int(x) for x in limbs]
        if len(values) != 9:
            raise ValueError(f"expected 9 limbs, got {len(values)}")
        n: List[int] = []
        r: List[int] = []
        carry = 0
        for i, limb in enumerate(values):
            total = carry + limb + sum(
                n[j] * _L[i - j] for j in range(max(0, i - 4), min(i, 5))
            )
            if i < 5:
                # Choose n_i so the running sum becomes divisible by 2^52.
                carry, n_i = _part1(total)
                n.append(n_i)
            else:
                # The low half is now zero; keep the high half as the result.
                carry, r_i = _part2(total)
                r.append(r_i)
        r.append(carry & _U64_MASK)
        # The result may be at least l, so try subtracting l once.
        return Scalar52.sub(Scalar52(r), Scalar52(_L))

    @staticmethod
    def mul(a: "Scalar52", b: "Scalar52") -> "Scalar52":
        """Compute a * b (mod l)."""
        ab = Scalar52.montgomery_reduce(Scalar52.mul_internal(a, b))
        return Scalar52.montgomery_reduce(Scalar52.mul_internal(ab, Scalar52(_RR)))

    def square(self) -> "Scalar52":
        """Compute self^2 (mod l)."""
        aa = Scalar52.montgomery_reduce(Scalar52._square_internal(self))
        return Scalar52.montgomery_reduce(Scalar52.mul_internal(aa, Scalar52(_RR)))

    @staticmethod
    def montgomery_mul(a: "Scalar52", b: "Scalar52") -> "Scalar52":
        """Compute (a * b) / R (mod l)."""
        return Scalar52.montgomery_reduce(Scalar52.mul_internal(a, b))

    def montgomery_square(self) -> "Scalar52":
        """Compute self^2 / R (mod l)."""
        return Scalar52.montgomery_reduce(Scalar52._square_internal(self))

    def to_montgomery(self) -> "Scalar52":
        """Put this scalar into Montgomery form: self * R (mod l)."""
        return Scalar52.montgomery_mul(self, Scalar52(_RR))

    def from_montgomery(self) -> "Scalar52":
        """Take this scalar out of Montgomery form: self / R (mod l)."""
        return Scalar52.montgomery_reduce(list(self._limbs) + [0, 0, 0, 0])