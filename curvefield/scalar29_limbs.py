"""Limb arithmetic modulo the group order l using nine 29-bit limbs.

A scalar is a sequence of nine limbs x[0..8] with value sum(x[i] * 2^(29 i)).
Products are reduced with Montgomery reduction, with R = 2^261.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

LIMB_BITS = 29
_MASK = (1 << LIMB_BITS) - 1
_U32_MASK = (1 << 32) - 1
_U64_MASK = (1 << 64) - 1

Limbs = Tuple[int, int, int, int, int, int, int, int, int]

#: The order of the prime-order subgroup.
L_VALUE = 2**252 + 27742317777372353535851937790883648493
#: The Montgomery modulus exponent: R = 2^261.
R_BITS = 261


def split(value: int) -> Limbs:
    """Split a non-negative integer below 2^261 into nine 29-bit limbs."""
    return tuple(  # type: ignore[return-value]
        (value >> (LIMB_BITS * i)) & _MASK for i in range(9)
    )


#: l as nine limbs.
L: Limbs = split(L_VALUE)
#: R mod l as nine limbs.
R: Limbs = split(pow(2, R_BITS, L_VALUE))
#: R^2 mod l as nine limbs.
RR: Limbs = split(pow(2, 2 * R_BITS, L_VALUE))

# -l^(-1) mod 2^29, which picks the Montgomery adjustment for each limb.
_LFACTOR = (-pow(L_VALUE, -1, 1 << LIMB_BITS)) % (1 << LIMB_BITS)


def _checked(limbs: Iterable[int], count: int) -> List[int]:
    values = [int(x) for x in limbs]
    if len(values) != count:
        raise ValueError(f"expected {count} limbs, got {len(values)}")
    if any(x < 0 for x in values):
        raise ValueError("limbs must be non-negative")
    return values


def add_limbs(a: Sequence[int], b: Sequence[int]) -> Limbs:
    """Compute a + b (mod l) for reduced inputs."""
    xs = _checked(a, 9)
    ys = _checked(b, 9)
    total = []
    carry = 0
    for x, y in zip(xs, ys):
        carry = (x + y + (carry >> LIMB_BITS)) & _U32_MASK
        total.append(carry & _MASK)
    # Subtract l if the sum is at least l.
    return sub_limbs(total, L)


def sub_limbs(a: Sequence[int], b: Sequence[int]) -> Limbs:
    """Compute a - b (mod l) for reduced inputs."""
    xs = _checked(a, 9)
    ys = _checked(b, 9)
    difference = []
    borrow = 0
    for x, y in zip(xs, ys):
        borrow = (x - (y + (borrow >> 31))) & _U32_MASK
        difference.append(borrow & _MASK)

    # Add l back when the difference went negative.
    underflow_mask = (((borrow >> 31) ^ 1) - 1) & _U32_MASK
    result = []
    carry = 0
    for d, l_limb in zip(difference, L):
        carry = (carry >> LIMB_BITS) + d + (l_limb & underflow_mask)
        result.append(carry & _MASK)
    return tuple(result)  # type: ignore[return-value]


def mul_internal(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """Return the seventeen unreduced coefficients of a * b."""
    xs = _checked(a, 9)
    ys = _checked(b, 9)
    z = [0] * 17
    for i, x in enumerate(xs):
        for j, y in enumerate(ys):
            z[i + j] += x * y
    return z


def square_internal(a: Sequence[int]) -> List[int]:
    """Return the seventeen unreduced coefficients of a^2."""
    xs = _checked(a, 9)
    z = [0] * 17
    for i, x in enumerate(xs):
        z[2 * i] += x * x
        for j in range(i + 1, 9):
            z[i + j] += 2 * x * xs[j]
    return z


def montgomery_reduce(limbs: Sequence[int]) -> Limbs:
    """Compute limbs / R (mod l), where R = 2^261."""
    values = _checked(limbs, 17)
    n: List[int] = []
    r: List[int] = []
    carry = 0
    for i, limb in enumerate(values):
        total = carry + limb + sum(
            n[j] * L[i - j] for j in range(max(0, i - 8), min(i, 9))
        )
        if i < 9:
            # Choose n_i so that the running sum becomes divisible by 2^29.
            p = ((total & _U32_MASK) * _LFACTOR) & _MASK
            carry = (total + p * L[0]) >> LIMB_BITS
            n.append(p)
        else:
            # The low half is now zero; keep the high half as the result.
            r.append(total & _MASK)
            carry = total >> LIMB_BITS
    r.append(carry & _U32_MASK)
    # The result may be at least l, so try subtracting l once.
    return sub_limbs(r, L)