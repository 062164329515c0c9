"""Radix 2^25.5 limb helpers for GF(2^255 - 19).

A field element is held as ten limbs x[0..9] with value
sum(x[i] * 2^ceil(25.5 * i)); even limbs carry 26 bits and odd limbs 25.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

Limbs = Tuple[int, int, int, int, int, int, int, int, int, int]

_LOW_25_BITS = (1 << 25) - 1
_LOW_26_BITS = (1 << 26) - 1
_LOW_23_BITS = (1 << 23) - 1

# Bit width of each limb and its bit offset in the packed value.
_WIDTHS = (26, 25, 26, 25, 26, 25, 26, 25, 26, 25)
_OFFSETS = (0, 26, 51, 77, 102, 128, 153, 179, 204, 230)

# (byte offset, byte count, left shift) for loading each limb from 32 bytes.
_LOADS = (
    (0, 4, 0),
    (4, 3, 6),
    (7, 3, 5),
    (10, 3, 3),
    (13, 3, 2),
    (16, 4, 0),
    (20, 3, 7),
    (23, 3, 5),
    (26, 3, 4),
    (29, 3, 2),
)

# Carries are interleaved as two parallel chains, as in the reference order.
_CARRY_ORDER = (0, 4, 1, 5, 2, 6, 3, 7, 4, 8)


def _as_limbs(limbs: Iterable[int]) -> list:
    values = [int(x) for x in limbs]
    if len(values) != 10:
        raise ValueError(f"expected 10 limbs, got {len(values)}")
    if any(x < 0 for x in values):
        raise ValueError("limbs must be non-negative")
    return values


def _carry(z: list, i: int) -> None:
    """Carry the excess of limb i into limb i + 1."""
    width = _WIDTHS[i]
    z[i + 1] += z[i] >> width
    z[i] &= (1 << width) - 1


def reduce(limbs: Iterable[int]) -> Limbs:
    """Carry and reduce unreduced limbs mod p.

    Each limb of the result is bounded by about 2^(25 + 0.007) or
    2^(26 + 0.007) for inputs below 2^64; the value is unchanged mod p.
    """
    z = _as_limbs(limbs)
    for i in _CARRY_ORDER:
        _carry(z, i)
    # The carry out of the top limb wraps around with a factor of 19.
    z[0] += 19 * (z[9] >> 25)
    z[9] &= _LOW_25_BITS
    _carry(z, 0)
    return tuple(z)  # type: ignore[return-value]


def unpack(data: bytes) -> Limbs:
    """Load limbs from the low 255 bits of 32 little-endian bytes.

    The high bit is masked off and non-canonical inputs are accepted:
    2^255 - 18 loads as 1.
    """
    data = bytes(data)
    if len(data) != 32:
        raise ValueError(f"expected 32 bytes, got {len(data)}")
    h = [
        int.from_bytes(data[start:start + count], "little") << shift
        for start, count, shift in _LOADS
    ]
    h[9] = (int.from_bytes(data[29:32], "little") & _LOW_23_BITS) << 2
    return reduce(h)


def pack(limbs: Sequence[int]) -> bytes:
    """Return the canonical 32-byte little-endian encoding of the limbs."""
    h = list(reduce(limbs))

    # q is the carry bit of h + 19, which is 1 exactly when h >= p.
    q = (h[0] + 19) >> 26
    for limb, width in zip(h[1:], _WIDTHS[1:]):
        q = (limb + q) >> width

    h[0] += 19 * q
    for i in range(9):
        _carry(h, i)
    # Dropping the top carry subtracts q * 2^255.
    h[9] &= _LOW_25_BITS

    value = sum(limb << offset for limb, offset in zip(h, _OFFSETS))
    return value.to_bytes(32, "little")