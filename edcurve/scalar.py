"""Integer scalars and their signed-digit representations.

Scalars are plain Python ints below 2**255.  Helpers here reduce them
modulo the group order and recode them into the signed radix-2^w and
non-adjacent forms used by scalar multiplication.
"""

from __future__ import annotations

BASEPOINT_ORDER = 2**252 + 27742317777372353535851937790883648493
"""The order of the prime-order subgroup, l."""

_SCALAR_BOUND = 1 << 255


def _check_scalar(scalar: int) -> int:
    if isinstance(scalar, bool) or not isinstance(scalar, int):
        raise TypeError("scalar must be an int")
    if not 0 <= scalar < _SCALAR_BOUND:
        raise ValueError("scalar must lie in [0, 2**255)")
    return scalar


def reduce(value: int) -> int:
    """Reduce an integer modulo the group order."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("value must be an int")
    return value % BASEPOINT_ORDER


def from_bits(data: bytes) -> int:
    """Read 32 little-endian bytes as a scalar, clearing bit 255 and not reducing."""
    raw = bytes(data)
    if len(raw) != 32:
        raise ValueError(f"expected 32 bytes, got {len(raw)}")
    return int.from_bytes(raw, "little") & (_SCALAR_BOUND - 1)


def to_radix_16(scalar: int) -> list[int]:
    """Write the scalar as 64 signed radix-16 digits, low digit first.

    Every digit lies in [-8, 8), except the last, which lies in [-8, 8].
    """
    value = _check_scalar(scalar)
    digits = [(value >> (4 * i)) & 15 for i in range(64)]
    for i in range(63):
        carry = (digits[i] + 8) >> 4
        digits[i] -= carry << 4
        digits[i + 1] += carry
    return digits


def radix_2w_size_hint(w: int) -> int:
    """The number of digits ``to_radix_2w`` returns for window width w."""
    if not 4 <= w <= 8:
        raise ValueError("window width must be between 4 and 8")
    if w == 4:
        return 64
    count = (256 + w - 1) // w
    return count + 1 if w == 8 else count


def to_radix_2w(scalar: int, w: int) -> list[int]:
    """Write the scalar in signed radix 2^w, low digit first.

    Digits lie in [-2^(w-1), 2^(w-1)); the last may equal 2^(w-1).
    """
    if not 4 <= w <= 8:
        raise ValueError("window width must be between 4 and 8")
    if w == 4:
        return to_radix_16(scalar)

    value = _check_scalar(scalar)
    radix = 1 << w
    mask = radix - 1
    count = (256 + w - 1) // w

    digits = []
    carry = 0
    for i in range(count):
        coef = carry + ((value >> (i * w)) & mask)
        carry = (coef + radix // 2) >> w
        digits.append(coef - (carry << w))

    if w == 8:
        digits.append(carry)
    else:
        digits[-1] += carry << w
    return digits


def non_adjacent_form(scalar: int, w: int) -> list[int]:
    """Compute the width-w non-adjacent form as 256 signed coefficients.

    Nonzero coefficients are odd, lie in (-2^(w-1), 2^(w-1)), and any w
    consecutive coefficients hold at most one nonzero entry.
    """
    if not 2 <= w <= 8:
        raise ValueError("window width must be between 2 and 8")
    value = _check_scalar(scalar)

    width = 1 << w
    mask = width - 1
    naf = [0] * 256
    pos = 0
    carry = 0
    while pos < 256:
        window = carry + ((value >> pos) & mask)
        if window & 1 == 0:
            pos += 1
            continue
        if window < width // 2:
            carry = 0
            naf[pos] = window
        else:
            carry = 1
            naf[pos] = window - width
        pos += w
    return naf