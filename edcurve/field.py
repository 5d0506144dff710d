"""Arithmetic in the prime field of integers modulo 2**255 - 19."""

from __future__ import annotations

from dataclasses import dataclass

P = 2**255 - 19
"""The field prime."""


@dataclass(frozen=True)
class FieldElement:
    """An element of GF(2**255 - 19), always held in canonical form."""

    value: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("field element value must be an int")
        object.__setattr__(self, "value", self.value % P)

    @classmethod
    def from_bytes(cls, data: bytes) -> FieldElement:
        """Load 32 little-endian bytes, ignoring the top bit of the last byte."""
        raw = bytes(data)
        if len(raw) != 32:
            raise ValueError(f"expected 32 bytes, got {len(raw)}")
        return cls(int.from_bytes(raw, "little") & ((1 << 255) - 1))

    @classmethod
    def zero(cls) -> FieldElement:
        return cls(0)

    @classmethod
    def one(cls) -> FieldElement:
        return cls(1)

    @classmethod
    def minus_one(cls) -> FieldElement:
        return cls(P - 1)

    def to_bytes(self) -> bytes:
        """The canonical 32-byte little-endian encoding."""
        return self.value.to_bytes(32, "little")

    def is_negative(self) -> bool:
        """True when the low bit of the canonical encoding is set."""
        return bool(self.value & 1)

    def is_zero(self) -> bool:
        return self.value == 0

    def square(self) -> FieldElement:
        return FieldElement(self.value * self.value)

    def invert(self) -> FieldElement:
        """The multiplicative inverse; zero maps to zero."""
        return FieldElement(pow(self.value, P - 2, P))

    def invsqrt(self) -> tuple[bool, FieldElement]:
        """Compute sqrt(1/self); see ``sqrt_ratio_i`` for the result's meaning."""
        return sqrt_ratio_i(FieldElement.one(), self)

    def _pow_p58(self) -> FieldElement:
        return FieldElement(pow(self.value, (P - 5) // 8, P))

    def _abs(self) -> FieldElement:
        return -self if self.is_negative() else self

    def __add__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement(self.value + other.value)

    def __sub__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement(self.value - other.value)

    def __mul__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement(self.value * other.value)

    def __neg__(self) -> FieldElement:
        return FieldElement(-self.value)

    def __bool__(self) -> bool:
        return self.value != 0


SQRT_M1 = FieldElement(
    19681161376707505956807079304988542015446066515923890162744021073123829784752
)
"""The non-negative square root of -1."""

EDWARDS_D = FieldElement(
    37095705934669439343138083508754565189542113879843219016388785533085940283555
)
"""The Edwards curve parameter d = -121665/121666."""

EDWARDS_D2 = FieldElement(
    16295367250680780974490674513165176452449235426866156013048779062215315747161
)
"""Twice the Edwards curve parameter d."""


def sqrt_ratio_i(u: FieldElement, v: FieldElement) -> tuple[bool, FieldElement]:
    """Compute the non-negative square root of u/v when it exists.

    Returns ``(True, sqrt(u/v))`` when u/v is a square (including u = 0),
    ``(False, 0)`` when u is nonzero and v is zero, and
    ``(False, sqrt(i*u/v))`` when u/v is not a square.
    """
    v3 = v.square() * v
    v7 = v3.square() * v
    r = (u * v3) * (u * v7)._pow_p58()
    check = v * r.square()

    neg_u = -u
    correct_sign = check == u
    flipped_sign = check == neg_u
    flipped_sign_i = check == neg_u * SQRT_M1

    if flipped_sign or flipped_sign_i:
        r = SQRT_M1 * r

    return correct_sign or flipped_sign, r._abs()


SQRT_AD_MINUS_ONE = sqrt_ratio_i(-EDWARDS_D - FieldElement.one(), FieldElement.one())[1]
"""A square root of a*d - 1 with a = -1."""