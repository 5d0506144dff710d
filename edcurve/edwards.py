"""Group operations on the twisted Edwards form of Curve25519.

Points are held in extended twisted coordinates (X:Y:Z:T) with
x = X/Z, y = Y/Z and xy = T/Z, and combined with the complete
addition and doubling formulas for a = -1.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .field import EDWARDS_D, EDWARDS_D2, FieldElement, sqrt_ratio_i
from .scalar import BASEPOINT_ORDER, to_radix_16

_IDENTITY_ENCODING = bytes([1]) + bytes(31)


@dataclass(frozen=True)
class CompressedEdwardsY:
    """A point encoded as its y-coordinate plus the sign of x in the top bit."""

    data: bytes

    def __post_init__(self) -> None:
        raw = bytes(self.data)
        if len(raw) != 32:
            raise ValueError(f"expected 32 bytes, got {len(raw)}")
        object.__setattr__(self, "data", raw)

    @classmethod
    def from_slice(cls, data: bytes) -> CompressedEdwardsY:
        """Build an encoding from exactly 32 bytes."""
        return cls(bytes(data))

    @classmethod
    def identity(cls) -> CompressedEdwardsY:
        """The encoding of the identity point."""
        return cls(_IDENTITY_ENCODING)

    def to_bytes(self) -> bytes:
        return self.data

    def __bytes__(self) -> bytes:
        return self.data

    def decompress(self) -> EdwardsPoint | None:
        """Recover the point, or None if the bytes encode no curve point."""
        y = FieldElement.from_bytes(self.data)
        z = FieldElement.one()
        yy = y.square()
        u = yy - z
        v = yy * EDWARDS_D + z
        is_valid, x = sqrt_ratio_i(u, v)
        if not is_valid:
            return None
        if self.data[31] >> 7:
            x = -x
        return EdwardsPoint(x, y, z, x * y)


@dataclass(frozen=True, eq=False)
class EdwardsPoint:
    """A point on the Edwards curve in extended coordinates."""

    X: FieldElement
    Y: FieldElement
    Z: FieldElement
    T: FieldElement

    @classmethod
    def identity(cls) -> EdwardsPoint:
        zero = FieldElement.zero()
        one = FieldElement.one()
        return cls(zero, one, one, zero)

    def compress(self) -> CompressedEdwardsY:
        recip = self.Z.invert()
        x = self.X * recip
        y = self.Y * recip
        encoded = bytearray(y.to_bytes())
        encoded[31] ^= int(x.is_negative()) << 7
        return CompressedEdwardsY(bytes(encoded))

    def to_montgomery(self) -> bytes:
        """The u-coordinate on the Montgomery model, as 32 bytes.

        The identity maps to the 2-torsion point u = 0.
        """
        u = (self.Z + self.Y) * (self.Z - self.Y).invert()
        return u.to_bytes()

    def double(self) -> EdwardsPoint:
        a = self.X.square()
        b = self.Y.square()
        c = self.Z.square()
        c = c + c
        d = -a
        e = (self.X + self.Y).square() - a - b
        g = d + b
        f = g - c
        h = d - b
        return EdwardsPoint(e * f, g * h, f * g, e * h)

    def mul_by_pow_2(self, k: int) -> EdwardsPoint:
        """Compute [2^k]P by successive doublings; k must be positive."""
        if isinstance(k, bool) or not isinstance(k, int):
            raise TypeError("k must be an int")
        if k < 1:
            raise ValueError("k must be positive")
        result = self
        for _ in range(k):
            result = result.double()
        return result

    def mul_by_cofactor(self) -> EdwardsPoint:
        return self.mul_by_pow_2(3)

    def is_small_order(self) -> bool:
        """True if the point lies in the eight-torsion subgroup."""
        return self.mul_by_cofactor().is_identity()

    def is_torsion_free(self) -> bool:
        """True if the point lies in the prime-order subgroup."""
        return variable_base_mul(self, BASEPOINT_ORDER).is_identity()

    def is_identity(self) -> bool:
        return self == EdwardsPoint.identity()

    def is_valid(self) -> bool:
        """Check the curve equation and the Segre relation XY = ZT."""
        xx = self.X.square()
        yy = self.Y.square()
        zz = self.Z.square()
        on_curve = (yy - xx) * zz == zz.square() + EDWARDS_D * xx * yy
        on_segre_image = self.X * self.Y == self.Z * self.T
        return on_curve and on_segre_image

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EdwardsPoint):
            return NotImplemented
        return (
            self.X * other.Z == other.X * self.Z
            and self.Y * other.Z == other.Y * self.Z
        )

    def __hash__(self) -> int:
        return hash(self.compress().data)

    def __add__(self, other: object) -> EdwardsPoint:
        if not isinstance(other, EdwardsPoint):
            return NotImplemented
        a = (self.Y - self.X) * (other.Y - other.X)
        b = (self.Y + self.X) * (other.Y + other.X)
        c = self.T * EDWARDS_D2 * other.T
        d = self.Z * other.Z
        d = d + d
        e = b - a
        f = d - c
        g = d + c
        h = b + a
        return EdwardsPoint(e * f, g * h, f * g, e * h)

    def __sub__(self, other: object) -> EdwardsPoint:
        if not isinstance(other, EdwardsPoint):
            return NotImplemented
        return self + (-other)

    def __neg__(self) -> EdwardsPoint:
        return EdwardsPoint(-self.X, self.Y, self.Z, -self.T)

    def __mul__(self, scalar: object) -> EdwardsPoint:
        if not isinstance(scalar, int):
            return NotImplemented
        return variable_base_mul(self, scalar)

    __rmul__ = __mul__


def _multiples(point: EdwardsPoint, count: int) -> list[EdwardsPoint]:
    table = [point]
    for _ in range(count - 1):
        table.append(table[-1] + point)
    return table


def _select(table: list[EdwardsPoint], digit: int) -> EdwardsPoint:
    if digit > 0:
        return table[digit - 1]
    if digit < 0:
        return -table[-digit - 1]
    return EdwardsPoint.identity()


def variable_base_mul(point: EdwardsPoint, scalar: int) -> EdwardsPoint:
    """Compute scalar * point with a signed radix-16 window."""
    digits = to_radix_16(scalar)
    table = _multiples(point, 8)
    result = EdwardsPoint.identity()
    for digit in reversed(digits):
        result = result.mul_by_pow_2(4) + _select(table, digit)
    return result


def sum_points(points: Iterable[EdwardsPoint]) -> EdwardsPoint:
    """Add up the points, starting from the identity."""
    total = EdwardsPoint.identity()
    for point in points:
        total = total + point
    return total