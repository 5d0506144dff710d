"""Precomputed tables for fast fixed-base scalar multiplication."""

from __future__ import annotations

from .edwards import EdwardsPoint
from .field import FieldElement
from .scalar import to_radix_16


def _normalized(point: EdwardsPoint) -> EdwardsPoint:
    recip = point.Z.invert()
    x = point.X * recip
    y = point.Y * recip
    return EdwardsPoint(x, y, FieldElement.one(), x * y)


def _select(row: tuple[EdwardsPoint, ...], digit: int) -> EdwardsPoint:
    if digit > 0:
        return row[digit - 1]
    if digit < 0:
        return -row[-digit - 1]
    return EdwardsPoint.identity()


class EdwardsBasepointTable:
    """Multiples [1..8] * 256^i * B for i in 0..32, for a basepoint B."""

    def __init__(self, rows: list[tuple[EdwardsPoint, ...]]) -> None:
        if len(rows) != 32 or any(len(row) != 8 for row in rows):
            raise ValueError("a basepoint table has 32 rows of 8 points")
        self._rows = [tuple(row) for row in rows]

    @classmethod
    def create(cls, basepoint: EdwardsPoint) -> EdwardsBasepointTable:
        """Precompute the table for the given basepoint."""
        rows = []
        current = basepoint
        for _ in range(32):
            multiples = [current]
            for _ in range(7):
                multiples.append(multiples[-1] + current)
            rows.append(tuple(_normalized(p) for p in multiples))
            current = current.mul_by_pow_2(8)
        return cls(rows)

    def basepoint(self) -> EdwardsPoint:
        """The basepoint this table was built from."""
        return EdwardsPoint.identity() + self._rows[0][0]

    def mul(self, scalar: int) -> EdwardsPoint:
        """Compute scalar * B using the odd and even radix-16 digits in turn."""
        digits = to_radix_16(scalar)
        result = EdwardsPoint.identity()
        for i in range(1, 64, 2):
            result = result + _select(self._rows[i // 2], digits[i])
        result = result.mul_by_pow_2(4)
        for i in range(0, 64, 2):
            result = result + _select(self._rows[i // 2], digits[i])
        return result

    def __mul__(self, scalar: object) -> EdwardsPoint:
        if not isinstance(scalar, int):
            return NotImplemented
        return self.mul(scalar)

    __rmul__ = __mul__

    def __repr__(self) -> str:
        return f"EdwardsBasepointTable(basepoint={self.basepoint().compress()!r})"