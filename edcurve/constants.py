"""Fixed points and parameters of Curve25519 and its Edwards form."""

from __future__ import annotations

from functools import lru_cache

from .edwards import CompressedEdwardsY, EdwardsPoint, variable_base_mul
from .field import EDWARDS_D, EDWARDS_D2, SQRT_AD_MINUS_ONE, SQRT_M1, FieldElement
from .scalar import BASEPOINT_ORDER
from .table import EdwardsBasepointTable

__all__ = [
    "BASEPOINT_ORDER",
    "EDWARDS_D",
    "EDWARDS_D2",
    "ED25519_BASEPOINT_COMPRESSED",
    "ED25519_BASEPOINT_POINT",
    "ED25519_BASEPOINT_TABLE",
    "RISTRETTO_BASEPOINT_COMPRESSED",
    "SQRT_AD_MINUS_ONE",
    "SQRT_M1",
    "X25519_BASEPOINT",
    "eight_torsion",
]

ED25519_BASEPOINT_COMPRESSED = CompressedEdwardsY(bytes([0x58]) + bytes([0x66]) * 31)
"""The Ed25519 basepoint: y = 4/5 with non-negative x."""

X25519_BASEPOINT = bytes([0x09]) + bytes(31)
"""The X25519 basepoint as a Montgomery u-coordinate, u = 9."""

RISTRETTO_BASEPOINT_COMPRESSED = bytes.fromhex(
    "e2f2ae0a6abc4e71a884a961c500515f58e30b6aa582dd8db6a65945e08d2d76"
)
"""The Ristretto basepoint in its compressed encoding."""


def _decompress_basepoint() -> EdwardsPoint:
    point = ED25519_BASEPOINT_COMPRESSED.decompress()
    if point is None:
        raise RuntimeError("the basepoint encoding failed to decompress")
    return point


ED25519_BASEPOINT_POINT = _decompress_basepoint()
"""The Ed25519 basepoint as an EdwardsPoint."""

ED25519_BASEPOINT_TABLE = EdwardsBasepointTable.create(ED25519_BASEPOINT_POINT)
"""Precomputed multiples of the Ed25519 basepoint."""


def _torsion_generator() -> EdwardsPoint:
    y = 2
    while True:
        candidate = CompressedEdwardsY(FieldElement(y).to_bytes()).decompress()
        y += 1
        if candidate is None:
            continue
        torsion = variable_base_mul(candidate, BASEPOINT_ORDER)
        if not torsion.mul_by_pow_2(2).is_identity():
            return torsion


@lru_cache(maxsize=None)
def eight_torsion() -> tuple[EdwardsPoint, ...]:
    """The eight points of small order, as i * T for a generator T of order 8."""
    generator = _torsion_generator()
    points = [EdwardsPoint.identity()]
    for _ in range(7):
        points.append(points[-1] + generator)
    return tuple(points)