import random

import pytest

from edcurve.constants import ED25519_BASEPOINT_POINT, ED25519_BASEPOINT_TABLE
from edcurve.edwards import CompressedEdwardsY, EdwardsPoint, sum_points
from edcurve.scalar import BASEPOINT_ORDER
from edcurve.straus import (
    VartimeEdwardsPrecomputation,
    straus_multiscalar_mul,
    straus_optional_multiscalar_mul,
    vartime_double_scalar_mul_basepoint,
)

A_SCALAR = int.from_bytes(
    bytes(
        [
            0x1A, 0x0E, 0x97, 0x8A, 0x90, 0xF6, 0x62, 0x2D,
            0x37, 0x47, 0x02, 0x3F, 0x8A, 0xD8, 0x26, 0x4D,
            0xA7, 0x58, 0xAA, 0x1B, 0x88, 0xE0, 0x40, 0xD1,
            0x58, 0x9E, 0x7B, 0x7F, 0x23, 0x76, 0xEF, 0x09,
        ]
    ),
    "little",
)

B_SCALAR = int.from_bytes(
    bytes(
        [
            0x91, 0x26, 0x7A, 0xCF, 0x25, 0xC2, 0x09, 0x1B,
            0xA2, 0x17, 0x74, 0x7B, 0x66, 0xF0, 0xB3, 0x2E,
            0x9D, 0xF2, 0xA5, 0x67, 0x41, 0xCF, 0xDA, 0xC4,
            0x56, 0xA7, 0xD4, 0xAA, 0xB8, 0x60, 0x8A, 0x05,
        ]
    ),
    "little",
)

A_TIMES_BASEPOINT = CompressedEdwardsY(
    bytes(
        [
            0xEA, 0x27, 0xE2, 0x60, 0x53, 0xDF, 0x1B, 0x59,
            0x56, 0xF1, 0x4D, 0x5D, 0xEC, 0x3C, 0x34, 0xC3,
            0x84, 0xA2, 0x69, 0xB7, 0x4C, 0xC3, 0x80, 0x3E,
            0xA8, 0xE2, 0xE7, 0xC9, 0x42, 0x5E, 0x40, 0xA5,
        ]
    )
)

DOUBLE_SCALAR_MULT_RESULT = CompressedEdwardsY(
    bytes(
        [
            0x7D, 0xFD, 0x6C, 0x45, 0xAF, 0x6D, 0x6E, 0x0E,
            0xBA, 0x20, 0x37, 0x1A, 0x23, 0x64, 0x59, 0xC4,
            0xC0, 0x46, 0x83, 0x43, 0xDE, 0x70, 0x4B, 0x85,
            0x09, 0x6F, 0xFE, 0x35, 0x4F, 0x13, 0x2B, 0x42,
        ]
    )
)


def _a_point():
    point = A_TIMES_BASEPOINT.decompress()
    assert point is not None
    return point


def test_double_scalar_mul_basepoint_vs_ed25519py():
    result = vartime_double_scalar_mul_basepoint(A_SCALAR, _a_point(), B_SCALAR)
    assert result.compress() == DOUBLE_SCALAR_MULT_RESULT


def test_double_scalar_mul_with_zero_scalars_is_identity():
    result = vartime_double_scalar_mul_basepoint(0, _a_point(), 0)
    assert result.is_identity()


def test_optional_multiscalar_mul_vs_ed25519py():
    result = straus_optional_multiscalar_mul(
        [A_SCALAR, B_SCALAR], [_a_point(), ED25519_BASEPOINT_POINT]
    )
    assert result is not None
    assert result.compress() == DOUBLE_SCALAR_MULT_RESULT


def test_multiscalar_mul_vartime_vs_consttime():
    points = [_a_point(), ED25519_BASEPOINT_POINT]
    vartime = straus_optional_multiscalar_mul([A_SCALAR, B_SCALAR], points)
    consttime = straus_multiscalar_mul([A_SCALAR, B_SCALAR], points)
    assert vartime.compress() == consttime.compress()
    assert consttime.compress() == DOUBLE_SCALAR_MULT_RESULT


def test_multiscalar_consistency_with_largest_scalar():
    rng = random.Random(7)
    xs = [rng.randrange(BASEPOINT_ORDER) for _ in range(4)] + [2**255 - 1]
    check = sum(x * x for x in xs) % BASEPOINT_ORDER
    points = [ED25519_BASEPOINT_TABLE.mul(x) for x in xs]
    expected = ED25519_BASEPOINT_TABLE.mul(check)
    assert straus_multiscalar_mul(xs, points) == expected
    assert straus_optional_multiscalar_mul(xs, points) == expected


def test_empty_input_gives_identity():
    assert straus_multiscalar_mul([], []).is_identity()
    assert straus_optional_multiscalar_mul([], []).is_identity()


def test_none_point_gives_none():
    result = straus_optional_multiscalar_mul([1, 2], [ED25519_BASEPOINT_POINT, None])
    assert result is None


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        straus_multiscalar_mul([1, 2], [ED25519_BASEPOINT_POINT])
    with pytest.raises(ValueError):
        straus_optional_multiscalar_mul([1], [])


def test_multiscalar_matches_sum_of_products():
    points = [ED25519_BASEPOINT_POINT * (i + 1) for i in range(3)]
    scalars = [999, 333, 12345]
    expected = sum_points(p * s for p, s in zip(points, scalars))
    assert straus_multiscalar_mul(scalars, points) == expected


def test_vartime_precomputed_vs_nonprecomputed_multiscalar():
    rng = random.Random(11)
    static_scalars = [rng.randrange(BASEPOINT_ORDER) for _ in range(6)]
    dynamic_scalars = [rng.randrange(BASEPOINT_ORDER) for _ in range(6)]
    check = sum(s * s for s in static_scalars + dynamic_scalars) % BASEPOINT_ORDER

    static_points = [ED25519_BASEPOINT_TABLE.mul(s) for s in static_scalars]
    dynamic_points = [ED25519_BASEPOINT_TABLE.mul(s) for s in dynamic_scalars]

    precomputation = VartimeEdwardsPrecomputation(static_points)
    p = precomputation.vartime_mixed_multiscalar_mul(
        static_scalars, dynamic_scalars, dynamic_points
    )
    q = straus_optional_multiscalar_mul(
        static_scalars + dynamic_scalars, static_points + dynamic_points
    )
    r = ED25519_BASEPOINT_TABLE.mul(check)

    assert p.compress() == r.compress()
    assert q.compress() == r.compress()


def test_precomputation_optional_returns_none_for_missing_point():
    precomputation = VartimeEdwardsPrecomputation([ED25519_BASEPOINT_POINT])
    result = precomputation.optional_mixed_multiscalar_mul([3], [4], [None])
    assert result is None
    with pytest.raises(ValueError):
        precomputation.vartime_mixed_multiscalar_mul([3], [4], [None])


def test_precomputation_static_length_mismatch_raises():
    precomputation = VartimeEdwardsPrecomputation([ED25519_BASEPOINT_POINT])
    with pytest.raises(ValueError):
        precomputation.optional_mixed_multiscalar_mul([1, 2], [], [])


def test_precomputation_static_only():
    precomputation = VartimeEdwardsPrecomputation([ED25519_BASEPOINT_POINT])
    result = precomputation.vartime_mixed_multiscalar_mul([A_SCALAR], [], [])
    assert result.compress() == A_TIMES_BASEPOINT
    assert isinstance(result, EdwardsPoint)