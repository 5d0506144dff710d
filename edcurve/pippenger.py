"""Pippenger's bucket method for variable-time multiscalar multiplication."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .edwards import EdwardsPoint
from .scalar import radix_2w_size_hint, to_radix_2w


def _window_width(size: int) -> int:
    if size < 500:
        return 6
    if size < 800:
        return 7
    return 8


def _column(
    pairs: list[tuple[list[int], EdwardsPoint]], digit_index: int, buckets_count: int
) -> EdwardsPoint:
    """Sum digit * point over all pairs for a single digit position."""
    buckets = [EdwardsPoint.identity()] * buckets_count
    for digits, point in pairs:
        digit = digits[digit_index]
        if digit > 0:
            buckets[digit - 1] = buckets[digit - 1] + point
        elif digit < 0:
            buckets[-digit - 1] = buckets[-digit - 1] - point

    # Weight bucket i by (i + 1) with two running sums, from the top bucket down.
    intermediate = buckets[-1]
    total = buckets[-1]
    for bucket in reversed(buckets[:-1]):
        intermediate = intermediate + bucket
        total = total + intermediate
    return total


def pippenger_optional_multiscalar_mul(
    scalars: Iterable[int], points: Iterable[EdwardsPoint | None]
) -> EdwardsPoint | None:
    """Compute sum(s_i * P_i) in variable time; None if any point is None."""
    scalar_list = list(scalars)
    point_list = list(points)
    if len(scalar_list) != len(point_list):
        raise ValueError(
            f"got {len(scalar_list)} scalars but {len(point_list)} points"
        )
    if any(point is None for point in point_list):
        return None

    w = _window_width(len(scalar_list))
    digits_count = radix_2w_size_hint(w)
    buckets_count = (1 << w) // 2

    pairs = [(to_radix_2w(s, w), p) for s, p in zip(scalar_list, point_list)]

    columns: Iterator[EdwardsPoint] = (
        _column(pairs, index, buckets_count)
        for index in reversed(range(digits_count))
    )
    # Start from the high column so the identity is never doubled.
    total = next(columns)
    for column in columns:
        total = total.mul_by_pow_2(w) + column
    return total


def pippenger_multiscalar_mul(
    scalars: Iterable[int], points: Iterable[EdwardsPoint]
) -> EdwardsPoint:
    """Compute sum(s_i * P_i) in variable time for points that are all present."""
    result = pippenger_optional_multiscalar_mul(scalars, points)
    if result is None:
        raise ValueError("points must not be None")
    return result