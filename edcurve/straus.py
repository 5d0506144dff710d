"""Interleaved-window (Straus) multiscalar multiplication."""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache

from .constants import ED25519_BASEPOINT_POINT
from .edwards import EdwardsPoint
from .scalar import non_adjacent_form, to_radix_16


def _multiples(point: EdwardsPoint, count: int) -> list[EdwardsPoint]:
    table = [point]
    for _ in range(count - 1):
        table.append(table[-1] + point)
    return table


def _odd_multiples(point: EdwardsPoint, count: int) -> list[EdwardsPoint]:
    """[P, 3P, 5P, ...] with ``count`` entries."""
    doubled = point.double()
    table = [point]
    for _ in range(count - 1):
        table.append(table[-1] + doubled)
    return table


def _select(table: list[EdwardsPoint], digit: int) -> EdwardsPoint:
    if digit > 0:
        return table[digit - 1]
    if digit < 0:
        return -table[-digit - 1]
    return EdwardsPoint.identity()


def _add_naf(acc: EdwardsPoint, table: list[EdwardsPoint], digit: int) -> EdwardsPoint:
    if digit > 0:
        return acc + table[digit // 2]
    if digit < 0:
        return acc - table[-digit // 2]
    return acc


def _paired(scalars: Iterable[int], points: Iterable) -> tuple[list[int], list]:
    scalar_list = list(scalars)
    point_list = list(points)
    if len(scalar_list) != len(point_list):
        raise ValueError(
            f"got {len(scalar_list)} scalars but {len(point_list)} points"
        )
    return scalar_list, point_list


def straus_multiscalar_mul(
    scalars: Iterable[int], points: Iterable[EdwardsPoint]
) -> EdwardsPoint:
    """Compute sum(s_i * P_i) with a fixed signed radix-16 schedule."""
    scalar_list, point_list = _paired(scalars, points)
    tables = [_multiples(point, 8) for point in point_list]
    digits = [to_radix_16(s) for s in scalar_list]

    result = EdwardsPoint.identity()
    for j in reversed(range(64)):
        result = result.mul_by_pow_2(4)
        for scalar_digits, table in zip(digits, tables):
            result = result + _select(table, scalar_digits[j])
    return result


def straus_optional_multiscalar_mul(
    scalars: Iterable[int], points: Iterable[EdwardsPoint | None]
) -> EdwardsPoint | None:
    """Compute sum(s_i * P_i) in variable time; None if any point is None."""
    scalar_list, point_list = _paired(scalars, points)
    if any(point is None for point in point_list):
        return None
    nafs = [non_adjacent_form(s, 5) for s in scalar_list]
    tables = [_odd_multiples(point, 8) for point in point_list]

    result = EdwardsPoint.identity()
    for i in reversed(range(256)):
        result = result.double()
        for naf, table in zip(nafs, tables):
            result = _add_naf(result, table, naf[i])
    return result


@lru_cache(maxsize=1)
def _basepoint_odd_table() -> tuple[EdwardsPoint, ...]:
    return tuple(_odd_multiples(ED25519_BASEPOINT_POINT, 64))


def vartime_double_scalar_mul_basepoint(
    a: int, point: EdwardsPoint, b: int
) -> EdwardsPoint:
    """Compute a * point + b * B in variable time, B being the Ed25519 basepoint."""
    a_naf = non_adjacent_form(a, 5)
    b_naf = non_adjacent_form(b, 8)

    start = next(
        (i for i in reversed(range(256)) if a_naf[i] != 0 or b_naf[i] != 0), 0
    )
    table_a = _odd_multiples(point, 8)
    table_b = list(_basepoint_odd_table())

    result = EdwardsPoint.identity()
    for i in range(start, -1, -1):
        result = result.double()
        result = _add_naf(result, table_a, a_naf[i])
        result = _add_naf(result, table_b, b_naf[i])
    return result


class VartimeEdwardsPrecomputation:
    """Precomputed tables for variable-time multiscalar products with fixed points."""

    def __init__(self, static_points: Iterable[EdwardsPoint]) -> None:
        self._static_tables = [_odd_multiples(p, 64) for p in static_points]

    def __len__(self) -> int:
        return len(self._static_tables)

    def optional_mixed_multiscalar_mul(
        self,
        static_scalars: Iterable[int],
        dynamic_scalars: Iterable[int],
        dynamic_points: Iterable[EdwardsPoint | None],
    ) -> EdwardsPoint | None:
        """Compute sum(a_i * A_i) + sum(b_j * B_j); None if any dynamic point is None."""
        static_nafs = [non_adjacent_form(s, 8) for s in static_scalars]
        dyn_scalars, dyn_points = _paired(dynamic_scalars, dynamic_points)
        if len(static_nafs) != len(self._static_tables):
            raise ValueError(
                f"got {len(static_nafs)} static scalars for "
                f"{len(self._static_tables)} static points"
            )
        if any(point is None for point in dyn_points):
            return None
        dynamic_nafs = [non_adjacent_form(s, 5) for s in dyn_scalars]
        dynamic_tables = [_odd_multiples(p, 8) for p in dyn_points]

        result = EdwardsPoint.identity()
        for j in reversed(range(256)):
            result = result.double()
            for naf, table in zip(dynamic_nafs, dynamic_tables):
                result = _add_naf(result, table, naf[j])
            for naf, table in zip(static_nafs, self._static_tables):
                result = _add_naf(result, table, naf[j])
        return result

    def vartime_mixed_multiscalar_mul(
        self,
        static_scalars: Iterable[int],
        dynamic_scalars: Iterable[int],
        dynamic_points: Iterable[EdwardsPoint],
    ) -> EdwardsPoint:
        """Compute sum(a_i * A_i) + sum(b_j * B_j) for present dynamic points."""
        result = self.optional_mixed_multiscalar_mul(
            static_scalars, dynamic_scalars, dynamic_points
        )
        if result is None:
            raise ValueError("dynamic points must not be None")
        return result