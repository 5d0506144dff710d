"""Multiscalar multiplication on Edwards points, with algorithm dispatch.

The constant-time entry point always uses Straus's method.  The
variable-time entry points pick Straus's method for small inputs and
Pippenger's bucket method once there are enough terms for it to pay off.
"""

from __future__ import annotations

from collections.abc import Iterable

from .edwards import EdwardsPoint
from .pippenger import pippenger_optional_multiscalar_mul
from .straus import straus_multiscalar_mul, straus_optional_multiscalar_mul

PIPPENGER_THRESHOLD = 190
"""Input size from which variable-time multiplication uses Pippenger's method."""


def _paired(scalars: Iterable[int], points: Iterable) -> tuple[list[int], list]:
    scalar_list = list(scalars)
    point_list = list(points)
    if len(scalar_list) != len(point_list):
        raise ValueError(
            f"got {len(scalar_list)} scalars but {len(point_list)} points"
        )
    return scalar_list, point_list


def multiscalar_mul(
    scalars: Iterable[int], points: Iterable[EdwardsPoint]
) -> EdwardsPoint:
    """Compute sum(s_i * P_i) with a schedule that does not depend on the scalars."""
    scalar_list, point_list = _paired(scalars, points)
    return straus_multiscalar_mul(scalar_list, point_list)


def optional_vartime_multiscalar_mul(
    scalars: Iterable[int], points: Iterable[EdwardsPoint | None]
) -> EdwardsPoint | None:
    """Compute sum(s_i * P_i) in variable time; None if any point is None."""
    scalar_list, point_list = _paired(scalars, points)
    if len(scalar_list) < PIPPENGER_THRESHOLD:
        return straus_optional_multiscalar_mul(scalar_list, point_list)
    return pippenger_optional_multiscalar_mul(scalar_list, point_list)


def vartime_multiscalar_mul(
    scalars: Iterable[int], points: Iterable[EdwardsPoint]
) -> EdwardsPoint:
    """Compute sum(s_i * P_i) in variable time for points that are all present."""
    result = optional_vartime_multiscalar_mul(scalars, points)
    if result is None:
        raise ValueError("points must not be None")
    return result