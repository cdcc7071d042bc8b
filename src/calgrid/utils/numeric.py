"""
Range membership helpers.

All helpers accept the bounds in either order. `in_range` is exclusive on
both ends; the other variants add the inclusive ends explicitly.
"""
from typing import Tuple, Union

Number = Union[int, float]


def swap_min_max(a: Number, b: Number) -> Tuple[Number, Number]:
    return (a, b) if a < b else (b, a)


def in_range(value: Number, min_value: Number, max_value: Number) -> bool:
    min_value, max_value = swap_min_max(min_value, max_value)
    return min_value < value < max_value


def in_range_left(value: Number, min_value: Number, max_value: Number) -> bool:
    """Inclusive of the lower bound only."""
    min_value, max_value = swap_min_max(min_value, max_value)
    return in_range(value, min_value, max_value) or value == min_value


def in_range_right(value: Number, min_value: Number, max_value: Number) -> bool:
    """Inclusive of the upper bound only."""
    min_value, max_value = swap_min_max(min_value, max_value)
    return in_range(value, min_value, max_value) or value == max_value


def in_range_inclusive(value: Number, min_value: Number, max_value: Number) -> bool:
    min_value, max_value = swap_min_max(min_value, max_value)
    return in_range(value, min_value, max_value) or value in (min_value, max_value)
