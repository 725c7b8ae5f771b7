from typing import Tuple

BOUND_SEQUENCE: Tuple[int, ...] = (3, 5, 7, 13)


def bound_for(order: int) -> int:
    """Counting bound for the 1-based elimination round ``order``"""
    if isinstance(order, bool) or not isinstance(order, int):
        raise ValueError(f"Round order must be an integer, got: {order!r}")
    if order < 1:
        raise ValueError(f"Round order must be positive, got: {order}")
    return BOUND_SEQUENCE[(order - 1) % len(BOUND_SEQUENCE)]
