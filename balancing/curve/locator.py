"""Interval lookup on a balancing fee curve."""

from __future__ import annotations

from balancing.curve.types import Bound, Curve, Interval

# Returned when no interval matches. Unreachable for a validated curve since
# the two outer intervals are unbounded.
NO_INTERVAL = Interval(index=-1, lower=None, upper=None)


def bounds(curve: Curve, index: int) -> tuple[Bound, Bound]:
    """Return the (lower, upper) bounds of segment `index`.

    Segment 0 runs from negative infinity to the first cutoff, segment
    len(curve) from the last cutoff to positive infinity, and segment i in
    between covers [cutoff[i-1], cutoff[i]).

    Args:
        curve: The rate curve
        index: Segment index

    Returns:
        (lower, upper), where None marks an unbounded side
    """
    if curve.is_empty:
        return None, None
    if index == 0:
        return None, curve[0].cutoff
    if index >= len(curve):
        return curve[len(curve) - 1].cutoff, None
    return curve[index - 1].cutoff, curve[index].cutoff


def locate(curve: Curve, target: int) -> Interval:
    """Find the segment whose half-open range contains `target`.

    A target equal to a cutoff belongs to the segment starting at that
    cutoff, not the one ending there.

    Args:
        curve: The rate curve
        target: Running balance to locate

    Returns:
        The matching Interval, or NO_INTERVAL (index -1) if none matched
    """
    for index in range(len(curve) + 1):
        lower, upper = bounds(curve, index)
        interval = Interval(index=index, lower=lower, upper=upper)
        if interval.contains(target):
            return interval
    return NO_INTERVAL
