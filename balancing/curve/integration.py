"""Closed-form integration of a single curve segment.

Inside a segment the rate is the straight line through the two neighbouring
cutoff points (x_prev, r_prev) and (x_i, r_i). Its integral from a to b is

    r_i * (b - a) + slope * (F(b) - F(a)),   F(x) = x^2/2 - x_i * x

with slope = (r_prev - r_i) / (x_prev - x_i). Outside the first and last
cutoffs the curve is flat and only the first term applies.

Every step uses FixedPoint so truncation matches the on-chain contracts.
"""

from __future__ import annotations

from balancing.curve.types import Curve
from balancing.math.fixed_point import FixedPoint


def _antiderivative(x: FixedPoint, pivot: FixedPoint) -> FixedPoint:
    """F(x) = x^2/2 - pivot * x."""
    return x.half_square().sub(pivot.mul(x))


def integrate(curve: Curve, index: int, start: int, end: int) -> int:
    """Integrate the rate function of segment `index` from start to end.

    No clamping is applied: the caller guarantees [start, end] lies within
    the segment. end < start yields the negated integral.

    Args:
        curve: The rate curve
        index: Segment index; -1 is treated as a flat zero-rate curve
        start: Integral start (18-decimal)
        end: Integral end (18-decimal)

    Returns:
        The integral as a raw 18-decimal value

    Raises:
        DivisionByZero: If two neighbouring cutoffs are equal (unvalidated curve)
    """
    if curve.is_empty or index < 0:
        return 0

    start_fp = FixedPoint(start)
    end_fp = FixedPoint(end)

    flat_rate = FixedPoint(curve[min(index, len(curve) - 1)].rate)
    fee = flat_rate.mul(end_fp.sub(start_fp))

    if 0 < index < len(curve):
        curr, prev = curve[index], curve[index - 1]
        curr_cutoff = FixedPoint(curr.cutoff)
        slope = FixedPoint(prev.rate - curr.rate).div(FixedPoint(prev.cutoff - curr.cutoff))
        area = _antiderivative(end_fp, curr_cutoff).sub(_antiderivative(start_fp, curr_cutoff))
        fee = fee.add(slope.mul(area))

    return fee.value
