"""Data types for piecewise-linear balancing fee curves.

A curve is an ordered list of (cutoff, rate) points. Between two consecutive
cutoffs the rate varies linearly; below the first and above the last cutoff
it extends flat. All values are raw 18-decimal scaled integers.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from balancing.errors import CurveConfigError

# An unbounded interval side is represented by None
Bound = int | None


@dataclass(frozen=True, slots=True)
class CutoffPoint:
    """A single point of the rate curve.

    Attributes:
        cutoff: Running balance at which the slope changes (18-decimal)
        rate: Fee rate at that balance (18-decimal, may be negative)
    """

    cutoff: int
    rate: int


@dataclass(frozen=True)
class Curve:
    """Immutable piecewise-linear rate curve.

    Cutoffs must be strictly increasing. An empty curve is valid and
    represents a flat zero rate over the whole balance range.

    Attributes:
        points: Cutoff points ordered by cutoff

    Raises:
        CurveConfigError: If cutoffs are not strictly increasing
    """

    points: tuple[CutoffPoint, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable but always store a tuple
        if not isinstance(self.points, tuple):
            object.__setattr__(self, "points", tuple(self.points))
        for i in range(1, len(self.points)):
            prev, curr = self.points[i - 1], self.points[i]
            if curr.cutoff <= prev.cutoff:
                raise CurveConfigError(
                    f"Cutoffs must be strictly increasing: "
                    f"cutoff[{i - 1}]={prev.cutoff} >= cutoff[{i}]={curr.cutoff}"
                )

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[int, int]]) -> Curve:
        """Build a curve from (cutoff, rate) tuples."""
        return cls(tuple(CutoffPoint(cutoff=c, rate=r) for c, r in pairs))

    @classmethod
    def unchecked(cls, points: Iterable[CutoffPoint]) -> Curve:
        """Build a curve without validating cutoff ordering.

        Only meant for reproducing on-chain configurations that were never
        validated; integrating such a curve can raise DivisionByZero.
        """
        curve = object.__new__(cls)
        object.__setattr__(curve, "points", tuple(points))
        return curve

    @property
    def is_empty(self) -> bool:
        return not self.points

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index: int) -> CutoffPoint:
        return self.points[index]

    def __iter__(self) -> Iterator[CutoffPoint]:
        return iter(self.points)


@dataclass(frozen=True, slots=True)
class Interval:
    """The balance range governed by one curve segment.

    Intervals are half-open: [lower, upper). A None bound is unbounded.

    Attributes:
        index: Segment index (0..len(curve)), or -1 if no segment matched
        lower: Inclusive lower bound, None for negative infinity
        upper: Exclusive upper bound, None for positive infinity
    """

    index: int
    lower: Bound
    upper: Bound

    def contains(self, target: int) -> bool:
        """True if lower <= target < upper."""
        if self.lower is not None and target < self.lower:
            return False
        if self.upper is not None and target >= self.upper:
            return False
        return True
