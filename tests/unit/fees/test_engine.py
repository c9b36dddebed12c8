"""Tests for the balancing fee engine (deposit / refund segment walks)."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from balancing.curve import Curve
from balancing.errors import InvalidAmountError
from balancing.fees.engine import (
    FlowDirection,
    SegmentSpan,
    balancing_fee,
    deposit_fee,
    plan_segments,
    refund_fee,
)
from tests.helpers import ONE, make_curve, make_flat_curve, pct, units


@pytest.fixture
def three_point_curve() -> Curve:
    """[(100, 1%), (200, 2%), (400, 0.5%)]: rises, then falls."""
    return make_curve((100, 100), (200, 200), (400, 50))


class TestPlanSegments:
    """Tests for splitting a flow into per-segment spans."""

    def test_deposit_across_two_segments(self, two_point_curve):
        spans = plan_segments(two_point_curve, units(150), units(250))
        assert spans == [
            SegmentSpan(index=1, start=units(150), end=units(200)),
            SegmentSpan(index=2, start=units(200), end=units(250)),
        ]

    def test_refund_across_two_segments(self, two_point_curve):
        spans = plan_segments(two_point_curve, units(250), units(150))
        assert spans == [
            SegmentSpan(index=2, start=units(250), end=units(200)),
            SegmentSpan(index=1, start=units(200), end=units(150)),
        ]

    def test_within_one_segment(self, two_point_curve):
        spans = plan_segments(two_point_curve, units(120), units(180))
        assert spans == [SegmentSpan(index=1, start=units(120), end=units(180))]

    def test_interior_segment_covers_whole_range(self, two_point_curve):
        spans = plan_segments(two_point_curve, units(50), units(250))
        assert [s.index for s in spans] == [0, 1, 2]
        assert spans[1] == SegmentSpan(index=1, start=units(100), end=units(200))

    def test_refund_interior_segment_runs_downward(self, two_point_curve):
        spans = plan_segments(two_point_curve, units(250), units(50))
        assert [s.index for s in spans] == [2, 1, 0]
        assert spans[1] == SegmentSpan(index=1, start=units(200), end=units(100))

    def test_end_on_cutoff_adds_zero_width_span(self, two_point_curve):
        spans = plan_segments(two_point_curve, units(150), units(200))
        assert spans[-1] == SegmentSpan(index=2, start=units(200), end=units(200))

    def test_span_count(self, three_point_curve):
        """|balance_index - end_index| + 1 spans."""
        assert len(plan_segments(three_point_curve, -units(1000), units(1000))) == 4
        assert len(plan_segments(three_point_curve, units(1000), -units(1000))) == 4

    def test_zero_move(self, two_point_curve):
        spans = plan_segments(two_point_curve, units(150), units(150))
        assert spans == [SegmentSpan(index=1, start=units(150), end=units(150))]


class TestDepositFee:
    """Tests for deposit_fee()."""

    def test_concrete_two_segment_deposit(self, two_point_curve):
        """150 -> 250: 0.875 over the rising segment plus 1.0 over the 2% tail."""
        assert deposit_fee(two_point_curve, units(150), units(100)) == 1_875_000_000_000_000_000

    def test_single_segment(self, two_point_curve):
        assert deposit_fee(two_point_curve, units(100), units(50)) == 625 * ONE // 1000

    def test_crosses_every_segment(self, two_point_curve):
        """0.5 (flat 1%) + 1.5 (rising) + 1.0 (flat 2%)."""
        assert deposit_fee(two_point_curve, units(50), units(200)) == 3 * ONE

    def test_full_curve_span(self, three_point_curve):
        """1.0 + 1.5 + 2.5 + 0.5 across all four segments."""
        assert deposit_fee(three_point_curve, 0, units(500)) == 55 * ONE // 10

    def test_zero_amount(self, two_point_curve):
        assert deposit_fee(two_point_curve, units(150), 0) == 0

    def test_empty_curve(self, empty_curve):
        assert deposit_fee(empty_curve, units(150), units(10**6)) == 0

    def test_negative_rate_gives_negative_fee(self):
        curve = Curve.from_pairs([(0, -pct(100)), (units(100), pct(100))])
        assert deposit_fee(curve, -units(100), units(100)) == -ONE

    def test_negative_amount_rejected(self, two_point_curve):
        with pytest.raises(InvalidAmountError):
            deposit_fee(two_point_curve, units(150), -1)

    def test_negative_amount_is_value_error(self, two_point_curve):
        with pytest.raises(ValueError):
            deposit_fee(two_point_curve, units(150), -units(1))


class TestRefundFee:
    """Tests for refund_fee()."""

    def test_concrete_two_segment_refund(self, two_point_curve):
        assert refund_fee(two_point_curve, units(250), units(100)) == -1_875_000_000_000_000_000

    def test_crosses_every_segment(self, two_point_curve):
        assert refund_fee(two_point_curve, units(250), units(200)) == -3 * ONE

    def test_zero_amount(self, two_point_curve):
        assert refund_fee(two_point_curve, units(150), 0) == 0

    def test_refund_below_zero_balance(self, two_point_curve):
        """Balances may go negative; the first segment extends flat."""
        assert refund_fee(two_point_curve, 0, units(100)) == -ONE

    def test_negative_amount_rejected(self, two_point_curve):
        with pytest.raises(InvalidAmountError):
            refund_fee(two_point_curve, units(150), -1)


class TestFeeProperties:
    """Algebraic properties of the segment walk."""

    BALANCES = [-units(50), 0, units(99), units(100), units(150), units(200) + 7, units(450)]
    AMOUNTS = [0, 1, units(1), units(33) + 123_456_789, units(100), units(400)]

    def test_antisymmetry(self, three_point_curve):
        """Depositing then refunding the same amount costs exactly opposite fees."""
        for balance in self.BALANCES:
            for amount in self.AMOUNTS:
                deposit = deposit_fee(three_point_curve, balance, amount)
                refund = refund_fee(three_point_curve, balance + amount, amount)
                assert deposit == -refund, (balance, amount)

    def test_additivity(self, three_point_curve):
        """Splitting a deposit at any point does not change the total.

        Whole-unit amounts keep every intermediate product exact on this curve.
        """
        for a in range(0, 500, 50):
            for b in range(a, 500, 70):
                for c in range(b, 520, 90):
                    whole = deposit_fee(three_point_curve, units(a), units(c - a))
                    first = deposit_fee(three_point_curve, units(a), units(b - a))
                    second = deposit_fee(three_point_curve, units(b), units(c - b))
                    assert whole == first + second, (a, b, c)

    def test_refund_additivity(self, three_point_curve):
        whole = refund_fee(three_point_curve, units(450), units(400))
        parts = refund_fee(three_point_curve, units(450), units(150)) + refund_fee(
            three_point_curve, units(300), units(250)
        )
        assert whole == parts

    def test_flat_curve_reduction(self):
        """A single-point curve charges rate * amount regardless of position."""
        rate = pct(300)
        for cutoff in (-100, 0, 100, 10**6):
            curve = make_flat_curve(cutoff=cutoff, bps=300)
            for balance in (units(-200), 0, units(100), units(150)):
                for amount in (0, units(1), units(100), units(250)):
                    expected = rate * amount // ONE
                    assert deposit_fee(curve, balance, amount) == expected
                    assert refund_fee(curve, balance, amount) == -expected

    def test_shared_curve_across_threads(self, three_point_curve):
        """Concurrent readers of one curve see the same results."""
        balances = [units(b) for b in range(-100, 600, 10)]

        def quote(balance: int) -> int:
            return deposit_fee(three_point_curve, balance, units(75))

        expected = [quote(b) for b in balances]
        with ThreadPoolExecutor(max_workers=8) as pool:
            assert list(pool.map(quote, balances)) == expected


class TestBalancingFee:
    """Tests for direction dispatch."""

    def test_deposit(self, two_point_curve):
        fee = balancing_fee(two_point_curve, units(150), units(100), FlowDirection.DEPOSIT)
        assert fee == deposit_fee(two_point_curve, units(150), units(100))

    def test_refund(self, two_point_curve):
        fee = balancing_fee(two_point_curve, units(150), units(100), FlowDirection.REFUND)
        assert fee == refund_fee(two_point_curve, units(150), units(100))

    def test_direction_values(self):
        assert FlowDirection("deposit") is FlowDirection.DEPOSIT
        assert FlowDirection("refund") is FlowDirection.REFUND
