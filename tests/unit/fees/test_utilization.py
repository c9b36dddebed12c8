"""Tests for hub pool utilization."""

import pytest

from balancing.fees.utilization import SpokeTarget, calculate_utilization
from balancing.math.fixed_point import DivisionByZero
from tests.helpers import ONE, units

MAINNET = 1
OPTIMISM = 10
ARBITRUM = 42161


class TestCalculateUtilization:
    """Tests for calculate_utilization()."""

    def test_excludes_hub_chain_target(self):
        """400 + 100 + 200 committed out of 1000 equity leaves 0.3."""
        targets = [SpokeTarget(units(200), OPTIMISM), SpokeTarget(units(300), MAINNET)]
        result = calculate_utilization(18, units(400), units(1000), units(100), targets, MAINNET)
        assert result == 3 * ONE // 10

    def test_hub_chain_is_a_parameter(self):
        """Treating Optimism as the hub excludes its target instead."""
        targets = [SpokeTarget(units(200), OPTIMISM), SpokeTarget(units(300), MAINNET)]
        result = calculate_utilization(18, units(400), units(1000), units(100), targets, OPTIMISM)
        assert result == 2 * ONE // 10

    def test_no_targets(self):
        result = calculate_utilization(18, units(500), units(1000), 0, [], MAINNET)
        assert result == ONE // 2

    def test_all_targets_summed(self):
        targets = [SpokeTarget(units(100), OPTIMISM), SpokeTarget(units(150), ARBITRUM)]
        result = calculate_utilization(18, 0, units(1000), 0, targets, MAINNET)
        assert result == ONE - ONE // 4

    def test_remaining_capacity_uses_decimals(self):
        """The ratio is always 18-decimal; only the subtrahend uses decimals."""
        result = calculate_utilization(6, units(700), units(1000), 0, [], MAINNET)
        assert result == 10**6 - 7 * ONE // 10

    def test_over_committed_is_negative(self):
        result = calculate_utilization(18, units(1500), units(1000), 0, [], MAINNET)
        assert result == -ONE // 2

    def test_ratio_truncates(self):
        """1 / 3 of equity: 333333333333333333 after truncation."""
        result = calculate_utilization(18, 1, 3, 0, [], MAINNET)
        assert result == ONE - 333_333_333_333_333_333

    def test_accepts_generator(self):
        targets = (SpokeTarget(units(n), OPTIMISM) for n in (100, 100))
        result = calculate_utilization(18, 0, units(1000), 0, targets, MAINNET)
        assert result == ONE - ONE // 5

    def test_zero_equity_raises(self):
        with pytest.raises(DivisionByZero):
            calculate_utilization(18, 100, 0, 0, [], 1)

    def test_zero_equity_is_arithmetic_error(self):
        with pytest.raises(ArithmeticError):
            calculate_utilization(18, 0, 0, 0, [], 1)
