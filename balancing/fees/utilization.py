"""Hub pool utilization.

Utilization here is reported as remaining capacity: 10^decimals minus the
share of hub equity that is already committed to the hub, the hub chain's
spoke pool and the other spoke pools' targets.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from balancing.math.fixed_point import ONE_18, div_trunc


@dataclass(frozen=True, slots=True)
class SpokeTarget:
    """Target balance of a spoke pool.

    Attributes:
        target: Target balance (token units)
        spoke_chain_id: Chain the spoke pool lives on
    """

    target: int
    spoke_chain_id: int


def calculate_utilization(
    decimals: int,
    hub_balance: int,
    hub_equity: int,
    hub_spoke_balance: int,
    spoke_targets: Iterable[SpokeTarget],
    hub_chain_id: int,
) -> int:
    """Compute hub pool utilization as remaining capacity.

    Args:
        decimals: Decimals of the result unit
        hub_balance: Token balance held by the hub pool
        hub_equity: Total LP equity of the hub pool
        hub_spoke_balance: Balance of the spoke pool on the hub chain
        spoke_targets: Target balances of the spoke pools
        hub_chain_id: Chain id of the hub; its own target is excluded

    Returns:
        10^decimals - (numerator * 1e18 / hub_equity)

    Raises:
        DivisionByZero: If hub_equity is zero
    """
    committed = sum(
        (t.target for t in spoke_targets if t.spoke_chain_id != hub_chain_id),
        0,
    )
    numerator = hub_balance + hub_spoke_balance + committed
    ratio = div_trunc(numerator * ONE_18, hub_equity)
    return 10**decimals - ratio
