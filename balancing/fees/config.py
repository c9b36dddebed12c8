"""Fee configuration for the balancing fee service."""

from dataclasses import dataclass

# Ethereum mainnet, where the hub pool lives
HUB_POOL_CHAIN_ID = 1


@dataclass(frozen=True)
class FeeConfig:
    """Centralized configuration for balancing fee calculation.

    Attributes:
        hub_chain_id: Chain id of the hub pool, excluded from the spoke
            target sum when computing utilization (default: 1)
        reject_on_negative_fee: If True, return an error when a flow would
            earn a rebate. If False, return the negative fee.
    """

    hub_chain_id: int = HUB_POOL_CHAIN_ID

    # Behavior flags
    reject_on_negative_fee: bool = False


# Default configuration instance
DEFAULT_FEE_CONFIG = FeeConfig()
