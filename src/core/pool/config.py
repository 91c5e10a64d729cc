"""Policy constants for the pool state machine.

`PoolConfig` is passed explicitly into every step; nothing is read from
ambient state. Defaults:

- `fee_bps = 30` (0.30%, charged on the swap input, kept by the pool)
- `share_anchor = ASSET_A` (first deposit mints `amount_a` shares)
- `amount_bits = 64` (reserves/shares/amounts are u64; products are u128)
"""

from __future__ import annotations

from dataclasses import dataclass

from ...kernels.python.cpmm_swap import BPS_DENOM
from ...kernels.python.lp_shares import ShareAnchor

DEFAULT_FEE_BPS: int = 30
DEFAULT_SHARE_ANCHOR: ShareAnchor = ShareAnchor.ASSET_A
DEFAULT_AMOUNT_BITS: int = 64

MIN_AMOUNT_BITS: int = 8
MAX_AMOUNT_BITS: int = 256


@dataclass(frozen=True)
class PoolConfig:
    fee_bps: int = DEFAULT_FEE_BPS
    share_anchor: ShareAnchor = DEFAULT_SHARE_ANCHOR
    amount_bits: int = DEFAULT_AMOUNT_BITS

    def __post_init__(self) -> None:
        for name, v in (("fee_bps", self.fee_bps), ("amount_bits", self.amount_bits)):
            if not isinstance(v, int) or isinstance(v, bool):
                raise TypeError(f"{name} must be an int")
        # 100% fee would price every input at zero.
        if not (0 <= self.fee_bps < BPS_DENOM):
            raise ValueError(f"fee_bps must be in [0, {BPS_DENOM}): {self.fee_bps}")
        if not isinstance(self.share_anchor, ShareAnchor):
            raise TypeError("share_anchor must be a ShareAnchor")
        if not (MIN_AMOUNT_BITS <= self.amount_bits <= MAX_AMOUNT_BITS):
            raise ValueError(
                f"amount_bits must be in [{MIN_AMOUNT_BITS}, {MAX_AMOUNT_BITS}]: {self.amount_bits}"
            )

    @property
    def amount_max(self) -> int:
        """Largest storable reserve, share total, or request amount."""
        return (1 << self.amount_bits) - 1

    @property
    def wide_max(self) -> int:
        """Largest intermediate product (double width)."""
        return (1 << (2 * self.amount_bits)) - 1


DEFAULT_CONFIG = PoolConfig()
