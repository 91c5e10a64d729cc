"""Guard functions for the pool state machine.

One pure function per action. Each inspects the PRE-state and the request
and returns ``None`` when the action may proceed, or a ``(code, detail)``
rejection. Guards cover lifecycle and request-domain checks; failures that
depend on computed quantities (overflow, slippage, liquidity) are raised by
the update functions.
"""

from __future__ import annotations

from typing import Optional, Tuple

from .config import PoolConfig
from .errors import PoolErrorCode
from .math import in_domain
from .types import (
    AddLiquidityRequest,
    InitializeRequest,
    PoolState,
    RemoveLiquidityRequest,
    SwapRequest,
)

Rejection = Tuple[PoolErrorCode, str]


def _amount_rejection(name: str, value: int, config: PoolConfig) -> Optional[Rejection]:
    if not in_domain(value, limit=config.amount_max):
        return PoolErrorCode.INVALID_AMOUNT, f"{name} must be in [1, {config.amount_max}]: {value}"
    return None


def guard_initialize(state: PoolState, req: InitializeRequest, config: PoolConfig) -> Optional[Rejection]:
    if state.initialized:
        return PoolErrorCode.ALREADY_INITIALIZED, "pool already exists"
    return _amount_rejection("amount_a", req.amount_a, config) or _amount_rejection(
        "amount_b", req.amount_b, config
    )


def guard_add_liquidity(state: PoolState, req: AddLiquidityRequest, config: PoolConfig) -> Optional[Rejection]:
    if not state.initialized:
        return PoolErrorCode.POOL_NOT_INITIALIZED, "add_liquidity before initialize"
    rejection = _amount_rejection("amount_a", req.amount_a, config) or _amount_rejection(
        "amount_b", req.amount_b, config
    )
    if rejection is not None:
        return rejection
    if state.total_shares > 0 and (state.reserve_a == 0 or state.reserve_b == 0):
        return PoolErrorCode.EMPTY_POOL, "outstanding shares are not backed by both reserves"
    return None


def guard_swap(state: PoolState, req: SwapRequest, config: PoolConfig) -> Optional[Rejection]:
    if not state.initialized:
        return PoolErrorCode.POOL_NOT_INITIALIZED, "swap before initialize"
    if state.total_shares == 0 or state.reserve_a == 0 or state.reserve_b == 0:
        return PoolErrorCode.EMPTY_POOL, (
            f"no liquidity: reserves=({state.reserve_a}, {state.reserve_b}), "
            f"total_shares={state.total_shares}"
        )
    rejection = _amount_rejection("amount_in", req.amount_in, config)
    if rejection is not None:
        return rejection
    if not (0 <= req.min_amount_out <= config.amount_max):
        return PoolErrorCode.INVALID_AMOUNT, (
            f"min_amount_out must be in [0, {config.amount_max}]: {req.min_amount_out}"
        )
    return None


def guard_remove_liquidity(
    state: PoolState, req: RemoveLiquidityRequest, config: PoolConfig
) -> Optional[Rejection]:
    if not state.initialized:
        return PoolErrorCode.POOL_NOT_INITIALIZED, "remove_liquidity before initialize"
    rejection = _amount_rejection("shares_to_burn", req.shares_to_burn, config)
    if rejection is not None:
        return rejection
    if req.shares_to_burn > state.total_shares:
        return PoolErrorCode.INSUFFICIENT_SHARES, (
            f"cannot burn {req.shares_to_burn} of {state.total_shares} outstanding shares"
        )
    return None
