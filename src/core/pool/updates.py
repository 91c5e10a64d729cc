"""State transition functions for the pool state machine.

One pure function per action. Each evaluates against the PRE-state (already
accepted by the matching guard) and returns ``(new_state, outcome)``; it
raises a ``PoolError`` subclass when a computed quantity is out of range.
Nothing is written until every check has passed: new states are built with
``dataclasses.replace()`` on frozen dataclasses.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Tuple

from ...kernels.python.cpmm_swap import swap_exact_in
from ...kernels.python.lp_shares import burn_shares, mint_shares
from .config import PoolConfig
from .errors import (
    InsufficientLiquidityError,
    InvalidAmountError,
    PoolInvariantError,
    SlippageExceededError,
)
from .math import checked_add, checked_sub, require_width
from .types import (
    AddLiquidityRequest,
    Direction,
    InitializeRequest,
    Initialized,
    LiquidityAdded,
    LiquidityRemoved,
    PoolState,
    RemoveLiquidityRequest,
    SwapRequest,
    Swapped,
)


def apply_initialize(
    state: PoolState, req: InitializeRequest, config: PoolConfig
) -> Tuple[PoolState, Initialized]:
    # No shares here: the first add_liquidity mints by the anchor rule.
    new_state = PoolState(
        initialized=True,
        reserve_a=req.amount_a,
        reserve_b=req.amount_b,
        total_shares=0,
    )
    return new_state, Initialized(reserve_a=req.amount_a, reserve_b=req.amount_b)


def apply_add_liquidity(
    state: PoolState, req: AddLiquidityRequest, config: PoolConfig
) -> Tuple[PoolState, LiquidityAdded]:
    try:
        res = mint_shares(
            reserve_a=state.reserve_a,
            reserve_b=state.reserve_b,
            total_shares=state.total_shares,
            amount_a=req.amount_a,
            amount_b=req.amount_b,
            anchor=config.share_anchor,
        )
    except ValueError as exc:
        raise InvalidAmountError(str(exc)) from exc

    limit = config.amount_max
    require_width(res.shares_minted, limit=limit, what="shares_minted")
    new_state = replace(
        state,
        reserve_a=checked_add(state.reserve_a, req.amount_a, limit=limit, what="reserve_a"),
        reserve_b=checked_add(state.reserve_b, req.amount_b, limit=limit, what="reserve_b"),
        total_shares=checked_add(state.total_shares, res.shares_minted, limit=limit, what="total_shares"),
    )
    return new_state, LiquidityAdded(
        shares_minted=res.shares_minted,
        amount_a=req.amount_a,
        amount_b=req.amount_b,
    )


def apply_swap(state: PoolState, req: SwapRequest, config: PoolConfig) -> Tuple[PoolState, Swapped]:
    reserve_in, reserve_out = state.reserves_for(req.direction)

    # The full gross input lands in reserve_in.
    new_reserve_in = checked_add(reserve_in, req.amount_in, limit=config.amount_max, what="reserve_in")

    try:
        res = swap_exact_in(
            reserve_in=reserve_in,
            reserve_out=reserve_out,
            amount_in=req.amount_in,
            fee_bps=config.fee_bps,
        )
    except ValueError as exc:
        raise InvalidAmountError(str(exc)) from exc

    if res.amount_out >= reserve_out:
        raise InsufficientLiquidityError(
            f"amount_out ({res.amount_out}) would drain reserve_out ({reserve_out})"
        )
    if res.amount_out < req.min_amount_out:
        raise SlippageExceededError(
            f"amount_out ({res.amount_out}) < min_amount_out ({req.min_amount_out})"
        )
    if res.k_after < res.k_before:
        raise PoolInvariantError(["k_non_decreasing"])

    if req.direction is Direction.A_TO_B:
        new_state = replace(state, reserve_a=new_reserve_in, reserve_b=res.new_reserve_out)
    else:
        new_state = replace(state, reserve_a=res.new_reserve_out, reserve_b=new_reserve_in)

    return new_state, Swapped(
        direction=req.direction,
        amount_in=req.amount_in,
        amount_out=res.amount_out,
        fee_total=res.fee_total,
    )


def apply_remove_liquidity(
    state: PoolState, req: RemoveLiquidityRequest, config: PoolConfig
) -> Tuple[PoolState, LiquidityRemoved]:
    res = burn_shares(
        shares=req.shares_to_burn,
        reserve_a=state.reserve_a,
        reserve_b=state.reserve_b,
        total_shares=state.total_shares,
    )
    new_state = replace(
        state,
        reserve_a=checked_sub(state.reserve_a, res.amount_a_out, what="reserve_a"),
        reserve_b=checked_sub(state.reserve_b, res.amount_b_out, what="reserve_b"),
        total_shares=checked_sub(state.total_shares, req.shares_to_burn, what="total_shares"),
    )
    return new_state, LiquidityRemoved(
        shares_burned=req.shares_to_burn,
        amount_a_out=res.amount_a_out,
        amount_b_out=res.amount_b_out,
    )
