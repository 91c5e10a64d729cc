"""Dispatch-table engine for the pool state machine.

``step(state, request, config)`` is the single entry point. It:

1. Dispatches on the request's action tag.
2. Runs the action's guard against the PRE-state.
3. Computes the post-state and outcome (width-checked arithmetic).
4. Checks all invariants on the post-state.
5. Returns a ``StepResult`` (accepted, or rejected with a typed code).

A rejected step never returns a state, so the caller's pre-state stays
authoritative. The engine holds no mutable state and never logs.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from .config import DEFAULT_CONFIG, PoolConfig
from .errors import PoolError, PoolErrorCode, error_for
from .guards import (
    Rejection,
    guard_add_liquidity,
    guard_initialize,
    guard_remove_liquidity,
    guard_swap,
)
from .invariants import check_all
from .types import Action, PoolState, Request, StepResult
from .updates import (
    apply_add_liquidity,
    apply_initialize,
    apply_remove_liquidity,
    apply_swap,
)

GuardFn = Callable[[PoolState, Any, PoolConfig], Optional[Rejection]]
UpdateFn = Callable[[PoolState, Any, PoolConfig], tuple]

_DISPATCH: dict[Action, tuple[GuardFn, UpdateFn]] = {
    Action.INITIALIZE: (guard_initialize, apply_initialize),
    Action.ADD_LIQUIDITY: (guard_add_liquidity, apply_add_liquidity),
    Action.SWAP: (guard_swap, apply_swap),
    Action.REMOVE_LIQUIDITY: (guard_remove_liquidity, apply_remove_liquidity),
}


def _reject(code: PoolErrorCode, detail: str) -> StepResult:
    return StepResult(accepted=False, error=code, detail=detail)


def step(state: PoolState, request: Request, config: PoolConfig = DEFAULT_CONFIG) -> StepResult:
    """Execute one request against the given state.

    Returns ``StepResult`` with ``accepted=True`` and the new state on success,
    or ``accepted=False`` with an ``error`` code and a human-readable ``detail``.

    Raises:
        TypeError: ``state`` is not a PoolState or ``request`` is not a known request type.
    """
    if not isinstance(state, PoolState):
        raise TypeError(f"state must be a PoolState, got {type(state).__name__}")
    entry = _DISPATCH.get(getattr(request, "action", None))
    if entry is None:
        raise TypeError(f"unknown request type: {type(request).__name__}")

    guard_fn, update_fn = entry

    rejection = guard_fn(state, request, config)
    if rejection is not None:
        return _reject(*rejection)

    try:
        new_state, outcome = update_fn(state, request, config)
    except PoolError as exc:
        return _reject(exc.code, exc.detail)

    violations = check_all(new_state, config)
    if violations:
        return _reject(PoolErrorCode.INVARIANT_VIOLATION, ",".join(violations))

    return StepResult(accepted=True, state=new_state, outcome=outcome)


def step_or_raise(state: PoolState, request: Request, config: PoolConfig = DEFAULT_CONFIG) -> StepResult:
    """Like ``step()`` but raises on rejection instead of returning a result.

    Raises:
        PoolError: the subclass matching the rejection code, e.g.
            ``SlippageExceededError`` or ``ArithmeticOverflowError``.
    """
    result = step(state, request, config)
    if result.accepted:
        return result
    if result.error is None:
        raise TypeError("rejected result must carry an error code")
    raise error_for(result.error, result.detail or "")
