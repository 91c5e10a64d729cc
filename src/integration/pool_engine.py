"""
Pool execution adapter.

This is an imperative-shell wrapper around the functional core:
- Owns the current `PoolState`, the holder `ShareLedger`, and the `PoolConfig`.
- Steps the core and commits the new state and ledger together.
- Logs every accepted and rejected step.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import structlog

from ..core.pool import (
    DEFAULT_CONFIG,
    Action,
    LiquidityAdded,
    LiquidityRemoved,
    PoolConfig,
    PoolErrorCode,
    PoolState,
    Request,
    StepResult,
    initial_state,
    step,
)
from ..core.pool.state import state_to_dict
from ..state.shares import HolderId, ShareLedger
from .operations import encode_result, parse_request

logger = structlog.get_logger()

_SHARE_ACTIONS = (Action.ADD_LIQUIDITY, Action.REMOVE_LIQUIDITY)


class PoolEngine:
    """
    Stateful driver for a single pool.

    Not thread-safe: callers serialize `apply` per engine.
    """

    def __init__(
        self,
        config: Optional[PoolConfig] = None,
        *,
        state: Optional[PoolState] = None,
        ledger: Optional[ShareLedger] = None,
    ) -> None:
        self._config = DEFAULT_CONFIG if config is None else config
        self._state = initial_state() if state is None else state
        self._ledger = ShareLedger() if ledger is None else ledger

    @property
    def config(self) -> PoolConfig:
        return self._config

    @property
    def state(self) -> PoolState:
        return self._state

    @property
    def ledger(self) -> ShareLedger:
        return self._ledger

    def apply(self, request: Request, holder: Optional[HolderId] = None) -> StepResult:
        """
        Apply one request.

        `holder` names the liquidity provider for add/remove requests and is
        required for them; swaps and initialization ignore it.

        Returns the core `StepResult`. On rejection neither the pool state
        nor the ledger changes.
        """
        action = getattr(request, "action", None)
        if action in _SHARE_ACTIONS:
            if not isinstance(holder, str) or not holder:
                raise ValueError(f"{action.value} requires a non-empty holder")

        if action is Action.REMOVE_LIQUIDITY and self._state.initialized:
            balance = self._ledger.get(holder)
            if request.shares_to_burn > balance:
                result = StepResult(
                    accepted=False,
                    error=PoolErrorCode.INSUFFICIENT_SHARES,
                    detail=f"holder {holder} owns {balance} shares, cannot burn {request.shares_to_burn}",
                )
                self._log_rejected(request, result, holder)
                return result

        result = step(self._state, request, self._config)
        if not result.accepted:
            self._log_rejected(request, result, holder)
            return result

        new_ledger = self._ledger
        outcome = result.outcome
        if isinstance(outcome, LiquidityAdded):
            new_ledger = self._ledger.copy()
            new_ledger.add(holder, outcome.shares_minted)
        elif isinstance(outcome, LiquidityRemoved):
            new_ledger = self._ledger.copy()
            new_ledger.subtract(holder, outcome.shares_burned)

        if result.state is None:
            raise TypeError("accepted step returned no state")
        self._state = result.state
        self._ledger = new_ledger

        logger.info(
            "pool_step_accepted",
            op=action.value,
            holder=holder,
            **state_to_dict(self._state),
        )
        return result

    def apply_payload(self, payload: Mapping[str, Any], holder: Optional[HolderId] = None) -> Dict[str, Any]:
        """
        Parse a tagged operation object, apply it, and encode the result.

        Raises:
            ValueError: If the payload is malformed.
        """
        request = parse_request(payload)
        return encode_result(self.apply(request, holder=holder))

    def verify_share_supply(self) -> bool:
        """True when holder balances account for every outstanding share."""
        return self._ledger.total() == self._state.total_shares

    def _log_rejected(self, request: Request, result: StepResult, holder: Optional[HolderId]) -> None:
        logger.warning(
            "pool_step_rejected",
            op=request.action.value,
            holder=holder,
            error=result.error.value if result.error is not None else None,
            detail=result.detail,
        )
