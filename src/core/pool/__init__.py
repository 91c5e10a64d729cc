"""`pool`: the single-pool constant-product state machine.

- deterministic, integer-only transitions with explicit width checks,
- immutable state (frozen dataclasses) passed in and returned explicitly,
- fail-closed guards and invariant checks; a rejected step writes nothing.

Public API:
- `initial_state() -> PoolState`
- `step(state, request, config) -> StepResult`
- `step_or_raise(state, request, config) -> StepResult` (raises on rejection)
"""

from .config import DEFAULT_CONFIG, PoolConfig
from .engine import step, step_or_raise
from .errors import (
    AlreadyInitializedError,
    ArithmeticOverflowError,
    EmptyPoolError,
    InsufficientLiquidityError,
    InsufficientSharesError,
    InvalidAmountError,
    PoolError,
    PoolErrorCode,
    PoolInvariantError,
    PoolNotInitializedError,
    SlippageExceededError,
)
from .state import initial_state, state_from_dict, state_to_dict
from .types import (
    Action,
    AddLiquidityRequest,
    Direction,
    InitializeRequest,
    Initialized,
    LiquidityAdded,
    LiquidityRemoved,
    Outcome,
    PoolState,
    RemoveLiquidityRequest,
    Request,
    StepResult,
    SwapRequest,
    Swapped,
)
from ...kernels.python.lp_shares import ShareAnchor

__all__ = [
    "step",
    "step_or_raise",
    "initial_state",
    "state_from_dict",
    "state_to_dict",
    "PoolConfig",
    "DEFAULT_CONFIG",
    "ShareAnchor",
    "Action",
    "Direction",
    "PoolState",
    "Request",
    "InitializeRequest",
    "AddLiquidityRequest",
    "SwapRequest",
    "RemoveLiquidityRequest",
    "Outcome",
    "Initialized",
    "LiquidityAdded",
    "Swapped",
    "LiquidityRemoved",
    "StepResult",
    "PoolErrorCode",
    "PoolError",
    "PoolNotInitializedError",
    "AlreadyInitializedError",
    "InvalidAmountError",
    "ArithmeticOverflowError",
    "InsufficientLiquidityError",
    "InsufficientSharesError",
    "SlippageExceededError",
    "EmptyPoolError",
    "PoolInvariantError",
]
