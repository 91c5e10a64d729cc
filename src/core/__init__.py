"""
Core pool algorithms (functional core)
"""

from .pool import (
    DEFAULT_CONFIG,
    PoolConfig,
    PoolState,
    StepResult,
    initial_state,
    step,
    step_or_raise,
)

__all__ = [
    "DEFAULT_CONFIG",
    "PoolConfig",
    "PoolState",
    "StepResult",
    "initial_state",
    "step",
    "step_or_raise",
]
