"""Invariant checkers for the pool state machine.

Each function returns True when the invariant holds; `check_all()` returns
the list of violated invariant IDs (empty = all pass). The engine runs
`check_all()` on every post-state before accepting a step.
"""

from __future__ import annotations

from typing import Callable

from .config import PoolConfig
from .types import PoolState


def inv_reserves_in_width(s: PoolState, config: PoolConfig) -> bool:
    return 0 <= s.reserve_a <= config.amount_max and 0 <= s.reserve_b <= config.amount_max


def inv_shares_in_width(s: PoolState, config: PoolConfig) -> bool:
    return 0 <= s.total_shares <= config.amount_max


def inv_uninitialized_zeroed(s: PoolState, config: PoolConfig) -> bool:
    if s.initialized:
        return True
    return s.reserve_a == 0 and s.reserve_b == 0 and s.total_shares == 0


def inv_shares_backed(s: PoolState, config: PoolConfig) -> bool:
    # Outstanding shares always have something on both sides to claim.
    if s.total_shares == 0:
        return True
    return s.reserve_a > 0 and s.reserve_b > 0


_INVARIANTS: tuple[tuple[str, Callable[[PoolState, PoolConfig], bool]], ...] = (
    ("reserves_in_width", inv_reserves_in_width),
    ("shares_in_width", inv_shares_in_width),
    ("uninitialized_zeroed", inv_uninitialized_zeroed),
    ("shares_backed", inv_shares_backed),
)

INVARIANT_IDS: tuple[str, ...] = tuple(name for name, _ in _INVARIANTS)


def check_all(s: PoolState, config: PoolConfig) -> list[str]:
    """Return IDs of every violated invariant."""
    return [name for name, fn in _INVARIANTS if not fn(s, config)]
