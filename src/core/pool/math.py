"""Width-checked integer arithmetic for the pool state machine.

Python ints never wrap, so every stored quantity is compared against the
configured width explicitly. Products of two width-checked operands always
fit `PoolConfig.wide_max`. A stored value that would not fit raises
``ArithmeticOverflowError`` instead of being stored.

Division is floor division (``//``) on non-negative operands, which rounds
toward zero and therefore in favor of the pool.
"""

from __future__ import annotations

from .errors import ArithmeticOverflowError


def checked_add(a: int, b: int, *, limit: int, what: str) -> int:
    """``a + b``, rejecting results above *limit*."""
    result = a + b
    if result > limit:
        raise ArithmeticOverflowError(f"{what}: {a} + {b} exceeds {limit}")
    return result


def checked_sub(a: int, b: int, *, what: str) -> int:
    """``a - b``, rejecting negative results."""
    result = a - b
    if result < 0:
        raise ArithmeticOverflowError(f"{what}: {a} - {b} is negative")
    return result


def require_width(value: int, *, limit: int, what: str) -> int:
    """Return *value* if it fits in ``[0, limit]``."""
    if value < 0 or value > limit:
        raise ArithmeticOverflowError(f"{what}: {value} outside [0, {limit}]")
    return value


def in_domain(value: int, *, limit: int) -> bool:
    """True when *value* is a positive amount that fits the width."""
    return 0 < value <= limit
