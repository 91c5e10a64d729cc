"""Error taxonomy for the pool state machine.

Every rejection carries a `PoolErrorCode`. `step()` returns the code inside a
``StepResult``; ``step_or_raise()`` raises the matching exception class.
All of them are recoverable by the caller; the pool state is never touched
by a rejected step.
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class PoolErrorCode(Enum):
    POOL_NOT_INITIALIZED = "PoolNotInitialized"
    ALREADY_INITIALIZED = "AlreadyInitialized"
    INVALID_AMOUNT = "InvalidAmount"
    ARITHMETIC_OVERFLOW = "ArithmeticOverflow"
    INSUFFICIENT_LIQUIDITY = "InsufficientLiquidity"
    INSUFFICIENT_SHARES = "InsufficientShares"
    SLIPPAGE_EXCEEDED = "SlippageExceeded"
    EMPTY_POOL = "EmptyPool"
    INVARIANT_VIOLATION = "InvariantViolation"


class PoolError(Exception):
    """Base class for typed pool failures."""

    code: PoolErrorCode

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(f"{self.code.value}: {detail}" if detail else self.code.value)


class PoolNotInitializedError(PoolError):
    code = PoolErrorCode.POOL_NOT_INITIALIZED


class AlreadyInitializedError(PoolError):
    code = PoolErrorCode.ALREADY_INITIALIZED


class InvalidAmountError(PoolError):
    code = PoolErrorCode.INVALID_AMOUNT


class ArithmeticOverflowError(PoolError, ArithmeticError):
    code = PoolErrorCode.ARITHMETIC_OVERFLOW


class InsufficientLiquidityError(PoolError):
    code = PoolErrorCode.INSUFFICIENT_LIQUIDITY


class InsufficientSharesError(PoolError):
    code = PoolErrorCode.INSUFFICIENT_SHARES


class SlippageExceededError(PoolError):
    code = PoolErrorCode.SLIPPAGE_EXCEEDED


class EmptyPoolError(PoolError):
    code = PoolErrorCode.EMPTY_POOL


class PoolInvariantError(PoolError):
    """Raised when a post-state violates one or more invariants (an engine defect)."""

    code = PoolErrorCode.INVARIANT_VIOLATION

    def __init__(self, violations: list[str]) -> None:
        self.violations = violations
        Exception.__init__(self, f"invariant violations: {', '.join(violations)}")
        self.detail = ",".join(violations)


_ERROR_BY_CODE: dict[PoolErrorCode, type[PoolError]] = {
    cls.code: cls
    for cls in (
        PoolNotInitializedError,
        AlreadyInitializedError,
        InvalidAmountError,
        ArithmeticOverflowError,
        InsufficientLiquidityError,
        InsufficientSharesError,
        SlippageExceededError,
        EmptyPoolError,
    )
}


def error_for(code: PoolErrorCode, detail: str = "") -> PoolError:
    """Build the exception instance for a rejection code."""
    if code is PoolErrorCode.INVARIANT_VIOLATION:
        return PoolInvariantError([v for v in detail.split(",") if v])
    return _ERROR_BY_CODE[code](detail)
