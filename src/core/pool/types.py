"""Data types for the pool state machine.

All types are frozen dataclasses (immutable). Each request type carries a
class-level `action` tag, so the four requests form a tagged variant
(`Request`) and the engine dispatches on the tag.

Units/conventions:
- all amounts are unsigned integer base units of the respective asset,
- `*_bps` rates are basis points (1/10_000),
- shares are integer liquidity-provider share units.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique
from typing import ClassVar, Union

from .errors import PoolErrorCode


@unique
class Action(Enum):
    INITIALIZE = "initialize"
    ADD_LIQUIDITY = "add_liquidity"
    SWAP = "swap"
    REMOVE_LIQUIDITY = "remove_liquidity"


@unique
class Direction(Enum):
    """Which asset the swapper supplies."""

    A_TO_B = "A_TO_B"
    B_TO_A = "B_TO_A"


def _require_ints(obj: object, *names: str) -> None:
    for name in names:
        v = getattr(obj, name)
        if not isinstance(v, int) or isinstance(v, bool):
            raise TypeError(f"{type(obj).__name__}.{name} must be an int")


@dataclass(frozen=True)
class PoolState:
    """The single pool record. `PoolState()` is the NonExistent state."""

    initialized: bool = False
    reserve_a: int = 0
    reserve_b: int = 0
    total_shares: int = 0

    @property
    def k(self) -> int:
        """Constant product `reserve_a * reserve_b`."""
        return self.reserve_a * self.reserve_b

    def reserves_for(self, direction: Direction) -> tuple[int, int]:
        """Return (reserve_in, reserve_out) for a swap direction."""
        if direction is Direction.A_TO_B:
            return self.reserve_a, self.reserve_b
        return self.reserve_b, self.reserve_a


# -- Requests ----------------------------------------------------------------

@dataclass(frozen=True)
class InitializeRequest:
    amount_a: int
    amount_b: int

    action: ClassVar[Action] = Action.INITIALIZE

    def __post_init__(self) -> None:
        _require_ints(self, "amount_a", "amount_b")


@dataclass(frozen=True)
class AddLiquidityRequest:
    amount_a: int
    amount_b: int

    action: ClassVar[Action] = Action.ADD_LIQUIDITY

    def __post_init__(self) -> None:
        _require_ints(self, "amount_a", "amount_b")


@dataclass(frozen=True)
class SwapRequest:
    amount_in: int
    min_amount_out: int
    direction: Direction

    action: ClassVar[Action] = Action.SWAP

    def __post_init__(self) -> None:
        _require_ints(self, "amount_in", "min_amount_out")
        if not isinstance(self.direction, Direction):
            raise TypeError("SwapRequest.direction must be a Direction")


@dataclass(frozen=True)
class RemoveLiquidityRequest:
    shares_to_burn: int

    action: ClassVar[Action] = Action.REMOVE_LIQUIDITY

    def __post_init__(self) -> None:
        _require_ints(self, "shares_to_burn")


Request = Union[InitializeRequest, AddLiquidityRequest, SwapRequest, RemoveLiquidityRequest]


# -- Outcomes ----------------------------------------------------------------

@dataclass(frozen=True)
class Initialized:
    reserve_a: int
    reserve_b: int


@dataclass(frozen=True)
class LiquidityAdded:
    shares_minted: int
    amount_a: int
    amount_b: int


@dataclass(frozen=True)
class Swapped:
    direction: Direction
    amount_in: int
    amount_out: int
    fee_total: int


@dataclass(frozen=True)
class LiquidityRemoved:
    shares_burned: int
    amount_a_out: int
    amount_b_out: int


Outcome = Union[Initialized, LiquidityAdded, Swapped, LiquidityRemoved]


@dataclass(frozen=True)
class StepResult:
    """Result of a single engine step.

    On rejection `state` is None: the caller's pre-state is still current.
    """

    accepted: bool
    state: PoolState | None = None
    outcome: Outcome | None = None
    error: PoolErrorCode | None = None
    detail: str | None = None
