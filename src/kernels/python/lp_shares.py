"""
Liquidity share kernel.

Pure functions with explicit rounding rules:
- minting on a funded pool takes the *smaller* of the two proportional
  claims (floor), and the caller's full deposit enters the reserves;
- minting on an empty share supply follows a named anchor rule;
- burning pays out floor(reserve * shares / supply) of each asset.

Rounding always favors the pool.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, unique


@unique
class ShareAnchor(Enum):
    """Shares minted by the first deposit into an empty share supply."""

    ASSET_A = "ASSET_A"                # shares = amount_a
    GEOMETRIC_MEAN = "GEOMETRIC_MEAN"  # shares = isqrt(amount_a * amount_b)
    SUM = "SUM"                        # shares = amount_a + amount_b


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


@dataclass(frozen=True)
class MintSharesResult:
    shares_minted: int
    new_reserve_a: int
    new_reserve_b: int
    new_total_shares: int


@dataclass(frozen=True)
class BurnSharesResult:
    amount_a_out: int
    amount_b_out: int
    new_reserve_a: int
    new_reserve_b: int
    new_total_shares: int


def anchor_shares(*, amount_a: int, amount_b: int, anchor: ShareAnchor) -> int:
    """Shares for a deposit into an empty share supply."""
    _require_int("amount_a", amount_a)
    _require_int("amount_b", amount_b)
    if amount_a <= 0 or amount_b <= 0:
        raise ValueError("deposit amounts must be positive")
    if anchor is ShareAnchor.ASSET_A:
        return amount_a
    if anchor is ShareAnchor.GEOMETRIC_MEAN:
        return math.isqrt(amount_a * amount_b)
    if anchor is ShareAnchor.SUM:
        return amount_a + amount_b
    raise ValueError(f"unsupported share anchor: {anchor!r}")


def proportional_shares(
    *,
    reserve_a: int,
    reserve_b: int,
    total_shares: int,
    amount_a: int,
    amount_b: int,
) -> int:
    """
    `min(floor(amount_a * S / reserve_a), floor(amount_b * S / reserve_b))`.

    The binding (smaller) side decides; the surplus of the other asset is not
    credited.
    """
    for name, v in (
        ("reserve_a", reserve_a),
        ("reserve_b", reserve_b),
        ("total_shares", total_shares),
        ("amount_a", amount_a),
        ("amount_b", amount_b),
    ):
        _require_int(name, v)
    if reserve_a <= 0 or reserve_b <= 0:
        raise ValueError("cannot mint proportionally against an empty reserve")
    if total_shares <= 0:
        raise ValueError("total_shares must be positive")
    if amount_a <= 0 or amount_b <= 0:
        raise ValueError("deposit amounts must be positive")

    shares_a = (amount_a * total_shares) // reserve_a
    shares_b = (amount_b * total_shares) // reserve_b
    return min(shares_a, shares_b)


def mint_shares(
    *,
    reserve_a: int,
    reserve_b: int,
    total_shares: int,
    amount_a: int,
    amount_b: int,
    anchor: ShareAnchor = ShareAnchor.ASSET_A,
) -> MintSharesResult:
    """
    Mint shares for a deposit of (amount_a, amount_b).

    Raises ValueError on invalid inputs or when the deposit would mint nothing.
    """
    if total_shares == 0:
        minted = anchor_shares(amount_a=amount_a, amount_b=amount_b, anchor=anchor)
    else:
        minted = proportional_shares(
            reserve_a=reserve_a,
            reserve_b=reserve_b,
            total_shares=total_shares,
            amount_a=amount_a,
            amount_b=amount_b,
        )
    if minted <= 0:
        raise ValueError("shares_minted is zero (deposit too small)")

    return MintSharesResult(
        shares_minted=minted,
        new_reserve_a=reserve_a + amount_a,
        new_reserve_b=reserve_b + amount_b,
        new_total_shares=total_shares + minted,
    )


def burn_shares(*, shares: int, reserve_a: int, reserve_b: int, total_shares: int) -> BurnSharesResult:
    """
    Burn shares for underlying assets (floor rounding).
    """
    for name, v in (
        ("shares", shares),
        ("reserve_a", reserve_a),
        ("reserve_b", reserve_b),
        ("total_shares", total_shares),
    ):
        _require_int(name, v)

    if shares <= 0:
        raise ValueError("shares must be positive")
    if reserve_a < 0 or reserve_b < 0:
        raise ValueError("reserves must be non-negative")
    if total_shares <= 0:
        raise ValueError("total_shares must be positive")
    if shares > total_shares:
        raise ValueError("cannot burn more than total_shares")

    amount_a_out = (shares * reserve_a) // total_shares
    amount_b_out = (shares * reserve_b) // total_shares
    return BurnSharesResult(
        amount_a_out=amount_a_out,
        amount_b_out=amount_b_out,
        new_reserve_a=reserve_a - amount_a_out,
        new_reserve_b=reserve_b - amount_b_out,
        new_total_shares=total_shares - shares,
    )
