"""
CPMM swap kernel.

- Fee is charged on the *gross* input amount using ceil rounding, so the
  priced input is `net_in = floor(gross_in * (10_000 - fee_bps) / 10_000)`.
- Pricing uses `amount_out = floor(reserve_out * net_in / (reserve_in + net_in))`.
- The whole fee stays in the pool (`new_reserve_in = reserve_in + gross_in`).

This kernel is a small, auditable, integer-only implementation. It knows
nothing about integer widths: width checks live in the pool state machine.
"""

from __future__ import annotations

from dataclasses import dataclass


BPS_DENOM = 10_000


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def _ceil_div_nonneg(numerator: int, denominator: int) -> int:
    if denominator <= 0:
        raise ValueError("denominator must be positive")
    if numerator < 0:
        raise ValueError("numerator must be non-negative")
    return (numerator + denominator - 1) // denominator


@dataclass(frozen=True)
class SwapExactInResult:
    amount_out: int
    fee_total: int
    net_in: int
    gross_in: int
    new_reserve_in: int
    new_reserve_out: int
    k_before: int
    k_after: int


def compute_fee_total(*, gross_in: int, fee_bps: int) -> int:
    """
    Compute `fee_total = ceil(gross_in * fee_bps / 10_000)`.
    """
    _require_int("gross_in", gross_in)
    _require_int("fee_bps", fee_bps)
    if gross_in < 0:
        raise ValueError("gross_in must be non-negative")
    if not (0 <= fee_bps <= BPS_DENOM):
        raise ValueError(f"fee_bps must be in [0, {BPS_DENOM}]")
    return _ceil_div_nonneg(gross_in * fee_bps, BPS_DENOM)


def swap_exact_in(
    *,
    reserve_in: int,
    reserve_out: int,
    amount_in: int,
    fee_bps: int,
) -> SwapExactInResult:
    """
    Exact-in swap quote + post-state.

    Raises ValueError on invalid inputs, when the fee consumes the whole input,
    or when the swap would produce a zero output.
    """
    for name, v in (
        ("reserve_in", reserve_in),
        ("reserve_out", reserve_out),
        ("amount_in", amount_in),
        ("fee_bps", fee_bps),
    ):
        _require_int(name, v)

    if reserve_in < 0 or reserve_out < 0:
        raise ValueError("reserves must be non-negative")
    if reserve_in == 0 or reserve_out == 0:
        raise ValueError("cannot swap against an empty reserve")
    if amount_in <= 0:
        raise ValueError("amount_in must be positive")
    if not (0 <= fee_bps <= BPS_DENOM):
        raise ValueError(f"fee_bps must be in [0, {BPS_DENOM}]")

    k_before = reserve_in * reserve_out

    fee_total = compute_fee_total(gross_in=amount_in, fee_bps=fee_bps)
    if fee_total > amount_in:
        raise ValueError("fee_total exceeds amount_in")
    net_in = amount_in - fee_total
    if net_in <= 0:
        raise ValueError("net_in must be positive after fees")

    amount_out = (reserve_out * net_in) // (reserve_in + net_in)

    if amount_out <= 0:
        raise ValueError("amount_out is zero (trade too small)")
    if amount_out > reserve_out:
        raise ValueError("amount_out exceeds reserve_out")

    new_reserve_in = reserve_in + amount_in
    new_reserve_out = reserve_out - amount_out
    k_after = new_reserve_in * new_reserve_out

    return SwapExactInResult(
        amount_out=amount_out,
        fee_total=fee_total,
        net_in=net_in,
        gross_in=amount_in,
        new_reserve_in=new_reserve_in,
        new_reserve_out=new_reserve_out,
        k_before=k_before,
        k_after=k_after,
    )


def quote_exact_out(
    *,
    reserve_in: int,
    reserve_out: int,
    amount_out: int,
    fee_bps: int,
) -> int:
    """
    Minimal gross input whose exact-in swap yields at least `amount_out`.

    Read-only: callers use it to size `amount_in` before submitting a swap.
    """
    for name, v in (
        ("reserve_in", reserve_in),
        ("reserve_out", reserve_out),
        ("amount_out", amount_out),
        ("fee_bps", fee_bps),
    ):
        _require_int(name, v)

    if reserve_in < 0 or reserve_out < 0:
        raise ValueError("reserves must be non-negative")
    if reserve_in == 0 or reserve_out == 0:
        raise ValueError("cannot swap against an empty reserve")
    if amount_out <= 0:
        raise ValueError("amount_out must be positive")
    if amount_out >= reserve_out:
        raise ValueError("cannot drain full reserve_out")
    if not (0 <= fee_bps < BPS_DENOM):
        raise ValueError(f"fee_bps must be in [0, {BPS_DENOM})")

    # net_in = ceil(reserve_in * amount_out / (reserve_out - amount_out))
    net_in = _ceil_div_nonneg(reserve_in * amount_out, reserve_out - amount_out)

    # amount_in = ceil(net_in * 10_000 / (10_000 - fee_bps))
    # With `fee_total = ceil(amount_in * fee_bps / 10_000)` the net input is
    #   floor(amount_in * (10_000 - fee_bps) / 10_000) >= net_in
    amount_in = _ceil_div_nonneg(net_in * BPS_DENOM, BPS_DENOM - fee_bps)

    check = swap_exact_in(
        reserve_in=reserve_in,
        reserve_out=reserve_out,
        amount_in=amount_in,
        fee_bps=fee_bps,
    )
    if check.amount_out < amount_out:
        raise ValueError("computed amount_in insufficient for desired amount_out")
    return amount_in
