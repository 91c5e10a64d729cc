# [TESTER] v1

from __future__ import annotations

from dataclasses import replace

import pytest

from src.kernels.python.cpmm_swap import (
    BPS_DENOM,
    compute_fee_total,
    quote_exact_out,
    swap_exact_in,
)


def test_fee_total_rounds_up() -> None:
    assert compute_fee_total(gross_in=100, fee_bps=30) == 1
    assert compute_fee_total(gross_in=10_000, fee_bps=30) == 30
    assert compute_fee_total(gross_in=10_001, fee_bps=30) == 31
    assert compute_fee_total(gross_in=12345, fee_bps=0) == 0


def test_fee_total_rejects_out_of_range_fee() -> None:
    with pytest.raises(ValueError, match="fee_bps"):
        compute_fee_total(gross_in=1, fee_bps=BPS_DENOM + 1)


def test_swap_exact_in_prices_net_input_and_keeps_gross() -> None:
    res = swap_exact_in(reserve_in=1000, reserve_out=1000, amount_in=100, fee_bps=30)
    assert res.fee_total == 1
    assert res.net_in == 99
    assert res.amount_out == 90
    assert res.new_reserve_in == 1100
    assert res.new_reserve_out == 910
    assert res.k_after >= res.k_before


def test_swap_exact_in_zero_fee_matches_closed_form() -> None:
    res = swap_exact_in(reserve_in=1200, reserve_out=600, amount_in=50, fee_bps=0)
    assert res.amount_out == 24
    assert res.fee_total == 0
    assert res.new_reserve_in == 1250
    assert res.new_reserve_out == 576


def test_swap_exact_in_rejects_zero_output() -> None:
    with pytest.raises(ValueError, match="amount_out is zero"):
        swap_exact_in(reserve_in=1000, reserve_out=1, amount_in=1, fee_bps=0)


def test_swap_exact_in_rejects_fee_eating_whole_input() -> None:
    with pytest.raises(ValueError, match="net_in"):
        swap_exact_in(reserve_in=1000, reserve_out=1000, amount_in=1, fee_bps=30)


def test_swap_exact_in_rejects_empty_reserve() -> None:
    with pytest.raises(ValueError, match="empty reserve"):
        swap_exact_in(reserve_in=0, reserve_out=1000, amount_in=10, fee_bps=30)


def test_swap_exact_in_rejects_bool_amount() -> None:
    with pytest.raises(TypeError):
        swap_exact_in(reserve_in=1000, reserve_out=1000, amount_in=True, fee_bps=30)


def test_quote_exact_out_is_minimal() -> None:
    amount_in = quote_exact_out(reserve_in=1000, reserve_out=1000, amount_out=90, fee_bps=30)
    assert amount_in == 100
    assert swap_exact_in(reserve_in=1000, reserve_out=1000, amount_in=amount_in, fee_bps=30).amount_out >= 90
    less = swap_exact_in(reserve_in=1000, reserve_out=1000, amount_in=amount_in - 1, fee_bps=30)
    assert less.amount_out < 90


def test_quote_exact_out_rejects_draining_reserve() -> None:
    with pytest.raises(ValueError, match="drain"):
        quote_exact_out(reserve_in=1000, reserve_out=1000, amount_out=1000, fee_bps=30)


def test_quote_exact_out_rejects_full_fee() -> None:
    with pytest.raises(ValueError, match="fee_bps"):
        quote_exact_out(reserve_in=1000, reserve_out=1000, amount_out=10, fee_bps=BPS_DENOM)


def test_quote_exact_out_reports_short_quote_as_value_error(monkeypatch) -> None:
    from src.kernels.python import cpmm_swap

    real = cpmm_swap.swap_exact_in

    def short_by_one(**kwargs):
        res = real(**kwargs)
        return replace(res, amount_out=res.amount_out - 1)

    monkeypatch.setattr(cpmm_swap, "swap_exact_in", short_by_one)
    with pytest.raises(ValueError, match="insufficient"):
        cpmm_swap.quote_exact_out(reserve_in=1000, reserve_out=1000, amount_out=90, fee_bps=30)
