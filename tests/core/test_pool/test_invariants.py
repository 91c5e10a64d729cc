"""Tests for src/core/pool/invariants.py."""

from dataclasses import replace

from src.core.pool.config import DEFAULT_CONFIG, PoolConfig
from src.core.pool.invariants import INVARIANT_IDS, check_all
from src.core.pool.state import initial_state
from src.core.pool.types import PoolState

FUNDED = PoolState(initialized=True, reserve_a=1200, reserve_b=600, total_shares=200)


class TestAllInvariants:
    def test_initial_state_passes_all(self):
        assert check_all(initial_state(), DEFAULT_CONFIG) == []

    def test_funded_passes_all(self):
        assert check_all(FUNDED, DEFAULT_CONFIG) == []

    def test_drained_passes_all(self):
        s = PoolState(initialized=True, reserve_a=0, reserve_b=0, total_shares=0)
        assert check_all(s, DEFAULT_CONFIG) == []

    def test_ids(self):
        assert INVARIANT_IDS == (
            "reserves_in_width",
            "shares_in_width",
            "uninitialized_zeroed",
            "shares_backed",
        )


class TestWidth:
    def test_reserve_above_width(self):
        s = replace(FUNDED, reserve_b=2**64)
        assert check_all(s, DEFAULT_CONFIG) == ["reserves_in_width"]

    def test_reserve_fits_wider_config(self):
        s = replace(FUNDED, reserve_b=2**64)
        assert check_all(s, PoolConfig(amount_bits=128)) == []

    def test_shares_above_width(self):
        s = replace(FUNDED, total_shares=2**8)
        assert "shares_in_width" in check_all(s, PoolConfig(amount_bits=8))


class TestUninitializedZeroed:
    def test_fail(self):
        s = replace(initial_state(), reserve_a=5)
        assert "uninitialized_zeroed" in check_all(s, DEFAULT_CONFIG)

    def test_initialized_with_zero_shares_ok(self):
        s = PoolState(initialized=True, reserve_a=1000, reserve_b=500, total_shares=0)
        assert "uninitialized_zeroed" not in check_all(s, DEFAULT_CONFIG)


class TestSharesBacked:
    def test_fail_one_side_empty(self):
        s = replace(FUNDED, reserve_a=0)
        assert "shares_backed" in check_all(s, DEFAULT_CONFIG)
