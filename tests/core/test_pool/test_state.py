"""Tests for src/core/pool/state.py: state construction and serialization."""

from dataclasses import replace

import pytest

from src.core.pool.state import (
    STATE_VAR_NAMES,
    initial_state,
    state_from_dict,
    state_to_dict,
)
from src.core.pool.types import Direction, PoolState


class TestInitialState:
    def test_returns_pool_state(self):
        assert isinstance(initial_state(), PoolState)

    def test_default_values(self):
        s = initial_state()
        assert s.initialized is False
        assert (s.reserve_a, s.reserve_b, s.total_shares) == (0, 0, 0)

    def test_frozen(self):
        s = initial_state()
        with pytest.raises(AttributeError):
            s.reserve_a = 1  # type: ignore[misc]

    def test_state_var_names(self):
        assert STATE_VAR_NAMES == ("initialized", "reserve_a", "reserve_b", "total_shares")


class TestDerived:
    def test_k(self):
        s = PoolState(initialized=True, reserve_a=1200, reserve_b=600, total_shares=200)
        assert s.k == 720_000

    def test_reserves_for(self):
        s = PoolState(initialized=True, reserve_a=7, reserve_b=3, total_shares=1)
        assert s.reserves_for(Direction.A_TO_B) == (7, 3)
        assert s.reserves_for(Direction.B_TO_A) == (3, 7)


class TestRoundTrip:
    def test_initial(self):
        s = initial_state()
        assert state_from_dict(state_to_dict(s)) == s

    def test_wide_values(self):
        s = replace(initial_state(), initialized=True, reserve_a=2**64 - 1, reserve_b=2**200, total_shares=5)
        assert state_from_dict(state_to_dict(s)) == s

    def test_dict_shape(self):
        d = state_to_dict(PoolState(initialized=True, reserve_a=1, reserve_b=2, total_shares=3))
        assert d == {"initialized": True, "reserve_a": 1, "reserve_b": 2, "total_shares": 3}


class TestFromDictValidation:
    def _base(self):
        return state_to_dict(initial_state())

    def test_missing_field(self):
        d = self._base()
        del d["reserve_b"]
        with pytest.raises(KeyError):
            state_from_dict(d)

    def test_initialized_must_be_bool(self):
        d = self._base()
        d["initialized"] = 1
        with pytest.raises(TypeError):
            state_from_dict(d)

    def test_bool_count_rejected(self):
        d = self._base()
        d["total_shares"] = True
        with pytest.raises(TypeError):
            state_from_dict(d)

    def test_string_count_rejected(self):
        d = self._base()
        d["reserve_a"] = "10"
        with pytest.raises(TypeError):
            state_from_dict(d)

    def test_negative_rejected(self):
        d = self._base()
        d["reserve_a"] = -1
        with pytest.raises(ValueError):
            state_from_dict(d)
