"""
Operation request parsing and result encoding.

Requests arrive as plain JSON-like objects tagged by "op":

    {"op": "initialize", "amount_a": 1000, "amount_b": 500}
    {"op": "add_liquidity", "amount_a": 200, "amount_b": 100}
    {"op": "swap", "amount_in": 50, "min_amount_out": 20, "direction": "A_TO_B"}
    {"op": "remove_liquidity", "shares_to_burn": 50}

Parsing is strict: unknown tags, missing or extra fields, and non-int
amounts are rejected with ValueError before anything reaches the engine.
"""

from collections.abc import Mapping
from typing import Any, Dict, Tuple

from ..core.pool import (
    Action,
    AddLiquidityRequest,
    Direction,
    InitializeRequest,
    Initialized,
    LiquidityAdded,
    LiquidityRemoved,
    RemoveLiquidityRequest,
    Request,
    StepResult,
    SwapRequest,
    Swapped,
)
from ..core.pool.state import state_to_dict


def _require_str(value: Any, *, name: str, non_empty: bool = True, max_len: int = 64) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string")
    if non_empty and not value:
        raise ValueError(f"{name} must be non-empty")
    if max_len > 0 and len(value) > max_len:
        raise ValueError(f"{name} too large")
    return value


def _require_int(value: Any, *, name: str, non_negative: bool = False) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{name} must be an int")
    if non_negative and value < 0:
        raise ValueError(f"{name} must be non-negative")
    return int(value)


def _require_dict_str_keys(value: Any, *, name: str) -> Dict[str, Any]:
    if not isinstance(value, Mapping):
        raise ValueError(f"{name} must be an object")
    for k in value.keys():
        if not isinstance(k, str):
            raise ValueError(f"{name} keys must be strings")
    return dict(value)


_FIELDS: Dict[Action, Tuple[str, ...]] = {
    Action.INITIALIZE: ("amount_a", "amount_b"),
    Action.ADD_LIQUIDITY: ("amount_a", "amount_b"),
    Action.SWAP: ("amount_in", "min_amount_out", "direction"),
    Action.REMOVE_LIQUIDITY: ("shares_to_burn",),
}


def parse_action(value: Any) -> Action:
    tag = _require_str(value, name="op")
    try:
        return Action(tag)
    except ValueError as e:
        raise ValueError(f"Invalid op: {tag}") from e


def parse_direction(value: Any) -> Direction:
    raw = _require_str(value, name="direction").strip().upper()
    try:
        return Direction(raw)
    except ValueError as e:
        raise ValueError(f"Invalid direction: {value}") from e


def parse_request(payload: Any) -> Request:
    """
    Parse one tagged operation object into a typed request.

    Raises:
        ValueError: If the object is malformed.
    """
    data = _require_dict_str_keys(payload, name="operation")
    if "op" not in data:
        raise ValueError("Missing required field: op")
    action = parse_action(data["op"])

    expected = _FIELDS[action]
    for field in expected:
        if field not in data:
            raise ValueError(f"Missing required field: {field}")
    extra = sorted(set(data) - set(expected) - {"op"})
    if extra:
        raise ValueError(f"Unexpected fields for {action.value}: {', '.join(extra)}")

    # Negative amounts parse; the engine rejects them with InvalidAmount.
    if action is Action.INITIALIZE:
        return InitializeRequest(
            amount_a=_require_int(data["amount_a"], name="amount_a"),
            amount_b=_require_int(data["amount_b"], name="amount_b"),
        )
    if action is Action.ADD_LIQUIDITY:
        return AddLiquidityRequest(
            amount_a=_require_int(data["amount_a"], name="amount_a"),
            amount_b=_require_int(data["amount_b"], name="amount_b"),
        )
    if action is Action.SWAP:
        return SwapRequest(
            amount_in=_require_int(data["amount_in"], name="amount_in"),
            min_amount_out=_require_int(data["min_amount_out"], name="min_amount_out"),
            direction=parse_direction(data["direction"]),
        )
    return RemoveLiquidityRequest(
        shares_to_burn=_require_int(data["shares_to_burn"], name="shares_to_burn"),
    )


def encode_request(request: Request) -> Dict[str, Any]:
    """Inverse of `parse_request`."""
    out: Dict[str, Any] = {"op": request.action.value}
    for field in _FIELDS[request.action]:
        value = getattr(request, field)
        out[field] = value.value if isinstance(value, Direction) else value
    return out


def encode_result(result: StepResult) -> Dict[str, Any]:
    """
    Encode a StepResult as a plain object.

    Accepted: {"ok": true, "state": {...}, "result": {...}}
    Rejected: {"ok": false, "error": "<code>", "detail": "..."}
    """
    if not result.accepted:
        return {
            "ok": False,
            "error": result.error.value if result.error is not None else None,
            "detail": result.detail or "",
        }

    outcome = result.outcome
    body: Dict[str, Any]
    if isinstance(outcome, Initialized):
        body = {"reserve_a": outcome.reserve_a, "reserve_b": outcome.reserve_b}
    elif isinstance(outcome, LiquidityAdded):
        body = {
            "shares_minted": outcome.shares_minted,
            "amount_a": outcome.amount_a,
            "amount_b": outcome.amount_b,
        }
    elif isinstance(outcome, Swapped):
        body = {
            "direction": outcome.direction.value,
            "amount_in": outcome.amount_in,
            "amount_out": outcome.amount_out,
            "fee_total": outcome.fee_total,
        }
    elif isinstance(outcome, LiquidityRemoved):
        body = {
            "shares_burned": outcome.shares_burned,
            "amount_a_out": outcome.amount_a_out,
            "amount_b_out": outcome.amount_b_out,
        }
    else:
        raise TypeError(f"unknown outcome type: {type(outcome).__name__}")

    if result.state is None:
        raise TypeError("accepted result must carry a state")
    return {"ok": True, "state": state_to_dict(result.state), "result": body}
