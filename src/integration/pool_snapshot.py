"""
Pool state snapshot encoding.

Goals:
- Deterministic JSON serialization for hashing / persistence.
- Round-trippable into the functional-core `PoolState` and `PoolConfig`.
- Explicit versioning for future formats.
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from ..core.pool import PoolConfig, PoolState
from ..core.pool.invariants import check_all
from ..core.pool.state import state_from_dict, state_to_dict
from ..state.canonical import canonical_json_bytes, domain_sep_bytes, sha256_hex
from .config import config_to_dict, parse_share_anchor


POOL_SNAPSHOT_VERSION = 1


@dataclass(frozen=True)
class PoolSnapshot:
    """
    Deterministic, versioned snapshot of one pool and its config.

    The commitment is *not* included inside `data` to avoid self-reference.
    """

    version: int
    data: Dict[str, Any]

    def canonical_bytes(self) -> bytes:
        return canonical_json_bytes(self.data)

    def commitment_bytes(self) -> bytes:
        payload = domain_sep_bytes("pool_snapshot", version=self.version) + self.canonical_bytes()
        return hashlib.sha256(payload).digest()

    def commitment_hex(self) -> str:
        payload = domain_sep_bytes("pool_snapshot", version=self.version) + self.canonical_bytes()
        return sha256_hex(payload)


def snapshot_from_state(
    state: PoolState,
    config: PoolConfig,
    *,
    version: int = POOL_SNAPSHOT_VERSION,
) -> PoolSnapshot:
    if not isinstance(version, int) or isinstance(version, bool) or version <= 0:
        raise ValueError("version must be a positive int")
    if not isinstance(state, PoolState):
        raise TypeError("state must be a PoolState")
    if not isinstance(config, PoolConfig):
        raise TypeError("config must be a PoolConfig")
    return PoolSnapshot(
        version=version,
        data={"pool": state_to_dict(state), "config": config_to_dict(config)},
    )


def _config_from_dict(obj: Mapping[str, Any]) -> PoolConfig:
    for name in ("fee_bps", "amount_bits"):
        v = obj[name]
        if not isinstance(v, int) or isinstance(v, bool):
            raise TypeError(f"config.{name} must be an int")
    return PoolConfig(
        fee_bps=obj["fee_bps"],
        share_anchor=parse_share_anchor(obj["share_anchor"]),
        amount_bits=obj["amount_bits"],
    )


def state_from_snapshot(snapshot: PoolSnapshot) -> Tuple[PoolState, PoolConfig]:
    """
    Rebuild `(state, config)` from a snapshot.

    Raises:
        KeyError: on missing sections or fields.
        TypeError / ValueError: on malformed values, or a state that violates
            the pool invariants (including the recorded width).
    """
    if not isinstance(snapshot, PoolSnapshot):
        raise TypeError("snapshot must be a PoolSnapshot")
    if snapshot.version != POOL_SNAPSHOT_VERSION:
        raise ValueError(f"unsupported snapshot version: {snapshot.version}")

    pool_obj = snapshot.data["pool"]
    config_obj = snapshot.data["config"]
    if not isinstance(pool_obj, Mapping) or not isinstance(config_obj, Mapping):
        raise TypeError("snapshot sections must be objects")

    state = state_from_dict(pool_obj)
    config = _config_from_dict(config_obj)

    violations = check_all(state, config)
    if violations:
        raise ValueError(f"snapshot state violates invariants: {', '.join(violations)}")
    return state, config


def snapshot_to_json(snapshot: PoolSnapshot) -> str:
    """Canonical JSON text: `{"data": ..., "version": ...}`."""
    return canonical_json_bytes({"version": snapshot.version, "data": snapshot.data}).decode("utf-8")


def snapshot_from_json(text: str) -> PoolSnapshot:
    if not isinstance(text, str):
        raise TypeError("text must be a str")
    obj = json.loads(text)
    if not isinstance(obj, dict):
        raise ValueError("snapshot JSON must be an object")
    version = obj.get("version")
    data = obj.get("data")
    if not isinstance(version, int) or isinstance(version, bool) or version <= 0:
        raise ValueError("snapshot version must be a positive int")
    if not isinstance(data, dict):
        raise ValueError("snapshot data must be an object")
    return PoolSnapshot(version=version, data=data)
