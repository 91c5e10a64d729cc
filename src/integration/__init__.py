"""
Integration layer (imperative shell around the pool core)
"""

from .config import configure_logging, load_pool_config
from .operations import encode_request, encode_result, parse_request
from .pool_engine import PoolEngine
from .pool_snapshot import (
    PoolSnapshot,
    snapshot_from_json,
    snapshot_from_state,
    snapshot_to_json,
    state_from_snapshot,
)

__all__ = [
    "configure_logging",
    "load_pool_config",
    "parse_request",
    "encode_request",
    "encode_result",
    "PoolEngine",
    "PoolSnapshot",
    "snapshot_from_state",
    "state_from_snapshot",
    "snapshot_to_json",
    "snapshot_from_json",
]
