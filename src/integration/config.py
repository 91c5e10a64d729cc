"""
Configuration loading for the pool engine (imperative shell).

Precedence (lowest to highest):
1. `PoolConfig` defaults (named constants in `src/core/pool/config.py`)
2. an optional YAML mapping file
3. environment overrides: PAIRSWAP_FEE_BPS, PAIRSWAP_SHARE_ANCHOR, PAIRSWAP_AMOUNT_BITS

Invalid values fail loudly: fee and width are economic parameters, so a typo
must never silently fall back to a default.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import structlog
import yaml

from ..core.pool.config import MAX_AMOUNT_BITS, MIN_AMOUNT_BITS, PoolConfig
from ..kernels.python.cpmm_swap import BPS_DENOM
from ..kernels.python.lp_shares import ShareAnchor

ENV_FEE_BPS = "PAIRSWAP_FEE_BPS"
ENV_SHARE_ANCHOR = "PAIRSWAP_SHARE_ANCHOR"
ENV_AMOUNT_BITS = "PAIRSWAP_AMOUNT_BITS"

_CONFIG_KEYS = ("fee_bps", "share_anchor", "amount_bits")


def _env_int(environ: Mapping[str, str], name: str, *, lo: int, hi: int) -> Optional[int]:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        v = int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    if v < lo or v > hi:
        raise ValueError(f"{name} must be in [{lo}, {hi}], got {v}")
    return v


def _env_str(environ: Mapping[str, str], name: str) -> Optional[str]:
    raw = environ.get(name)
    if raw is None:
        return None
    v = raw.strip()
    return v if v else None


def parse_share_anchor(value: Any) -> ShareAnchor:
    if isinstance(value, ShareAnchor):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError("share_anchor must be a non-empty string")
    tag = value.strip().upper()
    try:
        return ShareAnchor(tag)
    except ValueError as exc:
        choices = ", ".join(a.value for a in ShareAnchor)
        raise ValueError(f"unsupported share_anchor {value!r} (expected one of: {choices})") from exc


def _read_yaml(path: Path) -> Dict[str, Any]:
    obj = yaml.safe_load(path.read_text(encoding="utf-8"))
    if obj is None:
        return {}
    if not isinstance(obj, Mapping):
        raise ValueError(f"{path}: config YAML must be a mapping")
    unknown = sorted(str(k) for k in obj if k not in _CONFIG_KEYS)
    if unknown:
        raise ValueError(f"{path}: unknown config keys: {', '.join(unknown)}")
    return dict(obj)


def _require_int(value: Any, *, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{name} must be an int")
    return value


def load_pool_config(
    path: Union[str, Path, None] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> PoolConfig:
    """
    Build a `PoolConfig` from an optional YAML file and the environment.

    Raises:
        ValueError: on unknown keys or invalid values.
        FileNotFoundError: if `path` is given but does not exist.
    """
    env = os.environ if environ is None else environ
    values: Dict[str, Any] = {}

    if path is not None:
        values.update(_read_yaml(Path(path)))

    fee_bps = _env_int(env, ENV_FEE_BPS, lo=0, hi=BPS_DENOM - 1)
    if fee_bps is not None:
        values["fee_bps"] = fee_bps
    anchor = _env_str(env, ENV_SHARE_ANCHOR)
    if anchor is not None:
        values["share_anchor"] = anchor
    amount_bits = _env_int(env, ENV_AMOUNT_BITS, lo=MIN_AMOUNT_BITS, hi=MAX_AMOUNT_BITS)
    if amount_bits is not None:
        values["amount_bits"] = amount_bits

    kwargs: Dict[str, Any] = {}
    if "fee_bps" in values:
        kwargs["fee_bps"] = _require_int(values["fee_bps"], name="fee_bps")
    if "share_anchor" in values:
        kwargs["share_anchor"] = parse_share_anchor(values["share_anchor"])
    if "amount_bits" in values:
        kwargs["amount_bits"] = _require_int(values["amount_bits"], name="amount_bits")

    try:
        return PoolConfig(**kwargs)
    except TypeError as exc:
        raise ValueError(str(exc)) from exc


def config_to_dict(config: PoolConfig) -> Dict[str, Any]:
    return {
        "amount_bits": config.amount_bits,
        "fee_bps": config.fee_bps,
        "share_anchor": config.share_anchor.value,
    }


def configure_logging(level: str = "INFO") -> None:
    """Console logging for embedding processes and local runs."""
    log_level = getattr(logging, level.upper(), None)
    if not isinstance(log_level, int):
        raise ValueError(f"unknown log level: {level!r}")
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )
