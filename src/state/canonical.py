"""
Canonical encoding for pool snapshots.

Snapshots are hashed, so equal `{pool, config}` payloads must encode to equal
bytes. Payloads are plain JSON trees of bools, ints, strs, lists and
str-keyed dicts; anything else is rejected rather than coerced.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any

_DOMAIN_PREFIX = b"pairswap"


def _check_tree(value: Any, path: str = "$") -> None:
    if value is None or isinstance(value, (bool, int)):
        return
    if isinstance(value, str):
        if any(0xD800 <= ord(ch) <= 0xDFFF for ch in value):
            raise TypeError(f"{path}: surrogate code points cannot be encoded")
        return
    if isinstance(value, (list, tuple)):
        for i, item in enumerate(value):
            _check_tree(item, f"{path}[{i}]")
        return
    if isinstance(value, dict):
        for k, v in value.items():
            if not isinstance(k, str):
                raise TypeError(f"{path}: object keys must be str, got {type(k).__name__}")
            _check_tree(k, path)
            _check_tree(v, f"{path}.{k}")
        return
    if isinstance(value, float):
        raise TypeError(f"{path}: floats are not allowed, amounts are integers")
    raise TypeError(f"{path}: unsupported type {type(value).__name__}")


def canonical_json_bytes(value: Any) -> bytes:
    """UTF-8 JSON with sorted keys and no whitespace; ints keep full precision."""
    _check_tree(value)
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def sha256_hex(data: bytes) -> str:
    return "0x" + hashlib.sha256(data).hexdigest()


def domain_sep_bytes(label: str, version: int = 1) -> bytes:
    """`pairswap:<label>:v<version>` followed by a NUL terminator."""
    if not isinstance(label, str) or not label:
        raise TypeError("label must be a non-empty str")
    if not label.isascii() or "\x00" in label or ":" in label:
        raise ValueError(f"invalid domain label: {label!r}")
    if not isinstance(version, int) or isinstance(version, bool) or version <= 0:
        raise ValueError("version must be a positive int")
    return b":".join((_DOMAIN_PREFIX, label.encode("ascii"), b"v%d" % version)) + b"\x00"
