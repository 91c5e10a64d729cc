"""
State helpers for the pool: holder share balances and canonical encoding
"""

from .canonical import canonical_json_bytes, domain_sep_bytes, sha256_hex
from .shares import HolderId, ShareLedger

__all__ = [
    "HolderId",
    "ShareLedger",
    "canonical_json_bytes",
    "domain_sep_bytes",
    "sha256_hex",
]
