"""
Holder share balances for the pool.

The pool state machine only reports `shares_minted` / consumes
`shares_to_burn`; this table is the holder-side ledger that the integration
shell credits and debits in the same commit as the pool transition.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional

HolderId = str


def _check_amount(name: str, value: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")
    if value < 0:
        raise ValueError(f"{name} must be non-negative: {value}")
    return value


class ShareLedger:
    """
    Sparse holder -> shares table. Balances never go negative and zero
    balances are not stored, so two ledgers with the same holdings compare
    equal.
    """

    def __init__(self, balances: Optional[Mapping[HolderId, int]] = None) -> None:
        self._balances: Dict[HolderId, int] = {}
        for holder, amount in (balances or {}).items():
            self.set(holder, amount)

    def get(self, holder: HolderId) -> int:
        return self._balances.get(holder, 0)

    def set(self, holder: HolderId, amount: int) -> None:
        if not isinstance(holder, str) or not holder:
            raise ValueError("holder must be a non-empty str")
        if _check_amount("share balance", amount):
            self._balances[holder] = amount
        else:
            self._balances.pop(holder, None)

    def add(self, holder: HolderId, delta: int) -> None:
        """Apply a signed delta; fails without writing if the result would be negative."""
        if not isinstance(delta, int) or isinstance(delta, bool):
            raise TypeError("delta must be an int")
        current = self.get(holder)
        if current + delta < 0:
            raise ValueError(f"Insufficient share balance for {holder}: has {current}, needs {-delta}")
        self.set(holder, current + delta)

    def subtract(self, holder: HolderId, amount: int) -> None:
        self.add(holder, -_check_amount("amount", amount))

    def total(self) -> int:
        return sum(self._balances.values())

    def get_all_balances(self) -> Dict[HolderId, int]:
        return dict(sorted(self._balances.items()))

    def copy(self) -> "ShareLedger":
        return ShareLedger(self._balances)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShareLedger):
            return NotImplemented
        return self._balances == other._balances

    def __repr__(self) -> str:
        return f"ShareLedger(holders={len(self._balances)}, total={self.total()})"
