"""
In-memory account store backing the HTTP example.
"""

from __future__ import annotations

from typing import Dict

from errcompose import LeafError

NOT_FOUND = LeafError("not found")


class QuotaExceeded(Exception):
    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"amount exceeds limit of {limit}")


class AccountStore:
    def __init__(self, accounts: Dict[str, int], *, limit: int = 1000) -> None:
        self._accounts = dict(accounts)
        self.limit = limit

    def fetch(self, account_id: str) -> Dict[str, object]:
        if account_id not in self._accounts:
            raise LookupError(f"no account {account_id!r}")
        return {"id": account_id, "balance": self._accounts[account_id]}

    def debit(self, account: Dict[str, object], amount: int) -> int:
        if amount > self.limit:
            raise QuotaExceeded(self.limit)
        account_id = str(account["id"])
        self._accounts[account_id] -= amount
        return self._accounts[account_id]


def default_store() -> AccountStore:
    return AccountStore({"alice": 100})
