"""AccountRegistry — client id -> ClientAccount, populated on first sight.

Owned by whoever drives the replay and passed in explicitly; there is no
module-level registry.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import final

from txledger.core.identifiers import ClientId
from txledger.ledger.account import AccountSnapshot, ApplyResult, ClientAccount
from txledger.ledger.transactions import TransactionRecord


@final
class AccountRegistry:
    def __init__(self) -> None:
        self._accounts: dict[ClientId, ClientAccount] = {}

    def account_for(self, client_id: ClientId) -> ClientAccount:
        """Return the account for client_id, creating it if unseen."""
        account = self._accounts.get(client_id)
        if account is None:
            account = ClientAccount(client_id)
            self._accounts[client_id] = account
        return account

    def apply(self, record: TransactionRecord) -> ApplyResult:
        """Route record to its client's account. The account exists afterwards either way."""
        return self.account_for(record.client_id).apply(record)

    def snapshots(self) -> tuple[AccountSnapshot, ...]:
        """Snapshots of every account touched, ordered by client id."""
        return tuple(
            self._accounts[cid].snapshot() for cid in sorted(self._accounts)
        )

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, client_id: object) -> bool:
        return client_id in self._accounts

    def __iter__(self) -> Iterator[ClientAccount]:
        return iter(self._accounts.values())
