"""Per-client account: the transaction state machine and derived balances.

ClientAccount is @final but NOT a dataclass — it holds mutable internal state.

Balances are never stored. available/held/total are recomputed from the
entry history on every query:

    available = max(0, sum(+deposit, -withdrawal) over Normal | Solved(False))
    held      = sum(deposit) over Disputed
    total     = available + held
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import assert_never, final

from txledger.core.identifiers import ClientId, TxId
from txledger.core.money import Amount
from txledger.core.result import Err, Ok
from txledger.ledger.transactions import (
    CHARGED_BACK,
    DISPUTED,
    RESOLVED,
    Chargeback,
    Deposit,
    Dispute,
    EntryStatus,
    LedgerEntry,
    Normal,
    Resolve,
    Solved,
    TransactionRecord,
    TransactionSide,
    Withdrawal,
)


class ApplyResult(Enum):
    APPLIED = "APPLIED"
    IGNORED = "IGNORED"


@final
@dataclass(frozen=True, slots=True)
class AccountSnapshot:
    """Point-in-time balances of one client, as reported at end of replay."""

    client_id: ClientId
    available: Amount
    held: Amount
    total: Amount
    locked: bool


@final
class ClientAccount:
    """Ledger of one client's admitted transactions plus the lock flag.

    apply() never raises for business reasons: a record that cannot be
    justified against the current history is dropped and IGNORED is returned.
    Once locked (by a chargeback) the account accepts nothing further.
    """

    def __init__(self, client_id: ClientId) -> None:
        self._client_id = client_id
        self._locked = False
        self._entries: dict[TxId, LedgerEntry] = {}

    @property
    def client_id(self) -> ClientId:
        return self._client_id

    @property
    def locked(self) -> bool:
        return self._locked

    def apply(self, record: TransactionRecord) -> ApplyResult:
        """Admit one record, or drop it without touching state."""
        if self._locked or record.client_id != self._client_id:
            return ApplyResult.IGNORED

        existing = self._entries.get(record.tx_id)
        match record:
            case Deposit() | Withdrawal() if existing is not None:
                # duplicate id
                return ApplyResult.IGNORED
            case Deposit():
                return self._admit(record)
            case Withdrawal():
                if self.available() < record.amount:
                    return ApplyResult.IGNORED
                return self._admit(record)
            case Dispute():
                if existing is None or existing.side is not TransactionSide.DEPOSIT:
                    return ApplyResult.IGNORED
                return self._transition(existing, DISPUTED)
            case Resolve():
                return self._transition(existing, RESOLVED)
            case Chargeback():
                result = self._transition(existing, CHARGED_BACK)
                if result is ApplyResult.APPLIED:
                    self._locked = True
                return result
            case _:
                assert_never(record)

    def _admit(self, record: Deposit | Withdrawal) -> ApplyResult:
        self._entries[record.tx_id] = LedgerEntry.admit(record)
        return ApplyResult.APPLIED

    def _transition(self, entry: LedgerEntry | None, target: EntryStatus) -> ApplyResult:
        if entry is None:
            return ApplyResult.IGNORED
        match entry.transition(target):
            case Ok(updated):
                self._entries[entry.tx_id] = updated
                return ApplyResult.APPLIED
            case Err(_):
                return ApplyResult.IGNORED

    # --- Derived balances ---

    def available(self) -> Amount:
        balance = Amount.ZERO
        for entry in self._entries.values():
            match entry:
                case LedgerEntry(
                    side=TransactionSide.DEPOSIT, status=Normal() | Solved(chargebacked=False),
                ):
                    balance = balance.add(entry.amount)
                case LedgerEntry(
                    side=TransactionSide.WITHDRAWAL, status=Normal() | Solved(chargebacked=False),
                ):
                    balance = balance.sub(entry.amount)
                case _:
                    pass
        return max(balance, Amount.ZERO)

    def held(self) -> Amount:
        balance = Amount.ZERO
        for entry in self._entries.values():
            if entry.side is TransactionSide.DEPOSIT and entry.status == DISPUTED:
                balance = balance.add(entry.amount)
        return balance

    def total(self) -> Amount:
        return self.available().add(self.held())

    # --- Read-only views ---

    def entries(self) -> Mapping[TxId, LedgerEntry]:
        """Live read-only view of the entry map."""
        return MappingProxyType(self._entries)

    def snapshot(self) -> AccountSnapshot:
        available = self.available()
        held = self.held()
        return AccountSnapshot(
            client_id=self._client_id,
            available=available,
            held=held,
            total=available.add(held),
            locked=self._locked,
        )

    def __repr__(self) -> str:
        return (
            f"ClientAccount(client_id={self._client_id}, locked={self._locked}, "
            f"entries={len(self._entries)})"
        )
