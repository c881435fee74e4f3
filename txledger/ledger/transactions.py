"""Ledger domain types: TransactionRecord sum type, EntryStatus sum type, LedgerEntry.

Records are the immutable decoded instructions read from the log. Entries are
what a ClientAccount keeps per admitted deposit or withdrawal; only their
status ever changes, and only forward: Normal -> Disputed -> Solved.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import ClassVar, final

from txledger.core.errors import IllegalTransitionError
from txledger.core.identifiers import ClientId, TxId
from txledger.core.money import Amount
from txledger.core.result import Err, Ok


class TransactionKind(Enum):
    """The type column of the transaction log."""

    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    DISPUTE = "dispute"
    RESOLVE = "resolve"
    CHARGEBACK = "chargeback"


class TransactionSide(Enum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"


# ---------------------------------------------------------------------------
# TransactionRecord sum type (5 variants)
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class Deposit:
    """Credit amount to the client."""

    tx_id: TxId
    client_id: ClientId
    amount: Amount

    kind: ClassVar[TransactionKind] = TransactionKind.DEPOSIT


@final
@dataclass(frozen=True, slots=True)
class Withdrawal:
    """Debit amount from the client, if enough funds are available."""

    tx_id: TxId
    client_id: ClientId
    amount: Amount

    kind: ClassVar[TransactionKind] = TransactionKind.WITHDRAWAL


@final
@dataclass(frozen=True, slots=True)
class Dispute:
    """Claim that deposit tx_id should be reversed; its funds go on hold."""

    tx_id: TxId
    client_id: ClientId

    kind: ClassVar[TransactionKind] = TransactionKind.DISPUTE


@final
@dataclass(frozen=True, slots=True)
class Resolve:
    """Close the dispute on tx_id without penalty; held funds are released."""

    tx_id: TxId
    client_id: ClientId

    kind: ClassVar[TransactionKind] = TransactionKind.RESOLVE


@final
@dataclass(frozen=True, slots=True)
class Chargeback:
    """Reverse disputed tx_id for good and freeze the account."""

    tx_id: TxId
    client_id: ClientId

    kind: ClassVar[TransactionKind] = TransactionKind.CHARGEBACK


type TransactionRecord = Deposit | Withdrawal | Dispute | Resolve | Chargeback


# ---------------------------------------------------------------------------
# EntryStatus sum type (3 variants)
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class Normal:
    """Admitted and undisputed."""


@final
@dataclass(frozen=True, slots=True)
class Disputed:
    """Under dispute; a disputed deposit is held."""


@final
@dataclass(frozen=True, slots=True)
class Solved:
    """Terminal. chargebacked=True means the funds were reversed."""

    chargebacked: bool


type EntryStatus = Normal | Disputed | Solved

NORMAL = Normal()
DISPUTED = Disputed()
RESOLVED = Solved(chargebacked=False)
CHARGED_BACK = Solved(chargebacked=True)


def _status_name(status: EntryStatus) -> str:
    match status:
        case Normal():
            return "NORMAL"
        case Disputed():
            return "DISPUTED"
        case Solved(chargebacked=True):
            return "CHARGED_BACK"
        case Solved():
            return "RESOLVED"


def can_transition(current: EntryStatus, target: EntryStatus) -> bool:
    """Normal -> Disputed and Disputed -> Solved(_) are the only legal moves."""
    match (current, target):
        case (Normal(), Disputed()):
            return True
        case (Disputed(), Solved()):
            return True
        case _:
            return False


# ---------------------------------------------------------------------------
# LedgerEntry
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class LedgerEntry:
    """An admitted deposit or withdrawal.

    Frozen: a status change produces a new entry via transition(), so tx_id,
    client_id, side and amount cannot drift after admission.
    """

    tx_id: TxId
    client_id: ClientId
    side: TransactionSide
    amount: Amount
    status: EntryStatus = NORMAL

    @staticmethod
    def admit(record: Deposit | Withdrawal) -> LedgerEntry:
        side = TransactionSide.DEPOSIT if isinstance(record, Deposit) else TransactionSide.WITHDRAWAL
        return LedgerEntry(
            tx_id=record.tx_id,
            client_id=record.client_id,
            side=side,
            amount=record.amount,
        )

    def transition(self, target: EntryStatus) -> Ok[LedgerEntry] | Err[IllegalTransitionError]:
        """Return a copy in status target, or Err if the move is not forward."""
        if not can_transition(self.status, target):
            return Err(IllegalTransitionError(
                message=f"tx {self.tx_id}: cannot move from "
                        f"{_status_name(self.status)} to {_status_name(target)}",
                code="ILLEGAL_TRANSITION",
                source="ledger.transactions.LedgerEntry.transition",
                from_state=_status_name(self.status),
                to_state=_status_name(target),
            ))
        return Ok(replace(self, status=target))
