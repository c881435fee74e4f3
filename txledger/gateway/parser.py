"""Gateway parser — raw CSV fields to TransactionRecord.

parse_record is the single entry point for rows read from the transaction
log. It is total: every row yields Ok or Err, never an exception. All field
violations of a row are collected and reported together.
"""

from __future__ import annotations

from collections.abc import Sequence

from txledger.core.errors import FieldViolation, ValidationError
from txledger.core.identifiers import ClientId, TxId
from txledger.core.money import Amount
from txledger.core.result import Err, Ok
from txledger.ledger.transactions import (
    Chargeback,
    Deposit,
    Dispute,
    Resolve,
    TransactionKind,
    TransactionRecord,
    Withdrawal,
)

_SOURCE = "gateway.parser.parse_record"

_MONEY_KINDS = frozenset({TransactionKind.DEPOSIT, TransactionKind.WITHDRAWAL})


def _field(fields: Sequence[str], index: int) -> str:
    return fields[index] if index < len(fields) else ""


def _parse_amount(kind: TransactionKind, raw: str) -> Ok[Amount | None] | Err[FieldViolation]:
    """Required and non-negative for deposits and withdrawals; ignored otherwise."""
    if kind not in _MONEY_KINDS:
        return Ok(None)
    if not raw.strip():
        return Err(FieldViolation(
            path="amount", constraint=f"required for {kind.value}", actual_value=repr(raw),
        ))
    parsed = Amount.parse(raw).map_err(
        lambda e: FieldViolation(path="amount", constraint=e, actual_value=repr(raw)),
    )
    match parsed:
        case Err():
            return parsed
        case Ok(amount):
            if amount.is_negative():
                return Err(FieldViolation(
                    path="amount", constraint="must be >= 0", actual_value=repr(raw),
                ))
            return Ok(amount)


def parse_record(fields: Sequence[str], line: int = 0) -> Ok[TransactionRecord] | Err[ValidationError]:
    """Decode one log row laid out as [type, client, tx, amount].

    Surrounding whitespace is ignored and the type is case-insensitive.
    Amounts are truncated to 4 decimal places. line is only used in errors.
    """
    if len(fields) < 3:
        return Err(ValidationError(
            message="malformed record",
            code="RECORD_SHAPE",
            source=_SOURCE,
            line=line,
            fields=(FieldViolation(
                path="record",
                constraint="needs at least type, client and tx",
                actual_value=repr(list(fields)),
            ),),
        ))

    violations: list[FieldViolation] = []

    # --- Type ---
    type_raw = fields[0].strip().lower()
    kind: TransactionKind | None = None
    try:
        kind = TransactionKind(type_raw)
    except ValueError:
        violations.append(FieldViolation(
            path="type",
            constraint="must be one of " + ", ".join(k.value for k in TransactionKind),
            actual_value=repr(fields[0]),
        ))

    # --- Identifiers ---
    client_id: ClientId | None = None
    match ClientId.parse(fields[1]):
        case Err(e):
            violations.append(FieldViolation(path="client", constraint=e, actual_value=repr(fields[1])))
        case Ok(cid):
            client_id = cid

    tx_id: TxId | None = None
    match TxId.parse(fields[2]):
        case Err(e):
            violations.append(FieldViolation(path="tx", constraint=e, actual_value=repr(fields[2])))
        case Ok(tid):
            tx_id = tid

    # --- Amount ---
    amount: Amount | None = None
    if kind is not None:
        match _parse_amount(kind, _field(fields, 3)):
            case Err(v):
                violations.append(v)
            case Ok(a):
                amount = a

    if violations:
        return Err(ValidationError(
            message=f"invalid record: {len(violations)} field error(s)",
            code="RECORD_FIELDS",
            source=_SOURCE,
            line=line,
            fields=tuple(violations),
        ))

    assert kind is not None
    assert client_id is not None
    assert tx_id is not None

    match kind:
        case TransactionKind.DEPOSIT:
            assert amount is not None
            return Ok(Deposit(tx_id=tx_id, client_id=client_id, amount=amount))
        case TransactionKind.WITHDRAWAL:
            assert amount is not None
            return Ok(Withdrawal(tx_id=tx_id, client_id=client_id, amount=amount))
        case TransactionKind.DISPUTE:
            return Ok(Dispute(tx_id=tx_id, client_id=client_id))
        case TransactionKind.RESOLVE:
            return Ok(Resolve(tx_id=tx_id, client_id=client_id))
        case TransactionKind.CHARGEBACK:
            return Ok(Chargeback(tx_id=tx_id, client_id=client_id))
