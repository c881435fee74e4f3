"""Error value hierarchy for the decoding and input layers.

Errors are frozen dataclass values: they are returned inside Err, matched on,
and rendered once by the CLI. Inside the ledger only LedgerEntry.transition
returns one, and ClientAccount turns it into IGNORED.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final


@dataclass(frozen=True, slots=True)
class LedgerError:
    """Base error value. NOT @final — has subclasses."""

    message: str
    code: str
    source: str  # "module.function" that produced this error


@final
@dataclass(frozen=True, slots=True)
class FieldViolation:
    """Describes a single field validation failure."""

    path: str  # e.g. "amount"
    constraint: str  # e.g. "must be >= 0"
    actual_value: str  # e.g. "'-1.5'"


@final
@dataclass(frozen=True, slots=True)
class ValidationError(LedgerError):
    """An input record failed decoding. line is 1-based; 0 when unknown."""

    line: int
    fields: tuple[FieldViolation, ...]

    def __str__(self) -> str:
        details = "; ".join(
            f"{f.path} {f.constraint} (got {f.actual_value})" for f in self.fields
        )
        return f"line {self.line}: {self.message}: {details}"


@final
@dataclass(frozen=True, slots=True)
class InputError(LedgerError):
    """The transaction log could not be opened or read."""

    path: str

    def __str__(self) -> str:
        return f"{self.message}: {self.path}"


@final
@dataclass(frozen=True, slots=True)
class IllegalTransitionError(LedgerError):
    """Ledger entry status change is not allowed."""

    from_state: str
    to_state: str
