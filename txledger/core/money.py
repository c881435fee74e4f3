"""Amount — fixed-point monetary quantity counted in integer ticks.

One tick is 10^-4 of the display unit. Ledger arithmetic is integer-only;
Decimal appears solely when converting to or from display text, always under
LEDGER_DECIMAL_CONTEXT (prec=28, ROUND_HALF_EVEN, trapping InvalidOperation,
DivisionByZero and Overflow).
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_DOWN, ROUND_HALF_EVEN
from decimal import (
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    localcontext,
)
from typing import ClassVar, final

from txledger.core.result import Err, Ok

TICK_PLACES: int = 4
TICKS_PER_UNIT: int = 10**TICK_PLACES

_TICK = Decimal(1).scaleb(-TICK_PLACES)

LEDGER_DECIMAL_CONTEXT = Context(
    prec=28,
    rounding=ROUND_HALF_EVEN,
    Emin=-999999,
    Emax=999999,
    capitals=1,
    clamp=0,
    flags=[],
    traps=[InvalidOperation, DivisionByZero, Overflow],
)


@final
@dataclass(frozen=True, slots=True, order=True)
class Amount:
    """Signed integer count of ticks. Ordered, so balances compare directly."""

    ticks: int

    ZERO: ClassVar[Amount]  # Assigned after class definition

    def __post_init__(self) -> None:
        if not isinstance(self.ticks, int) or isinstance(self.ticks, bool):
            raise TypeError(f"Amount.ticks must be int, got {self.ticks!r}")

    @staticmethod
    def from_decimal(value: Decimal) -> Ok[Amount] | Err[str]:
        """Quantize a decimal to ticks: truncate to 4 places, then round to the nearest tick.

        1.23456 -> 12345 ticks, -0.00019 -> -1 tick. NaN and Infinity are rejected.
        """
        if not isinstance(value, Decimal):
            return Err(f"Amount requires Decimal, got {type(value).__name__}")
        if not value.is_finite():
            return Err(f"Amount must be finite, got {value}")
        try:
            with localcontext(LEDGER_DECIMAL_CONTEXT):
                truncated = value.quantize(_TICK, rounding=ROUND_DOWN)
                scaled = truncated.scaleb(TICK_PLACES)
                ticks = int(scaled.to_integral_value(rounding=ROUND_HALF_EVEN))
        except InvalidOperation:
            return Err(f"Amount out of range: {value}")
        return Ok(Amount(ticks=ticks))

    @staticmethod
    def parse(raw: str) -> Ok[Amount] | Err[str]:
        """Parse display text such as '1.5' or ' 2.0000 '."""
        text = raw.strip()
        if not text:
            return Err("Amount requires a non-empty value")
        if "_" in text:
            return Err(f"Amount is not a decimal number: '{text}'")
        try:
            value = Decimal(text)
        except InvalidOperation:
            return Err(f"Amount is not a decimal number: '{text}'")
        return Amount.from_decimal(value)

    def add(self, other: Amount) -> Amount:
        return Amount(ticks=self.ticks + other.ticks)

    def sub(self, other: Amount) -> Amount:
        return Amount(ticks=self.ticks - other.ticks)

    def is_negative(self) -> bool:
        return self.ticks < 0

    def to_decimal(self) -> Decimal:
        """Exact decimal value with 4 fractional digits."""
        with localcontext(LEDGER_DECIMAL_CONTEXT):
            return Decimal(self.ticks).scaleb(-TICK_PLACES)

    def __str__(self) -> str:
        return f"{self.to_decimal():.{TICK_PLACES}f}"


Amount.ZERO = Amount(ticks=0)
