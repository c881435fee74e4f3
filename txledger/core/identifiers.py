"""Validated identifier newtypes: ClientId (u16) and TxId (u32).

Each wraps an int checked at construction time; parse() accepts the raw text
form found in the transaction log.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from txledger.core.result import Err, Ok

CLIENT_ID_MAX: int = 0xFFFF
TX_ID_MAX: int = 0xFFFF_FFFF


def _parse_unsigned(raw: str, name: str, maximum: int) -> Ok[int] | Err[str]:
    text = raw.strip()
    if not text:
        return Err(f"{name} must be non-empty")
    if not (text.isascii() and text.isdecimal()):
        return Err(f"{name} must be an unsigned integer, got '{text}'")
    value = int(text)
    if value > maximum:
        return Err(f"{name} must be <= {maximum}, got {value}")
    return Ok(value)


def _check_range(value: int, name: str, maximum: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= maximum:
        raise TypeError(f"{name} requires int in [0, {maximum}], got {value!r}")


@final
@dataclass(frozen=True, slots=True, order=True)
class ClientId:
    """Client identifier — unsigned 16-bit."""

    value: int

    def __post_init__(self) -> None:
        _check_range(self.value, "ClientId", CLIENT_ID_MAX)

    @staticmethod
    def parse(raw: str) -> Ok[ClientId] | Err[str]:
        return _parse_unsigned(raw, "ClientId", CLIENT_ID_MAX).map(lambda v: ClientId(value=v))

    def __str__(self) -> str:
        return str(self.value)


@final
@dataclass(frozen=True, slots=True, order=True)
class TxId:
    """Transaction identifier — unsigned 32-bit, unique among deposits and withdrawals."""

    value: int

    def __post_init__(self) -> None:
        _check_range(self.value, "TxId", TX_ID_MAX)

    @staticmethod
    def parse(raw: str) -> Ok[TxId] | Err[str]:
        return _parse_unsigned(raw, "TxId", TX_ID_MAX).map(lambda v: TxId(value=v))

    def __str__(self) -> str:
        return str(self.value)
