"""Replay driver — the ingestion loop around the ledger core.

Feeds decoded records into an AccountRegistry strictly in input order. The
accounts themselves never log; rejected records are reported here at DEBUG.
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import final

from txledger.core.errors import InputError, LedgerError, ValidationError
from txledger.core.result import Err, Ok
from txledger.gateway.csv_io import iter_rows, open_log
from txledger.gateway.parser import parse_record
from txledger.infra.config import ReplayConfig
from txledger.ledger.account import ApplyResult
from txledger.ledger.registry import AccountRegistry

logger = logging.getLogger(__name__)


@final
@dataclass(slots=True)
class ReplayStats:
    """Counters for one replay run."""

    rows: int = 0
    applied: int = 0
    ignored: int = 0
    skipped: int = 0


def replay(
    rows: Iterable[tuple[int, Sequence[str]]],
    config: ReplayConfig | None = None,
    registry: AccountRegistry | None = None,
) -> Ok[AccountRegistry] | Err[ValidationError]:
    """Decode and apply every row, in order.

    In strict mode the first undecodable row aborts the run with its
    ValidationError. Otherwise the row is logged and skipped.
    """
    config = config or ReplayConfig()
    registry = registry if registry is not None else AccountRegistry()
    stats = ReplayStats()

    for line, fields in rows:
        stats.rows += 1
        match parse_record(fields, line):
            case Err(error):
                if config.strict:
                    return Err(error)
                stats.skipped += 1
                logger.warning("skipping %s", error)
                continue
            case Ok(record):
                pass

        if registry.apply(record) is ApplyResult.APPLIED:
            stats.applied += 1
        else:
            stats.ignored += 1
            logger.debug(
                "line %d: %s tx %s for client %s ignored",
                line, record.kind.value, record.tx_id, record.client_id,
            )

    logger.info(
        "replayed %d row(s): %d applied, %d ignored, %d skipped, %d account(s)",
        stats.rows, stats.applied, stats.ignored, stats.skipped, len(registry),
    )
    return Ok(registry)


def replay_file(
    path: str | Path, config: ReplayConfig | None = None,
) -> Ok[AccountRegistry] | Err[LedgerError]:
    """Open path, sniff its header and replay it."""
    match open_log(path):
        case Err(e):
            return Err(e)
        case Ok(stream):
            pass

    with stream:
        try:
            return replay(iter_rows(stream), config)
        except (csv.Error, UnicodeDecodeError) as exc:
            return Err(InputError(
                message=f"Invalid file format ({exc})",
                code="INVALID_FORMAT",
                source="replay.replay_file",
                path=str(path),
            ))
