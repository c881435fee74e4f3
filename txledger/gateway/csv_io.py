"""CSV boundary: open and sniff the transaction log, write the balance report.

Input rows are [type, client, tx, amount]; the header line is optional and
detected from the first line. The report is written with exactly 4 fractional
digits per amount and lower-case booleans.
"""

from __future__ import annotations

import csv
import itertools
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

from txledger.core.errors import InputError
from txledger.core.result import Err, Ok
from txledger.ledger.account import AccountSnapshot

EXPECTED_HEADER = "type,client,tx,amount"
REPORT_HEADER: tuple[str, ...] = ("client", "available", "held", "total", "locked")

_SOURCE = "gateway.csv_io"


def has_header(first_line: str) -> bool:
    """True if first_line is the column header, ignoring case, spaces and a BOM."""
    normalized = first_line.lstrip("\ufeff").strip().replace(" ", "").lower()
    return normalized == EXPECTED_HEADER


def open_log(path: str | Path) -> Ok[TextIO] | Err[InputError]:
    """Open the transaction log for reading. The caller closes the stream."""
    try:
        stream = open(path, newline="", encoding="utf-8-sig")  # noqa: SIM115
    except FileNotFoundError:
        return Err(InputError(
            message="File not found",
            code="FILE_NOT_FOUND",
            source=f"{_SOURCE}.open_log",
            path=str(path),
        ))
    except OSError as exc:
        return Err(InputError(
            message=f"Cannot open transaction log ({exc.strerror or exc})",
            code="INPUT_UNREADABLE",
            source=f"{_SOURCE}.open_log",
            path=str(path),
        ))
    return Ok(stream)


def iter_rows(stream: TextIO) -> Iterator[tuple[int, list[str]]]:
    """Yield (line_number, fields) for each non-blank data row.

    The first line is skipped only when has_header() recognises it. Raises
    csv.Error on malformed CSV; the driver turns that into an InputError.
    """
    first = stream.readline()
    header = has_header(first)
    lines: Iterable[str] = stream if header else itertools.chain((first,), stream)
    offset = 1 if header else 0

    reader = csv.reader(lines)
    for fields in reader:
        if not any(f.strip() for f in fields):
            continue
        yield reader.line_num + offset, fields


def format_row(snapshot: AccountSnapshot) -> list[str]:
    return [
        str(snapshot.client_id),
        str(snapshot.available),
        str(snapshot.held),
        str(snapshot.total),
        "true" if snapshot.locked else "false",
    ]


def write_report(snapshots: Iterable[AccountSnapshot], stream: TextIO) -> int:
    """Write header plus one row per snapshot; returns the number of rows written."""
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(REPORT_HEADER)
    count = 0
    for snapshot in snapshots:
        writer.writerow(format_row(snapshot))
        count += 1
    return count
