"""Tests for txledger.replay — the ingestion loop and file driver."""

from __future__ import annotations

import csv
import logging
from collections.abc import Sequence
from pathlib import Path

import pytest

from txledger.core.errors import InputError, ValidationError
from txledger.core.identifiers import ClientId
from txledger.core.money import Amount
from txledger.core.result import Err, Ok, unwrap
from txledger.infra.config import ReplayConfig
from txledger.ledger.registry import AccountRegistry
from txledger.replay import replay, replay_file

_LENIENT = ReplayConfig(strict=False)


def _rows(*rows: Sequence[str]) -> list[tuple[int, Sequence[str]]]:
    return [(i, row) for i, row in enumerate(rows, start=2)]


def _balances(registry: AccountRegistry) -> list[tuple[int, str, str, str, bool]]:
    return [
        (s.client_id.value, str(s.available), str(s.held), str(s.total), s.locked)
        for s in registry.snapshots()
    ]


class TestReplay:
    def test_classic_sample(self) -> None:
        registry = unwrap(replay(_rows(
            ["deposit", "1", "1", "1.0"],
            ["deposit", "2", "2", "2.0"],
            ["deposit", "1", "3", "2.0"],
            ["withdrawal", "1", "4", "1.5"],
            ["withdrawal", "2", "5", "3.0"],
        )))
        assert _balances(registry) == [
            (1, "1.5000", "0.0000", "1.5000", False),
            (2, "2.0000", "0.0000", "2.0000", False),
        ]

    def test_dispute_then_chargeback_locks(self) -> None:
        registry = unwrap(replay(_rows(
            ["deposit", "1", "1", "10"],
            ["deposit", "1", "2", "5"],
            ["dispute", "1", "1", ""],
            ["chargeback", "1", "1", ""],
            ["deposit", "1", "3", "100"],
        )))
        assert _balances(registry) == [(1, "5.0000", "0.0000", "5.0000", True)]

    def test_strict_aborts_on_first_bad_row(self) -> None:
        result = replay(_rows(
            ["deposit", "1", "1", "1.0"],
            ["deposit", "x", "2", "1.0"],
            ["deposit", "1", "3", "oops"],
        ))
        assert isinstance(result, Err)
        assert isinstance(result.error, ValidationError)
        assert result.error.line == 3

    def test_lenient_skips_and_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="txledger"):
            registry = unwrap(replay(
                _rows(["deposit", "1", "1", "1.0"], ["deposit", "1", "2", "-3"], ["deposit", "1", "3", "2"]),
                _LENIENT,
            ))
        assert _balances(registry) == [(1, "3.0000", "0.0000", "3.0000", False)]
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "line 3" in warnings[0].getMessage()

    def test_ignored_records_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="txledger"):
            unwrap(replay(_rows(["withdrawal", "4", "9", "1.0"])))
        assert "line 2: withdrawal tx 9 for client 4 ignored" in caplog.messages

    def test_summary_logged_at_info(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="txledger"):
            unwrap(replay(
                _rows(["deposit", "1", "1", "1"], ["dispute", "1", "7"], ["bogus", "1", "1"]),
                _LENIENT,
            ))
        assert "replayed 3 row(s): 1 applied, 1 ignored, 1 skipped, 1 account(s)" in caplog.messages

    def test_uses_given_registry(self) -> None:
        registry = AccountRegistry()
        registry.account_for(ClientId(value=9))
        result = replay(_rows(["deposit", "1", "1", "1"]), registry=registry)
        assert result == Ok(registry)
        assert len(registry) == 2

    def test_empty_input(self) -> None:
        assert unwrap(replay([])).snapshots() == ()

    def test_available_floor_after_chargeback(self) -> None:
        registry = unwrap(replay(_rows(
            ["deposit", "1", "1", "10"],
            ["withdrawal", "1", "2", "8"],
            ["dispute", "1", "1"],
        )))
        account = registry.account_for(ClientId(value=1))
        assert account.available() == Amount.ZERO
        assert account.held() == Amount(ticks=100_000)


class TestReplayFile:
    def test_reads_log_with_header(self, tmp_path: Path) -> None:
        path = tmp_path / "tx.csv"
        path.write_text("type, client, tx, amount\ndeposit, 1, 1, 1.0\nwithdrawal, 1, 2, 0.25\n")
        registry = unwrap(replay_file(path))
        assert _balances(registry) == [(1, "0.7500", "0.0000", "0.7500", False)]

    def test_missing_file(self, tmp_path: Path) -> None:
        result = replay_file(tmp_path / "missing.csv")
        assert isinstance(result, Err)
        assert isinstance(result.error, InputError)
        assert result.error.code == "FILE_NOT_FOUND"

    def test_undecodable_bytes(self, tmp_path: Path) -> None:
        path = tmp_path / "tx.csv"
        path.write_bytes(b"deposit,1,1,\xff\xfe\n")
        result = replay_file(path)
        assert isinstance(result, Err)
        assert result.error.code == "INVALID_FORMAT"

    def test_malformed_csv(self, tmp_path: Path) -> None:
        path = tmp_path / "tx.csv"
        path.write_text("deposit,1,1," + "9" * (csv.field_size_limit() + 1) + "\n")
        result = replay_file(path)
        assert isinstance(result, Err)
        assert result.error.code == "INVALID_FORMAT"

    def test_strict_validation_error_carries_line(self, tmp_path: Path) -> None:
        path = tmp_path / "tx.csv"
        path.write_text("type,client,tx,amount\ndeposit,1,1,1\n\ndeposit,1,2,NaN\n")
        result = replay_file(path)
        assert isinstance(result, Err)
        assert isinstance(result.error, ValidationError)
        assert result.error.line == 4
