"""Hypothesis strategies and pytest fixtures for txledger.

Every ledger input type has a corresponding Hypothesis strategy. Transaction
ids are drawn from a small range so generated histories hit duplicates and
disputes on existing entries often.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from hypothesis import HealthCheck, settings
from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from txledger.core.identifiers import ClientId, TxId
from txledger.core.money import Amount
from txledger.infra.logging_config import LOGGER_NAME
from txledger.ledger.transactions import (
    Chargeback,
    Deposit,
    Dispute,
    Resolve,
    TransactionRecord,
    Withdrawal,
)

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ===================================================================
# FIXTURES
# ===================================================================


@pytest.fixture(autouse=True)
def _reset_txledger_logger() -> Iterator[None]:
    """configure_logging() binds a handler to the current stderr; drop it after each test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


# ===================================================================
# PRIMITIVE STRATEGIES
# ===================================================================

CLIENT = ClientId(value=1)
OTHER_CLIENT = ClientId(value=2)


def amounts(max_ticks: int = 100_000_000) -> SearchStrategy[Amount]:
    """Non-negative amounts, as a valid decoder would produce."""
    return st.integers(min_value=0, max_value=max_ticks).map(lambda t: Amount(ticks=t))


def tx_ids(max_id: int = 12) -> SearchStrategy[TxId]:
    return st.integers(min_value=1, max_value=max_id).map(lambda v: TxId(value=v))


# ===================================================================
# RECORD STRATEGIES
# ===================================================================


@st.composite
def records(
    draw: st.DrawFn,
    clients: tuple[ClientId, ...] = (CLIENT,),
) -> TransactionRecord:
    """Exactly one TransactionRecord variant for one of clients."""
    client_id = draw(st.sampled_from(clients))
    tx_id = draw(tx_ids())
    return draw(st.one_of(
        amounts().map(lambda a: Deposit(tx_id=tx_id, client_id=client_id, amount=a)),
        amounts().map(lambda a: Withdrawal(tx_id=tx_id, client_id=client_id, amount=a)),
        st.just(Dispute(tx_id=tx_id, client_id=client_id)),
        st.just(Resolve(tx_id=tx_id, client_id=client_id)),
        st.just(Chargeback(tx_id=tx_id, client_id=client_id)),
    ))


def histories(
    max_size: int = 40,
    clients: tuple[ClientId, ...] = (CLIENT,),
) -> SearchStrategy[list[TransactionRecord]]:
    """Ordered transaction logs."""
    return st.lists(records(clients), max_size=max_size)
