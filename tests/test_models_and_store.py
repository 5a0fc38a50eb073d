"""Tests for the transaction model and the in-memory store."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from paydash.core.data_models import Transaction, TransactionOutcome
from paydash.core.errors import TransactionDataError
from paydash.core.store import TransactionStore


def test_outcome_tags(transactions):
    outcomes = {tx.transactionId: tx.outcome for tx in transactions}
    assert outcomes["TXN-001"] is TransactionOutcome.APPROVED
    assert outcomes["TXN-002"] is TransactionOutcome.DECLINED_WITH_REASON

    no_reason = transactions[1].model_copy(update={"declineReasonCode": None})
    assert no_reason.outcome is TransactionOutcome.DECLINED_WITHOUT_REASON


def test_approved_transaction_cannot_carry_decline_reason(raw_transactions):
    record = dict(raw_transactions[0], declineReasonCode="01-Insufficient funds")
    with pytest.raises(ValidationError):
        Transaction.model_validate(record)


def test_negative_amount_is_rejected(raw_transactions):
    with pytest.raises(ValidationError):
        Transaction.model_validate(dict(raw_transactions[0], amount=-1))


def test_transactions_are_immutable(transactions):
    with pytest.raises(ValidationError):
        transactions[0].amount = 1.0


def test_open_string_values_are_accepted(raw_transactions):
    tx = Transaction.model_validate(dict(raw_transactions[0], cardBrand="UnionPay", status="Pending"))
    assert tx.cardBrand == "UnionPay"
    assert tx.outcome is TransactionOutcome.DECLINED_WITHOUT_REASON


def test_store_returns_snapshot_copies(transactions):
    store = TransactionStore(transactions)
    snapshot = store.all()
    snapshot.clear()
    assert len(store) == len(transactions)
    assert store.all() == transactions


def test_store_replace(transactions):
    store = TransactionStore()
    assert store.all() == []
    store.replace(transactions[:2])
    assert [tx.transactionId for tx in store.all()] == ["TXN-001", "TXN-002"]


def test_load_from_json_file(tmp_path, raw_transactions):
    path = tmp_path / "transactions.json"
    path.write_text(json.dumps(raw_transactions), encoding="utf-8")

    store = TransactionStore.from_json_file(path)
    assert len(store) == 7
    assert store.all()[1].declineReasonCode == "01-Insufficient funds"
    assert store.all()[0].declineReasonCode is None


def test_missing_file_yields_empty_store(tmp_path, transactions):
    store = TransactionStore(transactions)
    assert store.load(tmp_path / "missing.json") == []
    assert len(store) == 0


def test_invalid_json_raises_and_keeps_snapshot(tmp_path, transactions):
    path = tmp_path / "broken.json"
    path.write_text("[{not json", encoding="utf-8")
    store = TransactionStore(transactions)

    with pytest.raises(TransactionDataError):
        store.load(path)
    assert len(store) == len(transactions)


def test_invalid_records_raise(tmp_path, raw_transactions):
    path = tmp_path / "bad_dates.json"
    path.write_text(json.dumps([dict(raw_transactions[0], transactionDate="not-a-date")]), encoding="utf-8")

    with pytest.raises(TransactionDataError):
        TransactionStore.from_json_file(path)
