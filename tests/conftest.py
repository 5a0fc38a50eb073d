"""Shared fixtures: a seven-record transaction set spanning Dec 2025 to Feb 2026."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List

import pytest
from fastapi.testclient import TestClient

from paydash.backend.app import create_app
from paydash.backend.state import get_now
from paydash.core.data_models import Transaction
from paydash.core.store import TransactionStore

FEB_2026 = datetime(2026, 2, 15, 12, 0, tzinfo=timezone.utc)

RAW_TRANSACTIONS = [
    {
        "transactionId": "TXN-001",
        "merchantId": "MERCH-001",
        "amount": 100.00,
        "cardBrand": "Visa",
        "status": "Approved",
        "transactionDate": "2026-02-01T10:00:00.000Z",
    },
    {
        "transactionId": "TXN-002",
        "merchantId": "MERCH-002",
        "amount": 200.00,
        "cardBrand": "Mastercard",
        "status": "Declined",
        "declineReasonCode": "01-Insufficient funds",
        "transactionDate": "2026-02-05T11:00:00.000Z",
    },
    {
        "transactionId": "TXN-003",
        "merchantId": "MERCH-003",
        "amount": 150.00,
        "cardBrand": "Visa",
        "status": "Approved",
        "transactionDate": "2026-02-08T12:00:00.000Z",
    },
    {
        "transactionId": "TXN-004",
        "merchantId": "MERCH-004",
        "amount": 300.00,
        "cardBrand": "Amex",
        "status": "Approved",
        "transactionDate": "2026-01-15T13:00:00.000Z",
    },
    {
        "transactionId": "TXN-005",
        "merchantId": "MERCH-005",
        "amount": 400.00,
        "cardBrand": "Discover",
        "status": "Declined",
        "declineReasonCode": "02-Invalid card number",
        "transactionDate": "2026-01-20T14:00:00.000Z",
    },
    {
        "transactionId": "TXN-006",
        "merchantId": "MERCH-006",
        "amount": 500.00,
        "cardBrand": "Visa",
        "status": "Declined",
        "declineReasonCode": "03-Suspected fraud",
        "transactionDate": "2025-12-10T09:00:00.000Z",
    },
    {
        "transactionId": "TXN-007",
        "merchantId": "MERCH-007",
        "amount": 250.00,
        "cardBrand": "Mastercard",
        "status": "Approved",
        "transactionDate": "2025-12-15T10:00:00.000Z",
    },
]


@pytest.fixture
def raw_transactions() -> List[dict]:
    return [dict(tx) for tx in RAW_TRANSACTIONS]


@pytest.fixture
def transactions() -> List[Transaction]:
    return [Transaction.model_validate(tx) for tx in RAW_TRANSACTIONS]


@pytest.fixture
def five_transactions(transactions: List[Transaction]) -> List[Transaction]:
    return transactions[:5]


@pytest.fixture
def store(transactions: List[Transaction]) -> TransactionStore:
    return TransactionStore(transactions)


@pytest.fixture
def client(store: TransactionStore) -> TestClient:
    app = create_app(store=store)
    app.dependency_overrides[get_now] = lambda: FEB_2026
    return TestClient(app)
