"""In-memory transaction store.

Holds the transaction list loaded from the JSON data document. The store is an
ordinary object owned by whoever creates it (the FastAPI app keeps one on
``app.state``), so tests can build isolated stores from fixtures.
"""
from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Iterable, List, Optional, Union

from pydantic import TypeAdapter, ValidationError

from .data_models import Transaction
from .errors import TransactionDataError

logger = logging.getLogger("paydash.core.store")

_TRANSACTION_LIST = TypeAdapter(List[Transaction])


class TransactionStore:
    """Read-mostly holder for the current transaction snapshot."""

    def __init__(self, transactions: Optional[Iterable[Transaction]] = None) -> None:
        self._lock = threading.Lock()
        self._transactions: List[Transaction] = list(transactions or [])

    def __len__(self) -> int:
        return len(self._transactions)

    def all(self) -> List[Transaction]:
        """Return a snapshot copy of the stored transactions."""
        with self._lock:
            return list(self._transactions)

    def replace(self, transactions: Iterable[Transaction]) -> None:
        snapshot = list(transactions)
        with self._lock:
            self._transactions = snapshot

    def load(self, path: Union[str, Path]) -> List[Transaction]:
        """Replace the stored transactions with the contents of a JSON document.

        A missing file leaves the store empty. Unreadable or invalid documents
        raise ``TransactionDataError`` and leave the current snapshot untouched.
        """
        data_path = Path(path)
        if not data_path.exists():
            logger.warning("No transactions file found at %s. Run `python -m paydash.generate_data` first.", data_path)
            self.replace([])
            return []

        try:
            payload = json.loads(data_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise TransactionDataError(f"Could not read transactions from {data_path}: {exc}") from exc

        try:
            transactions = _TRANSACTION_LIST.validate_python(payload)
        except ValidationError as exc:
            raise TransactionDataError(f"Invalid transaction records in {data_path}: {exc}") from exc

        self.replace(transactions)
        logger.info("Loaded %d transactions from %s", len(transactions), data_path)
        return transactions

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "TransactionStore":
        store = cls()
        store.load(path)
        return store
