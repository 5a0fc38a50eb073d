from __future__ import annotations

from datetime import datetime, timezone

from fastapi import Request

from paydash.core.store import TransactionStore


def get_store(request: Request) -> TransactionStore:
    """Resolve the transaction store owned by the running application."""
    return request.app.state.store


def get_now() -> datetime:
    """Reference time for month-to-date summaries (UTC)."""
    return datetime.now(timezone.utc)
