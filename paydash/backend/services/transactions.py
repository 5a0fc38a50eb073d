from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status

from paydash.core.aggregation import calculate_month_by_month_summary, calculate_mtd_summary
from paydash.core.data_models import FilterCriteria, Transaction
from paydash.core.errors import PaydashError
from paydash.core.filters import apply_filters
from paydash.core.store import TransactionStore

from ..config import settings

logger = logging.getLogger("paydash.backend.transactions")


def _filtered(store: TransactionStore, criteria: FilterCriteria) -> List[Transaction]:
    transactions = apply_filters(store.all(), criteria)
    logger.debug("Filters %s matched %d of %d transactions", criteria.echo(), len(transactions), len(store))
    return transactions


def _aggregation_failed(exc: PaydashError) -> HTTPException:
    logger.error("Failed to aggregate transactions: %s", exc)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


def list_transactions(store: TransactionStore, criteria: FilterCriteria) -> Dict[str, Any]:
    transactions = _filtered(store, criteria)
    return {"success": True, "count": len(transactions), "data": transactions}


def get_summary(store: TransactionStore, criteria: FilterCriteria, now: Optional[datetime] = None) -> Dict[str, Any]:
    """MTD and month-by-month summaries over the filtered transactions."""
    transactions = _filtered(store, criteria)
    try:
        mtd_summary = calculate_mtd_summary(transactions, now=now)
        month_by_month = calculate_month_by_month_summary(transactions)
    except PaydashError as exc:
        raise _aggregation_failed(exc) from exc
    return {
        "success": True,
        "filters": criteria.echo(),
        "mtdSummary": mtd_summary,
        "monthByMonth": month_by_month,
    }


def get_mtd_summary(store: TransactionStore, criteria: FilterCriteria, now: Optional[datetime] = None) -> Dict[str, Any]:
    transactions = _filtered(store, criteria)
    try:
        return {"success": True, "data": calculate_mtd_summary(transactions, now=now)}
    except PaydashError as exc:
        raise _aggregation_failed(exc) from exc


def get_monthly_summary(store: TransactionStore, criteria: FilterCriteria) -> Dict[str, Any]:
    transactions = _filtered(store, criteria)
    try:
        return {"success": True, "data": calculate_month_by_month_summary(transactions)}
    except PaydashError as exc:
        raise _aggregation_failed(exc) from exc


def get_filter_options() -> Dict[str, Any]:
    return {"success": True, "data": settings.filter_options}
