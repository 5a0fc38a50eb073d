"""
Transaction API router.

Every listing and summary endpoint accepts the optional query params
``cardBrand``, ``status`` and ``declineReasonCode``; a missing, empty or
"all" value disables that filter.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query

from paydash.core.data_models import FilterCriteria
from paydash.core.store import TransactionStore

from ..schemas import (
    ErrorResponse,
    FilterOptionsResponse,
    MonthlySummaryResponse,
    MTDSummaryResponse,
    SummaryResponse,
    TransactionListResponse,
)
from ..services import transactions
from ..state import get_now, get_store

router = APIRouter(
    prefix="/api/transactions",
    tags=["transactions"],
    responses={500: {"model": ErrorResponse}},
)


def filter_criteria(
    cardBrand: Optional[str] = Query(None, description="Card brand, e.g. Visa"),
    status: Optional[str] = Query(None, description="Approved or Declined"),
    declineReasonCode: Optional[str] = Query(None, description="Decline reason code, e.g. 01-Insufficient funds"),
) -> FilterCriteria:
    return FilterCriteria(cardBrand=cardBrand, status=status, declineReasonCode=declineReasonCode)


@router.get("", response_model=TransactionListResponse, response_model_exclude_none=True)
async def list_transactions(
    criteria: FilterCriteria = Depends(filter_criteria),
    store: TransactionStore = Depends(get_store),
):
    return transactions.list_transactions(store, criteria)


@router.get("/summary", response_model=SummaryResponse)
async def get_summary(
    criteria: FilterCriteria = Depends(filter_criteria),
    store: TransactionStore = Depends(get_store),
    now: datetime = Depends(get_now),
):
    """Month-to-date and month-by-month summaries for the filtered transactions."""
    return transactions.get_summary(store, criteria, now=now)


@router.get("/mtd", response_model=MTDSummaryResponse)
async def get_mtd_summary(
    criteria: FilterCriteria = Depends(filter_criteria),
    store: TransactionStore = Depends(get_store),
    now: datetime = Depends(get_now),
):
    return transactions.get_mtd_summary(store, criteria, now=now)


@router.get("/monthly", response_model=MonthlySummaryResponse)
async def get_monthly_summary(
    criteria: FilterCriteria = Depends(filter_criteria),
    store: TransactionStore = Depends(get_store),
):
    return transactions.get_monthly_summary(store, criteria)


@router.get("/filters", response_model=FilterOptionsResponse)
async def get_filter_options():
    """Known filter values; static configuration, not derived from the data."""
    return transactions.get_filter_options()
