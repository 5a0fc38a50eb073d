from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel

from paydash.core.data_models import MonthSummary, Transaction


class AppliedFilters(BaseModel):
    cardBrand: str = "all"
    status: str = "all"
    declineReasonCode: str = "all"


class TransactionListResponse(BaseModel):
    success: bool = True
    count: int
    data: List[Transaction]


class SummaryResponse(BaseModel):
    success: bool = True
    filters: AppliedFilters
    mtdSummary: MonthSummary
    monthByMonth: List[MonthSummary]


class MTDSummaryResponse(BaseModel):
    success: bool = True
    data: MonthSummary


class MonthlySummaryResponse(BaseModel):
    success: bool = True
    data: List[MonthSummary]


class FilterOptions(BaseModel):
    cardBrands: List[str]
    statuses: List[str]
    declineReasonCodes: List[str]


class FilterOptionsResponse(BaseModel):
    success: bool = True
    data: FilterOptions


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    timestamp: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
