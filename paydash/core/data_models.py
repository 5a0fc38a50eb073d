"""Data models for the merchant transaction dashboard core."""
from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .constants import ALL, APPROVED


class TransactionOutcome(str, Enum):
    """Tagged view of a transaction's status and decline reason."""

    APPROVED = "approved"
    DECLINED_WITH_REASON = "declined_with_reason"
    DECLINED_WITHOUT_REASON = "declined_without_reason"


class Transaction(BaseModel):
    """A single merchant card transaction as supplied by the data provider."""

    model_config = ConfigDict(frozen=True)

    transactionId: str
    merchantId: str
    amount: float = Field(ge=0)
    cardBrand: str
    status: str
    declineReasonCode: Optional[str] = None
    transactionDate: Union[datetime, date]

    @model_validator(mode="after")
    def _approved_has_no_reason(self) -> "Transaction":
        if self.status == APPROVED and self.declineReasonCode:
            raise ValueError("Approved transactions cannot carry a declineReasonCode")
        return self

    @property
    def is_approved(self) -> bool:
        return self.status == APPROVED

    @property
    def outcome(self) -> TransactionOutcome:
        if self.is_approved:
            return TransactionOutcome.APPROVED
        if self.declineReasonCode:
            return TransactionOutcome.DECLINED_WITH_REASON
        return TransactionOutcome.DECLINED_WITHOUT_REASON


TransactionLike = Union[Transaction, Mapping]


def record_value(record: TransactionLike, field: str) -> Any:
    """Read a field from either a Transaction model or a raw JSON mapping."""
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


class FilterCriteria(BaseModel):
    """Optional equality filters; None, empty string and "all" mean no filter."""

    cardBrand: Optional[str] = None
    status: Optional[str] = None
    declineReasonCode: Optional[str] = None

    @staticmethod
    def is_active(value: Optional[str]) -> bool:
        return bool(value) and value != ALL

    def echo(self) -> Dict[str, str]:
        """Criteria as shown back to the dashboard, with "all" for unset values."""
        return {
            "cardBrand": self.cardBrand or ALL,
            "status": self.status or ALL,
            "declineReasonCode": self.declineReasonCode or ALL,
        }


class CardBrandBreakdown(BaseModel):
    total: int = 0
    approved: int = 0
    declined: int = 0
    amount: float = 0.0


class Metrics(BaseModel):
    """Counts and amounts computed over a list of transactions."""

    totalTransactions: int = 0
    totalApproved: int = 0
    totalDeclined: int = 0
    totalAmount: float = 0.0
    approvedAmount: float = 0.0
    declinedAmount: float = 0.0
    byCardBrand: Dict[str, CardBrandBreakdown] = Field(default_factory=dict)
    byDeclineReason: Dict[str, int] = Field(default_factory=dict)


class MonthSummary(Metrics):
    """Metrics for a single calendar month."""

    month: str = Field(description="Month key in YYYY-MM format")
    monthFormatted: str = Field(description="Readable month, e.g. 'Feb 2026'")
