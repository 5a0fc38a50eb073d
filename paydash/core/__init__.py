"""Core package exposing the filter and aggregation engines."""

from .aggregation import (
    calculate_metrics,
    calculate_month_by_month_summary,
    calculate_mtd_summary,
    current_month_key,
    format_month_key,
    month_key,
)
from .data_models import FilterCriteria, Metrics, MonthSummary, Transaction, TransactionOutcome
from .errors import DateParseError, InvalidMonthKeyError, PaydashError, TransactionDataError
from .filters import apply_filters, filter_by_card_brand, filter_by_decline_reason_code, filter_by_status
from .store import TransactionStore

__all__ = [
    "DateParseError",
    "FilterCriteria",
    "InvalidMonthKeyError",
    "Metrics",
    "MonthSummary",
    "PaydashError",
    "Transaction",
    "TransactionDataError",
    "TransactionOutcome",
    "TransactionStore",
    "apply_filters",
    "calculate_metrics",
    "calculate_month_by_month_summary",
    "calculate_mtd_summary",
    "current_month_key",
    "filter_by_card_brand",
    "filter_by_decline_reason_code",
    "filter_by_status",
    "format_month_key",
    "month_key",
]
