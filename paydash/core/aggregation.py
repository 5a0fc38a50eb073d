"""Transaction aggregation engine.

Two aggregation modes are supported:

* MTD (month-to-date): metrics for the calendar month containing ``now``.
* Month by month: metrics for every month present in the data, most recent first.

Month keys are ``YYYY-MM`` strings computed in UTC. Aware datetimes are
converted to UTC, naive datetimes are taken as already being UTC, and plain
dates use their own calendar month.
"""
from __future__ import annotations

import logging
import re
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from .constants import APPROVED, MONTH_ABBREVIATIONS
from .data_models import CardBrandBreakdown, Metrics, MonthSummary, TransactionLike, record_value
from .errors import DateParseError, InvalidMonthKeyError

logger = logging.getLogger("paydash.core.aggregation")

_MONTH_KEY_RE = re.compile(r"^(\d{4})-(\d{2})$")


def _parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc)
        return value
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as exc:
            raise DateParseError(value) from exc
        return _parse_date(parsed)
    raise DateParseError(value)


def month_key(value: Any) -> str:
    """Return the ``YYYY-MM`` bucket for a date, datetime or ISO-8601 string."""
    parsed = _parse_date(value)
    return f"{parsed.year:04d}-{parsed.month:02d}"


def current_month_key(now: Optional[datetime] = None) -> str:
    return month_key(now or datetime.now(timezone.utc))


def format_month_key(key: str) -> str:
    """Format ``2026-02`` as ``Feb 2026``."""
    match = _MONTH_KEY_RE.match(key) if isinstance(key, str) else None
    if not match:
        raise InvalidMonthKeyError(key)
    year, month = match.group(1), int(match.group(2))
    if not 1 <= month <= 12:
        raise InvalidMonthKeyError(key)
    return f"{MONTH_ABBREVIATIONS[month - 1]} {year}"


def calculate_metrics(transactions: Sequence[TransactionLike]) -> Metrics:
    """Aggregate counts, amounts and breakdowns in a single pass.

    Any status other than "Approved" counts as declined. Amounts are summed
    unrounded and rounded to two decimals only once at the end.
    """
    total_approved = 0
    total_declined = 0
    total_amount = 0.0
    approved_amount = 0.0
    declined_amount = 0.0
    by_card_brand: Dict[str, CardBrandBreakdown] = {}
    by_decline_reason: Dict[str, int] = {}

    for tx in transactions:
        amount = record_value(tx, "amount") or 0.0
        brand = record_value(tx, "cardBrand")
        approved = record_value(tx, "status") == APPROVED

        breakdown = by_card_brand.get(brand)
        if breakdown is None:
            breakdown = by_card_brand[brand] = CardBrandBreakdown()
        breakdown.total += 1
        breakdown.amount += amount

        total_amount += amount
        if approved:
            total_approved += 1
            approved_amount += amount
            breakdown.approved += 1
            continue

        total_declined += 1
        declined_amount += amount
        breakdown.declined += 1
        reason = record_value(tx, "declineReasonCode")
        if reason:
            by_decline_reason[reason] = by_decline_reason.get(reason, 0) + 1

    for breakdown in by_card_brand.values():
        breakdown.amount = round(breakdown.amount, 2)

    return Metrics(
        totalTransactions=total_approved + total_declined,
        totalApproved=total_approved,
        totalDeclined=total_declined,
        totalAmount=round(total_amount, 2),
        approvedAmount=round(approved_amount, 2),
        declinedAmount=round(declined_amount, 2),
        byCardBrand=by_card_brand,
        byDeclineReason=by_decline_reason,
    )


def _month_summary(key: str, transactions: Sequence[TransactionLike]) -> MonthSummary:
    metrics = calculate_metrics(transactions)
    return MonthSummary(month=key, monthFormatted=format_month_key(key), **metrics.model_dump())


def calculate_mtd_summary(
    transactions: Sequence[TransactionLike], now: Optional[datetime] = None
) -> MonthSummary:
    """Metrics for the current month; zeroed metrics when nothing falls in it."""
    key = current_month_key(now)
    mtd_transactions = [tx for tx in transactions if month_key(record_value(tx, "transactionDate")) == key]
    return _month_summary(key, mtd_transactions)


def calculate_month_by_month_summary(transactions: Sequence[TransactionLike]) -> List[MonthSummary]:
    """Group transactions by month and summarize each group, newest month first."""
    by_month: Dict[str, List[TransactionLike]] = {}
    for tx in transactions:
        by_month.setdefault(month_key(record_value(tx, "transactionDate")), []).append(tx)

    logger.debug("Summarizing %d transactions across %d months", len(transactions), len(by_month))
    return [_month_summary(key, by_month[key]) for key in sorted(by_month, reverse=True)]
