"""Known filter values exposed to the dashboard.

The engines treat every one of these fields as an open string; these lists
only describe the values the data provider is expected to emit.
"""
from __future__ import annotations

from typing import List

ALL = "all"

APPROVED = "Approved"
DECLINED = "Declined"

CARD_BRANDS: List[str] = ["Visa", "Mastercard", "Amex", "Discover"]
STATUSES: List[str] = [APPROVED, DECLINED]
DECLINE_REASON_CODES: List[str] = [
    "01-Insufficient funds",
    "02-Invalid card number",
    "03-Suspected fraud",
]

MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)
