"""Composable equality filters over transaction lists.

Every filter is pure: the input list is never mutated and a matching record
is returned as-is. ``apply_filters`` chains the filters as a conjunction in a
fixed order (card brand, status, decline reason code).
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import List, Optional, Sequence, Union

from .constants import ALL
from .data_models import FilterCriteria, TransactionLike, record_value


def _filter_by_field(
    transactions: Sequence[TransactionLike], field: str, value: Optional[str]
) -> Sequence[TransactionLike]:
    if not value or value == ALL:
        return transactions
    return [tx for tx in transactions if record_value(tx, field) == value]


def filter_by_card_brand(
    transactions: Sequence[TransactionLike], card_brand: Optional[str]
) -> Sequence[TransactionLike]:
    """Keep transactions whose cardBrand exactly matches ``card_brand``."""
    return _filter_by_field(transactions, "cardBrand", card_brand)


def filter_by_status(transactions: Sequence[TransactionLike], status: Optional[str]) -> Sequence[TransactionLike]:
    """Keep transactions whose status exactly matches ``status``."""
    return _filter_by_field(transactions, "status", status)


def filter_by_decline_reason_code(
    transactions: Sequence[TransactionLike], decline_reason_code: Optional[str]
) -> Sequence[TransactionLike]:
    """Keep transactions carrying ``decline_reason_code``; records without a code never match."""
    return _filter_by_field(transactions, "declineReasonCode", decline_reason_code)


def _coerce_criteria(criteria: Union[FilterCriteria, Mapping, None]) -> FilterCriteria:
    if criteria is None:
        return FilterCriteria()
    if isinstance(criteria, FilterCriteria):
        return criteria
    return FilterCriteria.model_validate(dict(criteria))


def apply_filters(
    transactions: Sequence[TransactionLike],
    criteria: Union[FilterCriteria, Mapping, None] = None,
) -> List[TransactionLike]:
    """Apply every active criterion and return a new list of matching transactions."""
    filters = _coerce_criteria(criteria)
    result: Sequence[TransactionLike] = list(transactions)

    if filters.is_active(filters.cardBrand):
        result = filter_by_card_brand(result, filters.cardBrand)

    if filters.is_active(filters.status):
        result = filter_by_status(result, filters.status)

    if filters.is_active(filters.declineReasonCode):
        result = filter_by_decline_reason_code(result, filters.declineReasonCode)

    return list(result)
