"""Sample transaction data for local development and demos."""
from __future__ import annotations

import calendar
import json
import math
import random
import string
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .constants import CARD_BRANDS, DECLINE_REASON_CODES, DECLINED, STATUSES
from .data_models import Transaction

_ID_ALPHABET = string.ascii_uppercase + string.digits
CURRENT_MONTH_SHARE = 0.3


def _random_id(rng: random.Random, prefix: str, length: int) -> str:
    return f"{prefix}-{''.join(rng.choices(_ID_ALPHABET, k=length))}"


def generate_amount(rng: random.Random, minimum: float = 10, maximum: float = 5000) -> float:
    return round(rng.uniform(minimum, maximum), 2)


def _random_time(rng: random.Random, year: int, month: int, day: int) -> datetime:
    return datetime(
        year,
        month,
        day,
        rng.randrange(24),
        rng.randrange(60),
        rng.randrange(60),
        tzinfo=timezone.utc,
    )


def generate_random_date(rng: random.Random, now: datetime, months_back: int = 6) -> datetime:
    """Random moment between the start of ``months_back`` months ago and ``now``."""
    offset = rng.randint(0, months_back)
    year, month = now.year, now.month - offset
    while month < 1:
        month += 12
        year -= 1

    days_in_month = calendar.monthrange(year, month)[1]
    moment = _random_time(rng, year, month, rng.randint(1, days_in_month))
    if moment > now:
        moment = now - timedelta(days=1)
    return moment


def generate_transaction(rng: random.Random, now: datetime, months_back: int = 6) -> Transaction:
    status = rng.choice(STATUSES)
    return Transaction(
        transactionId=_random_id(rng, "TXN", 9),
        merchantId=_random_id(rng, "MERCH", 6),
        amount=generate_amount(rng),
        cardBrand=rng.choice(CARD_BRANDS),
        status=status,
        declineReasonCode=rng.choice(DECLINE_REASON_CODES) if status == DECLINED else None,
        transactionDate=generate_random_date(rng, now, months_back),
    )


def generate_transactions(
    count: int = 75,
    now: Optional[datetime] = None,
    seed: Optional[int] = None,
    months_back: int = 6,
) -> List[Transaction]:
    """Generate ``count`` transactions, roughly 30% of them in the current month.

    The result is sorted newest first, like the document the server loads.
    """
    rng = random.Random(seed)
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    current_month_count = math.ceil(max(count, 0) * CURRENT_MONTH_SHARE)

    transactions: List[Transaction] = []
    for _ in range(current_month_count):
        moment = min(_random_time(rng, now.year, now.month, rng.randint(1, now.day)), now)
        transactions.append(generate_transaction(rng, now, months_back).model_copy(update={"transactionDate": moment}))

    for _ in range(count - current_month_count):
        transactions.append(generate_transaction(rng, now, months_back))

    transactions.sort(key=lambda tx: tx.transactionDate, reverse=True)
    return transactions


def write_transactions(path: Union[str, Path], transactions: Iterable[Transaction]) -> Path:
    """Write transactions as the JSON document consumed by ``TransactionStore.load``."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    payload = [tx.model_dump(mode="json", exclude_none=True) for tx in transactions]
    target.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return target
