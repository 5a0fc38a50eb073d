"""
Generate sample transactions for the dashboard.

    python -m paydash.generate_data --count 75 --output data/transactions.json
"""

from __future__ import annotations

import argparse
import logging
from collections import Counter
from pathlib import Path
from typing import List, Optional, Sequence

from paydash.backend.config import settings
from paydash.core.aggregation import month_key
from paydash.core.mock_data import generate_transactions, write_transactions

logger = logging.getLogger("paydash.generate_data")


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate mock merchant transactions.")
    parser.add_argument("--count", type=int, default=75, help="Number of transactions to generate")
    parser.add_argument(
        "--output",
        type=Path,
        default=settings.transactions_file,
        help="Destination JSON file (defaults to TRANSACTIONS_FILE)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible data")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(level=settings.log_level, format="%(message)s")
    args = _parse_args(argv)

    transactions = generate_transactions(args.count, seed=args.seed)
    path = write_transactions(args.output, transactions)
    logger.info("Generated %d transactions", len(transactions))
    logger.info("Saved to: %s", path)

    statuses = Counter(tx.status for tx in transactions)
    for status, count in sorted(statuses.items()):
        logger.info("  %s: %d", status, count)

    months: List[str] = [month_key(tx.transactionDate) for tx in transactions]
    logger.info("Transactions by month:")
    for key, count in sorted(Counter(months).items()):
        logger.info("  %s: %d", key, count)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
