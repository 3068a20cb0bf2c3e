"""Fold transactions into time buckets and category totals.

Every function here is a pure function of its arguments: buckets and maps are
built fresh per call and nothing is cached between calls.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from functools import reduce

from .buckets import bucket_index, build_buckets
from .labels import LabelResolver
from .logging_setup import get_logger
from .models import Bucket, CategoryTotals, Range, Transaction, split_amount

_logger = get_logger("spending_analytics.aggregation")


def aggregate_transactions(
    transactions: Iterable[Transaction],
    range_: Range,
    start: datetime,
    end: datetime,
    labels: LabelResolver | None = None,
) -> tuple[Bucket, ...]:
    """Sum income/spent magnitudes of ``transactions`` into time buckets.

    The output keeps the fixed chronological/label order of
    :func:`~spending_analytics.buckets.build_buckets`. Callers filter to the
    window first; stragglers are clamped into the nearest bucket.
    """

    empty = build_buckets(range_, start, end, labels)
    count = len(empty)

    def step(acc: tuple[Bucket, ...], tx: Transaction) -> tuple[Bucket, ...]:
        idx = bucket_index(range_, tx.created_at, start, count)
        income, spent = split_amount(tx.amount, tx.type)
        return acc[:idx] + (acc[idx].add(income, spent),) + acc[idx + 1 :]

    buckets = reduce(step, transactions, empty)
    _logger.debug("aggregated %s range into %d buckets", range_, count)
    return buckets


def aggregate_by_category(
    transactions: Iterable[Transaction],
) -> tuple[CategoryTotals, CategoryTotals]:
    """Return ``(income_by_category, spent_by_category)`` magnitude maps.

    Transactions whose direction is not income are counted as spending, so a
    legacy row without ``type`` lands wherever its sign puts it.
    """

    income: CategoryTotals = {}
    spent: CategoryTotals = {}
    for tx in transactions:
        target = income if tx.direction == "income" else spent
        target[tx.category] = target.get(tx.category, 0.0) + tx.magnitude
    return income, spent


def calculate_saved_amount(transactions: Iterable[Transaction]) -> float:
    return sum((tx.magnitude for tx in transactions if tx.direction == "income"), 0.0)


def calculate_spent_amount(transactions: Iterable[Transaction]) -> float:
    return sum((tx.magnitude for tx in transactions if tx.direction == "spent"), 0.0)


def calculate_total_amount(transactions: Iterable[Transaction]) -> float:
    """Net amount: income adds, spending subtracts."""

    total = 0.0
    for tx in transactions:
        total += tx.magnitude if tx.direction == "income" else -tx.magnitude
    return total


def has_data(buckets: Iterable[Bucket]) -> bool:
    return any(not b.is_empty for b in buckets)


__all__ = [
    "aggregate_transactions",
    "aggregate_by_category",
    "calculate_saved_amount",
    "calculate_spent_amount",
    "calculate_total_amount",
    "has_data",
]
