"""Date windows for each range and window filters over transactions.

Weeks start on Monday. Window filters compare calendar days only: a
transaction is inside ``[start, end]`` when its date falls on or between the
two bounds' dates, whatever the time of day.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, time, timedelta

from .models import Range, Transaction, ensure_range


def _start_of_day(d: datetime) -> datetime:
    return datetime.combine(d.date(), time.min, tzinfo=d.tzinfo)


def _end_of_day(d: datetime) -> datetime:
    return datetime.combine(d.date(), time.max, tzinfo=d.tzinfo)


def _month_end(d: datetime) -> datetime:
    first_next = (d.replace(day=28) + timedelta(days=4)).replace(day=1)
    return _end_of_day(first_next - timedelta(days=1))


def get_date_range(range_: Range, current: datetime) -> tuple[datetime | None, datetime]:
    """Return the ``(start, end)`` window of ``range_`` containing ``current``.

    ``day`` returns ``current`` for both bounds and ``all`` has no start.
    """

    ensure_range(range_)
    if range_ == "day":
        return current, current
    if range_ == "week":
        monday = _start_of_day(current) - timedelta(days=current.weekday())
        return monday, _end_of_day(monday + timedelta(days=6))
    if range_ == "month":
        return _start_of_day(current.replace(day=1)), _month_end(current)
    if range_ == "year":
        return (
            _start_of_day(current.replace(month=1, day=1)),
            _end_of_day(current.replace(month=12, day=31)),
        )
    return None, current


def filter_by_date_range(
    transactions: Iterable[Transaction], start: datetime, end: datetime
) -> list[Transaction]:
    first, last = start.date(), end.date()
    return [tx for tx in transactions if first <= tx.created_at.date() <= last]


def filter_by_range(
    transactions: Iterable[Transaction], range_: Range, current: datetime
) -> list[Transaction]:
    start, end = get_date_range(range_, current)
    if start is None:
        last = end.date()
        return [tx for tx in transactions if tx.created_at.date() <= last]
    return filter_by_date_range(transactions, start, end)


def resolve_all_window(
    transactions: Iterable[Transaction], end: datetime
) -> tuple[datetime, datetime]:
    """Window for the ``all`` range: earliest transaction through ``end``."""

    earliest = min((tx.created_at for tx in transactions), key=lambda d: d.date(), default=end)
    return earliest, end


__all__ = [
    "get_date_range",
    "filter_by_date_range",
    "filter_by_range",
    "resolve_all_window",
]
