"""Time bucketing: empty labeled buckets per range, and timestamp -> index.

Bucket layout per range
-----------------------
- ``day``: 8 buckets of 3 hours each (``12 AM`` .. ``9 PM``).
- ``week``: one bucket per calendar day of the window, at most 7.
- ``month``: 6 buckets of unequal day spans: 1-4, 5-9, 10-14, 15-19, 20-24,
  25-31.
- ``year``: 12 buckets, one per calendar month.
- ``all``: one bucket per calendar year from ``start.year`` to ``end.year``.

Indexing never raises and never drops: timestamps outside the nominal window
are clamped into the nearest bucket. Every layout has at least one bucket.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from .labels import LabelResolver, get_label_resolver
from .logging_setup import get_logger
from .models import Bucket, Range, ensure_range

_logger = get_logger("spending_analytics.buckets")

_HOURS_PER_BLOCK = 3
_DAY_BLOCKS = 24 // _HOURS_PER_BLOCK
_WEEK_DAYS = 7

# (first day, last day) of each month bucket.
MONTH_SPANS: tuple[tuple[int, int], ...] = (
    (1, 4),
    (5, 9),
    (10, 14),
    (15, 19),
    (20, 24),
    (25, 31),
)


def _week_days(start: datetime, end: datetime) -> list[date]:
    first = start.date()
    span = (end.date() - first).days + 1
    # Inverted window still yields the start day.
    count = max(1, min(span, _WEEK_DAYS))
    return [first + timedelta(days=i) for i in range(count)]


def _year_span(start: datetime, end: datetime) -> range:
    years = range(start.year, end.year + 1)
    if len(years) == 0:
        _logger.debug(
            "inverted all-time window %s > %s; using a single bucket", start.isoformat(), end.isoformat()
        )
        return range(start.year, start.year + 1)
    return years


def build_buckets(
    range_: Range,
    start: datetime,
    end: datetime,
    labels: LabelResolver | None = None,
) -> tuple[Bucket, ...]:
    """Return the ordered, zero-valued buckets for ``range_`` over ``[start, end]``."""

    ensure_range(range_)
    labels = labels or get_label_resolver()

    if range_ == "day":
        return tuple(Bucket(labels.time_of_day(i)) for i in range(_DAY_BLOCKS))
    if range_ == "week":
        return tuple(Bucket(labels.weekday(day)) for day in _week_days(start, end))
    if range_ == "month":
        return tuple(Bucket(f"{lo}-{hi}") for lo, hi in MONTH_SPANS)
    if range_ == "year":
        return tuple(Bucket(labels.month(i)) for i in range(12))
    return tuple(Bucket(str(year)) for year in _year_span(start, end))


def _clamp(value: int, upper: int) -> int:
    return max(0, min(value, upper))


def _month_bucket(day: int) -> int:
    # Highest threshold first.
    for idx in range(len(MONTH_SPANS) - 1, -1, -1):
        if day >= MONTH_SPANS[idx][0]:
            return idx
    return 0


def bucket_index(
    range_: Range,
    when: datetime,
    start: datetime,
    bucket_count: int,
) -> int:
    """Map ``when`` to a bucket index clamped into ``[0, bucket_count - 1]``.

    ``start`` is the window start; it anchors the ``week`` and ``all``
    layouts. ``bucket_count`` is the length of the list returned by
    :func:`build_buckets` for the same arguments.
    """

    ensure_range(range_)
    last = max(bucket_count, 1) - 1

    if range_ == "day":
        raw = when.hour // _HOURS_PER_BLOCK
    elif range_ == "week":
        raw = (when.date() - start.date()).days
    elif range_ == "month":
        raw = _month_bucket(when.day)
    elif range_ == "year":
        raw = when.month - 1
    else:
        raw = when.year - start.year

    idx = _clamp(raw, last)
    if idx != raw:
        _logger.debug("clamped %s index %d -> %d for %s", range_, raw, idx, when.isoformat())
    return idx


__all__ = ["MONTH_SPANS", "build_buckets", "bucket_index"]
