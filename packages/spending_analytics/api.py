"""One-call operations for trend and breakdown charts.

Each function is a pure function of its arguments. UI layers that re-render
often should memoize on the full argument tuple; nothing is cached here.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from .aggregation import aggregate_by_category, aggregate_transactions
from .categories import CategoryRegistry, get_category_registry
from .charts import build_breakdown, build_chart_series
from .config import Settings
from .labels import LabelResolver, get_label_resolver
from .models import (
    Bucket,
    CategoryKind,
    ChartDataItem,
    ChartSeries,
    Range,
    SeriesMode,
    Transaction,
    ensure_category_kind,
)


def trend_buckets(
    transactions: Iterable[Transaction],
    start: datetime,
    end: datetime,
    range_: Range,
    *,
    settings: Settings | None = None,
    labels: LabelResolver | None = None,
) -> tuple[Bucket, ...]:
    settings = settings or Settings()
    labels = labels or get_label_resolver(settings.language)
    return aggregate_transactions(transactions, range_, start, end, labels)


def trend_series(
    transactions: Iterable[Transaction],
    start: datetime,
    end: datetime,
    range_: Range,
    mode: SeriesMode = "all",
    *,
    settings: Settings | None = None,
    labels: LabelResolver | None = None,
) -> ChartSeries:
    """Aggregate already-filtered ``transactions`` and build the trend series."""

    settings = settings or Settings()
    labels = labels or get_label_resolver(settings.language)
    buckets = trend_buckets(transactions, start, end, range_, settings=settings, labels=labels)
    return build_chart_series(buckets, mode, range_, labels=labels, theme=settings.colors)


def category_breakdown(
    transactions: Iterable[Transaction],
    kind: CategoryKind,
    *,
    settings: Settings | None = None,
    labels: LabelResolver | None = None,
    registry: CategoryRegistry | None = None,
    shade_seed: str | None = None,
) -> list[ChartDataItem]:
    """Pie slices for the income or spent side of ``transactions``.

    An empty list means no positive totals; callers render a no-data state.
    """

    ensure_category_kind(kind)
    settings = settings or Settings()
    income, spent = aggregate_by_category(transactions)
    return build_breakdown(
        income if kind == "income" else spent,
        kind,
        registry=registry or get_category_registry(settings.language),
        labels=labels or get_label_resolver(settings.language),
        theme=settings.colors,
        dark=settings.is_dark,
        shade_seed=shade_seed,
        legend_font_size=settings.legend_font_size,
    )


__all__ = ["trend_buckets", "trend_series", "category_breakdown"]
