"""Assemble rendering-ready structures from buckets and category totals."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .axis import sparsify_labels
from .categories import CategoryRegistry, get_category_registry
from .colors import generate_color_shades
from .config import LEGEND_FONT_SIZE, LIGHT_THEME, ThemeColors
from .consolidation import MAX_CATEGORIES, consolidate_top_categories
from .labels import LabelResolver, get_label_resolver
from .logging_setup import get_logger
from .models import (
    Bucket,
    CategoryKind,
    ChartDataItem,
    ChartSeries,
    Dataset,
    Range,
    SeriesMode,
    ensure_category_kind,
    ensure_range,
    ensure_series_mode,
)

_logger = get_logger("spending_analytics.charts")


def build_chart_series(
    buckets: Sequence[Bucket],
    mode: SeriesMode,
    range_: Range,
    *,
    labels: LabelResolver | None = None,
    theme: ThemeColors = LIGHT_THEME,
) -> ChartSeries:
    """Build the trend chart input for ``mode`` over ``buckets``.

    ``income``/``spent`` produce one dataset; ``all`` produces the income and
    spent datasets plus a two-entry legend. Labels are sparsified only for the
    ``all`` range, where the bucket count grows with the data.
    """

    ensure_series_mode(mode)
    ensure_range(range_)

    axis_labels = [b.label for b in buckets]
    if range_ == "all":
        axis_labels = sparsify_labels(axis_labels)

    income = Dataset(data=tuple(b.income for b in buckets), color=theme.income)
    spent = Dataset(data=tuple(b.spent for b in buckets), color=theme.spent)

    if mode == "income":
        return ChartSeries(labels=tuple(axis_labels), datasets=(income,))
    if mode == "spent":
        return ChartSeries(labels=tuple(axis_labels), datasets=(spent,))

    legend = (labels or get_label_resolver()).legend
    return ChartSeries(labels=tuple(axis_labels), datasets=(income, spent), legend=legend)


def build_breakdown(
    totals: Mapping[str, float],
    kind: CategoryKind,
    *,
    registry: CategoryRegistry | None = None,
    labels: LabelResolver | None = None,
    theme: ThemeColors = LIGHT_THEME,
    dark: bool = False,
    shade_seed: str | None = None,
    legend_font_size: int = LEGEND_FONT_SIZE,
    limit: int = MAX_CATEGORIES,
) -> list[ChartDataItem]:
    """Turn one category->total map into ranked pie slices.

    Slices use each category's registry label and base color. With
    ``shade_seed`` the ranked slices are instead colored with shades of that
    seed, darkest first in the light theme. The merged ``Others`` slice always
    takes the base color of the fallback category for ``kind``.

    Returns an empty list when no category has a positive total.
    """

    ensure_category_kind(kind)
    registry = registry or get_category_registry()
    labels = labels or get_label_resolver()

    consolidated = consolidate_top_categories(totals, limit=limit)
    if len(consolidated) == 0:
        return []

    shades: list[str] | None = None
    if shade_seed is not None:
        shades = generate_color_shades(shade_seed, len(consolidated.top), dark)

    items: list[ChartDataItem] = []
    for rank, (key, amount) in enumerate(consolidated.top):
        info = registry.find(key, kind)
        if info is None:
            _logger.debug("unknown %s category %r; using fallback color", kind, key)
        color = shades[rank] if shades is not None else (info or registry.fallback(kind)).color
        items.append(
            ChartDataItem(
                name=info.label if info is not None else key,
                amount=amount,
                color=color,
                legend_font_color=theme.chart_text,
                legend_font_size=legend_font_size,
                key=key,
            )
        )

    if consolidated.others is not None:
        items.append(
            ChartDataItem(
                name=labels.others,
                amount=consolidated.others,
                color=registry.fallback(kind).color,
                legend_font_color=theme.chart_text,
                legend_font_size=legend_font_size,
            )
        )
    return items


__all__ = ["build_chart_series", "build_breakdown"]
