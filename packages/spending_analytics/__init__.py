"""Public interface for the ``spending_analytics`` package.

Turns an in-memory list of income/spent transactions into trend chart series
and category breakdown slices. This module only re-exports the stable import
surface; there is no runtime logic here.
"""

from .aggregation import (
    aggregate_by_category,
    aggregate_transactions,
    calculate_saved_amount,
    calculate_spent_amount,
    calculate_total_amount,
    has_data,
)
from .api import category_breakdown, trend_buckets, trend_series
from .axis import bar_percentage, chart_kind, nice_max, sparsify_labels
from .buckets import bucket_index, build_buckets
from .categories import CategoryInfo, CategoryRegistry, get_category_registry
from .charts import build_breakdown, build_chart_series
from .colors import generate_color_shades, hsl_to_rgb, rgb_to_hsl
from .config import Settings, ThemeColors
from .consolidation import MAX_CATEGORIES, Consolidated, consolidate_top_categories
from .date_ranges import (
    filter_by_date_range,
    filter_by_range,
    get_date_range,
    resolve_all_window,
)
from .labels import LabelResolver, get_label_resolver
from .loaders import load_transactions
from .models import (
    Bucket,
    CategoryKind,
    CategoryTotals,
    ChartDataItem,
    ChartSeries,
    Dataset,
    Range,
    SeriesMode,
    Transaction,
    split_amount,
)

__all__ = [
    # API
    "trend_series",
    "trend_buckets",
    "category_breakdown",
    # Engine stages
    "build_buckets",
    "bucket_index",
    "aggregate_transactions",
    "aggregate_by_category",
    "consolidate_top_categories",
    "generate_color_shades",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "sparsify_labels",
    "nice_max",
    "bar_percentage",
    "chart_kind",
    "build_chart_series",
    "build_breakdown",
    "has_data",
    "split_amount",
    # Totals and windows
    "calculate_saved_amount",
    "calculate_spent_amount",
    "calculate_total_amount",
    "get_date_range",
    "filter_by_date_range",
    "filter_by_range",
    "resolve_all_window",
    "load_transactions",
    # Collaborator defaults
    "Settings",
    "ThemeColors",
    "LabelResolver",
    "get_label_resolver",
    "CategoryInfo",
    "CategoryRegistry",
    "get_category_registry",
    # Models / types
    "Transaction",
    "Bucket",
    "Dataset",
    "ChartSeries",
    "ChartDataItem",
    "Consolidated",
    "MAX_CATEGORIES",
    "Range",
    "SeriesMode",
    "CategoryKind",
    "CategoryTotals",
]
