"""Data models and type aliases for ``spending_analytics``.

Input records (:class:`Transaction`) are validated with pydantic because they
arrive from an external document store or a user-supplied file. Everything the
engine produces (buckets, datasets, series, slices) is a frozen ``dataclass``:
created fresh per computation and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Literal, get_args

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------

type Range = Literal["day", "week", "month", "year", "all"]
"""Range granularity selecting bucket count and boundaries."""

type SeriesMode = Literal["income", "spent", "all"]
"""Which bucket field(s) a trend chart plots."""

type CategoryKind = Literal["income", "spent"]
"""Direction of a transaction; also selects which category map to chart."""

type CategoryTotals = dict[str, float]
"""Category key -> accumulated magnitude."""

RANGES: tuple[str, ...] = get_args(Range.__value__)
SERIES_MODES: tuple[str, ...] = get_args(SeriesMode.__value__)
CATEGORY_KINDS: tuple[str, ...] = get_args(CategoryKind.__value__)


def ensure_range(value: str) -> str:
    if value not in RANGES:
        raise ValueError(f"Unsupported range: {value!r}. Allowed: {list(RANGES)}")
    return value


def ensure_series_mode(value: str) -> str:
    if value not in SERIES_MODES:
        raise ValueError(f"Unsupported series mode: {value!r}. Allowed: {list(SERIES_MODES)}")
    return value


def ensure_category_kind(value: str) -> str:
    if value not in CATEGORY_KINDS:
        raise ValueError(f"Unsupported category kind: {value!r}. Allowed: {list(CATEGORY_KINDS)}")
    return value


# ---------------------------------------------------------------------------
# Input record
# ---------------------------------------------------------------------------


def split_amount(amount: float, type_: CategoryKind | None = None) -> tuple[float, float]:
    """Split a raw amount into an ``(income, spent)`` magnitude pair.

    An explicit ``type_`` always wins. Legacy records without a type fall back
    to the sign of ``amount``: negative means income.
    """

    is_income = type_ == "income" or (type_ is None and amount < 0)
    magnitude = abs(amount)
    if is_income:
        return magnitude, 0.0
    return 0.0, magnitude


class Transaction(BaseModel):
    """A single income/expense event as stored by the transaction service.

    ``amount`` is normally a non-negative magnitude paired with ``type``.
    Legacy rows may omit ``type`` and carry a signed amount instead; use
    :attr:`direction` and :attr:`magnitude` rather than the raw fields.
    """

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        str_strip_whitespace=True,
        coerce_numbers_to_str=True,
        frozen=True,
    )

    id: str
    amount: float
    type: CategoryKind | None = None
    category: str = "other"
    created_at: datetime = Field(validation_alias=AliasChoices("createdAt", "created_at"))
    note: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _caption_as_note(cls, data: Any) -> Any:
        # Store documents call the free-text field ``caption``.
        if isinstance(data, dict) and data.get("note") is None and data.get("caption"):
            data = {**data, "note": data["caption"]}
        return data

    @property
    def direction(self) -> CategoryKind:
        if self.type is not None:
            return self.type
        return "income" if self.amount < 0 else "spent"

    @property
    def magnitude(self) -> float:
        return abs(self.amount)


# ---------------------------------------------------------------------------
# Engine outputs
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Bucket:
    """A labeled accumulator summing income/spent magnitudes for one time slice."""

    label: str
    income: float = 0.0
    spent: float = 0.0

    def add(self, income: float, spent: float) -> Bucket:
        return replace(self, income=self.income + income, spent=self.spent + spent)

    @property
    def is_empty(self) -> bool:
        return self.income == 0 and self.spent == 0


@dataclass(frozen=True, slots=True)
class Dataset:
    """One plotted series. ``color`` is a ``#RRGGBB`` string."""

    data: tuple[float, ...]
    color: str


@dataclass(frozen=True, slots=True)
class ChartSeries:
    """Trend chart input: labels, one or two datasets, optional legend."""

    labels: tuple[str, ...]
    datasets: tuple[Dataset, ...]
    legend: tuple[str, ...] | None = None

    @property
    def max_value(self) -> float:
        values = [v for ds in self.datasets for v in ds.data]
        return max(values, default=0.0)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "labels": list(self.labels),
            "datasets": [{"data": list(ds.data), "color": ds.color} for ds in self.datasets],
        }
        if self.legend is not None:
            out["legend"] = list(self.legend)
        return out


@dataclass(frozen=True, slots=True)
class ChartDataItem:
    """A single breakdown (pie) slice."""

    name: str
    amount: float
    color: str
    legend_font_color: str
    legend_font_size: int = 12
    # Category key the slice was built from; ``None`` for the merged Others slice.
    key: str | None = field(default=None, compare=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "amount": self.amount,
            "color": self.color,
            "legendFontColor": self.legend_font_color,
            "legendFontSize": self.legend_font_size,
        }


__all__ = [
    "Range",
    "SeriesMode",
    "CategoryKind",
    "CategoryTotals",
    "RANGES",
    "SERIES_MODES",
    "CATEGORY_KINDS",
    "ensure_range",
    "ensure_series_mode",
    "ensure_category_kind",
    "split_amount",
    "Transaction",
    "Bucket",
    "Dataset",
    "ChartSeries",
    "ChartDataItem",
]
