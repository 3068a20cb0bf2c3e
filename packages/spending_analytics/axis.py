"""Axis and label helpers for trend charts."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Literal

from .models import SeriesMode, ensure_series_mode

_NICE_STEPS: tuple[float, ...] = (1.5, 2, 3, 5, 7, 10)

# (max label count, keep every Nth label)
_SPARSE_TIERS: tuple[tuple[int, int], ...] = ((10, 1), (20, 2), (30, 3))
_SPARSE_DEFAULT_STEP = 5


def nice_max(value: float) -> float:
    """Round ``value`` up to a human-friendly axis ceiling.

    ``0`` maps to ``10`` so empty charts keep a visible scale. Only used to
    pick the axis top; data is never clipped to it.
    """

    if value <= 0:
        return 10
    magnitude = 10 ** math.floor(math.log10(value))
    normalized = value / magnitude
    nice = next((step for step in _NICE_STEPS if normalized <= step), 10)
    return nice * magnitude


def sparsify_labels(labels: Sequence[str]) -> list[str]:
    """Blank out labels on dense charts; slot count never changes.

    ``<= 10`` labels are kept, ``11-20`` keep every 2nd, ``21-30`` every 3rd,
    more than 30 every 5th. Index 0 is always kept.
    """

    total = len(labels)
    step = next((s for limit, s in _SPARSE_TIERS if total <= limit), _SPARSE_DEFAULT_STEP)
    if step == 1:
        return list(labels)
    return [label if i % step == 0 else "" for i, label in enumerate(labels)]


def bar_percentage(bucket_count: int) -> float:
    if bucket_count <= 6:
        return 0.6
    if bucket_count <= 8:
        return 0.5
    if bucket_count <= 12:
        return 0.4
    return 0.3


def chart_kind(mode: SeriesMode) -> Literal["line", "bar"]:
    """Line chart for the combined income/spent view, bars otherwise."""

    return "line" if ensure_series_mode(mode) == "all" else "bar"


__all__ = ["nice_max", "sparsify_labels", "bar_percentage", "chart_kind"]
