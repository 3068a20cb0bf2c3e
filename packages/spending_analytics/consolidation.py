"""Top-N consolidation of a category breakdown.

Ranking is by total descending; equal totals are ordered by category key
ascending so the output never depends on dict insertion order.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .logging_setup import get_logger

MAX_CATEGORIES: int = 9

_logger = get_logger("spending_analytics.consolidation")


@dataclass(frozen=True, slots=True)
class Consolidated:
    """Ranked top entries plus the merged remainder.

    ``others`` is ``None`` when nothing was merged.
    """

    top: tuple[tuple[str, float], ...]
    others: float | None = None

    def __len__(self) -> int:
        return len(self.top) + (1 if self.others is not None else 0)


def rank_categories(totals: Mapping[str, float]) -> list[tuple[str, float]]:
    """Positive entries sorted by total descending, then key ascending."""

    positive = [(key, float(value)) for key, value in totals.items() if value > 0]
    return sorted(positive, key=lambda kv: (-kv[1], kv[0]))


def consolidate_top_categories(
    totals: Mapping[str, float],
    limit: int = MAX_CATEGORIES,
) -> Consolidated:
    """Keep the ``limit`` largest categories and merge the rest into one sum.

    An empty result (``len() == 0``) means there is nothing positive to chart.
    """

    if limit < 1:
        raise ValueError(f"limit must be a positive integer, got {limit!r}")

    ranked = rank_categories(totals)
    if not ranked:
        return Consolidated(top=())

    top = tuple(ranked[:limit])
    rest = ranked[limit:]
    if not rest:
        return Consolidated(top=top)

    others = sum(value for _key, value in rest)
    _logger.debug("merged %d categories into Others (%.2f)", len(rest), others)
    return Consolidated(top=top, others=others)


__all__ = ["MAX_CATEGORIES", "Consolidated", "rank_categories", "consolidate_top_categories"]
