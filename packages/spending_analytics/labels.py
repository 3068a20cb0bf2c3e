"""Injected label resolution for chart axes, legends and slice names.

The engine never hardcodes display text. Callers pass a :class:`LabelResolver`
made of three functions supplied by their translation layer; the built-in
English and Vietnamese resolvers are defaults for callers without one.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import date

from .config import Language

TIME_OF_DAY_KEYS: tuple[str, ...] = (
    "summary.chart.time.12am",
    "summary.chart.time.3am",
    "summary.chart.time.6am",
    "summary.chart.time.9am",
    "summary.chart.time.12pm",
    "summary.chart.time.3pm",
    "summary.chart.time.6pm",
    "summary.chart.time.9pm",
)
OTHERS_KEY = "summary.chart.others"
LEGEND_INCOME_KEY = "summary.chart.legend.income"
LEGEND_SPENT_KEY = "summary.chart.legend.spent"
NO_DATA_KEY = "summary.chart.noData"

_TRANSLATIONS: dict[str, dict[str, str]] = {
    "eng": {
        "summary.chart.time.12am": "12 AM",
        "summary.chart.time.3am": "3 AM",
        "summary.chart.time.6am": "6 AM",
        "summary.chart.time.9am": "9 AM",
        "summary.chart.time.12pm": "12 PM",
        "summary.chart.time.3pm": "3 PM",
        "summary.chart.time.6pm": "6 PM",
        "summary.chart.time.9pm": "9 PM",
        OTHERS_KEY: "Others",
        LEGEND_INCOME_KEY: "Income",
        LEGEND_SPENT_KEY: "Spent",
        NO_DATA_KEY: "No data",
    },
    "vie": {
        "summary.chart.time.12am": "12 SA",
        "summary.chart.time.3am": "3 SA",
        "summary.chart.time.6am": "6 SA",
        "summary.chart.time.9am": "9 SA",
        "summary.chart.time.12pm": "12 CH",
        "summary.chart.time.3pm": "3 CH",
        "summary.chart.time.6pm": "6 CH",
        "summary.chart.time.9pm": "9 CH",
        OTHERS_KEY: "Khác",
        LEGEND_INCOME_KEY: "Thu nhập",
        LEGEND_SPENT_KEY: "Chi tiêu",
        NO_DATA_KEY: "Không có dữ liệu",
    },
}

# Monday-first, matching ``date.weekday()``.
_WEEKDAYS: dict[str, tuple[str, ...]] = {
    "eng": ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
    "vie": ("Th 2", "Th 3", "Th 4", "Th 5", "Th 6", "Th 7", "CN"),
}

# Twelve bars share a narrow axis, so English uses single letters.
_MONTHS: dict[str, tuple[str, ...]] = {
    "eng": ("J", "F", "M", "A", "M", "J", "J", "A", "S", "O", "N", "D"),
    "vie": tuple(f"T{i}" for i in range(1, 13)),
}


@dataclass(frozen=True, slots=True)
class LabelResolver:
    """Bundle of label functions supplied by a translation collaborator.

    Attributes
    ----------
    translate:
        Maps a translation key (e.g. ``"summary.chart.others"``) to text.
    weekday:
        Abbreviated weekday name for a calendar date.
    month:
        Month abbreviation for a zero-based month index (0 = January).
    """

    translate: Callable[[str], str]
    weekday: Callable[[date], str]
    month: Callable[[int], str]

    def time_of_day(self, block: int) -> str:
        return self.translate(TIME_OF_DAY_KEYS[block])

    @property
    def others(self) -> str:
        return self.translate(OTHERS_KEY)

    @property
    def legend(self) -> tuple[str, str]:
        return self.translate(LEGEND_INCOME_KEY), self.translate(LEGEND_SPENT_KEY)


def _table_translator(table: Mapping[str, str]) -> Callable[[str], str]:
    def translate(key: str) -> str:
        return table.get(key, key)

    return translate


def get_label_resolver(language: Language = "eng") -> LabelResolver:
    """Return the built-in resolver for ``language`` (``"eng"`` or ``"vie"``)."""

    if language not in _TRANSLATIONS:
        raise ValueError(
            f"Unsupported language: {language!r}. Allowed: {sorted(_TRANSLATIONS)}"
        )
    weekdays = _WEEKDAYS[language]
    months = _MONTHS[language]
    return LabelResolver(
        translate=_table_translator(_TRANSLATIONS[language]),
        weekday=lambda d: weekdays[d.weekday()],
        month=lambda i: months[i],
    )


__all__ = [
    "LabelResolver",
    "get_label_resolver",
    "TIME_OF_DAY_KEYS",
    "OTHERS_KEY",
    "LEGEND_INCOME_KEY",
    "LEGEND_SPENT_KEY",
    "NO_DATA_KEY",
]
