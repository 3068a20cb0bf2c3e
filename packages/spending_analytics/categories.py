"""Category metadata registry.

Each category carries a display label, an icon name and a base color. The base
color labels breakdown slices and seeds the merged ``Others`` slice. Lookups
never fail: unknown keys resolve to the designated fallback category of the
requested kind (``other`` for spending, ``other_income`` for income).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .config import Language
from .models import CategoryKind, ensure_category_kind

SPENT_FALLBACK_KEY = "other"
INCOME_FALLBACK_KEY = "other_income"


@dataclass(frozen=True, slots=True)
class CategoryInfo:
    value: str
    label: str
    icon: str
    color: str


def normalize_key(key: str) -> str:
    """Return a trimmed, lower-cased category key."""

    return key.strip().lower()


# (value, icon, color, English label, Vietnamese label)
_EXPENSE_ROWS: tuple[tuple[str, str, str, str, str], ...] = (
    ("food", "fast-food", "#FF6B6B", "Food", "Ăn uống"),
    ("transport", "car", "#4ECDC4", "Transport", "Di chuyển"),
    ("shopping", "bag-handle", "#FFE66D", "Shopping", "Mua sắm"),
    ("entertainment", "game-controller", "#95E1D3", "Fun", "Giải trí"),
    ("bills", "receipt", "#DDA0DD", "Bills", "Hóa đơn"),
    ("health", "medical", "#98D8C8", "Health", "Sức khỏe"),
    ("education", "book", "#F7DC6F", "Education", "Học tập"),
    (SPENT_FALLBACK_KEY, "ellipsis-horizontal", "#AEB6BF", "Other", "Khác"),
)

_INCOME_ROWS: tuple[tuple[str, str, str, str, str], ...] = (
    ("salary", "cash", "#2ECC71", "Salary", "Lương"),
    ("bonus", "gift", "#F5B041", "Bonus", "Thưởng"),
    ("investment", "trending-up", "#5DADE2", "Investment", "Đầu tư"),
    ("gift", "heart", "#EC7063", "Gift", "Quà tặng"),
    (INCOME_FALLBACK_KEY, "ellipsis-horizontal", "#AEB6BF", "Other", "Khác"),
)


def _build(
    rows: Sequence[tuple[str, str, str, str, str]], language: Language
) -> tuple[CategoryInfo, ...]:
    use_vi = language == "vie"
    return tuple(
        CategoryInfo(value=value, label=vi if use_vi else en, icon=icon, color=color)
        for value, icon, color, en, vi in rows
    )


class CategoryRegistry:
    """Lookup over expense and income category metadata.

    The last entry of each sequence is the fallback for that kind.
    """

    def __init__(
        self,
        expense: Sequence[CategoryInfo],
        income: Sequence[CategoryInfo],
    ) -> None:
        if not expense or not income:
            raise ValueError("CategoryRegistry requires at least one expense and one income entry")
        self._by_kind: dict[str, tuple[CategoryInfo, ...]] = {
            "spent": tuple(expense),
            "income": tuple(income),
        }
        self._index: dict[str, dict[str, CategoryInfo]] = {
            kind: {normalize_key(c.value): c for c in entries}
            for kind, entries in self._by_kind.items()
        }

    def entries(self, kind: CategoryKind) -> tuple[CategoryInfo, ...]:
        return self._by_kind[ensure_category_kind(kind)]

    def fallback(self, kind: CategoryKind) -> CategoryInfo:
        return self.entries(kind)[-1]

    def find(self, key: str, kind: CategoryKind) -> CategoryInfo | None:
        ensure_category_kind(kind)
        return self._index[kind].get(normalize_key(key))

    def lookup(self, key: str, kind: CategoryKind) -> CategoryInfo:
        return self.find(key, kind) or self.fallback(kind)


def get_category_registry(language: Language = "eng") -> CategoryRegistry:
    return CategoryRegistry(_build(_EXPENSE_ROWS, language), _build(_INCOME_ROWS, language))


__all__ = [
    "CategoryInfo",
    "CategoryRegistry",
    "get_category_registry",
    "normalize_key",
    "SPENT_FALLBACK_KEY",
    "INCOME_FALLBACK_KEY",
]
