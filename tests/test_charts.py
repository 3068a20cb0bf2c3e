from datetime import datetime

import pytest

from spending_analytics import (
    Settings,
    build_breakdown,
    build_chart_series,
    category_breakdown,
    get_category_registry,
    get_label_resolver,
    trend_series,
)
from spending_analytics.colors import generate_color_shades
from spending_analytics.config import DARK_THEME, LIGHT_THEME
from spending_analytics.models import Bucket


def _buckets(n: int) -> list[Bucket]:
    return [Bucket(str(2000 + i), income=float(i), spent=float(2 * i)) for i in range(n)]


def test_single_mode_emits_one_dataset_without_legend():
    series = build_chart_series(_buckets(3), "income", "all")
    assert len(series.datasets) == 1
    assert series.datasets[0].data == (0.0, 1.0, 2.0)
    assert series.datasets[0].color == LIGHT_THEME.income
    assert series.legend is None

    spent = build_chart_series(_buckets(3), "spent", "all")
    assert spent.datasets[0].data == (0.0, 2.0, 4.0)
    assert spent.datasets[0].color == LIGHT_THEME.spent


def test_all_mode_emits_income_then_spent_with_legend():
    series = build_chart_series(_buckets(3), "all", "all")
    assert [ds.color for ds in series.datasets] == [LIGHT_THEME.income, LIGHT_THEME.spent]
    assert series.legend == ("Income", "Spent")
    assert series.max_value == 4.0


def test_legend_follows_label_resolver():
    series = build_chart_series(_buckets(2), "all", "all", labels=get_label_resolver("vie"))
    assert series.legend == ("Thu nhập", "Chi tiêu")


def test_labels_sparsified_only_for_all_range():
    buckets = _buckets(15)
    assert build_chart_series(buckets, "all", "all").labels[1] == ""
    assert build_chart_series(buckets, "all", "year").labels[1] == "2001"


def test_series_to_dict_shape():
    payload = build_chart_series(_buckets(2), "all", "month").to_dict()
    assert set(payload) == {"labels", "datasets", "legend"}
    assert payload["datasets"][1] == {"data": [0.0, 2.0], "color": LIGHT_THEME.spent}


def test_breakdown_uses_registry_labels_and_colors():
    registry = get_category_registry()
    items = build_breakdown({"food": 30.0, "transport": 10.0}, "spent")
    assert [i.name for i in items] == ["Food", "Transport"]
    assert items[0].color == registry.lookup("food", "spent").color
    assert items[0].legend_font_color == LIGHT_THEME.chart_text
    assert items[0].legend_font_size == 12


def test_breakdown_others_uses_fallback_category_color():
    totals = {f"cat{i:02d}": float(i) for i in range(1, 12)}
    registry = get_category_registry()

    spent_items = build_breakdown(totals, "spent")
    income_items = build_breakdown(totals, "income")

    assert len(spent_items) == 10
    assert spent_items[-1].name == "Others"
    assert spent_items[-1].amount == 3
    assert spent_items[-1].key is None
    assert spent_items[-1].color == registry.fallback("spent").color
    assert income_items[-1].color == registry.fallback("income").color


def test_unknown_category_keeps_its_key_as_name():
    items = build_breakdown({"crypto": 5.0}, "spent")
    assert items[0].name == "crypto"
    assert items[0].color == get_category_registry().fallback("spent").color


def test_breakdown_with_shade_seed_colors_ranked_slices():
    totals = {"food": 3.0, "bills": 2.0, "health": 1.0}
    items = build_breakdown(totals, "spent", shade_seed="#2f95dc")
    assert [i.color for i in items] == generate_color_shades("#2f95dc", 3)


def test_breakdown_empty_when_nothing_positive():
    assert build_breakdown({"food": 0.0}, "spent") == []
    assert build_breakdown({}, "income") == []


def test_breakdown_slice_dict_uses_camel_case():
    item = build_breakdown({"food": 1.0}, "spent")[0]
    assert item.to_dict() == {
        "name": "Food",
        "amount": 1.0,
        "color": "#FF6B6B",
        "legendFontColor": LIGHT_THEME.chart_text,
        "legendFontSize": 12,
    }


def test_trend_series_end_to_end(tx):
    day = datetime(2024, 1, 5)
    series = trend_series(
        [tx(50, datetime(2024, 1, 5, 2), type_="spent", category="food")],
        day,
        day,
        "day",
        "spent",
    )
    assert series.labels[0] == "12 AM"
    assert series.datasets[0].data == (50.0, 0, 0, 0, 0, 0, 0, 0)


def test_category_breakdown_dark_vietnamese(tx):
    d = datetime(2024, 1, 5)
    txs = [
        tx(10, d, type_="spent", category="food"),
        tx(99, d, type_="income", category="salary"),
    ]
    settings = Settings(theme="dark", language="vie")

    spent = category_breakdown(txs, "spent", settings=settings)
    income = category_breakdown(txs, "income", settings=settings)

    assert [(i.name, i.amount) for i in spent] == [("Ăn uống", 10.0)]
    assert [(i.name, i.amount) for i in income] == [("Lương", 99.0)]
    assert spent[0].legend_font_color == DARK_THEME.chart_text


def test_category_breakdown_rejects_unknown_kind(tx):
    with pytest.raises(ValueError, match="category kind"):
        category_breakdown([], "net")  # type: ignore[arg-type]
