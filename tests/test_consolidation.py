import pytest

from spending_analytics.consolidation import (
    MAX_CATEGORIES,
    consolidate_top_categories,
    rank_categories,
)


def test_eleven_categories_merge_two_smallest_into_others():
    totals = {f"c{v:02d}": float(v) for v in range(1, 12)}

    result = consolidate_top_categories(totals)

    assert [v for _k, v in result.top] == [11, 10, 9, 8, 7, 6, 5, 4, 3]
    assert result.others == 3
    assert len(result) == MAX_CATEGORIES + 1


def test_nine_or_fewer_entries_have_no_others():
    totals = {f"c{v}": float(v) for v in range(1, 10)}
    result = consolidate_top_categories(totals)
    assert result.others is None
    assert len(result.top) == 9


def test_non_positive_entries_are_dropped_before_ranking():
    totals = {f"c{v:02d}": float(v) for v in range(1, 10)}
    totals.update({"zero": 0.0, "negative": -5.0})
    result = consolidate_top_categories(totals)
    assert result.others is None
    assert {k for k, _v in result.top}.isdisjoint({"zero", "negative"})


def test_all_zero_yields_empty():
    assert len(consolidate_top_categories({"a": 0.0, "b": 0.0})) == 0
    assert len(consolidate_top_categories({})) == 0


def test_ties_break_by_category_key():
    totals = {"shopping": 5.0, "bills": 5.0, "food": 9.0, "transport": 5.0}
    assert rank_categories(totals) == [
        ("food", 9.0),
        ("bills", 5.0),
        ("shopping", 5.0),
        ("transport", 5.0),
    ]


def test_tie_break_is_independent_of_insertion_order():
    a = {"x": 1.0, "y": 1.0, "z": 2.0}
    b = {"z": 2.0, "y": 1.0, "x": 1.0}
    assert rank_categories(a) == rank_categories(b)


def test_others_sums_everything_below_the_cut():
    totals = {f"k{i:02d}": 100.0 - i for i in range(15)}
    result = consolidate_top_categories(totals)
    assert result.others == pytest.approx(sum(100.0 - i for i in range(9, 15)))


def test_limit_must_be_positive():
    with pytest.raises(ValueError):
        consolidate_top_categories({"a": 1.0}, limit=0)
