from datetime import datetime, timezone

from spending_analytics.date_ranges import (
    filter_by_date_range,
    filter_by_range,
    get_date_range,
    resolve_all_window,
)


def test_day_range_is_current_instant():
    now = datetime(2024, 5, 15, 13, 30)
    assert get_date_range("day", now) == (now, now)


def test_week_starts_monday():
    start, end = get_date_range("week", datetime(2024, 5, 15, 13, 30))  # Wednesday
    assert start == datetime(2024, 5, 13)
    assert end.date() == datetime(2024, 5, 19).date()
    assert (end.hour, end.minute) == (23, 59)


def test_month_range_handles_short_months():
    start, end = get_date_range("month", datetime(2024, 2, 10))
    assert start == datetime(2024, 2, 1)
    assert end.date().day == 29
    _start, end = get_date_range("month", datetime(2023, 12, 31))
    assert end.date() == datetime(2023, 12, 31).date()


def test_year_range():
    start, end = get_date_range("year", datetime(2024, 7, 4))
    assert start == datetime(2024, 1, 1)
    assert end.date() == datetime(2024, 12, 31).date()


def test_all_range_has_no_start():
    now = datetime(2024, 7, 4)
    assert get_date_range("all", now) == (None, now)


def test_window_bounds_are_inclusive_calendar_days(tx):
    txs = [
        tx(1, datetime(2024, 1, 1, 0, 0), id_="a"),
        tx(1, datetime(2024, 1, 31, 23, 59), id_="b"),
        tx(1, datetime(2024, 2, 1, 0, 0), id_="c"),
    ]
    kept = filter_by_date_range(txs, datetime(2024, 1, 1, 12), datetime(2024, 1, 31, 8))
    assert [t.id for t in kept] == ["a", "b"]


def test_filter_by_range_all_includes_history_up_to_today(tx):
    txs = [tx(1, datetime(2015, 1, 1), id_="old"), tx(1, datetime(2030, 1, 1), id_="future")]
    kept = filter_by_range(txs, "all", datetime(2024, 7, 4, 8))
    assert [t.id for t in kept] == ["old"]


def test_filter_by_range_week(tx):
    txs = [tx(1, datetime(2024, 5, 12), id_="sun-before"), tx(1, datetime(2024, 5, 19, 22), id_="sun")]
    kept = filter_by_range(txs, "week", datetime(2024, 5, 15))
    assert [t.id for t in kept] == ["sun"]


def test_resolve_all_window(tx):
    end = datetime(2024, 7, 4)
    txs = [tx(1, datetime(2021, 3, 1)), tx(1, datetime(2019, 8, 1))]
    assert resolve_all_window(txs, end) == (datetime(2019, 8, 1), end)
    assert resolve_all_window([], end) == (end, end)


def test_aware_timestamps_filter_by_their_own_calendar_day(tx):
    aware = tx(1, datetime(2024, 1, 31, 23, 0, tzinfo=timezone.utc))
    kept = filter_by_date_range([aware], datetime(2024, 1, 1), datetime(2024, 1, 31))
    assert kept == [aware]
