import pytest

from spending_analytics.axis import bar_percentage, chart_kind, nice_max, sparsify_labels


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, 10),
        (12, 15),
        (95, 100),
        (1, 1.5),
        (2, 2),
        (2.5, 3),
        (40, 50),
        (65, 70),
        (1000, 1500),
        (3200, 5000),
    ],
)
def test_nice_max(value, expected):
    assert nice_max(value) == pytest.approx(expected)


def test_nice_max_never_below_input():
    for v in (0.3, 7.7, 18, 149, 151, 9999, 123456):
        assert nice_max(v) >= v


def test_short_label_lists_are_unchanged():
    labels = [str(i) for i in range(8)]
    assert sparsify_labels(labels) == labels
    assert sparsify_labels([str(i) for i in range(10)]) == [str(i) for i in range(10)]


def test_eleven_to_twenty_keep_every_second():
    out = sparsify_labels([str(i) for i in range(11)])
    assert out == ["0", "", "2", "", "4", "", "6", "", "8", "", "10"]


def test_twenty_five_keep_every_third():
    labels = [f"L{i}" for i in range(25)]
    out = sparsify_labels(labels)
    assert len(out) == 25
    kept = [i for i, v in enumerate(out) if v]
    assert kept == list(range(0, 25, 3))
    assert all(out[i] == labels[i] for i in kept)


def test_over_thirty_keep_every_fifth():
    out = sparsify_labels([str(i) for i in range(31)])
    assert [i for i, v in enumerate(out) if v] == [0, 5, 10, 15, 20, 25, 30]


def test_sparsify_does_not_mutate_input():
    labels = [str(i) for i in range(15)]
    sparsify_labels(labels)
    assert labels == [str(i) for i in range(15)]


@pytest.mark.parametrize(("count", "expected"), [(6, 0.6), (7, 0.5), (8, 0.5), (12, 0.4), (13, 0.3)])
def test_bar_percentage(count, expected):
    assert bar_percentage(count) == expected


def test_chart_kind():
    assert chart_kind("all") == "line"
    assert chart_kind("income") == "bar"
    assert chart_kind("spent") == "bar"
    with pytest.raises(ValueError):
        chart_kind("net")  # type: ignore[arg-type]
