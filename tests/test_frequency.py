from datetime import date

import pytest

from play_whe_analytics.analytics.frequency import compute_frequency
from play_whe_analytics.categories import Category
from play_whe_analytics.exceptions import InvalidParameterError
from play_whe_analytics.marks import MARK_NAMES
from play_whe_analytics.schemas.draw import DrawFilter, DrawRecord, TimeSlot


def test_empty_window_lists_every_value_at_zero():
    result = compute_frequency((), 100)
    assert result.hot == []
    assert result.cold == []
    assert len(result.all) == 36
    assert all(e.count == 0 and e.percentage == 0 for e in result.all)
    assert [e.category_value for e in result.all] == list(range(1, 37))


def test_hot_and_cold(make_window):
    window = make_window([3, 3, 3, 2, 2, 7, 1])
    result = compute_frequency(window, 100, top_k=2)

    assert result.sample_size == 7
    assert [(e.category_value, e.count) for e in result.hot] == [(3, 3), (2, 2)]
    assert [(e.category_value, e.count) for e in result.cold] == [(1, 1), (7, 1)]
    assert [e.category_value for e in result.all[:5]] == [3, 2, 1, 7, 4]
    assert result.all[0].percentage == 42.86


def test_window_truncates_to_most_recent(make_window):
    result = compute_frequency(make_window([1, 1, 2, 2, 2, 2]), 3)
    counts = {e.category_value: e.count for e in result.all}
    assert counts[1] == 2
    assert counts[2] == 1


def test_filters_apply_before_truncation(make_history):
    history = make_history([1, 2, 3, 4, 5, 6, 7, 8, 1, 2, 3, 4, 9, 10, 11, 12])
    window = history.newest_first()

    morning = compute_frequency(window, 3, filters=DrawFilter(time_slot=TimeSlot.MORNING))
    counts = {e.category_value: e.count for e in morning.all if e.count}
    assert morning.sample_size == 3
    assert counts == {9: 1, 1: 1, 5: 1}

    unfiltered = compute_frequency(window, 3)
    counts = {e.category_value: e.count for e in unfiltered.all if e.count}
    assert counts == {10: 1, 11: 1, 12: 1}


def test_line_counts(make_window):
    result = compute_frequency(make_window([1, 10, 19, 2]), 50, Category.LINE)
    assert len(result.all) == 9
    assert result.hot[0].category_value == "1 Line"
    assert result.hot[0].count == 3
    assert result.category is Category.LINE


def test_is_reproducible(sample_history):
    window = sample_history.newest_first()
    filters = DrawFilter(time_slot=TimeSlot.EVENING)
    assert compute_frequency(window, 50, Category.SUIT, filters) == compute_frequency(
        window, 50, Category.SUIT, filters
    )


@pytest.mark.parametrize("window_size,top_k", [(0, 5), (-1, 5), (10, 0)])
def test_invalid_parameters(window_size, top_k):
    with pytest.raises(InvalidParameterError):
        compute_frequency((), window_size, top_k=top_k)


def test_records_without_a_suit_are_not_counted():
    records = [
        DrawRecord(
            sequence_id=i,
            draw_date=date(2024, 1, 1),
            time_slot=TimeSlot.MORNING,
            symbol=mark,
            symbol_name=MARK_NAMES[mark],
            suit_group=suit,
        )
        for i, (mark, suit) in enumerate([(5, "5"), (15, None), (6, "6"), (16, "6")])
    ]
    result = compute_frequency(records[::-1], 100, Category.SUIT)

    assert result.sample_size == 3
    counts = {e.category_value: (e.count, e.percentage) for e in result.all}
    assert counts["6"] == (2, 66.67)
    assert counts["5"] == (1, 33.33)
    assert sum(e.percentage for e in result.all) == pytest.approx(100, abs=0.05)
