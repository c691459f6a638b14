"""Recency index — draws since each category value last played."""

from collections.abc import Sequence

from play_whe_analytics.categories import Category
from play_whe_analytics.schemas.draw import DrawRecord
from play_whe_analytics.schemas.statistics import GapEntry


def compute_recency(
    window: Sequence[DrawRecord], category: Category = Category.SYMBOL
) -> list[GapEntry]:
    """Compute the current gap of every value in ``category.domain``.

    Args:
        window: Draws with index 0 as the most recent.
        category: Mark, line or suit view.

    Returns:
        One entry per domain value, most overdue first. Ties are broken by
        ascending category value.
    """
    first_seen: dict = {}
    for index, record in enumerate(window):
        value = category.value_of(record)
        if value is None or value in first_seen:
            continue
        first_seen[value] = (index, record)

    sentinel = len(window)
    result = []
    for value in category.domain:
        if value in first_seen:
            index, record = first_seen[value]
            result.append(GapEntry(category_value=value, gap=index, last_occurrence=record))
        else:
            result.append(GapEntry(category_value=value, gap=sentinel, never_seen=True))

    return sorted(result, key=lambda e: (-e.gap, e.category_value))
