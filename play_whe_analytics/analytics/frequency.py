"""Frequency counter — occurrences per category value in a trailing window."""

from collections import Counter
from collections.abc import Sequence

from play_whe_analytics.categories import Category
from play_whe_analytics.exceptions import InvalidParameterError
from play_whe_analytics.schemas.draw import DrawFilter, DrawRecord
from play_whe_analytics.schemas.statistics import FrequencyAnalysis, FrequencyEntry


def compute_frequency(
    window: Sequence[DrawRecord],
    window_size: int = 100,
    category: Category = Category.SYMBOL,
    filters: DrawFilter | None = None,
    top_k: int = 5,
) -> FrequencyAnalysis:
    """Count category values over the last ``window_size`` matching draws.

    Filters are applied to the whole sequence before truncation, so a
    Tuesday filter with ``window_size=50`` yields the last 50 Tuesdays.

    Args:
        window: Draws with index 0 as the most recent.
        window_size: How many of the most recent matching draws to count.
        category: Mark, line or suit view.
        filters: Optional time slot / day / year / month filter.
        top_k: Length of the hot and cold lists.
    """
    if window_size <= 0:
        raise InvalidParameterError(f"window_size must be positive, got {window_size}")
    if top_k <= 0:
        raise InvalidParameterError(f"top_k must be positive, got {top_k}")

    matching = filters.apply(window) if filters else tuple(window)
    recent = matching[:window_size]

    counter = Counter()
    for record in recent:
        value = category.value_of(record)
        if value is not None:
            counter[value] += 1

    # Records without a value for this category (missing line or suit) are
    # left out of the denominator so percentages always sum to 100
    sample_size = sum(counter.values())
    entries = [
        FrequencyEntry(
            category_value=value,
            count=counter.get(value, 0),
            percentage=round(counter.get(value, 0) / sample_size * 100, 2) if sample_size > 0 else 0,
        )
        for value in category.domain
    ]

    all_sorted = sorted(entries, key=lambda e: (-e.count, e.category_value))
    played = [e for e in all_sorted if e.count > 0]
    cold = sorted(played, key=lambda e: (e.count, e.category_value))

    return FrequencyAnalysis(
        category=category,
        window_size=window_size,
        sample_size=sample_size,
        all=all_sorted,
        hot=played[:top_k],
        cold=cold[:top_k],
    )
