"""Quartile bucketer — the "shelf" of 36 marks in four rows of nine."""

from collections.abc import Iterable, Sequence

from play_whe_analytics.analytics.recency import compute_recency
from play_whe_analytics.categories import Category
from play_whe_analytics.schemas.draw import DrawRecord
from play_whe_analytics.schemas.statistics import RANK_LABELS, RANK_SIZE, QuartileSnapshot


def bucket_marks(ordered_marks: Iterable[int]) -> QuartileSnapshot:
    """Slice marks, already sorted most overdue first, into R1..R4."""
    marks = list(ordered_marks)
    groups = {
        label: marks[i * RANK_SIZE:(i + 1) * RANK_SIZE]
        for i, label in enumerate(RANK_LABELS)
    }
    return QuartileSnapshot(groups=groups)


def compute_quartiles(window: Sequence[DrawRecord]) -> QuartileSnapshot:
    """Rank every mark by how overdue it is in ``window`` (newest first).

    Positions 0-8 of the descending-gap order go to R1 (most overdue),
    27-35 to R4 (most recently played).
    """
    entries = compute_recency(window, Category.SYMBOL)
    return bucket_marks(e.category_value for e in entries)
