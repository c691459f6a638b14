"""Current momentum: how often each mark played in the last few draws."""

from collections import Counter
from collections.abc import Sequence

from play_whe_analytics.analytics.recency import compute_recency
from play_whe_analytics.categories import Category
from play_whe_analytics.exceptions import InvalidParameterError
from play_whe_analytics.marks import MARK_NAMES, MARKS, search_marks
from play_whe_analytics.schemas.draw import DrawRecord
from play_whe_analytics.schemas.statistics import MarkMomentum, MomentumStatus

HOT_STREAK_MIN = 3
WARMING_UP_MIN = 1


def momentum_status(recent_count: int) -> MomentumStatus:
    if recent_count >= HOT_STREAK_MIN:
        return MomentumStatus.HOT_STREAK
    if recent_count >= WARMING_UP_MIN:
        return MomentumStatus.WARMING_UP
    return MomentumStatus.NEUTRAL


def compute_momentum(
    window: Sequence[DrawRecord],
    lookback: int = 10,
    search: str | None = None,
) -> list[MarkMomentum]:
    """Gap, last play and momentum status of every mark.

    Args:
        window: Draws with index 0 as the most recent.
        lookback: How many of the most recent draws count toward momentum.
        search: Keep only marks whose number or name contains this text.

    Returns:
        One entry per matching mark, ordered by mark number.
    """
    if lookback <= 0:
        raise InvalidParameterError(f"lookback must be positive, got {lookback}")

    selected = search_marks(search) if search else list(MARKS)
    recent = Counter(record.symbol for record in window[:lookback])
    gaps = {e.category_value: e for e in compute_recency(window, Category.SYMBOL)}

    return [
        MarkMomentum(
            symbol=mark,
            symbol_name=MARK_NAMES[mark],
            gap=gaps[mark].gap,
            never_seen=gaps[mark].never_seen,
            last_occurrence=gaps[mark].last_occurrence,
            recent_count=recent[mark],
            status=momentum_status(recent[mark]),
        )
        for mark in selected
    ]
