"""Correlation scanner — does mark B tend to follow mark A?"""

from collections.abc import Sequence

from play_whe_analytics.exceptions import InvalidParameterError
from play_whe_analytics.marks import MARK_NAMES
from play_whe_analytics.schemas.draw import DrawRecord
from play_whe_analytics.schemas.statistics import CorrelationResult


def compute_correlation(
    window: Sequence[DrawRecord],
    symbol_a: int,
    symbol_b: int,
    proximity: int = 5,
) -> CorrelationResult:
    """Share of A's occurrences followed by B within ``proximity`` draws.

    Args:
        window: Draws with index 0 as the most recent.
        symbol_a: Trigger mark.
        symbol_b: Mark looked for after each A.
        proximity: Number of draws after A to search.
    """
    for mark in (symbol_a, symbol_b):
        if mark not in MARK_NAMES:
            raise InvalidParameterError(f"Mark must be between 1 and 36, got {mark}")
    if symbol_a == symbol_b:
        raise InvalidParameterError("Mark A and mark B must differ")
    if proximity <= 0:
        raise InvalidParameterError(f"Proximity must be positive, got {proximity}")

    marks = [r.symbol for r in reversed(window)]
    hits = 0
    total_a = 0
    for i, mark in enumerate(marks):
        if mark != symbol_a:
            continue
        total_a += 1
        if symbol_b in marks[i + 1:i + 1 + proximity]:
            hits += 1

    return CorrelationResult(
        symbol_a=symbol_a,
        symbol_b=symbol_b,
        proximity=proximity,
        hits=hits,
        total_a=total_a,
        percent=round(hits / total_a * 100, 2) if total_a > 0 else 0,
        insufficient=total_a == 0,
    )
