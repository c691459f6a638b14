"""Time-travel replay — look at the history as of ``k`` draws ago."""

from collections.abc import Sequence

from play_whe_analytics.analytics.store import DrawHistory
from play_whe_analytics.exceptions import InvalidParameterError
from play_whe_analytics.schemas.draw import DrawFilter, DrawRecord


def apply_offset(sequence: Sequence[DrawRecord], k: int) -> tuple[DrawRecord, ...]:
    """Drop the ``k`` most recent draws from a newest-first sequence.

    ``k`` is clamped to ``len(sequence) - 1`` so a non-empty sequence never
    comes back empty. ``k == 0`` is the live view.
    """
    if k < 0:
        raise InvalidParameterError(f"Offset must be non-negative, got {k}")
    if not sequence:
        return ()
    k = min(k, len(sequence) - 1)
    return tuple(sequence[k:])


def active_window(
    history: DrawHistory,
    offset: int = 0,
    filters: DrawFilter | None = None,
) -> tuple[DrawRecord, ...]:
    """Newest-first window after the replay offset, then the draw filter."""
    window = apply_offset(history.newest_first(), offset)
    if filters:
        window = filters.apply(window)
    return window
