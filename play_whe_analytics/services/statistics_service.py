"""Statistics service — runs the analytics core against an active window."""

from datetime import date

from loguru import logger

from play_whe_analytics.analytics import (
    DrawHistory,
    active_window,
    compute_correlation,
    compute_frequency,
    compute_lanes,
    compute_momentum,
    compute_quartiles,
    compute_recency,
    compute_transition_matrix,
    compute_transition_model,
    find_under,
)
from play_whe_analytics.categories import Category
from play_whe_analytics.config import settings
from play_whe_analytics.schemas.draw import DayName, DrawFilter, DrawRecord, TimeSlot
from play_whe_analytics.schemas.statistics import (
    CorrelationResult,
    FrequencyAnalysis,
    GapEntry,
    LaneAnalysis,
    MarkMomentum,
    QuartileSnapshot,
    TransitionMatrix,
    TransitionModel,
)


def get_gaps(
    history: DrawHistory,
    category: Category = Category.SYMBOL,
    offset: int = 0,
    filters: DrawFilter | None = None,
) -> list[GapEntry]:
    """Gap table (draws since last played), most overdue first."""
    window = active_window(history, offset, filters)
    return compute_recency(window, category)


def get_frequency(
    history: DrawHistory,
    category: Category = Category.SYMBOL,
    window_size: int | None = None,
    top_k: int | None = None,
    offset: int = 0,
    filters: DrawFilter | None = None,
) -> FrequencyAnalysis:
    """Hot/cold analysis over the last ``window_size`` matching draws."""
    if window_size is None:
        window_size = settings.FREQUENCY_WINDOW
    if top_k is None:
        top_k = settings.HOT_COLD_SIZE
    # Filtering happens inside compute_frequency, ahead of truncation
    window = active_window(history, offset)
    return compute_frequency(window, window_size, category, filters, top_k=top_k)


def get_quartiles(
    history: DrawHistory, offset: int = 0, filters: DrawFilter | None = None
) -> QuartileSnapshot:
    return compute_quartiles(active_window(history, offset, filters))


def get_transition_model(
    history: DrawHistory,
    trigger_rank: int | None = None,
    offset: int = 0,
    filters: DrawFilter | None = None,
) -> TransitionModel:
    window = active_window(history, offset, filters)
    model = compute_transition_model(window, trigger_rank)
    if model.insufficient:
        logger.info(
            "Not enough data for transition model (trigger={}, window={})",
            model.trigger, len(window),
        )
    return model


def get_transition_matrix(
    history: DrawHistory, offset: int = 0, filters: DrawFilter | None = None
) -> TransitionMatrix:
    return compute_transition_matrix(active_window(history, offset, filters))


def get_correlation(
    history: DrawHistory,
    symbol_a: int,
    symbol_b: int,
    proximity: int | None = None,
    offset: int = 0,
) -> CorrelationResult:
    window = active_window(history, offset)
    if proximity is None:
        proximity = settings.CORRELATION_PROXIMITY
    return compute_correlation(window, symbol_a, symbol_b, proximity)


def get_lanes(
    history: DrawHistory,
    cycle_window: int | None = None,
    day_name: DayName | None = None,
    offset: int = 0,
) -> LaneAnalysis:
    window = active_window(history, offset)
    if cycle_window is None:
        cycle_window = settings.LANE_CYCLE_WINDOW
    return compute_lanes(window, cycle_window, day_name)


def get_under(
    history: DrawHistory, draw_date: date, time_slot: TimeSlot
) -> DrawRecord | None:
    return find_under(history.newest_first(), draw_date, time_slot)


def get_momentum(
    history: DrawHistory,
    lookback: int | None = None,
    search: str | None = None,
    offset: int = 0,
) -> list[MarkMomentum]:
    """Per-mark gap and momentum over the last ``lookback`` draws."""
    if lookback is None:
        lookback = settings.MOMENTUM_LOOKBACK
    return compute_momentum(active_window(history, offset), lookback, search)
