"""Statistics API endpoints."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from play_whe_analytics.analytics.store import DrawHistory
from play_whe_analytics.api.deps import bad_request, get_filters, get_history
from play_whe_analytics.categories import Category
from play_whe_analytics.exceptions import InvalidParameterError
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
from play_whe_analytics.services import statistics_service as stats

router = APIRouter()

Offset = Annotated[int, Query(ge=0, description="Look back: drop the N most recent draws")]


@router.get("/gaps", response_model=list[GapEntry])
async def gaps(
    category: Category = Category.SYMBOL,
    offset: Offset = 0,
    filters: DrawFilter = Depends(get_filters),
    history: DrawHistory = Depends(get_history),
):
    """Gap table: draws since each mark, line or suit last played."""
    return stats.get_gaps(history, category, offset=offset, filters=filters)


@router.get("/frequency", response_model=FrequencyAnalysis)
async def frequency(
    category: Category = Category.SYMBOL,
    window: int | None = Query(None, ge=1, description="Count only the last N matching draws"),
    top_k: int | None = Query(None, ge=1, le=36),
    offset: Offset = 0,
    filters: DrawFilter = Depends(get_filters),
    history: DrawHistory = Depends(get_history),
):
    """Frequency counts with hot and cold lists."""
    return stats.get_frequency(
        history, category, window_size=window, top_k=top_k, offset=offset, filters=filters,
    )


@router.get("/quartiles", response_model=QuartileSnapshot)
async def quartiles(
    offset: Offset = 0,
    filters: DrawFilter = Depends(get_filters),
    history: DrawHistory = Depends(get_history),
):
    """Current shelf: R1 most overdue marks, R4 most recent."""
    return stats.get_quartiles(history, offset=offset, filters=filters)


@router.get("/transitions", response_model=TransitionModel)
async def transitions(
    trigger: int | None = Query(None, ge=1, le=4, description="Rank of the last draw (default: actual)"),
    offset: Offset = 0,
    filters: DrawFilter = Depends(get_filters),
    history: DrawHistory = Depends(get_history),
):
    """Where the next draw tends to come from after a draw in the trigger rank."""
    return stats.get_transition_model(history, trigger, offset=offset, filters=filters)


@router.get("/transitions/matrix", response_model=TransitionMatrix)
async def transition_matrix(
    offset: Offset = 0,
    filters: DrawFilter = Depends(get_filters),
    history: DrawHistory = Depends(get_history),
):
    """Rank-to-rank transition counts over the whole replay."""
    return stats.get_transition_matrix(history, offset=offset, filters=filters)


@router.get("/correlation", response_model=CorrelationResult)
async def correlation(
    a: int = Query(..., description="Trigger mark"),
    b: int = Query(..., description="Mark expected to follow"),
    proximity: int | None = Query(None, description="Draws to look ahead after each A"),
    offset: Offset = 0,
    history: DrawHistory = Depends(get_history),
):
    """How often mark B plays within N draws after mark A."""
    try:
        return stats.get_correlation(history, a, b, proximity, offset=offset)
    except InvalidParameterError as e:
        raise bad_request(e)


@router.get("/lanes", response_model=LaneAnalysis)
async def lanes(
    cycle_window: int | None = Query(None, ge=1, le=2000),
    day_name: DayName | None = None,
    offset: Offset = 0,
    history: DrawHistory = Depends(get_history),
):
    """Per-time-slot lanes and marks missing from exactly one lane."""
    return stats.get_lanes(history, cycle_window, day_name, offset=offset)


@router.get("/under", response_model=DrawRecord)
async def under(
    draw_date: date,
    time_slot: TimeSlot,
    history: DrawHistory = Depends(get_history),
):
    """The draw a result plays under: same time slot, one week earlier."""
    record = stats.get_under(history, draw_date, time_slot)
    if record is None:
        raise HTTPException(status_code=404, detail="No draw one week earlier in that slot")
    return record


@router.get("/momentum", response_model=list[MarkMomentum])
async def momentum(
    search: str | None = Query(None, description="Mark number or name"),
    lookback: int | None = Query(None, ge=1, le=500, description="Recent draws counted for momentum"),
    offset: Offset = 0,
    history: DrawHistory = Depends(get_history),
):
    """Every mark's gap, last play and momentum status."""
    return stats.get_momentum(history, lookback, search, offset=offset)
