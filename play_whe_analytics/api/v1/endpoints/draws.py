"""Draw history API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from play_whe_analytics.api.deps import bad_request, get_db
from play_whe_analytics.exceptions import InvalidParameterError
from play_whe_analytics.schemas.draw import DrawRecord, PaginatedDraws, TimeSlot
from play_whe_analytics.services import draw_service

router = APIRouter()


@router.get("/latest", response_model=DrawRecord)
async def latest(db: AsyncSession = Depends(get_db)):
    """Most recent draw."""
    draw = await draw_service.get_latest_draw(db)
    if draw is None:
        raise HTTPException(status_code=404, detail="No draws loaded")
    return draw


@router.get("", response_model=PaginatedDraws)
async def list_draws(
    page: int = Query(1, ge=1),
    page_size: int = Query(50, ge=1, le=500),
    time_slot: TimeSlot | None = Query(None),
    line: str | None = Query(None, description='Line label, e.g. "3 Line"'),
    suit: str | None = Query(None, description="Suit (last digit of the mark)"),
    year: int | None = Query(None, ge=1990, le=2100),
    month: int | None = Query(None, ge=1, le=12),
    symbol: int | None = Query(None, ge=1, le=36),
    search: str | None = Query(None, description="Mark number or name"),
    db: AsyncSession = Depends(get_db),
):
    """Draw history, newest first."""
    try:
        return await draw_service.get_draws_paginated(
            db,
            page=page,
            page_size=page_size,
            time_slot=time_slot,
            line_group=line,
            suit_group=suit,
            year=year,
            month=month,
            symbol=symbol,
            search=search,
        )
    except InvalidParameterError as e:
        raise bad_request(e)
