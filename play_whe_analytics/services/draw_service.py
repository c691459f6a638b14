"""Draw service — loads draw history from the database."""

import math

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from play_whe_analytics.analytics.store import DrawHistory
from play_whe_analytics.config import settings
from play_whe_analytics.db.crud import draws as crud
from play_whe_analytics.exceptions import InvalidParameterError
from play_whe_analytics.marks import LINES, SUITS
from play_whe_analytics.schemas.draw import DrawRecord, PaginatedDraws, TimeSlot


async def load_history(
    session: AsyncSession, limit: int | None = None
) -> DrawHistory:
    """Load the most recent ``limit`` draws as an ordered history."""
    limit = limit or settings.HISTORY_LIMIT
    rows = await crud.get_recent(session, limit, ascending=True)
    history = DrawHistory.from_rows((d.to_row() for d in rows), ascending=True)
    logger.debug("Loaded {} of {} requested draws", len(history), limit)
    return history


async def get_latest_draw(session: AsyncSession) -> DrawRecord | None:
    draw = await crud.get_latest(session)
    if draw is None:
        return None
    history = DrawHistory.from_rows([draw.to_row()])
    return history.latest


async def get_draws_paginated(
    session: AsyncSession,
    *,
    page: int = 1,
    page_size: int = 20,
    time_slot: TimeSlot | None = None,
    line_group: str | None = None,
    suit_group: str | None = None,
    year: int | None = None,
    month: int | None = None,
    symbol: int | None = None,
    search: str | None = None,
) -> PaginatedDraws:
    if line_group is not None and line_group not in LINES:
        raise InvalidParameterError(f"Unknown line: {line_group!r}")
    if suit_group is not None and suit_group not in SUITS:
        raise InvalidParameterError(f"Unknown suit: {suit_group!r}")

    rows, total = await crud.get_draws(
        session,
        page=page,
        page_size=page_size,
        time_slot=time_slot.value if time_slot else None,
        line_group=line_group,
        suit_group=suit_group,
        year=year,
        month=month,
        symbol=symbol,
        search=search,
    )
    history = DrawHistory.from_rows((d.to_row() for d in rows), ascending=False)
    logger.debug("Draw page {} of {} matching rows", page, total)
    return PaginatedDraws(
        items=list(history.newest_first()),
        total=total,
        page=page,
        page_size=page_size,
        total_pages=math.ceil(total / page_size) if page_size else 0,
    )
