"""Dependency injection for FastAPI."""

from collections.abc import AsyncGenerator

from fastapi import Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from play_whe_analytics.analytics.store import DrawHistory
from play_whe_analytics.db.engine import async_session_factory
from play_whe_analytics.exceptions import InvalidParameterError
from play_whe_analytics.schemas.draw import DayName, DrawFilter, TimeSlot
from play_whe_analytics.services import draw_service


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async database session for request scope."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_history(db: AsyncSession = Depends(get_db)) -> DrawHistory:
    """Draw history for the request, oldest first."""
    return await draw_service.load_history(db)


def get_filters(
    time_slot: TimeSlot | None = Query(None, description="Only draws from this time slot"),
    day_name: DayName | None = Query(None),
    year: int | None = Query(None, ge=1990, le=2100),
    month: int | None = Query(None, ge=1, le=12),
) -> DrawFilter:
    return DrawFilter(time_slot=time_slot, day_name=day_name, year=year, month=month)


def bad_request(e: InvalidParameterError) -> HTTPException:
    return HTTPException(status_code=400, detail=str(e))
