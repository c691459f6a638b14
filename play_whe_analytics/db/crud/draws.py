"""CRUD operations for Play Whe draws."""

from sqlalchemy import desc, extract, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from play_whe_analytics.db.models.draw import Draw
from play_whe_analytics.marks import marks_in_line, marks_in_suit, search_marks


async def get_latest(session: AsyncSession) -> Draw | None:
    result = await session.execute(
        select(Draw).order_by(desc(Draw.draw_no)).limit(1)
    )
    return result.scalar_one_or_none()


async def get_draws(
    session: AsyncSession,
    *,
    page: int = 1,
    page_size: int = 20,
    time_slot: str | None = None,
    line_group: str | None = None,
    suit_group: str | None = None,
    year: int | None = None,
    month: int | None = None,
    symbol: int | None = None,
    search: str | None = None,
) -> tuple[list[Draw], int]:
    """One page of draws, newest first, narrowed by the given filters.

    Line, suit and search filters are resolved to mark numbers through the
    static tables, so rows stored without a line or suit still match.
    """
    conditions = []
    if time_slot:
        conditions.append(Draw.time_slot == time_slot)
    if line_group:
        conditions.append(Draw.symbol.in_(marks_in_line(line_group)))
    if suit_group:
        conditions.append(Draw.symbol.in_(marks_in_suit(suit_group)))
    if year:
        conditions.append(extract("year", Draw.draw_date) == year)
    if month:
        conditions.append(extract("month", Draw.draw_date) == month)
    if symbol:
        conditions.append(Draw.symbol == symbol)
    if search:
        conditions.append(Draw.symbol.in_(search_marks(search)))

    query = select(Draw)
    count_query = select(func.count(Draw.id))
    for condition in conditions:
        query = query.where(condition)
        count_query = count_query.where(condition)

    total = (await session.execute(count_query)).scalar() or 0

    query = query.order_by(desc(Draw.draw_no))
    query = query.offset((page - 1) * page_size).limit(page_size)

    result = await session.execute(query)
    return list(result.scalars().all()), total


async def get_recent(
    session: AsyncSession, limit: int, ascending: bool = False
) -> list[Draw]:
    """The ``limit`` most recent draws, returned in the requested order."""
    result = await session.execute(
        select(Draw).order_by(desc(Draw.draw_no)).limit(limit)
    )
    draws = list(result.scalars().all())
    if ascending:
        draws.reverse()
    return draws
