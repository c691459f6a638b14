"""Pydantic schemas for draw records."""

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field, computed_field

from play_whe_analytics.marks import MARK_COUNT


class TimeSlot(str, Enum):
    """Draw times in the order they are played each day."""

    MORNING = "Morning"
    MIDDAY = "Midday"
    AFTERNOON = "Afternoon"
    EVENING = "Evening"


class DayName(str, Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @classmethod
    def of(cls, day: date) -> "DayName":
        # date.weekday() is calendar arithmetic: no locale, no time zone
        return list(cls)[day.weekday()]


class DrawRecord(BaseModel):
    """A single Play Whe result. Never mutated once built."""

    model_config = {"frozen": True, "from_attributes": True}

    sequence_id: int
    draw_date: date
    time_slot: TimeSlot
    symbol: int = Field(ge=1, le=MARK_COUNT)
    symbol_name: str
    line_group: str | None = None
    suit_group: str | None = None

    @computed_field
    @property
    def day_name(self) -> DayName:
        return DayName.of(self.draw_date)

    def __repr__(self) -> str:
        return f"<DrawRecord #{self.sequence_id} {self.draw_date} {self.time_slot.value} mark={self.symbol}>"


class DrawFilter(BaseModel):
    """Upstream filter applied before any windowing. Unset fields match all."""

    model_config = {"frozen": True}

    time_slot: TimeSlot | None = None
    day_name: DayName | None = None
    year: int | None = None
    month: int | None = Field(None, ge=1, le=12)

    @property
    def is_empty(self) -> bool:
        return all(v is None for v in (self.time_slot, self.day_name, self.year, self.month))

    def matches(self, record: DrawRecord) -> bool:
        if self.time_slot is not None and record.time_slot != self.time_slot:
            return False
        if self.day_name is not None and record.day_name != self.day_name:
            return False
        if self.year is not None and record.draw_date.year != self.year:
            return False
        if self.month is not None and record.draw_date.month != self.month:
            return False
        return True

    def apply(self, records):
        """Keep matching records, preserving their order."""
        if self.is_empty:
            return tuple(records)
        return tuple(r for r in records if self.matches(r))


# --- Paginated response ---

class PaginatedDraws(BaseModel):
    items: list[DrawRecord]
    total: int
    page: int
    page_size: int
    total_pages: int
