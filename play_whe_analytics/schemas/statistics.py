"""Pydantic schemas for statistics."""

from enum import Enum

from pydantic import BaseModel

from play_whe_analytics.categories import Category
from play_whe_analytics.schemas.draw import DayName, DrawRecord, TimeSlot

RANK_LABELS = ("R1", "R2", "R3", "R4")
RANK_SIZE = 9


class GapEntry(BaseModel):
    """Draws since a category value last played.

    ``gap`` is the 0-based index of the value's most recent occurrence in the
    scanned window. A value absent from the window carries
    ``gap == len(window)`` and ``never_seen=True``.
    """

    category_value: int | str
    gap: int
    never_seen: bool = False
    last_occurrence: DrawRecord | None = None


class FrequencyEntry(BaseModel):
    category_value: int | str
    count: int
    percentage: float


class FrequencyAnalysis(BaseModel):
    """``sample_size`` counts only draws that carry a value for ``category``."""

    category: Category
    window_size: int
    sample_size: int
    all: list[FrequencyEntry]
    hot: list[FrequencyEntry]
    cold: list[FrequencyEntry]


class QuartileSnapshot(BaseModel):
    """Marks split into four ranks of nine, R1 most overdue, R4 most recent."""

    groups: dict[str, list[int]]

    def rank_of(self, mark: int) -> int:
        for rank, label in enumerate(RANK_LABELS, start=1):
            if mark in self.groups[label]:
                return rank
        raise KeyError(mark)

    def column_of(self, mark: int) -> int:
        """1-based position of a mark inside its rank."""
        label = RANK_LABELS[self.rank_of(mark) - 1]
        return self.groups[label].index(mark) + 1


class RowProbability(BaseModel):
    rank_label: str
    count: int
    percent: float


class ColumnCount(BaseModel):
    column_label: str
    count: int


class TransitionModel(BaseModel):
    trigger: int | None
    sample_size: int
    insufficient: bool
    row_probs: list[RowProbability]
    top_columns: list[ColumnCount]


class TransitionMatrix(BaseModel):
    labels: list[str]
    counts: list[list[int]]  # counts[from_rank - 1][to_rank - 1]
    ranks: list[int]  # rank of each draw, oldest first


class CorrelationResult(BaseModel):
    symbol_a: int
    symbol_b: int
    proximity: int
    hits: int
    total_a: int
    percent: float
    insufficient: bool


class LaneTarget(BaseModel):
    symbol: int
    missing_lane: TimeSlot


class LaneAnalysis(BaseModel):
    day_name: DayName | None
    cycle_window: int
    lanes: dict[TimeSlot, list[int]]
    targets: list[LaneTarget]


class MomentumStatus(str, Enum):
    HOT_STREAK = "HOT STREAK!"
    WARMING_UP = "Warming Up"
    NEUTRAL = "Neutral"


class MarkMomentum(BaseModel):
    """A mark's gap plus how often it played in the last few draws."""

    symbol: int
    symbol_name: str
    gap: int
    never_seen: bool = False
    last_occurrence: DrawRecord | None = None
    recent_count: int
    status: MomentumStatus
