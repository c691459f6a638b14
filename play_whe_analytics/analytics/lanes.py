"""Lane analysis — each time slot's results read as its own sequence.

A mark that has played in three lanes within the cycle window but not in
the fourth is reported as a target for the missing lane.
"""

from collections.abc import Sequence
from datetime import date, timedelta

from play_whe_analytics.exceptions import InvalidParameterError
from play_whe_analytics.schemas.draw import DayName, DrawRecord, TimeSlot
from play_whe_analytics.schemas.statistics import LaneAnalysis, LaneTarget


def compute_lanes(
    window: Sequence[DrawRecord],
    cycle_window: int = 50,
    day_name: DayName | None = None,
) -> LaneAnalysis:
    """Split draws by time slot and find marks missing from one lane.

    Args:
        window: Draws with index 0 as the most recent.
        cycle_window: Keep only the last N marks of each lane.
        day_name: Restrict to one day of the week.
    """
    if cycle_window <= 0:
        raise InvalidParameterError(f"cycle_window must be positive, got {cycle_window}")

    lanes: dict[TimeSlot, list[int]] = {slot: [] for slot in TimeSlot}
    for record in reversed(window):
        if day_name is not None and record.day_name != day_name:
            continue
        lanes[record.time_slot].append(record.symbol)

    lanes = {slot: marks[-cycle_window:] for slot, marks in lanes.items()}
    played = {slot: set(marks) for slot, marks in lanes.items()}

    targets = []
    for slot in TimeSlot:
        others = [played[other] for other in TimeSlot if other is not slot]
        for mark in sorted(set.intersection(*others) - played[slot]):
            targets.append(LaneTarget(symbol=mark, missing_lane=slot))

    return LaneAnalysis(
        day_name=day_name,
        cycle_window=cycle_window,
        lanes=lanes,
        targets=targets,
    )


def find_under(
    window: Sequence[DrawRecord], draw_date: date, time_slot: TimeSlot
) -> DrawRecord | None:
    """The draw a result "plays under": same slot, one week earlier."""
    target = draw_date - timedelta(days=7)
    for record in window:
        if record.draw_date == target and record.time_slot == time_slot:
            return record
    return None
