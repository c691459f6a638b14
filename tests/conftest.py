import os
import random
from datetime import date, timedelta

import pytest

# No file sink under test
os.environ["LOG_FILE"] = ""

from play_whe_analytics.analytics.store import DrawHistory  # noqa: E402
from play_whe_analytics.schemas.draw import TimeSlot  # noqa: E402

SLOTS = list(TimeSlot)
START = date(2024, 1, 1)  # a Monday


def chronological_rows(marks, start=START):
    """Rows for marks played four a day, Morning through Evening."""
    return [
        {
            "id": i + 1,
            "draw_date": (start + timedelta(days=i // 4)).isoformat(),
            "time_slot": SLOTS[i % 4].value,
            "symbol": mark,
        }
        for i, mark in enumerate(marks)
    ]


def history_of(marks):
    return DrawHistory.from_rows(chronological_rows(marks))


@pytest.fixture
def make_history():
    """Factory: chronological list of marks -> DrawHistory."""
    return history_of


@pytest.fixture
def make_window():
    """Factory: marks listed newest first -> newest-first window."""
    def _make(marks_newest_first):
        return history_of(list(reversed(marks_newest_first))).newest_first()
    return _make


@pytest.fixture
def sample_history():
    rng = random.Random(7)
    return history_of([rng.randint(1, 36) for _ in range(400)])
