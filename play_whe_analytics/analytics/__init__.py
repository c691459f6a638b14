"""Draw analytics core: pure functions over newest-first draw windows."""

from play_whe_analytics.analytics.correlation import compute_correlation
from play_whe_analytics.analytics.frequency import compute_frequency
from play_whe_analytics.analytics.lanes import compute_lanes, find_under
from play_whe_analytics.analytics.momentum import compute_momentum
from play_whe_analytics.analytics.quartiles import compute_quartiles
from play_whe_analytics.analytics.recency import compute_recency
from play_whe_analytics.analytics.replay import active_window, apply_offset
from play_whe_analytics.analytics.store import DrawHistory
from play_whe_analytics.analytics.transitions import (
    compute_transition_matrix,
    compute_transition_model,
)

__all__ = [
    "DrawHistory",
    "active_window",
    "apply_offset",
    "compute_correlation",
    "compute_frequency",
    "compute_lanes",
    "compute_momentum",
    "compute_quartiles",
    "compute_recency",
    "compute_transition_matrix",
    "compute_transition_model",
    "find_under",
]
