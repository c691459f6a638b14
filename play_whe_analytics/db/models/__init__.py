"""ORM models package."""

from play_whe_analytics.db.models.draw import Draw

__all__ = [
    "Draw",
]
