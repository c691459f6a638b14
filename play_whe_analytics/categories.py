"""Categorizations of a draw: by mark, by line or by suit."""

from enum import Enum

from play_whe_analytics.marks import LINES, MARKS, SUITS


class Category(str, Enum):
    """Closed set of views over a draw, each with its full value domain."""

    SYMBOL = "mark"
    LINE = "line"
    SUIT = "suit"

    @property
    def domain(self) -> tuple:
        if self is Category.SYMBOL:
            return MARKS
        if self is Category.LINE:
            return LINES
        return SUITS

    def value_of(self, record) -> int | str | None:
        """Category value of a record, or None when the record lacks it."""
        if self is Category.SYMBOL:
            return record.symbol
        if self is Category.LINE:
            return record.line_group
        return record.suit_group
