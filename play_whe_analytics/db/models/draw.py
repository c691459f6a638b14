"""Play Whe draw ORM model."""

from datetime import date

from sqlalchemy import Date, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from play_whe_analytics.db.base import Base


class Draw(Base):
    """Play Whe result — one mark out of 36, four draws a day."""

    __tablename__ = "draws"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Official draw number; the canonical sequence of results
    draw_no: Mapped[int] = mapped_column(Integer, unique=True, nullable=False)
    draw_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    time_slot: Mapped[str] = mapped_column(String(16), nullable=False)

    symbol: Mapped[int] = mapped_column(Integer, nullable=False)
    symbol_name: Mapped[str | None] = mapped_column(String(32), nullable=True)
    line_group: Mapped[str | None] = mapped_column(String(16), nullable=True)
    suit_group: Mapped[str | None] = mapped_column(String(4), nullable=True)

    __table_args__ = (
        Index("ix_draws_date_slot", "draw_date", "time_slot"),
    )

    def to_row(self) -> dict:
        return {
            "sequence_id": self.draw_no,
            "draw_date": self.draw_date,
            "time_slot": self.time_slot,
            "symbol": self.symbol,
            "symbol_name": self.symbol_name,
            "line_group": self.line_group,
            "suit_group": self.suit_group,
        }

    def __repr__(self) -> str:
        return f"<Draw no={self.draw_no} date={self.draw_date} {self.time_slot} mark={self.symbol}>"
