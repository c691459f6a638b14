"""Draw record store — an ordered, read-only draw history."""

from collections.abc import Iterable, Iterator
from datetime import date, datetime

from loguru import logger

from play_whe_analytics.marks import LINE_OF_MARK, LINES, MARK_NAMES, SUIT_OF_MARK, SUITS
from play_whe_analytics.schemas.draw import DrawRecord, TimeSlot


def _parse_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value).strip())


def _normalize_line(value, mark: int) -> str:
    if value is None or value == "":
        return LINE_OF_MARK[mark]
    line = str(value).strip()
    if not line.endswith(" Line"):
        line = f"{line} Line"
    if line not in LINES:
        raise ValueError(f"Unknown line: {value!r}")
    return line


def _normalize_suit(value, mark: int) -> str:
    if value is None or value == "":
        return SUIT_OF_MARK[mark]
    suit = str(value).lower().replace("suit", "").strip().rstrip("s")
    if suit not in SUITS:
        raise ValueError(f"Unknown suit: {value!r}")
    return suit


def _parse_row(row: dict, sequence_id: int) -> DrawRecord:
    """Parse a single draw row from the data source.

    Expected keys: ``draw_date`` (ISO ``YYYY-MM-DD``), ``time_slot``,
    ``symbol``; optionally ``symbol_name``, ``line_group``, ``suit_group``
    which are otherwise looked up from the static tables.
    """
    symbol = int(row["symbol"])
    if symbol not in MARK_NAMES:
        raise ValueError(f"Mark out of range: {symbol}")

    return DrawRecord(
        sequence_id=sequence_id,
        draw_date=_parse_date(row["draw_date"]),
        time_slot=TimeSlot(row["time_slot"]),
        symbol=symbol,
        symbol_name=row.get("symbol_name") or MARK_NAMES[symbol],
        line_group=_normalize_line(row.get("line_group"), symbol),
        suit_group=_normalize_suit(row.get("suit_group"), symbol),
    )


class DrawHistory:
    """Immutable sequence of draws ordered by ``sequence_id``.

    Iteration is chronological (oldest first). Analytics functions take the
    newest-first view, where index 0 is the latest draw.
    """

    def __init__(self, records: Iterable[DrawRecord] = ()):
        self._records: tuple[DrawRecord, ...] = tuple(
            sorted(records, key=lambda r: r.sequence_id)
        )

    @classmethod
    def from_rows(cls, rows: Iterable[dict], ascending: bool = True) -> "DrawHistory":
        """Build a history from raw rows, skipping malformed ones.

        Args:
            rows: Row dicts, ordered by sequence either way.
            ascending: True when ``rows`` are oldest first.

        Rows without an ``id``/``sequence_id`` are numbered by their
        chronological position.
        """
        rows = list(rows)
        if not ascending:
            rows.reverse()

        records = []
        skipped = 0
        for position, row in enumerate(rows):
            sequence_id = row.get("sequence_id", row.get("id"))
            if sequence_id is None:
                sequence_id = position
            try:
                records.append(_parse_row(row, int(sequence_id)))
            except (KeyError, TypeError, ValueError) as e:
                skipped += 1
                logger.warning("Skipping malformed draw row: {} - {}", row, e)

        if skipped:
            logger.info("Loaded {} draws, skipped {} malformed rows", len(records), skipped)
        return cls(records)

    def oldest_first(self) -> tuple[DrawRecord, ...]:
        return self._records

    def newest_first(self) -> tuple[DrawRecord, ...]:
        return self._records[::-1]

    @property
    def latest(self) -> DrawRecord | None:
        return self._records[-1] if self._records else None

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[DrawRecord]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"<DrawHistory draws={len(self._records)}>"
