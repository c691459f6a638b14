"""Row-transition estimator.

Replays the history oldest first. Before each draw is applied, every mark
is ranked by how overdue it is (see ``quartiles``), so each draw can be
reduced to the rank R1..R4 and column 1..9 it was picked from. The
estimator then asks: after a draw from rank G, where did the next draw
come from?
"""

from collections import Counter
from collections.abc import Sequence

from loguru import logger

from play_whe_analytics.exceptions import InvalidParameterError
from play_whe_analytics.marks import MARKS
from play_whe_analytics.schemas.draw import DrawRecord
from play_whe_analytics.schemas.statistics import (
    RANK_LABELS,
    RANK_SIZE,
    ColumnCount,
    RowProbability,
    TransitionMatrix,
    TransitionModel,
)

TOP_COLUMNS = 3


def replay_positions(window: Sequence[DrawRecord]) -> list[tuple[int, int]]:
    """Rank and column of every draw at the moment it was drawn.

    Args:
        window: Draws with index 0 as the most recent.

    Returns:
        ``(rank, column)`` per draw, oldest first.
    """
    last_seen: dict[int, int] = {}
    positions = []

    for step, record in enumerate(reversed(window)):
        # Gaps relative to the `step` draws already replayed; unseen marks
        # sit at the sentinel `step`, one past the largest finite gap.
        gaps = {
            mark: step - 1 - last_seen[mark] if mark in last_seen else step
            for mark in MARKS
        }
        shelf = sorted(MARKS, key=lambda m: (-gaps[m], m))
        index = shelf.index(record.symbol)
        positions.append((index // RANK_SIZE + 1, index % RANK_SIZE + 1))
        last_seen[record.symbol] = step

    return positions


def _validate_rank(rank: int) -> None:
    if rank not in range(1, len(RANK_LABELS) + 1):
        raise InvalidParameterError(f"Rank must be between 1 and {len(RANK_LABELS)}, got {rank}")


def _insufficient(trigger: int | None) -> TransitionModel:
    return TransitionModel(
        trigger=trigger,
        sample_size=0,
        insufficient=True,
        row_probs=[RowProbability(rank_label=label, count=0, percent=0) for label in RANK_LABELS],
        top_columns=[],
    )


def compute_transition_model(
    window: Sequence[DrawRecord], trigger_rank: int | None = None
) -> TransitionModel:
    """Empirical distribution of the rank that follows a draw from ``trigger_rank``.

    Args:
        window: Draws with index 0 as the most recent.
        trigger_rank: Conditioning rank 1..4. Defaults to the rank the most
            recent draw came from.

    Returns:
        Row probabilities sorted by percent (ties R1..R4) and the three most
        frequent follow-up columns. With fewer than two draws, or when the
        trigger never occurred before another draw, ``insufficient`` is set
        and every percent is 0.
    """
    if trigger_rank is not None:
        _validate_rank(trigger_rank)

    positions = replay_positions(window)
    trigger = trigger_rank
    if trigger is None and positions:
        trigger = positions[-1][0]

    if len(positions) < 2:
        return _insufficient(trigger)

    rank_counts = Counter()
    column_counts = Counter()
    for (rank, _), (next_rank, next_column) in zip(positions, positions[1:]):
        if rank == trigger:
            rank_counts[next_rank] += 1
            column_counts[next_column] += 1

    sample_size = sum(rank_counts.values())
    if sample_size == 0:
        return _insufficient(trigger)

    row_probs = [
        RowProbability(
            rank_label=label,
            count=rank_counts[rank],
            percent=round(rank_counts[rank] / sample_size * 100, 1),
        )
        for rank, label in enumerate(RANK_LABELS, start=1)
    ]
    row_probs.sort(key=lambda p: -p.percent)

    top_columns = [
        ColumnCount(column_label=f"C{column}", count=count)
        for column, count in sorted(column_counts.items(), key=lambda kv: (-kv[1], kv[0]))[:TOP_COLUMNS]
    ]

    logger.debug(
        "Transition model for R{}: {} samples over {} draws",
        trigger, sample_size, len(positions),
    )
    return TransitionModel(
        trigger=trigger,
        sample_size=sample_size,
        insufficient=False,
        row_probs=row_probs,
        top_columns=top_columns,
    )


def compute_transition_matrix(window: Sequence[DrawRecord]) -> TransitionMatrix:
    """Count every consecutive ``(rank, next rank)`` pair in the replay."""
    ranks = [rank for rank, _ in replay_positions(window)]
    size = len(RANK_LABELS)
    counts = [[0] * size for _ in range(size)]
    for rank, next_rank in zip(ranks, ranks[1:]):
        counts[rank - 1][next_rank - 1] += 1

    return TransitionMatrix(labels=list(RANK_LABELS), counts=counts, ranks=ranks)
