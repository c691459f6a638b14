import pytest

from play_whe_analytics.analytics.quartiles import compute_quartiles
from play_whe_analytics.analytics.transitions import (
    compute_transition_matrix,
    compute_transition_model,
    replay_positions,
)
from play_whe_analytics.exceptions import InvalidParameterError


def test_replay_positions_by_hand(make_history):
    window = make_history([1, 2, 1]).newest_first()
    # step 2: marks 3-36 unseen (gap 2), 1 at gap 1, 2 at gap 0
    assert replay_positions(window) == [(1, 1), (1, 1), (4, 8)]


def test_replay_matches_quartiles_of_each_prefix(sample_history):
    chronological = sample_history.oldest_first()
    positions = replay_positions(sample_history.newest_first())

    for i in (0, 1, 5, 40, 150, 399):
        prefix = chronological[:i][::-1]
        snapshot = compute_quartiles(prefix)
        mark = chronological[i].symbol
        assert positions[i] == (snapshot.rank_of(mark), snapshot.column_of(mark))


def test_model_for_explicit_trigger(make_history):
    window = make_history([1, 2, 1]).newest_first()
    model = compute_transition_model(window, trigger_rank=1)

    assert not model.insufficient
    assert model.sample_size == 2
    assert [(p.rank_label, p.percent) for p in model.row_probs] == [
        ("R1", 50), ("R4", 50), ("R2", 0), ("R3", 0),
    ]
    assert [(c.column_label, c.count) for c in model.top_columns] == [("C1", 1), ("C8", 1)]


def test_default_trigger_is_rank_of_latest_draw(make_history):
    model = compute_transition_model(make_history([1, 2, 1]).newest_first())
    # the latest draw came from R4, which never preceded another draw
    assert model.trigger == 4
    assert model.insufficient
    assert model.sample_size == 0
    assert all(p.percent == 0 for p in model.row_probs)
    assert model.top_columns == []


@pytest.mark.parametrize("marks", [[], [7]])
def test_short_windows_are_insufficient(make_history, marks):
    model = compute_transition_model(make_history(marks).newest_first())
    assert model.insufficient
    assert [p.rank_label for p in model.row_probs] == ["R1", "R2", "R3", "R4"]


@pytest.mark.parametrize("trigger", [0, 5, -1])
def test_invalid_trigger(make_history, trigger):
    with pytest.raises(InvalidParameterError):
        compute_transition_model(make_history([1, 2]).newest_first(), trigger)


@pytest.mark.parametrize("trigger", [1, 2, 3, 4])
def test_percentages_sum_to_about_100(sample_history, trigger):
    model = compute_transition_model(sample_history.newest_first(), trigger)
    assert not model.insufficient
    assert 99 <= sum(p.percent for p in model.row_probs) <= 101
    assert sum(p.count for p in model.row_probs) == model.sample_size
    percents = [p.percent for p in model.row_probs]
    assert percents == sorted(percents, reverse=True)
    assert len(model.top_columns) == 3


def test_matrix_agrees_with_model(sample_history):
    window = sample_history.newest_first()
    matrix = compute_transition_matrix(window)

    assert matrix.labels == ["R1", "R2", "R3", "R4"]
    assert len(matrix.ranks) == 400
    assert sum(map(sum, matrix.counts)) == 399
    for trigger in (1, 2, 3, 4):
        model = compute_transition_model(window, trigger)
        assert sum(matrix.counts[trigger - 1]) == model.sample_size
