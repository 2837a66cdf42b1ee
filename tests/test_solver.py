from __future__ import annotations

import random
from typing import List

from mixer import FORBIDDEN, ProgressSnapshot, SolverConfig, solve
from mixer.validate import check_leaders, check_partition


def collect(*args, **kwargs) -> List[ProgressSnapshot]:
    snapshots: List[ProgressSnapshot] = []
    solve(*args, on_progress=snapshots.append, **kwargs)
    return snapshots


def test_two_pairs_single_round_is_perfect() -> None:
    snapshots = collect(2, 2, 1, False, rng=random.Random(0))
    assert len(snapshots) == 1
    assert snapshots[0].round_scores == [0]
    assert snapshots[0].done is True


def test_singleton_groups_are_always_free() -> None:
    snapshots = collect(3, 1, 5, False, rng=random.Random(0))
    final = snapshots[-1]
    assert final.round_scores == [0] * 5
    for partition in final.rounds:
        assert sorted(partition) == [[0], [1], [2]]


def test_progress_fires_once_per_round_in_order() -> None:
    snapshots = collect(3, 2, 4, False, rng=random.Random(1))
    assert [len(s.rounds) for s in snapshots] == [1, 2, 3, 4]
    assert [s.done for s in snapshots] == [False, False, False, True]
    # Earlier snapshots are not rewritten by later rounds
    assert snapshots[0].rounds == snapshots[-1].rounds[:1]


def test_weights_never_decrease() -> None:
    snapshots = collect(3, 3, 5, False, discouraged=[[0, 1]], rng=random.Random(2))
    for before, after in zip(snapshots, snapshots[1:]):
        for row_b, row_a in zip(before.weights, after.weights):
            assert all(a >= b for a, b in zip(row_a, row_b))


def test_leaders_never_share_a_group() -> None:
    snapshots = collect(3, 3, 6, True, rng=random.Random(3))
    for partition in snapshots[-1].rounds:
        assert check_partition(partition, 3, 3) == []
        assert check_leaders(partition, 3) == []
        assert [g[0] for g in partition] == [0, 1, 2]


def test_forbidden_pair_kept_apart() -> None:
    snapshots = collect(2, 2, 2, False, forbidden=[[0, 1]], rng=random.Random(4))
    final = snapshots[-1]
    assert final.round_scores == [0, 0]
    for partition in final.rounds:
        for group in partition:
            assert not {0, 1} <= set(group)


def test_forbidden_pair_stays_finite_over_many_rounds() -> None:
    snapshots = collect(2, 2, 5, False, forbidden=[[0, 1]], rng=random.Random(5))
    assert all(score < FORBIDDEN for score in snapshots[-1].round_scores)


def test_infeasible_round_reports_forbidden_cost() -> None:
    config = SolverConfig(generations=3)
    snapshots = collect(1, 2, 2, False, forbidden=[[0, 1]], config=config, rng=random.Random(0))
    assert snapshots[-1].round_scores == [FORBIDDEN, FORBIDDEN]


def test_snapshot_wire_format() -> None:
    snapshots = collect(2, 2, 1, True, rng=random.Random(6))
    data = snapshots[-1].to_dict()
    assert list(data) == ["rounds", "roundScores", "weights", "done"]
    assert data["weights"][0][1] == FORBIDDEN
    encoded = snapshots[-1].to_json_dict()
    assert encoded["weights"][0][1] is None
    assert encoded["roundScores"] == [0]


def test_seeded_runs_replay() -> None:
    config = SolverConfig(seed=99)
    a = collect(4, 3, 3, False, discouraged=[[0, 1, 2]], config=config)
    b = collect(4, 3, 3, False, discouraged=[[0, 1, 2]], config=config)
    assert a[-1].rounds == b[-1].rounds


def test_no_callback_is_allowed() -> None:
    assert solve(2, 2, 2, False, rng=random.Random(0)) is None


def test_forbidden_pair_apart_across_seeds() -> None:
    for seed in range(100):
        snapshots = collect(2, 2, 1, False, forbidden=[[0, 1]], rng=random.Random(seed))
        partition = snapshots[-1].rounds[0]
        assert all(not {0, 1} <= set(g) for g in partition), f"seed {seed}: {partition}"
        assert snapshots[-1].round_scores == [0]
