from __future__ import annotations

from mixer.costs import FORBIDDEN, get_strategy
from mixer.scheduler import score_group, score_partition, seed_weights, update_weights


def test_cost_is_sum_of_squared_weights() -> None:
    w = seed_weights(6, discouraged=[[0, 1], [0, 1], [0, 2]])
    # 0-1 met twice, 0-2 once, 1-2 never
    assert score_group([0, 1, 2], w) == 4 + 1 + 0
    scored = score_partition([[0, 1, 2], [3, 4, 5]], w)
    assert scored.group_scores == [5, 0]
    assert scored.total == 5


def test_fresh_weights_give_perfect_round() -> None:
    w = seed_weights(4)
    assert score_partition([[0, 1], [2, 3]], w).total == 0


def test_forbidden_pair_absorbs_group_and_total() -> None:
    w = seed_weights(6, forbidden=[[0, 1]])
    update_weights(w, [[3, 4, 5], [0, 1, 2]])
    scored = score_partition([[3, 4, 5], [0, 1, 2]], w)
    assert scored.group_scores == [3, FORBIDDEN]
    assert scored.total == FORBIDDEN


def test_forbidden_total_regardless_of_other_groups() -> None:
    w = seed_weights(9, forbidden=[[4, 5]], discouraged=[[0, 1], [0, 2]])
    scored = score_partition([[0, 1, 2], [3, 4, 5], [6, 7, 8]], w)
    assert scored.total == FORBIDDEN
    assert scored.total > score_partition([[0, 1, 2], [3, 4, 6], [5, 7, 8]], w).total


def test_leader_bias_rewards_new_leader_pairs() -> None:
    w = seed_weights(6, leader_count=2)
    strategy = get_strategy("leader_bias", leader_count=2)
    scored = score_partition([[0, 2, 3], [1, 4, 5]], w, strategy)
    # Two never-met leader pairs per group, member pairs cost 0
    assert scored.group_scores == [-2, -2]
    assert scored.total == -4
