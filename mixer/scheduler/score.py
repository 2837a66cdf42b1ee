from __future__ import annotations

from ..costs import FORBIDDEN, CostStrategy, is_forbidden, sat_add, sat_sum, squared_cost
from ..models.candidate import Group, Partition, ScoredCandidate, iter_pairs
from ..models.weights import WeightMatrix


def score_group(group: Group, weights: WeightMatrix, strategy: CostStrategy = squared_cost) -> int:
    cost = 0
    for a, b in iter_pairs(group):
        w = weights.get(a, b)
        if is_forbidden(w):
            return FORBIDDEN
        cost = sat_add(cost, strategy(a, b, w))
    return cost


def score_partition(
    partition: Partition,
    weights: WeightMatrix,
    strategy: CostStrategy = squared_cost,
) -> ScoredCandidate:
    group_scores = [score_group(g, weights, strategy) for g in partition]
    return ScoredCandidate(groups=partition, group_scores=group_scores, total=sat_sum(group_scores))
