from __future__ import annotations

import random
from typing import Iterable, List

from ..costs import CostStrategy, squared_cost
from ..models.candidate import Partition, ScoredCandidate
from ..models.weights import WeightMatrix
from .generate import generate_partition
from .score import score_partition


def swap_seats(partition: Partition, i: int, j: int, of_size: int) -> Partition:
    """Return a copy of ``partition`` with seats ``i`` and ``j`` exchanged.

    Seats are numbered row-major: seat ``s`` is slot ``s % of_size`` of group
    ``s // of_size``.
    """
    copy = [group[:] for group in partition]
    gi, si = divmod(i, of_size)
    gj, sj = divmod(j, of_size)
    copy[gi][si] = partition[gj][sj]
    copy[gj][sj] = partition[gi][si]
    return copy


def mutate_candidates(
    candidates: Iterable[ScoredCandidate],
    weights: WeightMatrix,
    *,
    groups: int,
    of_size: int,
    leaders: bool,
    rng: random.Random,
    strategy: CostStrategy = squared_cost,
    random_mutations: int = 2,
) -> List[ScoredCandidate]:
    total_size = groups * of_size
    first_seat = 1 if leaders else 0
    mutations: List[ScoredCandidate] = []
    for candidate in candidates:
        ranked = [group for group, _ in candidate.ranked()]

        # Always carry the candidate itself forward
        mutations.append(candidate)

        # Swap every member of the most expensive group into every other group
        for i in range(first_seat, of_size):
            for j in range(of_size, total_size):
                if leaders and j % of_size == 0:
                    continue
                mutations.append(score_partition(swap_seats(ranked, i, j, of_size), weights, strategy))

        # Fresh random candidates to break out of local minima
        for _ in range(random_mutations):
            fresh = generate_partition(groups, of_size, leaders, rng)
            mutations.append(score_partition(fresh, weights, strategy))
    return mutations
