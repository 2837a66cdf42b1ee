from __future__ import annotations

import logging
from typing import Iterable, Sequence

from ..models.candidate import Partition, iter_pairs
from ..models.weights import WeightMatrix


def seed_weights(
    total_size: int,
    leader_count: int = 0,
    forbidden: Iterable[Sequence[int]] = (),
    discouraged: Iterable[Sequence[int]] = (),
) -> WeightMatrix:
    logger = logging.getLogger(__name__)
    weights = WeightMatrix(total_size)

    # Leaders anchor separate groups and may never meet
    for i in range(leader_count - 1):
        for j in range(i + 1, leader_count):
            weights.forbid(i, j)

    forbidden_pairs = 0
    for clique in forbidden:
        for a, b in iter_pairs(list(clique)):
            if not weights.contains(a, b):
                continue
            weights.forbid(a, b)
            forbidden_pairs += 1

    discouraged_pairs = 0
    for clique in discouraged:
        for a, b in iter_pairs(list(clique)):
            if not weights.contains(a, b):
                continue
            weights.bump(a, b)
            discouraged_pairs += 1

    logger.info(
        f"Seeded {total_size}x{total_size} weights: {leader_count} leaders, "
        f"{forbidden_pairs} forbidden pairs, {discouraged_pairs} discouraged pairs"
    )
    return weights


def update_weights(weights: WeightMatrix, partition: Partition) -> None:
    for group in partition:
        for a, b in iter_pairs(group):
            weights.bump(a, b)
