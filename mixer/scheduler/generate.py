from __future__ import annotations

import random

from ..models.candidate import Partition


def generate_partition(
    groups: int,
    of_size: int,
    leaders: bool,
    rng: random.Random,
) -> Partition:
    total_size = groups * of_size
    if leaders:
        # Leader i is pinned to the first seat of group i
        chunk = of_size - 1
        people = list(range(groups, total_size))
        rng.shuffle(people)
        return [[i] + people[i * chunk : (i + 1) * chunk] for i in range(groups)]
    people = list(range(total_size))
    rng.shuffle(people)
    return [people[i * of_size : (i + 1) * of_size] for i in range(groups)]
