from __future__ import annotations

import logging
import random
from typing import List

from ..costs import CostStrategy, format_cost, squared_cost
from ..models.candidate import RoundResult, ScoredCandidate
from ..models.weights import WeightMatrix
from .generate import generate_partition
from .mutate import mutate_candidates
from .score import score_partition

GENERATIONS = 30
RANDOM_MUTATIONS = 2
MAX_DESCENDANTS_TO_EXPLORE = 100
INITIAL_CANDIDATES = 5


def keep_best(pool: List[ScoredCandidate], max_plateau: int, rng: random.Random) -> List[ScoredCandidate]:
    """Every candidate tied for the lowest total, sampled down to ``max_plateau``."""
    best = min(c.total for c in pool)
    top = [c for c in pool if c.total == best]
    if len(top) > max_plateau:
        top = rng.sample(top, max_plateau)
    return top


def optimize_round(
    weights: WeightMatrix,
    *,
    groups: int,
    of_size: int,
    leaders: bool,
    rng: random.Random,
    strategy: CostStrategy = squared_cost,
    generations: int = GENERATIONS,
    random_mutations: int = RANDOM_MUTATIONS,
    max_plateau: int = MAX_DESCENDANTS_TO_EXPLORE,
    initial_candidates: int = INITIAL_CANDIDATES,
) -> RoundResult:
    """Search for a low-cost partition against a fixed weight matrix.

    The elite set starts as the cheapest of ``initial_candidates`` random
    partitions. Each
    generation mutates the whole elite set and keeps every candidate tied for
    the lowest total, sampled down to ``max_plateau``. The search stops after
    ``generations`` generations or as soon as the best total is exactly 0.
    """
    logger = logging.getLogger(__name__)
    seeds = [
        score_partition(generate_partition(groups, of_size, leaders, rng), weights, strategy)
        for _ in range(initial_candidates)
    ]
    top = keep_best(seeds, max_plateau, rng)
    generation = 0
    while generation < generations and top[0].total != 0:
        pool = mutate_candidates(
            top,
            weights,
            groups=groups,
            of_size=of_size,
            leaders=leaders,
            rng=rng,
            strategy=strategy,
            random_mutations=random_mutations,
        )
        top = keep_best(pool, max_plateau, rng)
        generation += 1
        logger.debug(
            f"Generation {generation}: pool={len(pool)} best={format_cost(top[0].total)} plateau={len(top)}"
        )

    winner = top[0]
    if leaders:
        # Presentation order only; cost is unaffected
        order = sorted(range(len(winner.groups)), key=lambda k: winner.groups[k][0])
        winner = ScoredCandidate(
            groups=[winner.groups[k] for k in order],
            group_scores=[winner.group_scores[k] for k in order],
            total=winner.total,
        )
    return RoundResult(winner=winner, generations=generation)
