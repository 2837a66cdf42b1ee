from .generate import generate_partition
from .mutate import mutate_candidates, swap_seats
from .optimize import optimize_round
from .score import score_group, score_partition
from .seed import seed_weights, update_weights

__all__ = [
    "generate_partition",
    "mutate_candidates",
    "optimize_round",
    "score_group",
    "score_partition",
    "seed_weights",
    "swap_seats",
    "update_weights",
]
