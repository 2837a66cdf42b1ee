# Re-export common types
from .candidate import Group, Partition, RoundResult, ScoredCandidate, iter_pairs
from .snapshot import ProgressSnapshot
from .weights import WeightMatrix

__all__ = [
    "Group",
    "Partition",
    "ScoredCandidate",
    "RoundResult",
    "ProgressSnapshot",
    "WeightMatrix",
    "iter_pairs",
]
