from __future__ import annotations

from collections import Counter
from typing import Dict, List

from ..costs import is_forbidden
from ..models.candidate import Partition, iter_pairs
from ..models.snapshot import ProgressSnapshot


def validate_params(groups: object, of_size: object, for_rounds: object) -> None:
    # The solver itself trusts its inputs; callers guard them here
    for name, value in (("groups", groups), ("of_size", of_size), ("for_rounds", for_rounds)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{name} must be an integer, got {value!r}")
        if value < 1:
            raise ValueError(f"{name} must be positive, got {value}")


def check_partition(partition: Partition, groups: int, of_size: int) -> List[str]:
    problems: List[str] = []
    if len(partition) != groups:
        problems.append(f"expected {groups} groups, found {len(partition)}")
    for g, group in enumerate(partition):
        if len(group) != of_size:
            problems.append(f"group {g + 1} has {len(group)} members, expected {of_size}")
    seen = Counter(p for group in partition for p in group)
    total_size = groups * of_size
    missing = [p for p in range(total_size) if seen[p] == 0]
    if missing:
        problems.append(f"missing participants {missing}")
    duplicated = sorted(p for p, c in seen.items() if c > 1)
    if duplicated:
        problems.append(f"participants placed twice {duplicated}")
    strays = sorted(p for p in seen if not 0 <= p < total_size)
    if strays:
        problems.append(f"unknown participants {strays}")
    return problems


def check_leaders(partition: Partition, groups: int) -> List[str]:
    problems: List[str] = []
    for g, group in enumerate(partition):
        leaders = sorted(p for p in group if p < groups)
        if len(leaders) > 1:
            problems.append(f"group {g + 1} holds leaders {leaders}")
    return problems


def repeat_pairs(rounds: List[Partition]) -> Dict[str, int]:
    met: Counter = Counter()
    for partition in rounds:
        for group in partition:
            for a, b in iter_pairs(group):
                met[(min(a, b), max(a, b))] += 1
    return {f"{a}-{b}": c for (a, b), c in sorted(met.items()) if c > 1}


def validate_all(snapshot: ProgressSnapshot, groups: int, of_size: int, leaders: bool) -> Dict[str, object]:
    report: Dict[str, object] = {}
    violations: Dict[str, List[str]] = {}
    for r, partition in enumerate(snapshot.rounds, start=1):
        found = check_partition(partition, groups, of_size)
        if leaders:
            found += check_leaders(partition, groups)
        if found:
            violations[f"round_{r}"] = found
    report["violations_by_round"] = violations
    report["infeasible_rounds"] = [
        r for r, cost in enumerate(snapshot.round_scores, start=1) if is_forbidden(cost)
    ]
    report["repeat_pairs"] = repeat_pairs(snapshot.rounds)
    report["round_scores"] = [None if is_forbidden(c) else c for c in snapshot.round_scores]
    return report
