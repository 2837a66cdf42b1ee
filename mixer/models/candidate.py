from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

Group = List[int]
Partition = List[Group]


@dataclass
class ScoredCandidate:
    groups: Partition
    group_scores: List[int]
    total: int

    def ranked(self) -> List[Tuple[Group, int]]:
        # Most expensive group first; ties keep their original order
        pairs = list(zip(self.groups, self.group_scores))
        pairs.sort(key=lambda gs: gs[1], reverse=True)
        return pairs


@dataclass
class RoundResult:
    winner: ScoredCandidate
    generations: int

    @property
    def groups(self) -> Partition:
        return self.winner.groups

    @property
    def total(self) -> int:
        return self.winner.total


def iter_pairs(group: Group) -> Iterator[Tuple[int, int]]:
    for i in range(len(group) - 1):
        for j in range(i + 1, len(group)):
            yield group[i], group[j]
