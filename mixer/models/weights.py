from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..costs import FORBIDDEN, sat_add


@dataclass
class WeightMatrix:
    size: int
    rows: List[List[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.rows:
            self.rows = [[0] * self.size for _ in range(self.size)]

    def get(self, a: int, b: int) -> int:
        return self.rows[a][b]

    def contains(self, a: int, b: int) -> bool:
        return 0 <= a < self.size and 0 <= b < self.size

    def forbid(self, a: int, b: int) -> None:
        self.rows[a][b] = self.rows[b][a] = FORBIDDEN

    def bump(self, a: int, b: int, by: int = 1) -> None:
        value = sat_add(self.rows[a][b], by)
        self.rows[a][b] = self.rows[b][a] = value

    def copy(self) -> "WeightMatrix":
        return WeightMatrix(self.size, [row[:] for row in self.rows])

    def to_lists(self) -> List[List[int]]:
        return [row[:] for row in self.rows]
