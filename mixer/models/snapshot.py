from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from ..costs import is_forbidden
from .candidate import Partition


@dataclass(frozen=True)
class ProgressSnapshot:
    rounds: List[Partition]
    round_scores: List[int]
    weights: List[List[int]]
    done: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rounds": self.rounds,
            "roundScores": self.round_scores,
            "weights": self.weights,
            "done": self.done,
        }

    def to_json_dict(self) -> Dict[str, Any]:
        # JSON has no infinity; forbidden values travel as null
        def enc(v: int) -> int | None:
            return None if is_forbidden(v) else v

        data = self.to_dict()
        data["roundScores"] = [enc(v) for v in self.round_scores]
        data["weights"] = [[enc(v) for v in row] for row in self.weights]
        return data
