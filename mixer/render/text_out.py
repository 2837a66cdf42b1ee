from __future__ import annotations

from typing import List, Sequence

from ..costs import format_cost
from ..data.roster import label
from ..models.candidate import Partition


def format_rounds(rounds: List[Partition], round_scores: List[int], names: Sequence[str] = ()) -> str:
    lines: List[str] = []
    for r, partition in enumerate(rounds):
        lines.append(f"Round {r + 1}")
        lines.append(f"Conflict score: {format_cost(round_scores[r])}")
        for g, group in enumerate(partition):
            lines.append(f"  Group {g + 1}")
            for person in sorted(group):
                lines.append(f"    - {label(person, names)}")
        lines.append("")
    return "\n".join(lines)
