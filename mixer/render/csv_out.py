from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from ..data.roster import label
from ..models.snapshot import ProgressSnapshot


def csv_rows(snapshot: ProgressSnapshot, names: Sequence[str] = ()) -> str:
    lines: List[str] = ["Round,Group,Participant,Name"]
    for r, partition in enumerate(snapshot.rounds, start=1):
        for g, group in enumerate(partition, start=1):
            for person in sorted(group):
                name = label(person, names).replace(",", " ")
                lines.append(f"{r},{g},{person},{name}")
    return "\n".join(lines) + "\n"


def write_csv(text: str, outputs_dir: Path) -> Path:
    outputs_dir.mkdir(parents=True, exist_ok=True)
    path = outputs_dir / "rounds.csv"
    with path.open("w", encoding="utf-8") as f:
        f.write(text)
    return path
