from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence


def load_roster(path: Path) -> List[str]:
    with path.open("r", encoding="utf-8") as f:
        return [line.strip() for line in f]


def label(index: int, names: Sequence[str]) -> str:
    if index < len(names) and names[index]:
        return names[index]
    return f"Player {index + 1}"


def parse_clique(text: str, names: Sequence[str]) -> List[int] | None:
    # Tokens may be participant indices or roster names
    indices: List[int] = []
    for token in (t.strip() for t in text.split(",")):
        if not token:
            continue
        if token.isascii() and token.isdigit():
            indices.append(int(token))
        elif token in names:
            indices.append(list(names).index(token))
        else:
            return None
    return indices if len(indices) >= 2 else None


def resolve_cliques(lines: Iterable[str], names: Sequence[str]) -> List[List[int]]:
    """Turn ``"Ann, Bob"`` style lines into index cliques.

    Lines naming someone not on the roster, or fewer than two people, are dropped.
    """
    cliques: List[List[int]] = []
    for line in lines:
        clique = parse_clique(line, names)
        if clique is not None:
            cliques.append(clique)
    return cliques
