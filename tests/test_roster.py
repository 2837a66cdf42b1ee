from __future__ import annotations

from pathlib import Path

from mixer.data import label, load_roster, resolve_cliques


def test_load_roster_trims(tmp_path: Path) -> None:
    p = tmp_path / "names.txt"
    p.write_text(" Ann \nBob\n\nCy\n", encoding="utf-8")
    assert load_roster(p) == ["Ann", "Bob", "", "Cy"]


def test_label_falls_back_to_player_number() -> None:
    names = ["Ann", ""]
    assert label(0, names) == "Ann"
    assert label(1, names) == "Player 2"
    assert label(5, names) == "Player 6"


def test_resolve_cliques_by_name_and_index() -> None:
    names = ["Ann", "Bob", "Cy", "Dee"]
    lines = ["Ann, Bob", "2,3,0", "Ann, Zed", "Bob", ""]
    assert resolve_cliques(lines, names) == [[0, 1], [2, 3, 0]]


def test_non_ascii_digits_are_not_indices() -> None:
    names = ["Ann", "Bob"]
    assert resolve_cliques(["Ann, ²", "0, 1"], names) == [[0, 1]]
