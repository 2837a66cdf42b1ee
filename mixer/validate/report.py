from __future__ import annotations

import json
from pathlib import Path
from typing import Dict


def write_validation_report(report: Dict[str, object], outputs_dir: Path) -> Path:
    """Write the per-round findings next to the CSV and JSON exports."""
    outputs_dir.mkdir(parents=True, exist_ok=True)
    path = outputs_dir / "validation.json"
    path.write_text(json.dumps(report, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    return path


def format_validation_report(report: Dict[str, object]) -> str:
    lines: list[str] = []
    violations = report.get("violations_by_round", {})
    lines.append("violations_by_round:")
    if isinstance(violations, dict):
        for k, v in violations.items():
            lines.append(f"  - {k}: {len(v)}")
    infeasible = report.get("infeasible_rounds", [])
    lines.append(f"infeasible_rounds: {infeasible}")
    repeats = report.get("repeat_pairs", {})
    lines.append(f"repeat_pairs: {len(repeats)} entries")
    if isinstance(repeats, dict):
        for k, v in repeats.items():
            lines.append(f"  - {k}: {v}")
    return "\n".join(lines)
