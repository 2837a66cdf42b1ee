from __future__ import annotations

import json
import logging
import random
from dataclasses import asdict, replace
from pathlib import Path
from typing import List

import typer

from ..data.roster import load_roster, resolve_cliques
from ..models.snapshot import ProgressSnapshot
from ..render.csv_out import csv_rows, write_csv
from ..render.text_out import format_rounds
from ..solvers.genetic import load_config, solve
from ..validate.checks import validate_all, validate_params
from ..validate.report import format_validation_report, write_validation_report


def _setup_logging(project_root: Path) -> None:
    logs_dir = project_root / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(logs_dir / "mixer.log", encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )


def run_pipeline(
    project_root: Path,
    *,
    groups: int,
    of_size: int,
    rounds: int,
    leaders: bool = False,
    forbidden: List[str] | None = None,
    discouraged: List[str] | None = None,
    names_file: Path | None = None,
    seed: int | None = None,
    strategy: str | None = None,
    log_level: int | None = None,
    outputs_dir: Path | None = None,
) -> tuple[str, str, str]:
    validate_params(groups, of_size, rounds)
    _setup_logging(project_root)
    if log_level is not None:
        logging.getLogger().setLevel(log_level)

    cfg = load_config(project_root)
    if strategy is not None:
        cfg = replace(cfg, cost_strategy=strategy)
    if seed is not None:
        cfg = replace(cfg, seed=seed)

    names = load_roster(names_file) if names_file else []
    forbidden_cliques = resolve_cliques(forbidden or [], names)
    discouraged_cliques = resolve_cliques(discouraged or [], names)

    snapshots: List[ProgressSnapshot] = []
    solve(
        groups,
        of_size,
        rounds,
        leaders,
        forbidden_cliques,
        discouraged_cliques,
        snapshots.append,
        config=cfg,
        rng=random.Random(cfg.seed),
    )
    final = snapshots[-1]

    outputs_dir = outputs_dir or project_root / "outputs"
    report = validate_all(final, groups, of_size, leaders)
    write_validation_report(report, outputs_dir)
    csv = csv_rows(final, names)
    write_csv(csv, outputs_dir)
    json_dir = outputs_dir / "json"
    json_dir.mkdir(parents=True, exist_ok=True)
    with (json_dir / "rounds.json").open("w", encoding="utf-8") as f:
        json.dump(final.to_json_dict(), f, indent=2)

    text = format_rounds(final.rounds, final.round_scores, names)
    return text, csv, format_validation_report(report)


app = typer.Typer(add_completion=False, help="Multi-round group mixer")


@app.command("solve")
def cli_solve(
    groups: int = typer.Option(..., help="Number of groups per round"),
    of_size: int = typer.Option(..., help="People per group"),
    rounds: int = typer.Option(1, help="Number of rounds to schedule"),
    leaders: bool = typer.Option(
        False, help="Pin the first <groups> people as leaders, one per group"
    ),
    forbidden: List[str] = typer.Option(
        [], help="People who may never share a group, comma-separated (repeatable)"
    ),
    discouraged: List[str] = typer.Option(
        [], help="People who should rather not share a group, comma-separated (repeatable)"
    ),
    names: Path | None = typer.Option(
        None, exists=True, dir_okay=False, help="Roster file, one name per line"
    ),
    seed: int | None = typer.Option(None, help="Random seed for a reproducible run"),
    strategy: str | None = typer.Option(None, help="Cost strategy: squared or leader_bias"),
    log_level: str = typer.Option("INFO", help="Log level"),
    output_dir: Path | None = typer.Option(None, help="Where to write CSV/JSON outputs"),
) -> None:
    root = Path(__file__).resolve().parents[2]
    level = getattr(logging, log_level.upper(), logging.INFO)
    try:
        text, _, validation = run_pipeline(
            root,
            groups=groups,
            of_size=of_size,
            rounds=rounds,
            leaders=leaders,
            forbidden=forbidden,
            discouraged=discouraged,
            names_file=names,
            seed=seed,
            strategy=strategy,
            log_level=level,
            outputs_dir=output_dir,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    print(text)
    print(validation)


@app.command("config")
def cli_config() -> None:
    root = Path(__file__).resolve().parents[2]
    print(json.dumps(asdict(load_config(root)), indent=2))
