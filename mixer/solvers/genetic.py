from __future__ import annotations

import logging
import random
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Sequence

from ..costs import STRATEGIES, format_cost, get_strategy
from ..models.candidate import Partition
from ..models.snapshot import ProgressSnapshot
from ..scheduler import optimize_round, seed_weights, update_weights
from ..scheduler.optimize import (
    GENERATIONS,
    INITIAL_CANDIDATES,
    MAX_DESCENDANTS_TO_EXPLORE,
    RANDOM_MUTATIONS,
)

ProgressCallback = Callable[[ProgressSnapshot], None]


@dataclass
class SolverConfig:
    generations: int = GENERATIONS
    random_mutations: int = RANDOM_MUTATIONS
    max_plateau: int = MAX_DESCENDANTS_TO_EXPLORE
    initial_candidates: int = INITIAL_CANDIDATES
    cost_strategy: str = "squared"
    seed: int | None = None


def _project_root() -> Path:
    # mixer/solvers/genetic.py -> project root is parents[2]
    return Path(__file__).resolve().parents[2]


def load_config(project_root: Path | str | None = None) -> SolverConfig:
    """Load solver settings from configs/solver.toml if present, else defaults.

    Keys may sit at top level or under [solver]:
      - generations, random_mutations, max_plateau, initial_candidates
      - cost_strategy ("squared" or "leader_bias"), seed
    A malformed or too-small integer falls back to its default; an unknown strategy is an error.
    """
    base = SolverConfig()
    root = _project_root() if project_root is None else Path(project_root)
    cfg = root / "configs" / "solver.toml"
    if not cfg.exists():
        return base
    try:
        data: Dict[str, Any] = tomllib.loads(cfg.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError:
        logging.getLogger(__name__).warning(f"Ignoring unreadable config {cfg}")
        return base
    s = data.get("solver") if isinstance(data.get("solver"), dict) else data

    def get_int(name: str, default: int, minimum: int = 1) -> int:
        try:
            v = int(s.get(name, default))
        except (TypeError, ValueError):
            return default
        if v < minimum:
            logging.getLogger(__name__).warning(
                f"{cfg}: {name} = {v} is below {minimum}, using {default}"
            )
            return default
        return v

    strategy = str(s.get("cost_strategy", base.cost_strategy))
    if strategy not in STRATEGIES:
        raise ValueError(f"{cfg}: unknown cost_strategy {strategy!r}")
    seed = s.get("seed")
    return SolverConfig(
        generations=get_int("generations", base.generations),
        random_mutations=get_int("random_mutations", base.random_mutations, minimum=0),
        max_plateau=get_int("max_plateau", base.max_plateau),
        initial_candidates=get_int("initial_candidates", base.initial_candidates),
        cost_strategy=strategy,
        seed=int(seed) if isinstance(seed, int) else None,
    )


def solve(
    groups: int,
    of_size: int,
    for_rounds: int,
    leaders: bool,
    forbidden: Iterable[Sequence[int]] = (),
    discouraged: Iterable[Sequence[int]] = (),
    on_progress: ProgressCallback | None = None,
    *,
    config: SolverConfig | None = None,
    rng: random.Random | None = None,
) -> None:
    """Schedule ``for_rounds`` rounds of ``groups`` groups of ``of_size``.

    Results are delivered only through ``on_progress``, once per round in
    order, with ``done`` set on the last snapshot. Inputs are not validated.
    """
    logger = logging.getLogger(__name__)
    cfg = config or SolverConfig()
    rng = rng or random.Random(cfg.seed)
    total_size = groups * of_size
    leader_count = groups if leaders else 0
    strategy = get_strategy(cfg.cost_strategy, leader_count)

    weights = seed_weights(total_size, leader_count, forbidden, discouraged)

    rounds: List[Partition] = []
    round_scores: List[int] = []
    for r in range(for_rounds):
        result = optimize_round(
            weights,
            groups=groups,
            of_size=of_size,
            leaders=leaders,
            rng=rng,
            strategy=strategy,
            generations=cfg.generations,
            random_mutations=cfg.random_mutations,
            max_plateau=cfg.max_plateau,
            initial_candidates=cfg.initial_candidates,
        )
        update_weights(weights, result.groups)
        rounds.append(result.groups)
        round_scores.append(result.total)
        logger.info(
            f"Round {r + 1}/{for_rounds}: cost {format_cost(result.total)} "
            f"after {result.generations} generations"
        )
        if on_progress is not None:
            on_progress(
                ProgressSnapshot(
                    rounds=[[g[:] for g in p] for p in rounds],
                    round_scores=list(round_scores),
                    weights=weights.to_lists(),
                    done=(r + 1) >= for_rounds,
                )
            )
