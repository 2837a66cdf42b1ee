"""Multi-round group mixing: repeat-meeting aware group assignment."""

from .costs import FORBIDDEN
from .models import ProgressSnapshot, WeightMatrix
from .solvers import SolverConfig, load_config, solve

__all__ = ["FORBIDDEN", "ProgressSnapshot", "SolverConfig", "WeightMatrix", "load_config", "solve"]
