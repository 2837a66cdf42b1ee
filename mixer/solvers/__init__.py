from .genetic import ProgressCallback, SolverConfig, load_config, solve

__all__ = ["ProgressCallback", "SolverConfig", "load_config", "solve"]
