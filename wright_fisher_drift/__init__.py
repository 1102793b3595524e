# wright_fisher_drift package initialization

from .errors import DriftError, InvalidParameter
from .population_genetics.parameters import SimulationParameters
from .population_genetics.wright_fisher import simulate, simulate_replicates, spawn_generators
from .data_management.io_handlers import save_trajectory, save_replicates, read_trajectory
from .config import SimulationConfig

__all__ = [
    "DriftError",
    "InvalidParameter",
    "SimulationParameters",
    "simulate",
    "simulate_replicates",
    "spawn_generators",
    "save_trajectory",
    "save_replicates",
    "read_trajectory",
    "SimulationConfig",
]

__version__ = "0.1.0"
