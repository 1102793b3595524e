from .parameters import SimulationParameters
from .wright_fisher import simulate, simulate_replicates, spawn_generators
