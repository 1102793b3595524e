# wright_fisher_drift/config.py

import os
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from .data_management.io_handlers import DEFAULT_COLUMN
from .errors import InvalidParameter
from .population_genetics.wright_fisher import SAMPLING_METHODS

# Environment variables read by SimulationConfig.from_env()
ENV_SEED = "DRIFT_SEED"
ENV_METHOD = "DRIFT_METHOD"
ENV_COLUMN = "DRIFT_COLUMN"
ENV_OUTPUT_DIR = "DRIFT_OUTPUT_DIR"


@dataclass
class SimulationConfig:
    """
    Run settings shared by the command line and library callers.

    Attributes:
        seed: Seed for the random source. None draws fresh OS entropy.
        method: Sampling method, "binomial" or "pmf".
        column: Header of the single column in saved trajectory files.
        output_dir: Directory that relative output paths are resolved against.
        figsize: Matplotlib figure size for saved plots.
    """
    seed: Optional[int] = None
    method: str = "binomial"
    column: str = DEFAULT_COLUMN
    output_dir: str = "."
    figsize: Tuple[float, float] = field(default=(10.0, 6.0))

    def __post_init__(self):
        if self.seed is not None and self.seed < 0:
            raise InvalidParameter(f"Seed must be a non-negative integer, got {self.seed}.")
        if self.method not in SAMPLING_METHODS:
            raise InvalidParameter(f"Unknown sampling method '{self.method}'. Expected one of {SAMPLING_METHODS}.")
        if not self.column:
            raise InvalidParameter("Output column name cannot be empty.")

    @classmethod
    def from_env(cls, environ=None) -> 'SimulationConfig':
        """Builds a config from defaults overridden by DRIFT_* environment variables."""
        environ = os.environ if environ is None else environ
        seed = environ.get(ENV_SEED)
        try:
            seed = int(seed) if seed not in (None, "") else None
        except ValueError:
            raise InvalidParameter(f"{ENV_SEED} must be an integer, got '{seed}'.")
        return cls(
            seed=seed,
            method=environ.get(ENV_METHOD, "binomial"),
            column=environ.get(ENV_COLUMN, DEFAULT_COLUMN),
            output_dir=environ.get(ENV_OUTPUT_DIR, "."),
        )

    def override(self, **changes) -> 'SimulationConfig':
        """Returns a copy with every non-None keyword applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def resolve_path(self, path: str) -> str:
        if os.path.isabs(path):
            return path
        return os.path.join(self.output_dir, path)
