# wright_fisher_drift/population_genetics/wright_fisher.py

import numpy as np
import scipy.stats

from ..errors import InvalidParameter
from .parameters import SimulationParameters, _is_integer

SAMPLING_METHODS = ("binomial", "pmf")


def _as_generator(rng) -> np.random.Generator:
    """Accepts a Generator, an integer seed, a SeedSequence or None."""
    if isinstance(rng, np.random.Generator):
        return rng
    if _is_integer(rng) and rng < 0:
        raise InvalidParameter(f"Seed must be a non-negative integer, got {rng}.")
    if rng is None or _is_integer(rng) or isinstance(rng, np.random.SeedSequence):
        return np.random.default_rng(rng)
    raise InvalidParameter(f"rng must be a numpy Generator, an integer seed or None, got {type(rng).__name__}.")


def _draw_binomial(rng: np.random.Generator, total_alleles: int, p: float) -> int:
    return int(rng.binomial(n=total_alleles, p=p))


def _draw_from_pmf(rng: np.random.Generator, total_alleles: int, p: float) -> int:
    # Full mass vector over {0, ..., 2N}
    support = np.arange(total_alleles + 1)
    probabilities = scipy.stats.binom.pmf(support, total_alleles, p)
    probabilities = probabilities / probabilities.sum()
    return int(rng.choice(support, p=probabilities))


_SAMPLERS = {
    "binomial": _draw_binomial,
    "pmf": _draw_from_pmf,
}


def simulate(population_size: int, num_generations: int, initial_count: int,
             rng=None, method: str = "binomial") -> np.ndarray:
    """
    Simulates neutral genetic drift of a bi-allelic locus in a diploid
    Wright-Fisher population.

    Each generation the 2N allele copies of the offspring are drawn with replacement
    from the parental gene pool, so the next count is a single Binomial(2N, p) draw
    where p is the current frequency of the tracked allele. Counts of 0 and 2N are
    absorbing: the draw at p=0 or p=1 always returns the same count.

    Args:
        population_size: Number of diploid individuals (N). Must be greater than 0.
        num_generations: Length of the trajectory (T), including the initial generation.
                         Must be at least 1.
        initial_count: Count of the tracked allele in the first generation (A1).
                       Must be between 0 and 2N, inclusive.
        rng: Random source owned by the caller. A numpy Generator is used as-is and
             advanced; an integer seed or None builds a fresh Generator. Global numpy
             random state is never touched.
        method: "binomial" draws with the generator's binomial routine. "pmf" builds the
                full binomial probability mass vector with scipy and draws from it.

    Returns:
        A read-only numpy int64 array of length num_generations holding the allele count
        at each generation. The first element equals initial_count.

    Raises:
        InvalidParameter: If any parameter is out of range or method is unknown.
    """
    params = SimulationParameters(population_size, num_generations, initial_count).validate()
    if method not in _SAMPLERS:
        raise InvalidParameter(f"Unknown sampling method '{method}'. Expected one of {SAMPLING_METHODS}.")
    rng = _as_generator(rng)
    draw = _SAMPLERS[method]

    total_alleles = params.total_alleles
    trajectory = np.empty(params.num_generations, dtype=np.int64)
    trajectory[0] = params.initial_count

    for generation in range(1, params.num_generations):
        p = trajectory[generation - 1] / total_alleles
        trajectory[generation] = draw(rng, total_alleles, p)

    trajectory.flags.writeable = False
    return trajectory


def spawn_generators(n: int, seed=None) -> list[np.random.Generator]:
    """
    Creates n statistically independent generators from one seed.

    Args:
        n: Number of generators. Must be at least 1.
        seed: Integer seed, SeedSequence or None for fresh entropy.

    Returns:
        A list of n numpy Generators, reproducible for a fixed seed.
    """
    if not _is_integer(n) or n < 1:
        raise InvalidParameter("Number of replicates must be at least 1.")
    if _is_integer(seed) and seed < 0:
        raise InvalidParameter(f"Seed must be a non-negative integer, got {seed}.")
    seed_sequence = seed if isinstance(seed, np.random.SeedSequence) else np.random.SeedSequence(seed)
    return [np.random.default_rng(child) for child in seed_sequence.spawn(n)]


def simulate_replicates(population_size: int, num_generations: int, initial_count: int,
                        n_replicates: int, seed=None, method: str = "binomial") -> np.ndarray:
    """
    Runs independent replicate trajectories from the same starting parameters.

    Every replicate has its own generator spawned from a single SeedSequence, so the
    whole batch is reproducible for a fixed seed and replicates never share state.

    Returns:
        A read-only int64 array of shape (n_replicates, num_generations).
    """
    # Parameters are checked once, before any generator is spawned
    SimulationParameters(population_size, num_generations, initial_count).validate()
    generators = spawn_generators(n_replicates, seed)

    replicates = np.vstack([
        simulate(population_size, num_generations, initial_count, rng=generator, method=method)
        for generator in generators
    ])
    replicates.flags.writeable = False
    return replicates
