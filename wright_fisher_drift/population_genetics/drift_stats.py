# wright_fisher_drift/population_genetics/drift_stats.py

import numpy as np

from ..errors import InvalidParameter
from .parameters import _is_integer


def _total_alleles(population_size: int) -> int:
    if not _is_integer(population_size) or population_size <= 0:
        raise InvalidParameter("Population size must be greater than 0.")
    return 2 * population_size


def _as_counts(trajectory, population_size: int) -> np.ndarray:
    total_alleles = _total_alleles(population_size)
    counts = np.asarray(trajectory)
    if counts.size == 0:
        raise InvalidParameter("Trajectory cannot be empty.")
    if counts.min() < 0 or counts.max() > total_alleles:
        raise InvalidParameter(f"Allele counts must be between 0 and 2N = {total_alleles}.")
    return counts


def _require_single(counts: np.ndarray):
    if counts.ndim != 1:
        raise InvalidParameter(f"Expected a single one-dimensional trajectory, got shape {counts.shape}.")


def allele_frequencies(trajectory, population_size: int) -> np.ndarray:
    """
    Converts allele counts to allele frequencies.

    Args:
        trajectory: Sequence (or 2-D array of replicates) of allele counts.
        population_size: Number of diploid individuals (N).

    Returns:
        Float array of the same shape with values count / 2N.
    """
    counts = _as_counts(trajectory, population_size)
    return counts / _total_alleles(population_size)


def expected_heterozygosity(trajectory, population_size: int) -> np.ndarray:
    """Expected heterozygosity 2p(1-p) at each generation."""
    p = allele_frequencies(trajectory, population_size)
    return 2.0 * p * (1.0 - p)


def absorption_generation(trajectory, population_size: int) -> int | None:
    """
    Finds the first generation at which the allele is lost or fixed.

    Returns:
        The 0-based index of the first count equal to 0 or 2N, or None if the
        trajectory is still segregating at every generation.
    """
    counts = _as_counts(trajectory, population_size)
    _require_single(counts)
    total_alleles = _total_alleles(population_size)
    absorbed = np.flatnonzero((counts == 0) | (counts == total_alleles))
    if absorbed.size == 0:
        return None
    return int(absorbed[0])


def absorption_state(trajectory, population_size: int) -> str:
    """Returns "lost", "fixed" or "segregating" for the last generation."""
    counts = _as_counts(trajectory, population_size)
    _require_single(counts)
    final_count = counts[-1]
    if final_count == 0:
        return "lost"
    if final_count == _total_alleles(population_size):
        return "fixed"
    return "segregating"


def fixation_probability(initial_count: int, population_size: int) -> float:
    """
    Probability that the tracked allele eventually fixes under neutral drift.

    Under pure drift the allele frequency is a martingale, so this equals the
    initial frequency A1 / 2N.
    """
    total_alleles = _total_alleles(population_size)
    if not (0 <= initial_count <= total_alleles):
        raise InvalidParameter(f"Initial allele count must be between 0 and 2N = {total_alleles}.")
    return initial_count / total_alleles


def theoretical_next_moments(count: int, population_size: int) -> tuple[float, float]:
    """
    Mean and variance of next generation's allele frequency given the current count.

    Returns:
        A tuple (p, p(1-p)/2N).
    """
    total_alleles = _total_alleles(population_size)
    if not (0 <= count <= total_alleles):
        raise InvalidParameter(f"Allele count must be between 0 and 2N = {total_alleles}.")
    p = count / total_alleles
    return p, p * (1.0 - p) / total_alleles


def replicate_moments(replicates, population_size: int, generation: int = 1) -> tuple[float, float]:
    """
    Empirical mean and sample variance (ddof=1) of the allele frequency at one
    generation across replicate trajectories.

    Args:
        replicates: Array of shape (n_replicates, T) of allele counts.
        population_size: Number of diploid individuals (N).
        generation: 0-based generation index to summarise.

    Returns:
        A tuple (mean, variance).

    Raises:
        InvalidParameter: If fewer than two replicates are given or the generation
                          index is out of range.
    """
    freqs = allele_frequencies(replicates, population_size)
    if freqs.ndim != 2:
        raise InvalidParameter("Replicates must be a 2-D array of shape (n_replicates, T).")
    n_replicates, n_generations = freqs.shape
    if n_replicates < 2:
        raise InvalidParameter("At least two replicates are needed to estimate a variance.")
    if not (0 <= generation < n_generations):
        raise InvalidParameter(f"Generation index {generation} is out of range for T = {n_generations}.")

    column = freqs[:, generation]
    return float(column.mean()), float(column.var(ddof=1))
