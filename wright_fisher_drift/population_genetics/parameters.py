# wright_fisher_drift/population_genetics/parameters.py

from dataclasses import dataclass
import numbers

from ..errors import InvalidParameter


def _is_integer(value) -> bool:
    # bool is an Integral subclass but never a valid count
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


@dataclass(frozen=True)
class SimulationParameters:
    """
    Parameters of a single Wright-Fisher drift run.

    Attributes:
        population_size: Number of diploid individuals (N). The population carries
                         2N allele copies at the locus.
        num_generations: Number of generations in the trajectory (T), counting the
                         initial generation.
        initial_count: Count of the tracked allele in the first generation (A1).
                       Any value in [0, 2N] is accepted; the tracked allele does not
                       have to be the minor one.
    """
    population_size: int
    num_generations: int
    initial_count: int

    @property
    def total_alleles(self) -> int:
        return 2 * self.population_size

    @property
    def initial_frequency(self) -> float:
        return self.initial_count / self.total_alleles

    def validate(self) -> 'SimulationParameters':
        """
        Checks every parameter and raises on the first violation.

        Returns:
            SimulationParameters: The instance itself, so calls can be chained.

        Raises:
            InvalidParameter: If N <= 0, T < 1, A1 is outside [0, 2N], or any of
                              them is not an integer.
        """
        if not _is_integer(self.population_size):
            raise InvalidParameter(f"Population size must be an integer, got {self.population_size!r}.")
        if self.population_size <= 0:
            raise InvalidParameter("Population size must be greater than 0.")

        if not _is_integer(self.num_generations):
            raise InvalidParameter(f"Number of generations must be an integer, got {self.num_generations!r}.")
        if self.num_generations < 1:
            raise InvalidParameter("Number of generations must be at least 1.")

        if not _is_integer(self.initial_count):
            raise InvalidParameter(f"Initial allele count must be an integer, got {self.initial_count!r}.")
        if not (0 <= self.initial_count <= self.total_alleles):
            raise InvalidParameter(
                f"Initial allele count must be between 0 and 2N = {self.total_alleles}, got {self.initial_count}."
            )
        return self
