# wright_fisher_drift/cli.py

import argparse
import sys

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from .config import SimulationConfig
from .data_management.io_handlers import save_replicates, save_trajectory
from .errors import InvalidParameter
from .population_genetics.drift_stats import absorption_generation, absorption_state
from .population_genetics.wright_fisher import SAMPLING_METHODS, simulate, simulate_replicates
from .visualization.plotting import plot_replicates, plot_trajectory

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_INVALID_PARAMETER = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Wright-Fisher neutral drift simulator for a bi-allelic diploid locus.")

    parser.add_argument("-N", "--population-size", type=int, required=True, help="Number of diploid individuals (N).")
    parser.add_argument("-T", "--generations", type=int, required=True,
                        help="Number of generations to produce, including the initial one.")
    parser.add_argument("-A", "--initial-count", type=int, required=True,
                        help="Count of the tracked allele in generation 1, between 0 and 2N.")
    parser.add_argument("--seed", type=int, help="Seed for the random source. Overrides DRIFT_SEED.")
    parser.add_argument("--method", choices=SAMPLING_METHODS, help="Sampling method. Overrides DRIFT_METHOD.")
    parser.add_argument("--replicates", type=int, default=1, help="Number of independent trajectories. Default: 1.")
    parser.add_argument("-o", "--output", type=str, help="Optional: path of the tab-delimited output file.")
    parser.add_argument("--column", type=str, help="Header of the output column. Overrides DRIFT_COLUMN.")
    parser.add_argument("--plot", type=str, help="Optional: path of a PNG to render the trajectory into.")
    return parser


def _report(trajectory, population_size: int):
    print(f"Trajectory: {' '.join(str(count) for count in trajectory)}")
    state = absorption_state(trajectory, population_size)
    generation = absorption_generation(trajectory, population_size)
    if generation is None:
        print(f"Final state: {state}")
    else:
        print(f"Final state: {state} (absorbed at generation {generation + 1})")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = SimulationConfig.from_env().override(seed=args.seed, method=args.method, column=args.column)
    except InvalidParameter as e:
        print(f"ERROR: Invalid configuration: {e}")
        return EXIT_INVALID_PARAMETER

    print("Simulation Parameters:")
    print(f"  Population size (N): {args.population_size}")
    print(f"  Generations (T): {args.generations}")
    print(f"  Initial count (A1): {args.initial_count}")
    print(f"  Seed: {config.seed}")
    print(f"  Method: {config.method}")
    if args.replicates != 1:
        print(f"  Replicates: {args.replicates}")
    print("-" * 30)

    try:
        if args.replicates == 1:
            result = simulate(args.population_size, args.generations, args.initial_count,
                              rng=config.seed, method=config.method)
            _report(result, args.population_size)
        else:
            result = simulate_replicates(args.population_size, args.generations, args.initial_count,
                                         args.replicates, seed=config.seed, method=config.method)
            states = [absorption_state(row, args.population_size) for row in result]
            print(f"Replicates: {len(states)} (fixed: {states.count('fixed')}, lost: {states.count('lost')}, "
                  f"segregating: {states.count('segregating')})")
    except InvalidParameter as e:
        print(f"ERROR: Invalid value or configuration: {e}")
        return EXIT_INVALID_PARAMETER

    if args.output:
        output_path = config.resolve_path(args.output)
        if args.replicates == 1:
            saved = save_trajectory(result, output_path, column=config.column)
        else:
            saved = save_replicates(result, output_path)
        if not saved:
            return EXIT_IO_ERROR

    if args.plot:
        plot_path = config.resolve_path(args.plot)
        title = f"Wright-Fisher drift (N={args.population_size}, A1={args.initial_count})"
        if args.replicates == 1:
            ax = plot_trajectory(result, population_size=args.population_size, title=title, figsize=config.figsize)
        else:
            ax = plot_replicates(result, population_size=args.population_size, title=title, figsize=config.figsize)
        fig = ax.get_figure()
        try:
            fig.tight_layout()
            fig.savefig(plot_path)
            print(f"Plot saved to {plot_path}")
        except (OSError, ValueError) as e:
            print(f"An error occurred while saving the plot to {plot_path}: {e}")
            return EXIT_IO_ERROR
        finally:
            plt.close(fig)

    print("Simulation run finished.")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
