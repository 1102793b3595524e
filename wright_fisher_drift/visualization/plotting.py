# wright_fisher_drift/visualization/plotting.py

import matplotlib.pyplot as plt
import numpy as np

from ..data_management.io_handlers import DEFAULT_COLUMN, read_trajectory


def _generations(n: int) -> np.ndarray:
    # Generation 1 is the initial count
    return np.arange(1, n + 1)


def _format_axes(ax, population_size=None, title=None):
    ax.set_xlabel("Generation")
    ax.set_ylabel("Allele count")
    if population_size is not None:
        ax.set_ylim(0, 2 * population_size)
    if title:
        ax.set_title(title)


def plot_trajectory(trajectory, ax=None, population_size: int = None, title: str = None, figsize=(10, 6)):
    """
    Draws a trajectory as a connected point plot: generation on the horizontal
    axis, allele count on the vertical axis.

    Args:
        trajectory: Sequence of allele counts.
        ax: Matplotlib Axes to draw on. A new figure is created when omitted.
        population_size: If given, the vertical axis is bounded to [0, 2N].
        title: Optional axes title.
        figsize: Size of the new figure when ax is omitted.

    Returns:
        The Axes the trajectory was drawn on.
    """
    counts = np.asarray(trajectory)
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.plot(_generations(counts.size), counts, marker="o", linestyle="-")
    _format_axes(ax, population_size, title)
    return ax


def plot_replicates(replicates, ax=None, population_size: int = None, title: str = None, alpha: float = 0.6,
                    figsize=(10, 6)):
    """Overlays several replicate trajectories (rows of a 2-D array) on one Axes."""
    values = np.asarray(replicates)
    if values.ndim != 2:
        raise ValueError(f"Replicates must be a 2-D array, got shape {values.shape}.")
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=figsize)
    generations = _generations(values.shape[1])
    for row in values:
        ax.plot(generations, row, marker="o", markersize=3, linestyle="-", alpha=alpha)
    _format_axes(ax, population_size, title)
    return ax


def plot_trajectory_file(file_path: str, output_path: str = None, column: str = DEFAULT_COLUMN,
                         population_size: int = None, title: str = None, figsize=(10, 6)):
    """
    Reads a saved trajectory file and plots it.

    Args:
        file_path: Tab-delimited file written by save_trajectory.
        output_path: If given, the figure is written there and closed.
        column: Name of the column holding the allele counts.
        population_size: Optional N used to bound the vertical axis.
        title: Optional axes title. Defaults to the file path.
        figsize: Size of the figure.

    Returns:
        The Axes, or None if the file could not be read.
    """
    counts = read_trajectory(file_path, column=column)
    if counts.size == 0:
        print(f"Warning: No trajectory data to plot from {file_path}.")
        return None

    ax = plot_trajectory(counts, population_size=population_size, title=title or file_path, figsize=figsize)
    if output_path:
        fig = ax.get_figure()
        try:
            fig.tight_layout()
            fig.savefig(output_path)
        finally:
            plt.close(fig)
        print(f"Plot saved to {output_path}")
    return ax
