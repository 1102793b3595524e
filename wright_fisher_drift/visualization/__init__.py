from .plotting import plot_trajectory, plot_replicates, plot_trajectory_file
