from .io_handlers import save_trajectory, save_replicates, read_trajectory
