# wright_fisher_drift/data_management/io_handlers.py

import csv

import numpy as np
import pandas as pd

DEFAULT_COLUMN = "x"


def _write_table(dataframe: pd.DataFrame, file_path: str) -> bool:
    try:
        dataframe.to_csv(file_path, sep="\t", index=False, quoting=csv.QUOTE_NONE)
        print(f"Data successfully saved to {file_path}")
        return True
    except Exception as e:
        print(f"An error occurred while saving data to {file_path}: {e}")
        return False


def save_trajectory(trajectory, file_path: str, column: str = DEFAULT_COLUMN) -> bool:
    """
    Saves an allele-count trajectory to a tab-delimited text file.

    The file holds a single header line with the column name followed by one row
    per generation. No index column is written and nothing is quoted.

    Args:
        trajectory: Sequence of allele counts, one per generation.
        file_path (str): The path where the file will be saved.
        column (str): Header of the single column. Defaults to "x".

    Returns:
        bool: True if saving was successful, False otherwise.
    """
    values = np.asarray(trajectory)
    if values.ndim != 1:
        print(f"Error: A trajectory must be one-dimensional, got shape {values.shape}.")
        return False
    if values.size == 0:
        print(f"Warning: Attempting to save an empty trajectory to {file_path}. File will not be created.")
        return False
    return _write_table(pd.DataFrame({column: values}), file_path)


def save_replicates(replicates, file_path: str, prefix: str = "rep") -> bool:
    """
    Saves replicate trajectories side by side, one column per replicate.

    Args:
        replicates: Array of shape (n_replicates, T).
        file_path (str): The path where the file will be saved.
        prefix (str): Column names are prefix1, prefix2, ...

    Returns:
        bool: True if saving was successful, False otherwise.
    """
    values = np.asarray(replicates)
    if values.ndim != 2 or values.size == 0:
        print(f"Warning: Replicates must be a non-empty 2-D array, got shape {values.shape}. File will not be created.")
        return False
    columns = {f"{prefix}{i + 1}": row for i, row in enumerate(values)}
    return _write_table(pd.DataFrame(columns), file_path)


def read_trajectory(file_path: str, column: str = DEFAULT_COLUMN) -> np.ndarray:
    """
    Reads a trajectory written by save_trajectory back into an ordered array.

    Args:
        file_path (str): The path to the tab-delimited file.
        column (str): Name of the column holding the allele counts.

    Returns:
        np.ndarray: int64 array of allele counts in generation order.
                    Returns an empty array if reading fails.
    """
    try:
        table = pd.read_csv(file_path, sep="\t")
    except FileNotFoundError:
        print(f"Error: Trajectory file not found at {file_path}")
        return np.array([], dtype=np.int64)
    except Exception as e:
        print(f"An error occurred while reading trajectory data from {file_path}: {e}")
        return np.array([], dtype=np.int64)

    if column not in table.columns:
        print(f"Error: Column '{column}' not found in {file_path}.")
        return np.array([], dtype=np.int64)

    series = table[column]
    if not pd.api.types.is_numeric_dtype(series) or series.isnull().any() or not (series == series.round()).all():
        print(f"Error: Column '{column}' in {file_path} does not hold integer allele counts.")
        return np.array([], dtype=np.int64)

    counts = series.to_numpy(dtype=np.int64)
    print(f"Successfully read {counts.size} generations from {file_path}")
    return counts
