# tests/test_data_management/test_io_handlers.py

import unittest
import numpy as np
import tempfile
import os

# Adjust path to import from the root of the project
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../')))

from wright_fisher_drift.data_management.io_handlers import (
    read_trajectory,
    save_replicates,
    save_trajectory,
)
from wright_fisher_drift.population_genetics.wright_fisher import simulate, simulate_replicates


class TestIOHandlers(unittest.TestCase):

    def setUp(self):
        # Create a temporary directory to store test files
        self.test_dir = tempfile.TemporaryDirectory()
        self.traj_file_path = os.path.join(self.test_dir.name, 'trajectory.txt')
        self.reps_file_path = os.path.join(self.test_dir.name, 'replicates.txt')

    def tearDown(self):
        # Clean up the temporary directory
        self.test_dir.cleanup()

    def _read_lines(self, path):
        with open(path) as handle:
            return handle.read().splitlines()

    # --- Writing ---
    def test_save_trajectory_layout(self):
        success = save_trajectory([20, 18, 23, 23, 30], self.traj_file_path)
        self.assertTrue(success)
        # Header then one row per generation, no index column, no quoting
        self.assertEqual(self._read_lines(self.traj_file_path), ["x", "20", "18", "23", "23", "30"])

    def test_save_trajectory_custom_column(self):
        self.assertTrue(save_trajectory(np.array([1, 2]), self.traj_file_path, column="count"))
        self.assertEqual(self._read_lines(self.traj_file_path), ["count", "1", "2"])

    def test_save_empty_trajectory(self):
        success = save_trajectory([], self.traj_file_path)
        self.assertFalse(success)
        self.assertFalse(os.path.exists(self.traj_file_path))  # File should not be created

    def test_save_two_dimensional_trajectory_rejected(self):
        self.assertFalse(save_trajectory(np.zeros((2, 3), dtype=int), self.traj_file_path))
        self.assertFalse(os.path.exists(self.traj_file_path))

    def test_save_to_missing_directory(self):
        bad_path = os.path.join(self.test_dir.name, 'no_such_dir', 'trajectory.txt')
        self.assertFalse(save_trajectory([1, 2, 3], bad_path))

    def test_save_replicates_layout(self):
        replicates = np.array([[5, 6, 7], [5, 4, 0]])
        self.assertTrue(save_replicates(replicates, self.reps_file_path))
        self.assertEqual(self._read_lines(self.reps_file_path),
                         ["rep1\trep2", "5\t5", "6\t4", "7\t0"])

    def test_save_replicates_requires_matrix(self):
        self.assertFalse(save_replicates([1, 2, 3], self.reps_file_path))
        self.assertFalse(os.path.exists(self.reps_file_path))

    # --- Reading ---
    def test_round_trip_simulated_trajectory(self):
        trajectory = simulate(50, 30, 20, rng=5)
        self.assertTrue(save_trajectory(trajectory, self.traj_file_path))
        read_back = read_trajectory(self.traj_file_path)
        np.testing.assert_array_equal(read_back, trajectory)
        self.assertEqual(read_back.dtype, np.int64)

    def test_read_replicate_column(self):
        replicates = simulate_replicates(10, 8, 10, 3, seed=4)
        self.assertTrue(save_replicates(replicates, self.reps_file_path))
        np.testing.assert_array_equal(read_trajectory(self.reps_file_path, column="rep2"), replicates[1])

    def test_read_non_existent_file(self):
        counts = read_trajectory(os.path.join(self.test_dir.name, "non_existent_file.txt"))
        self.assertEqual(counts.size, 0)  # Expect empty array on error

    def test_read_missing_column(self):
        save_trajectory([1, 2, 3], self.traj_file_path, column="count")
        self.assertEqual(read_trajectory(self.traj_file_path, column="x").size, 0)

    def test_read_non_integer_values(self):
        with open(self.traj_file_path, "w") as handle:
            handle.write("x\n1\n2.5\n3\n")
        self.assertEqual(read_trajectory(self.traj_file_path).size, 0)

        with open(self.traj_file_path, "w") as handle:
            handle.write("x\n1\nabc\n3\n")
        self.assertEqual(read_trajectory(self.traj_file_path).size, 0)

    def test_read_empty_file(self):
        open(self.traj_file_path, "w").close()
        self.assertEqual(read_trajectory(self.traj_file_path).size, 0)


if __name__ == '__main__':
    unittest.main()
