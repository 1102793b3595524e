# tests/test_visualization/test_plotting.py

import unittest
import tempfile
import os
import sys

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../')))

from wright_fisher_drift.data_management.io_handlers import save_trajectory
from wright_fisher_drift.visualization.plotting import (
    plot_replicates,
    plot_trajectory,
    plot_trajectory_file,
)


class TestPlotting(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.TemporaryDirectory()
        self.traj_file_path = os.path.join(self.test_dir.name, 'trajectory.txt')
        self.png_path = os.path.join(self.test_dir.name, 'trajectory.png')

    def tearDown(self):
        plt.close('all')
        self.test_dir.cleanup()

    def test_plot_trajectory_connected_points(self):
        trajectory = [20, 18, 23, 23, 30]
        ax = plot_trajectory(trajectory, population_size=50, title="drift")
        lines = ax.get_lines()
        self.assertEqual(len(lines), 1)
        line = lines[0]
        np.testing.assert_array_equal(line.get_xdata(), [1, 2, 3, 4, 5])
        np.testing.assert_array_equal(line.get_ydata(), trajectory)
        self.assertEqual(line.get_marker(), "o")
        self.assertEqual(line.get_linestyle(), "-")
        self.assertEqual(ax.get_xlabel(), "Generation")
        self.assertEqual(ax.get_ylabel(), "Allele count")
        self.assertEqual(ax.get_ylim(), (0.0, 100.0))
        self.assertEqual(ax.get_title(), "drift")

    def test_plot_on_existing_axes(self):
        fig, ax = plt.subplots()
        returned = plot_trajectory([1, 2, 3], ax=ax)
        self.assertIs(returned, ax)

    def test_plot_replicates(self):
        replicates = np.array([[5, 6, 7], [5, 4, 0], [5, 5, 10]])
        ax = plot_replicates(replicates, population_size=5)
        self.assertEqual(len(ax.get_lines()), 3)
        with self.assertRaises(ValueError):
            plot_replicates([1, 2, 3])

    def test_plot_trajectory_file_saves_png(self):
        save_trajectory([20, 18, 23, 23, 30], self.traj_file_path)
        ax = plot_trajectory_file(self.traj_file_path, output_path=self.png_path, population_size=50)
        self.assertIsNotNone(ax)
        self.assertTrue(os.path.exists(self.png_path))
        np.testing.assert_array_equal(ax.get_lines()[0].get_ydata(), [20, 18, 23, 23, 30])

    def test_plot_trajectory_file_unsupported_format(self):
        save_trajectory([20, 18, 23], self.traj_file_path)
        bad_path = os.path.join(self.test_dir.name, "trajectory.xyz")
        with self.assertRaises(ValueError):
            plot_trajectory_file(self.traj_file_path, output_path=bad_path)
        # Figure is closed even when saving fails
        self.assertEqual(plt.get_fignums(), [])

    def test_plot_trajectory_file_missing(self):
        ax = plot_trajectory_file(os.path.join(self.test_dir.name, 'missing.txt'), output_path=self.png_path)
        self.assertIsNone(ax)
        self.assertFalse(os.path.exists(self.png_path))


if __name__ == '__main__':
    unittest.main()
