# Unit tests for the dataset readers.

import os
import tempfile
import unittest

import numpy as np

from monte_carlo_localization.lib import data


def write(path, text):
    with open(path, 'w') as f:
        f.write(text)


class TestReaders(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = self.tmp.name

    def tearDown(self):
        self.tmp.cleanup()

    def test_read_map_data(self):
        path = os.path.join(self.dir, data.MAP_FILE)
        write(path, '92.064\t-34.777\t1\n61.109\t-47.132\t2\n')
        landmarks = data.read_map_data(path)
        self.assertEqual([l.id for l in landmarks], [1, 2])
        self.assertAlmostEqual(landmarks[0].x, 92.064)
        self.assertAlmostEqual(landmarks[1].y, -47.132)

    def test_read_single_landmark(self):
        path = os.path.join(self.dir, data.MAP_FILE)
        write(path, '1.0 2.0 7\n')
        landmarks = data.read_map_data(path)
        self.assertEqual(len(landmarks), 1)
        self.assertEqual(landmarks[0].id, 7)

    def test_read_control_and_groundtruth(self):
        control_path = os.path.join(self.dir, data.CONTROL_FILE)
        gt_path = os.path.join(self.dir, data.GROUNDTRUTH_FILE)
        write(control_path, '4.0 0.03\n4.5 0.0\n')
        write(gt_path, '6.27 1.98 0\n6.67 1.99 0.003\n')

        control = data.read_control_data(control_path)
        groundtruth = data.read_gt_data(gt_path)
        np.testing.assert_allclose(control, [[4.0, 0.03], [4.5, 0.0]])
        self.assertEqual(groundtruth.shape, (2, 3))
        self.assertAlmostEqual(groundtruth[1, 2], 0.003)

    def test_read_observations(self):
        directory = os.path.join(self.dir, data.OBSERVATION_DIR)
        os.mkdir(directory)
        write(data.observation_path(directory, 0), '2.0 2.0\n3.0 -2.0\n')
        write(data.observation_path(directory, 1), '')
        write(data.observation_path(directory, 2), '0.5 1.5\n')

        observations = data.read_observations(directory, 3)
        self.assertEqual(len(observations), 3)
        np.testing.assert_allclose(observations[0], [[2.0, 2.0], [3.0, -2.0]])
        self.assertEqual(observations[1].shape, (0, 2))
        self.assertEqual(observations[2].shape, (1, 2))

    def test_observation_file_names(self):
        self.assertEqual(os.path.basename(data.observation_path('obs', 0)),
                         'observations_000001.txt')
        self.assertEqual(os.path.basename(data.observation_path('obs', 41)),
                         'observations_000042.txt')

    def test_missing_file(self):
        with self.assertRaises(OSError):
            data.read_control_data(os.path.join(self.dir, 'missing.txt'))


if __name__ == '__main__':
    unittest.main()
