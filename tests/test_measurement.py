# Unit tests for the landmark measurement model.

import unittest

import numpy as np

from monte_carlo_localization.lib import Particle, Landmark, MeasurementModel
from monte_carlo_localization.lib.measurement import LIKELIHOOD_FLOOR


def weigh(particle, observations, landmarks, sensor_range=50.0,
          std=(0.3, 0.3)):
    observations = np.array(observations, dtype=float).reshape(-1, 2)
    landmark_xy = np.array([[l.x, l.y] for l in landmarks], dtype=float)
    return MeasurementModel(std).landmark_update(
        particle, observations, landmarks, landmark_xy, sensor_range)


class TestTransform(unittest.TestCase):
    def test_rotation_and_translation(self):
        model = MeasurementModel([0.3, 0.3])
        particle = Particle(0, 1.0, 2.0, np.pi / 2)
        transformed = model.transform_observations(
            particle, np.array([[1.0, 0.0], [0.0, 2.0]]))
        np.testing.assert_allclose(transformed, [[1.0, 3.0], [-1.0, 2.0]],
                                   atol=1e-12)


class TestLikelihood(unittest.TestCase):
    def test_single_landmark_zero_residual(self):
        particle = Particle(0, 0.0, 0.0, 0.0)
        weight = weigh(particle, [[1.0, 0.0]], [Landmark(1, 1.0, 0.0)])
        self.assertEqual(weight, 1 / (2 * np.pi * 0.3 * 0.3))
        self.assertEqual(particle.weight, weight)

    def test_residual(self):
        model = MeasurementModel([0.3, 0.5])
        expected = 1 / (2 * np.pi * 0.3 * 0.5) *\
            np.exp(-(0.2 ** 2 / (2 * 0.3 ** 2) + 0.4 ** 2 / (2 * 0.5 ** 2)))
        self.assertAlmostEqual(model.compute_likelihood(0.2, -0.4), expected)

    def test_product_over_observations(self):
        particle = Particle(0, 0.0, 0.0, 0.0)
        landmarks = [Landmark(1, 1.0, 0.0), Landmark(2, 0.0, 3.0)]
        weight = weigh(particle, [[1.1, 0.0], [0.0, 2.8]], landmarks)

        model = MeasurementModel([0.3, 0.3])
        expected = model.compute_likelihood(0.1, 0.0) *\
            model.compute_likelihood(0.0, -0.2)
        self.assertAlmostEqual(weight, expected)

    def test_no_observation(self):
        particle = Particle(0, 0.0, 0.0, 0.0, weight=0.25)
        particle.associations = [4]
        particle.sense_x = [1.0]
        particle.sense_y = [1.0]
        weight = weigh(particle, [], [Landmark(1, 1.0, 0.0)])
        self.assertEqual(weight, 1.0)
        self.assertEqual(particle.associations, [])
        self.assertEqual(particle.sense_x, [])
        self.assertEqual(particle.sense_y, [])


class TestDataAssociation(unittest.TestCase):
    def test_nearest_landmark(self):
        particle = Particle(0, 0.0, 0.0, 0.0)
        landmarks = [Landmark(10, 5.0, 5.0), Landmark(11, 2.0, 0.0),
                     Landmark(12, -3.0, 1.0)]
        weigh(particle, [[1.9, 0.1], [-2.5, 1.0], [4.0, 4.0]], landmarks)
        self.assertEqual(particle.associations, [11, 12, 10])
        self.assertEqual(particle.sense_x, [1.9, -2.5, 4.0])
        self.assertEqual(particle.sense_y, [0.1, 1.0, 4.0])

    def test_out_of_range_landmark_never_chosen(self):
        """
        Landmark 1 sits exactly on the observation but is out of the
        particle's sensor range, landmark 2 is far from the observation but
        in range.
        """
        particle = Particle(0, 0.0, 0.0, 0.0)
        landmarks = [Landmark(1, 12.0, 0.0), Landmark(2, 5.0, 0.0)]
        weigh(particle, [[12.0, 0.0]], landmarks, sensor_range=10.0)
        self.assertEqual(particle.associations, [2])

    def test_range_measured_from_particle(self):
        """
        The range gate uses the particle position, not the observation.
        """
        particle = Particle(0, 10.0, 0.0, 0.0)
        landmarks = [Landmark(1, 0.0, 0.0), Landmark(2, 11.0, 0.0)]
        weigh(particle, [[-10.0, 0.0]], landmarks, sensor_range=5.0)
        self.assertEqual(particle.associations, [2])

    def test_landmark_on_range_boundary_is_candidate(self):
        particle = Particle(0, 0.0, 0.0, 0.0)
        weigh(particle, [[3.0, 0.0]], [Landmark(1, 3.0, 4.0)],
              sensor_range=5.0)
        self.assertEqual(particle.associations, [1])

    def test_tie_goes_to_first_landmark(self):
        particle = Particle(0, 0.0, 0.0, 0.0)
        landmarks = [Landmark(7, 1.0, 1.0), Landmark(3, 1.0, -1.0)]
        weigh(particle, [[1.0, 0.0]], landmarks)
        self.assertEqual(particle.associations, [7])

    def test_no_landmark_in_range(self):
        particle = Particle(0, 0.0, 0.0, 0.0)
        landmarks = [Landmark(1, 100.0, 0.0), Landmark(2, 0.0, 100.0)]
        weight = weigh(particle, [[1.0, 0.0]], landmarks, sensor_range=10.0)
        self.assertEqual(weight, LIKELIHOOD_FLOOR)
        self.assertGreater(weight, 0.0)
        self.assertEqual(particle.associations, [])
        self.assertEqual(len(particle.sense_x), len(particle.sense_y))

    def test_diagnostics_aligned(self):
        particle = Particle(0, 1.0, 1.0, 0.3)
        landmarks = [Landmark(i, float(i), float(-i)) for i in range(6)]
        weigh(particle, [[0.5, 0.5], [2.0, -1.0], [3.0, 3.0], [0.0, 0.0]],
              landmarks)
        self.assertEqual(len(particle.associations), 4)
        self.assertEqual(len(particle.sense_x), 4)
        self.assertEqual(len(particle.sense_y), 4)


if __name__ == '__main__':
    unittest.main()
