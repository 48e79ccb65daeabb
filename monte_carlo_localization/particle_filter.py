#!/usr/bin/env python3
# -*- coding: utf-8 -*-
'''
Implementation of Monte Carlo Localization (particle filter) against a known
landmark map.

Every filter cycle runs, on the same particle set:
    1. prediction: CTRV motion model plus Gaussian process noise
    2. update_weights: nearest neighbour data association within sensor
       range and bivariate Gaussian likelihood
    3. resample: multinomial draw proportional to the weights

See Probabilistic Robotics:
    1. Page 252, Table 8.2 for main algorithm.
'''

import copy
import logging

import numpy as np

from .lib.particle import Particle, as_landmarks, as_observations
from .lib.motion import MotionModel
from .lib.measurement import MeasurementModel, LIKELIHOOD_FLOOR
from .lib.errors import (NotInitializedError, EmptyLandmarkMapError,
                         DegenerateWeightsError)


logger = logging.getLogger(__name__)


class ParticleFilter():
    def __init__(self, num_particles=100, seed=None, rng=None):
        '''
        Input:
            num_particles: number of particles this filter tracks.
            seed: seed of the filter's random generator.
            rng: numpy.random.Generator to use instead of seeding one.
        '''
        if num_particles < 1:
            raise ValueError('num_particles must be at least 1, got %r'
                             % (num_particles,))

        self.num_particles = num_particles
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.motion_model = MotionModel(self.rng)

        # Particle set, filled by initialization()
        self.particles = []
        self.weights = np.zeros(0)
        self.is_initialized = False

    def initialization(self, x, y, theta, std):
        '''
        Initialize all particles around a first pose estimate, with unit
        weights. Any previous particle set is discarded.

        Input:
            x, y, theta: initial pose estimate (e.g. from GPS).
            std: [std_x, std_y, std_theta] of the estimate.
        Output:
            None.
        '''
        _check_std(std, 3, 'std')

        particles = []
        for i in range(self.num_particles):
            particle = Particle(i, x, y, theta, 1.0)
            self.motion_model.initialize_particle(particle, std)
            particles.append(particle)

        self.particles = particles
        self.weights = np.ones(self.num_particles)
        self.is_initialized = True

        logger.debug('Initialized %d particles around (%g, %g, %g)',
                     self.num_particles, x, y, theta)

    def prediction(self, delta_t, std_pos, velocity, yaw_rate):
        '''
        Move every particle with the control input and add process noise.
        Weights are not modified.

        Input:
            delta_t: elapsed time since the last prediction (in seconds).
            std_pos: [std_x, std_y, std_theta] process noise.
            velocity: linear velocity v_t.
            yaw_rate: angular velocity w_t.
        Output:
            None.
        '''
        self._check_initialized()
        if not delta_t > 0:
            raise ValueError('delta_t must be positive, got %r' % (delta_t,))
        _check_std(std_pos, 3, 'std_pos')

        for particle in self.particles:
            self.motion_model.sample_motion_model(particle, delta_t, std_pos,
                                                  velocity, yaw_rate)

    def update_weights(self, sensor_range, std_landmark, observations,
                       map_landmarks):
        '''
        Recompute the weight of every particle from the current observations.

        Input:
            sensor_range: maximum sensing distance (in meters).
            std_landmark: [std_x, std_y] landmark measurement noise.
            observations: Observation() objects or [x, y] rows, vehicle
                          frame.
            map_landmarks: Landmark() objects or [x, y, id] rows.
        Output:
            None.
        '''
        self._check_initialized()

        landmarks = as_landmarks(map_landmarks)
        if len(landmarks) == 0:
            raise EmptyLandmarkMapError('Cannot weigh particles against an '
                                        'empty landmark map')
        if not sensor_range > 0:
            raise ValueError('sensor_range must be positive, got %r'
                             % (sensor_range,))
        _check_std(std_landmark, 2, 'std_landmark', positive=True)

        observations = as_observations(observations)
        observation_xy = np.array([[o.x, o.y] for o in observations],
                                  dtype=float).reshape(-1, 2)
        landmark_xy = np.array([[landmark.x, landmark.y]
                                for landmark in landmarks], dtype=float)

        measurement_model = MeasurementModel(std_landmark)
        for i, particle in enumerate(self.particles):
            self.weights[i] = measurement_model.landmark_update(
                particle, observation_xy, landmarks, landmark_xy,
                sensor_range)

        if len(observations) > 0 and \
                not np.any(self.weights > LIKELIHOOD_FLOOR):
            logger.warning('None of the %d particles explains the %d '
                           'observations', self.num_particles,
                           len(observations))

    def resample(self):
        '''
        Resample all particles with replacement, with probability
        proportional to their weights.

        Input:
            None.
        Output:
            None.
        '''
        self._check_initialized()

        weights = self.weights
        if not np.all(np.isfinite(weights)) or np.any(weights < 0):
            raise DegenerateWeightsError('Weights must be finite and '
                                         'non-negative: %r' % (weights,))
        peak = np.max(weights)
        if not peak > 0:
            raise DegenerateWeightsError('Cannot resample, all %d weights '
                                         'are zero' % (self.num_particles,))

        # Scale by the largest weight first so the sum cannot overflow
        probabilities = weights / peak
        probabilities /= np.sum(probabilities)

        # Resample all particles according to importance weights
        new_indexes = self.rng.choice(self.num_particles, self.num_particles,
                                      replace=True, p=probabilities)

        # Update new particles, the weight array follows the copies
        new_particles = []
        for i, index in enumerate(new_indexes):
            particle = copy.deepcopy(self.particles[index])
            particle.id = i
            new_particles.append(particle)
        self.particles[:] = new_particles
        self.weights[:] = [particle.weight for particle in self.particles]

        logger.debug('Resampled %d particles from %d distinct parents',
                     self.num_particles, len(np.unique(new_indexes)))

    def set_associations(self, particle, associations, sense_x, sense_y):
        '''
        Assign a data association to a particle.

        Input:
            particle: Particle() object to update.
            associations: landmark id of each association.
            sense_x, sense_y: map-frame coordinates of each association.
        Output:
            The updated particle.
        '''
        self._check_initialized()
        if not len(associations) == len(sense_x) == len(sense_y):
            raise ValueError('associations, sense_x and sense_y differ in '
                             'length: %d, %d, %d' % (len(associations),
                                                     len(sense_x),
                                                     len(sense_y)))

        particle.associations = list(associations)
        particle.sense_x = list(sense_x)
        particle.sense_y = list(sense_y)
        return particle

    def get_associations(self, particle):
        self._check_initialized()
        return ' '.join(str(int(a)) for a in particle.associations)

    def get_sense_x(self, particle):
        self._check_initialized()
        return _format_coordinates(particle.sense_x)

    def get_sense_y(self, particle):
        self._check_initialized()
        return _format_coordinates(particle.sense_y)

    def spawn_generators(self, n):
        '''
        Derive independent random generators, one per worker, for callers
        that split the particle set across threads or processes.
        '''
        return self.rng.spawn(n)

    def _check_initialized(self):
        if not self.is_initialized:
            raise NotInitializedError('ParticleFilter.initialization() must '
                                      'be called first')


def _check_std(std, size, name, positive=False):
    if len(std) != size:
        raise ValueError('%s must have %d entries, got %d'
                         % (name, size, len(std)))
    for value in std:
        if value < 0 or (positive and value == 0):
            raise ValueError('%s must be %s, got %r'
                             % (name, 'positive' if positive else
                                'non-negative', list(std)))


def _format_coordinates(values):
    return ' '.join('%g' % v for v in values)


if __name__ == "__main__":
    pass
