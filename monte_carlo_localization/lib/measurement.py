#!/usr/bin/env python3
# -*- coding: utf-8 -*-
'''
Measurement model for landmark observations given in the vehicle frame
([x, y], forward / lateral).

Each observation is moved into the map frame with the particle's pose,
associated with its nearest landmark in sensor range of the particle and
scored with an axis-aligned bivariate Gaussian.
'''

import numpy as np
from scipy.spatial.distance import cdist


# Weight of a particle with no landmark in sensor range: the smallest
# positive normal float, so the particle stays drawable
LIKELIHOOD_FLOOR = np.finfo(float).tiny


class MeasurementModel():
    def __init__(self, std_landmark):
        '''
        Input:
            std_landmark: [std_x, std_y] landmark measurement noise
                          (in meters). Covariance is diag(std_x², std_y²).
        '''
        self.std_landmark = std_landmark

        # Normalization term and exponent denominators of the Gaussian
        # stay the same for every particle and observation
        self.normalizer = 1.0 / (2 * np.pi * std_landmark[0] * std_landmark[1])
        self.x_denom = 2 * std_landmark[0] * std_landmark[0]
        self.y_denom = 2 * std_landmark[1] * std_landmark[1]

    def transform_observations(self, particle, observations):
        '''
        Transform observations from vehicle frame to map frame.

        x_m  =  x_t + cosθ_t * x_o - sinθ_t * y_o
        y_m  =  y_t + sinθ_t * x_o + cosθ_t * y_o

        Input:
            particle: Particle() object providing the pose.
            observations: observation coordinates, vehicle frame.
                          Dimension: [N_obs, 2].
        Output:
            Observation coordinates in map frame.
            Dimension: [N_obs, 2].
        '''
        cos_theta = np.cos(particle.theta)
        sin_theta = np.sin(particle.theta)

        transformed = np.empty_like(observations)
        transformed[:, 0] = observations[:, 0] * cos_theta -\
            observations[:, 1] * sin_theta + particle.x
        transformed[:, 1] = observations[:, 0] * sin_theta +\
            observations[:, 1] * cos_theta + particle.y

        return transformed

    def landmarks_in_range(self, particle, landmark_xy, sensor_range):
        '''
        Select the landmarks a particle could have observed.

        Input:
            particle: Particle() object providing the position.
            landmark_xy: landmark coordinates in map frame.
                         Dimension: [N_landmarks, 2].
            sensor_range: maximum sensing distance (in meters).
        Output:
            Indexes of the landmarks within sensor_range of the particle,
            in map order.
        '''
        distances = np.hypot(landmark_xy[:, 0] - particle.x,
                             landmark_xy[:, 1] - particle.y)
        return np.flatnonzero(distances <= sensor_range)

    def data_association(self, transformed, candidate_xy):
        '''
        Associate every observation with its nearest candidate landmark.
        Ties go to the first candidate.

        Input:
            transformed: observation coordinates in map frame.
                         Dimension: [N_obs, 2].
            candidate_xy: coordinates of the candidate landmarks.
                          Dimension: [N_candidates, 2], N_candidates > 0.
        Output:
            Index into candidate_xy for each observation.
        '''
        distances = cdist(transformed, candidate_xy)
        return np.argmin(distances, axis=1)

    def compute_likelihood(self, dx, dy):
        '''
        Bivariate Gaussian with independent axes.

        p = 1 / (2π σx σy) * exp(-(dx² / 2σx² + dy² / 2σy²))

        Input:
            dx, dy: map-frame residuals between observations and their
                    associated landmarks.
        Output:
            Likelihood of each residual.
        '''
        exponent = (dx * dx) / self.x_denom + (dy * dy) / self.y_denom
        return self.normalizer * np.exp(-exponent)

    def landmark_update(self, particle, observations, landmarks, landmark_xy,
                        sensor_range):
        '''
        Recompute the importance weight of one particle from scratch and
        record its data association.

        Input:
            particle: Particle() object to be updated.
            observations: observation coordinates, vehicle frame.
                          Dimension: [N_obs, 2].
            landmarks: list of Landmark() objects (map order).
            landmark_xy: the same landmarks as an array.
                         Dimension: [N_landmarks, 2].
            sensor_range: maximum sensing distance (in meters).
        Output:
            The new weight.
        '''
        particle.associations = []
        particle.sense_x = []
        particle.sense_y = []

        # No observation, no information
        if len(observations) == 0:
            particle.weight = 1.0
            return particle.weight

        candidates = self.landmarks_in_range(particle, landmark_xy,
                                             sensor_range)

        # Nothing to associate with: every observation is unexplained
        if len(candidates) == 0:
            particle.weight = LIKELIHOOD_FLOOR
            return particle.weight

        transformed = self.transform_observations(particle, observations)
        candidate_xy = landmark_xy[candidates]
        nearest = self.data_association(transformed, candidate_xy)

        residual = transformed - candidate_xy[nearest]
        likelihood = self.compute_likelihood(residual[:, 0], residual[:, 1])
        particle.weight = float(np.prod(likelihood))

        for k, index in enumerate(nearest):
            particle.associations.append(landmarks[candidates[index]].id)
            particle.sense_x.append(float(transformed[k, 0]))
            particle.sense_y.append(float(transformed[k, 1]))

        return particle.weight


if __name__ == '__main__':
    pass
