#!/usr/bin/env python3
# -*- coding: utf-8 -*-
'''
Run Monte Carlo Localization on a landmark dataset (map, controls, ground
truth and per step observations, see lib/data.py).

The first ground truth pose is used as the noisy initial estimate. Every
later step predicts with the previous step's control, then weighs and
resamples with the current step's observations.
'''

import logging
import os

import numpy as np
import matplotlib.pyplot as plt

from .lib import data
from .lib.errors import DegenerateWeightsError


logger = logging.getLogger(__name__)


class MonteCarloLocalization():
    def __init__(self, particle_filter, delta_t, sensor_range, sigma_pos,
                 sigma_landmark):
        '''
        Input:
            particle_filter: ParticleFilter() object, not yet initialized.
            delta_t: time between two steps (in seconds).
            sensor_range: maximum sensing distance (in meters).
            sigma_pos: [std_x, std_y, std_theta] of the initial estimate,
                       also used as process noise.
            sigma_landmark: [std_x, std_y] landmark measurement noise.
        '''
        self.particle_filter = particle_filter
        self.delta_t = delta_t
        self.sensor_range = sensor_range
        self.sigma_pos = sigma_pos
        self.sigma_landmark = sigma_landmark

        # Estimates and errors: [x, y, theta] per step
        self.best_states = np.zeros((0, 3))
        self.states = np.zeros((0, 3))
        self.errors = np.zeros((0, 3))

    def load_data(self, dataset):
        '''
        Load the dataset found in a directory.

        Input:
            dataset: directory of the dataset.
        Output:
            None.
        '''
        # Landmarks: [id, x[m], y[m]]
        self.landmarks = data.read_map_data(
            os.path.join(dataset, data.MAP_FILE))
        # Control: [forward_V[m/s], angular_v[rad/s]]
        self.control_data = data.read_control_data(
            os.path.join(dataset, data.CONTROL_FILE))
        # Ground truth: [x[m], y[m], orientation[rad]]
        self.groundtruth_data = data.read_gt_data(
            os.path.join(dataset, data.GROUNDTRUTH_FILE))
        # Observations: [x[m], y[m]] vehicle frame, one array per step
        self.observations = data.read_observations(
            os.path.join(dataset, data.OBSERVATION_DIR),
            len(self.control_data))

        logger.info('Loaded %d landmarks and %d steps from %s',
                    len(self.landmarks), len(self.control_data), dataset)

    def run(self, end_step=None):
        '''
        Run the filter over the loaded steps.

        Input:
            end_step: number of steps to run, all steps if None.
        Output:
            None.
        '''
        num_steps = len(self.control_data)
        if end_step is not None:
            num_steps = min(num_steps, end_step)

        for step in range(num_steps):
            self.filter_update(step)

    def filter_update(self, step):
        '''
        Run one predict / weigh / resample cycle and record the estimates.

        Input:
            step: index of the time step.
        Output:
            None.
        '''
        pf = self.particle_filter
        groundtruth = self.groundtruth_data[step]

        if step == 0 or not pf.is_initialized:
            pf.initialization(groundtruth[0], groundtruth[1], groundtruth[2],
                              self.sigma_pos)
        else:
            control = self.control_data[step - 1]
            pf.prediction(self.delta_t, self.sigma_pos, control[0],
                          control[1])

        pf.update_weights(self.sensor_range, self.sigma_landmark,
                          self.observations[step], self.landmarks)

        try:
            pf.resample()
        except DegenerateWeightsError:
            # Filter diverged, restart around the current ground truth
            logger.warning('Step %d: degenerate weights, reinitializing',
                           step)
            pf.initialization(groundtruth[0], groundtruth[1], groundtruth[2],
                              self.sigma_pos)

        self.state_update()
        self.errors = np.append(
            self.errors,
            [compute_error(groundtruth, self.best_states[-1])], axis=0)

        logger.debug('Step %d: best particle %s', step,
                     self.best_states[-1])

    def state_update(self):
        '''
        Record the highest weight particle and the weighted mean pose.

        Input:
            None.
        Output:
            None.
        '''
        pf = self.particle_filter
        best = pf.particles[int(np.argmax(pf.weights))]
        self.best_states = np.append(self.best_states, [best.pose()], axis=0)

        poses = np.array([particle.pose() for particle in pf.particles])
        weights = pf.weights
        if np.sum(weights) <= 0:
            weights = np.ones(len(poses))
        weights = weights / np.sum(weights)

        x = np.dot(weights, poses[:, 0])
        y = np.dot(weights, poses[:, 1])
        # Average heading on the unit circle
        theta = np.arctan2(np.dot(weights, np.sin(poses[:, 2])),
                           np.dot(weights, np.cos(poses[:, 2])))
        self.states = np.append(self.states, [[x, y, theta]], axis=0)

    def cumulative_error(self):
        '''
        Output:
            Mean absolute error [x, y, theta] over the steps run so far.
        '''
        if len(self.errors) == 0:
            return np.zeros(3)
        return np.mean(self.errors, axis=0)

    def plot_data(self, pause=True):
        '''
        Plot all data through matplotlib.
        Conduct animation as the algorithm runs.

        Input:
            pause: let the figure refresh (interactive backends).
        Output:
            None.
        '''
        # Clear all
        plt.cla()

        # Ground truth data up to the current step
        steps = len(self.best_states)
        plt.plot(self.groundtruth_data[:steps, 0],
                 self.groundtruth_data[:steps, 1],
                 'b', label="Robot State Ground truth")

        # States
        plt.plot(self.best_states[:, 0], self.best_states[:, 1],
                 'r', label="Best Particle")
        plt.plot(self.states[:, 0], self.states[:, 1],
                 'm--', label="Weighted Mean")

        # Particles
        particle_xs = [p.x for p in self.particle_filter.particles]
        particle_ys = [p.y for p in self.particle_filter.particles]
        plt.scatter(particle_xs, particle_ys,
                    s=5, c='k', alpha=0.5, label="Particles")

        # Landmark locations and ids
        landmark_xs = []
        landmark_ys = []
        for landmark in self.landmarks:
            landmark_xs.append(landmark.x)
            landmark_ys.append(landmark.y)
            plt.text(landmark.x, landmark.y, str(landmark.id),
                     alpha=0.5, fontsize=10)
        plt.scatter(landmark_xs, landmark_ys, s=200, c='k', alpha=0.2,
                    marker='*', label='Landmark Locations')

        plt.title("Monte Carlo Localization")
        plt.legend()
        if pause:
            plt.pause(1e-16)


def compute_error(groundtruth, estimate):
    '''
    Input:
        groundtruth, estimate: [x, y, theta].
    Output:
        Absolute error [|dx|, |dy|, |dθ|], dθ wrapped to [0, pi].
    '''
    error_x = abs(estimate[0] - groundtruth[0])
    error_y = abs(estimate[1] - groundtruth[1])
    error_theta = abs(estimate[2] - groundtruth[2]) % (2 * np.pi)
    if error_theta > np.pi:
        error_theta = 2 * np.pi - error_theta
    return np.array([error_x, error_y, error_theta])


if __name__ == "__main__":
    pass
