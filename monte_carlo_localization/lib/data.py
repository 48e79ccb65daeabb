#!/usr/bin/env python3
# -*- coding: utf-8 -*-
'''
Readers for a localization dataset stored as whitespace separated text:
    map_data.txt: [x[m], y[m], id] per landmark
    control_data.txt: [velocity[m/s], yaw_rate[rad/s]] per time step
    gt_data.txt: [x[m], y[m], theta[rad]] per time step
    observation/observations_000001.txt: [x[m], y[m]] per observation,
        vehicle frame, one file per time step.
'''

import os
import warnings

import numpy as np

from .particle import Landmark


MAP_FILE = 'map_data.txt'
CONTROL_FILE = 'control_data.txt'
GROUNDTRUTH_FILE = 'gt_data.txt'
OBSERVATION_DIR = 'observation'


def _loadtxt(path, columns):
    # Empty files are valid (no observation in that step), numpy warns
    # about them
    with warnings.catch_warnings():
        warnings.simplefilter('ignore', UserWarning)
        data = np.loadtxt(path, ndmin=2)
    if data.size == 0:
        return np.zeros((0, columns))
    return data[:, :columns]


def read_map_data(path):
    '''
    Input:
        path: map file, one landmark [x, y, id] per line.
    Output:
        list of Landmark() objects in file order.
    '''
    data = _loadtxt(path, 3)
    return [Landmark(row[2], row[0], row[1]) for row in data]


def read_control_data(path):
    '''
    Output:
        [velocity, yaw_rate] per time step.
        Dimension: [N_steps, 2].
    '''
    return _loadtxt(path, 2)


def read_gt_data(path):
    '''
    Output:
        [x, y, theta] per time step.
        Dimension: [N_steps, 3].
    '''
    return _loadtxt(path, 3)


def read_landmark_data(path):
    '''
    Output:
        Observations of one time step, vehicle frame.
        Dimension: [N_obs, 2], N_obs may be 0.
    '''
    return _loadtxt(path, 2)


def observation_path(directory, step):
    # Files are numbered from 1
    return os.path.join(directory, 'observations_%06d.txt' % (step + 1))


def read_observations(directory, num_steps):
    '''
    Input:
        directory: folder holding observations_000001.txt ...
        num_steps: number of time steps to read.
    Output:
        list of [N_obs, 2] arrays, one per time step.
    '''
    return [read_landmark_data(observation_path(directory, step))
            for step in range(num_steps)]


if __name__ == '__main__':
    pass
