#!/usr/bin/env python3
# -*- coding: utf-8 -*-
'''
Run Monte Carlo Localization on a landmark dataset directory
(map_data.txt, control_data.txt, gt_data.txt, observation/).

Usage: ./run_MC_localization.py [dataset]
'''

import logging
import sys

import matplotlib.pyplot as plt

from monte_carlo_localization import ParticleFilter
from monte_carlo_localization.localization import MonteCarloLocalization


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)

    # Dataset info
    dataset = sys.argv[1] if len(sys.argv) > 1 else "data"
    end_step = None

    # Time between two steps (in seconds)
    delta_t = 0.1
    # Sensor range (in meters)
    sensor_range = 50
    # GPS / process noise (in meters / rad)
    # [std_x, std_y, std_theta]
    sigma_pos = [0.3, 0.3, 0.01]
    # Landmark measurement noise (in meters)
    # [std_x, std_y]
    sigma_landmark = [0.3, 0.3]

    # Number of particles
    num_particles = 100
    particle_filter = ParticleFilter(num_particles, seed=0)

    mcl = MonteCarloLocalization(particle_filter, delta_t, sensor_range,
                                 sigma_pos, sigma_landmark)
    mcl.load_data(dataset)

    # Run the full filter, plot every n steps
    num_steps = len(mcl.control_data)
    if end_step is not None:
        num_steps = min(num_steps, end_step)
    for step in range(num_steps):
        mcl.filter_update(step)
        if (step % 50 == 0):
            mcl.plot_data()

    error = mcl.cumulative_error()
    print('Mean error of the best particle: x %.3f y %.3f yaw %.3f'
          % (error[0], error[1], error[2]))
    plt.show()
