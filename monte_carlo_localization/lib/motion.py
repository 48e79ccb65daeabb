#!/usr/bin/env python3
# -*- coding: utf-8 -*-
'''
Constant turn rate and velocity (CTRV) motion model for a 2D vehicle:
    Robot state: [x, y, θ]
    Control: [v, w].

Process noise is added to the advanced pose, not to the control input.
'''

import numpy as np


class MotionModel():
    def __init__(self, rng=None):
        '''
        Input:
            rng: numpy.random.Generator used for every noise draw.
                 A fresh unseeded generator if None.
        '''
        self.rng = rng if rng is not None else np.random.default_rng()

    def initialize_particle(self, particle, std):
        '''
        Scatter the robot state in the given particle object around its
        current value.

        Input:
            particle: Particle() object which holds the initial estimate.
            std: [std_x, std_y, std_theta] (in meters / rad).
        Output:
            None.
        '''
        # Apply Gaussian noise to the robot state
        particle.x = self.rng.normal(particle.x, std[0])
        particle.y = self.rng.normal(particle.y, std[1])
        particle.theta = self.rng.normal(particle.theta, std[2])

    def motion_update(self, particle, delta_t, velocity, yaw_rate):
        '''
        Conduct motion update for a given particle from current state X_t-1 and
        control U_t, without noise.

        Motion Model (CTRV):
        State: [x, y, θ]
        Control: [v, w]
        w == 0:
            x_t  =  x_t-1 + v * cosθ_t-1 * delta_t
            y_t  =  y_t-1 + v * sinθ_t-1 * delta_t
            θ_t  =  θ_t-1
        w != 0:
            x_t  =  x_t-1 + v / w * (sin(θ_t-1 + w * delta_t) - sinθ_t-1)
            y_t  =  y_t-1 + v / w * (cosθ_t-1 - cos(θ_t-1 + w * delta_t))
            θ_t  =  θ_t-1 + w * delta_t

        Input:
            particle: Particle() object to be updated.
            delta_t: elapsed time (in seconds).
            velocity: linear velocity v_t.
            yaw_rate: angular velocity w_t.
        Output:
            None.
        '''
        theta = particle.theta

        if yaw_rate == 0:
            particle.x += velocity * delta_t * np.cos(theta)
            particle.y += velocity * delta_t * np.sin(theta)
        else:
            theta_new = theta + yaw_rate * delta_t
            particle.x += velocity / yaw_rate *\
                (np.sin(theta_new) - np.sin(theta))
            particle.y += velocity / yaw_rate *\
                (np.cos(theta) - np.cos(theta_new))
            particle.theta = theta_new

    def sample_motion_model(self, particle, delta_t, std_pos, velocity,
                            yaw_rate):
        '''
        Sample next state X_t from current state X_t-1 and control U_t with
        added motion noise.

        Input:
            particle: Particle() object to be updated.
            delta_t: elapsed time (in seconds).
            std_pos: [std_x, std_y, std_theta] process noise.
            velocity: linear velocity v_t.
            yaw_rate: angular velocity w_t.
        Output:
            None.
        '''
        self.motion_update(particle, delta_t, velocity, yaw_rate)

        # Apply Gaussian noise around the advanced pose
        self.initialize_particle(particle, std_pos)


if __name__ == '__main__':
    pass
