#!/usr/bin/env python3
# -*- coding: utf-8 -*-
'''
Definitions for a single particle (pose hypothesis), a map landmark and a
vehicle-frame landmark observation.
'''

import numpy as np


class Particle():
    def __init__(self, id=0, x=0.0, y=0.0, theta=0.0, weight=1.0):
        # Robot state: [x, y, θ] in map frame
        # θ is not wrapped to [-pi, pi]
        self.id = id
        self.x = x
        self.y = y
        self.theta = theta

        # Importance weight, unnormalized product of likelihoods
        self.weight = weight

        # Data association of the last weighting pass
        # associations[k] is the landmark id matched to the k-th associated
        # observation, (sense_x[k], sense_y[k]) its map-frame position
        self.associations = []
        self.sense_x = []
        self.sense_y = []

    def pose(self):
        '''
        Output:
            [x, y, θ] as a numpy array.
        '''
        return np.array([self.x, self.y, self.theta])

    def __repr__(self):
        return 'Particle(id=%d, x=%g, y=%g, theta=%g, weight=%g)' % \
            (self.id, self.x, self.y, self.theta, self.weight)


class Landmark():
    def __init__(self, id, x, y):
        # Map landmark: [id, x, y] in map frame
        self.id = int(id)
        self.x = float(x)
        self.y = float(y)

    def __repr__(self):
        return 'Landmark(id=%d, x=%g, y=%g)' % (self.id, self.x, self.y)


class Observation():
    def __init__(self, x, y, id=-1):
        # Landmark observation: [x, y] in vehicle frame
        # (forward / lateral from the vehicle's pose)
        # id is carried for callers only, the weighting pass ignores it
        self.id = int(id)
        self.x = float(x)
        self.y = float(y)

    def __repr__(self):
        return 'Observation(x=%g, y=%g)' % (self.x, self.y)


def as_landmarks(map_landmarks):
    '''
    Normalize a landmark list.

    Input:
        map_landmarks: sequence of Landmark() objects or rows [x, y, id].
    Output:
        list of Landmark() objects in the given order.
    '''
    landmarks = []
    for landmark in map_landmarks:
        if isinstance(landmark, Landmark):
            landmarks.append(landmark)
        else:
            landmarks.append(Landmark(landmark[2], landmark[0], landmark[1]))
    return landmarks


def as_observations(observations):
    '''
    Normalize an observation list.

    Input:
        observations: sequence of Observation() objects or rows [x, y]
                      (an optional third column is the id).
    Output:
        list of Observation() objects in the given order.
    '''
    result = []
    for observation in observations:
        if isinstance(observation, Observation):
            result.append(observation)
        elif len(observation) > 2:
            result.append(Observation(observation[0], observation[1],
                                      observation[2]))
        else:
            result.append(Observation(observation[0], observation[1]))
    return result


if __name__ == '__main__':
    pass
