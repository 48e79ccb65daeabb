#!/usr/bin/env python3
# -*- coding: utf-8 -*-
'''
Errors raised by the particle filter.
'''


class ParticleFilterError(Exception):
    pass


class NotInitializedError(ParticleFilterError, RuntimeError):
    '''
    An operation was called before ParticleFilter.initialization().
    '''


class EmptyLandmarkMapError(ParticleFilterError, ValueError):
    '''
    Weighting was requested against a map without landmarks.
    '''


class DegenerateWeightsError(ParticleFilterError, ValueError):
    '''
    Resampling was requested while the weights do not form a distribution:
    all zero, negative or non-finite.
    '''


if __name__ == '__main__':
    pass
