# The driver (localization.py) pulls in matplotlib, import it explicitly:
#     from monte_carlo_localization.localization import MonteCarloLocalization
from .particle_filter import ParticleFilter
from .lib import (Particle, Landmark, Observation, MotionModel,
                  MeasurementModel, ParticleFilterError, NotInitializedError,
                  EmptyLandmarkMapError, DegenerateWeightsError)

__version__ = '0.1.0'
