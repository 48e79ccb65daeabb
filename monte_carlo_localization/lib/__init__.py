from .particle import Particle, Landmark, Observation
from .motion import MotionModel
from .measurement import MeasurementModel
from .errors import (ParticleFilterError, NotInitializedError,
                     EmptyLandmarkMapError, DegenerateWeightsError)
