'''
Particle filter localization of a 2D robot in a known landmark map.
'''

from pf_localization.landmark import LandmarkObservation, Map, MapLandmark, UNASSOCIATED
from pf_localization.particle import Particle
from pf_localization.particle_filter import ParticleFilter

__all__ = [
    'LandmarkObservation',
    'Map',
    'MapLandmark',
    'Particle',
    'ParticleFilter',
    'UNASSOCIATED',
]
