#!/usr/bin/env python3
'''
Sequential Importance Resampling particle filter for 2D localization in a
known landmark map. See the particle filter chapter of Probabilistic
Robotics by Sebastian Thrun, Wolfram Burgard and Dieter Fox.

The caller runs one step as:
    prediction -> update_weights -> resample
'''

import logging

import numpy as np

from pf_localization.motion_model import MotionModel
from pf_localization.measurement_model import MeasurementModel
from pf_localization.particle import Particle

logger = logging.getLogger(__name__)


class ParticleFilter():

    def __init__(self, num_particles=5, seed=None, rng=None):
        '''
        Input:
            num_particles: population size. More particles give a better
                           estimate at a higher compute cost.
            seed: seed of the random generator, ignored when rng is given.
            rng: numpy Generator shared by every random draw of the filter.
        '''
        self.num_particles = num_particles
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.motion_model = MotionModel(self.rng)
        self.particles = []
        self.weights = []
        self.is_initialized = False


    def init(self, x, y, theta, std):
        '''
        Sample the particles around the first pose estimate (e.g. GPS) with
        standard deviations std = [sigma_x, sigma_y, sigma_theta].
        '''
        self.particles = []
        self.weights = []
        for i in range(self.num_particles):
            # Apply Gaussian noise to the initial pose
            particle = Particle(
                self.rng.normal(x, std[0]),
                self.rng.normal(y, std[1]),
                self.rng.normal(theta, std[2]))
            self.particles.append(particle)
            self.weights.append(particle.weight)
        self.is_initialized = True
        logger.debug('Initialized %d particles around (%.3f, %.3f, %.3f)',
                     self.num_particles, x, y, theta)


    def prediction(self, delta_t, std_pos, velocity, yaw_rate):
        '''
        Move every particle with the control [velocity, yaw_rate] and add
        process noise with standard deviations std_pos.
        '''
        for particle in self.particles:
            self.motion_model.sample_motion_model_velocity(
                particle,
                delta_t,
                std_pos,
                velocity,
                yaw_rate)


    def data_association(self, predicted, observations):
        '''
        Nearest neighbour association of observations to predicted
        landmarks, updating the observation ids in place.
        '''
        MeasurementModel.data_association(predicted, observations)


    def update_weights(self, sensor_range, std_landmark, observations, map_landmarks):
        '''
        Weight every particle by the likelihood of the observations.

        Input:
            sensor_range: landmarks further than this from the particle are
                          not candidates for association.
            std_landmark: [sigma_x, sigma_y] of the landmark measurement.
            observations: list of LandmarkObservation in the vehicle frame.
            map_landmarks: Map with the known landmarks.
        Output:
            None. The weights mirror is refreshed by resample().
        '''
        measurement_model = MeasurementModel(std_landmark)
        for particle in self.particles:
            weight, associated = measurement_model.importance_factor(
                particle,
                sensor_range,
                observations,
                map_landmarks)
            particle.weight = weight
            self.set_associations(
                particle,
                [observation.id for observation in associated],
                [observation.x for observation in associated],
                [observation.y for observation in associated])
        logger.debug('Updated weights, max weight %g', self.max_weight())


    def resample(self):
        '''
        Draw a new population with replacement, with probability
        proportional to the weights, using the resampling wheel.
        Weights are copied along with the particles, not reset.
        '''
        self.weights = [particle.weight for particle in self.particles]
        index = int(self.rng.integers(0, self.num_particles))
        max_weight = max(self.weights)
        if max_weight <= 0.0:
            # Every draw stays on the start index
            logger.warning('All particle weights are zero, population collapses '
                           'to particle %d', index)

        new_particles = []
        beta = 0.0
        for i in range(self.num_particles):
            beta += self.rng.uniform(0.0, max_weight) * 2.0
            while beta > self.weights[index]:
                beta -= self.weights[index]
                index = (index + 1) % self.num_particles
            new_particles.append(self.particles[index].copy())
        self.particles = new_particles


    def set_associations(self, particle, associations, sense_x, sense_y):
        '''
        Store the associated landmark ids and their map frame coordinates.
        '''
        particle.associations = list(associations)
        particle.sense_x = list(sense_x)
        particle.sense_y = list(sense_y)


    def get_associations(self, particle):
        return ' '.join(str(id) for id in particle.associations)


    def get_sense_coord(self, particle, coord):
        values = particle.sense_x if coord == 'X' else particle.sense_y
        return ' '.join('%g' % value for value in values)


    def max_weight(self):
        return max(particle.weight for particle in self.particles)


    def best_particle(self):
        '''
        Particle with the highest weight, the first one on ties.
        '''
        weights = np.array([particle.weight for particle in self.particles])
        return self.particles[int(np.argmax(weights))]


    def weighted_mean(self):
        '''
        Weighted average pose of the population, with the circular mean for
        the heading. Falls back to equal weights if they all vanished.
        '''
        weights = np.array([particle.weight for particle in self.particles], dtype=float)
        if weights.sum() <= 0.0:
            weights = np.ones(len(self.particles))
        x = np.average([particle.x for particle in self.particles], weights=weights)
        y = np.average([particle.y for particle in self.particles], weights=weights)
        thetas = np.array([particle.theta for particle in self.particles])
        theta = np.arctan2(np.average(np.sin(thetas), weights=weights),
                           np.average(np.cos(thetas), weights=weights))
        return [x, y, theta]


if __name__ == "__main__":
    pass
