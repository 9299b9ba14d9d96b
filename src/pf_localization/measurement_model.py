#!/usr/bin/env python3
'''
Measurement model for point landmarks observed in the vehicle frame.
'''

import numpy as np

from pf_localization.helper_functions import dist
from pf_localization.landmark import LandmarkObservation, UNASSOCIATED


def multivariate_gaussian(x, y, mu_x, mu_y, sigma_x, sigma_y):
    '''
    Bivariate normal density with no correlation between x and y.
    '''
    x_term = (x - mu_x) ** 2 / (2 * sigma_x ** 2)
    y_term = (y - mu_y) ** 2 / (2 * sigma_y ** 2)
    normalizer = 2 * np.pi * sigma_x * sigma_y
    return np.exp(-(x_term + y_term)) / normalizer


class MeasurementModel():
    def __init__(self, std_landmark):
        '''
        Input:
            std_landmark: [sigma_x, sigma_y] of the landmark measurement,
                          in the map frame.
        '''
        self.std_landmark = std_landmark


    def predicted_landmarks(self, particle, sensor_range, map_landmarks):
        '''
        Landmarks of the map within sensor range of the particle.
        '''
        predicted = []
        for landmark in map_landmarks.landmark_list:
            if dist(particle.x, particle.y, landmark.x, landmark.y) <= sensor_range:
                predicted.append(LandmarkObservation(landmark.x, landmark.y, landmark.id))
        return predicted


    def transform_observation(self, particle, observation):
        '''
        Rotate and translate a vehicle frame observation into the map frame
        as seen from the particle pose.
        '''
        cos_theta = np.cos(particle.theta)
        sin_theta = np.sin(particle.theta)
        x = particle.x + observation.x * cos_theta - observation.y * sin_theta
        y = particle.y + observation.x * sin_theta + observation.y * cos_theta
        return LandmarkObservation(x, y, observation.id)


    @staticmethod
    def data_association(predicted, observations):
        '''
        Assign each observation the id of the closest predicted landmark.
        Ties keep the first landmark found. Observations stay UNASSOCIATED
        when there is no predicted landmark.
        Cost is O(len(observations) * len(predicted)).
        '''
        for observation in observations:
            observation.id = UNASSOCIATED
            min_dist = np.inf
            for landmark in predicted:
                distance = dist(landmark.x, landmark.y, observation.x, observation.y)
                if distance < min_dist:
                    observation.id = landmark.id
                    min_dist = distance


    def importance_factor(self, particle, sensor_range, observations, map_landmarks):
        '''
        Compute the weight of a particle from the vehicle frame observations.

        Input:
            particle: Particle() object to be weighted.
            observations: list of LandmarkObservation in the vehicle frame.
        Output:
            weight: product of the densities of every associated observation.
            associated: list of map frame observations with a landmark id.
        '''
        predicted = self.predicted_landmarks(particle, sensor_range, map_landmarks)
        observations_in_map = [self.transform_observation(particle, observation)
                               for observation in observations]
        self.data_association(predicted, observations_in_map)

        landmarks_by_id = {}
        for landmark in predicted:
            landmarks_by_id.setdefault(landmark.id, landmark)

        weight = 1.0
        associated = []
        for observation in observations_in_map:
            # No landmark in sensor range, the observation adds no factor
            if observation.id == UNASSOCIATED:
                continue
            landmark = landmarks_by_id[observation.id]
            weight *= multivariate_gaussian(
                observation.x,
                observation.y,
                landmark.x,
                landmark.y,
                self.std_landmark[0],
                self.std_landmark[1])
            associated.append(observation)
        return weight, associated


if __name__ == '__main__':
    pass
