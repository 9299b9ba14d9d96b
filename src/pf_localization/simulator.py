#!/usr/bin/env python3
'''
Ground truth robot driving through a landmark map. Produces the noisy GPS
fix, controls and vehicle frame observations consumed by the filter.
'''

import numpy as np

from pf_localization.helper_functions import dist
from pf_localization.landmark import LandmarkObservation, Map, MapLandmark
from pf_localization.motion_model import MotionModel


def random_map(rng, num_landmarks=40, size=200.0):
    '''
    Landmarks uniformly spread over a square centered on the origin.
    '''
    positions = rng.uniform(-size / 2, size / 2, size=(num_landmarks, 2))
    return Map(MapLandmark(i + 1, float(x), float(y)) for i, (x, y) in enumerate(positions))


class Simulator():
    def __init__(self, map_landmarks, initial_pose, params, rng):
        self.map_landmarks = map_landmarks
        self.rng = rng
        self.motion_model = MotionModel(rng)
        self.sensor_range = params['sensor_range']
        self.sigma_pos = params['sigma_pos']
        self.sigma_landmark = params['sigma_landmark']
        self.x, self.y, self.theta = initial_pose


    def gps(self):
        '''
        Noisy measurement of the current pose.
        '''
        return [self.rng.normal(self.x, self.sigma_pos[0]),
                self.rng.normal(self.y, self.sigma_pos[1]),
                self.rng.normal(self.theta, self.sigma_pos[2])]


    def move(self, delta_t, velocity, yaw_rate):
        self.x, self.y, self.theta = self.motion_model.sample_real_model_velocity(
            self.x, self.y, self.theta, delta_t, velocity, yaw_rate)


    def observe(self):
        '''
        Noisy vehicle frame observations of the landmarks in sensor range.
        '''
        observations = []
        cos_theta = np.cos(self.theta)
        sin_theta = np.sin(self.theta)
        for landmark in self.map_landmarks:
            if dist(self.x, self.y, landmark.x, landmark.y) > self.sensor_range:
                continue
            dx = landmark.x - self.x
            dy = landmark.y - self.y
            # Rotate the offset into the vehicle frame
            x_local = dx * cos_theta + dy * sin_theta
            y_local = -dx * sin_theta + dy * cos_theta
            observations.append(LandmarkObservation(
                self.rng.normal(x_local, self.sigma_landmark[0]),
                self.rng.normal(y_local, self.sigma_landmark[1])))
        return observations


    def pose(self):
        return [self.x, self.y, self.theta]


if __name__ == '__main__':
    pass
