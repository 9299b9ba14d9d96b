#!/usr/bin/env python3

import logging
import sys

import numpy as np

logger = logging.getLogger(__name__)

# Yaw rates at or below this magnitude are treated as straight-line motion
YAW_RATE_EPSILON = sys.float_info.epsilon


class MotionModel():
    def __init__(self, rng):
        '''
        Initialize motion model with the random generator of the filter.
        '''
        self.rng = rng


    # Velocity motion model from Probabilistic Robotics chapter 5, without
    # the final rotation term
    def sample_real_model_velocity(self,x,y,theta,delta_t,velocity,yaw_rate):
        '''
        Propagate pose X_t-1 with control [v, w] during delta_t, assuming a
        perfect model with no noise.
        '''
        if abs(yaw_rate) <= YAW_RATE_EPSILON:
            # No turn
            x_est = x + velocity * delta_t * np.cos(theta)
            y_est = y + velocity * delta_t * np.sin(theta)
            theta_est = theta
        else:
            theta_est = theta + yaw_rate * delta_t
            vw_ratio = velocity / yaw_rate
            x_est = x + vw_ratio * (np.sin(theta_est) - np.sin(theta))
            y_est = y + vw_ratio * (np.cos(theta) - np.cos(theta_est))

        return [x_est,y_est,theta_est]


    def sample_motion_model_velocity(self,particle,delta_t,std_pos,velocity,yaw_rate):
        '''
        Move a particle with control [v, w] during delta_t and add
        Gaussian process noise to the resulting pose.

        Input:
            particle: Particle() object to be updated.
            std_pos: [sigma_x, sigma_y, sigma_theta] of the process noise.
        Output:
            None.
        '''
        x_t = self.sample_real_model_velocity(
            particle.x,
            particle.y,
            particle.theta,
            delta_t,
            velocity,
            yaw_rate)
        particle.x = self.rng.normal(x_t[0], std_pos[0])
        particle.y = self.rng.normal(x_t[1], std_pos[1])
        particle.theta = self.rng.normal(x_t[2], std_pos[2])


if __name__ == '__main__':
    pass
