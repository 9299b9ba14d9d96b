#!/usr/bin/env python3
'''
Runs the particle filter against a simulated robot: one prediction, weight
update and resampling per time step. Logs the estimation error and
optionally plots the trajectories at the end of the run.
'''

import argparse
import logging

import matplotlib.pyplot as plt
import numpy as np

from pf_localization.config import get_param, load_parameters
from pf_localization.helper_functions import get_error, read_map_data
from pf_localization.particle_filter import ParticleFilter
from pf_localization.simulator import Simulator, random_map

logger = logging.getLogger(__name__)


class PfNode:

    def __init__(self, params):
        # Load parameters
        self.params = params
        self.load_parameters()

        # Single random source for the simulation and the filter
        self.rng = np.random.default_rng(self.seed)

        # Initialize the map
        if self.map_file is not None:
            self.map_landmarks = read_map_data(self.map_file)
        else:
            self.map_landmarks = random_map(self.rng)
        logger.info('Map landmarks:    %d', len(self.map_landmarks))

        # Initialize Algorithm
        self.particle_filter = ParticleFilter(self.num_particles, rng=self.rng)
        self.simulator = Simulator(
            self.map_landmarks,
            self.initial_pose,
            self.params,
            self.rng)

        # Trajectories kept for plotting, [x, y, theta] rows
        self.ground_truth = np.zeros((0, 3))
        self.estimate = np.zeros((0, 3))
        self.errors = np.zeros((0, 3))


    def load_parameters(self):
        """
        Load the parameters of the run
        """
        self.num_particles = int(get_param(self.params, 'num_particles', 5))
        self.seed = get_param(self.params, 'seed')
        self.delta_t = get_param(self.params, 'delta_t', 0.1)
        self.steps = int(get_param(self.params, 'steps', 200))
        self.sensor_range = get_param(self.params, 'sensor_range', 50.0)
        self.sigma_pos = get_param(self.params, 'sigma_pos', [0.3, 0.3, 0.01])
        self.sigma_process = get_param(self.params, 'sigma_process', [0.3, 0.3, 0.01])
        self.sigma_landmark = get_param(self.params, 'sigma_landmark', [0.3, 0.3])
        self.velocity = get_param(self.params, 'velocity', 5.0)
        self.yaw_rate = get_param(self.params, 'yaw_rate', 0.1)
        self.initial_pose = get_param(self.params, 'initial_pose', [0.0, 0.0, 0.0])
        self.map_file = get_param(self.params, 'map_file')
        logger.info('Particles:        %s', self.num_particles)
        logger.info('Seed:             %s', self.seed)
        logger.info('Steps:            %s', self.steps)
        logger.info('Sensor range:     %s', self.sensor_range)


    def step(self, iteration):
        '''
        One filter cycle.
        '''
        if not self.particle_filter.is_initialized:
            x, y, theta = self.simulator.gps()
            self.particle_filter.init(x, y, theta, self.sigma_pos)
        else:
            # Move the robot and predict with the same control
            self.simulator.move(self.delta_t, self.velocity, self.yaw_rate)
            self.particle_filter.prediction(
                self.delta_t,
                self.sigma_process,
                self.velocity,
                self.yaw_rate)

        observations = self.simulator.observe()
        self.particle_filter.update_weights(
            self.sensor_range,
            self.sigma_landmark,
            observations,
            self.map_landmarks)
        max_weight = self.particle_filter.max_weight()
        best = self.particle_filter.best_particle()
        self.particle_filter.resample()

        gt = self.simulator.pose()
        error = get_error(gt[0], gt[1], gt[2], best.x, best.y, best.theta)
        self.ground_truth = np.append(self.ground_truth, [gt], axis=0)
        self.estimate = np.append(self.estimate, [best.pose()], axis=0)
        self.errors = np.append(self.errors, [error], axis=0)
        logger.debug('Step %d: observations %d, max weight %g, error %s, associations [%s]',
                     iteration, len(observations), max_weight, error,
                     self.particle_filter.get_associations(best))
        return error


    def run(self):
        for iteration in range(self.steps):
            self.step(iteration)
        mean_error = self.errors.mean(axis=0) if len(self.errors) else np.zeros(3)
        logger.info('Mean error x: %.3f  y: %.3f  theta: %.3f',
                    mean_error[0], mean_error[1], mean_error[2])
        return mean_error


    def plot_data(self):
        '''
        Plot ground truth, estimate and landmarks.
        '''
        landmarks = np.array([[landmark.x, landmark.y] for landmark in self.map_landmarks])
        plt.cla()
        if len(landmarks):
            plt.scatter(landmarks[:, 0], landmarks[:, 1], s=30, c='b', marker='^',
                        label='Landmarks')
        plt.plot(self.ground_truth[:, 0], self.ground_truth[:, 1], 'g', label='Ground truth')
        plt.plot(self.estimate[:, 0], self.estimate[:, 1], 'r--', label='Best particle')
        particles = self.particle_filter.particles
        plt.scatter([p.x for p in particles], [p.y for p in particles], s=5, c='k', alpha=0.5)
        plt.xlabel('X')
        plt.ylabel('Y')
        plt.title('Particle Filter Localization')
        plt.grid(True)
        plt.legend(loc='lower left')
        plt.axis('equal')
        plt.show()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Particle filter localization node')
    parser.add_argument('-c', '--config', help='JSON parameter file.')
    parser.add_argument('-m', '--map', dest='map_file', help='Map file with x y id rows.')
    parser.add_argument('-n', '--num_particles', type=int, help='Number of particles.')
    parser.add_argument('-t', '--steps', type=int, help='Number of time steps.')
    parser.add_argument('-s', '--seed', type=int, help='Seed of the random generator.')
    parser.add_argument('-p', '--plot', action='store_true', help='Plot the trajectories.')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log every step.')
    return parser.parse_args(argv)


def main(argv=None):
    # Parse the command-line arguments
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='[%(levelname)s] %(name)s: %(message)s')
    params = load_parameters(args.config, {
        'map_file': args.map_file,
        'num_particles': args.num_particles,
        'steps': args.steps,
        'seed': args.seed,
    })

    # Create an instance of the PfNode class
    pf_node = PfNode(params)
    pf_node.run()
    if args.plot:
        pf_node.plot_data()
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
