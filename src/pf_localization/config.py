#!/usr/bin/env python3
'''
Parameters of the particle filter node. Defaults can be overridden with a
JSON parameter file and then with the command line.
'''

import json
import logging

logger = logging.getLogger(__name__)

DEFAULT_PARAMETERS = {
    'num_particles': 5,         # Population size of the filter
    'seed': None,               # None draws fresh entropy on every run
    'delta_t': 0.1,             # Time between steps [s]
    'steps': 200,               # Number of simulated steps
    'sensor_range': 50.0,       # Landmark sensor range [m]
    'sigma_pos': [0.3, 0.3, 0.01],      # GPS noise of the initial pose [m, m, rad]
    'sigma_process': [0.3, 0.3, 0.01],  # Process noise of each prediction [m, m, rad]
    'sigma_landmark': [0.3, 0.3],       # Landmark measurement noise [m, m]
    'velocity': 5.0,            # Commanded linear velocity [m/s]
    'yaw_rate': 0.1,            # Commanded angular velocity [rad/s]
    'initial_pose': [0.0, 0.0, 0.0],
    'map_file': None,           # Whitespace separated x y id rows
}

VECTOR_LENGTHS = {
    'sigma_pos': 3,
    'sigma_process': 3,
    'sigma_landmark': 2,
    'initial_pose': 3,
}


def get_param(params, name, default=None):
    '''
    Look up a parameter, falling back to the given default.
    '''
    value = params.get(name)
    if value is None:
        return default
    return value


def check_parameters(params):
    '''
    Validate vector lengths of the noise parameters.
    '''
    for name, length in VECTOR_LENGTHS.items():
        value = params.get(name)
        if value is not None and len(value) != length:
            raise ValueError('%s needs %d values, got %d' % (name, length, len(value)))
    return params


def load_parameters(filename=None, overrides=None):
    '''
    Build the parameter set: defaults, then the JSON file, then overrides.
    Unknown parameter names raise KeyError.
    '''
    params = dict(DEFAULT_PARAMETERS)
    if filename is not None:
        with open(filename, 'r', encoding='utf-8') as file:
            data = json.load(file)
        for name, value in data.items():
            if name not in DEFAULT_PARAMETERS:
                raise KeyError('unknown parameter: %s' % name)
            params[name] = value
        logger.debug('Loaded parameters from %s', filename)
    for name, value in (overrides or {}).items():
        if value is not None:
            params[name] = value
    return check_parameters(params)


if __name__ == '__main__':
    pass
