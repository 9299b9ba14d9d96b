#!/usr/bin/env python3
'''
Geometry helpers and map file loading shared by the filter and the node.
'''

import numpy as np

from pf_localization.landmark import Map


def dist(x1, y1, x2, y2):
    '''
    Euclidean distance between two 2D points.
    '''
    return np.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)


def normalize_angle(theta):
    '''
    Wrap an angle into [-pi, pi).
    '''
    return (theta + np.pi) % (2 * np.pi) - np.pi


def get_error(gt_x, gt_y, gt_theta, pf_x, pf_y, pf_theta):
    '''
    Absolute error between ground truth and estimate.
    Output:
        [error_x, error_y, error_theta], heading error wrapped to [0, pi].
    '''
    error_x = abs(pf_x - gt_x)
    error_y = abs(pf_y - gt_y)
    error_theta = abs(normalize_angle(pf_theta - gt_theta))
    return np.array([error_x, error_y, error_theta])


def read_map_data(filename):
    '''
    Read a map file with one landmark per line: x y id
    '''
    data = np.loadtxt(filename, ndmin=2)
    return Map.from_array(data)


if __name__ == '__main__':
    pass
