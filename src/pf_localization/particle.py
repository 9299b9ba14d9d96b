#!/usr/bin/env python3
'''
Particle with robot pose hypothesis, importance weight and the landmark
associations found during the last weight update.
'''

import copy


class Particle:
    def __init__(self,x=0.0,y=0.0,theta=0.0,weight=1.0):
        self.initialize(x,y,theta,weight)

    def initialize(self,x,y,theta,weight=1.0):
        self.x = x
        self.y = y
        self.theta = theta
        self.weight = weight  # Unnormalized importance weight
        # Associations of the most recent weight update only
        self.associations = []
        self.sense_x = []
        self.sense_y = []

    def copy(self):
        '''
        Independent copy of this particle, used when resampling.
        '''
        return copy.deepcopy(self)

    def pose(self):
        return (self.x, self.y, self.theta)

    def __eq__(self, other):
        if not isinstance(other, Particle):
            return NotImplemented
        return (self.pose() == other.pose()
                and self.weight == other.weight
                and self.associations == other.associations
                and self.sense_x == other.sense_x
                and self.sense_y == other.sense_y)

    def __repr__(self):
        return 'Particle(x=%r, y=%r, theta=%r, weight=%r)' % (
            self.x, self.y, self.theta, self.weight)


if __name__ == '__main__':
    pass
