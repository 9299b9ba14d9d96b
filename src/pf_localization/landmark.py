#!/usr/bin/env python3
'''
Landmark observations and the known landmark map.
'''

# Observation id of a measurement with no landmark matched
UNASSOCIATED = -1


class LandmarkObservation:
    def __init__(self, x, y, id=UNASSOCIATED):
        '''
        Input:
            x, y: observed position. Vehicle frame when coming from the
                  sensor, map frame once transformed by a particle.
            id: landmark id, UNASSOCIATED until data association.
        '''
        self.id = id
        self.x = x
        self.y = y

    def __repr__(self):
        return 'LandmarkObservation(id=%r, x=%r, y=%r)' % (self.id, self.x, self.y)


class MapLandmark:
    def __init__(self, id, x, y):
        self.id = id
        self.x = x
        self.y = y

    def __repr__(self):
        return 'MapLandmark(id=%r, x=%r, y=%r)' % (self.id, self.x, self.y)


class Map:
    '''
    Read-only list of landmarks in the global map frame.
    '''

    def __init__(self, landmarks=()):
        self._landmark_list = tuple(landmarks)

    @classmethod
    def from_array(cls, data):
        '''
        Build a map from rows of [x, y, id].
        '''
        return cls(MapLandmark(int(row[2]), float(row[0]), float(row[1])) for row in data)

    @property
    def landmark_list(self):
        return self._landmark_list

    def __len__(self):
        return len(self._landmark_list)

    def __iter__(self):
        return iter(self._landmark_list)


if __name__ == '__main__':
    pass
