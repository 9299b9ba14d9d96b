"""
Tests for geometry helpers and map loading.
"""

import math

import pytest

from pf_localization.helper_functions import dist, get_error, normalize_angle, read_map_data


def test_dist():
    assert dist(0.0, 0.0, 3.0, 4.0) == 5.0
    assert dist(1.0, 1.0, 1.0, 1.0) == 0.0


@pytest.mark.parametrize("theta,expected", [
    (0.0, 0.0),
    (math.pi / 2, math.pi / 2),
    (3 * math.pi / 2, -math.pi / 2),
    (-5 * math.pi / 2, -math.pi / 2),
])
def test_normalize_angle(theta, expected):
    assert normalize_angle(theta) == pytest.approx(expected)


def test_get_error_wraps_heading():
    error = get_error(1.0, 2.0, math.pi - 0.05, 1.5, 1.0, -math.pi + 0.05)
    assert error[0] == pytest.approx(0.5)
    assert error[1] == pytest.approx(1.0)
    assert error[2] == pytest.approx(0.1)


def test_read_map_data(tmp_path):
    path = tmp_path / 'map_data.txt'
    path.write_text('92.064 -34.777 1\n61.109 -47.132 2\n17.42 -4.5993 3\n')
    landmark_map = read_map_data(str(path))
    assert len(landmark_map) == 3
    first = landmark_map.landmark_list[0]
    assert (first.id, first.x, first.y) == (1, 92.064, -34.777)
    assert [landmark.id for landmark in landmark_map] == [1, 2, 3]


def test_read_map_data_single_row(tmp_path):
    path = tmp_path / 'map_data.txt'
    path.write_text('1.0 2.0 7\n')
    landmark_map = read_map_data(str(path))
    assert [(lm.id, lm.x, lm.y) for lm in landmark_map] == [(7, 1.0, 2.0)]


def test_read_map_data_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_map_data(str(tmp_path / 'missing.txt'))
