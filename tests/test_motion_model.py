"""
Tests for the velocity motion model.
"""

import math

import numpy as np
import pytest

from pf_localization.motion_model import MotionModel, YAW_RATE_EPSILON
from pf_localization.particle import Particle


class TestNoiseFreeModel:
    def test_straight_line_motion_is_exact(self, rng):
        model = MotionModel(rng)
        x, y, theta = model.sample_real_model_velocity(0.0, 0.0, 0.0, 1.0, 10.0, 0.0)
        assert (x, y, theta) == (10.0, 0.0, 0.0)

    def test_straight_line_follows_heading(self, rng):
        model = MotionModel(rng)
        x, y, theta = model.sample_real_model_velocity(1.0, 2.0, math.pi / 2, 2.0, 3.0, 0.0)
        assert x == pytest.approx(1.0)
        assert y == pytest.approx(8.0)
        assert theta == math.pi / 2

    def test_turning_motion_matches_closed_form(self, rng):
        model = MotionModel(rng)
        x, y, theta = model.sample_real_model_velocity(0.0, 0.0, 0.0, 1.0, 10.0, 0.1)
        assert theta == pytest.approx(0.1)
        assert x == pytest.approx(10.0 * (math.sin(0.1) - math.sin(0.0)) / 0.1)
        assert y == pytest.approx(10.0 * (math.cos(0.0) - math.cos(0.1)) / 0.1)

    def test_yaw_rate_below_epsilon_takes_straight_branch(self, rng):
        model = MotionModel(rng)
        x, y, theta = model.sample_real_model_velocity(
            0.0, 0.0, 0.0, 1.0, 10.0, YAW_RATE_EPSILON / 2)
        assert (x, y, theta) == (10.0, 0.0, 0.0)

    def test_small_yaw_rate_converges_to_straight_line(self, rng):
        model = MotionModel(rng)
        x, y, _ = model.sample_real_model_velocity(0.0, 0.0, 0.0, 1.0, 10.0, 1e-6)
        assert x == pytest.approx(10.0, abs=1e-6)
        assert y == pytest.approx(0.0, abs=1e-4)


class TestSampledModel:
    def test_zero_noise_moves_particle_exactly(self, rng, zero_noise):
        model = MotionModel(rng)
        particle = Particle(0.0, 0.0, 0.0)
        model.sample_motion_model_velocity(particle, 1.0, zero_noise, 10.0, 0.0)
        assert particle.pose() == (10.0, 0.0, 0.0)

    def test_noise_spreads_particles_around_motion(self, rng):
        model = MotionModel(rng)
        particles = [Particle(0.0, 0.0, 0.0) for _ in range(2000)]
        for particle in particles:
            model.sample_motion_model_velocity(particle, 1.0, [0.5, 0.5, 0.05], 10.0, 0.0)
        xs = np.array([p.x for p in particles])
        thetas = np.array([p.theta for p in particles])
        assert xs.mean() == pytest.approx(10.0, abs=0.1)
        assert xs.std() == pytest.approx(0.5, abs=0.05)
        assert thetas.std() == pytest.approx(0.05, abs=0.01)

    def test_weight_and_associations_untouched(self, rng, zero_noise):
        model = MotionModel(rng)
        particle = Particle(0.0, 0.0, 0.0, weight=0.25)
        particle.associations = [4]
        model.sample_motion_model_velocity(particle, 1.0, zero_noise, 1.0, 0.5)
        assert particle.weight == 0.25
        assert particle.associations == [4]
