"""
AngleNormalizer 단위 테스트
"""

import math

import numpy as np
import pytest

from robot_orientation.measurement.angle_normalizer import (
    AngleNormalizer,
    DegreeAngles,
    round_half_away_from_zero,
    wrap_yaw_360
)
from robot_orientation.measurement.euler_converter import EulerAngles


class TestRounding:
    """반올림 테스트"""

    @pytest.mark.parametrize("value, expected", [
        (44.5, 45.0),
        (-44.5, -45.0),
        (0.5, 1.0),
        (-0.5, -1.0),
        (2.5, 3.0),
        (44.4999, 44.0),
        (-44.4999, -44.0),
        (89.9999999, 90.0),
        (0.49999999999999994, 0.0),
        (180.0, 180.0),
    ])
    def test_half_away_from_zero(self, value, expected):
        assert round_half_away_from_zero(value) == expected

    def test_no_negative_zero(self):
        result = round_half_away_from_zero(-0.3)
        assert result == 0.0
        assert math.copysign(1.0, result) == 1.0


class TestYawWrap:
    """yaw 래핑 테스트"""

    @pytest.mark.parametrize("value, expected", [
        (0.0, 0.0),
        (90.0, 90.0),
        (-90.0, 270.0),
        (-1.0, 359.0),
        (-180.0, 180.0),
        (180.0, 180.0),
    ])
    def test_wrap(self, value, expected):
        assert wrap_yaw_360(value) == expected

    def test_wrap_negative_zero(self):
        assert math.copysign(1.0, wrap_yaw_360(-0.0)) == 1.0


class TestAngleNormalizer:
    """AngleNormalizer 클래스 테스트"""

    def test_zero(self):
        angles = AngleNormalizer().normalize(EulerAngles(pitch=0.0, roll=0.0, yaw=0.0))
        assert angles == DegreeAngles(yaw=0.0, pitch=0.0, roll=0.0)

    def test_degrees_and_rounding(self):
        euler = EulerAngles(
            pitch=np.deg2rad(12.6),
            roll=np.deg2rad(-33.4),
            yaw=np.deg2rad(-0.4)
        )
        angles = AngleNormalizer().normalize(euler)
        assert angles.pitch == 13.0
        assert angles.roll == -33.0
        assert angles.yaw == 0.0
        assert math.copysign(1.0, angles.yaw) == 1.0

    def test_yaw_only_wrapped(self):
        euler = EulerAngles(
            pitch=np.deg2rad(-120.0),
            roll=np.deg2rad(-60.0),
            yaw=np.deg2rad(-120.0)
        )
        angles = AngleNormalizer().normalize(euler)
        assert angles.yaw == 240.0
        assert angles.pitch == -120.0
        assert angles.roll == -60.0

    def test_yaw_never_360(self):
        euler = EulerAngles(pitch=0.0, roll=0.0, yaw=np.deg2rad(-0.2))
        assert AngleNormalizer().normalize(euler).yaw == 0.0

        euler = EulerAngles(pitch=0.0, roll=0.0, yaw=-np.pi)
        assert AngleNormalizer().normalize(euler).yaw == 180.0

    def test_yaw_range(self):
        normalizer = AngleNormalizer()
        for yaw in np.linspace(-np.pi, np.pi, 721):
            angles = normalizer.normalize(EulerAngles(pitch=0.0, roll=0.0, yaw=float(yaw)))
            assert 0.0 <= angles.yaw < 360.0
