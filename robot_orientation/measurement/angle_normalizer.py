"""
angle_normalizer.py - 각도 단위 변환 및 yaw 정규화

라디안 → 도 변환, 정수 도 반올림, yaw [0, 360) 래핑을 수행합니다.

Author: Robot Orientation Team
"""

import math
import numpy as np
from dataclasses import dataclass

from .euler_converter import EulerAngles


@dataclass(frozen=True)
class DegreeAngles:
    """
    정규화된 각도 (정수 도, float64)

    Attributes:
        yaw: [0, 360)
        pitch: [-180, 180]
        roll: [-180, 180]
    """
    yaw: float
    pitch: float
    roll: float


def round_half_away_from_zero(value: float) -> float:
    """
    가장 가까운 정수로 반올림 (0.5는 0에서 멀어지는 방향)

    44.5 → 45, -44.5 → -45
    파이썬 round()와 np.round()는 은행원 반올림이므로 사용하지 않음
    """
    truncated = math.trunc(value)
    # value - trunc(value)는 정확히 계산됨
    if abs(value - truncated) >= 0.5:
        truncated += math.copysign(1.0, value)
    # -0.0 제거
    return float(truncated) + 0.0


def wrap_yaw_360(yaw_deg: float) -> float:
    """yaw를 [0, 360) 범위로 변환 (음수면 +360)"""
    if yaw_deg < 0:
        return yaw_deg + 360.0
    return yaw_deg + 0.0


class AngleNormalizer:
    """
    EulerAngles (radians) → DegreeAngles

    모든 유한 입력에 대해 정의되며 실패하지 않습니다.
    """

    def normalize(self, euler: EulerAngles) -> DegreeAngles:
        pitch_deg = round_half_away_from_zero(float(np.rad2deg(euler.pitch)))
        roll_deg = round_half_away_from_zero(float(np.rad2deg(euler.roll)))
        yaw_deg = round_half_away_from_zero(float(np.rad2deg(euler.yaw)))

        return DegreeAngles(
            yaw=wrap_yaw_360(yaw_deg),
            pitch=pitch_deg,
            roll=roll_deg
        )
