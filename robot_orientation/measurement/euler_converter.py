"""
euler_converter.py - 쿼터니언 → 오일러 각도 변환

단위 쿼터니언을 고정된 회전 순서로 분해합니다.

회전 순서 (하위 소비자와의 통신 규약):
- 외재적(extrinsic) x-y-z = 내재적 Z-Y'-X''
- R = Rz(a2) · Ry(a1) · Rx(a0)

축 → 필드 매핑 (센서 장착 규약, 변경 금지):
- a0 (X축 회전) → pitch   # 카메라 X축: 왼쪽
- a1 (Y축 회전) → roll    # 짐벌 락 대상 축
- a2 (Z축 회전) → yaw

부호: 오른손 좌표계, 각 축 기준 반시계 방향이 양수.
Z축 +90° 회전 쿼터니언 → yaw = +90°

Version: 1.0
Author: Robot Orientation Team
"""

import numpy as np
from scipy.spatial.transform import Rotation
from dataclasses import dataclass
from typing import Tuple
import logging

from .quaternion_validator import UnitQuaternion

logger = logging.getLogger(__name__)

EULER_SEQUENCE = 'xyz'


@dataclass(frozen=True)
class EulerAngles:
    """
    오일러 각도 (radians)

    Attributes:
        pitch: X축 회전 [-π, π]
        roll: Y축 회전 [-π/2, π/2] (짐벌 락 대상)
        yaw: Z축 회전 [-π, π]
        gimbal_lock: roll이 ±90° 근처인지 여부
    """
    pitch: float
    roll: float
    yaw: float
    gimbal_lock: bool = False

    def to_array(self) -> np.ndarray:
        """scipy 각도 인덱스 순서 [pitch, roll, yaw]"""
        return np.array([self.pitch, self.roll, self.yaw])

    def to_degrees(self) -> Tuple[float, float, float]:
        """(pitch, roll, yaw) 도 단위 (반올림 없음)"""
        deg = np.rad2deg(self.to_array())
        return float(deg[0]), float(deg[1]), float(deg[2])

    def __repr__(self) -> str:
        p, r, y = self.to_degrees()
        return f"EulerAngles(P={p:.2f}, R={r:.2f}, Y={y:.2f}, gimbal_lock={self.gimbal_lock})"


class EulerConverter:
    """
    쿼터니언 → 오일러 각도 변환기

    scipy Rotation의 닫힌 형식(closed-form) 분해를 사용합니다.
    반복 계산이 없으므로 입력과 무관하게 일정 시간에 완료됩니다.

    짐벌 락 (roll = ±90°):
        pitch와 yaw가 결합되어 유일하게 결정할 수 없습니다.
        이 경우 yaw를 0으로 고정하고 결합된 회전을 pitch에 담은
        분기를 그대로 반환합니다 (오류 아님).

    Example:
        >>> converter = EulerConverter()
        >>> euler = converter.convert(unit_quat)
        >>> print(euler)
    """

    GIMBAL_LOCK_THRESHOLD = 85.0  # 도 (±90°에서 ±5° 이내)

    def __init__(self, gimbal_lock_threshold: float = GIMBAL_LOCK_THRESHOLD):
        """
        Args:
            gimbal_lock_threshold: 짐벌 락 플래그 기준 각도 (도)
        """
        self.gimbal_lock_threshold = gimbal_lock_threshold

    def convert(self, quat: UnitQuaternion) -> EulerAngles:
        """
        단위 쿼터니언에서 오일러 각도로 변환

        Args:
            quat: 단위 쿼터니언

        Returns:
            EulerAngles (radians)
        """
        rot = Rotation.from_quat(quat.to_array())
        angles = rot.as_euler(EULER_SEQUENCE, degrees=False)

        pitch = float(angles[0])
        roll = float(angles[1])
        yaw = float(angles[2])

        return EulerAngles(
            pitch=pitch,
            roll=roll,
            yaw=yaw,
            gimbal_lock=self._check_gimbal_lock(roll)
        )

    def _check_gimbal_lock(self, roll: float) -> bool:
        """
        짐벌 락 근접 여부 확인

        두 번째 축(Y, roll)이 ±90°에 근접하면
        첫 번째/세 번째 축 회전이 결합됩니다.
        """
        roll_deg = np.rad2deg(roll)

        if abs(abs(roll_deg) - 90) < (90 - self.gimbal_lock_threshold):
            logger.debug("Near gimbal lock (roll=%.1f)", roll_deg)
            return True

        return False
