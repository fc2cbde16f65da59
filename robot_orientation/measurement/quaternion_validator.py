"""
quaternion_validator.py - 쿼터니언 검증 및 정규화

IMU에서 수신한 방향 쿼터니언 (w, x, y, z)을 검증하고
단위 쿼터니언으로 정규화합니다.

- 센서 노이즈/전송 오차로 크기가 1이 아닐 수 있음 → 정규화
- 크기가 0이거나 NaN/∞ 성분 포함 → DegenerateOrientation

Version: 1.0
Author: Robot Orientation Team
"""

import numpy as np
from typing import Any, Tuple
from dataclasses import dataclass

from .errors import DegenerateOrientation


@dataclass(frozen=True)
class OrientationSample:
    """
    IMU 방향 샘플 (정규화 전)

    표현: q = w + xi + yj + zk (float64)
    기준 좌표계 → 센서 좌표계 회전
    """
    w: float
    x: float
    y: float
    z: float

    def to_tuple(self) -> Tuple[float, float, float, float]:
        """(w, x, y, z) 튜플"""
        return (self.w, self.x, self.y, self.z)

    def to_array_wxyz(self) -> np.ndarray:
        """[w, x, y, z] 형식"""
        return np.array([self.w, self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def identity(cls) -> 'OrientationSample':
        """회전 없음"""
        return cls(w=1.0, x=0.0, y=0.0, z=0.0)

    @classmethod
    def from_message(cls, msg: Any) -> 'OrientationSample':
        """
        수신 메시지에서 방향 샘플 추출

        `orientation` 필드의 w, x, y, z만 사용합니다.
        딕셔너리 형식과 속성 형식(sensor_msgs/Imu 등) 모두 지원합니다.

        Args:
            msg: orientation 필드를 가진 메시지

        Returns:
            OrientationSample

        Raises:
            ValueError: orientation 필드 또는 성분 누락, 숫자가 아닌 성분
        """
        if isinstance(msg, dict):
            orientation = msg.get('orientation')
        else:
            orientation = getattr(msg, 'orientation', None)

        if orientation is None:
            raise ValueError("Message has no 'orientation' field")

        values = []
        for name in ('w', 'x', 'y', 'z'):
            if isinstance(orientation, dict):
                if name not in orientation:
                    raise ValueError(f"Orientation is missing component '{name}'")
                value = orientation[name]
            else:
                if not hasattr(orientation, name):
                    raise ValueError(f"Orientation is missing component '{name}'")
                value = getattr(orientation, name)
            try:
                values.append(float(value))
            except (TypeError, ValueError) as e:
                raise ValueError(f"Orientation component '{name}' is not numeric: {value!r}") from e

        return cls(*values)


@dataclass(frozen=True)
class UnitQuaternion:
    """
    단위 쿼터니언 (w² + x² + y² + z² = 1)

    QuaternionValidator를 통해서만 생성합니다.
    """
    w: float
    x: float
    y: float
    z: float

    def to_array(self) -> np.ndarray:
        """[x, y, z, w] 형식 (scipy 표준)"""
        return np.array([self.x, self.y, self.z, self.w])

    def to_array_wxyz(self) -> np.ndarray:
        """[w, x, y, z] 형식"""
        return np.array([self.w, self.x, self.y, self.z])

    @property
    def norm(self) -> float:
        """쿼터니언 크기"""
        return float(np.linalg.norm(self.to_array()))

    @property
    def is_unit(self) -> bool:
        """단위 쿼터니언 여부"""
        return abs(self.norm - 1.0) < 1e-6

    def __repr__(self) -> str:
        return f"UnitQuaternion(w={self.w:.4f}, x={self.x:.4f}, y={self.y:.4f}, z={self.z:.4f})"


class QuaternionValidator:
    """
    쿼터니언 검증/정규화기

    상태를 갖지 않으며 동일 입력에 항상 동일한 결과를 반환합니다.

    Example:
        >>> validator = QuaternionValidator()
        >>> unit = validator.normalize(OrientationSample(w=2.0, x=0.0, y=0.0, z=0.0))
        >>> unit.w
        1.0
    """

    def normalize(self, sample: OrientationSample) -> UnitQuaternion:
        """
        단위 쿼터니언으로 정규화

        Args:
            sample: 원시 방향 샘플

        Returns:
            UnitQuaternion

        Raises:
            DegenerateOrientation: 크기가 0이거나 유한하지 않은 경우
        """
        return self.normalize_components(sample.w, sample.x, sample.y, sample.z)

    def normalize_components(
        self,
        w: float,
        x: float,
        y: float,
        z: float
    ) -> UnitQuaternion:
        """4개 성분을 직접 받아 정규화"""
        arr = np.array([w, x, y, z], dtype=np.float64)
        # 오버플로우 시 크기가 inf가 되므로 같은 경로로 거부됨
        with np.errstate(over='ignore', invalid='ignore'):
            magnitude = float(np.linalg.norm(arr))

        if not np.isfinite(magnitude) or magnitude == 0.0:
            raise DegenerateOrientation((w, x, y, z), magnitude)

        arr = arr / magnitude
        return UnitQuaternion(
            w=float(arr[0]),
            x=float(arr[1]),
            y=float(arr[2]),
            z=float(arr[3])
        )

    def is_valid(self, sample: OrientationSample) -> bool:
        """정규화 가능 여부"""
        try:
            self.normalize(sample)
        except DegenerateOrientation:
            return False
        return True
