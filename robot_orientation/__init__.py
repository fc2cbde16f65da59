"""
robot_orientation - IMU 쿼터니언 기반 로봇 방향 추정

주요 특징:
- IMU 방향 쿼터니언 검증/정규화
- 외재적 xyz 오일러 분해 (pitch, roll, yaw 매핑 고정)
- 정수 도 반올림 및 yaw [0, 360) 래핑
- compact JSON 방향 메시지 {"yaw", "pitch", "roll"}

Version: 1.0
Author: Robot Orientation Team
"""

__version__ = "1.0.0"
__author__ = "Robot Orientation Team"

from .measurement import (
    ConversionError,
    DegenerateOrientation,
    EncodingFailure,
    QuaternionValidator,
    OrientationSample,
    UnitQuaternion,
    EulerConverter,
    EulerAngles,
    AngleNormalizer,
    DegreeAngles,
    OrientationEncoder,
    OrientationResult
)

from .processor import (
    OrientationProcessor,
    quaternion_to_orientation
)

__all__ = [
    # Errors
    'ConversionError',
    'DegenerateOrientation',
    'EncodingFailure',
    # Measurement
    'QuaternionValidator',
    'OrientationSample',
    'UnitQuaternion',
    'EulerConverter',
    'EulerAngles',
    'AngleNormalizer',
    'DegreeAngles',
    'OrientationEncoder',
    'OrientationResult',
    # Processor
    'OrientationProcessor',
    'quaternion_to_orientation',
]
