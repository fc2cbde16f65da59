"""
measurement 모듈 - IMU 쿼터니언 → 방향 메시지 변환

단일 샘플 단위의 상태 없는 기하 변환을 제공합니다.

주요 기능:
- 쿼터니언 검증 및 정규화
- 고정 회전 순서(외재적 xyz) 오일러 분해
- 도 단위 변환, 반올림, yaw [0, 360) 래핑
- 방향 메시지 JSON 인코딩/디코딩
"""

from .errors import (
    ConversionError,
    DegenerateOrientation,
    EncodingFailure
)

from .quaternion_validator import (
    QuaternionValidator,
    OrientationSample,
    UnitQuaternion
)

from .euler_converter import (
    EulerConverter,
    EulerAngles,
    EULER_SEQUENCE
)

from .angle_normalizer import (
    AngleNormalizer,
    DegreeAngles,
    round_half_away_from_zero,
    wrap_yaw_360
)

from .orientation_encoder import (
    OrientationEncoder,
    OrientationResult,
    FIELD_NAMES
)

__all__ = [
    'ConversionError',
    'DegenerateOrientation',
    'EncodingFailure',
    'QuaternionValidator',
    'OrientationSample',
    'UnitQuaternion',
    'EulerConverter',
    'EulerAngles',
    'EULER_SEQUENCE',
    'AngleNormalizer',
    'DegreeAngles',
    'round_half_away_from_zero',
    'wrap_yaw_360',
    'OrientationEncoder',
    'OrientationResult',
    'FIELD_NAMES',
]
