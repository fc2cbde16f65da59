"""
processor.py - 방향 변환 오케스트레이터

IMU 샘플 1개 → 방향 페이로드 1개를 생성하는 단일 진입점입니다.

파이프라인:
1. QuaternionValidator: 검증 및 정규화
2. EulerConverter: 외재적 xyz 오일러 분해
3. AngleNormalizer: 도 변환, 반올림, yaw 래핑
4. OrientationEncoder: float32 메시지 구성 및 JSON 직렬화

상태를 보관하지 않으므로 여러 스레드에서 동시에 호출해도 안전합니다.
실패는 ConversionError로 호출자(전송 계층)에게 전달되며,
로그 기록/폐기 여부는 호출자가 결정합니다.

Version: 1.0
Author: Robot Orientation Team
"""

from typing import Any, Optional

from .config.system_config import ConversionConfig
from .measurement.quaternion_validator import (
    QuaternionValidator, OrientationSample, UnitQuaternion
)
from .measurement.euler_converter import EulerConverter, EulerAngles
from .measurement.angle_normalizer import AngleNormalizer
from .measurement.orientation_encoder import OrientationEncoder, OrientationResult


class OrientationProcessor:
    """
    IMU 방향 변환 프로세서

    Example:
        >>> processor = OrientationProcessor()
        >>> payload = processor.process(OrientationSample(w=1.0, x=0.0, y=0.0, z=0.0))
        >>> payload
        '{"yaw":0.0,"pitch":0.0,"roll":0.0}'
    """

    def __init__(self, config: Optional[ConversionConfig] = None):
        """
        Args:
            config: 변환 설정 (None이면 기본값)
        """
        self.config = config or ConversionConfig()

        self.validator = QuaternionValidator()
        self.euler_converter = EulerConverter(
            gimbal_lock_threshold=self.config.gimbal_lock_threshold
        )
        self.normalizer = AngleNormalizer()
        self.encoder = OrientationEncoder()

    def to_euler(self, sample: OrientationSample) -> EulerAngles:
        """검증 + 오일러 분해 (radians)"""
        unit_quat: UnitQuaternion = self.validator.normalize(sample)
        return self.euler_converter.convert(unit_quat)

    def convert(self, sample: OrientationSample) -> OrientationResult:
        """
        샘플을 출력 메시지로 변환 (직렬화 전)

        Raises:
            DegenerateOrientation: 크기 0 또는 비유한 쿼터니언
        """
        euler = self.to_euler(sample)
        angles = self.normalizer.normalize(euler)
        return self.encoder.build(angles)

    def process(self, sample: OrientationSample) -> str:
        """
        샘플 1개 처리 → 페이로드 텍스트

        Args:
            sample: IMU 방향 샘플

        Returns:
            '{"yaw":...,"pitch":...,"roll":...}'

        Raises:
            DegenerateOrientation: 크기 0 또는 비유한 쿼터니언
            EncodingFailure: 직렬화 실패
        """
        result = self.convert(sample)
        return self.encoder.encode(result)

    def process_message(self, msg: Any) -> str:
        """orientation 필드를 가진 수신 메시지를 바로 처리"""
        return self.process(OrientationSample.from_message(msg))


# 편의 함수
def quaternion_to_orientation(w: float, x: float, y: float, z: float) -> OrientationResult:
    """
    쿼터니언 성분에서 방향 메시지 생성

    Returns:
        OrientationResult (yaw, pitch, roll; float32 도)
    """
    processor = OrientationProcessor()
    return processor.convert(OrientationSample(w=w, x=x, y=y, z=z))
