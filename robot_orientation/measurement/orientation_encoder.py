"""
orientation_encoder.py - 방향 결과 메시지 인코딩/디코딩

출력 페이로드 형식 (필드 순서/이름은 호환성 규약):
    {"yaw":<float32 [0,360)>,"pitch":<float32 [-180,180]>,"roll":<float32 [-180,180]>}

Version: 1.0
Author: Robot Orientation Team
"""

import json
import numpy as np
from dataclasses import dataclass
from typing import Dict, Any

from .angle_normalizer import DegreeAngles
from .errors import EncodingFailure

FIELD_NAMES = ('yaw', 'pitch', 'roll')


@dataclass
class OrientationResult:
    """
    출력 방향 메시지 (float32, 도 단위)

    Attributes:
        yaw: [0, 360)
        pitch: [-180, 180]
        roll: [-180, 180]
    """
    yaw: np.float32
    pitch: np.float32
    roll: np.float32

    def __post_init__(self):
        self.yaw = np.float32(self.yaw)
        self.pitch = np.float32(self.pitch)
        self.roll = np.float32(self.roll)

    def to_dict(self) -> Dict[str, float]:
        """필드 순서 (yaw, pitch, roll) 유지"""
        return {
            'yaw': float(self.yaw),
            'pitch': float(self.pitch),
            'roll': float(self.roll)
        }

    def is_finite(self) -> bool:
        return bool(np.all(np.isfinite([self.yaw, self.pitch, self.roll])))

    def __repr__(self) -> str:
        return f"OrientationResult(Y={self.yaw:.1f}, P={self.pitch:.1f}, R={self.roll:.1f})"


class OrientationEncoder:
    """
    OrientationResult <-> 텍스트 페이로드 변환

    직렬화 실패 시 EncodingFailure를 발생시키며
    부분적이거나 손상된 페이로드는 반환하지 않습니다.
    """

    def build(self, angles: DegreeAngles) -> OrientationResult:
        """정규화된 각도를 출력 메시지 필드에 매핑 (float32 캐스팅)"""
        return OrientationResult(
            yaw=angles.yaw,
            pitch=angles.pitch,
            roll=angles.roll
        )

    def encode(self, result: OrientationResult) -> str:
        """
        결과를 compact JSON 텍스트로 직렬화

        Raises:
            EncodingFailure: NaN/∞ 포함 또는 직렬화 불가
        """
        try:
            payload = json.dumps(
                result.to_dict(),
                separators=(',', ':'),
                allow_nan=False
            )
        except (TypeError, ValueError, AttributeError) as e:
            raise EncodingFailure(f"Failed to serialize orientation: {e}") from e

        return payload

    def decode(self, payload: str) -> OrientationResult:
        """
        페이로드를 OrientationResult로 역직렬화

        Raises:
            EncodingFailure: JSON 형식 오류, 필드 누락/추가, 숫자가 아닌 값
        """
        try:
            data = json.loads(payload)
        except (TypeError, ValueError) as e:
            raise EncodingFailure(f"Failed to parse orientation payload: {e}") from e

        if not isinstance(data, dict):
            raise EncodingFailure(f"Expected JSON object, got {type(data).__name__}")

        if set(data.keys()) != set(FIELD_NAMES):
            raise EncodingFailure(
                f"Expected fields {list(FIELD_NAMES)}, got {list(data.keys())}"
            )

        values: Dict[str, Any] = {}
        for name in FIELD_NAMES:
            value = data[name]
            # bool은 int의 하위 클래스이므로 제외
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise EncodingFailure(f"Field '{name}' is not numeric: {value!r}")
            values[name] = value

        result = OrientationResult(**values)
        if not result.is_finite():
            raise EncodingFailure(f"Non-finite value in payload: {payload}")

        return result
