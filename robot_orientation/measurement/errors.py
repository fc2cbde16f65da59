"""
errors.py - 방향 변환 오류 정의

샘플 단위 변환 실패를 표현합니다.
모든 오류는 해당 샘플에만 국한되며, 다음 샘플 처리에 영향을 주지 않습니다.

Author: Robot Orientation Team
"""

from typing import Tuple


class ConversionError(ValueError):
    """단일 샘플 변환 실패 (기본 클래스)"""


class DegenerateOrientation(ConversionError):
    """
    쿼터니언 크기가 0이거나 유한하지 않음

    정규화(0으로 나누기)가 불가능하므로 변환을 중단합니다.
    """

    def __init__(self, components: Tuple[float, float, float, float], magnitude: float):
        self.components = components
        self.magnitude = magnitude
        w, x, y, z = components
        super().__init__(
            f"Degenerate orientation quaternion "
            f"(w={w}, x={x}, y={y}, z={z}, |q|={magnitude})"
        )


class EncodingFailure(ConversionError):
    """결과를 출력 페이로드로 직렬화(또는 역직렬화)할 수 없음"""
