"""
input 모듈 - IMU 데이터 입력 처리

기록된 CSV/JSONL IMU 메시지 로드를 지원합니다.
"""

from .imu_loader import ImuLoader, SUPPORTED_FORMATS

__all__ = ['ImuLoader', 'SUPPORTED_FORMATS']
