"""
imu_loader.py - 기록된 IMU 방향 샘플 로더

CSV 또는 JSON Lines 파일에서 IMU 메시지를 로드합니다.
각 메시지는 sensor_msgs/Imu와 같은 형태의 딕셔너리
{'orientation': {'w': .., 'x': .., 'y': .., 'z': ..}} 로 제공됩니다.

지원 형식:
1. CSV: w, x, y, z 컬럼 (컬럼 이름은 InputConfig로 변경 가능)
2. JSONL: 한 줄에 하나의 메시지 (orientation 외 필드는 무시)

Version: 1.0
Author: Robot Orientation Team
"""

import json
import pandas as pd
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional
import logging

from ..config.system_config import InputConfig
from ..measurement.quaternion_validator import OrientationSample

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ('csv', 'jsonl')


class ImuLoader:
    """
    IMU 방향 메시지 로더

    Example:
        >>> loader = ImuLoader("./imu_orientation.csv")
        >>> for msg in loader:
        ...     payload = processor.process_message(msg)
    """

    def __init__(
        self,
        data_path: str,
        config: Optional[InputConfig] = None
    ):
        self.data_path = Path(data_path)
        self.config = config or InputConfig()

        if not self.data_path.exists():
            raise FileNotFoundError(f"IMU data not found: {data_path}")

        self.format = self._detect_format()

        if self.format == 'csv':
            self._load_csv()
        else:
            self._load_jsonl()

        logger.info(f"ImuLoader: {self.num_samples} samples, format={self.format}")

    def _detect_format(self) -> str:
        """파일 형식 결정"""
        fmt = self.config.format.lower()
        if fmt == 'auto':
            suffix = self.data_path.suffix.lower()
            if suffix == '.csv':
                return 'csv'
            if suffix in ('.jsonl', '.ndjson', '.json'):
                return 'jsonl'
            raise ValueError(f"Cannot detect IMU data format from suffix: {self.data_path.name}")

        if fmt not in SUPPORTED_FORMATS:
            raise ValueError(f"Unsupported IMU data format: {self.config.format}")

        return fmt

    def _load_csv(self):
        """CSV 로드"""
        self._columns = {
            'w': self.config.column_w,
            'x': self.config.column_x,
            'y': self.config.column_y,
            'z': self.config.column_z,
        }

        self.imu_df = pd.read_csv(self.data_path)

        missing = [c for c in self._columns.values() if c not in self.imu_df.columns]
        if missing:
            raise ValueError(f"Missing quaternion columns in {self.data_path.name}: {missing}")

        self._lines: List[str] = []
        self.num_samples = len(self.imu_df)

    def _load_jsonl(self):
        """JSON Lines 로드 (파싱은 메시지 단위로 지연)"""
        with open(self.data_path, 'r') as f:
            self._lines = [line.strip() for line in f if line.strip()]

        self.imu_df = None
        self.num_samples = len(self._lines)

    def __len__(self) -> int:
        return self.num_samples

    def __getitem__(self, idx: int) -> Dict[str, Any]:
        return self.load_message(idx)

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        for idx in range(self.num_samples):
            yield self.load_message(idx)

    def load_message(self, idx: int) -> Dict[str, Any]:
        """
        메시지 로드

        Raises:
            IndexError: 범위를 벗어난 인덱스
            ValueError: JSON 형식 오류 (해당 줄만)
        """
        if idx < 0 or idx >= self.num_samples:
            raise IndexError(f"Sample index {idx} out of range")

        if self.format == 'csv':
            row = self.imu_df.iloc[idx]
            return {
                'orientation': {
                    name: float(row[column]) for name, column in self._columns.items()
                }
            }

        try:
            msg = json.loads(self._lines[idx])
        except ValueError as e:
            raise ValueError(f"Invalid JSON at line {idx + 1}: {e}") from e

        if not isinstance(msg, dict):
            raise ValueError(f"Line {idx + 1} is not a JSON object")

        return msg

    def load_sample(self, idx: int) -> OrientationSample:
        """메시지를 OrientationSample로 변환하여 로드"""
        return OrientationSample.from_message(self.load_message(idx))
