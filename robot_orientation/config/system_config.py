"""
system_config.py - 시스템 설정 관리

robot_orientation 노드의 모든 설정을 통합 관리합니다.
토픽 이름 등은 노드 계층에 주입되며 변환 코어는 참조하지 않습니다.

Version: 1.0
Author: Robot Orientation Team
"""

import yaml
from pathlib import Path
from dataclasses import dataclass, field, asdict
from typing import Dict, Any, Optional
import logging

logger = logging.getLogger(__name__)


@dataclass
class TopicConfig:
    """토픽 설정"""
    node_name: str = "robot_orientation"
    sub_topic: str = "imu/data"
    pub_topic: str = "robot_orientation/data"
    qos_depth: int = 10


@dataclass
class ConversionConfig:
    """변환 설정"""
    # 짐벌 락 플래그 기준 (도, ±90°에서 ±5° 이내)
    gimbal_lock_threshold: float = 85.0


@dataclass
class InputConfig:
    """입력 설정"""
    format: str = "auto"  # "csv", "jsonl" or "auto"

    # CSV 쿼터니언 컬럼
    column_w: str = "w"
    column_x: str = "x"
    column_y: str = "y"
    column_z: str = "z"


@dataclass
class OutputConfig:
    """출력 설정"""
    output_path: Optional[str] = None  # None이면 stdout

    # 로깅
    log_level: str = "INFO"
    log_to_file: bool = False
    log_file: str = "robot_orientation.log"


@dataclass
class SystemConfig:
    """robot_orientation 시스템 전체 설정"""
    topics: TopicConfig = field(default_factory=TopicConfig)
    conversion: ConversionConfig = field(default_factory=ConversionConfig)
    input: InputConfig = field(default_factory=InputConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def save(self, filepath: str):
        """설정을 YAML 파일로 저장"""
        with open(filepath, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

        logger.info(f"Config saved to {filepath}")

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'SystemConfig':
        """딕셔너리에서 설정 생성"""
        return cls(
            topics=TopicConfig(**(d.get('topics') or {})),
            conversion=ConversionConfig(**(d.get('conversion') or {})),
            input=InputConfig(**(d.get('input') or {})),
            output=OutputConfig(**(d.get('output') or {}))
        )


def load_config(filepath: str) -> SystemConfig:
    """
    YAML 파일에서 설정 로드

    Args:
        filepath: 설정 파일 경로

    Returns:
        SystemConfig: 로드된 설정
    """
    path = Path(filepath)

    if not path.exists():
        logger.warning(f"Config file not found: {filepath}, using defaults")
        return SystemConfig()

    with open(path, 'r') as f:
        config_dict = yaml.safe_load(f)

    if config_dict is None:
        return SystemConfig()

    return SystemConfig.from_dict(config_dict)


def create_default_config(save_path: Optional[str] = None) -> SystemConfig:
    """
    기본 설정 생성

    Args:
        save_path: 저장 경로 (None이면 저장 안함)

    Returns:
        SystemConfig: 기본 설정
    """
    config = SystemConfig()

    if save_path:
        config.save(save_path)

    return config
