"""
config 모듈 - 설정 관리
"""

from .system_config import (
    SystemConfig,
    TopicConfig,
    ConversionConfig,
    InputConfig,
    OutputConfig,
    load_config,
    create_default_config
)

__all__ = [
    'SystemConfig',
    'TopicConfig',
    'ConversionConfig',
    'InputConfig',
    'OutputConfig',
    'load_config',
    'create_default_config',
]
