"""
SystemConfig 단위 테스트
"""

import yaml
import pytest

from robot_orientation.config.system_config import (
    SystemConfig,
    TopicConfig,
    load_config,
    create_default_config
)


class TestSystemConfig:
    """설정 생성/로드 테스트"""

    def test_defaults(self):
        config = SystemConfig()
        assert config.topics.node_name == 'robot_orientation'
        assert config.topics.sub_topic == 'imu/data'
        assert config.topics.pub_topic == 'robot_orientation/data'
        assert config.conversion.gimbal_lock_threshold == 85.0
        assert config.output.output_path is None

    def test_from_dict_partial(self):
        config = SystemConfig.from_dict({
            'topics': {'pub_topic': 'orientation'},
            'output': {'log_level': 'DEBUG'},
        })
        assert config.topics.pub_topic == 'orientation'
        assert config.topics.sub_topic == 'imu/data'
        assert config.output.log_level == 'DEBUG'
        assert config.input.format == 'auto'

    def test_from_dict_unknown_key(self):
        with pytest.raises(TypeError):
            SystemConfig.from_dict({'topics': {'no_such_field': 1}})

    def test_save_and_load(self, tmp_path):
        path = tmp_path / 'config.yaml'
        config = SystemConfig(topics=TopicConfig(sub_topic='imu/raw'))
        config.conversion.gimbal_lock_threshold = 80.0
        config.save(str(path))

        with open(path) as f:
            raw = yaml.safe_load(f)
        assert raw['topics']['sub_topic'] == 'imu/raw'

        loaded = load_config(str(path))
        assert loaded == config

    def test_missing_file_uses_defaults(self, tmp_path):
        config = load_config(str(tmp_path / 'missing.yaml'))
        assert config == SystemConfig()

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / 'empty.yaml'
        path.write_text('')
        assert load_config(str(path)) == SystemConfig()

    def test_create_default_config(self, tmp_path):
        path = tmp_path / 'default.yaml'
        config = create_default_config(str(path))
        assert path.exists()
        assert load_config(str(path)) == config
