"""
ImuLoader 단위 테스트
"""

import json
import math

import pandas as pd
import pytest

from robot_orientation.config.system_config import InputConfig
from robot_orientation.input.imu_loader import ImuLoader
from robot_orientation.measurement.quaternion_validator import OrientationSample


@pytest.fixture
def csv_path(tmp_path):
    path = tmp_path / 'imu.csv'
    pd.DataFrame({
        'stamp': [0.0, 0.01, 0.02],
        'w': [1.0, 0.0, 0.7071067811865476],
        'x': [0.0, 0.0, 0.0],
        'y': [0.0, 0.0, 0.0],
        'z': [0.0, 0.0, 0.7071067811865476],
    }).to_csv(path, index=False)
    return path


@pytest.fixture
def jsonl_path(tmp_path):
    path = tmp_path / 'imu.jsonl'
    lines = [
        json.dumps({'orientation': {'w': 1.0, 'x': 0.0, 'y': 0.0, 'z': 0.0}}),
        '',
        '{broken',
        json.dumps({'header': {'seq': 3}, 'orientation': {'w': 0.0, 'x': 1.0, 'y': 0.0, 'z': 0.0}}),
    ]
    path.write_text('\n'.join(lines) + '\n')
    return path


class TestCsv:
    """CSV 로드 테스트"""

    def test_load(self, csv_path):
        loader = ImuLoader(str(csv_path))
        assert loader.format == 'csv'
        assert len(loader) == 3
        assert loader[0] == {'orientation': {'w': 1.0, 'x': 0.0, 'y': 0.0, 'z': 0.0}}

    def test_load_sample(self, csv_path):
        sample = ImuLoader(str(csv_path)).load_sample(2)
        assert isinstance(sample, OrientationSample)
        assert sample.z == pytest.approx(0.7071067811865476)

    def test_iteration(self, csv_path):
        messages = list(ImuLoader(str(csv_path)))
        assert len(messages) == 3

    def test_custom_columns(self, tmp_path):
        path = tmp_path / 'imu.csv'
        pd.DataFrame({
            'orientation_w': [1.0], 'orientation_x': [0.0],
            'orientation_y': [0.0], 'orientation_z': [0.0],
        }).to_csv(path, index=False)

        config = InputConfig(
            column_w='orientation_w', column_x='orientation_x',
            column_y='orientation_y', column_z='orientation_z'
        )
        assert ImuLoader(str(path), config).load_sample(0) == OrientationSample.identity()

    def test_missing_columns(self, tmp_path):
        path = tmp_path / 'imu.csv'
        pd.DataFrame({'w': [1.0], 'x': [0.0]}).to_csv(path, index=False)
        with pytest.raises(ValueError, match='Missing quaternion columns'):
            ImuLoader(str(path))

    def test_empty_cell_is_nan(self, tmp_path):
        path = tmp_path / 'imu.csv'
        path.write_text('w,x,y,z\n1.0,,0.0,0.0\n')
        msg = ImuLoader(str(path))[0]
        assert math.isnan(msg['orientation']['x'])


class TestJsonl:
    """JSONL 로드 테스트"""

    def test_load(self, jsonl_path):
        loader = ImuLoader(str(jsonl_path))
        assert loader.format == 'jsonl'
        assert len(loader) == 3
        assert loader.load_sample(2) == OrientationSample(w=0.0, x=1.0, y=0.0, z=0.0)

    def test_broken_line(self, jsonl_path):
        loader = ImuLoader(str(jsonl_path))
        with pytest.raises(ValueError, match='line 2'):
            loader.load_message(1)

    def test_explicit_format(self, tmp_path):
        path = tmp_path / 'imu.txt'
        path.write_text(json.dumps({'orientation': {'w': 1, 'x': 0, 'y': 0, 'z': 0}}) + '\n')
        loader = ImuLoader(str(path), InputConfig(format='jsonl'))
        assert len(loader) == 1


class TestErrors:
    """오류 처리 테스트"""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ImuLoader(str(tmp_path / 'missing.csv'))

    def test_unknown_suffix(self, tmp_path):
        path = tmp_path / 'imu.bin'
        path.write_bytes(b'')
        with pytest.raises(ValueError):
            ImuLoader(str(path))

    def test_unsupported_format(self, csv_path):
        with pytest.raises(ValueError):
            ImuLoader(str(csv_path), InputConfig(format='parquet'))

    def test_index_out_of_range(self, csv_path):
        with pytest.raises(IndexError):
            ImuLoader(str(csv_path)).load_message(3)
