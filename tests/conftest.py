"""
pytest 공통 설정 및 fixture
"""

import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).parents[1]))


@pytest.fixture
def yaw_90_message():
    """Z축 +90° 회전 IMU 메시지"""
    s = float(np.sqrt(0.5))
    return {'orientation': {'w': s, 'x': 0.0, 'y': 0.0, 'z': s}}


@pytest.fixture
def identity_message():
    return {'orientation': {'w': 1.0, 'x': 0.0, 'y': 0.0, 'z': 0.0}}


@pytest.fixture
def zero_message():
    return {'orientation': {'w': 0.0, 'x': 0.0, 'y': 0.0, 'z': 0.0}}
