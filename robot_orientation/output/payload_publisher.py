"""
payload_publisher.py - 방향 페이로드 발행

출력 채널(텍스트 스트림 또는 파일)을 소유하고
페이로드를 한 줄에 하나씩 기록합니다.

발행 실패는 PublishError로 보고되며 변환 실패(ConversionError)와 구분됩니다.

Author: Robot Orientation Team
"""

import sys
from pathlib import Path
from typing import Optional, TextIO
import logging

logger = logging.getLogger(__name__)


class PublishError(IOError):
    """출력 채널 기록 실패"""


class PayloadPublisher:
    """
    페이로드 발행기

    Example:
        >>> with PayloadPublisher("robot_orientation/data", "out.jsonl") as publisher:
        ...     publisher.publish('{"yaw":0.0,"pitch":0.0,"roll":0.0}')
    """

    def __init__(
        self,
        topic: str,
        output_path: Optional[str] = None,
        stream: Optional[TextIO] = None
    ):
        """
        Args:
            topic: 발행 토픽 이름
            output_path: 출력 파일 경로 (None이면 stream 또는 stdout)
            stream: 직접 지정할 텍스트 스트림
        """
        self.topic = topic
        self.output_path = Path(output_path) if output_path else None
        self.published_count = 0

        if self.output_path is not None:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            self._stream = open(self.output_path, 'w')
            self._owns_stream = True
        else:
            self._stream = stream if stream is not None else sys.stdout
            self._owns_stream = False

        logger.debug(f"PayloadPublisher: topic={topic}, output={self.output_path or 'stream'}")

    def publish(self, payload: str):
        """
        페이로드 1개 발행

        Raises:
            PublishError: 채널이 닫혔거나 기록 실패
        """
        if self._stream is None:
            raise PublishError(f"Publisher for '{self.topic}' is closed")

        try:
            self._stream.write(payload + '\n')
            self._stream.flush()
        except (OSError, ValueError) as e:
            raise PublishError(f"Failed to publish on '{self.topic}': {e}") from e

        self.published_count += 1

    def close(self):
        """소유한 파일 채널 닫기"""
        if self._stream is not None and self._owns_stream:
            self._stream.close()
            logger.info(f"Published {self.published_count} messages to {self.output_path}")
        self._stream = None

    def __enter__(self) -> 'PayloadPublisher':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
