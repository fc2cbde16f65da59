"""
main.py - robot_orientation 노드

IMU 메시지를 받아 yaw/pitch/roll 방향 메시지를 발행합니다.

구성:
1. ImuLoader (또는 외부 전송 계층)가 메시지 전달
2. OrientationProcessor가 페이로드 생성 (상태 없음)
3. PayloadPublisher가 출력 토픽으로 발행

변환 실패 샘플은 경고 로그 후 폐기되며 다음 샘플 처리는 계속됩니다.
발행 실패(PublishError)는 변환 실패와 별개로 호출자에게 전파됩니다.

Version: 1.0
Author: Robot Orientation Team
"""

import sys
import argparse
import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, Optional

from .config.system_config import SystemConfig, OutputConfig, load_config
from .input.imu_loader import ImuLoader
from .measurement.errors import ConversionError
from .output.payload_publisher import PayloadPublisher, PublishError
from .processor import OrientationProcessor

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass
class NodeStatistics:
    """노드 처리 통계"""
    received: int = 0
    published: int = 0
    dropped: int = 0     # 변환 실패
    malformed: int = 0   # orientation 필드 누락/형식 오류

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


class OrientationNode:
    """
    방향 변환 노드

    메시지 1개당 콜백 1회를 수행합니다.
    출력 채널은 노드가 소유하며 변환 코어에는 전달하지 않습니다.

    Example:
        >>> config = load_config("config/robot_orientation.yaml")
        >>> with PayloadPublisher(config.topics.pub_topic) as publisher:
        ...     node = OrientationNode(publisher, config)
        ...     node.spin(ImuLoader("imu.csv"))
    """

    def __init__(
        self,
        publisher: PayloadPublisher,
        config: Optional[SystemConfig] = None
    ):
        self.config = config or SystemConfig()
        self.publisher = publisher
        self.processor = OrientationProcessor(self.config.conversion)
        self.stats = NodeStatistics()

        logger.info(
            f"Node '{self.config.topics.node_name}': "
            f"{self.config.topics.sub_topic} -> {self.config.topics.pub_topic}"
        )

    def on_message(self, msg: Any) -> Optional[str]:
        """
        수신 메시지 콜백

        Returns:
            발행된 페이로드 (폐기된 경우 None)

        Raises:
            PublishError: 출력 채널 실패
        """
        self.stats.received += 1

        try:
            payload = self.processor.process_message(msg)
        except ConversionError as e:
            self.stats.dropped += 1
            logger.warning(f"Dropping sample #{self.stats.received}: {e}")
            return None
        except ValueError as e:
            self.stats.malformed += 1
            logger.warning(f"Malformed message #{self.stats.received}: {e}")
            return None

        self.publisher.publish(payload)
        self.stats.published += 1
        logger.debug(f"Published: {payload}")

        return payload

    def spin(
        self,
        messages: Iterable[Any],
        max_messages: Optional[int] = None
    ) -> NodeStatistics:
        """
        메시지 시퀀스를 순서대로 처리

        Args:
            messages: 수신 메시지 시퀀스
            max_messages: 최대 처리 메시지 수

        Returns:
            NodeStatistics
        """
        for i, msg in enumerate(messages):
            if max_messages is not None and i >= max_messages:
                break
            self.on_message(msg)

        logger.info(f"Node stats: {self.stats.to_dict()}")
        return self.stats


class _MessageStream:
    """ImuLoader 순회 중 JSON 형식 오류 줄을 건너뛰지 않고 노드에 전달"""

    def __init__(self, loader: ImuLoader):
        self.loader = loader

    def __iter__(self):
        for idx in range(len(self.loader)):
            try:
                yield self.loader.load_message(idx)
            except ValueError as e:
                # 노드가 malformed로 집계하도록 orientation 없는 메시지 전달
                logger.debug(f"Unreadable message at index {idx}: {e}")
                yield {}


def setup_logging(output_config: OutputConfig, verbose: bool = False):
    """로거 설정"""
    level = logging.DEBUG if verbose else getattr(logging, output_config.log_level.upper(), logging.INFO)

    handlers = [logging.StreamHandler(sys.stderr)]
    if output_config.log_to_file:
        handlers.append(logging.FileHandler(output_config.log_file))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


def main(argv=None) -> int:
    """메인 실행"""
    parser = argparse.ArgumentParser(
        description='robot_orientation: IMU 쿼터니언 → yaw/pitch/roll 방향 메시지'
    )
    parser.add_argument('--input', type=str, required=True,
                        help='IMU 데이터 파일 경로 (CSV 또는 JSONL)')
    parser.add_argument('--config', type=str, default=None,
                        help='설정 파일 경로 (YAML)')
    parser.add_argument('--output', type=str, default=None,
                        help='출력 파일 경로 (기본: stdout)')
    parser.add_argument('--format', type=str, default=None,
                        choices=['auto', 'csv', 'jsonl'],
                        help='입력 형식')
    parser.add_argument('--max-samples', type=int, default=None,
                        help='최대 처리 샘플 수')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='상세 로그 출력')

    args = parser.parse_args(argv)

    # 설정 로드
    config = load_config(args.config) if args.config else SystemConfig()
    if args.format:
        config.input.format = args.format
    if args.output:
        config.output.output_path = args.output

    setup_logging(config.output, verbose=args.verbose)

    try:
        loader = ImuLoader(args.input, config.input)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Failed to load IMU data: {e}")
        return 1

    with PayloadPublisher(config.topics.pub_topic, config.output.output_path) as publisher:
        node = OrientationNode(publisher, config)
        try:
            node.spin(_MessageStream(loader), max_messages=args.max_samples)
        except PublishError as e:
            logger.error(f"Publishing stopped: {e}")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
