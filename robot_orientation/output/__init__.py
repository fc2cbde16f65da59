"""
output 모듈 - 페이로드 발행
"""

from .payload_publisher import PayloadPublisher, PublishError

__all__ = ['PayloadPublisher', 'PublishError']
