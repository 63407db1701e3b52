"""ABOUTME: Coinbase REST pipeline - transport, response classification, normalization and clients"""

# 클라이언트
from .coinbase.client import CoinbaseClient

# 베이스 클래스
from .base.client import BaseAPIClient

# 전송 계층 / 응답 처리
from .transport import AiohttpTransport, HttpResponse, Transport
from .response import Classification, ResponseClassifier, error_kind_for_status, unwrap_data
from .normalizer import DomainNormalizer, common_currency_code

__all__ = [
    # 클라이언트
    "CoinbaseClient",

    # 베이스 클래스
    "BaseAPIClient",

    # 전송 계층 / 응답 처리
    "AiohttpTransport",
    "HttpResponse",
    "Transport",
    "Classification",
    "ResponseClassifier",
    "error_kind_for_status",
    "unwrap_data",
    "DomainNormalizer",
    "common_currency_code",
]
