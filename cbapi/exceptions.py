"""
ABOUTME: Error kinds and exception classes raised by the Coinbase API pipeline
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """분류된 오류 종류"""
    AUTHENTICATION = "authentication"
    RATE_LIMIT = "rate_limit"
    SERVICE_UNAVAILABLE = "service_unavailable"
    GENERIC = "generic"


class CoinbaseAPIException(Exception):
    """Coinbase API 기본 예외 클래스"""

    kind: ErrorKind = ErrorKind.GENERIC

    def __init__(self, message: str, http_status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.http_status = http_status

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind.value}, http_status={self.http_status}, message={self.message!r})"


class AuthenticationError(CoinbaseAPIException):
    """인증 관련 오류 (자격증명 누락, 401/402/403)"""
    kind = ErrorKind.AUTHENTICATION


class RateLimitError(CoinbaseAPIException):
    """Rate Limit 초과 오류 (429, DDoS protection)"""
    kind = ErrorKind.RATE_LIMIT


class ServiceUnavailableError(CoinbaseAPIException):
    """거래소 서비스 불가 (500/503)"""
    kind = ErrorKind.SERVICE_UNAVAILABLE


class GenericExchangeError(CoinbaseAPIException):
    """일반 거래소 오류 (400/404/잘못된 응답/미분류 상태코드)"""
    kind = ErrorKind.GENERIC


class TransportError(GenericExchangeError):
    """HTTP 전송 계층 오류"""
    pass


def exception_for_kind(kind: ErrorKind,
                       message: str,
                       http_status: Optional[int] = None) -> CoinbaseAPIException:
    """
    ErrorKind에 대응하는 예외 인스턴스 생성

    Args:
        kind: 오류 종류
        message: 오류 메시지
        http_status: HTTP 상태 코드

    Returns:
        kind에 맞는 예외 인스턴스
    """
    if kind is ErrorKind.AUTHENTICATION:
        return AuthenticationError(message, http_status)
    elif kind is ErrorKind.RATE_LIMIT:
        return RateLimitError(message, http_status)
    elif kind is ErrorKind.SERVICE_UNAVAILABLE:
        return ServiceUnavailableError(message, http_status)
    elif kind is ErrorKind.GENERIC:
        return GenericExchangeError(message, http_status)
    raise ValueError(f"Unknown error kind: {kind}")
