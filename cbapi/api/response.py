"""
ABOUTME: Classifies completed HTTP exchanges and unwraps the {"data": ...} envelope

Coinbase v2 상태 코드
    200 OK / 201 Created / 204 No content (본문 없음)
    400 Bad Request - 오류 메시지 JSON 반환
    401 Unauthorized - 인증 실패
    402 2FA Token required - CB-2FA-Token 헤더 필요
    403 Invalid scope - 필요한 scope 미승인
    404 Not Found
    429 Too Many Requests - Rate Limit
    500 Internal Server Error
    503 Service Unavailable - 점검 또는 throttling
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from cbapi.api.transport import HttpResponse
from cbapi.auth.config import CoinbaseAPIConfig
from cbapi.exceptions import ErrorKind, GenericExchangeError, exception_for_kind


logger = logging.getLogger(__name__)

DEFAULT_STATUS = 200
NIL_SENTINEL = "nil"

STATUS_ERROR_KINDS: Mapping[int, ErrorKind] = {
    400: ErrorKind.GENERIC,
    401: ErrorKind.AUTHENTICATION,
    402: ErrorKind.AUTHENTICATION,
    403: ErrorKind.AUTHENTICATION,
    404: ErrorKind.GENERIC,
    429: ErrorKind.RATE_LIMIT,
    500: ErrorKind.SERVICE_UNAVAILABLE,
    503: ErrorKind.SERVICE_UNAVAILABLE,
}


def error_kind_for_status(status: int) -> ErrorKind:
    """상태 코드 -> ErrorKind (정의되지 않은 코드는 GENERIC)"""
    return STATUS_ERROR_KINDS.get(status, ErrorKind.GENERIC)


def to_json(value: Any) -> str:
    """진단용 직렬화"""
    return json.dumps(value, ensure_ascii=False, default=str)


def extract_error_message(body: Any) -> str:
    """
    오류 메시지 추출

    errors.message -> 직렬화된 errors -> 직렬화된 전체 본문 순으로 사용하며
    빈 문자열을 반환하지 않는다.
    """
    if not isinstance(body, Mapping) or "errors" not in body:
        return to_json(body)

    errors = body["errors"]
    if isinstance(errors, Mapping) and errors.get("message"):
        return str(errors["message"])
    return to_json(errors)


@dataclass(frozen=True)
class Classification:
    """응답 분류 결과"""
    success: bool
    status: int
    kind: Optional[ErrorKind] = None
    message: Optional[str] = None


class ResponseClassifier:
    """HTTP 응답 분류기 (Received -> Success | Failed)"""

    @staticmethod
    def extract_status(response: Optional[HttpResponse]) -> int:
        """전송 계층 상태 코드, 없으면 본문의 status, 그것도 없으면 200"""
        if response is None:
            return DEFAULT_STATUS
        if response.status is not None:
            return int(response.status)
        body = response.body
        if isinstance(body, Mapping):
            try:
                return int(body["status"])
            except (KeyError, TypeError, ValueError):
                pass
        return DEFAULT_STATUS

    @staticmethod
    def has_body(response: Optional[HttpResponse]) -> bool:
        """응답 객체 존재 여부 (None/'nil'은 없는 것으로 간주)"""
        if response is None:
            return False
        return response.body is not None and response.body != NIL_SENTINEL

    def classify(self, response: Optional[HttpResponse]) -> Classification:
        """
        응답 분류

        Args:
            response: 전송 계층 응답

        Returns:
            Classification
        """
        status = self.extract_status(response)
        # 204 등 본문이 없는 상태 코드는 본문과 무관하게 성공
        if status in CoinbaseAPIConfig.SKIP_JSON_ON_STATUS_CODES:
            return Classification(success=True, status=status)
        if self.has_body(response) and status < 300:
            return Classification(success=True, status=status)

        body = response.body if response is not None else None
        return Classification(
            success=False,
            status=status,
            kind=error_kind_for_status(status),
            message=extract_error_message(body)
        )

    def check(self, response: Optional[HttpResponse]) -> Any:
        """
        실패 응답이면 분류된 예외 발생, 성공이면 본문 반환 (본문 없는 성공은 {})

        Raises:
            AuthenticationError, RateLimitError, ServiceUnavailableError, GenericExchangeError
        """
        result = self.classify(response)
        if result.success:
            return response.body if self.has_body(response) else {}

        logger.error(f"API Error [{result.status}] {result.kind.value}: {result.message}")
        raise exception_for_kind(result.kind, result.message, result.status)


def unwrap_data(body: Any, exchange_id: str = CoinbaseAPIConfig.EXCHANGE_ID) -> Any:
    """
    성공 응답의 최상위 'data' 값 추출

    모든 성공 응답은 {"data": ...} 형식이어야 하며 data가 없거나 비어있으면
    ([], {}, "", None 포함) 잘못된 응답으로 처리한다.

    Raises:
        GenericExchangeError: data가 없거나 비어있는 경우
    """
    datum = body.get("data") if isinstance(body, Mapping) else None
    if not datum:
        raise GenericExchangeError(f"{exchange_id} failed due to a malformed response {to_json(body)}")
    return datum
