"""
ABOUTME: Builds signed Coinbase requests (HMAC-SHA256 key/secret mode or OAuth bearer mode)

CB-ACCESS-SIGN은 secret을 키로 하여 다음 prehash 문자열의 HMAC-SHA256 hex 값이다.

    timestamp + method + requestPath + body

timestamp는 CB-ACCESS-TIMESTAMP 헤더와 반드시 같은 값(Unix epoch 초)이어야 하고,
method는 대문자, body가 없으면(GET 등) 빈 문자열을 사용한다.
"""

import hashlib
import hmac
import logging
import math
import re
import time
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Tuple
from urllib.parse import urlencode

from cbapi.auth.config import (
    COMMON_HEADERS,
    HEADER_ACCESS_KEY,
    HEADER_ACCESS_SIGN,
    HEADER_ACCESS_TIMESTAMP,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
    get_endpoints,
)
from cbapi.auth.models import AccessLevel, Credentials
from cbapi.auth.resolver import CredentialResolver
from cbapi.exceptions import GenericExchangeError


logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{([^}]+)\}")


@dataclass(frozen=True)
class SignedRequest:
    """전송 계층에 한 번 전달되는 서명 완료 요청"""
    url: str
    method: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))


def implode_params(path: str, params: Optional[Mapping[str, Any]] = None) -> Tuple[str, Dict[str, Any]]:
    """
    경로의 {placeholder}를 params 값으로 치환

    Args:
        path: 'prices/{symbol}/spot' 형식의 경로
        params: 요청 파라미터

    Returns:
        (치환된 경로, 치환에 사용되지 않은 나머지 파라미터)

    Raises:
        GenericExchangeError: 경로의 placeholder 값이 params에 없는 경우
    """
    params = dict(params or {})
    used = set()

    def _replace(match: "re.Match") -> str:
        name = match.group(1)
        if name not in params:
            raise GenericExchangeError(f"Missing path parameter: {name}")
        used.add(name)
        return str(params[name])

    imploded = _PLACEHOLDER.sub(_replace, path)
    rest = {key: value for key, value in params.items() if key not in used}
    return imploded, rest


def canonical_message(timestamp: str, method: str, request_path: str, body: Optional[str] = None) -> str:
    """서명 대상 prehash 문자열 생성"""
    return f"{timestamp}{method.upper()}{request_path}{body or ''}"


def hmac_signature(message: str, secret: str) -> str:
    """HMAC-SHA256 hex 서명"""
    return hmac.new(secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).hexdigest()


class RequestSigner:
    """Coinbase 요청 서명기"""

    def __init__(self,
                 credentials: Credentials,
                 resolver: Optional[CredentialResolver] = None,
                 base_urls: Optional[Mapping[str, str]] = None,
                 clock: Callable[[], float] = time.time):
        """
        초기화

        Args:
            credentials: 불변 인증 정보
            resolver: 인증 모드 결정기
            base_urls: 접근 수준별 Base URL
            clock: 현재 시각(초) 함수
        """
        self.credentials = credentials
        self.resolver = resolver or CredentialResolver()
        self.base_urls = dict(base_urls or get_endpoints())
        self.clock = clock

    def resolve_path(self, path: str, method: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """
        '/'로 시작하는 요청 경로 생성

        GET 요청에서 경로에 쓰이지 않은 파라미터는 쿼리 문자열로 붙인다.
        그 외 메서드에서는 전송되지 않으므로 본문은 body로 직렬화해 넘겨야 한다.
        """
        imploded, rest = implode_params(path, params)
        request_path = "/" + imploded.lstrip("/")
        if rest:
            if method.upper() == "GET":
                request_path += "?" + urlencode(rest)
            else:
                logger.warning(f"Dropping params not used by {method.upper()} {request_path}: {sorted(rest)}")
        return request_path

    def sign(self,
             path: str,
             access: AccessLevel = AccessLevel.PUBLIC,
             method: str = "GET",
             params: Optional[Mapping[str, Any]] = None,
             body: Optional[str] = None) -> SignedRequest:
        """
        요청 서명

        Args:
            path: API 경로 (예: 'accounts', 'prices/{symbol}/buy')
            access: 접근 수준
            method: HTTP 메서드
            params: 경로/쿼리 파라미터
            body: 요청 본문 문자열

        Returns:
            SignedRequest

        Raises:
            AuthenticationError: private 요청에 필수 인증정보가 없는 경우
        """
        method = method.upper()
        request_path = self.resolve_path(path, method, params)
        url = self.base_urls[access.value] + request_path

        if access is AccessLevel.PRIVATE:
            self.resolver.check_required_credentials(self.credentials, access)

        headers = dict(COMMON_HEADERS)

        if self.resolver.uses_oauth(self.credentials):
            headers[HEADER_AUTHORIZATION] = f"Bearer {self.credentials.bearer_token}"
        elif access is AccessLevel.PRIVATE:
            # 서명과 헤더에 같은 timestamp를 사용해야 서버 검증을 통과한다
            timestamp = str(math.floor(self.clock()))
            message = canonical_message(timestamp, method, request_path, body)
            headers.update({
                HEADER_ACCESS_KEY: self.credentials.api_key,
                HEADER_ACCESS_SIGN: hmac_signature(message, self.credentials.secret),
                HEADER_ACCESS_TIMESTAMP: timestamp,
                HEADER_CONTENT_TYPE: JSON_CONTENT_TYPE,
            })

        logger.debug(f"Signed {access.value} request: {method} {request_path}")
        return SignedRequest(url=url, method=method, headers=headers, body=body)
