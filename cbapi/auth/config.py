"""
Coinbase 인증 관련 설정 및 상수
"""

import os
from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class CoinbaseAPIConfig:
    """Coinbase API 설정 상수"""

    EXCHANGE_ID = "coinbase"
    API_VERSION = "v2"

    # API 제한 (호출 간 1500ms)
    RATE_LIMIT_MS = 1500
    DEFAULT_MAX_CALLS = 1
    DEFAULT_TIME_WINDOW = 1.5

    # 타임아웃 설정
    CONNECT_TIMEOUT = 10     # 연결 타임아웃 (초)
    TOTAL_TIMEOUT = 30       # 전체 타임아웃 (초)

    # JSON 본문이 없는 상태 코드
    SKIP_JSON_ON_STATUS_CODES: Tuple[int, ...] = (204,)


DEFAULT_BASE_URL = "https://api.coinbase.com/v2"


def get_endpoints() -> Dict[str, str]:
    """
    접근 수준별 API Base URL

    CB_API_URL 환경변수로 변경 가능하며 public/private 모두 동일한 URL을 사용한다.
    """
    base_url = os.getenv("CB_API_URL", DEFAULT_BASE_URL).rstrip("/")
    return {
        "public": base_url,
        "private": base_url,
    }

# HTTP 헤더 템플릿
COMMON_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "cbapi/1.0",
}

# 서명 헤더
HEADER_ACCESS_KEY = "CB-ACCESS-KEY"
HEADER_ACCESS_SIGN = "CB-ACCESS-SIGN"
HEADER_ACCESS_TIMESTAMP = "CB-ACCESS-TIMESTAMP"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
JSON_CONTENT_TYPE = "application/json"

# 모드별 필수 인증 필드
REQUIRED_CREDENTIALS: Tuple[str, ...] = ("api_key", "secret")
REQUIRED_OAUTH_CREDENTIALS: Tuple[str, ...] = ("bearer_token",)
