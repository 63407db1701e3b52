"""
ABOUTME: HTTP transport boundary - sends a SignedRequest and returns the raw status/body
"""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import aiohttp

from cbapi.auth.config import CoinbaseAPIConfig
from cbapi.auth.signer import SignedRequest
from cbapi.exceptions import TransportError
from cbapi.utils.rate_limiter import RateLimiter


@dataclass
class HttpResponse:
    """완료된 HTTP 교환 결과"""
    status: Optional[int]
    body: Any
    headers: Dict[str, str] = field(default_factory=dict)


class Transport(ABC):
    """HTTP 전송 계층 인터페이스"""

    @abstractmethod
    async def send(self, request: SignedRequest) -> HttpResponse:
        """서명된 요청 전송"""
        pass

    async def close(self):
        """리소스 정리"""
        pass

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


class AiohttpTransport(Transport):
    """aiohttp 기반 전송 계층 (세션 재사용, 타임아웃, Rate Limit)"""

    def __init__(self,
                 rate_limiter: Optional[RateLimiter] = None,
                 timeout: Optional[aiohttp.ClientTimeout] = None):
        """
        초기화

        Args:
            rate_limiter: Rate Limit 관리자 (기본: 1.5초당 1회)
            timeout: 요청 타임아웃
        """
        self.rate_limiter = rate_limiter or RateLimiter.from_rate_limit_ms()
        self.timeout = timeout or aiohttp.ClientTimeout(
            total=CoinbaseAPIConfig.TOTAL_TIMEOUT,
            connect=CoinbaseAPIConfig.CONNECT_TIMEOUT
        )
        self.logger = logging.getLogger(self.__class__.__name__)
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """HTTP 세션 가져오기 (재사용)"""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def close(self):
        """세션 종료"""
        if self._session and not self._session.closed:
            await self._session.close()

    async def send(self, request: SignedRequest) -> HttpResponse:
        """
        요청 전송

        Raises:
            TransportError: 연결/타임아웃 등 전송 계층 오류 (재시도하지 않음)
        """
        await self.rate_limiter.acquire()

        self.logger.debug(f"Request: {request.method} {request.url}")

        try:
            session = await self._get_session()
            async with session.request(request.method,
                                       request.url,
                                       headers=dict(request.headers),
                                       data=request.body) as response:
                headers = dict(response.headers)
                if response.status in CoinbaseAPIConfig.SKIP_JSON_ON_STATUS_CODES:
                    return HttpResponse(status=response.status, body={}, headers=headers)

                text = await response.text()
                return HttpResponse(status=response.status, body=self._decode(text), headers=headers)

        except aiohttp.ClientError as e:
            self.logger.error(f"HTTP client error: {e}")
            raise TransportError(f"HTTP request failed: {e}")
        except asyncio.TimeoutError:
            self.logger.error(f"Request timed out: {request.method} {request.url}")
            raise TransportError(f"HTTP request timed out: {request.method} {request.url}")

    @staticmethod
    def _decode(text: str) -> Any:
        """JSON 본문 디코딩 (JSON이 아니면 원문 유지, 빈 본문은 None)"""
        if not text:
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            return text
