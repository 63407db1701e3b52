"""
ABOUTME: Base API client running the sign -> send -> classify pipeline shared by exchange clients
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

from cbapi.api.normalizer import DomainNormalizer
from cbapi.api.response import ResponseClassifier, unwrap_data
from cbapi.api.transport import AiohttpTransport, Transport
from cbapi.auth.config import CoinbaseAPIConfig
from cbapi.auth.models import AccessLevel, Credentials
from cbapi.auth.resolver import CredentialResolver
from cbapi.auth.signer import RequestSigner


class BaseAPIClient(ABC):
    """거래소 API 기본 클라이언트 클래스"""

    exchange_id = CoinbaseAPIConfig.EXCHANGE_ID

    def __init__(self,
                 credentials: Optional[Credentials] = None,
                 transport: Optional[Transport] = None,
                 signer: Optional[RequestSigner] = None,
                 normalizer: Optional[DomainNormalizer] = None):
        """
        초기화

        Args:
            credentials: 인증 정보 (기본: 인증 없음, public 요청만 가능)
            transport: HTTP 전송 계층 (기본: AiohttpTransport)
            signer: 요청 서명기
            normalizer: 도메인 정규화기
        """
        self.credentials = credentials or Credentials()
        self.resolver = CredentialResolver(self.exchange_id)
        self.signer = signer or RequestSigner(self.credentials, self.resolver)
        self.transport = transport or AiohttpTransport()
        self.classifier = ResponseClassifier()
        self.normalizer = normalizer or DomainNormalizer()
        self.logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        """로거 설정"""
        logger = logging.getLogger(self.__class__.__name__)
        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)
            logger.setLevel(logging.INFO)
        return logger

    async def close(self):
        """전송 계층 종료"""
        await self.transport.close()

    async def __aenter__(self):
        """비동기 컨텍스트 매니저 진입"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """비동기 컨텍스트 매니저 종료"""
        await self.close()

    def check_required_credentials(self, access: AccessLevel = AccessLevel.PRIVATE) -> None:
        """private 호출 전 필수 인증정보 확인"""
        self.resolver.check_required_credentials(self.credentials, access)

    async def request(self,
                      path: str,
                      access: AccessLevel = AccessLevel.PUBLIC,
                      method: str = "GET",
                      params: Optional[Mapping[str, Any]] = None,
                      body: Optional[str] = None) -> Any:
        """
        API 요청 실행

        Args:
            path: API 경로
            access: 접근 수준
            method: HTTP 메서드
            params: 경로/쿼리 파라미터
            body: 요청 본문

        Returns:
            성공 응답 본문 (204는 빈 dict)

        Raises:
            AuthenticationError: 인증정보 누락 또는 401/402/403
            RateLimitError: 429
            ServiceUnavailableError: 500/503
            GenericExchangeError: 그 외 오류 (TransportError 포함)
        """
        signed = self.signer.sign(path, access, method, params, body)
        self.logger.debug(f"Request: {signed.method} {signed.url}")

        response = await self.transport.send(signed)
        return self.classifier.check(response)

    async def request_data(self,
                           path: str,
                           access: AccessLevel = AccessLevel.PUBLIC,
                           method: str = "GET",
                           params: Optional[Mapping[str, Any]] = None,
                           body: Optional[str] = None) -> Any:
        """요청 실행 후 {"data": ...} 봉투에서 data 추출"""
        response = await self.request(path, access, method, params, body)
        return unwrap_data(response, self.exchange_id)

    @abstractmethod
    async def fetch_currencies(self, params: Optional[Dict] = None) -> Dict[str, Dict]:
        """통화 목록 조회 (거래소별 구현 필요)"""
        pass

    @abstractmethod
    async def fetch_balance(self, params: Optional[Dict] = None) -> Dict[str, Any]:
        """잔고 조회 (거래소별 구현 필요)"""
        pass

    @abstractmethod
    async def fetch_ticker(self, symbol: str, params: Optional[Dict] = None) -> Dict[str, Any]:
        """티커 조회 (거래소별 구현 필요)"""
        pass
