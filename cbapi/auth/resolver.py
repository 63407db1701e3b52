"""
ABOUTME: Decides the authentication mode of a request and enforces its mandatory credentials
"""

import logging
from typing import Tuple

from cbapi.auth.config import CoinbaseAPIConfig, REQUIRED_CREDENTIALS, REQUIRED_OAUTH_CREDENTIALS
from cbapi.auth.models import AccessLevel, Credentials
from cbapi.exceptions import AuthenticationError


logger = logging.getLogger(__name__)


class CredentialResolver:
    """요청별 인증 모드 결정 및 필수 인증정보 검증"""

    def __init__(self, exchange_id: str = CoinbaseAPIConfig.EXCHANGE_ID):
        self.exchange_id = exchange_id

    @staticmethod
    def uses_oauth(credentials: Credentials) -> bool:
        """bearer_token이 있으면 접근 수준과 무관하게 OAuth 모드"""
        return credentials.uses_oauth()

    def required_fields(self, credentials: Credentials, access: AccessLevel) -> Tuple[str, ...]:
        """
        현재 모드에서 필수인 인증 필드

        Args:
            credentials: 인증 정보
            access: 접근 수준

        Returns:
            필수 필드 이름 튜플 (public 접근은 빈 튜플)
        """
        if access is AccessLevel.PUBLIC:
            return ()
        if self.uses_oauth(credentials):
            return REQUIRED_OAUTH_CREDENTIALS
        return REQUIRED_CREDENTIALS

    def check_required_credentials(self, credentials: Credentials, access: AccessLevel) -> None:
        """
        private 접근 시 필수 인증정보 확인 (네트워크 호출 전에 실행)

        Raises:
            AuthenticationError: 필수 필드가 없거나 비어있는 경우
        """
        missing = credentials.missing(self.required_fields(credentials, access))
        if missing:
            logger.error(f"Missing required credential: {missing[0]}")
            raise AuthenticationError(f"{self.exchange_id} requires `{missing[0]}`")
