"""
ABOUTME: Coinbase v2 REST client - currencies, balances and tickers
"""

import asyncio
import time
from typing import Any, Dict, Mapping, Optional

from cbapi.api.base.client import BaseAPIClient
from cbapi.api.coinbase.constants import ACCOUNTS_PATH, CURRENCIES_PATH, HAS, PRICE_PATHS
from cbapi.api.models.enums import PriceSide
from cbapi.api.normalizer import DomainNormalizer, common_currency_code
from cbapi.api.transport import Transport
from cbapi.auth.models import AccessLevel, Credentials
from cbapi.auth.signer import RequestSigner


class CoinbaseClient(BaseAPIClient):
    """Coinbase API 클라이언트"""

    has = HAS

    def __init__(self,
                 credentials: Optional[Credentials] = None,
                 transport: Optional[Transport] = None,
                 signer: Optional[RequestSigner] = None,
                 currency_code_overrides: Optional[Mapping[str, str]] = None):
        """
        초기화

        Args:
            credentials: 인증 정보 (api_key/secret 또는 bearer_token)
            transport: HTTP 전송 계층
            signer: 요청 서명기
            currency_code_overrides: 거래소 통화 코드 -> 공통 코드 추가 매핑
        """
        overrides = dict(currency_code_overrides or {})
        normalizer = DomainNormalizer(lambda code: common_currency_code(code, overrides))
        super().__init__(credentials, transport, signer, normalizer)

    @staticmethod
    def market_id(symbol: str) -> str:
        """통합 심볼(BTC/USD) -> Coinbase 마켓 ID(BTC-USD)"""
        return symbol.replace("/", "-").upper()

    async def fetch_currencies(self, params: Optional[Dict] = None) -> Dict[str, Dict]:
        """
        통화 목록 조회

        Returns:
            공통 통화 코드별 통합 통화 구조
        """
        data = await self.request_data(CURRENCIES_PATH, AccessLevel.PUBLIC, params=params)
        currencies = self.normalizer.parse_currencies(data)
        self.logger.info(f"Fetched {len(currencies)} currencies")
        return {code: currency.to_dict() for code, currency in currencies.items()}

    async def fetch_balance(self, params: Optional[Dict] = None) -> Dict[str, Any]:
        """
        계좌 잔고 조회

        Returns:
            {'info': 원본 계정 목록, 'BTC': {free, used, total}, ..., 'free': {...}, 'used': {...}, 'total': {...}}

        Raises:
            AuthenticationError: 인증정보가 없는 경우 (요청 전)
        """
        self.check_required_credentials(AccessLevel.PRIVATE)
        accounts = await self.request_data(ACCOUNTS_PATH, AccessLevel.PRIVATE, params=params)
        return self.normalizer.parse_balance(accounts).to_dict()

    async def fetch_price(self, symbol: str, side: PriceSide, params: Optional[Dict] = None) -> Dict[str, Any]:
        """buy/sell/spot 가격 조회 (data 값 반환)"""
        request = dict(params or {})
        request["symbol"] = self.market_id(symbol)
        return await self.request_data(PRICE_PATHS[side], AccessLevel.PUBLIC, params=request)

    async def fetch_ticker(self, symbol: str, params: Optional[Dict] = None) -> Dict[str, Any]:
        """
        티커 조회

        buy/sell/spot 세 가격을 동시에 조회해 하나의 티커로 합친다.
        하나라도 실패하면 전체 호출이 실패한다.

        Args:
            symbol: 통합 심볼 (예: 'BTC/USD') 또는 마켓 ID ('BTC-USD')

        Returns:
            통합 티커 구조 (제공되지 않는 필드는 None)
        """
        timestamp = int(time.time() * 1000)

        buy, sell, spot = await asyncio.gather(
            self.fetch_price(symbol, PriceSide.BUY, params),
            self.fetch_price(symbol, PriceSide.SELL, params),
            self.fetch_price(symbol, PriceSide.SPOT, params),
        )

        ticker = self.normalizer.parse_ticker(symbol, timestamp, buy, sell, spot)
        return ticker.to_dict()
