"""
Domain Normalizer

Coinbase 응답의 data 값을 통화/잔고/티커 레코드로 정규화
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional

from cbapi.api.models.records import Balance, BalanceSheet, Currency, Ticker


logger = logging.getLogger(__name__)

CurrencyCodeMapper = Callable[[str], str]

# 거래소 고유 코드 -> 공통 코드
COMMON_CURRENCY_CODES: Dict[str, str] = {
    "XBT": "BTC",
    "BCC": "BCH",
    "DRK": "DASH",
}


def common_currency_code(code: str, overrides: Optional[Mapping[str, str]] = None) -> str:
    """거래소 통화 코드를 공통 코드로 변환"""
    code = code.upper()
    if overrides and code in overrides:
        return overrides[code]
    return COMMON_CURRENCY_CODES.get(code, code)


def safe_value(item: Any, key: str, default: Any = None) -> Any:
    """매핑에서 키 조회 (없거나 None이면 default)"""
    if not isinstance(item, Mapping):
        return default
    value = item.get(key)
    return default if value is None else value


def safe_string(item: Any, key: str, default: Optional[str] = None) -> Optional[str]:
    value = safe_value(item, key)
    return default if value is None else str(value)


def safe_float(item: Any, key: str, default: Optional[float] = None) -> Optional[float]:
    """숫자로 변환 가능한 값만 float로 반환 (없거나 숫자가 아니면 default)"""
    value = safe_value(item, key)
    if value is None or isinstance(value, bool):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def iso8601(timestamp_ms: int) -> str:
    """밀리초 타임스탬프 -> ISO-8601 UTC 문자열"""
    dt = datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{timestamp_ms % 1000:03d}Z"


class DomainNormalizer:
    """
    도메인 정규화 클래스

    unwrap된 data 값과 통화 코드 변환 함수를 받아 레코드를 생성한다.
    """

    def __init__(self, currency_code: CurrencyCodeMapper = common_currency_code):
        self.logger = logging.getLogger(__name__)
        self.currency_code = currency_code

    def parse_currencies(self, data: List[Mapping[str, Any]]) -> Dict[str, Currency]:
        """
        통화 목록 정규화

        항목마다 하나의 Currency를 만든다. 단, id가 없는 항목은 공통 코드를
        정할 수 없으므로 경고 로그를 남기고 결과에서 제외한다.

        Args:
            data: /currencies 응답의 data 배열

        Returns:
            공통 코드별 Currency
        """
        result: Dict[str, Currency] = {}
        for item in data:
            currency_id = safe_string(item, "id")
            if currency_id is None:
                self.logger.warning(f"Skipping currency without id: {item}")
                continue

            code = self.currency_code(currency_id)
            result[code] = Currency(
                id=currency_id,
                code=code,
                name=safe_string(item, "name"),
                active=True,
                min_amount=safe_float(item, "min_size"),
                info=dict(item)
            )
        return result

    def parse_balance(self, accounts: List[Mapping[str, Any]]) -> BalanceSheet:
        """
        계정 목록을 통화별 잔고로 집계

        같은 통화의 계정이 여러 개(wallet, vault 등)이면 금액을 합산한다.
        이 API는 사용 중(used) 금액을 제공하지 않으므로 used는 0.0이다.

        Args:
            accounts: /accounts 응답의 data 배열

        Returns:
            BalanceSheet (원본 계정 목록은 info에 그대로 보존)
        """
        balances: Dict[str, Balance] = {}
        for account in accounts:
            balance = safe_value(account, "balance", {})
            currency = safe_string(balance, "currency")
            if currency is None:
                self.logger.warning(f"Skipping account without balance currency: {safe_value(account, 'id')}")
                continue

            code = self.currency_code(currency)
            total = safe_float(balance, "amount", 0.0)
            entry = Balance(code=code, free=total, used=0.0, total=total)

            if code in balances:
                balances[code] = balances[code] + entry
            else:
                balances[code] = entry

        return BalanceSheet(balances=balances, info=list(accounts))

    def parse_ticker(self,
                     symbol: str,
                     timestamp: int,
                     buy: Mapping[str, Any],
                     sell: Mapping[str, Any],
                     spot: Mapping[str, Any]) -> Ticker:
        """
        buy/sell/spot 가격 응답을 하나의 티커로 결합

        Args:
            symbol: 통합 심볼 (예: 'BTC/USD')
            timestamp: 호출 시작 시각 (ms)
            buy: /prices/{symbol}/buy data
            sell: /prices/{symbol}/sell data
            spot: /prices/{symbol}/spot data
        """
        return Ticker(
            symbol=symbol,
            timestamp=timestamp,
            datetime=iso8601(timestamp),
            bid=safe_float(sell, "amount"),
            ask=safe_float(buy, "amount"),
            last=safe_float(spot, "amount"),
            info={"buy": buy, "sell": sell, "spot": spot}
        )
