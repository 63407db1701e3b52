"""
DomainNormalizer 테스트
"""

import logging

import pytest

from cbapi.api.models.records import Balance, UNAVAILABLE_TICKER_FIELDS
from cbapi.api.normalizer import (
    DomainNormalizer,
    common_currency_code,
    iso8601,
    safe_float,
    safe_string,
)


def account(currency: str, amount: str, account_id: str = "acc") -> dict:
    return {
        "id": account_id,
        "name": f"{currency} Wallet",
        "type": "wallet",
        "balance": {"amount": amount, "currency": currency},
    }


class TestSafeAccessors:
    """안전한 필드 접근 함수 테스트"""

    @pytest.mark.parametrize("item, expected", [
        ({"min_size": "0.0001"}, 0.0001),
        ({"min_size": 1}, 1.0),
        ({"min_size": "abc"}, None),
        ({"min_size": None}, None),
        ({"min_size": True}, None),
        ({}, None),
        (None, None),
    ])
    def test_safe_float(self, item, expected):
        assert safe_float(item, "min_size") == expected

    def test_safe_float_default(self):
        assert safe_float({}, "amount", 0.0) == 0.0

    def test_safe_string(self):
        assert safe_string({"id": 5}, "id") == "5"
        assert safe_string({}, "id", "x") == "x"


class TestCommonCurrencyCode:
    def test_known_aliases(self):
        assert common_currency_code("XBT") == "BTC"
        assert common_currency_code("BCC") == "BCH"
        assert common_currency_code("eth") == "ETH"

    def test_overrides(self):
        assert common_currency_code("XBT", {"XBT": "XBT"}) == "XBT"


class TestDomainNormalizer:
    """DomainNormalizer 테스트"""

    def setup_method(self):
        """각 테스트 전 초기화"""
        self.normalizer = DomainNormalizer()

    def test_parse_currencies(self):
        """통화 목록 정규화 (end-to-end 형식)"""
        # Given
        data = [{"id": "BTC", "name": "Bitcoin", "min_size": "0.0001"}]

        # When
        currencies = self.normalizer.parse_currencies(data)
        result = {code: currency.to_dict() for code, currency in currencies.items()}

        # Then
        btc = result["BTC"]
        assert btc["id"] == "BTC"
        assert btc["code"] == "BTC"
        assert btc["name"] == "Bitcoin"
        assert btc["active"] is True
        assert btc["limits"]["amount"] == {"min": 0.0001, "max": None}
        assert btc["limits"]["price"] == {"min": None, "max": None}
        assert btc["limits"]["cost"] == {"min": None, "max": None}
        assert btc["limits"]["withdraw"] == {"min": None, "max": None}
        assert btc["info"] == data[0]

    def test_parse_currencies_tolerates_missing_min_size(self):
        currencies = self.normalizer.parse_currencies([
            {"id": "USD", "name": "US Dollar"},
            {"id": "EUR", "name": "Euro", "min_size": "n/a"},
        ])

        assert currencies["USD"].min_amount is None
        assert currencies["EUR"].min_amount is None

    def test_parse_currencies_skips_items_without_id(self, caplog):
        """id 없는 항목은 경고 후 제외, 나머지는 항목당 하나씩"""
        # Given
        data = [{"id": "BTC", "name": "Bitcoin"}, {"name": "Nameless"}, {"id": "ETH"}]

        # When
        with caplog.at_level(logging.WARNING, logger="cbapi.api.normalizer"):
            currencies = self.normalizer.parse_currencies(data)

        # Then
        assert list(currencies) == ["BTC", "ETH"]
        assert currencies["ETH"].name is None
        assert "Skipping currency without id" in caplog.text

    def test_parse_currencies_canonicalizes_code(self):
        currencies = self.normalizer.parse_currencies([{"id": "XBT", "name": "Bitcoin"}])

        assert currencies["BTC"].id == "XBT"
        assert currencies["BTC"].code == "BTC"

    def test_parse_balance(self):
        """계정 목록 -> 통화별 잔고"""
        # Given
        accounts = [account("BTC", "1.5"), account("USD", "100.00")]

        # When
        sheet = self.normalizer.parse_balance(accounts)
        result = sheet.to_dict()

        # Then
        assert result["info"] == accounts
        assert result["BTC"] == {"free": 1.5, "used": 0.0, "total": 1.5}
        assert result["USD"] == {"free": 100.0, "used": 0.0, "total": 100.0}
        assert result["total"] == {"BTC": 1.5, "USD": 100.0}
        assert result["used"] == {"BTC": 0.0, "USD": 0.0}

    def test_parse_balance_sums_same_currency(self):
        """같은 통화 계정은 합산"""
        accounts = [account("BTC", "1.5", "wallet"), account("BTC", "0.5", "vault")]

        sheet = self.normalizer.parse_balance(accounts)

        assert list(sheet.balances) == ["BTC"]
        assert sheet["BTC"] == Balance(code="BTC", free=2.0, used=0.0, total=2.0)
        assert sheet.info == accounts

    def test_parse_balance_free_plus_used_equals_total(self):
        sheet = self.normalizer.parse_balance([account("ETH", "0.25"), account("LTC", "3")])

        for balance in sheet.balances.values():
            assert balance.free + balance.used == balance.total

    def test_parse_balance_uses_canonicalizer(self):
        normalizer = DomainNormalizer(lambda code: "X" + code)

        sheet = normalizer.parse_balance([account("BTC", "1")])

        assert "XBTC" in sheet

    def test_parse_ticker(self):
        """buy/sell/spot -> 티커 (bid=sell, ask=buy, last=spot)"""
        # Given
        buy = {"amount": "10010.00", "currency": "USD"}
        sell = {"amount": "9990.00", "currency": "USD"}
        spot = {"amount": "10000.00", "currency": "USD"}

        # When
        ticker = self.normalizer.parse_ticker("BTC/USD", 1500000000000, buy, sell, spot).to_dict()

        # Then
        assert ticker["symbol"] == "BTC/USD"
        assert ticker["timestamp"] == 1500000000000
        assert ticker["datetime"] == "2017-07-14T02:40:00.000Z"
        assert ticker["bid"] == 9990.0
        assert ticker["ask"] == 10010.0
        assert ticker["last"] == 10000.0
        assert ticker["info"] == {"buy": buy, "sell": sell, "spot": spot}

    def test_ticker_unavailable_fields_present_as_none(self):
        """제공되지 않는 필드는 키가 존재하고 값이 None"""
        ticker = self.normalizer.parse_ticker("BTC/USD", 0, {}, {}, {}).to_dict()

        for name in UNAVAILABLE_TICKER_FIELDS:
            assert name in ticker
            assert ticker[name] is None
        assert ticker["bid"] is None


def test_iso8601_keeps_milliseconds():
    assert iso8601(1000000000123) == "2001-09-09T01:46:40.123Z"
