"""
ABOUTME: Coinbase v2 endpoint paths and capability map
"""

from typing import Dict

from cbapi.api.models.enums import PriceSide


CURRENCIES_PATH = "currencies"
ACCOUNTS_PATH = "accounts"

PRICE_PATHS: Dict[PriceSide, str] = {
    PriceSide.BUY: "prices/{symbol}/buy",
    PriceSide.SELL: "prices/{symbol}/sell",
    PriceSide.SPOT: "prices/{symbol}/spot",
}

# 지원 기능 (주문/시세 깊이 관련 기능은 미지원)
HAS: Dict[str, bool] = {
    "CORS": True,
    "privateAPI": False,
    "createOrder": False,
    "createMarketOrder": False,
    "createLimitOrder": False,
    "cancelOrder": False,
    "editOrder": False,
    "fetchCurrencies": True,
    "fetchBalance": True,
    "fetchOrderBook": False,
    "fetchOHLCV": False,
    "fetchTrades": False,
    "fetchTicker": True,
    "fetchTickers": False,
}

