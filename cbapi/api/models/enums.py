"""
ABOUTME: Enumerations for Coinbase price endpoints
"""

from enum import Enum


class PriceSide(Enum):
    """가격 엔드포인트 종류"""
    BUY = "buy"      # 매수가 (ask)
    SELL = "sell"    # 매도가 (bid)
    SPOT = "spot"    # 현재가 (last)
