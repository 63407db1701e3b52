"""
ABOUTME: Stable domain records produced from Coinbase payloads (currency, balance, ticker)
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _min_max(minimum: Optional[float] = None, maximum: Optional[float] = None) -> Dict[str, Optional[float]]:
    return {"min": minimum, "max": maximum}


@dataclass(frozen=True)
class Currency:
    """통화 정보"""
    id: str
    code: str
    name: Optional[str] = None
    active: bool = True
    min_amount: Optional[float] = None
    info: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """통합 통화 구조로 변환"""
        return {
            "id": self.id,
            "code": self.code,
            "info": self.info,
            "name": self.name,
            "active": self.active,
            "status": "ok",
            "fee": None,
            "precision": None,
            "limits": {
                "amount": _min_max(self.min_amount),
                "price": _min_max(),
                "cost": _min_max(),
                "withdraw": _min_max(),
            },
        }


@dataclass(frozen=True)
class Balance:
    """통화별 잔고 (free + used == total)"""
    code: str
    free: float
    used: float = 0.0
    total: Optional[float] = None

    def __post_init__(self):
        if self.total is None:
            object.__setattr__(self, "total", self.free + self.used)

    def __add__(self, other: "Balance") -> "Balance":
        if other.code != self.code:
            raise ValueError(f"Cannot add balances of different currencies: {self.code}, {other.code}")
        return Balance(
            code=self.code,
            free=self.free + other.free,
            used=self.used + other.used,
            total=self.total + other.total
        )

    def to_dict(self) -> Dict[str, float]:
        return {"free": self.free, "used": self.used, "total": self.total}


@dataclass(frozen=True)
class BalanceSheet:
    """통화 코드별 잔고 + 원본 계정 목록"""
    balances: Dict[str, Balance]
    info: List[Dict[str, Any]]

    def __getitem__(self, code: str) -> Balance:
        return self.balances[code]

    def __contains__(self, code: str) -> bool:
        return code in self.balances

    def to_dict(self) -> Dict[str, Any]:
        """통합 잔고 구조로 변환 ('info' 예약 키 + 통화별 + free/used/total 열)"""
        result: Dict[str, Any] = {"info": self.info}
        for code, balance in self.balances.items():
            result[code] = balance.to_dict()
        for column in ("free", "used", "total"):
            result[column] = {code: getattr(balance, column) for code, balance in self.balances.items()}
        return result


# 이 API에서 얻을 수 없는 티커 필드 (None으로 항상 포함)
UNAVAILABLE_TICKER_FIELDS = (
    "high",
    "low",
    "bidVolume",
    "askVolume",
    "vwap",
    "open",
    "close",
    "previousClose",
    "change",
    "percentage",
    "average",
    "baseVolume",
    "quoteVolume",
)


@dataclass(frozen=True)
class Ticker:
    """buy/sell/spot 가격을 합친 티커"""
    symbol: str
    timestamp: int
    datetime: str
    bid: Optional[float]
    ask: Optional[float]
    last: Optional[float]
    info: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """통합 티커 구조로 변환 (제공되지 않는 필드도 None으로 포함)"""
        result: Dict[str, Any] = {
            "symbol": self.symbol,
            "timestamp": self.timestamp,
            "datetime": self.datetime,
            "bid": self.bid,
            "ask": self.ask,
            "last": self.last,
        }
        for name in UNAVAILABLE_TICKER_FIELDS:
            result[name] = None
        result["info"] = self.info
        return result
