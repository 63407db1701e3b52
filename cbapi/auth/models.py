"""
Coinbase 인증 관련 데이터 모델
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

from dotenv import load_dotenv


class AccessLevel(Enum):
    """API 접근 수준"""
    PUBLIC = "public"
    PRIVATE = "private"


@dataclass(frozen=True)
class Credentials:
    """
    Coinbase API 인증 정보

    api_key/secret 쌍(HMAC 서명) 또는 bearer_token(OAuth) 중 하나를 사용한다.
    bearer_token이 있으면 api_key/secret 설정 여부와 관계없이 우선한다.
    """
    api_key: Optional[str] = None
    secret: Optional[str] = None
    bearer_token: Optional[str] = None

    def __repr__(self) -> str:
        # 비밀값은 출력하지 않음
        return (f"Credentials(api_key={'***' if self.api_key else None}, "
                f"secret={'***' if self.secret else None}, "
                f"bearer_token={'***' if self.bearer_token else None})")

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "Credentials":
        """환경변수(.env 포함)에서 인증정보 로드"""
        load_dotenv(dotenv_path)
        return cls(
            api_key=os.getenv("CB_API_KEY") or None,
            secret=os.getenv("CB_API_SECRET") or None,
            bearer_token=os.getenv("CB_BEARER_TOKEN") or None,
        )

    def has(self, field_name: str) -> bool:
        """필드가 비어있지 않은 문자열로 설정되었는지 확인"""
        return bool(getattr(self, field_name))

    def uses_oauth(self) -> bool:
        """OAuth(bearer token) 모드 여부"""
        return self.has("bearer_token")

    def missing(self, fields: Iterable[str]) -> Tuple[str, ...]:
        """주어진 필드 중 비어있는 필드 목록"""
        return tuple(name for name in fields if not self.has(name))

    def is_anonymous(self) -> bool:
        """인증정보가 전혀 없는지 확인 (public 요청 전용)"""
        return not (self.api_key or self.secret or self.bearer_token)
