"""
Coinbase API Rate Limit 관리 클래스
전송 계층에서 요청 전에 acquire()로 대기한다
"""

import asyncio
import time
from collections import deque

from cbapi.auth.config import CoinbaseAPIConfig


class RateLimiter:
    """슬라이딩 윈도우 Rate Limiter"""

    def __init__(self,
                 max_calls: int = CoinbaseAPIConfig.DEFAULT_MAX_CALLS,
                 time_window: float = CoinbaseAPIConfig.DEFAULT_TIME_WINDOW):
        """Rate Limiter 초기화"""
        if max_calls <= 0:
            raise ValueError(f"max_calls must be positive: {max_calls}")
        if time_window <= 0:
            raise ValueError(f"time_window must be positive: {time_window}")

        self.max_calls = max_calls
        self.time_window = time_window

        # 호출 기록 (시간순)
        self.calls = deque()

        # Lock은 실행 중인 이벤트 루프에 묶이므로 acquire 시점에 생성
        self._lock = None
        self._lock_loop = None

    @classmethod
    def from_rate_limit_ms(cls, rate_limit_ms: int = CoinbaseAPIConfig.RATE_LIMIT_MS) -> "RateLimiter":
        """호출 간 최소 간격(ms)으로 생성"""
        return cls(max_calls=1, time_window=rate_limit_ms / 1000)

    async def acquire(self) -> float:
        """
        Rate Limit 체크 및 대기

        Returns:
            실제 대기한 시간 (초)
        """
        async with self._get_lock():
            waited = 0.0
            self._cleanup_old_calls()

            wait_time = self._calculate_wait_time()
            if wait_time > 0:
                await asyncio.sleep(wait_time)
                waited = wait_time
                self._cleanup_old_calls()

            self._record_call()
            return waited

    def get_remaining_calls(self) -> int:
        """현재 윈도우에서 남은 호출 횟수"""
        self._cleanup_old_calls()
        return max(0, self.max_calls - len(self.calls))

    def get_reset_time(self) -> float:
        """다음 리셋까지 남은 시간 (초)"""
        if not self.calls:
            return 0

        reset_time = self.calls[0] + self.time_window - time.monotonic()
        return max(0, reset_time)

    def _get_lock(self) -> asyncio.Lock:
        """현재 이벤트 루프용 Lock (루프가 바뀌면 새로 생성)"""
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    def _cleanup_old_calls(self) -> None:
        """시간 윈도우 밖의 호출 기록 정리"""
        cutoff_time = time.monotonic() - self.time_window

        while self.calls and self.calls[0] <= cutoff_time:
            self.calls.popleft()

    def _calculate_wait_time(self) -> float:
        """다음 호출까지 대기 시간 계산"""
        if len(self.calls) < self.max_calls:
            return 0

        # 가장 오래된 호출이 윈도우에서 나갈 때까지 대기
        wait_time = self.calls[0] + self.time_window - time.monotonic()
        return max(0, wait_time)

    def _record_call(self) -> None:
        """호출 기록 추가"""
        self.calls.append(time.monotonic())
