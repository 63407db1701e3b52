"""
Coinbase 클라이언트 사용 예제
Coinbase Client Example

공개 API(통화, 티커)를 조회하고, 인증정보가 있으면 잔고를 조회한다.
.env 예시:
    CB_API_KEY=...
    CB_API_SECRET=...
    # 또는 OAuth
    CB_BEARER_TOKEN=...
"""

import asyncio
import logging
import sys

from cbapi import CoinbaseClient, CoinbaseAPIException, Credentials


async def run_example(symbol: str = "BTC/USD"):
    """Coinbase 클라이언트 기본 예제"""

    # 로깅 설정
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    logger = logging.getLogger(__name__)

    credentials = Credentials.from_env()

    async with CoinbaseClient(credentials=credentials) as client:
        try:
            currencies = await client.fetch_currencies()
            logger.info(f"Currencies: {len(currencies)}")

            ticker = await client.fetch_ticker(symbol)
            logger.info(f"{symbol} bid={ticker['bid']} ask={ticker['ask']} last={ticker['last']}")

            if credentials.is_anonymous():
                logger.info("No credentials configured, skipping balance")
                return

            balance = await client.fetch_balance()
            logger.info(f"Balance totals: {balance['total']}")

        except CoinbaseAPIException as e:
            logger.error(f"Example failed [{e.kind.value}]: {e.message}")
            raise


if __name__ == "__main__":
    asyncio.run(run_example(*sys.argv[1:2]))
