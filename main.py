#!/usr/bin/env python3
"""
Coinbase API 조회 실행 스크립트

    python main.py currencies
    python main.py ticker --symbol BTC/USD
    python main.py balance
"""

import argparse
import asyncio
import json
import logging
import sys

from cbapi import CoinbaseAPIException, CoinbaseClient, Credentials


logger = logging.getLogger(__name__)


def parse_arguments(argv=None):
    """명령행 인자 파싱"""
    parser = argparse.ArgumentParser(
        description="Coinbase v2 API 조회 도구"
    )

    parser.add_argument(
        "command",
        choices=["currencies", "ticker", "balance"],
        help="조회할 항목"
    )

    parser.add_argument(
        "--symbol",
        default="BTC/USD",
        help="티커 심볼 (기본: BTC/USD)"
    )

    parser.add_argument(
        "--env-file",
        default=None,
        help="인증정보를 읽을 .env 파일 경로"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="로그 레벨"
    )

    return parser.parse_args(argv)


async def run(args) -> dict:
    """명령 실행"""
    credentials = Credentials.from_env(args.env_file)

    async with CoinbaseClient(credentials=credentials) as client:
        if args.command == "currencies":
            return await client.fetch_currencies()
        elif args.command == "ticker":
            return await client.fetch_ticker(args.symbol)
        else:
            return await client.fetch_balance()


def main(argv=None) -> int:
    """메인 실행 함수"""
    args = parse_arguments(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        result = asyncio.run(run(args))
    except CoinbaseAPIException as e:
        logger.error(f"{args.command} failed [{e.kind.value}]: {e.message}")
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
