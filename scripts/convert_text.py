#!/usr/bin/env python3
"""
convert_text.py - 변환 서비스 명령행 클라이언트

입력 텍스트를 변환 서비스(POST /convert)로 보내고 결과를 출력한다.
출력은 변환 결과 / "변환 실패" / 일반 에러 문자열 중 하나.

사용법:
    # 단일 텍스트
    uv run python scripts/convert_text.py "大韓民國"

    # 표준입력의 각 줄을 순서대로 변환
    cat input.txt | uv run python scripts/convert_text.py

    # 운영 서버
    uv run python scripts/convert_text.py --mode prod "漢字"

종료 코드:
    0: 모든 입력 변환 성공
    1: 하나 이상 fallback/에러
"""

import argparse
import asyncio
import sys
from collections.abc import Iterable
from pathlib import Path

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.app.services.binding import TextFieldBinding
from src.app.services.conversion import ConversionClient
from src.core.config import load_config, resolve_log_level, resolve_settings
from src.core.logging import setup_logging
from src.domain.errors import ConfigError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="한자 → 한글 변환 서비스 클라이언트",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="변환할 텍스트 (생략 시 표준입력의 각 줄)",
    )
    parser.add_argument(
        "--mode",
        choices=["dev", "prod"],
        help="실행 모드 (기본: default.yaml 또는 dev)",
    )
    parser.add_argument(
        "--url",
        type=str,
        help="변환 서비스 URL (mode 설정보다 우선)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="요청 타임아웃(초)",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="설정 파일 경로 (기본: default.yaml)",
    )
    return parser


async def convert_all(client: ConversionClient, texts: Iterable[str]) -> int:
    """
    입력을 순서대로 변환하고 출력 필드를 표준출력에 쓴다.

    Returns:
        종료 코드 (모두 성공 0, 아니면 1)
    """
    exit_code = 0
    for text in texts:
        binding = TextFieldBinding(input_text=text)
        outcome = await client.convert_field(binding)
        print(binding.output_text)
        if not outcome.ok:
            exit_code = 1
    return exit_code


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path)
    try:
        # 표준출력은 변환 결과 전용
        setup_logging(level=resolve_log_level(config), stream=sys.stderr)
        settings = resolve_settings(
            config,
            mode=args.mode,
            base_url=args.url,
            timeout=args.timeout,
        )
    except ConfigError as e:
        # 로그 레벨 자체가 잘못됐을 수 있으므로 기본 레벨로 구성
        setup_logging(stream=sys.stderr).error(f"설정 오류: {e}")
        return 2

    if args.text is not None:
        texts: Iterable[str] = [args.text]
    else:
        texts = (line.rstrip("\n") for line in sys.stdin)

    async def run() -> int:
        async with ConversionClient.from_settings(settings) as client:
            return await convert_all(client, texts)

    return asyncio.run(run())


if __name__ == "__main__":
    sys.exit(main())
