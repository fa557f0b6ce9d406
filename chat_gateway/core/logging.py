"""Logging configuration."""

import logging
import sys

from chat_gateway.core.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure application logging.

    로깅 설정:
    - Console 출력: 모든 로그를 표준 출력으로 전송
    - 로그 레벨: settings.log_level에서 설정
    - 포맷: 타임스탬프, 로그 레벨, 모듈명, 메시지

    Upstream error bodies and unhandled tracebacks only ever go here.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )

    # 요청 단위 HTTP 호출 로그 (디버그 모드에서만)
    if settings.debug:
        logging.getLogger("httpx").setLevel(logging.DEBUG)
    else:
        logging.getLogger("httpx").setLevel(logging.WARNING)
