"""
    로깅 설정

    loguru 기본 핸들러를 제거하고 LOG_LEVEL 환경변수 기준으로 stderr 싱크를 다시 등록합니다.
"""

import os
import sys
from typing import Optional

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def setup_logging(level: Optional[str] = None) -> None:
    """애플리케이션 시작 시 한 번 호출"""
    logger.remove()
    logger.add(
        sys.stderr,
        level=(level or os.getenv("LOG_LEVEL", "INFO")).upper(),
        format=LOG_FORMAT,
        backtrace=False,
        diagnose=False,
    )
