"""
로깅 설정

cron 체크와 조회 서버가 같은 포맷으로 stdout 에 기록한다.
"""
import logging
import sys

from app.config import LOG_LEVEL

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# 요청/세션 단위로 INFO 를 남기는 라이브러리 로거
NOISY_LOGGERS = (
    "httpx",
    "httpcore",
    "mcp.server.lowlevel.server",
    "mcp.server.streamable_http_manager",
)


def resolve_level(level: str) -> int:
    """'debug', 'WARNING' 등 → logging 레벨 (알 수 없으면 INFO)"""
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """
    루트 로거에 stdout 핸들러 하나만 두고, 라이브러리 로그는 WARNING 이상만

    여러 번 호출해도 핸들러가 쌓이지 않음 (lifespan 재시작, 테스트).
    """
    log_level = resolve_level(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    # DEBUG 일 때는 라이브러리 로그도 그대로 둠
    quiet_level = max(log_level, logging.WARNING) if log_level > logging.DEBUG else log_level
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)

    return root_logger
