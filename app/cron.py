# app/cron.py
"""
정전 상태 체크 (1회 실행)

외부 스케줄러(cron 등)가 주기적으로 실행한다.
성공 시 exit 0, 실패 시 exit 1.
"""
import asyncio
import logging
import sys

from app.config import validate_config, CHECK_REQUIRED
from app.container import ServiceContainer
from app.domain.errors import ConfigError
from app.logging_config import setup_logging

logger = logging.getLogger(__name__)


async def run_check(container: ServiceContainer) -> int:
    """
    체크 사이클 1회 실행 후 종료 코드 반환

    컨테이너는 성공/실패와 관계없이 정리된다.
    """
    async with container:
        try:
            await container.monitor.check_power_outage()
        except Exception as exc:
            logger.error(f"Error checking power outage: {exc}", exc_info=True)
            return 1
    return 0


def main() -> None:
    setup_logging()

    try:
        validate_config(*CHECK_REQUIRED)
    except ConfigError as exc:
        logger.error(f"❌ {exc}")
        sys.exit(1)

    sys.exit(asyncio.run(run_check(ServiceContainer())))


if __name__ == "__main__":
    main()
