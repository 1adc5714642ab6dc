# app/adapters/redis_store.py
"""
Redis 상태 저장소 어댑터
"""
from typing import Optional
import logging

from pydantic import ValidationError
from redis.asyncio import Redis

from app.domain.outage import StoredStatus

logger = logging.getLogger(__name__)

KEY_PREFIX = "power-outage:last-status"


def status_key(location: str) -> str:
    """
    모니터링 지역별 고정 key

    ex) "Gdańsk" -> "power-outage:last-status:gdańsk"
    """
    return f"{KEY_PREFIX}:{location.strip().lower()}"


class RedisStatusStore:
    """마지막 정전 상태를 JSON 문자열로 저장"""

    def __init__(self, redis: Redis):
        self.redis = redis

    async def get(self, key: str) -> Optional[StoredStatus]:
        data = await self.redis.get(key)
        if not data:
            return None

        try:
            return StoredStatus.model_validate_json(data)
        except ValidationError as exc:
            # 깨진 값은 최초 실행처럼 취급, 다음 set에서 덮어씀
            logger.warning(f"⚠️ Invalid stored status under {key}, ignoring: {exc}")
            return None

    async def set(self, key: str, status: StoredStatus) -> None:
        await self.redis.set(key, status.model_dump_json())
