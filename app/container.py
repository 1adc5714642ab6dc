# app/container.py
"""
의존성 조립 (Dependency Assembly)
"""
from typing import Optional
import logging

import httpx
from redis.asyncio import Redis

from app.adapters.pge_client import PgeOutageClient
from app.adapters.poke_notifier import PokeNotifier
from app.adapters.redis_store import RedisStatusStore, status_key
from app.application.services.monitoring import OutageMonitor
from app.application.services.outage_query import OutageQueryService
from app.config import POWER_OUTAGE_LOCATION, REDIS_URL

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    서비스 컨테이너

    HTTP 클라이언트, Redis 연결과 서비스를 생성하고 조립합니다.
    `async with` 로 사용하면 종료 시 연결을 정리합니다.

    with_store=False 이면 Redis/알림 없이 조회 서비스만 만듭니다 (Query 서버용).
    """

    def __init__(
        self,
        location: str = POWER_OUTAGE_LOCATION,
        redis_url: str = REDIS_URL,
        with_store: bool = True,
        http_client: Optional[httpx.AsyncClient] = None,
        redis: Optional[Redis] = None,
    ):
        self.location = location

        # Adapter 생성
        self._http = http_client or httpx.AsyncClient(follow_redirects=True)
        self._outage_client = PgeOutageClient(self._http)

        self._redis: Optional[Redis] = None
        self._monitor: Optional[OutageMonitor] = None
        if with_store:
            self._redis = redis or Redis.from_url(redis_url, decode_responses=True)
            self._monitor = OutageMonitor(
                outage_client=self._outage_client,
                store=RedisStatusStore(self._redis),
                notifier=PokeNotifier(self._http),
                location=location,
                status_key=status_key(location),
            )

        # Services 생성
        self._query_service = OutageQueryService(self._outage_client, location)

    @property
    def monitor(self) -> OutageMonitor:
        """OutageMonitor 인스턴스"""
        if self._monitor is None:
            raise RuntimeError("Container was built without a status store")
        return self._monitor

    @property
    def query_service(self) -> OutageQueryService:
        """OutageQueryService 인스턴스"""
        return self._query_service

    async def aclose(self) -> None:
        """HTTP 클라이언트 / Redis 연결 정리"""
        await self._http.aclose()
        if self._redis is not None:
            await self._redis.aclose()
        logger.info("🧹 Service container closed")

    async def __aenter__(self) -> "ServiceContainer":
        logger.info("✅ Service container initialized")
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
