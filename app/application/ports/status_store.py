# app/application/ports/status_store.py
"""
상태 저장소 포트 (인터페이스)

마지막으로 확인한 정전 상태를 key 하나에 통째로 저장/조회한다.
"""
from typing import Optional, Protocol

from app.domain.outage import StoredStatus


class StatusStore(Protocol):
    """
    상태 저장소 인터페이스

    이 Protocol을 구현하는 어댑터:
    - RedisStatusStore (adapters/redis_store.py)
    """

    async def get(self, key: str) -> Optional[StoredStatus]:
        """저장된 상태 조회 (없으면 None)"""
        ...

    async def set(self, key: str, status: StoredStatus) -> None:
        """상태 전체 덮어쓰기"""
        ...
