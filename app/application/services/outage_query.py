from __future__ import annotations

from typing import Any, Dict
import logging

from app.adapters.pge_client import PgeOutageClient
from app.application.services.outage_status import get_outage_status

logger = logging.getLogger(__name__)


class OutageQueryService:
    """
    On-demand 정전 상태 조회 서비스

    상태 저장소/알림과 무관하게 현재 상태만 돌려준다.
    요청마다 독립적이라 동시에 여러 번 호출돼도 된다.
    """

    def __init__(self, outage_client: PgeOutageClient, location: str):
        self.outage_client = outage_client
        self.location = location

    async def get_power_outages(self) -> Dict[str, Any]:
        """
        Returns:
            OutageStatus JSON dict, 실패 시 {"error": "..."}
        """
        try:
            status = await get_outage_status(self.outage_client, self.location)
        except Exception as exc:
            logger.error(f"Error fetching power outage status: {exc}", exc_info=True)
            return {"error": f"Error fetching power outage status: {exc}"}

        return status.model_dump()
