from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
import logging

from app.adapters.pge_client import PgeOutageClient
from app.application.ports.notifier import Notifier
from app.application.ports.status_store import StatusStore
from app.application.services.outage_status import get_outage_status
from app.domain.change_detector import has_status_changed, to_stored_status
from app.domain.errors import NotifyError
from app.domain.outage import OutageStatus, StoredStatus

logger = logging.getLogger(__name__)

OUTAGE_CHANGE_MESSAGE = (
    "[AUTOMATED] The power outage monitor has detected an outage or a change "
    "in the power outage status, please call the MCP to get the lastest "
    "information and notify the user."
)


@dataclass(frozen=True)
class CheckResult:
    status_changed: bool
    current_status: OutageStatus
    previous_status: Optional[StoredStatus]


class OutageMonitor:
    """
    정전 상태 체크 사이클 서비스

    책임:
    - 현재 정전 상태 조회
    - 마지막 저장 상태와 비교
    - 변경 시 알림 전송
    - 현재 상태 저장
    """

    def __init__(
        self,
        outage_client: PgeOutageClient,
        store: StatusStore,
        notifier: Notifier,
        location: str,
        status_key: str,
    ):
        """
        Args:
            outage_client: PGE API 클라이언트
            store: 상태 저장소 구현체
            notifier: 알림 전송 구현체
            location: 모니터링 지역
            status_key: 상태 저장 key
        """
        self.outage_client = outage_client
        self.store = store
        self.notifier = notifier
        self.location = location
        self.status_key = status_key

    async def check_power_outage(self) -> CheckResult:
        """
        체크 사이클 1회 실행

        fetch → 비교 → (변경 시) 알림 → 저장 순서로 진행한다.
        FetchError 는 그대로 올라가며 이 경우 저장/알림 모두 하지 않는다.
        """
        logger.info(f"🔍 Checking power outage status for '{self.location}'...")

        current_status = await get_outage_status(self.outage_client, self.location)
        logger.info("Current status: %s", current_status.model_dump_json(indent=2))

        previous_status = await self.store.get(self.status_key)
        logger.info(
            "Previous status: %s",
            previous_status.model_dump_json(indent=2) if previous_status else None,
        )

        status_changed = has_status_changed(current_status, previous_status)
        logger.info(f"Status changed: {status_changed}")

        if status_changed:
            await self._notify_change()

        new_stored_status = to_stored_status(
            current_status,
            last_checked=datetime.now(timezone.utc).isoformat(),
        )
        await self.store.set(self.status_key, new_stored_status)

        logger.info(
            "✅ Check complete: statusChanged=%s, hasOutage=%s, outageCount=%d",
            status_changed,
            current_status.hasOutage,
            len(current_status.outages),
        )

        return CheckResult(
            status_changed=status_changed,
            current_status=current_status,
            previous_status=previous_status,
        )

    async def _notify_change(self) -> None:
        # 알림 실패는 사이클을 멈추지 않음 (상태 저장은 계속)
        try:
            await self.notifier.notify(OUTAGE_CHANGE_MESSAGE)
        except NotifyError as exc:
            logger.error(f"❌ Webhook error: {exc}")
