# app/domain/change_detector.py
from __future__ import annotations

from typing import Optional

import logging

from app.domain.outage import OutageStatus, StoredOutage, StoredStatus

logger = logging.getLogger(__name__)


def has_status_changed(
    current: OutageStatus,
    previous: Optional[StoredStatus],
) -> bool:
    """
    현재 상태와 마지막 저장 상태를 비교해 알림이 필요한 변경인지 판별한다.

    판단 순서 (하나라도 해당하면 변경):
      1) 이전 상태 없음 (최초 실행)
      2) hasOutage 값이 다름
      3) 정전 건수가 다름
      4) 새 정전 id 등장, 또는 같은 id의 startAt/stopAt 문자열이 다름
      5) 이전 정전 id가 사라짐

    시각은 문자열 그대로 비교한다. API가 포맷만 바꿔도 변경으로 잡힌다.
    """
    if previous is None:
        logger.info("No previous status stored, treating as changed")
        return True

    if current.hasOutage != previous.hasOutage:
        return True

    if len(current.outages) != len(previous.outages):
        return True

    previous_by_id = {}
    for outage in previous.outages:
        # 같은 id가 여러 번 오면 첫 번째 것 기준
        previous_by_id.setdefault(outage.id, outage)

    for outage in current.outages:
        previous_outage = previous_by_id.get(outage.id)

        # 새 정전 등장
        if previous_outage is None:
            return True

        # 시간 변경
        if outage.startAt != previous_outage.startAt:
            return True
        if outage.stopAt != previous_outage.stopAt:
            return True

    current_ids = {outage.id for outage in current.outages}
    for outage in previous.outages:
        # 정전 해제 (목록에서 사라짐)
        if outage.id not in current_ids:
            return True

    return False


def to_stored_status(current: OutageStatus, last_checked: str) -> StoredStatus:
    """저장용 최소 형태로 변환 (id, startAt, stopAt 만 남김)"""
    return StoredStatus(
        hasOutage=current.hasOutage,
        outages=[
            StoredOutage(id=o.id, startAt=o.startAt, stopAt=o.stopAt)
            for o in current.outages
        ],
        lastChecked=last_checked,
    )
