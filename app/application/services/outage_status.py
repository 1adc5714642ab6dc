from __future__ import annotations

from datetime import datetime
from typing import List, Optional
import logging

from app.adapters.pge_client import PgeOutageClient
from app.domain.errors import FetchError
from app.domain.outage import DisplayOutage, OutageStatus, RawOutage
from app.domain.time_format import (
    format_duration,
    format_relative_time,
    parse_source_datetime,
    warsaw_now,
)

logger = logging.getLogger(__name__)


def normalize_place(place: str) -> str:
    return place.strip().lower()


def _city_matches(outage: RawOutage, place: str) -> bool:
    # 주소 도시명은 부분 일치가 아니라 정확히 일치해야 함
    return any(
        (addr.city_name or "").lower() == place for addr in outage.addresses
    )


def matches_place(outage: RawOutage, place: str) -> bool:
    """
    정전 레코드가 지역에 해당하는지 여부.

    - regionName 부분 일치 (대소문자 무시)
    - description 부분 일치 (대소문자 무시)
    - addresses[].teryt.cityName 정확히 일치 (대소문자 무시)

    place 는 normalize_place 를 거친 값이어야 한다.
    """
    if outage.regionName and place in outage.regionName.lower():
        return True

    if outage.description and place in outage.description.lower():
        return True

    return _city_matches(outage, place)


def _affected_addresses(outage: RawOutage, place: str) -> List[str]:
    numbers = [
        addr.numbers or "unknown"
        for addr in outage.addresses
        if (addr.city_name or "").lower() == place
    ]
    return [n for n in numbers if n]


def to_display_outage(outage: RawOutage, place: str, now: datetime) -> DisplayOutage:
    try:
        start = parse_source_datetime(outage.startAt)
        stop = parse_source_datetime(outage.stopAt)
    except ValueError as exc:
        raise FetchError(
            f"Invalid API response: outage {outage.id} has bad startAt/stopAt: {exc}"
        ) from exc

    return DisplayOutage(
        id=outage.id,
        region=outage.regionName,
        description=outage.description,
        startAt=outage.startAt,
        startAtRelative=format_relative_time(start, now),
        stopAt=outage.stopAt,
        stopAtRelative=format_relative_time(stop, now),
        totalDuration=format_duration(start, stop),
        revoked=outage.revoked,
        affectedAddresses=_affected_addresses(outage, place),
    )


def find_outage_status(
    place: str,
    outages: List[RawOutage],
    now: Optional[datetime] = None,
) -> OutageStatus:
    """
    정전 목록에서 특정 지역의 정전 상태를 만든다.

    Args:
        place: 지역 이름 (대소문자 무관)
        outages: PGE API 원본 정전 목록
        now: 기준 시각 (기본: 바르샤바 현재 시각)

    Returns:
        OutageStatus
    """
    now = now or warsaw_now()
    place = normalize_place(place)

    matched = [o for o in outages if matches_place(o, place)]
    logger.debug(f"🔍 {len(matched)}/{len(outages)} outages matched '{place}'")

    return OutageStatus(
        hasOutage=len(matched) > 0,
        outages=[to_display_outage(o, place, now) for o in matched],
        checkedAt=now.isoformat(),
    )


async def get_outage_status(client: PgeOutageClient, place: str) -> OutageStatus:
    """
    PGE API 조회 + 지역 필터링

    Raises:
        FetchError: PGE API 호출 실패, 시각 형식이 잘못된 레코드
    """
    now = warsaw_now()
    outages = await client.fetch_outages(now)
    return find_outage_status(place, outages, now)
