"""
PGE 정전 API 클라이언트
"""
from datetime import datetime
from typing import List, Optional
import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from app.config import PGE_API_URL, FETCH_TIMEOUT_SEC
from app.domain.errors import FetchError
from app.domain.outage import RawOutage
from app.domain.time_format import end_of_day, format_query_datetime, warsaw_now

logger = logging.getLogger(__name__)

_OUTAGE_LIST = TypeAdapter(List[RawOutage])


class PgeOutageClient:
    """PGE power-outage API에서 오늘 진행 중/예정 정전 목록 조회"""

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_url: str = PGE_API_URL,
        timeout: float = FETCH_TIMEOUT_SEC,
    ):
        self.client = client
        self.api_url = api_url
        self.timeout = timeout

    @staticmethod
    def build_params(now: datetime) -> dict:
        """
        조회 구간 파라미터

        - startAtTo: 오늘 끝(23:59:59) 이전에 시작한 정전
        - stopAtFrom: 지금 이후에 끝나는 정전 (아직 진행 중)
        """
        return {
            "startAtTo": format_query_datetime(end_of_day(now)),
            "stopAtFrom": format_query_datetime(now),
        }

    async def fetch_outages(self, now: Optional[datetime] = None) -> List[RawOutage]:
        """
        오늘자 정전 목록 조회

        Args:
            now: 기준 시각 (기본: 바르샤바 현재 시각)

        Returns:
            RawOutage 리스트

        Raises:
            FetchError: 응답 에러, 타임아웃, 네트워크 에러, 잘못된 응답 본문
        """
        now = now or warsaw_now()
        params = self.build_params(now)

        try:
            resp = await self.client.get(self.api_url, params=params, timeout=self.timeout)
        except httpx.TimeoutException as exc:
            raise FetchError(f"API timeout: {exc}") from exc
        except httpx.RequestError as exc:
            raise FetchError(f"API request error: {exc}") from exc

        if resp.is_error:
            logger.error(
                f"❌ PGE API response error. status={resp.status_code} body={resp.text[:200]}"
            )
            raise FetchError(f"API error: {resp.status_code}", status_code=resp.status_code)

        try:
            outages = _OUTAGE_LIST.validate_json(resp.content)
        except ValidationError as exc:
            raise FetchError(f"Invalid API response: {exc}", status_code=resp.status_code) from exc

        logger.info(
            "📬 Retrieved %d outages (startAtTo=%s, stopAtFrom=%s)",
            len(outages),
            params["startAtTo"],
            params["stopAtFrom"],
        )
        return outages
