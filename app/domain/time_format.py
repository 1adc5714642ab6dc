# app/domain/time_format.py
from __future__ import annotations

import math
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

# PGE API의 "오늘" 기준 시간대. 서버 시간대와 무관하게 고정.
WARSAW_TZ = ZoneInfo("Europe/Warsaw")

QUERY_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def warsaw_now() -> datetime:
    """바르샤바 시간대의 현재 시각 (aware datetime)"""
    return datetime.now(WARSAW_TZ)


def end_of_day(dt: datetime) -> datetime:
    """같은 날 23:59:59.999"""
    return dt.replace(hour=23, minute=59, second=59, microsecond=999000)


def format_query_datetime(dt: datetime) -> str:
    """PGE API 쿼리 파라미터 포맷: YYYY-MM-DD HH:MM:SS"""
    return dt.strftime(QUERY_DATETIME_FORMAT)


def parse_source_datetime(raw: str) -> datetime:
    """
    PGE API 시각 문자열을 aware datetime으로 파싱한다.

    오프셋이 없으면 바르샤바 현지 시각으로 간주하고,
    오프셋이 있으면 바르샤바 시간대로 변환한다.
    """
    dt = datetime.fromisoformat(raw.strip())
    if dt.tzinfo is None:
        return dt.replace(tzinfo=WARSAW_TZ)
    return dt.astimezone(WARSAW_TZ)


def _elapsed_seconds(start: datetime, stop: datetime) -> float:
    # 같은 tzinfo 끼리 빼면 벽시계 차이가 되므로 UTC로 맞춘 뒤 계산 (DST 전환 대응)
    return (stop.astimezone(timezone.utc) - start.astimezone(timezone.utc)).total_seconds()


def _format_span(total_seconds: float) -> str:
    # 가장 큰 단위 + 바로 아래 단위 나머지 (0이면 생략)
    minutes = math.floor(total_seconds / 60)
    hours = math.floor(total_seconds / 3600)
    days = math.floor(total_seconds / 86400)

    if days > 0:
        remaining_hours = hours % 24
        return f"{days}d {remaining_hours}h" if remaining_hours > 0 else f"{days}d"
    if hours > 0:
        remaining_minutes = minutes % 60
        return f"{hours}h {remaining_minutes}m" if remaining_minutes > 0 else f"{hours}h"
    return f"{minutes}m"


def format_relative_time(target: datetime, now: datetime) -> str:
    """
    now 기준 상대 시간 문자열.

    ex) "in 2d 3h", "30m ago", "in 0m"
    """
    diff = _elapsed_seconds(now, target)
    relative = _format_span(abs(diff))
    return f"{relative} ago" if diff < 0 else f"in {relative}"


def format_duration(start: datetime, stop: datetime) -> str:
    """
    start ~ stop 사이 기간 문자열 (과거/미래 표시 없음).

    ex) "1h 15m", "2d", "45m"
    """
    return _format_span(_elapsed_seconds(start, stop))
