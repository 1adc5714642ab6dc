# app/domain/errors.py
"""
정전 모니터 에러 정의

- FetchError: PGE API 호출 실패 → 체크 사이클 중단
- NotifyError: webhook 호출 실패 → 로그만 남기고 사이클 계속
- ConfigError: 필수 설정 누락 → 프로세스 시작 실패
"""
from typing import Optional


class OutageMonitorError(Exception):
    """모든 모니터 에러의 부모"""


class FetchError(OutageMonitorError):
    """정전 데이터 조회 실패"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class NotifyError(OutageMonitorError):
    """webhook 알림 전송 실패"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ConfigError(OutageMonitorError, RuntimeError):
    """필수 설정 누락"""
