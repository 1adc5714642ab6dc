# app/application/ports/notifier.py
"""
알림 전송 포트 (인터페이스)

Secondary Port: 애플리케이션이 외부 알림 시스템을 사용하기 위한 인터페이스
required Port
"""
from typing import Protocol


class Notifier(Protocol):
    """
    알림 전송 인터페이스

    이 Protocol을 구현하는 어댑터:
    - PokeNotifier (adapters/poke_notifier.py)

    Protocol을 사용하는 서비스:
    - monitoring.py (정전 상태 변경 시 알림)
    """

    async def notify(self, message: str) -> None:
        """
        메시지 전송

        Args:
            message: 전송할 텍스트

        Raises:
            NotifyError: 전송 실패 (응답 에러, 타임아웃, 네트워크 에러)
        """
        ...
