# app/adapters/poke_notifier.py
"""
Poke Webhook 알림 전송 어댑터
"""
import logging

import httpx

from app.config import POKE_API_KEY, POKE_WEBHOOK_URL, NOTIFY_TIMEOUT_SEC
from app.domain.errors import NotifyError

logger = logging.getLogger(__name__)


class PokeNotifier:
    """Poke inbound webhook으로 메시지 전송"""

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str = POKE_API_KEY,
        webhook_url: str = POKE_WEBHOOK_URL,
        timeout: float = NOTIFY_TIMEOUT_SEC,
    ):
        self.client = client
        self.api_key = api_key
        self.webhook_url = webhook_url
        self.timeout = timeout

    async def notify(self, message: str) -> None:
        """
        Poke Webhook으로 메시지 전송

        Args:
            message: 전송할 텍스트

        Raises:
            NotifyError: 응답 에러 / 요청 에러
        """
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

        try:
            resp = await self.client.post(
                self.webhook_url,
                json={"message": message},
                headers=headers,
                timeout=self.timeout,
            )
        except httpx.RequestError as exc:
            raise NotifyError(f"Webhook request error: {exc}") from exc

        if resp.is_error:
            raise NotifyError(
                f"Webhook failed: {resp.status_code} {resp.reason_phrase} body={resp.text[:200]}",
                status_code=resp.status_code,
            )

        logger.info("✅ Webhook called successfully!")
