from dotenv import load_dotenv
import os

from app.domain.errors import ConfigError

# .env 읽어오기
load_dotenv()

# Redis (마지막 상태 저장소)
REDIS_URL = os.getenv("REDIS_URL", "")

# Poke webhook 인증
POKE_API_KEY = os.getenv("POKE_API_KEY", "")
POKE_WEBHOOK_URL = os.getenv(
    "POKE_WEBHOOK_URL", "https://poke.com/api/v1/inbound-sms/webhook"
)

# 모니터링 대상 지역
POWER_OUTAGE_LOCATION = os.getenv("POWER_OUTAGE_LOCATION", "")

# PGE 정전 API
PGE_API_URL = os.getenv(
    "PGE_API_URL", "https://power-outage.gkpge.pl/api/power-outage"
)

# HTTP 타임아웃 (초)
FETCH_TIMEOUT_SEC = float(os.getenv("FETCH_TIMEOUT_SEC", "10"))
NOTIFY_TIMEOUT_SEC = float(os.getenv("NOTIFY_TIMEOUT_SEC", "5"))

# Query 서버
PORT = int(os.getenv("PORT", "8080"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# 체크 사이클에 필요한 필수 변수
CHECK_REQUIRED = ("REDIS_URL", "POKE_API_KEY", "POWER_OUTAGE_LOCATION")

# Query 서버에 필요한 필수 변수
QUERY_REQUIRED = ("POWER_OUTAGE_LOCATION",)


def validate_config(*names: str) -> None:
    """
    필수 환경 변수 검증

    import 시점이 아니라 프로세스 시작 시점에 호출한다.

    Args:
        names: 검증할 변수 이름 (생략하면 체크 사이클 기준)

    Raises:
        ConfigError: 비어 있는 변수가 있을 때
    """
    for name in names or CHECK_REQUIRED:
        if not globals().get(name):
            raise ConfigError(f"{name} is not defined")
