# tests/conftest.py
import os
import sys

# 프로젝트 루트 경로를 계산해서 sys.path 맨 앞에 넣어준다.
# 이러면 어디서 pytest를 실행해도 'app' 패키지를 안정적으로 import 할 수 있다.
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

import pytest


@pytest.fixture
def anyio_backend():
    return "asyncio"


def make_raw_outage(
    outage_id: int = 1,
    region: str = "Gdańsk",
    description: str = "Prace planowe",
    start_at: str = "2024-01-10T08:00:00",
    stop_at: str = "2024-01-10T14:00:00",
    cities=(),
    revoked: bool = False,
) -> dict:
    """
    PGE API 응답 원소 하나 생성

    cities: (cityName, numbers) 튜플 목록
    """
    return {
        "id": outage_id,
        "uuid": f"uuid-{outage_id}",
        "type": 1,
        "regionName": region,
        "description": description,
        "startAt": start_at,
        "stopAt": stop_at,
        "revoked": revoked,
        "addresses": [
            {
                "numbers": numbers,
                "teryt": {
                    "voivodeshipName": "pomorskie",
                    "countyName": None,
                    "communeName": None,
                    "cityName": city,
                    "streetName": "Długa",
                },
            }
            for city, numbers in cities
        ],
    }
