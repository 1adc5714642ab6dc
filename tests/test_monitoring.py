# tests/test_monitoring.py
from typing import Dict, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.adapters.pge_client import PgeOutageClient
from app.application.services.monitoring import OUTAGE_CHANGE_MESSAGE, OutageMonitor
from app.domain.errors import FetchError, NotifyError
from app.domain.outage import RawOutage, StoredOutage, StoredStatus
from conftest import make_raw_outage


STATUS_KEY = "power-outage:last-status:sopot"


class InMemoryStatusStore:
    """테스트용 StatusStore 구현"""

    def __init__(self, initial: Optional[StoredStatus] = None):
        self.data: Dict[str, StoredStatus] = {}
        if initial is not None:
            self.data[STATUS_KEY] = initial
        self.set_calls = 0

    async def get(self, key: str) -> Optional[StoredStatus]:
        return self.data.get(key)

    async def set(self, key: str, status: StoredStatus) -> None:
        self.set_calls += 1
        self.data[key] = status


# --- 픽스처 ----------------------------------------------------------------

@pytest.fixture
def outage_client():
    """Mock PgeOutageClient"""
    mock = MagicMock(spec=PgeOutageClient)
    mock.fetch_outages = AsyncMock(return_value=[])
    return mock


@pytest.fixture
def notifier():
    """Mock Notifier"""
    mock = MagicMock()
    mock.notify = AsyncMock(return_value=None)
    return mock


def make_monitor(outage_client, notifier, store) -> OutageMonitor:
    return OutageMonitor(
        outage_client=outage_client,
        store=store,
        notifier=notifier,
        location="Sopot",
        status_key=STATUS_KEY,
    )


def sopot_outage(outage_id: int, **kwargs) -> RawOutage:
    return RawOutage.model_validate(
        make_raw_outage(outage_id=outage_id, region="RE Sopot", **kwargs)
    )


# --- 시나리오 테스트 --------------------------------------------------------

@pytest.mark.anyio
async def test_first_run_notifies_and_persists(outage_client, notifier):
    """최초 실행 + 정전 1건 → 알림 1번, 최소 형태로 저장"""
    outage_client.fetch_outages.return_value = [sopot_outage(1)]
    store = InMemoryStatusStore()

    result = await make_monitor(outage_client, notifier, store).check_power_outage()

    assert result.status_changed is True
    assert result.previous_status is None
    notifier.notify.assert_awaited_once_with(OUTAGE_CHANGE_MESSAGE)

    saved = store.data[STATUS_KEY]
    assert saved.hasOutage is True
    assert saved.outages == [
        StoredOutage(id=1, startAt="2024-01-10T08:00:00", stopAt="2024-01-10T14:00:00")
    ]


@pytest.mark.anyio
async def test_second_run_unchanged_refreshes_last_checked(outage_client, notifier):
    """동일 목록 재조회 → 알림 없음, lastChecked 만 갱신"""
    outage_client.fetch_outages.return_value = [sopot_outage(1)]
    previous = StoredStatus(
        hasOutage=True,
        outages=[StoredOutage(id=1, startAt="2024-01-10T08:00:00", stopAt="2024-01-10T14:00:00")],
        lastChecked="2000-01-01T00:00:00+00:00",
    )
    store = InMemoryStatusStore(previous)

    result = await make_monitor(outage_client, notifier, store).check_power_outage()

    assert result.status_changed is False
    assert result.previous_status == previous
    notifier.notify.assert_not_awaited()

    saved = store.data[STATUS_KEY]
    assert store.set_calls == 1
    assert saved.outages == previous.outages
    assert saved.hasOutage is True
    assert saved.lastChecked != previous.lastChecked


@pytest.mark.anyio
async def test_disappeared_outage_notifies_and_drops_id(outage_client, notifier):
    """id=5 정전이 사라짐 → 변경, 알림, 저장 상태에서 제외"""
    outage_client.fetch_outages.return_value = [sopot_outage(1)]
    previous = StoredStatus(
        hasOutage=True,
        outages=[
            StoredOutage(id=1, startAt="2024-01-10T08:00:00", stopAt="2024-01-10T14:00:00"),
            StoredOutage(id=5, startAt="2024-01-10T09:00:00", stopAt="2024-01-10T12:00:00"),
        ],
        lastChecked="2024-01-10T08:00:00+00:00",
    )
    store = InMemoryStatusStore(previous)

    result = await make_monitor(outage_client, notifier, store).check_power_outage()

    assert result.status_changed is True
    notifier.notify.assert_awaited_once()
    assert [o.id for o in store.data[STATUS_KEY].outages] == [1]


@pytest.mark.anyio
async def test_outages_for_other_places_are_ignored(outage_client, notifier):
    outage_client.fetch_outages.return_value = [
        RawOutage.model_validate(make_raw_outage(outage_id=3, region="RE Gdynia")),
    ]
    previous = StoredStatus(hasOutage=False, outages=[], lastChecked="2024-01-10T08:00:00+00:00")
    store = InMemoryStatusStore(previous)

    result = await make_monitor(outage_client, notifier, store).check_power_outage()

    assert result.status_changed is False
    assert result.current_status.hasOutage is False
    notifier.notify.assert_not_awaited()


# --- 에러 처리 --------------------------------------------------------------

@pytest.mark.anyio
async def test_fetch_error_aborts_without_write_or_notify(outage_client, notifier):
    """조회 실패 → 저장/알림 없이 에러 전파"""
    outage_client.fetch_outages.side_effect = FetchError("API error: 500", status_code=500)
    store = InMemoryStatusStore()

    with pytest.raises(FetchError):
        await make_monitor(outage_client, notifier, store).check_power_outage()

    assert store.set_calls == 0
    notifier.notify.assert_not_awaited()


@pytest.mark.anyio
async def test_notify_error_does_not_stop_persist(outage_client, notifier):
    """알림 실패해도 상태는 저장"""
    outage_client.fetch_outages.return_value = [sopot_outage(1)]
    notifier.notify.side_effect = NotifyError("Webhook failed: 500", status_code=500)
    store = InMemoryStatusStore()

    result = await make_monitor(outage_client, notifier, store).check_power_outage()

    assert result.status_changed is True
    notifier.notify.assert_awaited_once()
    assert store.set_calls == 1
    assert store.data[STATUS_KEY].hasOutage is True


@pytest.mark.anyio
async def test_bad_timestamp_aborts_without_write_or_notify(outage_client, notifier):
    """시각 형식이 깨진 레코드 → FetchError, 저장/알림 없음"""
    outage_client.fetch_outages.return_value = [sopot_outage(1, stop_at="24:99")]
    store = InMemoryStatusStore()

    with pytest.raises(FetchError):
        await make_monitor(outage_client, notifier, store).check_power_outage()

    assert store.set_calls == 0
    notifier.notify.assert_not_awaited()
