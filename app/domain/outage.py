# app/domain/outage.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class Teryt(BaseModel):
    """
    PGE API 주소의 행정 구역 정보 (TERYT 코드 기반).
    우리가 매칭에 쓰는 건 cityName 뿐이다.
    """

    voivodeshipName: Optional[str] = None
    countyName: Optional[str] = None
    communeName: Optional[str] = None
    cityName: Optional[str] = None
    streetName: Optional[str] = None


class Address(BaseModel):
    """
    정전 대상 주소 하나.
    ex) { "numbers": "1-15, 17", "teryt": { "cityName": "Gdańsk", ... } }
    """

    numbers: Optional[str] = None
    teryt: Optional[Teryt] = None

    @property
    def city_name(self) -> Optional[str]:
        return self.teryt.cityName if self.teryt else None


class RawOutage(BaseModel):
    """
    PGE API 응답 배열의 원소 하나 (원본 그대로).

    - startAt / stopAt 은 API가 보낸 문자열 그대로 보관한다.
      (변경 감지가 문자열 비교라서 재포맷하면 안 됨)
    - 나머지 필드는 Pydantic이 무시한다.
    """

    id: int
    uuid: Optional[str] = None
    type: Optional[int] = None
    regionName: Optional[str] = None
    description: Optional[str] = None
    startAt: str
    stopAt: str
    revoked: bool = False
    addresses: List[Address] = Field(default_factory=list)

    @field_validator("addresses", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return value if value is not None else []


class DisplayOutage(BaseModel):
    """지역 필터링 후 사람이 읽기 좋은 필드를 붙인 정전 정보"""

    id: int
    region: Optional[str] = None
    description: Optional[str] = None
    startAt: str
    startAtRelative: str
    stopAt: str
    stopAtRelative: str
    totalDuration: str
    revoked: bool = False
    affectedAddresses: List[str] = Field(default_factory=list)


class OutageStatus(BaseModel):
    """
    특정 지역의 현재 정전 상태 (매 체크마다 새로 계산, 저장하지 않음).
    """

    hasOutage: bool
    outages: List[DisplayOutage] = Field(default_factory=list)
    checkedAt: str


class StoredOutage(BaseModel):
    """Redis에 저장하는 최소 정보"""

    id: int
    startAt: str
    stopAt: str


class StoredStatus(BaseModel):
    """
    Redis에 저장되는 마지막 상태.

    매 사이클마다 통째로 덮어쓴다 (부분 갱신 없음, 이력 없음).
    """

    hasOutage: bool
    outages: List[StoredOutage] = Field(default_factory=list)
    lastChecked: str
