from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from locations.loader import (
    DISTRICTS_FILE,
    GEOGRAPHIES_FILE,
    PROVINCES_FILE,
    SUB_DISTRICTS_FILE,
    Dataset,
    load_dataset,
)
from locations.repository import LocationStore

TIMESTAMP = "2019-08-09T03:33:09.000+07:00"


def province_record(id: int, name_th: str, name_en: str, geography_id: int) -> dict[str, Any]:
    return {
        "id": id,
        "name_th": name_th,
        "name_en": name_en,
        "geography_id": geography_id,
        "created_at": TIMESTAMP,
        "updated_at": TIMESTAMP,
        "deleted_at": None,
    }


def district_record(id: int, name_th: str, name_en: str, province_id: int) -> dict[str, Any]:
    return {
        "id": id,
        "name_th": name_th,
        "name_en": name_en,
        "province_id": province_id,
        "created_at": TIMESTAMP,
        "updated_at": TIMESTAMP,
        "deleted_at": None,
    }


def sub_district_record(
    id: int,
    zip_code: int,
    name_th: str,
    name_en: str,
    district_id: int,
    lat: float | None = None,
    long: float | None = None,
) -> dict[str, Any]:
    return {
        "id": id,
        "zip_code": zip_code,
        "name_th": name_th,
        "name_en": name_en,
        "district_id": district_id,
        "lat": lat,
        "long": long,
        "created_at": TIMESTAMP,
        "updated_at": TIMESTAMP,
        "deleted_at": None,
    }


GEOGRAPHIES = [
    {"id": 1, "name": "ภาคเหนือ"},
    {"id": 2, "name": "ภาคกลาง"},
    {"id": 3, "name": "ภาคตะวันออกเฉียงเหนือ"},
]

PROVINCES = [
    province_record(1, "กรุงเทพมหานคร", "Bangkok", 2),
    province_record(2, "สมุทรปราการ", "Samut Prakan", 2),
    province_record(38, "เชียงใหม่", "Chiang Mai", 1),
    # Geography 42 does not exist.
    province_record(99, "จังหวัดทดสอบ", "Orphan Province", 42),
]

DISTRICTS = [
    district_record(1001, "เขตพระนคร", "Khet Phra Nakhon", 1),
    district_record(1002, "เขตดุสิต", "Khet Dusit", 1),
    district_record(1101, "เมืองสมุทรปราการ", "Mueang Samut Prakan", 2),
    district_record(5001, "เมืองเชียงใหม่", "Mueang Chiang Mai", 38),
    # Province 777 does not exist.
    district_record(9001, "อำเภอทดสอบ", "Orphan District", 777),
]

SUB_DISTRICTS = [
    sub_district_record(100101, 10200, "พระบรมมหาราชวัง", "Phra Borom Maha Ratchawang", 1001),
    sub_district_record(100102, 10200, "วังบูรพาภิรมย์", "Wang Burapha Phirom", 1001),
    sub_district_record(100201, 10300, "ดุสิต", "Dusit", 1002),
    sub_district_record(110101, 10270, "ปากน้ำ", "Pak Nam", 1101),
    sub_district_record(500101, 50200, "ศรีภูมิ", "Si Phum", 5001, lat=18.7964, long=98.9853),
    # District 8888 does not exist.
    sub_district_record(900101, 10110, "ตำบลกำพร้า", "Orphan Tambon", 8888),
    # District 9001 exists but its province does not.
    sub_district_record(900201, 10110, "ตำบลทดสอบ", "Test Tambon", 9001),
]


def write_dataset(
    directory: Path,
    *,
    geographies: list[dict] | None = None,
    provinces: list[dict] | None = None,
    districts: list[dict] | None = None,
    sub_districts: list[dict] | None = None,
) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    files = {
        GEOGRAPHIES_FILE: GEOGRAPHIES if geographies is None else geographies,
        PROVINCES_FILE: PROVINCES if provinces is None else provinces,
        DISTRICTS_FILE: DISTRICTS if districts is None else districts,
        SUB_DISTRICTS_FILE: SUB_DISTRICTS if sub_districts is None else sub_districts,
    }
    for filename, records in files.items():
        (directory / filename).write_text(json.dumps(records, ensure_ascii=False), encoding="utf-8")
    return directory


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    return write_dataset(tmp_path / "raw")


@pytest.fixture
def dataset(data_dir: Path) -> Dataset:
    return load_dataset(data_dir)


@pytest.fixture
def store(dataset: Dataset) -> LocationStore:
    return LocationStore.build(dataset)


@pytest.fixture
def client(data_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    """TestClient with the lifespan run against the fixture dataset."""
    from main import app

    monkeypatch.setenv("DATA_DIR", str(data_dir))
    with TestClient(app) as test_client:
        yield test_client
