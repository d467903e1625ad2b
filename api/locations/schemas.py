"""
Location record types.

Field names match the JSON source files and the API output, so records are
parsed and dumped without aliases. Records are frozen: the dataset is never
mutated after load.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class Geography(_Record):
    id: int
    name: str


class Province(_Record):
    id: int
    name_th: str
    name_en: str
    geography_id: int
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None


class District(_Record):
    id: int
    name_th: str
    name_en: str
    province_id: int
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None


class SubDistrict(_Record):
    id: int
    zip_code: int
    name_th: str
    name_en: str
    district_id: int
    lat: float | None = None
    long: float | None = None
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None
