"""
Location queries for the HTTP layer.

Each listing follows the same order:
1) narrow by parent id (children index) or take the full collection
2) exact zip code match (sub-districts only)
3) case-insensitive name search
4) paginate the filtered result

Numeric query parameters are strict (400 on bad input); pagination
parameters are lenient (see `core.pagination.parse_page_request`).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeVar

from fastapi import HTTPException

from core import responses
from core.pagination import PageRequest, paginate
from core.params import parse_int

from .repository import LocationStore
from .schemas import SubDistrict


class _Named(Protocol):
    name_th: str
    name_en: str


NamedT = TypeVar("NamedT", bound=_Named)


def parse_int_param(raw: str | None, name: str) -> int | None:
    """
    Parse an optional integer query parameter.

    Empty or missing values mean "not provided" and return None.
    """
    text = (raw or "").strip()
    if not text:
        return None
    try:
        return parse_int(text)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid {name} parameter") from exc


def parse_path_id(raw: str, entity: str) -> int:
    try:
        return parse_int(raw)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid {entity} ID") from exc


def filter_by_search(items: Sequence[NamedT], search: str | None) -> Sequence[NamedT]:
    """
    Keep items whose Thai or English name contains `search`, ignoring case.
    """
    if not search:
        return items
    needle = search.lower()
    return [
        item
        for item in items
        if needle in item.name_th.lower() or needle in item.name_en.lower()
    ]


def filter_by_zip_code(items: Sequence[SubDistrict], zip_code: int | None) -> Sequence[SubDistrict]:
    if zip_code is None:
        return items
    return [item for item in items if item.zip_code == zip_code]


def _page_response(items: Sequence, page_request: PageRequest) -> dict:
    page = paginate(items, page_request)
    data = [item.model_dump(mode="json") for item in page.items]
    return responses.paginated(page, data)


def list_geographies(store: LocationStore) -> dict:
    return responses.success([g.model_dump(mode="json") for g in store.list_geographies()])


def list_provinces(
    store: LocationStore,
    *,
    geography_id: int | None,
    search: str | None,
    page_request: PageRequest,
) -> dict:
    if geography_id is not None:
        provinces: Sequence = store.list_provinces_by_geography(geography_id)
    else:
        provinces = store.list_provinces()
    provinces = filter_by_search(provinces, search)
    return _page_response(provinces, page_request)


def get_province(store: LocationStore, province_id: int) -> dict:
    result = store.province_with_geography(province_id)
    if result is None:
        raise HTTPException(status_code=404, detail="Province not found")
    return responses.success(result)


def list_districts_of_province(
    store: LocationStore,
    province_id: int,
    *,
    search: str | None,
    page_request: PageRequest,
) -> dict:
    if store.get_province(province_id) is None:
        raise HTTPException(status_code=404, detail="Province not found")
    districts = filter_by_search(store.list_districts_by_province(province_id), search)
    return _page_response(districts, page_request)


def list_districts(
    store: LocationStore,
    *,
    province_id: int | None,
    search: str | None,
    page_request: PageRequest,
) -> dict:
    if province_id is not None:
        districts: Sequence = store.list_districts_by_province(province_id)
    else:
        districts = store.list_districts()
    districts = filter_by_search(districts, search)
    return _page_response(districts, page_request)


def get_district(store: LocationStore, district_id: int) -> dict:
    result = store.district_with_province(district_id)
    if result is None:
        raise HTTPException(status_code=404, detail="District not found")
    return responses.success(result)


def list_sub_districts_of_district(
    store: LocationStore,
    district_id: int,
    *,
    zip_code: int | None,
    search: str | None,
    page_request: PageRequest,
) -> dict:
    if store.get_district(district_id) is None:
        raise HTTPException(status_code=404, detail="District not found")
    sub_districts = store.list_sub_districts_by_district(district_id)
    sub_districts = filter_by_zip_code(sub_districts, zip_code)
    sub_districts = filter_by_search(sub_districts, search)
    return _page_response(sub_districts, page_request)


def list_sub_districts(
    store: LocationStore,
    *,
    district_id: int | None,
    zip_code: int | None,
    search: str | None,
    page_request: PageRequest,
) -> dict:
    if district_id is not None:
        sub_districts: Sequence[SubDistrict] = store.list_sub_districts_by_district(district_id)
    else:
        sub_districts = store.list_sub_districts()
    sub_districts = filter_by_zip_code(sub_districts, zip_code)
    sub_districts = filter_by_search(sub_districts, search)
    return _page_response(sub_districts, page_request)


def get_sub_district(store: LocationStore, sub_district_id: int) -> dict:
    result = store.sub_district_with_district(sub_district_id)
    if result is None:
        raise HTTPException(status_code=404, detail="Sub-district not found")
    return responses.success(result)
