"""
Location API endpoints (mounted under /api/v1).

Numeric parameters are accepted as strings and parsed in the service layer
so malformed values produce the API's own 400 messages.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from core.pagination import PageRequest

from . import service
from .dependencies import get_page_request, get_store
from .repository import LocationStore

router = APIRouter(prefix="/api/v1")


@router.get("/geographies")
async def list_geographies(store: LocationStore = Depends(get_store)) -> dict:
    return service.list_geographies(store)


@router.get("/provinces")
async def list_provinces(
    geography_id: str | None = Query(default=None),
    search: str | None = Query(default=None),
    page_request: PageRequest = Depends(get_page_request),
    store: LocationStore = Depends(get_store),
) -> dict:
    return service.list_provinces(
        store,
        geography_id=service.parse_int_param(geography_id, "geography_id"),
        search=search,
        page_request=page_request,
    )


@router.get("/provinces/{province_id}")
async def get_province(province_id: str, store: LocationStore = Depends(get_store)) -> dict:
    return service.get_province(store, service.parse_path_id(province_id, "province"))


@router.get("/provinces/{province_id}/districts")
async def list_province_districts(
    province_id: str,
    search: str | None = Query(default=None),
    page_request: PageRequest = Depends(get_page_request),
    store: LocationStore = Depends(get_store),
) -> dict:
    return service.list_districts_of_province(
        store,
        service.parse_path_id(province_id, "province"),
        search=search,
        page_request=page_request,
    )


@router.get("/districts")
async def list_districts(
    province_id: str | None = Query(default=None),
    search: str | None = Query(default=None),
    page_request: PageRequest = Depends(get_page_request),
    store: LocationStore = Depends(get_store),
) -> dict:
    return service.list_districts(
        store,
        province_id=service.parse_int_param(province_id, "province_id"),
        search=search,
        page_request=page_request,
    )


@router.get("/districts/{district_id}")
async def get_district(district_id: str, store: LocationStore = Depends(get_store)) -> dict:
    return service.get_district(store, service.parse_path_id(district_id, "district"))


@router.get("/districts/{district_id}/subdistricts")
async def list_district_sub_districts(
    district_id: str,
    search: str | None = Query(default=None),
    zip_code: str | None = Query(default=None),
    page_request: PageRequest = Depends(get_page_request),
    store: LocationStore = Depends(get_store),
) -> dict:
    parsed_district_id = service.parse_path_id(district_id, "district")
    return service.list_sub_districts_of_district(
        store,
        parsed_district_id,
        zip_code=service.parse_int_param(zip_code, "zip_code"),
        search=search,
        page_request=page_request,
    )


@router.get("/subdistricts")
async def list_sub_districts(
    district_id: str | None = Query(default=None),
    search: str | None = Query(default=None),
    zip_code: str | None = Query(default=None),
    page_request: PageRequest = Depends(get_page_request),
    store: LocationStore = Depends(get_store),
) -> dict:
    return service.list_sub_districts(
        store,
        district_id=service.parse_int_param(district_id, "district_id"),
        zip_code=service.parse_int_param(zip_code, "zip_code"),
        search=search,
        page_request=page_request,
    )


@router.get("/subdistricts/{sub_district_id}")
async def get_sub_district(sub_district_id: str, store: LocationStore = Depends(get_store)) -> dict:
    return service.get_sub_district(store, service.parse_path_id(sub_district_id, "sub-district"))
