"""
FastAPI dependencies for location routes.
"""

from __future__ import annotations

from fastapi import Query, Request

from core.pagination import PageRequest, parse_page_request

from .repository import LocationStore


def get_store(request: Request) -> LocationStore:
    store = getattr(request.app.state, "location_store", None)
    if store is None:
        raise RuntimeError("Location store is not initialized. It is built in the app lifespan.")
    return store


def get_page_request(
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
) -> PageRequest:
    # Raw strings on purpose: bad page/limit values fall back to defaults
    # instead of failing validation.
    return parse_page_request(page, limit)
