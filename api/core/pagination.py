"""
Offset pagination over in-memory sequences.

`paginate` works on any ordered sequence, so every entity list goes through
the same windowing code. Query-string parsing lives here too because the
page/limit rules are shared by all listing endpoints.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from .params import parse_int

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class Pagination:
    page: int
    limit: int
    total: int
    total_pages: int

    def as_dict(self) -> dict[str, int]:
        return {
            "page": self.page,
            "limit": self.limit,
            "total": self.total,
            "total_pages": self.total_pages,
        }


@dataclass(frozen=True)
class Page(Generic[T]):
    items: list[T]
    pagination: Pagination


def _parse_bounded(raw: str | None, default: int, *, low: int, high: int | None = None) -> int:
    text = (raw or "").strip()
    if not text:
        return default
    try:
        value = parse_int(text)
    except ValueError:
        return default
    if value < low or (high is not None and value > high):
        return default
    return value


def parse_page_request(page_raw: str | None, limit_raw: str | None) -> PageRequest:
    """
    Build a PageRequest from raw query values.

    Bad input never raises: each parameter independently falls back to its
    default when it is not an integer or is out of range.
    """
    return PageRequest(
        page=_parse_bounded(page_raw, DEFAULT_PAGE, low=1),
        limit=_parse_bounded(limit_raw, DEFAULT_LIMIT, low=1, high=MAX_LIMIT),
    )


def total_pages(total: int, limit: int) -> int:
    # An empty result still reports one page.
    return max(1, math.ceil(total / limit))


def paginate(items: Sequence[T], request: PageRequest) -> Page[T]:
    total = len(items)
    start = request.offset
    if start >= total:
        window: list[T] = []
    else:
        window = list(items[start : start + request.limit])

    return Page(
        items=window,
        pagination=Pagination(
            page=request.page,
            limit=request.limit,
            total=total,
            total_pages=total_pages(total, request.limit),
        ),
    )
