"""
Response envelope helpers.

Success: {"status": "success", "data": ...} (+ "pagination" for lists).
Error:   {"status": "error", "error": "<message>"}.
"""

from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .pagination import Page


def success(data: Any) -> dict:
    return {"status": "success", "data": data}


def paginated(page: Page, data: list[Any]) -> dict:
    return {
        "status": "success",
        "data": data,
        "pagination": page.pagination.as_dict(),
    }


def error(message: str) -> dict:
    return {"status": "error", "error": message}


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )
