"""
Static dataset loader.

Reads the four JSON files (one array of records per entity type) from a data
directory. Loading is all-or-nothing: the first missing, unreadable, or
malformed file raises `DataLoadError` and nothing is returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from .schemas import District, Geography, Province, SubDistrict

GEOGRAPHIES_FILE = "geographies.json"
PROVINCES_FILE = "provinces.json"
DISTRICTS_FILE = "districts.json"
SUB_DISTRICTS_FILE = "sub_districts.json"

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class DataLoadError(RuntimeError):
    """
    Raised when the dataset cannot be loaded.

    `path` is the file (or directory) that failed; `cause` is the underlying
    exception when there is one.
    """

    def __init__(self, path: Path | str, message: str, cause: BaseException | None = None) -> None:
        self.path = Path(path)
        self.cause = cause
        detail = f"{self.path}: {message}"
        if cause is not None:
            detail = f"{detail} ({cause})"
        super().__init__(detail)


@dataclass(frozen=True)
class Dataset:
    geographies: tuple[Geography, ...]
    provinces: tuple[Province, ...]
    districts: tuple[District, ...]
    sub_districts: tuple[SubDistrict, ...]


def _read_records(path: Path, model: type[RecordT]) -> tuple[RecordT, ...]:
    if not path.is_file():
        raise DataLoadError(path, "data file does not exist")
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise DataLoadError(path, "data file is unreadable", exc) from exc

    try:
        records = TypeAdapter(list[model]).validate_json(raw)
    except ValidationError as exc:
        raise DataLoadError(path, f"data file does not match {model.__name__} records", exc) from exc

    logger.info("data_file_loaded file=%s records=%s", path.name, len(records))
    return tuple(records)


def load_dataset(data_dir: Path | str) -> Dataset:
    root = Path(data_dir)
    if not root.is_dir():
        raise DataLoadError(root, "data directory does not exist")

    return Dataset(
        geographies=_read_records(root / GEOGRAPHIES_FILE, Geography),
        provinces=_read_records(root / PROVINCES_FILE, Province),
        districts=_read_records(root / DISTRICTS_FILE, District),
        sub_districts=_read_records(root / SUB_DISTRICTS_FILE, SubDistrict),
    )
