"""
In-memory location store.

`LocationStore.build` indexes a loaded `Dataset` once:
- id -> record maps for every entity type
- parent id -> children lists (geography -> provinces, province -> districts,
  district -> sub-districts), in source order

The store is never mutated after build, so request handlers share one
instance across threads without locking. Accessors hand out tuples or fresh
lists; records themselves are frozen.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeVar

from .loader import Dataset
from .schemas import District, Geography, Province, SubDistrict

K = TypeVar("K")
V = TypeVar("V")


def _index_by_id(records: Iterable[V], key: Callable[[V], K]) -> Mapping[K, V]:
    return MappingProxyType({key(record): record for record in records})


def _group_by_parent(records: Iterable[V], parent: Callable[[V], K]) -> Mapping[K, tuple[V, ...]]:
    groups: dict[K, list[V]] = defaultdict(list)
    for record in records:
        groups[parent(record)].append(record)
    return MappingProxyType({key: tuple(children) for key, children in groups.items()})


@dataclass(frozen=True)
class LocationStore:
    geographies: tuple[Geography, ...]
    provinces: tuple[Province, ...]
    districts: tuple[District, ...]
    sub_districts: tuple[SubDistrict, ...]

    geography_by_id: Mapping[int, Geography]
    province_by_id: Mapping[int, Province]
    district_by_id: Mapping[int, District]
    sub_district_by_id: Mapping[int, SubDistrict]

    provinces_by_geography: Mapping[int, tuple[Province, ...]]
    districts_by_province: Mapping[int, tuple[District, ...]]
    sub_districts_by_district: Mapping[int, tuple[SubDistrict, ...]]

    @classmethod
    def build(cls, dataset: Dataset) -> LocationStore:
        return cls(
            geographies=dataset.geographies,
            provinces=dataset.provinces,
            districts=dataset.districts,
            sub_districts=dataset.sub_districts,
            geography_by_id=_index_by_id(dataset.geographies, lambda g: g.id),
            province_by_id=_index_by_id(dataset.provinces, lambda p: p.id),
            district_by_id=_index_by_id(dataset.districts, lambda d: d.id),
            sub_district_by_id=_index_by_id(dataset.sub_districts, lambda s: s.id),
            provinces_by_geography=_group_by_parent(dataset.provinces, lambda p: p.geography_id),
            districts_by_province=_group_by_parent(dataset.districts, lambda d: d.province_id),
            sub_districts_by_district=_group_by_parent(dataset.sub_districts, lambda s: s.district_id),
        )

    # Geographies

    def list_geographies(self) -> tuple[Geography, ...]:
        return self.geographies

    def get_geography(self, geography_id: int) -> Geography | None:
        return self.geography_by_id.get(geography_id)

    # Provinces

    def list_provinces(self) -> tuple[Province, ...]:
        return self.provinces

    def get_province(self, province_id: int) -> Province | None:
        return self.province_by_id.get(province_id)

    def list_provinces_by_geography(self, geography_id: int) -> tuple[Province, ...]:
        return self.provinces_by_geography.get(geography_id, ())

    # Districts

    def list_districts(self) -> tuple[District, ...]:
        return self.districts

    def get_district(self, district_id: int) -> District | None:
        return self.district_by_id.get(district_id)

    def list_districts_by_province(self, province_id: int) -> tuple[District, ...]:
        return self.districts_by_province.get(province_id, ())

    # Sub-districts

    def list_sub_districts(self) -> tuple[SubDistrict, ...]:
        return self.sub_districts

    def get_sub_district(self, sub_district_id: int) -> SubDistrict | None:
        return self.sub_district_by_id.get(sub_district_id)

    def list_sub_districts_by_district(self, district_id: int) -> tuple[SubDistrict, ...]:
        return self.sub_districts_by_district.get(district_id, ())

    # Embedded lookups. A missing parent leaves its key out of the result.

    def province_with_geography(self, province_id: int) -> dict | None:
        province = self.get_province(province_id)
        if province is None:
            return None
        result = province.model_dump(mode="json")
        geography = self.get_geography(province.geography_id)
        if geography is not None:
            result["geography"] = geography.model_dump(mode="json")
        return result

    def district_with_province(self, district_id: int) -> dict | None:
        district = self.get_district(district_id)
        if district is None:
            return None
        result = district.model_dump(mode="json")
        province = self.get_province(district.province_id)
        if province is not None:
            result["province"] = province.model_dump(mode="json")
        return result

    def sub_district_with_district(self, sub_district_id: int) -> dict | None:
        sub_district = self.get_sub_district(sub_district_id)
        if sub_district is None:
            return None
        result = sub_district.model_dump(mode="json")
        district = self.get_district(sub_district.district_id)
        if district is None:
            return result
        result["district"] = district.model_dump(mode="json")
        province = self.get_province(district.province_id)
        if province is not None:
            result["province"] = province.model_dump(mode="json")
        return result

    def orphan_counts(self) -> dict[str, int]:
        """
        Count children whose parent id does not resolve.

        Orphans are served as-is; this only feeds startup logging and the
        optional strict-reference check.
        """
        return {
            "provinces": sum(1 for p in self.provinces if p.geography_id not in self.geography_by_id),
            "districts": sum(1 for d in self.districts if d.province_id not in self.province_by_id),
            "sub_districts": sum(
                1 for s in self.sub_districts if s.district_id not in self.district_by_id
            ),
        }
