from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from coord_engine.exceptions import UnsupportedConversionError


class CoordinateSystem(StrEnum):
    WGS84 = "wgs84"
    GCJ02 = "gcj02"
    BD09 = "bd09"


@dataclass(frozen=True)
class Point:
    """Longitude/latitude pair in degrees.

    The base class carries no reference system. Use the tagged subclasses so a
    GCJ-02 value cannot silently stand in for a WGS-84 one; dataclass equality
    compares the concrete class, so equal numbers in different systems differ.
    """

    lng: float
    lat: float

    system: ClassVar[CoordinateSystem | None] = None

    def __str__(self) -> str:
        return f"{type(self).__name__}{{longitude={self.lng:.6f}, latitude={self.lat:.6f}}}"


@dataclass(frozen=True)
class Wgs84Point(Point):
    system: ClassVar[CoordinateSystem | None] = CoordinateSystem.WGS84


@dataclass(frozen=True)
class Gcj02Point(Point):
    system: ClassVar[CoordinateSystem | None] = CoordinateSystem.GCJ02


@dataclass(frozen=True)
class Bd09Point(Point):
    system: ClassVar[CoordinateSystem | None] = CoordinateSystem.BD09


POINT_TYPES: dict[CoordinateSystem, type[Point]] = {
    CoordinateSystem.WGS84: Wgs84Point,
    CoordinateSystem.GCJ02: Gcj02Point,
    CoordinateSystem.BD09: Bd09Point,
}


# Names used by map provider APIs for the same systems.
_SYSTEM_ALIASES: dict[str, CoordinateSystem] = {
    "gps": CoordinateSystem.WGS84,
    "autonavi": CoordinateSystem.GCJ02,
    "baidu": CoordinateSystem.BD09,
}


def parse_system(value: CoordinateSystem | str) -> CoordinateSystem:
    if isinstance(value, CoordinateSystem):
        return value
    normalized = str(value).strip().lower().replace("-", "").replace("_", "")
    if normalized in _SYSTEM_ALIASES:
        return _SYSTEM_ALIASES[normalized]
    try:
        return CoordinateSystem(normalized)
    except ValueError as exc:
        raise UnsupportedConversionError(f"unsupported coordinate system: {value!r}") from exc


def make_point(system: CoordinateSystem | str, lng: float, lat: float) -> Point:
    return POINT_TYPES[parse_system(system)](lng=lng, lat=lat)
