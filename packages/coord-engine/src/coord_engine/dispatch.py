from __future__ import annotations

from collections.abc import Callable, Iterable

from coord_engine.exceptions import UnsupportedConversionError
from coord_engine.models import CoordinateSystem, Point, make_point, parse_system
from coord_engine.transforms import (
    bd09_to_gcj02,
    bd09_to_wgs84,
    gcj02_to_bd09,
    gcj02_to_wgs84,
    wgs84_to_bd09,
    wgs84_to_gcj02,
)

_FORWARD_ROUTES: dict[tuple[CoordinateSystem, CoordinateSystem], Callable[[Point], Point]] = {
    (CoordinateSystem.WGS84, CoordinateSystem.GCJ02): wgs84_to_gcj02,
    (CoordinateSystem.WGS84, CoordinateSystem.BD09): wgs84_to_bd09,
    (CoordinateSystem.GCJ02, CoordinateSystem.BD09): gcj02_to_bd09,
    (CoordinateSystem.BD09, CoordinateSystem.GCJ02): bd09_to_gcj02,
}

# Routes landing on WGS-84 go through the lossy inverse and accept refinement passes.
_INVERSE_ROUTES: dict[CoordinateSystem, Callable[..., Point]] = {
    CoordinateSystem.GCJ02: gcj02_to_wgs84,
    CoordinateSystem.BD09: bd09_to_wgs84,
}


def convert(
    point: Point,
    target: CoordinateSystem | str,
    inverse_iterations: int = 0,
) -> Point:
    source = point.system
    if source is None:
        raise UnsupportedConversionError("point carries no coordinate system; use a tagged point type")
    target_system = parse_system(target)
    if source is target_system:
        return point
    if target_system is CoordinateSystem.WGS84:
        return _INVERSE_ROUTES[source](point, iterations=inverse_iterations)
    return _FORWARD_ROUTES[(source, target_system)](point)


def convert_coordinates(
    lng: float,
    lat: float,
    source: CoordinateSystem | str,
    target: CoordinateSystem | str,
    inverse_iterations: int = 0,
) -> tuple[float, float]:
    point = make_point(parse_system(source), lng, lat)
    converted = convert(point, target, inverse_iterations=inverse_iterations)
    return converted.lng, converted.lat


def convert_many(
    points: Iterable[Point],
    target: CoordinateSystem | str,
    inverse_iterations: int = 0,
) -> list[Point]:
    target_system = parse_system(target)
    return [convert(point, target_system, inverse_iterations=inverse_iterations) for point in points]
