"""Conversions between WGS-84, GCJ-02 and BD-09.

Every function is pure and returns a new tagged point. Points outside the
domestic gate come back with their coordinates untouched.
"""

from __future__ import annotations

import math

from coord_engine.gate import is_in_china
from coord_engine.models import Bd09Point, Gcj02Point, Point, Wgs84Point
from coord_engine.warp import gcj02_offset

X_PI = math.pi * 3000.0 / 180.0
BD_OFFSET_LNG = 0.0065
BD_OFFSET_LAT = 0.006


def wgs84_to_gcj02(point: Wgs84Point) -> Gcj02Point:
    if not is_in_china(point.lng, point.lat):
        return Gcj02Point(lng=point.lng, lat=point.lat)
    d_lng, d_lat = gcj02_offset(point.lng, point.lat)
    return Gcj02Point(lng=point.lng + d_lng, lat=point.lat + d_lat)


def gcj02_to_wgs84(point: Gcj02Point, iterations: int = 0) -> Wgs84Point:
    """Approximate inverse of :func:`wgs84_to_gcj02`.

    The offset is evaluated at the GCJ-02 point instead of the unknown WGS-84
    one, which leaves a residual of up to a few metres. ``iterations`` applies
    that many correction passes, each pushing the estimate back through the
    forward transform and subtracting the miss.
    """
    if iterations < 0:
        raise ValueError("iterations must be >= 0")
    if not is_in_china(point.lng, point.lat):
        return Wgs84Point(lng=point.lng, lat=point.lat)
    d_lng, d_lat = gcj02_offset(point.lng, point.lat)
    estimate = Wgs84Point(lng=point.lng - d_lng, lat=point.lat - d_lat)
    for _ in range(iterations):
        forward = wgs84_to_gcj02(estimate)
        estimate = Wgs84Point(
            lng=estimate.lng - (forward.lng - point.lng),
            lat=estimate.lat - (forward.lat - point.lat),
        )
    return estimate


def gcj02_to_bd09(point: Gcj02Point) -> Bd09Point:
    lng, lat = point.lng, point.lat
    if not is_in_china(lng, lat):
        return Bd09Point(lng=lng, lat=lat)
    # Polar warp over raw degrees, matching the provider's published formula.
    z = math.sqrt(lng * lng + lat * lat) + 0.00002 * math.sin(lat * X_PI)
    theta = math.atan2(lat, lng) + 0.000003 * math.cos(lng * X_PI)
    return Bd09Point(
        lng=z * math.cos(theta) + BD_OFFSET_LNG,
        lat=z * math.sin(theta) + BD_OFFSET_LAT,
    )


def bd09_to_gcj02(point: Bd09Point) -> Gcj02Point:
    if not is_in_china(point.lng, point.lat):
        return Gcj02Point(lng=point.lng, lat=point.lat)
    x = point.lng - BD_OFFSET_LNG
    y = point.lat - BD_OFFSET_LAT
    z = math.sqrt(x * x + y * y) - 0.00002 * math.sin(y * X_PI)
    theta = math.atan2(y, x) - 0.000003 * math.cos(x * X_PI)
    return Gcj02Point(lng=z * math.cos(theta), lat=z * math.sin(theta))


def wgs84_to_bd09(point: Wgs84Point) -> Bd09Point:
    return gcj02_to_bd09(wgs84_to_gcj02(point))


def bd09_to_wgs84(point: Bd09Point, iterations: int = 0) -> Wgs84Point:
    return gcj02_to_wgs84(bd09_to_gcj02(point), iterations=iterations)


def is_passthrough(point: Point) -> bool:
    return not is_in_china(point.lng, point.lat)
