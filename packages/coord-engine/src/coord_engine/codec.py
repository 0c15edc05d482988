"""Text form of point lists used by map provider APIs.

Requests carry ``"lng,lat|lng,lat"``; responses carry ``"lng,lat;lng,lat"``.
Both separators are accepted on input.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from coord_engine.exceptions import CoordinateParseError
from coord_engine.models import CoordinateSystem, Point, make_point, parse_system

_PAIR_SEPARATOR = re.compile(r"[|;]")


def parse_point(text: str, system: CoordinateSystem | str) -> Point:
    parts = text.strip().split(",")
    if len(parts) != 2:
        raise CoordinateParseError(f"expected 'lng,lat' pair, got {text!r}")
    try:
        lng, lat = float(parts[0]), float(parts[1])
    except ValueError as exc:
        raise CoordinateParseError(f"non-numeric coordinate in {text!r}") from exc
    return make_point(system, lng, lat)


def parse_locations(text: str, system: CoordinateSystem | str) -> list[Point]:
    system = parse_system(system)
    if not text.strip():
        return []
    return [parse_point(pair, system) for pair in _PAIR_SEPARATOR.split(text)]


def format_locations(points: Iterable[Point], precision: int = 6, separator: str = "|") -> str:
    if precision < 0:
        raise ValueError("precision must be >= 0")
    return separator.join(f"{point.lng:.{precision}f},{point.lat:.{precision}f}" for point in points)
