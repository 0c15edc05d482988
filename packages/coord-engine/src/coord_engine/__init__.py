"""Coordinate conversion between WGS-84, GCJ-02 and BD-09."""

from coord_engine.codec import format_locations, parse_locations, parse_point
from coord_engine.config import ConverterSettings, load_settings
from coord_engine.dispatch import convert, convert_coordinates, convert_many
from coord_engine.exceptions import (
    CoordinateError,
    CoordinateParseError,
    CoordinateRangeError,
    UnsupportedConversionError,
)
from coord_engine.gate import is_in_china
from coord_engine.metrics import InMemoryConversionMetricsCollector
from coord_engine.models import Bd09Point, CoordinateSystem, Gcj02Point, Point, Wgs84Point, make_point, parse_system
from coord_engine.service import ConversionService
from coord_engine.transforms import (
    bd09_to_gcj02,
    bd09_to_wgs84,
    gcj02_to_bd09,
    gcj02_to_wgs84,
    wgs84_to_bd09,
    wgs84_to_gcj02,
)
from coord_engine.warp import gcj02_offset

__all__ = [
    "Bd09Point",
    "ConversionService",
    "ConverterSettings",
    "CoordinateError",
    "CoordinateParseError",
    "CoordinateRangeError",
    "CoordinateSystem",
    "Gcj02Point",
    "InMemoryConversionMetricsCollector",
    "Point",
    "UnsupportedConversionError",
    "Wgs84Point",
    "bd09_to_gcj02",
    "bd09_to_wgs84",
    "convert",
    "convert_coordinates",
    "convert_many",
    "format_locations",
    "gcj02_offset",
    "gcj02_to_bd09",
    "gcj02_to_wgs84",
    "is_in_china",
    "load_settings",
    "make_point",
    "parse_locations",
    "parse_point",
    "parse_system",
    "wgs84_to_bd09",
    "wgs84_to_gcj02",
]
