from __future__ import annotations

import logging
import math
from time import perf_counter

from coord_engine.codec import format_locations, parse_locations
from coord_engine.config import ConverterSettings
from coord_engine.dispatch import convert, parse_system
from coord_engine.exceptions import CoordinateRangeError
from coord_engine.metrics import InMemoryConversionMetricsCollector
from coord_engine.models import CoordinateSystem, Point, make_point
from coord_engine.schemas import ConversionRequest, ConversionResult, CoordinateOut
from coord_engine.transforms import is_passthrough

logger = logging.getLogger(__name__)


class ConversionService:
    def __init__(
        self,
        settings: ConverterSettings | None = None,
        metrics: InMemoryConversionMetricsCollector | None = None,
    ) -> None:
        self._settings = settings or ConverterSettings()
        self._metrics = metrics

    def convert_point(self, point: Point, target: CoordinateSystem | str) -> Point:
        target_system = parse_system(target)
        if self._settings.STRICT_VALIDATION:
            self._validate(point)
        converted = convert(point, target_system, inverse_iterations=self._settings.INVERSE_ITERATIONS)
        if point.system is not target_system:
            self._record(point, target_system)
        return converted

    def convert_request(self, request: ConversionRequest) -> ConversionResult:
        started = perf_counter()
        items: list[CoordinateOut] = []
        for item in request.points:
            point = make_point(request.source, item.lng, item.lat)
            converted = self.convert_point(point, request.target)
            items.append(CoordinateOut(lng=converted.lng, lat=converted.lat, in_china=not is_passthrough(point)))
        self._complete_batch(request.source, request.target, len(items), started)
        return ConversionResult(source=request.source, target=request.target, points=items)

    def convert_text(
        self,
        text: str,
        source: CoordinateSystem | str,
        target: CoordinateSystem | str,
    ) -> str:
        started = perf_counter()
        source_system = parse_system(source)
        target_system = parse_system(target)
        points = parse_locations(text, source_system)
        converted = [self.convert_point(point, target_system) for point in points]
        self._complete_batch(source_system, target_system, len(converted), started)
        return format_locations(converted, precision=self._settings.OUTPUT_PRECISION)

    def _validate(self, point: Point) -> None:
        reason = None
        if not (math.isfinite(point.lng) and math.isfinite(point.lat)):
            reason = "non_finite"
        elif not (-180 <= point.lng <= 180):
            reason = "invalid_lng_range"
        elif not (-90 <= point.lat <= 90):
            reason = "invalid_lat_range"
        if reason is None:
            return
        if self._metrics:
            self._metrics.increment_rejected(reason)
        logger.warning(
            "coordinate_rejected",
            extra={"component": "coord_engine", "reason": reason, "lng": point.lng, "lat": point.lat},
        )
        raise CoordinateRangeError(f"{reason}: {point}")

    def _record(self, point: Point, target: CoordinateSystem) -> None:
        if not self._metrics:
            return
        source = str(point.system)
        if is_passthrough(point):
            self._metrics.add_passthrough(source, str(target))
        else:
            self._metrics.add_converted(source, str(target))

    def _complete_batch(
        self,
        source: CoordinateSystem,
        target: CoordinateSystem,
        count: int,
        started: float,
    ) -> None:
        duration_ms = (perf_counter() - started) * 1000.0
        if self._metrics:
            self._metrics.observe_batch_duration(str(source), str(target), duration_ms)
        logger.info(
            "conversion_batch_completed",
            extra={
                "component": "coord_engine",
                "source": str(source),
                "target": str(target),
                "count": count,
                "duration_ms": round(duration_ms, 3),
            },
        )
