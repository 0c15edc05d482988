from __future__ import annotations

import logging

import pytest

from coord_engine.config import ConverterSettings
from coord_engine.exceptions import CoordinateRangeError
from coord_engine.metrics import InMemoryConversionMetricsCollector
from coord_engine.models import CoordinateSystem, Gcj02Point, Wgs84Point
from coord_engine.schemas import ConversionRequest, CoordinateIn
from coord_engine.service import ConversionService
from coord_engine.transforms import gcj02_to_wgs84, wgs84_to_gcj02


def test_convert_text_formats_with_configured_precision() -> None:
    service = ConversionService()

    result = service.convert_text("116.397428,39.90923|121.4737,31.2304", "wgs84", "gcj02")

    assert result == "116.403672,39.910634|121.478223,31.228458"


def test_convert_request_flags_points_outside_china() -> None:
    service = ConversionService()
    request = ConversionRequest(
        source=CoordinateSystem.WGS84,
        target=CoordinateSystem.GCJ02,
        points=[CoordinateIn(lng=116.397428, lat=39.90923), CoordinateIn(lng=-74.0059, lat=40.7128)],
    )

    result = service.convert_request(request)

    assert result.target is CoordinateSystem.GCJ02
    assert result.points[0].in_china is True
    assert result.points[0].lng == pytest.approx(116.4036716260, abs=1e-9)
    assert result.points[1].in_china is False
    assert (result.points[1].lng, result.points[1].lat) == (-74.0059, 40.7128)


def test_conversion_request_rejects_out_of_range_payload() -> None:
    with pytest.raises(ValueError):
        ConversionRequest(source="wgs84", target="bd09", points=[{"lng": 200.0, "lat": 39.9}])
    with pytest.raises(ValueError):
        ConversionRequest(source="wgs84", target="bd09", points=[])


def test_service_uses_configured_inverse_iterations() -> None:
    service = ConversionService(settings=ConverterSettings(INVERSE_ITERATIONS=2))
    gcj = wgs84_to_gcj02(Wgs84Point(lng=116.397428, lat=39.90923))

    assert service.convert_point(gcj, "wgs84") == gcj02_to_wgs84(gcj, iterations=2)


def test_strict_service_rejects_invalid_point(caplog) -> None:
    metrics = InMemoryConversionMetricsCollector()
    service = ConversionService(metrics=metrics)
    caplog.set_level(logging.WARNING, logger="coord_engine.service")

    with pytest.raises(CoordinateRangeError):
        service.convert_point(Wgs84Point(lng=116.4, lat=95.0), "gcj02")
    with pytest.raises(CoordinateRangeError):
        service.convert_point(Gcj02Point(lng=float("nan"), lat=39.9), "bd09")

    assert metrics.rejected_total["invalid_lat_range"] == 1
    assert metrics.rejected_total["non_finite"] == 1
    assert [record.getMessage() for record in caplog.records] == ["coordinate_rejected", "coordinate_rejected"]


def test_lenient_service_passes_invalid_point_through() -> None:
    service = ConversionService(settings=ConverterSettings(STRICT_VALIDATION=False))

    result = service.convert_point(Wgs84Point(lng=116.4, lat=95.0), "gcj02")

    assert result == Gcj02Point(lng=116.4, lat=95.0)


def test_service_records_metrics_and_logs_batch(caplog) -> None:
    metrics = InMemoryConversionMetricsCollector()
    service = ConversionService(metrics=metrics)
    caplog.set_level(logging.INFO, logger="coord_engine.service")

    service.convert_text("116.397428,39.90923;-74.0059,40.7128", "wgs84", "bd09")

    assert metrics.converted_total[("wgs84", "bd09")] == 1
    assert metrics.passthrough_total[("wgs84", "bd09")] == 1
    assert len(metrics.batch_durations) == 1
    assert metrics.batch_durations[0].duration_ms >= 0
    completed = [record for record in caplog.records if record.getMessage() == "conversion_batch_completed"]
    assert len(completed) == 1
    assert completed[0].count == 2


def test_same_system_conversion_is_not_counted() -> None:
    metrics = InMemoryConversionMetricsCollector()
    service = ConversionService(metrics=metrics)
    point = Wgs84Point(lng=116.4, lat=39.9)

    assert service.convert_point(point, "wgs84") is point
    assert dict(metrics.converted_total) == {}
    assert dict(metrics.passthrough_total) == {}
