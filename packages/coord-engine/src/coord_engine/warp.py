import math

# Krasovsky 1940 semi-major axis and eccentricity squared used by GCJ-02.
AXIS = 6378245.0
EE = 0.00669342162296594323

ORIGIN_LNG = 105.0
ORIGIN_LAT = 35.0


def transform_lat(d_lng: float, d_lat: float) -> float:
    ret = -100.0 + 2.0 * d_lng + 3.0 * d_lat + 0.2 * d_lat * d_lat + 0.1 * d_lng * d_lat + 0.2 * math.sqrt(abs(d_lng))
    ret += (20.0 * math.sin(6.0 * d_lng * math.pi) + 20.0 * math.sin(2.0 * d_lng * math.pi)) * 2.0 / 3.0
    ret += (20.0 * math.sin(d_lat * math.pi) + 40.0 * math.sin(d_lat / 3.0 * math.pi)) * 2.0 / 3.0
    ret += (160.0 * math.sin(d_lat / 12.0 * math.pi) + 320 * math.sin(d_lat * math.pi / 30.0)) * 2.0 / 3.0
    return ret


def transform_lng(d_lng: float, d_lat: float) -> float:
    ret = 300.0 + d_lng + 2.0 * d_lat + 0.1 * d_lng * d_lng + 0.1 * d_lng * d_lat + 0.1 * math.sqrt(abs(d_lng))
    ret += (20.0 * math.sin(6.0 * d_lng * math.pi) + 20.0 * math.sin(2.0 * d_lng * math.pi)) * 2.0 / 3.0
    ret += (20.0 * math.sin(d_lng * math.pi) + 40.0 * math.sin(d_lng / 3.0 * math.pi)) * 2.0 / 3.0
    ret += (150.0 * math.sin(d_lng / 12.0 * math.pi) + 300.0 * math.sin(d_lng / 30.0 * math.pi)) * 2.0 / 3.0
    return ret


def gcj02_offset(lng: float, lat: float) -> tuple[float, float]:
    """Obfuscation offset in degrees, evaluated at ``(lng, lat)``.

    The raw polynomial values are metres-like quantities; they are scaled to
    degrees with the local radii of curvature of the ellipsoid.
    """
    d_lng = transform_lng(lng - ORIGIN_LNG, lat - ORIGIN_LAT)
    d_lat = transform_lat(lng - ORIGIN_LNG, lat - ORIGIN_LAT)
    rad_lat = lat / 180.0 * math.pi
    magic = math.sin(rad_lat)
    magic = 1 - EE * magic * magic
    sqrt_magic = math.sqrt(magic)
    d_lng = (d_lng * 180.0) / (AXIS / sqrt_magic * math.cos(rad_lat) * math.pi)
    d_lat = (d_lat * 180.0) / ((AXIS * (1 - EE)) / (magic * sqrt_magic) * math.pi)
    return d_lng, d_lat
