MIN_LNG = 72.004
MAX_LNG = 137.8347
MIN_LAT = 0.8293
MAX_LAT = 55.8271


def is_in_china(lng: float, lat: float) -> bool:
    """Return True when obfuscation applies to the coordinate.

    Bounds are inclusive. NaN compares false against every bound, so it is
    treated as outside the box and passes through the transforms unchanged.
    """
    return MIN_LNG <= lng <= MAX_LNG and MIN_LAT <= lat <= MAX_LAT
