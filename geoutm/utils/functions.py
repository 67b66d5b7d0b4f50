"""Module for miscellaneous multi-use functions"""

__all__ = ['round_half_up', 'wrap_latitude_longitude']

import math
from typing import Tuple


def round_half_up(value: float, precision: int) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The number of decimal places to keep

    """
    return round(value + 10 ** -(precision + 12), precision)


def wrap_latitude_longitude(latitude: float, longitude: float) -> Tuple[float, float]:
    """
    Folds a latitude/longitude pair back onto the globe. A latitude past a pole
    continues down the opposite meridian; a longitude past the antimeridian
    continues from the other side.

    Args:
        latitude:
            Latitude in decimal degrees

        longitude:
            Longitude in decimal degrees

    Returns:
        The wrapped (latitude, longitude), with latitude in [-90, 90] and
        longitude in [-180, 180]

    Raises:
        ValueError: if either value is infinite or NaN
    """
    lat, lon = float(latitude), float(longitude)
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise ValueError(f'Latitude and longitude must be finite, got ({lat}, {lon})')

    # Every 360 degrees of latitude is a full meridian circuit
    lat = math.fmod(lat, 360)
    lon = math.fmod(lon, 360)
    while not -90 <= lat <= 90:
        lat = 180 - lat if lat > 90 else -180 - lat
        lon = lon + 180 if lon < 0 else lon - 180

    while not -180 <= lon <= 180:
        lon = lon - 360 if lon > 180 else lon + 360

    return lat, lon
