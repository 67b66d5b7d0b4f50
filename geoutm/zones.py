"""
UTM zone and latitude band arithmetic
"""

__all__ = ['central_meridian', 'hemisphere', 'zone_letter', 'zone_number']

import math

from geoutm._const import (
    BAND_HEIGHT_DEGREES, MAX_BAND_LATITUDE, MAX_ZONE_NUMBER, MIN_BAND_LATITUDE,
    MIN_ZONE_NUMBER, OUT_OF_BAND_LETTER, ZONE_LETTERS, ZONE_WIDTH_DEGREES
)


def zone_number(longitude: float) -> int:
    """
    The UTM zone a longitude falls in. Zone boundaries belong to the zone to
    their east, except 180E which is the eastern edge of zone 60.

    Args:
        longitude:
            Longitude in decimal degrees, [-180, 180]

    Returns:
        int in [1, 60]
    """
    zone = math.floor((longitude + 180) / ZONE_WIDTH_DEGREES) + 1
    return max(MIN_ZONE_NUMBER, min(zone, MAX_ZONE_NUMBER))


def central_meridian(zone: int) -> float:
    """The longitude, in degrees, of a zone's central meridian"""
    return float(zone * ZONE_WIDTH_DEGREES - 183)


def zone_letter(latitude: float) -> str:
    """
    The latitude band letter. Bands are 8 degrees tall from 80S, with band X
    covering 72N-84N; latitudes outside [-80, 84] get 'Z'.

    Args:
        latitude:
            Latitude in decimal degrees

    Returns:
        str
    """
    if not MIN_BAND_LATITUDE <= latitude <= MAX_BAND_LATITUDE:
        return OUT_OF_BAND_LETTER

    return ZONE_LETTERS[math.floor((latitude - MIN_BAND_LATITUDE) / BAND_HEIGHT_DEGREES)]


def hemisphere(latitude: float) -> str:
    return 'S' if latitude < 0 else 'N'
