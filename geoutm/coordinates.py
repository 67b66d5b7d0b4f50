"""
Representations of a position on earth, as a geodetic (latitude/longitude) pair or
as a UTM grid reference
"""

__all__ = ['GeodeticCoordinate', 'UTMCoordinate']

import re
from typing import Optional, Tuple, Union

from geoutm._const import (
    FALSE_NORTHING, MAX_ZONE_NUMBER, MIN_ZONE_NUMBER, OUT_OF_BAND_LETTER
)
from geoutm.ellipsoids import Ellipsoid
from geoutm.utils.functions import round_half_up, wrap_latitude_longitude


# e.g. '31N 166021.443 0.000'; band letters I and O are skipped, Z is out of band
_RE_UTM_STR = re.compile(
    r'^\s*(\d{1,2})\s?([C-HJ-NP-XZ])\s+(-?\d+(?:\.\d*)?)\s+(-?\d+(?:\.\d*)?)\s*$',
    flags=re.IGNORECASE
)


class GeodeticCoordinate:
    """A latitude/longitude pair, in decimal degrees"""

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
        _bounded: bool = True,
    ):
        lat, lon = float(latitude), float(longitude)
        if _bounded:
            lat, lon = wrap_latitude_longitude(lat, lon)

        self._latitude = lat
        self._longitude = lon

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    def __eq__(self, other):
        if not isinstance(other, GeodeticCoordinate):
            return False

        return self.latitude == other.latitude and self.longitude == other.longitude

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f'<GeodeticCoordinate({self.latitude}, {self.longitude})>'

    @classmethod
    def from_dms(cls, lat: Tuple[int, int, float, str], lon: Tuple[int, int, float, str]):
        """
        Creates a GeodeticCoordinate from a Degree Minutes Seconds (lat, lon) pair.

        The quadrant value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (int), <minutes> (int), <seconds> (float), <quadrant> (str) )
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (int), <minutes> (int), <seconds> (float), <quadrant> (str) )

        Returns:
            GeodeticCoordinate
        """
        def convert(dms: Tuple[int, int, float, str]) -> float:
            sign = -1 if dms[3].upper() in ('S', 'W') else 1
            return sign * (dms[0] + dms[1] / 60 + dms[2] / 3600)

        return cls(convert(lat), convert(lon))

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Converts the coordinate to (latitude, longitude) tuples of degrees, minutes,
        seconds, quadrant. Seconds are rounded to 5 decimal places.
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            minutes, seconds = divmod(abs(dd) * 3600, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round_half_up(seconds, 5)

        return (
            (*convert(self.latitude), 'N' if self.latitude >= 0 else 'S'),
            (*convert(self.longitude), 'E' if self.longitude >= 0 else 'W'),
        )

    def to_float(self) -> Tuple[float, float]:
        """The coordinate as a (latitude, longitude) tuple"""
        return self.latitude, self.longitude

    def to_utm(self, datum: Union[str, Ellipsoid] = 'WGS84') -> 'UTMCoordinate':
        """
        Project this coordinate onto the UTM grid.

        Args:
            datum:
                (Default 'WGS84') A registered datum name or an Ellipsoid

        Returns:
            UTMCoordinate
        """
        from geoutm.projection import project  # pylint: disable=import-outside-toplevel
        return project(self.latitude, self.longitude, datum)


class UTMCoordinate:
    """
    A position on the Universal Transverse Mercator grid.

    Args:
        easting:
            Meters east, relative to a false easting of 500,000 m on the zone's
            central meridian

        northing:
            Meters north of the equator; southern hemisphere northings are offset
            by 10,000,000 m

        hemisphere:
            'N' or 'S'

        zone_number:
            The longitudinal zone, 1-60

        zone_letter:
            The latitude band letter ('Z' when outside the UTM bands)
    """

    def __init__(
        self,
        easting: float,
        northing: float,
        hemisphere: str,
        zone_number: int,
        zone_letter: str,
    ):
        hemisphere = hemisphere.upper()
        if hemisphere not in ('N', 'S'):
            raise ValueError(f"Hemisphere must be 'N' or 'S', not {hemisphere!r}")

        if not MIN_ZONE_NUMBER <= int(zone_number) <= MAX_ZONE_NUMBER:
            raise ValueError(
                f'Zone number must be between {MIN_ZONE_NUMBER} and {MAX_ZONE_NUMBER}, '
                f'not {zone_number}'
            )

        self._easting = float(easting)
        self._northing = float(northing)
        self._hemisphere = hemisphere
        self._zone_number = int(zone_number)
        self._zone_letter = zone_letter.upper()

    @property
    def easting(self) -> float:
        return self._easting

    @property
    def northing(self) -> float:
        return self._northing

    @property
    def hemisphere(self) -> str:
        return self._hemisphere

    @property
    def zone_number(self) -> int:
        return self._zone_number

    @property
    def zone_letter(self) -> str:
        return self._zone_letter

    def __eq__(self, other):
        if not isinstance(other, UTMCoordinate):
            return False

        return self.to_tuple() == other.to_tuple()

    def __hash__(self):
        return hash(self.to_tuple())

    def __repr__(self):
        return (
            f'<UTMCoordinate({self.zone_number}{self.zone_letter} {self.hemisphere} '
            f'{self.easting}E {self.northing}N)>'
        )

    @property
    def epsg_code(self) -> str:
        """The EPSG code of this zone's WGS84 UTM projection, e.g. 'EPSG:32631'"""
        base = 32600 if self.hemisphere == 'N' else 32700
        return f'EPSG:{base + self.zone_number}'

    @classmethod
    def from_str(cls, utm_str: str, hemisphere: Optional[str] = None):
        """
        Parse a grid reference in zone/band notation, e.g. '31N 166021.443 0.0'
        (zone number, band letter, easting, northing). The hemisphere is inferred
        from the band letter.

        Polar points carry the out-of-band letter 'Z'. Their hemisphere is taken
        from the northing: north of 84N it lies above 5,000,000 m, and south of
        80S it lies below.

        Args:
            utm_str:
                The grid reference

            hemisphere:
                (Optional) 'N' or 'S', overriding the inferred hemisphere

        Returns:
            UTMCoordinate
        """
        match = _RE_UTM_STR.match(utm_str)
        if not match:
            raise ValueError(f'Invalid UTM grid reference: {utm_str!r}')

        zone, letter, easting, northing = match.groups()
        letter = letter.upper()
        if hemisphere is None:
            if letter == OUT_OF_BAND_LETTER:
                hemisphere = 'N' if float(northing) >= FALSE_NORTHING / 2 else 'S'
            else:
                hemisphere = 'N' if letter >= 'N' else 'S'

        return cls(
            float(easting),
            float(northing),
            hemisphere,
            int(zone),
            letter
        )

    def describe(self) -> str:
        """Renders the coordinate as a multi-line, human-readable summary"""
        return (
            f'Northing: {self.northing}\n'
            f'Easting: {self.easting}\n'
            f'Zone: {self.zone_number} {self.zone_letter}\n'
            f'Hemisphere: {self.hemisphere}'
        )

    def to_float(self) -> Tuple[float, float]:
        """The coordinate as an (easting, northing) tuple"""
        return self.easting, self.northing

    def to_geodetic(self, datum: Union[str, Ellipsoid] = 'WGS84') -> GeodeticCoordinate:
        """
        Convert this grid reference back to latitude and longitude.

        Args:
            datum:
                (Default 'WGS84') A registered datum name or an Ellipsoid

        Returns:
            GeodeticCoordinate
        """
        from geoutm.projection import unproject  # pylint: disable=import-outside-toplevel
        return unproject(self, datum)

    def to_str(self, precision: int = 3) -> str:
        """
        Converts the coordinate to zone/band notation, e.g. '31N 166021.443 0.000'

        Args:
            precision: (int)
                (Default 3) Decimal places of easting and northing to keep

        Returns:
            str
        """
        easting = round_half_up(self.easting, precision)
        northing = round_half_up(self.northing, precision)
        return (
            f'{self.zone_number}{self.zone_letter} '
            f'{easting:.{precision}f} {northing:.{precision}f}'
        )

    def to_tuple(self) -> Tuple[float, float, str, int, str]:
        """All fields as (easting, northing, hemisphere, zone number, zone letter)"""
        return (
            self.easting, self.northing, self.hemisphere,
            self.zone_number, self.zone_letter
        )
