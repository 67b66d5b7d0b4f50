"""
Reference ellipsoids, looked up by datum name
"""

__all__ = [
    'ELLIPSOIDS', 'Ellipsoid', 'UnknownDatum',
    'available_datums', 'lookup', 'resolve',
]

import math
from types import MappingProxyType
from typing import List, Mapping, NamedTuple, Optional, Union


class UnknownDatum(ValueError):
    """Raised when a datum name is not present in the ellipsoid registry"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Unknown datum {name!r}. Options: {available_datums()}"
        )


class Ellipsoid(NamedTuple):
    """
    A reference ellipsoid.

    The third flattening n = (a - b) / (a + b) is the expansion parameter of the
    Krüger series, and the rectifying radius is the radius of the sphere whose
    meridian has the same length as the ellipsoid's. Registered ellipsoids carry
    the tabulated values of both; use from_axes() to derive them from the radii.
    """
    name: str
    label: str
    equatorial_radius: float
    polar_radius: float
    third_flattening: float
    eccentricity: float
    rectifying_radius: float

    @property
    def flattening(self) -> float:
        """The (first) flattening, f = (a - b) / a"""
        return (self.equatorial_radius - self.polar_radius) / self.equatorial_radius

    @property
    def inverse_flattening(self) -> float:
        return self.equatorial_radius / (self.equatorial_radius - self.polar_radius)

    @classmethod
    def from_axes(
        cls,
        name: str,
        equatorial_radius: float,
        polar_radius: float,
        label: Optional[str] = None
    ) -> 'Ellipsoid':
        """
        Creates an Ellipsoid from its two semi-axes, deriving the remaining
        parameters.

        Args:
            name:
                An identifier for the ellipsoid

            equatorial_radius:
                The semi-major axis (a), in meters

            polar_radius:
                The semi-minor axis (b), in meters

            label:
                (Optional) A display name. Defaults to name.

        Returns:
            Ellipsoid
        """
        a, b = float(equatorial_radius), float(polar_radius)
        n = (a - b) / (a + b)
        n2 = n * n
        rectifying_radius = a / (1 + n) * (
            1 + n2 / 4 + n2 ** 2 / 64 + n2 ** 3 / 256 + 25 * n2 ** 4 / 16384
        )
        return cls(
            name=name,
            label=label or name,
            equatorial_radius=a,
            polar_radius=b,
            third_flattening=n,
            eccentricity=math.sqrt(1 - (b / a) ** 2),
            rectifying_radius=rectifying_radius,
        )


# name, label, equatorial radius, polar radius, third flattening, eccentricity,
# rectifying radius
_ELLIPSOID_TABLE = (
    ('WGS84', 'WGS84', 6378137.0, 6356752.314, 0.00167922, 0.081819191, 6367449.146),
    ('NAD83', 'NAD83', 6378137.0, 6356752.314, 0.00167922, 0.081819191, 6367449.146),
    ('GRS80', 'GRS80', 6378137.0, 6356752.3, 0.00167922, 0.081819191, 6367449.146),
    ('WGS72', 'WGS72', 6378135.0, 6356750.5, 0.001679206, 0.081818849, 6367447.239),
    ('AGD65', 'AUSTRALIAN 1965', 6378160.0, 6356774.7, 0.001679263, 0.081820217, 6367471.839),
    ('KRASOVSKY_1940', 'KRASOVSKY 1940', 6378245.0, 6356863.0, 0.001678981, 0.08181337, 6367558.487),
    ('NAD27', 'NAD27', 6378206.4, 6356583.8, 0.001697916, 0.082271854, 6367399.689),
    ('IN24', 'IN24', 6378388.0, 6356911.9, 0.001686344, 0.081991978, 6367654.477),
    ('HAYFORD_1909', 'HAYFORD 1909', 6378388.0, 6356911.9, 0.001686344, 0.081991978, 6367654.477),
    ('CLARKE_1880', 'CLARKE 1880', 6378249.1, 6356514.9, 0.001706683, 0.082483257, 6367386.637),
    ('CLARKE_1866', 'CLARKE 1866', 6378206.4, 6356583.8, 0.001697916, 0.082271854, 6367399.689),
    ('AIRY_1830', 'AIRY 1830', 6377563.4, 6356256.9, 0.001673221, 0.081673399, 6366914.606),
    ('BESSEL_1841', 'BESSEL 1841', 6377397.2, 6356079.0, 0.001674185, 0.081696846, 6366742.561),
    ('EVEREST_1830', 'EVEREST 1830', 6377276.3, 6356075.4, 0.00166499, 0.08147292, 6366680.262),
)

ELLIPSOIDS: Mapping[str, Ellipsoid] = MappingProxyType({
    row[0]: Ellipsoid(*row) for row in _ELLIPSOID_TABLE
})


def available_datums() -> List[str]:
    """The registered datum names, sorted"""
    return sorted(ELLIPSOIDS)


def lookup(name: str) -> Ellipsoid:
    """
    Retrieve a registered ellipsoid by its exact (case-sensitive) datum name.

    Args:
        name:
            The datum name, e.g. 'WGS84' or 'CLARKE_1866'

    Returns:
        Ellipsoid

    Raises:
        UnknownDatum: if no ellipsoid is registered under that name
    """
    try:
        return ELLIPSOIDS[name]
    except KeyError:
        raise UnknownDatum(name) from None


def resolve(datum: Union[str, Ellipsoid]) -> Ellipsoid:
    """
    Accepts either a datum name or an Ellipsoid, returning the Ellipsoid. Allows
    projecting against an ellipsoid that isn't in the registry.
    """
    if isinstance(datum, Ellipsoid):
        return datum

    if isinstance(datum, str):
        return lookup(datum)

    raise TypeError(
        f"Datum must be a datum name or an Ellipsoid, not {type(datum)}"
    )
