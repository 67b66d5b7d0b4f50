"""
Transverse Mercator projection between geodetic coordinates and the UTM grid.

Forward: geodetic latitude -> conformal latitude -> isometric coordinates on the
conformal sphere (xi', eta') -> Krüger alpha series -> (xi, eta) -> meters.

Inverse: meters -> (xi, eta) -> Krüger beta series -> (xi', eta') -> conformal
latitude -> Newton-Raphson for the geodetic latitude.

After C. F. F. Karney, "Transverse Mercator with an accuracy of a few
nanometers", J. Geodesy 85 (2011).
"""

__all__ = [
    'project', 'project_many', 'set_latitude_solver', 'unproject', 'unproject_many',
]

from typing import Iterable, List, Literal, Tuple, Union

import numpy as np

from geoutm._const import (
    FALSE_EASTING, FALSE_NORTHING, MAX_BAND_LATITUDE, MIN_BAND_LATITUDE,
    NEWTON_FIXED_ITERATIONS, NEWTON_MAX_ITERATIONS, NEWTON_TOLERANCE, SCALE_FACTOR
)
from geoutm.coordinates import GeodeticCoordinate, UTMCoordinate
from geoutm.ellipsoids import Ellipsoid, resolve
from geoutm.kruger import forward_coefficients, inverse_coefficients, kruger_sums
from geoutm.utils.logging import warn_once
from geoutm.zones import central_meridian, hemisphere, zone_letter, zone_number


DatumLike = Union[str, Ellipsoid]


# -------------------------------------------------------------------------
# Latitude recovery (conformal -> geodetic)
# -------------------------------------------------------------------------

def _sigma(tau: np.ndarray, eccentricity: float) -> np.ndarray:
    return np.sinh(eccentricity * np.arctanh(eccentricity * tau / np.hypot(1., tau)))


def _conformal_tau(tau: np.ndarray, eccentricity: float) -> np.ndarray:
    """tan(conformal latitude) as a function of tan(geodetic latitude)"""
    sigma = _sigma(tau, eccentricity)
    return tau * np.hypot(1., sigma) - sigma * np.hypot(1., tau)


def _newton_step(tau: np.ndarray, tau_prime: np.ndarray, eccentricity: float) -> np.ndarray:
    """
    One Newton-Raphson update for f(tau) = conformal_tau(tau) - tau_prime, using
    f'(tau) = (1 - e^2) * sqrt(1 + tau_i^2) * sqrt(1 + tau^2) / (1 + (1 - e^2) * tau^2)
    """
    e2m = 1 - eccentricity ** 2
    tau_i = _conformal_tau(tau, eccentricity)
    return (tau_prime - tau_i) / np.hypot(1., tau_i) * (1 + e2m * tau ** 2) / (
        e2m * np.hypot(1., tau)
    )


def _solve_tau_fixed(tau_prime: np.ndarray, eccentricity: float) -> np.ndarray:
    tau = tau_prime
    for _ in range(NEWTON_FIXED_ITERATIONS):
        tau = tau + _newton_step(tau, tau_prime, eccentricity)
    return tau


def _solve_tau_converge(tau_prime: np.ndarray, eccentricity: float) -> np.ndarray:
    tau = tau_prime
    for _ in range(NEWTON_MAX_ITERATIONS):
        d_tau = _newton_step(tau, tau_prime, eccentricity)
        tau = tau + d_tau
        if np.all(np.abs(d_tau) <= NEWTON_TOLERANCE * np.maximum(1., np.abs(tau))):
            break
    return tau


_LATITUDE_SOLVERS = {
    'fixed': _solve_tau_fixed,
    'converge': _solve_tau_converge,
}

# Declares the latitude solver in use (default fixed iteration count)
solve_tau = _solve_tau_fixed


def set_latitude_solver(solver: Literal['fixed', 'converge']):
    """
    Set the global stopping rule for the inverse projection's latitude solver.

    Args:
        solver:
            'fixed' runs a fixed number of Newton-Raphson iterations; 'converge'
            stops as soon as every update falls below tolerance
    """
    global solve_tau

    if solver not in _LATITUDE_SOLVERS:
        raise ValueError(
            f"Unknown latitude solver '{solver}'. Options: {list(_LATITUDE_SOLVERS.keys())}"
        )

    solve_tau = _LATITUDE_SOLVERS[solver]


# -------------------------------------------------------------------------
# Array implementations
# -------------------------------------------------------------------------

def _forward(
    latitudes: np.ndarray,
    longitudes: np.ndarray,
    ellipsoid: Ellipsoid
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Returns (easting, northing, zone number) arrays"""
    zones = np.array([zone_number(x) for x in longitudes], dtype=int)
    meridians = np.array([central_meridian(x) for x in zones], dtype=float)

    e = ellipsoid.eccentricity
    lat_rad = np.radians(np.abs(latitudes))
    d_lon = np.radians(np.abs(longitudes - meridians))

    conformal_lat = np.arctan(
        np.sinh(np.arcsinh(np.tan(lat_rad)) - e * np.arctanh(e * np.sin(lat_rad)))
    )
    tau_prime = np.tan(conformal_lat)

    cos_d_lon = np.cos(d_lon)
    xi_prime = np.arctan(tau_prime / cos_d_lon)
    eta_prime = np.arcsinh(np.sin(d_lon) / np.sqrt(tau_prime ** 2 + cos_d_lon ** 2))

    alpha = forward_coefficients(ellipsoid.third_flattening)
    d_xi, d_eta = kruger_sums(alpha, xi_prime, eta_prime)
    xi = xi_prime + d_xi
    eta = eta_prime + d_eta

    k0_radius = SCALE_FACTOR * ellipsoid.rectifying_radius
    easting = FALSE_EASTING + np.where(longitudes >= meridians, 1., -1.) * k0_radius * eta
    northing = k0_radius * xi
    northing = np.where(latitudes < 0, FALSE_NORTHING - northing, northing)

    return easting, northing, zones


def _inverse(
    eastings: np.ndarray,
    northings: np.ndarray,
    south: np.ndarray,
    zones: np.ndarray,
    ellipsoid: Ellipsoid
) -> Tuple[np.ndarray, np.ndarray]:
    """Returns (latitude, longitude) arrays"""
    k0_radius = SCALE_FACTOR * ellipsoid.rectifying_radius
    xi = np.where(south, FALSE_NORTHING - northings, northings) / k0_radius
    eta = (eastings - FALSE_EASTING) / k0_radius

    beta = inverse_coefficients(ellipsoid.third_flattening)
    d_xi, d_eta = kruger_sums(beta, xi, eta)
    xi_prime = xi - d_xi
    eta_prime = eta - d_eta

    sinh_eta_prime = np.sinh(eta_prime)
    cos_xi_prime = np.cos(xi_prime)
    tau_prime = np.sin(xi_prime) / np.sqrt(sinh_eta_prime ** 2 + cos_xi_prime ** 2)

    tau = solve_tau(tau_prime, ellipsoid.eccentricity)

    latitudes = np.degrees(np.arctan(tau))
    latitudes = np.where(south, -latitudes, latitudes)
    meridians = np.array([central_meridian(x) for x in zones], dtype=float)
    longitudes = meridians + np.degrees(np.arctan(sinh_eta_prime / cos_xi_prime))

    return latitudes, longitudes


def _warn_out_of_band(latitudes: np.ndarray):
    if np.any((latitudes < MIN_BAND_LATITUDE) | (latitudes > MAX_BAND_LATITUDE)):
        warn_once(
            'Latitudes outside [%s, %s] are beyond the UTM latitude bands and will be '
            "assigned zone letter 'Z'. (this warning will not repeat)",
            MIN_BAND_LATITUDE, MAX_BAND_LATITUDE
        )


def _warn_off_grid(northings: np.ndarray):
    if np.any((northings < 0) | (northings > FALSE_NORTHING)):
        warn_once(
            'Northings outside [0, %s] do not correspond to a UTM grid reference; '
            'results are extrapolated. (this warning will not repeat)',
            FALSE_NORTHING
        )


# -------------------------------------------------------------------------
# Public interface
# -------------------------------------------------------------------------

def project(latitude: float, longitude: float, datum: DatumLike = 'WGS84') -> UTMCoordinate:
    """
    Project a geodetic coordinate onto the UTM grid.

    Args:
        latitude:
            Latitude in decimal degrees, [-90, 90]

        longitude:
            Longitude in decimal degrees, [-180, 180]

        datum:
            (Default 'WGS84') A registered datum name or an Ellipsoid

    Returns:
        UTMCoordinate

    Raises:
        UnknownDatum: if the datum name isn't registered
    """
    return project_many([latitude], [longitude], datum)[0]


def project_many(
    latitudes: Iterable[float],
    longitudes: Iterable[float],
    datum: DatumLike = 'WGS84'
) -> List[UTMCoordinate]:
    """
    Project many geodetic coordinates at once. Evaluated as numpy arrays, so this
    is considerably faster than repeated calls to project().

    Args:
        latitudes:
            Latitudes in decimal degrees

        longitudes:
            Longitudes in decimal degrees, the same length as latitudes

        datum:
            (Default 'WGS84') A registered datum name or an Ellipsoid

    Returns:
        List[UTMCoordinate], in input order
    """
    ellipsoid = resolve(datum)

    lats = np.atleast_1d(np.asarray(latitudes, dtype=float))
    lons = np.atleast_1d(np.asarray(longitudes, dtype=float))
    if lats.shape != lons.shape:
        raise ValueError(
            f'Latitudes and longitudes must be the same shape, got {lats.shape} and {lons.shape}'
        )

    _warn_out_of_band(lats)
    eastings, northings, zones = _forward(lats, lons, ellipsoid)

    return [
        UTMCoordinate(
            float(easting),
            float(northing),
            hemisphere(lat),
            int(zone),
            zone_letter(lat),
        )
        for easting, northing, zone, lat in zip(eastings, northings, zones, lats)
    ]


def unproject(point: UTMCoordinate, datum: DatumLike = 'WGS84') -> GeodeticCoordinate:
    """
    Convert a UTM grid reference back to a geodetic coordinate.

    Args:
        point:
            The UTM coordinate

        datum:
            (Default 'WGS84') A registered datum name or an Ellipsoid

    Returns:
        GeodeticCoordinate

    Raises:
        UnknownDatum: if the datum name isn't registered
    """
    return unproject_many([point], datum)[0]


def unproject_many(
    points: Iterable[UTMCoordinate],
    datum: DatumLike = 'WGS84'
) -> List[GeodeticCoordinate]:
    """
    Convert many UTM grid references back to geodetic coordinates. The points may
    come from any mix of zones and hemispheres.

    Args:
        points:
            UTM coordinates

        datum:
            (Default 'WGS84') A registered datum name or an Ellipsoid

    Returns:
        List[GeodeticCoordinate], in input order
    """
    ellipsoid = resolve(datum)
    points = list(points)

    eastings = np.array([x.easting for x in points], dtype=float)
    northings = np.array([x.northing for x in points], dtype=float)
    south = np.array([x.hemisphere == 'S' for x in points], dtype=bool)
    zones = np.array([x.zone_number for x in points], dtype=int)

    _warn_off_grid(northings)
    lats, lons = _inverse(eastings, northings, south, zones, ellipsoid)

    return [
        GeodeticCoordinate(float(lat), float(lon), _bounded=False)
        for lat, lon in zip(lats, lons)
    ]
