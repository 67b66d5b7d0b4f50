"""Conversion between geodetic coordinates and the Universal Transverse Mercator grid"""

from geoutm._version import __version__  # noqa: F401
from geoutm.utils.logging import LOGGER
from geoutm.ellipsoids import ELLIPSOIDS, Ellipsoid, UnknownDatum, available_datums, lookup
from geoutm.coordinates import GeodeticCoordinate, UTMCoordinate
from geoutm.projection import (
    project, project_many, set_latitude_solver, unproject, unproject_many
)

__all__ = [
    'ELLIPSOIDS',
    'Ellipsoid',
    'GeodeticCoordinate',
    'LOGGER',
    'UTMCoordinate',
    'UnknownDatum',
    'available_datums',
    'lookup',
    'project',
    'project_many',
    'set_latitude_solver',
    'unproject',
    'unproject_many',
]
