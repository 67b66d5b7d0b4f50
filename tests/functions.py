from pytest import approx

from geoutm import GeodeticCoordinate, UTMCoordinate


def assert_geodetic_equal(c1: GeodeticCoordinate, c2: GeodeticCoordinate, abs_tol=1e-6):
    """
    Asserts that two geodetic coordinates are equal within a specified absolute tolerance.

    Args:
        c1: The first GeodeticCoordinate
        c2: The second GeodeticCoordinate
        abs_tol: The absolute tolerance, in degrees. Default is 1e-6 (approx 11cm at
                 the equator).
    """
    try:
        assert c1.latitude == approx(c2.latitude, abs=abs_tol)
        assert c1.longitude == approx(c2.longitude, abs=abs_tol)
    except AssertionError as e:
        print(c1.latitude, c1.longitude)
        print(c2.latitude, c2.longitude)
        raise e


def assert_utm_equal(u1: UTMCoordinate, u2: UTMCoordinate, abs_tol=1e-2):
    """
    Asserts that two UTM coordinates share a zone and are equal within a specified
    absolute tolerance.

    Args:
        u1: The first UTMCoordinate
        u2: The second UTMCoordinate
        abs_tol: The absolute tolerance, in meters. Default is 1e-2.
    """
    assert (u1.zone_number, u1.zone_letter, u1.hemisphere) == \
        (u2.zone_number, u2.zone_letter, u2.hemisphere)
    assert u1.easting == approx(u2.easting, abs=abs_tol)
    assert u1.northing == approx(u2.northing, abs=abs_tol)
