import pytest
from pytest import approx

from geoutm.ellipsoids import *


def test_registry_contents():
    assert len(ELLIPSOIDS) == 14
    assert available_datums() == sorted(ELLIPSOIDS)
    assert 'WGS84' in available_datums()
    assert 'CLARKE_1866' in available_datums()

    for name, ellipsoid in ELLIPSOIDS.items():
        assert ellipsoid.name == name
        assert ellipsoid.polar_radius < ellipsoid.equatorial_radius
        assert ellipsoid.polar_radius < ellipsoid.rectifying_radius < ellipsoid.equatorial_radius


def test_registry_read_only():
    with pytest.raises(TypeError):
        ELLIPSOIDS['MARS'] = ELLIPSOIDS['WGS84']  # type: ignore

    with pytest.raises(AttributeError):
        ELLIPSOIDS['WGS84'].equatorial_radius = 1.  # type: ignore


def test_lookup():
    wgs84 = lookup('WGS84')
    assert wgs84.equatorial_radius == 6378137.0
    assert wgs84.third_flattening == 0.00167922
    assert lookup('BESSEL_1841').label == 'BESSEL 1841'
    assert lookup('AGD65').label == 'AUSTRALIAN 1965'


def test_lookup_unknown():
    with pytest.raises(UnknownDatum) as exc:
        lookup('BOGUS')
    assert exc.value.name == 'BOGUS'
    assert 'BOGUS' in str(exc.value)

    # Case sensitive
    with pytest.raises(UnknownDatum):
        lookup('wgs84')

    # Is a ValueError
    with pytest.raises(ValueError):
        lookup('')


def test_resolve():
    custom = Ellipsoid.from_axes('SPHERE-ISH', 6371000., 6370000.)
    assert resolve(custom) is custom
    assert resolve('NAD27') == ELLIPSOIDS['NAD27']

    with pytest.raises(UnknownDatum):
        resolve('BOGUS')

    with pytest.raises(TypeError):
        resolve(5)  # type: ignore


def test_ellipsoid_flattening():
    wgs84 = lookup('WGS84')
    assert wgs84.flattening == approx(1 / 298.257223563, rel=1e-6)
    assert wgs84.inverse_flattening == approx(298.257223563, abs=1e-3)

    # The third flattening is f / (2 - f)
    f = wgs84.flattening
    assert wgs84.third_flattening == approx(f / (2 - f), abs=1e-8)


def test_ellipsoid_from_axes():
    wgs84 = Ellipsoid.from_axes('WGS84', 6378137.0, 6356752.314245)
    assert wgs84.label == 'WGS84'
    assert wgs84.third_flattening == approx(0.0016792203863837, rel=1e-10)
    assert wgs84.eccentricity == approx(0.0818191908426, rel=1e-10)
    assert wgs84.rectifying_radius == approx(6367449.14577, abs=1e-3)

    # Agrees with the tabulated constants
    table = lookup('WGS84')
    assert wgs84.third_flattening == approx(table.third_flattening, abs=1e-8)
    assert wgs84.eccentricity == approx(table.eccentricity, abs=1e-8)
    assert wgs84.rectifying_radius == approx(table.rectifying_radius, abs=1e-3)

    clarke = Ellipsoid.from_axes('clrk66', 6378206.4, 6356583.8, label='Clarke 1866')
    assert clarke.label == 'Clarke 1866'
    assert clarke.third_flattening == approx(lookup('CLARKE_1866').third_flattening, abs=1e-8)
    assert clarke.eccentricity == approx(lookup('CLARKE_1866').eccentricity, abs=1e-8)

    sphere = Ellipsoid.from_axes('sphere', 6371000., 6371000.)
    assert sphere.third_flattening == 0.
    assert sphere.eccentricity == 0.
    assert sphere.rectifying_radius == 6371000.
