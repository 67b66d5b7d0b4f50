import numpy as np
import pytest
from pytest import approx

from geoutm.ellipsoids import Ellipsoid, lookup
from geoutm.kruger import *


# WGS84 third flattening, from f = 1 / 298.257223563
N_WGS84 = (1 / 298.257223563) / (2 - 1 / 298.257223563)


def test_forward_coefficients():
    alpha = forward_coefficients(N_WGS84)
    assert len(alpha) == 7

    # Published WGS84 values (Karney 2011)
    assert alpha[0] == approx(8.377318206244698e-4, rel=1e-8)
    assert alpha[1] == approx(7.608527773572307e-7, rel=1e-8)
    assert alpha[2] == approx(1.197645503329453e-9, rel=1e-8)

    # Each coefficient is O(n^k)
    for k, coeff in enumerate(alpha, start=1):
        assert 0 < abs(coeff) < 2 * N_WGS84 ** k


def test_inverse_coefficients():
    beta = inverse_coefficients(N_WGS84)
    assert len(beta) == 7

    assert beta[0] == approx(8.377321640579488e-4, rel=1e-8)
    assert beta[1] == approx(5.905870152220203e-8, rel=1e-8)
    assert beta[2] == approx(1.673482665343997e-10, rel=1e-8)

    for k, coeff in enumerate(beta, start=1):
        assert 0 < abs(coeff) < 2 * N_WGS84 ** k


def test_coefficients_leading_terms():
    # For small n, alpha_1 and beta_1 both tend to n / 2
    n = 1e-6
    assert forward_coefficients(n)[0] == approx(n / 2, rel=1e-5)
    assert inverse_coefficients(n)[0] == approx(n / 2, rel=1e-5)

    # alpha_1 - beta_1 = -7/96 n^3 + O(n^4)
    n = 1e-3
    diff = forward_coefficients(n)[0] - inverse_coefficients(n)[0]
    assert diff == approx(-7 / 96 * n ** 3, rel=1e-2)

    # Sphere: no correction at all
    assert forward_coefficients(0.) == (0.,) * 7
    assert inverse_coefficients(0.) == (0.,) * 7


def test_coefficients_cached():
    assert forward_coefficients(N_WGS84) is forward_coefficients(N_WGS84)
    assert inverse_coefficients(N_WGS84) is inverse_coefficients(N_WGS84)


def test_ellipsoid_coefficients():
    wgs84 = lookup('WGS84')
    alpha, beta = ellipsoid_coefficients(wgs84)
    assert alpha == forward_coefficients(wgs84.third_flattening)
    assert beta == inverse_coefficients(wgs84.third_flattening)

    exact = Ellipsoid.from_axes('WGS84', 6378137.0, 6356752.314245)
    alpha, beta = ellipsoid_coefficients(exact)
    assert alpha[0] == approx(8.377318206244698e-4, rel=1e-8)
    assert beta[0] == approx(8.377321640579488e-4, rel=1e-8)


def test_kruger_sums_scalar():
    alpha = forward_coefficients(N_WGS84)
    d_xi, d_eta = kruger_sums(alpha, 0.5, 0.02)

    expected_xi = sum(
        a * np.sin(2 * k * 0.5) * np.cosh(2 * k * 0.02) for k, a in enumerate(alpha, start=1)
    )
    expected_eta = sum(
        a * np.cos(2 * k * 0.5) * np.sinh(2 * k * 0.02) for k, a in enumerate(alpha, start=1)
    )
    assert float(d_xi) == approx(expected_xi, abs=1e-18)
    assert float(d_eta) == approx(expected_eta, abs=1e-18)

    # Every term counts, including the last
    only_last = (0.,) * 6 + (1.,)
    d_xi, d_eta = kruger_sums(only_last, 0.1, 0.01)
    assert float(d_xi) == approx(np.sin(1.4) * np.cosh(0.14))
    assert float(d_eta) == approx(np.cos(1.4) * np.sinh(0.14))


def test_kruger_sums_array():
    alpha = forward_coefficients(N_WGS84)
    xi = np.array([0., 0.3, 1.2])
    eta = np.array([0., -0.04, 0.05])
    d_xi, d_eta = kruger_sums(alpha, xi, eta)
    assert d_xi.shape == (3,)
    assert d_eta.shape == (3,)

    # Equator and central meridian are fixed lines
    assert d_xi[0] == 0.
    assert d_eta[0] == 0.

    for i in range(3):
        s_xi, s_eta = kruger_sums(alpha, xi[i], eta[i])
        assert d_xi[i] == approx(float(s_xi), abs=1e-18)
        assert d_eta[i] == approx(float(s_eta), abs=1e-18)


@pytest.mark.parametrize('datum', ['WGS84', 'CLARKE_1880', 'EVEREST_1830'])
def test_series_are_mutual_inverses(datum):
    alpha, beta = ellipsoid_coefficients(lookup(datum))

    xi_prime, eta_prime = np.meshgrid(np.linspace(0., 1.45, 15), np.linspace(-0.07, 0.07, 9))
    d_xi, d_eta = kruger_sums(alpha, xi_prime, eta_prime)
    xi, eta = xi_prime + d_xi, eta_prime + d_eta

    d_xi, d_eta = kruger_sums(beta, xi, eta)
    np.testing.assert_allclose(xi - d_xi, xi_prime, rtol=0, atol=1e-13)
    np.testing.assert_allclose(eta - d_eta, eta_prime, rtol=0, atol=1e-13)
