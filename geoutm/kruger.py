"""
Krüger series coefficients for the transverse Mercator projection.

The forward (alpha) coefficients map the conformal sphere's isometric
coordinates (xi', eta') onto the ellipsoid's transverse Mercator coordinates
(xi, eta); the inverse (beta) coefficients map them back. Each coefficient is a
polynomial in the third flattening n with exact rational coefficients, after
C. F. F. Karney, "Transverse Mercator with an accuracy of a few nanometers",
J. Geodesy 85 (2011), eqs. 35-36.
"""

__all__ = [
    'ellipsoid_coefficients', 'forward_coefficients', 'inverse_coefficients',
    'kruger_sums',
]

from fractions import Fraction as F
from functools import lru_cache
from typing import Dict, Sequence, Tuple

import numpy as np

from geoutm._const import KRUGER_ORDER
from geoutm.ellipsoids import Ellipsoid


# Keyed by power of n
_ALPHA: Tuple[Dict[int, F], ...] = (
    {
        1: F(1, 2), 2: F(-2, 3), 3: F(5, 16), 4: F(41, 180), 5: F(-127, 288),
        6: F(7891, 37800), 7: F(72161, 387072), 8: F(-18975107, 50803200),
        9: F(60193001, 290304000), 10: F(134592031, 1026432000),
    },
    {
        2: F(13, 48), 3: F(-3, 5), 4: F(557, 1440), 5: F(281, 630),
        6: F(-1983433, 1935360), 7: F(13769, 28800), 8: F(148003883, 174182400),
        9: F(-705286231, 465696000), 10: F(1703267974087, 3218890752000),
    },
    {
        3: F(61, 240), 4: F(-103, 140), 5: F(15061, 26880), 6: F(167603, 181440),
        7: F(-67102379, 29030400), 8: F(79682431, 79833600),
        9: F(6304945039, 2128896000), 10: F(-6601904925257, 1307674368000),
    },
    {
        4: F(49561, 161280), 5: F(-179, 168), 6: F(6601661, 7257600),
        7: F(97445, 49896), 8: F(-40176129013, 7664025600),
        9: F(138471097, 66528000), 10: F(48087451385201, 5230697472000),
    },
    {
        5: F(34729, 80640), 6: F(-3418889, 1995840), 7: F(14644087, 9123840),
        8: F(2605413599, 622702080), 9: F(-31015475399, 2583060480),
        10: F(5820486440369, 1307674368000),
    },
    {
        6: F(212378941, 319334400), 7: F(-30705481, 10378368),
        8: F(175214326799, 58118860800), 9: F(870492877, 96096000),
        10: F(-1328004581729000, 47823519744000),
    },
    {
        7: F(1522256789, 1383782400), 8: F(-16759934899, 3113510400),
        9: F(1315149374443, 221405184000), 10: F(71809987837451, 3629463552000),
    },
)

# Truncated at n^8, two orders short of _ALPHA; the n^9 and n^10 terms contribute
# less than 1e-24 for terrestrial ellipsoids
_BETA: Tuple[Dict[int, F], ...] = (
    {
        1: F(1, 2), 2: F(-2, 3), 3: F(37, 96), 4: F(-1, 360), 5: F(-81, 512),
        6: F(96199, 604800), 7: F(-5406467, 38707200), 8: F(7944359, 67737600),
    },
    {
        2: F(1, 48), 3: F(1, 15), 4: F(-437, 1440), 5: F(46, 105),
        6: F(-1118711, 3870720), 7: F(51841, 1209600), 8: F(24749483, 348364800),
    },
    {
        3: F(17, 480), 4: F(-37, 840), 5: F(-209, 4480), 6: F(5569, 90720),
        7: F(9261899, 58060800), 8: F(-6457463, 17740800),
    },
    {
        4: F(4397, 161280), 5: F(-11, 504), 6: F(-830251, 7257600),
        7: F(466511, 2494800), 8: F(324154477, 7664025600),
    },
    {
        5: F(4583, 161280), 6: F(-108847, 3991680), 7: F(-8005831, 63866880),
        8: F(22894433, 124540416),
    },
    {
        6: F(20648693, 638668800), 7: F(-16363163, 518918400),
        8: F(-2204645983, 12915302400),
    },
    {
        7: F(219941297, 5535129600), 8: F(-497323811, 12454041600),
    },
)


def _ascending(terms: Dict[int, F]) -> np.ndarray:
    """Dense coefficient array, lowest power first (as numpy's polyval expects)"""
    coeffs = np.zeros(max(terms) + 1)
    for power, coeff in terms.items():
        coeffs[power] = float(coeff)
    return coeffs


_ALPHA_POLYNOMIALS = tuple(_ascending(x) for x in _ALPHA)
_BETA_POLYNOMIALS = tuple(_ascending(x) for x in _BETA)


def _evaluate(polynomials: Sequence[np.ndarray], n: float) -> Tuple[float, ...]:
    return tuple(
        float(np.polynomial.polynomial.polyval(n, coeffs))
        for coeffs in polynomials[:KRUGER_ORDER]
    )


@lru_cache(maxsize=64)
def forward_coefficients(third_flattening: float) -> Tuple[float, ...]:
    """
    The alpha_1..alpha_7 coefficients of the forward Krüger series.

    Args:
        third_flattening:
            The ellipsoid's third flattening, n = (a - b) / (a + b)

    Returns:
        A 7-tuple of floats, alpha_1 first
    """
    return _evaluate(_ALPHA_POLYNOMIALS, third_flattening)


@lru_cache(maxsize=64)
def inverse_coefficients(third_flattening: float) -> Tuple[float, ...]:
    """
    The beta_1..beta_7 coefficients of the inverse Krüger series.

    Args:
        third_flattening:
            The ellipsoid's third flattening, n = (a - b) / (a + b)

    Returns:
        A 7-tuple of floats, beta_1 first
    """
    return _evaluate(_BETA_POLYNOMIALS, third_flattening)


def ellipsoid_coefficients(ellipsoid: Ellipsoid) -> Tuple[Tuple[float, ...], Tuple[float, ...]]:
    """The (alpha, beta) coefficient tuples for an ellipsoid"""
    n = ellipsoid.third_flattening
    return forward_coefficients(n), inverse_coefficients(n)


def kruger_sums(coefficients: Sequence[float], xi, eta) -> Tuple[np.ndarray, np.ndarray]:
    """
    Evaluates the two trigonometric series

        sum_k c_k * sin(2k * xi) * cosh(2k * eta)
        sum_k c_k * cos(2k * xi) * sinh(2k * eta)

    over every coefficient, for scalar or array xi/eta of matching shape.

    Args:
        coefficients:
            The series coefficients c_1..c_k (alpha or beta)

        xi:
            Northward isometric coordinate(s), radians

        eta:
            Eastward isometric coordinate(s), radians

    Returns:
        (xi series, eta series), each shaped like xi
    """
    coeffs = np.asarray(coefficients, dtype=float)
    two_k = 2 * np.arange(1, len(coeffs) + 1)

    # Trailing axis runs over the series terms
    xi_k = np.asarray(xi, dtype=float)[..., np.newaxis] * two_k
    eta_k = np.asarray(eta, dtype=float)[..., np.newaxis] * two_k

    return (
        np.sum(coeffs * np.sin(xi_k) * np.cosh(eta_k), axis=-1),
        np.sum(coeffs * np.cos(xi_k) * np.sinh(eta_k), axis=-1),
    )
