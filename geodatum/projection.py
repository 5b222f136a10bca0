"""
Transverse Mercator projection onto the OS National Grid.

Grid coordinates are always relative to the Airy 1830 ellipsoid and the fixed national
grid origin; latitudes and longitudes going in and coming out of this module are on
that ellipsoid (the OSGB36 datum). Datum changes are the caller's concern.

Series follow Ordnance Survey, "A guide to coordinate systems in Great Britain",
Annexe C.
"""

__all__ = ['geographic_to_grid', 'grid_to_geographic', 'meridional_arc']

from functools import lru_cache
import math
from typing import Tuple

from geodatum._const import (
    CONVERGENCE_TOLERANCE, GRID_E0, GRID_ELLIPSOID, GRID_F0, GRID_LAT0,
    GRID_LON0, GRID_N0, GRID_PRECISION, MAX_ITERATIONS
)
from geodatum.exceptions import ConvergenceError, NumericDomainError
from geodatum.registry import ellipsoid
from geodatum.utils.functions import ensure_finite, round_half_up
from geodatum.utils.logging import LOGGER

_AIRY = ellipsoid(GRID_ELLIPSOID)
_PHI0 = math.radians(GRID_LAT0)
_LAM0 = math.radians(GRID_LON0)

_E2 = 1 - (_AIRY.b * _AIRY.b) / (_AIRY.a * _AIRY.a)


def _radii(phi: float) -> Tuple[float, float, float]:
    """Transverse radius of curvature nu, meridional radius rho, and eta^2 at phi"""
    sin2 = math.sin(phi) ** 2
    nu = _AIRY.a * GRID_F0 / math.sqrt(1 - _E2 * sin2)
    rho = _AIRY.a * GRID_F0 * (1 - _E2) / (1 - _E2 * sin2) ** 1.5
    return nu, rho, nu / rho - 1


def meridional_arc(phi: float) -> float:
    """
    Scaled distance along the central meridian from the true origin to latitude `phi`.

    Args:
        phi:
            Latitude, in radians

    Returns:
        The meridional arc M, in meters
    """
    a, b = _AIRY.a, _AIRY.b
    n = (a - b) / (a + b)
    n2, n3 = n * n, n * n * n
    d_phi, s_phi = phi - _PHI0, phi + _PHI0

    ma = (1 + n + (5 / 4) * n2 + (5 / 4) * n3) * d_phi
    mb = (3 * n + 3 * n2 + (21 / 8) * n3) * math.sin(d_phi) * math.cos(s_phi)
    mc = ((15 / 8) * n2 + (15 / 8) * n3) * math.sin(2 * d_phi) * math.cos(2 * s_phi)
    md = (35 / 24) * n3 * math.sin(3 * d_phi) * math.cos(3 * s_phi)
    return b * GRID_F0 * (ma - mb + mc - md)


def geographic_to_grid(latitude: float, longitude: float) -> Tuple[float, float]:
    """
    Project an OSGB36 latitude/longitude onto the national grid.

    Args:
        latitude:
            OSGB36 latitude, in degrees

        longitude:
            OSGB36 longitude, in degrees

    Returns:
        (easting, northing) in meters, rounded to the millimeter

    Raises:
        NumericDomainError if the latitude/longitude is non-finite or out of range
    """
    ensure_finite(latitude, longitude, context='latitude/longitude')
    phi, lam = math.radians(latitude), math.radians(longitude)
    sin_phi, cos_phi, tan_phi = math.sin(phi), math.cos(phi), math.tan(phi)
    tan2, tan4 = tan_phi ** 2, tan_phi ** 4

    nu, rho, eta2 = _radii(phi)
    m = meridional_arc(phi)

    i = m + GRID_N0
    ii = (nu / 2) * sin_phi * cos_phi
    iii = (nu / 24) * sin_phi * cos_phi ** 3 * (5 - tan2 + 9 * eta2)
    iiia = (nu / 720) * sin_phi * cos_phi ** 5 * (61 - 58 * tan2 + tan4)
    iv = nu * cos_phi
    v = (nu / 6) * cos_phi ** 3 * (nu / rho - tan2)
    vi = (nu / 120) * cos_phi ** 5 * (
        5 - 18 * tan2 + tan4 + 14 * eta2 - 58 * tan2 * eta2
    )

    d_lam = lam - _LAM0
    try:
        northing = i + ii * d_lam ** 2 + iii * d_lam ** 4 + iiia * d_lam ** 6
        easting = GRID_E0 + iv * d_lam + v * d_lam ** 3 + vi * d_lam ** 5
    except OverflowError:
        raise NumericDomainError(
            f'Longitude {longitude} is too far from the central meridian to project'
        ) from None

    ensure_finite(easting, northing, context='easting/northing')
    return round_half_up(easting, GRID_PRECISION), round_half_up(northing, GRID_PRECISION)


@lru_cache(maxsize=4096)
def grid_to_geographic(
    easting: float,
    northing: float,
    max_iterations: int = MAX_ITERATIONS,
    tolerance: float = CONVERGENCE_TOLERANCE,
) -> Tuple[float, float]:
    """
    Convert a national grid easting/northing to an OSGB36 latitude/longitude.

    Latitude is first found by fixed-point iteration on the meridional arc, then
    corrected for the distance from the central meridian.

    Args:
        easting:
            Easting, in meters

        northing:
            Northing, in meters

        max_iterations: (int) (Default 100)
            The number of refinements of latitude allowed before giving up

        tolerance: (float) (Default 1e-5)
            The unresolved meridional arc, in meters, below which latitude is final

    Returns:
        (latitude, longitude) in degrees

    Raises:
        ConvergenceError if latitude has not settled after `max_iterations`
        NumericDomainError if the easting/northing is non-finite or out of range
    """
    ensure_finite(easting, northing, context='easting/northing')
    a = _AIRY.a

    phi = _PHI0
    residual = northing - GRID_N0
    iterations = 0
    while abs(residual) >= tolerance:
        if iterations >= max_iterations:
            LOGGER.error(
                'Grid reference (%s, %s) did not converge in %s iterations',
                easting, northing, max_iterations
            )
            raise ConvergenceError(iterations, residual)

        phi += residual / (a * GRID_F0)
        m = meridional_arc(phi)
        residual = northing - GRID_N0 - m
        iterations += 1

    LOGGER.debug('Grid reference (%s, %s) converged in %s iterations', easting, northing, iterations)

    tan_phi = math.tan(phi)
    tan2, tan4, tan6 = tan_phi ** 2, tan_phi ** 4, tan_phi ** 6
    sec_phi = 1 / math.cos(phi)
    nu, rho, eta2 = _radii(phi)

    vii = tan_phi / (2 * rho * nu)
    viii = tan_phi / (24 * rho * nu ** 3) * (5 + 3 * tan2 + eta2 - 9 * tan2 * eta2)
    ix = tan_phi / (720 * rho * nu ** 5) * (61 + 90 * tan2 + 45 * tan4)
    x = sec_phi / nu
    xi = sec_phi / (6 * nu ** 3) * (nu / rho + 2 * tan2)
    xii = sec_phi / (120 * nu ** 5) * (5 + 28 * tan2 + 24 * tan4)
    xiia = sec_phi / (5040 * nu ** 7) * (61 + 662 * tan2 + 1320 * tan4 + 720 * tan6)

    d_e = easting - GRID_E0
    try:
        phi = phi - vii * d_e ** 2 + viii * d_e ** 4 - ix * d_e ** 6
        lam = _LAM0 + x * d_e - xi * d_e ** 3 + xii * d_e ** 5 - xiia * d_e ** 7
    except OverflowError:
        raise NumericDomainError(
            f'Easting {easting} is too far from the central meridian to convert'
        ) from None

    latitude, longitude = math.degrees(phi), math.degrees(lam)
    ensure_finite(latitude, longitude, context='latitude/longitude')
    return latitude, longitude
