"""
Conversion between geodetic latitude/longitude and earth-centered Cartesian vectors
"""

__all__ = ['cartesian_to_geodetic', 'geodetic_to_cartesian']

import math
from typing import Tuple

from geodatum.exceptions import NumericDomainError
from geodatum.registry import Ellipsoid
from geodatum.utils.functions import ensure_finite
from geodatum.utils.logging import warn_once


def geodetic_to_cartesian(
    latitude: float,
    longitude: float,
    ellipsoid: Ellipsoid
) -> Tuple[float, float, float]:
    """
    Convert a latitude/longitude on the surface of an ellipsoid (height zero) to
    earth-centered rectangular coordinates.

    Args:
        latitude:
            Geodetic latitude, in degrees

        longitude:
            Longitude, in degrees

        ellipsoid:
            The ellipsoid the latitude/longitude is expressed on

    Returns:
        (x, y, z) in meters
    """
    ensure_finite(latitude, longitude, context='latitude/longitude')
    phi, lam = math.radians(latitude), math.radians(longitude)
    sin_phi, cos_phi = math.sin(phi), math.cos(phi)
    e2 = ellipsoid.e2

    # Prime vertical radius of curvature
    nu = ellipsoid.a / math.sqrt(1 - e2 * sin_phi * sin_phi)

    return (
        nu * cos_phi * math.cos(lam),
        nu * cos_phi * math.sin(lam),
        nu * (1 - e2) * sin_phi,
    )


def cartesian_to_geodetic(
    x: float,
    y: float,
    z: float,
    ellipsoid: Ellipsoid
) -> Tuple[float, float]:
    """
    Convert earth-centered rectangular coordinates to a latitude/longitude on an
    ellipsoid, using Bowring's reduced latitude method.

    On the polar axis the reduced latitude cannot be derived from x/y, and takes
    its polar value of +/-90 degrees instead.

    Args:
        x, y, z:
            The vector components, in meters

        ellipsoid:
            The ellipsoid to express the result on

    Returns:
        (latitude, longitude) in degrees

    Raises:
        NumericDomainError if the vector is non-finite or lies at the earth's center
    """
    ensure_finite(x, y, z, context='cartesian vector')
    a, b = ellipsoid.a, ellipsoid.b
    e2 = ellipsoid.e2
    eps2 = e2 / (1 - e2)  # Second eccentricity squared

    p = math.hypot(x, y)  # Distance from the minor axis
    r = math.hypot(p, z)  # Distance from the center

    if p == 0:
        if z == 0:
            raise NumericDomainError('Latitude is undefined at the center of the ellipsoid')

        warn_once(
            'Cartesian vector lies on the polar axis; longitude is undefined and reported as 0.'
        )
        sin_beta, cos_beta = math.copysign(1., z), 0.
    else:
        tan_beta = (b * z) / (a * p) * (b * (1 + eps2)) / r
        cos_beta = 1 / math.sqrt(1 + tan_beta * tan_beta)
        sin_beta = tan_beta * cos_beta

    phi = math.atan2(
        z + eps2 * b * sin_beta ** 3,
        p - e2 * a * cos_beta ** 3
    )
    lam = math.atan2(y, x) if p else 0.

    latitude, longitude = math.degrees(phi), math.degrees(lam)
    ensure_finite(latitude, longitude, context='latitude/longitude')
    return latitude, longitude
