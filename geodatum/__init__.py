from geodatum._version import __version__  # noqa: F401
from geodatum._const import GRID_DATUM, REFERENCE_DATUM
from geodatum.utils.logging import LOGGER
from geodatum.exceptions import (
    ConvergenceError, GeodatumError, NumericDomainError, UnknownReferenceKey
)
from geodatum.helmert import HelmertTransform, apply_transform, inverse_transform
from geodatum.registry import DATUMS, ELLIPSOIDS, Datum, Ellipsoid, datum, ellipsoid
from geodatum.locations import CartesianVector, GeoPoint, GridRef, Location, to_lat_lon


__all__ = [
    'CartesianVector',
    'ConvergenceError',
    'DATUMS',
    'Datum',
    'ELLIPSOIDS',
    'Ellipsoid',
    'GRID_DATUM',
    'GeoPoint',
    'GeodatumError',
    'GridRef',
    'HelmertTransform',
    'LOGGER',
    'Location',
    'NumericDomainError',
    'REFERENCE_DATUM',
    'UnknownReferenceKey',
    'apply_transform',
    'datum',
    'ellipsoid',
    'inverse_transform',
    'to_lat_lon',
]
