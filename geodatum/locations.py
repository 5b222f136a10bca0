"""
Representations of a location on the surface of the earth
"""

__all__ = ['CartesianVector', 'GeoPoint', 'GridRef', 'Location', 'to_lat_lon']

from abc import ABC, abstractmethod
from typing import Tuple

from pydantic import validate_call

from geodatum._const import GRID_DATUM, REFERENCE_DATUM
from geodatum.cartesian import cartesian_to_geodetic, geodetic_to_cartesian
from geodatum.exceptions import NumericDomainError
from geodatum.helmert import HelmertTransform, apply_transform
from geodatum.projection import geographic_to_grid, grid_to_geographic
from geodatum.registry import Datum, Ellipsoid, datum as get_datum
from geodatum.utils.functions import ensure_finite


class Location(ABC):
    """
    A location on the surface of the earth. Implemented by exactly three
    representations: GeoPoint, CartesianVector and GridRef.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def datum_key(self) -> str:
        """The registry key of the datum this location is expressed on"""

    @property
    def datum(self) -> Datum:
        return get_datum(self.datum_key)

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self.datum.ellipsoid

    @property
    def latitude(self) -> float:
        """Latitude in degrees, on this location's own datum"""
        return self.to_geographic(self.datum_key).latitude

    @property
    def longitude(self) -> float:
        """Longitude in degrees, on this location's own datum"""
        return self.to_geographic(self.datum_key).longitude

    @property
    def easting(self) -> float:
        return self.to_grid().easting

    @property
    def northing(self) -> float:
        return self.to_grid().northing

    @abstractmethod
    def to_cartesian(self) -> 'CartesianVector':
        """Convert to an earth-centered vector on this location's datum"""

    @abstractmethod
    def to_geographic(self, datum: str = REFERENCE_DATUM) -> 'GeoPoint':
        """Convert to a latitude/longitude on the named datum"""

    @abstractmethod
    def to_grid(self) -> 'GridRef':
        """Convert to an OS National Grid reference"""


class GeoPoint(Location):
    """
    A geodetic latitude/longitude on a named datum.

    Args:
        latitude:
            Latitude, in degrees

        longitude:
            Longitude, in degrees

        datum: (str) (Default 'WGS84')
            Key of the datum in the registry, e.g. 'OSGB36'

    Raises:
        NumericDomainError if the latitude is outside [-90, 90] or either value is
        non-finite
    """

    __slots__ = ('_latitude', '_longitude', '_datum_key')

    @validate_call
    def __init__(self, latitude: float, longitude: float, datum: str = REFERENCE_DATUM):
        ensure_finite(latitude, longitude, context='latitude/longitude')
        if abs(latitude) > 90:
            raise NumericDomainError(f'Latitude {latitude} is outside [-90, 90]')

        self._latitude = latitude
        self._longitude = longitude
        self._datum_key = get_datum(datum).key

    def __eq__(self, other) -> bool:
        if not isinstance(other, GeoPoint):
            return False

        return (
            self._latitude == other._latitude and
            self._longitude == other._longitude and
            self._datum_key == other._datum_key
        )

    def __hash__(self) -> int:
        return hash((self._latitude, self._longitude, self._datum_key))

    def __repr__(self) -> str:
        return f'<GeoPoint({self._latitude}, {self._longitude}, {self._datum_key})>'

    @property
    def datum_key(self) -> str:
        return self._datum_key

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    def to_cartesian(self) -> 'CartesianVector':
        return CartesianVector(
            *geodetic_to_cartesian(self._latitude, self._longitude, self.ellipsoid)
        )

    def to_geographic(self, datum: str = REFERENCE_DATUM) -> 'GeoPoint':
        """
        Convert this point to another datum.

        Every transform in the registry maps WGS84 into its datum, so conversions to or
        from WGS84 take a single Helmert step. Conversions between two other datums
        pivot through WGS84 in two steps.

        Args:
            datum: (str) (Default 'WGS84')
                Key of the target datum

        Returns:
            GeoPoint
        """
        target = get_datum(datum)
        if target.key == self._datum_key:
            return self

        if self._datum_key == REFERENCE_DATUM:
            transform = target.transform
        elif target.key == REFERENCE_DATUM:
            transform = self.datum.transform.inverse()
        else:
            pivot = self.to_geographic(REFERENCE_DATUM)
            return pivot.to_geographic(target.key)

        return self.to_cartesian().transform(transform).to_geographic(target.key)

    def to_grid(self) -> 'GridRef':
        native = self.to_geographic(GRID_DATUM)
        return GridRef(*geographic_to_grid(native.latitude, native.longitude))


class CartesianVector(Location):
    """
    An earth-centered rectangular vector, in meters.

    A vector carries no datum of its own. Conversions which need one take the datum
    to interpret the vector under as a parameter; where none is given, the vector
    is interpreted as WGS84.
    """

    __slots__ = ('_x', '_y', '_z')

    @validate_call
    def __init__(self, x: float, y: float, z: float):
        ensure_finite(x, y, z, context='cartesian vector')
        self._x = x
        self._y = y
        self._z = z

    def __eq__(self, other) -> bool:
        if not isinstance(other, CartesianVector):
            return False

        return self.xyz == other.xyz

    def __hash__(self) -> int:
        return hash(self.xyz)

    def __repr__(self) -> str:
        return f'<CartesianVector({self._x}, {self._y}, {self._z})>'

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    @property
    def xyz(self) -> Tuple[float, float, float]:
        return self._x, self._y, self._z

    @property
    def datum_key(self) -> str:
        return REFERENCE_DATUM

    def to_cartesian(self) -> 'CartesianVector':
        return self

    def to_geographic(self, datum: str = REFERENCE_DATUM) -> GeoPoint:
        """
        Interpret this vector on the named datum's ellipsoid. No datum shift is applied.

        Args:
            datum: (str) (Default 'WGS84')
                Key of the datum the vector is expressed in

        Returns:
            GeoPoint
        """
        target = get_datum(datum)
        return GeoPoint(*cartesian_to_geodetic(*self.xyz, target.ellipsoid), target.key)

    def to_grid(self, datum: str = REFERENCE_DATUM) -> 'GridRef':
        """
        Args:
            datum: (str) (Default 'WGS84')
                Key of the datum the vector is expressed in
        """
        return self.to_geographic(datum).to_grid()

    def transform(self, transform: HelmertTransform) -> 'CartesianVector':
        """Apply a Helmert transform to this vector"""
        return CartesianVector(*apply_transform(self.xyz, transform))


class GridRef(Location):
    """
    An OS National Grid easting/northing, in meters. Grid references are always
    relative to the OSGB36 datum.
    """

    __slots__ = ('_easting', '_northing')

    @validate_call
    def __init__(self, easting: float, northing: float):
        ensure_finite(easting, northing, context='easting/northing')
        self._easting = easting
        self._northing = northing

    def __eq__(self, other) -> bool:
        if not isinstance(other, GridRef):
            return False

        return self._easting == other._easting and self._northing == other._northing

    def __hash__(self) -> int:
        return hash((self._easting, self._northing))

    def __repr__(self) -> str:
        return f'<GridRef({self._easting}, {self._northing})>'

    @property
    def datum_key(self) -> str:
        return GRID_DATUM

    @property
    def easting(self) -> float:
        return self._easting

    @property
    def northing(self) -> float:
        return self._northing

    def to_cartesian(self) -> CartesianVector:
        return self.to_geographic(GRID_DATUM).to_cartesian()

    def to_geographic(self, datum: str = REFERENCE_DATUM, **kwargs) -> GeoPoint:
        """
        Convert this grid reference to a latitude/longitude.

        Args:
            datum: (str) (Default 'WGS84')
                Key of the target datum

        Keyword Args:
            max_iterations: (int) (Default 100)
                Iteration cap for recovering latitude from the northing

            tolerance: (float) (Default 1e-5)
                Convergence tolerance, in meters

        Returns:
            GeoPoint

        Raises:
            ConvergenceError if latitude could not be recovered
        """
        native = GeoPoint(
            *grid_to_geographic(self._easting, self._northing, **kwargs),
            GRID_DATUM
        )
        return native.to_geographic(datum)

    def to_grid(self) -> 'GridRef':
        return self


def to_lat_lon(
    easting: float,
    northing: float,
    datum: str = REFERENCE_DATUM
) -> Tuple[float, float]:
    """
    Convert a national grid easting/northing to a latitude/longitude pair.

    Args:
        easting:
            Easting, in meters

        northing:
            Northing, in meters

        datum: (str) (Default 'WGS84')
            Key of the datum to express the result on

    Returns:
        (latitude, longitude) in degrees
    """
    point = GridRef(easting, northing).to_geographic(datum)
    return point.latitude, point.longitude
