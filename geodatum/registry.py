"""
Reference ellipsoids and datums.

Each datum carries the Helmert parameters which take a WGS84 vector into that datum.
The published parameters are approximations good to around a meter at best.
"""

__all__ = ['DATUMS', 'ELLIPSOIDS', 'Datum', 'Ellipsoid', 'datum', 'ellipsoid']

from types import MappingProxyType
from typing import Mapping, NamedTuple

from geodatum.exceptions import UnknownReferenceKey
from geodatum.helmert import HelmertTransform


class Ellipsoid(NamedTuple):
    """Semi-major axis `a` and semi-minor axis `b` in meters, and flattening `f`"""
    a: float
    b: float
    f: float

    @property
    def e2(self) -> float:
        """First eccentricity squared"""
        return 2 * self.f - self.f * self.f


class Datum(NamedTuple):
    """An ellipsoid, and the transform which maps WGS84 into this datum"""
    key: str
    ellipsoid: Ellipsoid
    transform: HelmertTransform


ELLIPSOIDS: Mapping[str, Ellipsoid] = MappingProxyType({
    'WGS84': Ellipsoid(6378137., 6356752.314245, 1 / 298.257223563),
    'Airy1830': Ellipsoid(6377563.396, 6356256.909, 1 / 299.3249646),
    'AiryModified': Ellipsoid(6377340.189, 6356034.448, 1 / 299.3249646),
    'Bessel1841': Ellipsoid(6377397.155, 6356078.962818, 1 / 299.1528128),
    'Clarke1866': Ellipsoid(6378206.4, 6356583.8, 1 / 294.978698214),
    'Clarke1880IGN': Ellipsoid(6378249.2, 6356515.0, 1 / 293.466021294),
    'GRS80': Ellipsoid(6378137., 6356752.314140, 1 / 298.257222101),
    'Intl1924': Ellipsoid(6378388., 6356911.946, 1 / 297),  # aka Hayford
    'WGS72': Ellipsoid(6378135., 6356750.5, 1 / 298.26),
})


def _datum(key: str, ellipsoid_key: str, *params: float) -> Datum:
    return Datum(key, ELLIPSOIDS[ellipsoid_key], HelmertTransform(*params))


DATUMS: Mapping[str, Datum] = MappingProxyType({
    # key                       ellipsoid          tx        ty        tz        s        rx       ry        rz
    'ED50': _datum('ED50', 'Intl1924', 89.5, 93.8, 123.1, -1.2, 0.0, 0.0, 0.156),
    'Irl1975': _datum('Irl1975', 'AiryModified', -482.530, 130.596, -564.557, -8.150, -1.042, -0.214, -0.631),
    'NAD27': _datum('NAD27', 'Clarke1866', 8, -160, -176, 0, 0, 0, 0),
    'NAD83': _datum('NAD83', 'GRS80', 1.004, -1.910, -0.515, -0.0015, 0.0267, 0.00034, 0.011),
    'NTF': _datum('NTF', 'Clarke1880IGN', 168, 60, -320, 0, 0, 0, 0),
    'OSGB36': _datum('OSGB36', 'Airy1830', -446.448, 125.157, -542.060, 20.4894, -0.1502, -0.2470, -0.8421),
    'Potsdam': _datum('Potsdam', 'Bessel1841', -582, -105, -414, -8.3, 1.04, 0.35, -3.08),
    'TokyoJapan': _datum('TokyoJapan', 'Bessel1841', 148, -507, -685, 0, 0, 0, 0),
    'WGS72': _datum('WGS72', 'WGS72', 0, 0, -4.5, -0.22, 0, 0, 0.554),
    'WGS84': _datum('WGS84', 'WGS84', 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
})


def ellipsoid(key: str) -> Ellipsoid:
    """
    Look up an ellipsoid by name.

    Args:
        key:
            The ellipsoid name, e.g. 'Airy1830'

    Returns:
        Ellipsoid

    Raises:
        UnknownReferenceKey if no such ellipsoid is registered
    """
    try:
        return ELLIPSOIDS[key]
    except (KeyError, TypeError):
        raise UnknownReferenceKey('ellipsoid', key, ELLIPSOIDS) from None


def datum(key: str) -> Datum:
    """
    Look up a datum by name.

    Args:
        key:
            The datum name, e.g. 'OSGB36'

    Returns:
        Datum

    Raises:
        UnknownReferenceKey if no such datum is registered
    """
    try:
        return DATUMS[key]
    except (KeyError, TypeError):
        raise UnknownReferenceKey('datum', key, DATUMS) from None
