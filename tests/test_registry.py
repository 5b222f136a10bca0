import pytest

from geodatum.exceptions import GeodatumError, UnknownReferenceKey
from geodatum.registry import *


def test_ellipsoid():
    airy = ellipsoid('Airy1830')
    assert airy == Ellipsoid(6377563.396, 6356256.909, 1 / 299.3249646)
    assert airy.a == 6377563.396
    assert airy.b == 6356256.909

    wgs84 = ellipsoid('WGS84')
    assert wgs84.e2 == pytest.approx(0.00669437999014, abs=1e-12)


def test_datum():
    osgb36 = datum('OSGB36')
    assert osgb36.key == 'OSGB36'
    assert osgb36.ellipsoid is ELLIPSOIDS['Airy1830']
    assert osgb36.transform.s == 20.4894

    # Datums share ellipsoid records rather than copies of them
    assert datum('Potsdam').ellipsoid is datum('TokyoJapan').ellipsoid


def test_registry_keys():
    assert set(DATUMS) == {
        'ED50', 'Irl1975', 'NAD27', 'NAD83', 'NTF', 'OSGB36', 'Potsdam',
        'TokyoJapan', 'WGS72', 'WGS84'
    }
    assert set(ELLIPSOIDS) == {
        'WGS84', 'Airy1830', 'AiryModified', 'Bessel1841', 'Clarke1866',
        'Clarke1880IGN', 'GRS80', 'Intl1924', 'WGS72'
    }
    for key, value in DATUMS.items():
        assert value.key == key
        assert value.ellipsoid in ELLIPSOIDS.values()


def test_reference_datum_is_identity():
    assert all(x == 0 for x in datum('WGS84').transform)


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        DATUMS['Mars'] = DATUMS['WGS84']

    with pytest.raises(TypeError):
        ELLIPSOIDS['WGS84'] = Ellipsoid(1., 1., 0.)

    with pytest.raises(AttributeError):
        datum('WGS84').key = 'OSGB36'


def test_unknown_key():
    with pytest.raises(UnknownReferenceKey) as exc:
        datum('Mars2000')
    assert exc.value.key == 'Mars2000'
    assert exc.value.kind == 'datum'
    assert 'OSGB36' in exc.value.choices
    assert "Unknown datum 'Mars2000'" in str(exc.value)

    with pytest.raises(UnknownReferenceKey):
        ellipsoid('OSGB36')

    # Keys are exact
    with pytest.raises(UnknownReferenceKey):
        datum('wgs84')

    # Unhashable keys are simply unknown
    with pytest.raises(UnknownReferenceKey):
        datum({'key': 'WGS84'})

    # Still catchable as the builtin/base types
    with pytest.raises(KeyError):
        datum('Mars2000')
    with pytest.raises(GeodatumError):
        ellipsoid('Mars2000')
