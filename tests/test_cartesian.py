import pytest
from pytest import approx

from geodatum.cartesian import *
from geodatum.exceptions import NumericDomainError
from geodatum.registry import ellipsoid

WGS84 = ellipsoid('WGS84')


def test_geodetic_to_cartesian():
    assert geodetic_to_cartesian(0., 0., WGS84) == approx((6378137., 0., 0.), abs=1e-6)
    assert geodetic_to_cartesian(0., 90., WGS84) == approx((0., 6378137., 0.), abs=1e-6)
    assert geodetic_to_cartesian(90., 0., WGS84) == approx((0., 0., WGS84.b), abs=1e-3)
    assert geodetic_to_cartesian(-90., 0., WGS84) == approx((0., 0., -WGS84.b), abs=1e-3)

    expected = (3674233.146647, -250871.222361, 5190006.722171)
    assert geodetic_to_cartesian(54.822218, -3.906009, WGS84) == approx(expected, abs=1e-3)


def test_cartesian_to_geodetic():
    assert cartesian_to_geodetic(6378137., 0., 0., WGS84) == approx((0., 0.), abs=1e-9)
    assert cartesian_to_geodetic(0., 6378137., 0., WGS84) == approx((0., 90.), abs=1e-9)

    actual = cartesian_to_geodetic(3674233.146647, -250871.222361, 5190006.722171, WGS84)
    assert actual == approx((54.822218, -3.906009), abs=1e-6)


@pytest.mark.parametrize(
    'latitude, longitude, key', [
        (54.822218, -3.906009, 'WGS84'),
        (52.657570, 1.717922, 'Airy1830'),
        (-33.9, 151.2, 'GRS80'),
        (0., -179.5, 'Intl1924'),
        (89.9999, 10., 'Bessel1841'),
        (-60., 45., 'Clarke1866'),
    ]
)
def test_cartesian_round_trip(latitude, longitude, key):
    ell = ellipsoid(key)
    actual = cartesian_to_geodetic(*geodetic_to_cartesian(latitude, longitude, ell), ell)
    assert actual == approx((latitude, longitude), abs=1e-6)


def test_cartesian_to_geodetic_poles(caplog, monkeypatch):
    monkeypatch.setattr('geodatum.utils.logging._WARNINGS', set())
    assert cartesian_to_geodetic(0., 0., WGS84.b, WGS84) == (90., 0.)
    assert cartesian_to_geodetic(0., 0., -WGS84.b, WGS84) == (-90., 0.)
    assert cartesian_to_geodetic(-0., 0., 1., WGS84) == (90., 0.)
    assert 'polar axis' in caplog.text


def test_cartesian_to_geodetic_center():
    with pytest.raises(NumericDomainError):
        cartesian_to_geodetic(0., 0., 0., WGS84)


def test_non_finite():
    with pytest.raises(NumericDomainError):
        geodetic_to_cartesian(float('nan'), 0., WGS84)

    with pytest.raises(NumericDomainError):
        cartesian_to_geodetic(float('inf'), 0., 0., WGS84)
