from pytest import approx

from geodatum import CartesianVector, GeoPoint, GridRef


def assert_geopoints_equal(p1: GeoPoint, p2: GeoPoint, abs_tol=1e-7):
    """
    Asserts that two GeoPoints are on the same datum and equal within a specified
    absolute tolerance.

    Args:
        p1: The first GeoPoint
        p2: The second GeoPoint
        abs_tol: The absolute tolerance, in degrees.
                 Default is 1e-7 (approx 1.1cm at the equator).
    """
    assert p1.datum_key == p2.datum_key
    assert p1.latitude == approx(p2.latitude, abs=abs_tol)
    assert p1.longitude == approx(p2.longitude, abs=abs_tol)


def assert_gridrefs_equal(g1: GridRef, g2: GridRef, abs_tol=1e-3):
    """Asserts that two GridRefs are equal within a tolerance in meters"""
    assert g1.easting == approx(g2.easting, abs=abs_tol)
    assert g1.northing == approx(g2.northing, abs=abs_tol)


def assert_vectors_equal(v1: CartesianVector, v2: CartesianVector, abs_tol=1e-3):
    """Asserts that two CartesianVectors are equal within a tolerance in meters"""
    for c1, c2 in zip(v1.xyz, v2.xyz):
        assert c1 == approx(c2, abs=abs_tol)
