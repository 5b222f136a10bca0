import pytest

from geodatum.exceptions import NumericDomainError
from geodatum.utils.functions import *


def test_round_half_up():
    assert round_half_up(0.5, 0) == 1.
    assert round_half_up(277655.9999996, 3) == 277656.


def test_ensure_finite():
    ensure_finite(1., -1e300, 0.)

    with pytest.raises(NumericDomainError, match='easting'):
        ensure_finite(1., float('nan'), context='easting')

    with pytest.raises(NumericDomainError):
        ensure_finite(float('-inf'))
