"""
Seven-parameter Helmert (Bursa-Wolf) transforms between earth-centered Cartesian frames
"""

__all__ = ['HelmertTransform', 'apply_transform', 'inverse_transform']

import math
from typing import NamedTuple, Tuple

import numpy as np

from geodatum.utils.functions import ensure_finite

XYZ = Tuple[float, float, float]


class HelmertTransform(NamedTuple):
    """
    A linearized similarity transform. Translations are in meters, scale in parts
    per million, and rotations in arcseconds.

    The rotation is the first-order (small angle) approximation, which is only valid
    for the few-arcsecond rotations found between geodetic datums.
    """
    tx: float = 0.
    ty: float = 0.
    tz: float = 0.
    s: float = 0.
    rx: float = 0.
    ry: float = 0.
    rz: float = 0.

    @property
    def is_identity(self) -> bool:
        return not any(self)

    @property
    def translation(self) -> np.ndarray:
        return np.array([self.tx, self.ty, self.tz], dtype=float)

    @property
    def matrix(self) -> np.ndarray:
        """The combined scale and rotation matrix, with rotations in radians"""
        s1 = 1 + self.s / 1e6
        rx, ry, rz = (math.radians(r / 3600) for r in (self.rx, self.ry, self.rz))
        return np.array([
            [s1, -rz, ry],
            [rz, s1, -rx],
            [-ry, rx, s1],
        ])

    def inverse(self) -> 'HelmertTransform':
        """
        The first-order inverse of this transform, obtained by negating every parameter.

        This is not the exact inverse: applying a transform and then its inverse
        leaves a residual on the order of (scale + rotation) * (translation + vector),
        i.e. up to about a centimeter for the larger datum shifts in the registry.
        """
        return HelmertTransform(*(-x for x in self))


def inverse_transform(transform: HelmertTransform) -> HelmertTransform:
    """Return the first-order inverse of `transform`; see HelmertTransform.inverse"""
    return transform.inverse()


def apply_transform(xyz: XYZ, transform: HelmertTransform) -> XYZ:
    """
    Apply a Helmert transform to an earth-centered Cartesian vector.

    The identity transform returns the vector unchanged, bit for bit.

    Args:
        xyz:
            The (x, y, z) vector, in meters

        transform:
            The HelmertTransform to apply

    Returns:
        The transformed (x, y, z) vector

    Raises:
        NumericDomainError if the vector, or its transform, is non-finite
    """
    if transform.is_identity:
        return xyz

    ensure_finite(*xyz, context='cartesian vector')
    with np.errstate(over='ignore', invalid='ignore'):
        x, y, z = transform.translation + transform.matrix @ np.array(xyz, dtype=float)

    result = float(x), float(y), float(z)
    ensure_finite(*result, context='transformed vector')
    return result
