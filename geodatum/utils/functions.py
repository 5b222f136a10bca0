"""Module for miscellaneous multi-use functions"""

__all__ = ['ensure_finite', 'round_half_up']

import math

from geodatum.exceptions import NumericDomainError


def ensure_finite(*values: float, context: str = 'value') -> None:
    """
    Raises a NumericDomainError if any of the values is NaN or infinite.

    Args:
        values:
            The floats to be checked

        context:
            A short description of the values, used in the error message

    """
    for value in values:
        if not math.isfinite(value):
            raise NumericDomainError(f'Non-finite {context}: {values}')


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)
