"""Exception types raised by geodatum"""

__all__ = [
    'ConvergenceError', 'GeodatumError', 'NumericDomainError', 'UnknownReferenceKey'
]

from typing import Iterable, Optional


class GeodatumError(Exception):
    """Base class for all geodatum errors"""


class UnknownReferenceKey(GeodatumError, KeyError):
    """A datum or ellipsoid key is not present in the reference registry"""

    def __init__(self, kind: str, key: str, choices: Iterable[str] = ()):
        self.kind = kind
        self.key = key
        self.choices = sorted(choices)
        super().__init__(
            f"Unknown {kind} '{key}'. Options: {self.choices}"
        )

    def __str__(self):
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class NumericDomainError(GeodatumError, ValueError):
    """A conversion produced, or was fed, a value with no defined result"""


class ConvergenceError(GeodatumError, ArithmeticError):
    """An iterative conversion did not reach its tolerance within the iteration cap"""

    def __init__(self, iterations: int, residual: Optional[float] = None):
        self.iterations = iterations
        self.residual = residual
        super().__init__(
            f'Failed to converge after {iterations} iterations (residual {residual})'
        )
