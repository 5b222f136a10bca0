"""
The package logger. Conversions log convergence at DEBUG, recoverable degenerate
geometry (such as a vector on the polar axis) once at WARNING, and failures at ERROR
before raising.
"""

__all__ = ['LOGGER', 'warn_once']

import logging

LOGGER = logging.getLogger('geodatum')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

# Warning messages already emitted by this process
_WARNINGS = set()


def warn_once(warning: str):
    """
    Log a warning the first time it occurs. Conversions are often run over large
    batches of points, and a repeated degenerate case would otherwise flood the log.

    Args:
        warning:
            The warning message
    """
    if warning not in _WARNINGS:
        LOGGER.warning(warning)
        _WARNINGS.add(warning)
