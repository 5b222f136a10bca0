"""
The installed version of geodatum
"""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

_VERSION_FILE = Path(__file__).resolve().parents[1] / 'VERSION'


def _read_version_file() -> str | None:
    """
    Read the version from the VERSION file next to setup.py, for a source checkout
    which has not been pip installed. Returns None when there is no such file.
    """
    try:
        return _VERSION_FILE.read_text(encoding='utf-8').strip()
    except OSError:
        return None


try:
    __version__ = version('geodatum')
except PackageNotFoundError:
    __version__ = _read_version_file()

__all__ = ['__version__']
