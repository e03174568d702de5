"""
Stemmer backends for Porter Lab.

Usage:
    # Get stemmer (auto-configured from env):
    from porterlab.backends import get_stemmer

    stemmer = get_stemmer()
    stemmer.stem("running")  # "run"

    # Or create specific implementation:
    from porterlab.backends import SnowballBackend

    stemmer = SnowballBackend()
    stemmer.stem("generously")
"""

from .base import BaseStemmer
from .porter import PorterBackend
from .snowball import SnowballBackend
from .factory import StemmerFactory


def get_stemmer(force_reload: bool = False) -> BaseStemmer:
    """
    Get configured stemmer instance (factory convenience function).

    Backend is chosen with STEMMER_TYPE (porter | snowball).
    """
    return StemmerFactory.create(force_reload=force_reload)


__all__ = [
    'BaseStemmer',
    'PorterBackend',
    'SnowballBackend',
    'StemmerFactory',
    'get_stemmer',
]
