"""
Deathbat Twin Finder API
=========================
HTTP layer over the catalog core.
"""

from catalog import __version__

__all__ = ['__version__']
