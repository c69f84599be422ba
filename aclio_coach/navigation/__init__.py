"""
Navigation management module.

Screen identities live here; ``NavigationManager`` and ``ScreenRegistry`` are
imported from their own modules.
"""

from .app_screen import AppScreen, ScreenKind

__all__ = [
    'AppScreen',
    'ScreenKind',
]
