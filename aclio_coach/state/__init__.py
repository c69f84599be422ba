"""
State management module for aclio_coach.

Import ``AppState`` from ``aclio_coach.state.app_state``.
"""

from .navigation_state import NavigationState

__all__ = [
    'NavigationState',
]
