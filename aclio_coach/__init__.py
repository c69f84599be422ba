"""
aclio_coach - An AI goal-coaching client

Goals broken into steps, a coach you can chat with about them, and the
navigation and session logic that ties the screens together.
"""

__version__ = "0.1.0"

# Version tuple for programmatic comparison
VERSION_TUPLE = (0, 1, 0)

__all__ = [
    "__version__",
    "VERSION_TUPLE",
]
