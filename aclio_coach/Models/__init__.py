"""
Domain models shared by navigation, chat and storage.
"""

from .goal import Goal, Step
from .user_profile import Gender, UserProfile

__all__ = [
    'Gender',
    'Goal',
    'Step',
    'UserProfile',
]
