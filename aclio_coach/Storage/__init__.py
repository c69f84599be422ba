"""
Persistence for user data (profile, goals, theme and onboarding flags).
"""

from .local_storage import InMemoryStorage, JsonFileStorage, StorageService

__all__ = [
    'InMemoryStorage',
    'JsonFileStorage',
    'StorageService',
]
