"""Views mounted by the navigation registry."""

from .base_screen import AclioScreen
from .basic_screens import (
    DashboardScreen,
    GoalDetailScreen,
    InfoScreen,
    LoadingScreen,
    NewGoalScreen,
    OnboardingScreen,
    ProfileSetupScreen,
    SettingsScreen,
    WelcomeScreen,
)
from .chat_screen import ChatScreen

__all__ = [
    'AclioScreen',
    'ChatScreen',
    'DashboardScreen',
    'GoalDetailScreen',
    'InfoScreen',
    'LoadingScreen',
    'NewGoalScreen',
    'OnboardingScreen',
    'ProfileSetupScreen',
    'SettingsScreen',
    'WelcomeScreen',
]
