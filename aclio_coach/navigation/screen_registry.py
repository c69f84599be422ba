"""
Registry of all available screen views in the application.
"""

from typing import Dict, Type, Optional, TYPE_CHECKING

from textual.screen import Screen
from loguru import logger

from .app_screen import AppScreen, ScreenKind, PARAMETERIZED_KINDS

if TYPE_CHECKING:
    from .navigation_manager import NavigationManager


class ScreenRegistry:
    """Central registry mapping each screen kind to the view that renders it."""

    def __init__(self):
        self._screens: Dict[ScreenKind, Type[Screen]] = {}
        self._load_screens()

    def _load_screens(self) -> None:
        """Load all screen classes."""
        from ..UI.Screens.basic_screens import (
            LoadingScreen,
            WelcomeScreen,
            OnboardingScreen,
            ProfileSetupScreen,
            DashboardScreen,
            NewGoalScreen,
            GoalDetailScreen,
            SettingsScreen,
            InfoScreen,
        )
        from ..UI.Screens.chat_screen import ChatScreen

        self._screens = {
            ScreenKind.LOADING: LoadingScreen,
            ScreenKind.WELCOME: WelcomeScreen,
            ScreenKind.ONBOARDING: OnboardingScreen,
            ScreenKind.PROFILE_SETUP: ProfileSetupScreen,
            ScreenKind.DASHBOARD: DashboardScreen,
            ScreenKind.NEW_GOAL: NewGoalScreen,
            ScreenKind.GOAL_DETAIL: GoalDetailScreen,
            ScreenKind.CHAT: ChatScreen,
            ScreenKind.SETTINGS: SettingsScreen,
            ScreenKind.EDIT_PROFILE: InfoScreen,
            ScreenKind.ANALYTICS: InfoScreen,
            ScreenKind.DEV_SETTINGS: InfoScreen,
            ScreenKind.NOTIFICATION_SETTINGS: InfoScreen,
        }

        logger.info(f"Registered {len(self._screens)} screen views")

    def get_screen_class(self, kind: ScreenKind) -> Optional[Type[Screen]]:
        """Get a screen class by kind."""
        return self._screens.get(ScreenKind(kind))

    def register_screen(self, kind: ScreenKind, screen_class: Type[Screen]) -> None:
        """Register (or replace) the view for a screen kind."""
        self._screens[ScreenKind(kind)] = screen_class
        logger.debug(f"Registered screen: {kind} -> {screen_class.__name__}")

    def build(self, screen: AppScreen, manager: "NavigationManager") -> Screen:
        """Instantiate the view for ``screen``."""
        screen_class = self.get_screen_class(screen.kind)
        if screen_class is None:
            # Every kind is registered at load time; this only trips on a bad override
            raise KeyError(f"No view registered for screen: {screen.kind.value}")
        if screen.kind in PARAMETERIZED_KINDS:
            return screen_class(manager, screen, goal=screen.goal)
        return screen_class(manager, screen)

