"""
Navigation state management.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..navigation.app_screen import AppScreen, LOADING


@dataclass
class NavigationState:
    """
    Root screen plus the push-down stack of screens opened on top of it.

    The visible screen is the top of ``history`` when there is one, otherwise
    ``current_screen``.
    """

    # Current root
    current_screen: AppScreen = LOADING

    # Screens pushed beyond the root, oldest first
    history: List[AppScreen] = field(default_factory=list)

    def navigate_to(self, screen: AppScreen) -> None:
        """Push a screen onto the history."""
        self.history.append(screen)

    def go_back(self) -> Optional[AppScreen]:
        """Pop the top screen. Returns the popped screen, or None if history was empty."""
        if self.history:
            return self.history.pop()
        return None

    def reset_to(self, screen: AppScreen) -> None:
        """Drop all history and make ``screen`` the new root."""
        self.history = []
        self.current_screen = screen

    @property
    def visible_screen(self) -> AppScreen:
        if self.history:
            return self.history[-1]
        return self.current_screen

    @property
    def previous_screen(self) -> Optional[AppScreen]:
        """Screen that becomes visible after ``go_back``."""
        if not self.history:
            return None
        if len(self.history) == 1:
            return self.current_screen
        return self.history[-2]
