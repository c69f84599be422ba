"""
Navigation manager for screen-based navigation.
"""

from typing import Callable, List, Optional, TYPE_CHECKING

from loguru import logger

from .app_screen import AppScreen, DASHBOARD, WELCOME, ScreenKind
from .screen_registry import ScreenRegistry
from ..state.navigation_state import NavigationState
from ..Models.goal import Goal

if TYPE_CHECKING:
    from textual.screen import Screen
    from ..Storage.local_storage import StorageService


NavigationListener = Callable[[AppScreen], None]


class NavigationManager:
    """
    Owns the navigation state for the application.

    All operations are synchronous state transitions and cannot fail. Listeners
    are told about the newly visible screen after every change; a listener that
    raises is logged and skipped.
    """

    def __init__(
        self,
        state: Optional[NavigationState] = None,
        storage: Optional["StorageService"] = None,
        registry: Optional[ScreenRegistry] = None,
    ):
        self.state = state or NavigationState()
        self.storage = storage
        self.registry = registry or ScreenRegistry()
        self._listeners: List[NavigationListener] = []

    # --- Core transitions ---

    def navigate(self, screen: AppScreen) -> None:
        """Push ``screen`` on top of the history."""
        self.state.navigate_to(screen)
        logger.debug(f"Navigated to screen: {screen!r} (depth {len(self.state.history)})")
        self._notify()

    def navigate_back(self) -> None:
        """Pop the top screen; does nothing when there is no history."""
        popped = self.state.go_back()
        if popped is None:
            logger.debug("No previous screen to go back to")
            return
        logger.debug(f"Left screen: {popped!r}")
        self._notify()

    def navigate_to_root(self, screen: AppScreen) -> None:
        """
        Clear history and make ``screen`` the root.

        Used for irreversible transitions such as finishing onboarding or logging
        out, where nothing before the reset may be revisited.
        """
        self.state.reset_to(screen)
        logger.info(f"Reset navigation root to: {screen!r}")
        self._notify()

    # --- Queries ---

    @property
    def visible_screen(self) -> AppScreen:
        return self.state.visible_screen

    def get_current_screen(self) -> AppScreen:
        """Get the current root screen."""
        return self.state.current_screen

    def get_history(self) -> List[AppScreen]:
        """Get navigation history."""
        return self.state.history.copy()

    def can_go_back(self) -> bool:
        """Check if we can navigate back."""
        return self.state.previous_screen is not None

    def resolve_view(self) -> "Screen":
        """Build the view that should be mounted for the visible screen."""
        return self.registry.build(self.visible_screen, self)

    # --- Flows ---

    def open_goal(self, goal: Goal) -> None:
        self.navigate(AppScreen.goal_detail(goal))

    def open_chat(self, goal: Optional[Goal] = None) -> None:
        self.navigate(AppScreen.chat(goal))

    def complete_onboarding(self) -> None:
        if self.storage is not None:
            self.storage.complete_onboarding()
        self.navigate_to_root(DASHBOARD)

    def logout(self) -> None:
        if self.storage is not None:
            self.storage.reset_onboarding()
        self.navigate_to_root(WELCOME)

    def show_goal_from_notification(self, goal: Goal) -> None:
        """Jump to a goal from outside the app: dashboard root, then the goal."""
        if self.visible_screen.kind != ScreenKind.DASHBOARD:
            self.navigate_to_root(DASHBOARD)
        self.open_goal(goal)

    # --- Listeners ---

    def subscribe(self, listener: NavigationListener) -> Callable[[], None]:
        """Register a change listener. Returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        visible = self.visible_screen
        for listener in list(self._listeners):
            try:
                listener(visible)
            except Exception:
                logger.exception(f"Navigation listener failed for {visible!r}")
