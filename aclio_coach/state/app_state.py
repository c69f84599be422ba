"""
Root application state container.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from ..Chat.chat_session import ChatSession
from ..LLM_Calls.aclio_api import ChatStreamClient
from ..Models.goal import Goal
from ..Models.user_profile import UserProfile
from ..navigation.app_screen import DASHBOARD, WELCOME
from ..navigation.navigation_manager import NavigationManager
from ..Storage.local_storage import InMemoryStorage, StorageService


@dataclass
class AppState:
    """
    Single source of truth shared by the screens.

    Collaborators are passed in rather than looked up globally so the whole
    state can be built against in-memory fakes.
    """

    storage: StorageService = field(default_factory=InMemoryStorage)
    chat_client: Optional[ChatStreamClient] = None
    navigation: Optional[NavigationManager] = None

    # Shared state
    profile: UserProfile = field(default_factory=UserProfile)
    goals: List[Goal] = field(default_factory=list)
    active_goal: Optional[Goal] = None
    is_dark_mode: bool = False
    is_ready: bool = False

    def __post_init__(self) -> None:
        if self.navigation is None:
            self.navigation = NavigationManager(storage=self.storage)
        self.load_all_data()

    # --- Loading ---

    def load_all_data(self) -> None:
        """Pull profile, goals and theme from storage."""
        self.is_dark_mode = self.storage.load_theme()
        self.profile = self.storage.load_profile() or UserProfile()
        self.goals = self.storage.load_goals()
        logger.debug(f"Loaded state: {len(self.goals)} goals, dark_mode={self.is_dark_mode}")

    def finish_loading(self) -> None:
        """Leave the loading screen for the dashboard or the welcome flow."""
        root = DASHBOARD if self.storage.has_onboarded else WELCOME
        self.navigation.navigate_to_root(root)
        self.is_ready = True

    # --- Session flows ---

    def complete_onboarding(self) -> None:
        self.navigation.complete_onboarding()

    def logout(self) -> None:
        self.navigation.logout()
        self.active_goal = None

    def clear_all_data(self) -> None:
        self.storage.clear_all_data()
        self.profile = UserProfile()
        self.goals = []
        self.active_goal = None
        self.navigation.navigate_to_root(WELCOME)

    # --- Profile and theme ---

    def update_profile(self, profile: UserProfile) -> None:
        self.profile = profile
        self.storage.save_profile(profile)

    def refresh_profile(self) -> None:
        self.profile = self.storage.load_profile() or UserProfile()

    def refresh_theme(self) -> None:
        self.is_dark_mode = self.storage.load_theme()

    def set_theme(self, is_dark: bool) -> None:
        self.is_dark_mode = is_dark
        self.storage.save_theme(is_dark)

    def toggle_theme(self) -> bool:
        self.set_theme(not self.is_dark_mode)
        return self.is_dark_mode

    # --- Goals ---

    def set_active_goal(self, goal: Goal) -> None:
        self.active_goal = goal

    def get_goal(self, goal_id: int) -> Optional[Goal]:
        for goal in self.goals:
            if goal.id == goal_id:
                return goal
        return None

    def add_goal(self, goal: Goal) -> None:
        self.goals.insert(0, goal)
        self.storage.save_goals(self.goals)

    def update_goal(self, goal: Goal) -> None:
        for index, existing in enumerate(self.goals):
            if existing.id == goal.id:
                self.goals[index] = goal
                self.storage.save_goals(self.goals)
                return

    def delete_goal(self, goal_id: int) -> None:
        self.goals = [goal for goal in self.goals if goal.id != goal_id]
        self.storage.save_goals(self.goals)

    # --- Chat ---

    def create_chat_session(self, goal: Optional[Goal] = None) -> ChatSession:
        """New conversation, optionally scoped to ``goal``."""
        if self.chat_client is None:
            raise RuntimeError("AppState has no chat client configured")
        return ChatSession(self.chat_client, goal=goal, storage=self.storage)

    def to_dict(self) -> dict:
        """Snapshot for diagnostics."""
        return {
            "navigation": {
                "current_screen": self.navigation.get_current_screen().name,
                "history": [screen.name for screen in self.navigation.get_history()],
            },
            "profile": self.profile.model_dump(mode="json"),
            "goal_count": len(self.goals),
            "active_goal_id": self.active_goal.id if self.active_goal else None,
            "is_dark_mode": self.is_dark_mode,
            "is_ready": self.is_ready,
        }
