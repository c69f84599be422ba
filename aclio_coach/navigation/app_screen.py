"""
Navigable destinations.

An ``AppScreen`` is a tagged value: a ``ScreenKind`` plus, for the goal detail
and chat variants, a reference to a ``Goal``. Equality and hashing look at the
kind and the goal's ``id`` only, so two screens pointing at the same goal are
the same destination even after the goal has been renamed or had steps ticked.
"""

from enum import Enum
from typing import Optional

from ..Models.goal import Goal


class ScreenKind(str, Enum):
    LOADING = "loading"
    WELCOME = "welcome"
    ONBOARDING = "onboarding"
    PROFILE_SETUP = "profile_setup"
    DASHBOARD = "dashboard"
    NEW_GOAL = "new_goal"
    GOAL_DETAIL = "goal_detail"
    CHAT = "chat"
    SETTINGS = "settings"
    EDIT_PROFILE = "edit_profile"
    ANALYTICS = "analytics"
    DEV_SETTINGS = "dev_settings"
    NOTIFICATION_SETTINGS = "notification_settings"


PARAMETERIZED_KINDS = frozenset({ScreenKind.GOAL_DETAIL, ScreenKind.CHAT})


class AppScreen:
    """A screen identity, optionally carrying a goal reference."""

    __slots__ = ("_kind", "_goal")

    def __init__(self, kind: ScreenKind, goal: Optional[Goal] = None):
        kind = ScreenKind(kind)
        if kind == ScreenKind.GOAL_DETAIL and goal is None:
            raise ValueError("goal_detail screen requires a goal")
        if goal is not None and kind not in PARAMETERIZED_KINDS:
            raise ValueError(f"{kind.value} screen does not take a goal")
        self._kind = kind
        self._goal = goal

    # Constructors for the parameterized variants
    @classmethod
    def goal_detail(cls, goal: Goal) -> "AppScreen":
        return cls(ScreenKind.GOAL_DETAIL, goal)

    @classmethod
    def chat(cls, goal: Optional[Goal] = None) -> "AppScreen":
        return cls(ScreenKind.CHAT, goal)

    @property
    def kind(self) -> ScreenKind:
        return self._kind

    @property
    def goal(self) -> Optional[Goal]:
        return self._goal

    @property
    def goal_id(self) -> Optional[int]:
        return self._goal.id if self._goal is not None else None

    @property
    def name(self) -> str:
        """Stable string key, e.g. ``goal_detail-7``, ``chat-7`` or ``chat-general``."""
        if self._kind == ScreenKind.GOAL_DETAIL:
            return f"goal_detail-{self.goal_id}"
        if self._kind == ScreenKind.CHAT:
            return f"chat-{self.goal_id}" if self._goal is not None else "chat-general"
        return self._kind.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AppScreen):
            return NotImplemented
        if self._kind != other._kind:
            return False
        if self._kind in PARAMETERIZED_KINDS:
            return self.goal_id == other.goal_id
        return True

    def __hash__(self) -> int:
        if self._kind in PARAMETERIZED_KINDS:
            return hash((self._kind.value, self.goal_id))
        return hash(self._kind.value)

    def __repr__(self) -> str:
        if self._kind in PARAMETERIZED_KINDS:
            return f"AppScreen({self._kind.value}, goal_id={self.goal_id})"
        return f"AppScreen({self._kind.value})"


# Parameterless destinations
LOADING = AppScreen(ScreenKind.LOADING)
WELCOME = AppScreen(ScreenKind.WELCOME)
ONBOARDING = AppScreen(ScreenKind.ONBOARDING)
PROFILE_SETUP = AppScreen(ScreenKind.PROFILE_SETUP)
DASHBOARD = AppScreen(ScreenKind.DASHBOARD)
NEW_GOAL = AppScreen(ScreenKind.NEW_GOAL)
SETTINGS = AppScreen(ScreenKind.SETTINGS)
EDIT_PROFILE = AppScreen(ScreenKind.EDIT_PROFILE)
ANALYTICS = AppScreen(ScreenKind.ANALYTICS)
DEV_SETTINGS = AppScreen(ScreenKind.DEV_SETTINGS)
NOTIFICATION_SETTINGS = AppScreen(ScreenKind.NOTIFICATION_SETTINGS)
