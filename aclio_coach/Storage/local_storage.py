# local_storage.py
# Description: Key-value persistence for profile, goals, theme and onboarding flags
#
# Imports
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
#
# Third-Party Imports
from loguru import logger
from pydantic import ValidationError
#
# Local Imports
from ..Models.goal import Goal
from ..Models.user_profile import UserProfile
from ..Utils.atomic_file_ops import atomic_write_json
#
#######################################################################################################################
#
# Constants:

KEY_GOALS = "aclio_goals"
KEY_PROFILE = "aclio_profile"
KEY_ONBOARDED = "aclio_onboarded"
KEY_THEME = "aclio_theme"

ALL_KEYS = (KEY_GOALS, KEY_PROFILE, KEY_ONBOARDED, KEY_THEME)

#
# Classes:

class StorageService(ABC):
    """
    Typed accessors over a simple key-value store.

    Subclasses only decide where the raw JSON-compatible values live.
    """

    @abstractmethod
    def _read(self, key: str) -> Any:
        """Raw value for ``key``, or None."""

    @abstractmethod
    def _write(self, key: str, value: Any) -> None:
        ...

    @abstractmethod
    def _remove(self, key: str) -> None:
        ...

    # --- Theme ---

    def load_theme(self) -> bool:
        """True when the dark theme is selected."""
        return self._read(KEY_THEME) == "dark"

    def save_theme(self, is_dark: bool) -> None:
        self._write(KEY_THEME, "dark" if is_dark else "light")

    # --- Profile ---

    def load_profile(self) -> Optional[UserProfile]:
        raw = self._read(KEY_PROFILE)
        if raw is None:
            return None
        try:
            return UserProfile.model_validate(raw)
        except ValidationError as e:
            logger.warning(f"Stored profile is invalid, ignoring it: {e}")
            return None

    def save_profile(self, profile: UserProfile) -> None:
        self._write(KEY_PROFILE, profile.model_dump(mode="json"))

    # --- Onboarding ---

    @property
    def has_onboarded(self) -> bool:
        return bool(self._read(KEY_ONBOARDED))

    def complete_onboarding(self) -> None:
        self._write(KEY_ONBOARDED, True)

    def reset_onboarding(self) -> None:
        self._write(KEY_ONBOARDED, False)

    # --- Goals ---

    def load_goals(self) -> List[Goal]:
        raw = self._read(KEY_GOALS)
        if not isinstance(raw, list):
            return []
        goals = []
        for item in raw:
            try:
                goals.append(Goal.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Skipping invalid stored goal: {e}")
        return goals

    def save_goals(self, goals: List[Goal]) -> None:
        self._write(KEY_GOALS, [goal.model_dump(mode="json") for goal in goals])

    # --- Reset ---

    def clear_all_data(self) -> None:
        for key in ALL_KEYS:
            self._remove(key)
        logger.info("Cleared all stored user data")


class InMemoryStorage(StorageService):
    """Process-local storage, used for tests and throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = dict(initial or {})

    def _read(self, key: str) -> Any:
        return self._data.get(key)

    def _write(self, key: str, value: Any) -> None:
        self._data[key] = value

    def _remove(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStorage(StorageService):
    """All keys kept in a single JSON document, rewritten atomically on every change."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._data: Dict[str, Any] = self._load()

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            logger.debug(f"No storage file at {self.path}; starting empty")
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Could not read storage file {self.path}: {e}. Starting empty.")
            return {}
        if not isinstance(data, dict):
            logger.error(f"Storage file {self.path} does not hold an object. Starting empty.")
            return {}
        return data

    def _flush(self) -> None:
        atomic_write_json(self.path, self._data)

    def _read(self, key: str) -> Any:
        return self._data.get(key)

    def _write(self, key: str, value: Any) -> None:
        self._data[key] = value
        self._flush()

    def _remove(self, key: str) -> None:
        if key in self._data:
            del self._data[key]
            self._flush()

#
# End of local_storage.py
#######################################################################################################################
