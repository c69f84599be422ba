"""
Tests for the storage services.
"""

import json

import pytest

from aclio_coach.Models.goal import Goal
from aclio_coach.Models.user_profile import Gender, UserProfile
from aclio_coach.Storage.local_storage import (
    InMemoryStorage,
    JsonFileStorage,
    KEY_GOALS,
    KEY_ONBOARDED,
    KEY_PROFILE,
    KEY_THEME,
)


@pytest.fixture(params=["memory", "file"])
def any_storage(request, isolated_temp_dir):
    if request.param == "memory":
        return InMemoryStorage()
    return JsonFileStorage(isolated_temp_dir / "data" / "storage.json")


class TestStorageService:

    def test_defaults(self, any_storage):
        assert any_storage.load_theme() is False
        assert any_storage.load_profile() is None
        assert any_storage.has_onboarded is False
        assert any_storage.load_goals() == []

    def test_theme(self, any_storage):
        any_storage.save_theme(True)
        assert any_storage.load_theme() is True
        any_storage.save_theme(False)
        assert any_storage.load_theme() is False

    def test_profile(self, any_storage):
        profile = UserProfile(name="Jordan", age="31", gender=Gender.FEMALE)
        any_storage.save_profile(profile)
        assert any_storage.load_profile() == profile

    def test_onboarding_flag(self, any_storage):
        any_storage.complete_onboarding()
        assert any_storage.has_onboarded
        any_storage.reset_onboarding()
        assert not any_storage.has_onboarded

    def test_goals(self, any_storage, sample_goal):
        any_storage.save_goals([sample_goal, Goal(id=8, name="Read more books")])
        loaded = any_storage.load_goals()
        assert [goal.id for goal in loaded] == [7, 8]
        assert loaded[0].steps == sample_goal.steps

    def test_clear_all_data(self, any_storage, sample_goal):
        any_storage.save_goals([sample_goal])
        any_storage.save_theme(True)
        any_storage.complete_onboarding()

        any_storage.clear_all_data()

        assert any_storage.load_goals() == []
        assert not any_storage.load_theme()
        assert not any_storage.has_onboarded


class TestInvalidStoredData:

    def test_invalid_profile_is_ignored(self):
        storage = InMemoryStorage({KEY_PROFILE: {"name": ["not", "a", "string"]}})
        assert storage.load_profile() is None

    def test_invalid_goals_are_skipped(self):
        storage = InMemoryStorage({KEY_GOALS: [{"id": 1, "name": "Valid goal"}, {"id": "x"}]})
        assert [goal.id for goal in storage.load_goals()] == [1]

    def test_non_list_goals(self):
        assert InMemoryStorage({KEY_GOALS: "oops"}).load_goals() == []


class TestJsonFileStorage:

    def test_writes_are_persisted(self, isolated_temp_dir, sample_goal):
        path = isolated_temp_dir / "storage.json"
        storage = JsonFileStorage(path)
        storage.save_goals([sample_goal])
        storage.save_theme(True)
        storage.complete_onboarding()

        on_disk = json.loads(path.read_text(encoding="utf-8"))
        assert on_disk[KEY_THEME] == "dark"
        assert on_disk[KEY_ONBOARDED] is True

        reopened = JsonFileStorage(path)
        assert reopened.load_goals()[0].name == "Run a marathon"
        assert reopened.has_onboarded

    def test_corrupt_file_starts_empty(self, isolated_temp_dir):
        path = isolated_temp_dir / "storage.json"
        path.write_text("{not json", encoding="utf-8")

        storage = JsonFileStorage(path)

        assert storage.load_goals() == []
        storage.save_theme(True)
        assert JsonFileStorage(path).load_theme()

    def test_non_object_file_starts_empty(self, isolated_temp_dir):
        path = isolated_temp_dir / "storage.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert JsonFileStorage(path).load_profile() is None

    def test_removing_missing_key_does_not_create_file(self, isolated_temp_dir):
        path = isolated_temp_dir / "storage.json"
        JsonFileStorage(path).clear_all_data()
        assert not path.exists()
