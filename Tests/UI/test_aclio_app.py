"""
Drives the Textual app through the navigation and chat flows.
"""

import pytest

from textual.widgets import Button, Input

from aclio_coach.app import AclioApp
from aclio_coach.Chat.chat_prompts import GENERAL_QUICK_PROMPTS
from aclio_coach.navigation.app_screen import AppScreen, DASHBOARD, SETTINGS
from aclio_coach.Storage.local_storage import InMemoryStorage
from aclio_coach.UI.Screens.basic_screens import (
    DashboardScreen,
    GoalDetailScreen,
    LoadingScreen,
    SettingsScreen,
    WelcomeScreen,
)
from aclio_coach.UI.Screens.chat_screen import ChatScreen


def make_app(storage, client, delay=0.0):
    return AclioApp(storage=storage, chat_client=client, loading_delay=delay)


@pytest.mark.asyncio
async def test_loading_screen_until_delay(storage, fake_client):
    app = make_app(storage, fake_client, delay=60.0)
    async with app.run_test() as pilot:
        await pilot.pause()
        assert isinstance(app.screen, LoadingScreen)
        assert not app.state.is_ready


@pytest.mark.asyncio
async def test_new_user_sees_welcome_then_dashboard(storage, fake_client):
    app = make_app(storage, fake_client)
    async with app.run_test() as pilot:
        await pilot.pause()
        assert isinstance(app.screen, WelcomeScreen)

        await pilot.click("#skip")
        await pilot.pause()

        assert isinstance(app.screen, DashboardScreen)
        assert storage.has_onboarded


@pytest.mark.asyncio
async def test_escape_goes_back(onboarded_storage, fake_client, sample_goal):
    onboarded_storage.save_goals([sample_goal])
    app = make_app(onboarded_storage, fake_client)
    async with app.run_test() as pilot:
        await pilot.pause()
        assert isinstance(app.screen, DashboardScreen)

        app.state.navigation.navigate(SETTINGS)
        await pilot.pause()
        assert isinstance(app.screen, SettingsScreen)

        app.state.navigation.open_goal(sample_goal)
        await pilot.pause()
        assert isinstance(app.screen, GoalDetailScreen)
        assert app.screen.goal.id == 7

        await pilot.press("escape")
        await pilot.pause()
        assert isinstance(app.screen, SettingsScreen)
        assert app.state.navigation.visible_screen == SETTINGS


@pytest.mark.asyncio
async def test_chat_round_trip(onboarded_storage, fake_client):
    app = make_app(onboarded_storage, fake_client)
    async with app.run_test() as pilot:
        await pilot.pause()
        app.state.navigation.open_chat()
        await pilot.pause()

        screen = app.screen
        assert isinstance(screen, ChatScreen)
        session = screen.session
        assert session is not None
        assert screen.query_one("#send-button", Button).disabled

        chat_input = screen.query_one("#chat-input", Input)
        chat_input.focus()
        chat_input.value = "Help me plan"
        await pilot.pause()
        assert session.input_text == "Help me plan"

        await pilot.press("enter")
        await app.workers.wait_for_complete()
        await pilot.pause()

        assert session.messages[-1].content == "Sure, let's start."
        assert not session.is_loading
        assert chat_input.value == ""
        assert screen.query_one("#stop-button", Button).disabled
        assert fake_client.calls[0]["profile"].name == "Sam"


@pytest.mark.asyncio
async def test_quick_prompt_fills_input(onboarded_storage, fake_client):
    app = make_app(onboarded_storage, fake_client)
    async with app.run_test() as pilot:
        await pilot.pause()
        app.state.navigation.open_chat()
        await pilot.pause()

        await pilot.click("#quick-prompt-0")
        await pilot.pause()

        assert app.screen.session.input_text == GENERAL_QUICK_PROMPTS[0]
        assert app.screen.query_one("#chat-input", Input).value == GENERAL_QUICK_PROMPTS[0]
        assert fake_client.calls == []


@pytest.mark.asyncio
async def test_leaving_chat_closes_session(onboarded_storage, fake_client, sample_goal):
    app = make_app(onboarded_storage, fake_client)
    async with app.run_test() as pilot:
        await pilot.pause()
        app.state.navigation.open_chat(sample_goal)
        await pilot.pause()
        session = app.screen.session

        app.state.navigation.navigate_back()
        await pilot.pause()

        assert isinstance(app.screen, DashboardScreen)
        assert session.is_closed


@pytest.mark.asyncio
async def test_theme_toggle_is_persisted(storage, fake_client):
    app = make_app(storage, fake_client)
    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.theme == "textual-light"

        app.action_toggle_dark_mode()
        await pilot.pause()

        assert app.theme == "textual-dark"
        assert storage.load_theme() is True


@pytest.mark.asyncio
async def test_dark_theme_restored_on_start(fake_client):
    storage = InMemoryStorage()
    storage.save_theme(True)
    app = make_app(storage, fake_client)
    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.theme == "textual-dark"


@pytest.mark.asyncio
async def test_logout_returns_to_welcome(onboarded_storage, fake_client):
    app = make_app(onboarded_storage, fake_client)
    async with app.run_test() as pilot:
        await pilot.pause()
        app.state.navigation.navigate(SETTINGS)
        await pilot.pause()

        await pilot.click("#logout")
        await pilot.pause()

        assert isinstance(app.screen, WelcomeScreen)
        assert app.state.navigation.get_history() == []
        assert not onboarded_storage.has_onboarded


@pytest.mark.asyncio
async def test_zero_loading_delay_leaves_loading_screen(storage, fake_client):
    app = make_app(storage, fake_client, delay=0.0)
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.pause()

        assert app.state.is_ready
        assert isinstance(app.screen, WelcomeScreen)


@pytest.mark.asyncio
async def test_leaving_chat_mid_reply_stops_writes(onboarded_storage, fake_client_factory):
    client = fake_client_factory(chunks=["Partial", " more"], pause_after=1)
    app = make_app(onboarded_storage, client)
    async with app.run_test() as pilot:
        await pilot.pause()
        app.state.navigation.open_chat()
        await pilot.pause()

        screen = app.screen
        session = screen.session
        chat_input = screen.query_one("#chat-input", Input)
        chat_input.focus()
        chat_input.value = "Help me plan"
        await pilot.pause()
        await pilot.press("enter")
        await client.paused.wait()

        reply = session.messages[-1]
        assert reply.content == "Partial"
        assert session.is_loading

        app.state.navigation.navigate_back()
        await pilot.pause()
        await pilot.pause()
        assert session.is_closed

        client.resume.set()
        await app.workers.wait_for_complete()
        await pilot.pause()

        assert isinstance(app.screen, DashboardScreen)
        assert reply.content == "Partial"
        assert reply.is_streaming
        assert session.messages[-1] is reply
