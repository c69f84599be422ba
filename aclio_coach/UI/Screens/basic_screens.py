# basic_screens.py
#
# Description: Views for the onboarding flow, dashboard, goals and settings.
#
# Imports
from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.widgets import Button, Footer, Input, Label, Static
from loguru import logger
#
# Local Imports
from .base_screen import AclioScreen
from ...Models.goal import Goal
from ...Models.user_profile import UserProfile
from ...navigation.app_screen import (
    ANALYTICS,
    DEV_SETTINGS,
    EDIT_PROFILE,
    NEW_GOAL,
    NOTIFICATION_SETTINGS,
    ONBOARDING,
    PROFILE_SETUP,
    SETTINGS,
)
from ...Utils.input_validation import validate_age, validate_goal, validate_name
#
########################################################################################################################
#
# Classes:

class LoadingScreen(AclioScreen):
    """Shown until the app knows whether the user has onboarded."""

    def compose(self) -> ComposeResult:
        yield Static("🐰 Aclio", id="loading-mascot")
        yield Label("Loading...", id="loading-label")


class WelcomeScreen(AclioScreen):

    def compose(self) -> ComposeResult:
        with Vertical(id="welcome"):
            yield Static("Welcome to Aclio, your AI goal coach!", id="welcome-title")
            yield Button("Get started", id="get-started", variant="primary")
            yield Button("Skip", id="skip")
        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "get-started":
            self.manager.navigate(ONBOARDING)
        elif event.button.id == "skip":
            self.app_state.complete_onboarding()


class OnboardingScreen(AclioScreen):

    def compose(self) -> ComposeResult:
        with Vertical(id="onboarding"):
            yield Static("Set goals, break them into steps, and get coaching along the way.")
            yield Button("Continue", id="continue", variant="primary")
        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "continue":
            self.manager.navigate(PROFILE_SETUP)


class ProfileSetupScreen(AclioScreen):
    """Collects name and age, then finishes onboarding."""

    def compose(self) -> ComposeResult:
        with Vertical(id="profile-setup"):
            yield Input(placeholder="Your name", id="profile-name")
            yield Input(placeholder="Age (optional)", id="profile-age")
            yield Label("", id="profile-error")
            yield Button("Save", id="save-profile", variant="primary")
            yield Button("Skip", id="skip-profile")
        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "skip-profile":
            self.app_state.complete_onboarding()
            return
        if event.button.id != "save-profile":
            return

        name = self.query_one("#profile-name", Input).value
        age = self.query_one("#profile-age", Input).value
        for result in (validate_name(name), validate_age(age)):
            if not result.is_valid:
                self.query_one("#profile-error", Label).update(result.error_message or "")
                return

        self.app_state.update_profile(UserProfile(name=name.strip(), age=age.strip()))
        self.app_state.complete_onboarding()


class DashboardScreen(AclioScreen):

    def compose(self) -> ComposeResult:
        yield Static(f"Hi, {self.app_state.profile.display_name}!", id="dashboard-greeting")
        with VerticalScroll(id="goal-list"):
            for goal in self.app_state.goals:
                yield Button(f"{goal.name} ({goal.progress}%)", id=f"goal-{goal.id}", classes="goal-button")
        yield Button("New goal", id="new-goal", variant="primary")
        yield Button("Talk to Aclio", id="open-chat")
        yield Button("Settings", id="open-settings")
        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id.startswith("goal-"):
            goal = self.app_state.get_goal(int(button_id[len("goal-"):]))
            if goal is not None:
                self.app_state.set_active_goal(goal)
                self.manager.open_goal(goal)
        elif button_id == "new-goal":
            self.manager.navigate(NEW_GOAL)
        elif button_id == "open-chat":
            self.manager.open_chat()
        elif button_id == "open-settings":
            self.manager.navigate(SETTINGS)


class NewGoalScreen(AclioScreen):

    def compose(self) -> ComposeResult:
        yield Input(placeholder="What do you want to achieve?", id="goal-input")
        yield Label("", id="goal-error")
        yield Button("Create goal", id="create-goal", variant="primary")
        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id != "create-goal":
            return
        text = self.query_one("#goal-input", Input).value
        result = validate_goal(text)
        if not result.is_valid:
            self.query_one("#goal-error", Label).update(result.error_message or "")
            return

        goal = Goal(name=text.strip())
        self.app_state.add_goal(goal)
        self.app_state.set_active_goal(goal)
        logger.info(f"Created goal {goal.id}")
        # Replace this screen with the new goal's detail view
        self.manager.navigate_back()
        self.manager.open_goal(goal)


class GoalDetailScreen(AclioScreen):

    def compose(self) -> ComposeResult:
        goal = self.goal
        yield Static(goal.name, id="goal-title")
        yield Label(f"{goal.progress}% complete", id="goal-progress")
        with VerticalScroll(id="goal-steps"):
            for step in goal.steps:
                mark = "✓" if goal.is_step_completed(step.id) else "○"
                yield Label(f"{mark} {step.title}", classes="goal-step")
        yield Button("Ask Aclio about this goal", id="goal-chat", variant="primary")
        yield Button("Delete goal", id="goal-delete", variant="error")
        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "goal-chat":
            self.manager.open_chat(self.goal)
        elif event.button.id == "goal-delete":
            self.app_state.delete_goal(self.goal.id)
            self.manager.navigate_back()


class SettingsScreen(AclioScreen):

    def compose(self) -> ComposeResult:
        with Vertical(id="settings"):
            yield Button("Toggle dark mode", id="toggle-theme")
            yield Button("Edit profile", id="edit-profile")
            yield Button("Analytics", id="analytics")
            yield Button("Notifications", id="notifications")
            yield Button("Developer settings", id="dev-settings")
            yield Button("Log out", id="logout", variant="error")
        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == "toggle-theme":
            self.app.apply_theme(self.app_state.toggle_theme())
        elif button_id == "edit-profile":
            self.manager.navigate(EDIT_PROFILE)
        elif button_id == "analytics":
            self.manager.navigate(ANALYTICS)
        elif button_id == "notifications":
            self.manager.navigate(NOTIFICATION_SETTINGS)
        elif button_id == "dev-settings":
            self.manager.navigate(DEV_SETTINGS)
        elif button_id == "logout":
            self.app_state.logout()


class InfoScreen(AclioScreen):
    """Plain placeholder view for destinations without their own layout yet."""

    def compose(self) -> ComposeResult:
        title = self.app_screen.kind.value.replace("_", " ").title()
        yield Static(title, id="info-title")
        yield Footer()
