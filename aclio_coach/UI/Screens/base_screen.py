# base_screen.py
# Description: Common base for every navigable view
#
# Imports
from typing import Optional, TYPE_CHECKING
#
# Third-Party Imports
from textual.binding import Binding
from textual.screen import Screen
#
# Local Imports
from ...navigation.app_screen import AppScreen
from ...Models.goal import Goal

if TYPE_CHECKING:
    from ...navigation.navigation_manager import NavigationManager
    from ...state.app_state import AppState
#
#######################################################################################################################
#
# Classes:

class AclioScreen(Screen):
    """A view bound to one ``AppScreen`` destination."""

    BINDINGS = [
        Binding("escape", "go_back", "Back"),
    ]

    def __init__(self, manager: "NavigationManager", app_screen: AppScreen, goal: Optional[Goal] = None, **kwargs):
        super().__init__(**kwargs)
        self.manager = manager
        self.app_screen = app_screen
        self.goal = goal

    @property
    def app_state(self) -> "AppState":
        return self.app.state

    def action_go_back(self) -> None:
        self.manager.navigate_back()

#
# End of base_screen.py
#######################################################################################################################
