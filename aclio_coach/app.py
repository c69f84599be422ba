# app.py
# Description: Textual host for aclio_coach. Mounts whichever view the navigation state says is visible.
#
# Imports
from typing import Optional
#
# Third-Party Imports
from loguru import logger
from textual.app import App
from textual.binding import Binding
#
# Local Imports
from .config import get_cli_setting, get_storage_path, load_cli_config_and_ensure_existence
from .LLM_Calls.aclio_api import AclioApiClient, ChatStreamClient
from .navigation.app_screen import AppScreen
from .state.app_state import AppState
from .Storage.local_storage import JsonFileStorage, StorageService
#
#######################################################################################################################
#
# Classes:

class AclioApp(App):
    """
    Terminal front end for the coach.

    The app holds no navigation logic of its own: it listens to the
    ``NavigationManager`` and swaps in the view the registry builds for the
    visible screen.
    """

    TITLE = "Aclio"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("ctrl+t", "toggle_dark_mode", "Theme"),
    ]

    def __init__(
        self,
        storage: Optional[StorageService] = None,
        chat_client: Optional[ChatStreamClient] = None,
        loading_delay: Optional[float] = None,
    ):
        super().__init__()
        if storage is None:
            load_cli_config_and_ensure_existence()
            storage = JsonFileStorage(get_storage_path())
        self._owns_client = chat_client is None
        self.state = AppState(storage=storage, chat_client=chat_client or AclioApiClient())
        if loading_delay is None:
            loading_delay = float(get_cli_setting("general", "loading_delay", 0.5))
        self.loading_delay = loading_delay
        self._unsubscribe_navigation = None
        logger.info("Application initialized")

    def on_mount(self) -> None:
        self.apply_theme(self.state.is_dark_mode)
        self.push_screen(self.state.navigation.resolve_view())
        self._unsubscribe_navigation = self.state.navigation.subscribe(self._on_navigation_changed)
        if self.loading_delay > 0:
            self.set_timer(self.loading_delay, self.state.finish_loading)
        else:
            self.call_after_refresh(self.state.finish_loading)

    async def on_unmount(self) -> None:
        if self._unsubscribe_navigation is not None:
            self._unsubscribe_navigation()
            self._unsubscribe_navigation = None
        if self._owns_client and isinstance(self.state.chat_client, AclioApiClient):
            await self.state.chat_client.close()
        logger.info("--- App Unmounting ---")

    def _on_navigation_changed(self, visible: AppScreen) -> None:
        logger.debug(f"Showing view for {visible!r}")
        self.switch_screen(self.state.navigation.resolve_view())

    def apply_theme(self, is_dark: bool) -> None:
        self.theme = "textual-dark" if is_dark else "textual-light"

    def action_toggle_dark_mode(self) -> None:
        self.apply_theme(self.state.toggle_theme())

#
# End of app.py
#######################################################################################################################
