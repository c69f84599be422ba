# chat_screen.py
#
# Description: Coaching chat view. Renders a ChatSession and forwards input to it.
#
# Imports
from typing import Optional
#
# Third-Party Imports
from rich.text import Text
from textual import work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import Button, Footer, Input, Static
from loguru import logger
#
# Local Imports
from .base_screen import AclioScreen
from ...Chat.chat_models import ChatMessage, MessageRole
from ...Chat.chat_prompts import quick_prompts_for
from ...Chat.chat_session import ChatSession
from ...Utils.input_validation import validate_chat_message
#
########################################################################################################################
#
# Classes:

class ChatScreen(AclioScreen):
    """
    Chat with the coach, optionally about one goal.

    The session is created on mount and closed on unmount, so a reply still
    streaming when the user leaves is dropped instead of written anywhere.
    """

    BINDINGS = [
        Binding("ctrl+x", "stop_reply", "Stop"),
    ]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.session: Optional[ChatSession] = None
        self._quick_prompts = quick_prompts_for(self.goal)

    def compose(self) -> ComposeResult:
        title = f"Coaching: {self.goal.name}" if self.goal is not None else "Coaching"
        yield Static(title, id="chat-title")
        with VerticalScroll(id="chat-log"):
            yield Static("", id="chat-transcript")
        with Horizontal(id="quick-prompts"):
            for index, prompt in enumerate(self._quick_prompts):
                yield Button(prompt, id=f"quick-prompt-{index}", classes="quick-prompt")
        with Horizontal(id="chat-input-bar"):
            yield Input(placeholder="Ask Aclio anything...", id="chat-input")
            yield Button("Send", id="send-button", variant="primary")
            yield Button("Stop", id="stop-button", variant="error")
        yield Footer()

    def on_mount(self) -> None:
        self.session = self.app_state.create_chat_session(self.goal)
        self.session.subscribe(self._on_session_changed)
        self._render_session()

    def on_unmount(self) -> None:
        if self.session is not None:
            self.session.close()

    # --- Rendering ---

    def _on_session_changed(self, session: ChatSession) -> None:
        if self.is_mounted:
            self._render_session()

    @staticmethod
    def _format_message(message: ChatMessage) -> Text:
        speaker = "You" if message.role == MessageRole.USER else "Aclio"
        text = Text()
        text.append(f"{speaker}: ", style="bold")
        body = message.content
        if message.is_streaming and not body:
            body = "…"
        text.append(body)
        return text

    def _render_session(self) -> None:
        session = self.session
        transcript = Text("\n\n").join(self._format_message(m) for m in session.messages)
        self.query_one("#chat-transcript", Static).update(transcript)
        self.query_one("#chat-log", VerticalScroll).scroll_end(animate=False)

        chat_input = self.query_one("#chat-input", Input)
        if chat_input.value != session.input_text:
            chat_input.value = session.input_text
        self.query_one("#send-button", Button).disabled = not session.can_send
        self.query_one("#stop-button", Button).disabled = not session.is_loading

    # --- Events ---

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "chat-input" and self.session is not None:
            if event.value != self.session.input_text:
                self.session.set_input(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "chat-input":
            self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id == "send-button":
            self._submit()
        elif button_id == "stop-button":
            self.action_stop_reply()
        elif button_id.startswith("quick-prompt-") and self.session is not None:
            index = int(button_id[len("quick-prompt-"):])
            self.session.select_quick_prompt(self._quick_prompts[index])

    def action_stop_reply(self) -> None:
        if self.session is not None:
            self.session.cancel()

    def _submit(self) -> None:
        if self.session is None or not self.session.can_send:
            return
        result = validate_chat_message(self.session.input_text)
        if not result.is_valid:
            self.notify(result.error_message or "Invalid message", severity="warning")
            return
        self.send_pending_input()

    @work(exclusive=False, group="chat-send")
    async def send_pending_input(self) -> None:
        """Run the send in a worker so the UI keeps rendering chunks."""
        sent = await self.session.send_message()
        logger.debug(f"Chat send finished (accepted={sent})")
