# chat_session.py
# Description: Controller for a single coaching conversation
#
# Imports
import asyncio
from typing import Callable, Dict, List, Optional, TYPE_CHECKING
#
# Third-Party Imports
from loguru import logger
#
# Local Imports
from .chat_models import ChatMessage, MessageRole
from .chat_prompts import (
    CONNECTION_ERROR_FALLBACK,
    EMPTY_REPLY_FALLBACK,
    quick_prompts_for,
    welcome_message_for,
)
from ..LLM_Calls.aclio_api import ChatStreamClient
from ..Models.goal import Goal

if TYPE_CHECKING:
    from ..Storage.local_storage import StorageService
#
#######################################################################################################################
#
# Classes:

SessionListener = Callable[["ChatSession"], None]


class ChatSession:
    """
    One conversation with the coach, optionally scoped to a goal.

    ``send_message`` appends the user's turn and an empty streaming reply, then
    fills that reply from the stream. The reply is always looked up by its id,
    never by position. While a send is in flight ``is_loading`` is True and
    further sends are ignored. Transport failures never escape: the reply is
    replaced with a fixed apology instead.

    After ``close`` the session ignores everything still arriving from an
    in-flight stream.
    """

    def __init__(
        self,
        client: ChatStreamClient,
        goal: Optional[Goal] = None,
        storage: Optional["StorageService"] = None,
    ):
        self.client = client
        self.goal = goal
        self.storage = storage

        self.messages: List[ChatMessage] = [
            ChatMessage(role=MessageRole.ASSISTANT, content=welcome_message_for(goal))
        ]
        self.input_text: str = ""
        self.is_loading: bool = False

        self._closed = False
        self._stop_requested = False
        self._stream_task: Optional[asyncio.Task] = None
        self._streaming_id: Optional[str] = None
        self._listeners: List[SessionListener] = []

    # --- Read-only views ---

    @property
    def welcome_message(self) -> ChatMessage:
        return self.messages[0]

    @property
    def quick_prompts(self) -> List[str]:
        return quick_prompts_for(self.goal)

    @property
    def can_send(self) -> bool:
        return bool(self.input_text.strip()) and not self.is_loading and not self._closed

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def streaming_message(self) -> Optional[ChatMessage]:
        if self._streaming_id is None:
            return None
        return self._find_message(self._streaming_id)

    def history_payload(self) -> List[Dict[str, str]]:
        """Conversation so far as role/content pairs, without the welcome message."""
        return [message.to_history_entry() for message in self.messages[1:]]

    # --- Input ---

    def set_input(self, text: str) -> None:
        self.input_text = text
        self._notify()

    def select_quick_prompt(self, prompt: str) -> None:
        """Put a suggestion in the input box without sending it."""
        self.set_input(prompt)

    # --- Sending ---

    async def send_message(self, text: Optional[str] = None) -> bool:
        """
        Send ``text`` (or the pending input) and stream the reply.

        Returns False when the send was rejected (blank text, a send already in
        flight, or a closed session), True once the turn has finished, whether
        the stream succeeded, failed or was stopped.
        """
        content = (self.input_text if text is None else text).strip()
        if self._closed or not content or self.is_loading:
            logger.debug("Ignoring send: closed={}, empty={}, loading={}", self._closed, not content, self.is_loading)
            return False

        # Everything before this turn, minus the synthesized welcome
        history = self.history_payload()

        user_message = ChatMessage(role=MessageRole.USER, content=content)
        reply = ChatMessage(role=MessageRole.ASSISTANT, is_streaming=True)
        self.messages.append(user_message)
        self.input_text = ""
        self.messages.append(reply)
        self.is_loading = True
        self._stop_requested = False
        self._streaming_id = reply.id
        self._notify()

        reply_id = reply.id
        try:
            profile = self.storage.load_profile() if self.storage is not None else None
            self._stream_task = asyncio.ensure_future(
                self.client.stream_chat(
                    content,
                    self.goal,
                    history,
                    profile,
                    lambda chunk: self._apply_chunk(reply_id, chunk),
                )
            )
            await self._stream_task
        except asyncio.CancelledError:
            if not (self._stop_requested or self._closed):
                # The caller itself was cancelled; let that propagate
                self._finalize(reply_id)
                raise
            logger.info("Chat stream stopped before completion")
            self._finalize(reply_id)
        except Exception as e:
            logger.warning(f"Chat stream failed: {type(e).__name__}: {e}")
            self._finalize(reply_id, replace_with=CONNECTION_ERROR_FALLBACK)
        else:
            self._finalize(reply_id)
        finally:
            self._stream_task = None
            self._streaming_id = None
            if not self._closed:
                self.is_loading = False
                self._notify()
        return True

    def cancel(self) -> bool:
        """
        Stop the reply currently streaming. The partial text is kept. Returns
        False when nothing was in flight.
        """
        if self._stream_task is None or self._stream_task.done():
            return False
        self._stop_requested = True
        self._stream_task.cancel()
        return True

    def close(self) -> None:
        """
        Tear the session down. Any in-flight stream is cancelled and nothing it
        still delivers is written.
        """
        if self._closed:
            return
        self._closed = True
        self._listeners.clear()
        if self._stream_task is not None and not self._stream_task.done():
            self._stream_task.cancel()
        logger.debug("Chat session closed")

    # --- Listeners ---

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a change listener. Returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # --- Internals ---

    def _find_message(self, message_id: str) -> Optional[ChatMessage]:
        for message in reversed(self.messages):
            if message.id == message_id:
                return message
        return None

    def _apply_chunk(self, message_id: str, chunk: str) -> None:
        if self._closed:
            return
        message = self._find_message(message_id)
        if message is None or not message.is_streaming:
            return
        message.content += chunk
        self._notify()

    def _finalize(self, message_id: str, replace_with: Optional[str] = None) -> None:
        """End streaming for ``message_id``. Runs at most once per message."""
        if self._closed:
            return
        message = self._find_message(message_id)
        if message is None or not message.is_streaming:
            return
        if replace_with is not None:
            message.content = replace_with
        elif not message.content:
            message.content = EMPTY_REPLY_FALLBACK
        message.is_streaming = False

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("Chat session listener failed")

#
# End of chat_session.py
#######################################################################################################################
