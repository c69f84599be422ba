# aclio_api.py
# Description: Streaming client for the Aclio coaching chat API
#
# The backend answers POST /talk-to-aclio-stream with server-sent event lines:
#   data: {"text": "..."}     one chunk of the reply
#   data: {"done": true}      end of the reply
#   data: {"error": "..."}    upstream failure
#
# Imports
from __future__ import annotations
import json
from typing import Any, Callable, Dict, List, Optional, Protocol
#
# Third-Party Imports
import httpx
from loguru import logger
#
# Local Imports
from ..config import get_api_settings
from ..Models.goal import Goal
from ..Models.user_profile import UserProfile
#
#######################################################################################################################
#
# Exceptions:

class ChatAPIError(Exception):
    """Base class for chat API failures."""
    pass


class ChatNetworkError(ChatAPIError):
    """The request never got a response (DNS, connection refused, reset...)."""
    pass


class ChatTimeoutError(ChatAPIError):
    pass


class ChatServerError(ChatAPIError):
    """The server answered with a failure status or an error event."""
    pass


class ChatRateLimitError(ChatAPIError):
    pass


class ChatUnauthorizedError(ChatAPIError):
    pass

#
# Interfaces:

ChunkCallback = Callable[[str], None]


class ChatStreamClient(Protocol):
    """What the chat session needs from a streaming backend."""

    async def stream_chat(
        self,
        message: str,
        goal: Optional[Goal],
        history: List[Dict[str, str]],
        profile: Optional[UserProfile],
        on_chunk: ChunkCallback,
    ) -> None:
        """
        Send ``message`` and call ``on_chunk`` for every piece of the reply, in
        delivery order. Returns when the reply is complete; raises
        ``ChatAPIError`` (or any other exception) on failure, possibly after
        some chunks were already delivered.
        """
        ...

#
# Classes:

class AclioApiClient:
    """HTTP client for the Aclio chat backend."""

    STREAM_ENDPOINT = "talk-to-aclio-stream"
    EVENT_PREFIX = "data: "

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        history_limit: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_api_settings()
        self.base_url = (base_url or settings["base_url"]).rstrip("/")
        self.timeout = timeout if timeout is not None else settings["timeout"]
        self.history_limit = history_limit if history_limit is not None else settings["history_limit"]
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        logger.debug(f"AclioApiClient initialized for {self.base_url} (timeout={self.timeout}s)")

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def build_payload(
        self,
        message: str,
        goal: Optional[Goal],
        history: List[Dict[str, str]],
        profile: Optional[UserProfile],
    ) -> Dict[str, Any]:
        """Request body for a chat turn."""
        recent_history = history[-self.history_limit:] if self.history_limit > 0 else []
        payload: Dict[str, Any] = {
            "message": message,
            "goalName": goal.name if goal is not None else "General",
            "goalCategory": (goal.category if goal is not None else None) or "Personal",
            "chatHistory": recent_history,
        }
        if goal is not None:
            payload["steps"] = [
                {"id": step.id, "title": step.title, "description": step.description}
                for step in goal.steps
            ]
            payload["completedSteps"] = list(goal.completed_steps)
        if profile is not None:
            payload["profile"] = {
                "name": profile.name,
                "age": profile.age,
                "gender": profile.gender.value if profile.gender is not None else "",
            }
        return payload

    def _parse_event_line(self, line: str) -> Optional[Dict[str, Any]]:
        """Decode one ``data:`` line; anything else (comments, blanks, junk) is skipped."""
        if not line.startswith(self.EVENT_PREFIX):
            return None
        try:
            event = json.loads(line[len(self.EVENT_PREFIX):])
        except json.JSONDecodeError:
            logger.debug(f"Skipping undecodable stream line: {line[:80]!r}")
            return None
        return event if isinstance(event, dict) else None

    @staticmethod
    def _error_for_status(status_code: int) -> ChatAPIError:
        if status_code == 401:
            return ChatUnauthorizedError("Authentication failed. Please check your API configuration.")
        if status_code == 429:
            return ChatRateLimitError("Rate limit exceeded. Please try again later.")
        return ChatServerError(f"Chat request failed with HTTP {status_code}")

    async def stream_chat(
        self,
        message: str,
        goal: Optional[Goal],
        history: List[Dict[str, str]],
        profile: Optional[UserProfile],
        on_chunk: ChunkCallback,
    ) -> None:
        url = f"{self.base_url}/{self.STREAM_ENDPOINT}"
        payload = self.build_payload(message, goal, history, profile)
        logger.info(f"Streaming chat request ({len(message)} chars, {len(payload['chatHistory'])} history turns)")

        chunk_count = 0
        try:
            async with self.client.stream("POST", url, json=payload) as response:
                if response.status_code != 200:
                    logger.error(f"Chat API returned HTTP {response.status_code}")
                    raise self._error_for_status(response.status_code)

                async for line in response.aiter_lines():
                    event = self._parse_event_line(line)
                    if event is None:
                        continue
                    text = event.get("text")
                    if isinstance(text, str):
                        chunk_count += 1
                        on_chunk(text)
                    if event.get("done") is True:
                        break
                    error = event.get("error")
                    if isinstance(error, str):
                        raise ChatServerError(error)
        except httpx.TimeoutException as e:
            logger.error("Chat API request timed out")
            raise ChatTimeoutError("The chat service took too long to respond.") from e
        except httpx.RequestError as e:
            logger.error(f"Chat API request failed: {type(e).__name__}")
            raise ChatNetworkError("Unable to connect to the chat service.") from e

        logger.debug(f"Chat stream finished after {chunk_count} chunks")

#
# End of aclio_api.py
#######################################################################################################################
