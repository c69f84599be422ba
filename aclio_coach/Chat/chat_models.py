"""Data models for the chat session using Pydantic."""

from datetime import datetime
from enum import Enum
from typing import Dict
from uuid import uuid4

from pydantic import BaseModel, Field


class MessageRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """One turn in a conversation. ``content`` only changes while ``is_streaming``."""
    id: str = Field(default_factory=lambda: uuid4().hex)
    role: MessageRole
    content: str = ""
    timestamp: datetime = Field(default_factory=datetime.now)
    is_streaming: bool = False

    def to_history_entry(self) -> Dict[str, str]:
        """Role/content pair as sent upstream."""
        return {"role": self.role.value, "content": self.content}
