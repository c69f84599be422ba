"""
Coaching chat: message models, fixed copy and the session controller.
"""

from .chat_models import ChatMessage, MessageRole
from .chat_session import ChatSession

__all__ = [
    'ChatMessage',
    'ChatSession',
    'MessageRole',
]
