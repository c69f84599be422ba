from .aclio_api import (
    AclioApiClient,
    ChatAPIError,
    ChatNetworkError,
    ChatRateLimitError,
    ChatServerError,
    ChatStreamClient,
    ChatTimeoutError,
    ChatUnauthorizedError,
)

__all__ = [
    'AclioApiClient',
    'ChatAPIError',
    'ChatNetworkError',
    'ChatRateLimitError',
    'ChatServerError',
    'ChatStreamClient',
    'ChatTimeoutError',
    'ChatUnauthorizedError',
]
