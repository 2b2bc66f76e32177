"""Message payloads and placeholder formatting"""

from .formatter import format_message, substitute, throwable_candidate
from .message import Message, SimpleMessage, ParameterizedMessage

__all__ = [
    'format_message',
    'substitute',
    'throwable_candidate',
    'Message',
    'SimpleMessage',
    'ParameterizedMessage'
]
