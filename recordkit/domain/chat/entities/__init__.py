from .chat_user import ChatUser
from .message import Message

__all__ = ["ChatUser", "Message"]
