from .tweet import Tweet
from .user import User

__all__ = ["Tweet", "User"]
