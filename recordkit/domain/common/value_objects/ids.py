from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class TaskId(EntityId):
    """Strongly-typed agenda task identifier."""


@dataclass(frozen=True)
class ProductId(EntityId):
    """Strongly-typed cart product identifier."""


@dataclass(frozen=True)
class BookId(EntityId):
    """Strongly-typed bookstore book identifier."""


@dataclass(frozen=True)
class TweetId(EntityId):
    """Strongly-typed tweet identifier."""


@dataclass(frozen=True)
class ChatUserId(EntityId):
    """Strongly-typed chat user identifier."""


@dataclass(frozen=True)
class MessageId(EntityId):
    """Strongly-typed chat message identifier."""


@dataclass(frozen=True)
class OperationId(EntityId):
    """Strongly-typed wallet operation identifier."""


@dataclass(frozen=True)
class NoteId(EntityId):
    """Strongly-typed notebook note identifier."""


@dataclass(frozen=True)
class ContactId(EntityId):
    """Strongly-typed phone contact identifier."""
