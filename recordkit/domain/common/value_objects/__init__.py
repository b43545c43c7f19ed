"""Common value objects shared across all domain modules."""

from .ids import (
    BookId,
    ChatUserId,
    ContactId,
    MessageId,
    NoteId,
    OperationId,
    ProductId,
    TaskId,
    TweetId,
)

__all__ = [
    "BookId",
    "ChatUserId",
    "ContactId",
    "MessageId",
    "NoteId",
    "OperationId",
    "ProductId",
    "TaskId",
    "TweetId",
]
