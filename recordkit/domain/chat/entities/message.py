"""Chat message entity."""

from dataclasses import dataclass, field
from datetime import date

from recordkit.domain.chat.entities.chat_user import ChatUser
from recordkit.domain.common.entity import Entity
from recordkit.domain.common.id_sequence import IdSequence
from recordkit.domain.common.validators import require_date, require_instance, require_text
from recordkit.domain.common.value_objects.ids import MessageId


@dataclass(eq=False)
class Message(Entity[MessageId]):
    """
    Text sent from one user to another on a given day.

    Business Rules:
    - Sender and recipient are non-owning ChatUser references
    - Text cannot be blank
    - The day defaults to today
    """

    id: MessageId
    sender: ChatUser
    recipient: ChatUser
    text: str
    sent_on: date = field(default_factory=date.today)

    def __post_init__(self) -> None:
        require_instance(self.id, MessageId, "id")
        self.sender = require_instance(self.sender, ChatUser, "sender")
        self.recipient = require_instance(self.recipient, ChatUser, "recipient")
        self.text = require_text(self.text, "text", message="Message text is required")
        self.sent_on = require_date(self.sent_on, "sent_on")

    def has_same_content(self, other: "Message") -> bool:
        """Same sender, recipient, text and day, regardless of id."""
        return (
            self.sender == other.sender
            and self.recipient == other.recipient
            and self.text == other.text
            and self.sent_on == other.sent_on
        )

    def describe(self) -> str:
        return (
            f"[{self.sent_on.isoformat()}] {self.sender.name} → {self.recipient.name}: {self.text}"
        )

    @classmethod
    def create(
        cls,
        sender: ChatUser,
        recipient: ChatUser,
        text: str,
        *,
        ids: IdSequence,
        sent_on: date | str | None = None,
    ) -> "Message":
        """
        Create a new message.

        Args:
            sender: User writing the message
            recipient: User receiving it
            text: Message body
            ids: Sequence the message id is drawn from once every field is valid
            sent_on: Day the message is dated, today when omitted

        Returns:
            New Message instance
        """
        message = cls(
            id=MessageId.generate(),
            sender=sender,
            recipient=recipient,
            text=text,
            sent_on=date.today() if sent_on is None else sent_on,  # type: ignore[arg-type]
        )
        message.id = ids.issue(MessageId)
        return message
