"""
Application service for one user's chat.

Handles the contact list and the messages sent to those contacts.
"""

from datetime import date

import structlog

from recordkit.application.common.collection_service import CollectionService
from recordkit.domain.chat.entities.chat_user import ChatUser
from recordkit.domain.chat.entities.message import Message
from recordkit.domain.common.exceptions import (
    DomainInvariantError,
    DuplicateIdError,
    NotFoundError,
    ValidationError,
)
from recordkit.domain.common.formatting import render_block
from recordkit.domain.common.id_sequence import IdSequence
from recordkit.domain.common.validators import require_date, require_instance
from recordkit.domain.common.value_objects.ids import ChatUserId, MessageId

logger = structlog.get_logger(__name__)


class ChatService(CollectionService[Message]):
    """Messages sent from a chat, plus the owner's contact list."""

    entity_type = Message
    id_type = MessageId
    entity_label = "Message"

    def __init__(self, owner: ChatUser, ids: IdSequence | None = None) -> None:
        super().__init__(ids)
        self.owner = require_instance(owner, ChatUser, "owner")
        self._contacts: list[ChatUser] = []

    def add_contact(self, user: ChatUser) -> ChatUser:
        """
        Add a user to the contact list.

        Raises:
            ValidationError: If user is not a ChatUser
            DomainInvariantError: If user is the chat owner
            DuplicateIdError: If a contact with the same id is already listed
        """
        require_instance(user, ChatUser, "contact")
        if user is self.owner:
            raise DomainInvariantError("Chat", "the owner cannot be their own contact")
        if user in self._contacts:
            raise DuplicateIdError("Contact", user.id.value)

        self._contacts.append(user)
        logger.info("chat_contact_added", owner_id=self.owner.id.value, contact_id=user.id.value)
        return user

    def contacts(self) -> tuple[ChatUser, ...]:
        return tuple(self._contacts)

    def messages(self) -> tuple[Message, ...]:
        return self.get_all()

    def send_message(self, message: Message) -> Message:
        """
        Record a message addressed to one of the contacts.

        Args:
            message: Message to send

        Returns:
            The recorded message

        Raises:
            ValidationError: If message is not a Message
            DomainInvariantError: If the recipient is not a contact
            DuplicateIdError: If the message, or one with the same content on the same day,
                was already sent
        """
        require_instance(message, Message, "message")
        if not any(contact is message.recipient for contact in self._contacts):
            raise DomainInvariantError("Chat", "the recipient is not in the contact list")
        if any(sent.has_same_content(message) for sent in self._items):
            raise DuplicateIdError(self.entity_label, message.text, key="content")

        return self.add(message)

    def filter_by_contact(self, contact_id: int | ChatUserId) -> tuple[Message, ...]:
        """
        Messages addressed to a contact.

        Raises:
            ValidationError: If contact_id is not an integer id
            NotFoundError: If no contact has that id
        """
        if isinstance(contact_id, ChatUserId):
            key = contact_id.value
        elif isinstance(contact_id, bool) or not isinstance(contact_id, int):
            raise ValidationError("Contact id must be an integer", "contact_id", contact_id)
        else:
            key = contact_id
        if not any(contact.id.value == key for contact in self._contacts):
            raise NotFoundError("Contact", key)

        return self.filter_where(lambda message: message.recipient.id.value == key)

    def filter_by_date(self, day: date | str) -> tuple[Message, ...]:
        """
        Messages dated on a given day. Empty when there are none.

        Raises:
            ValidationError: If day is not a valid ``YYYY-MM-DD`` date
        """
        return self.filter_by("sent_on", require_date(day, "date"))

    def describe(self) -> str:
        lines = [f"- {contact.name}" for contact in self._contacts]
        return render_block(
            f"{self.owner.describe()}\nContacts of {self.owner.name}:", lines
        )
