"""
Application service for a mobile phone.

Contacts are addressed by name (case-insensitive). Calls and messages are
kept as plain-text history lines.
"""

import structlog

from recordkit.application.common.collection_service import CollectionService
from recordkit.domain.common.exceptions import DuplicateIdError, NotFoundError
from recordkit.domain.common.formatting import render_block
from recordkit.domain.common.id_sequence import IdSequence
from recordkit.domain.common.validators import require_integer, require_text
from recordkit.domain.common.value_objects.ids import ContactId
from recordkit.domain.phone.entities.contact import Contact

logger = structlog.get_logger(__name__)


class PhoneService(CollectionService[Contact]):
    """Contact list plus call and message history."""

    entity_type = Contact
    id_type = ContactId
    entity_label = "Contact"
    done_command = "mark_favorite"

    def __init__(self, ids: IdSequence | None = None) -> None:
        super().__init__(ids)
        self._calls: list[str] = []
        self._messages: list[str] = []

    def add_contact(self, contact: Contact) -> Contact:
        """
        Add a contact.

        Raises:
            ValidationError: If contact is not a Contact
            DuplicateIdError: If a contact already has the same name or number
        """
        if isinstance(contact, Contact):
            for existing in self._items:
                if existing.matches_name(contact.name):
                    raise DuplicateIdError(self.entity_label, contact.name, key="name")
                if existing.number == contact.number:
                    raise DuplicateIdError(self.entity_label, contact.number, key="number")
        return self.add(contact)

    def find_by_name(self, name: str) -> Contact | None:
        """Contact with that name, or None. Blank names raise ValidationError."""
        require_text(name, "name", message="Contact name is required")
        for contact in self._items:
            if contact.matches_name(name):
                return contact
        return None

    def find_by_number(self, number: int) -> Contact | None:
        require_integer(number, "number", message="Phone number must be an integer")
        for contact in self._items:
            if contact.number == number:
                return contact
        return None

    def _require_contact(self, name: str) -> Contact:
        contact = self.find_by_name(name)
        if contact is None:
            raise NotFoundError(self.entity_label, name)
        return contact

    def remove_contact(self, name: str) -> Contact:
        """
        Remove a contact by name.

        Raises:
            NotFoundError: If no contact has that name
        """
        return self.remove(self._require_contact(name).id)

    def call(self, name: str) -> str:
        """
        Call a contact and record it in the call history.

        Returns:
            The history line that was recorded

        Raises:
            NotFoundError: If no contact has that name
        """
        contact = self._require_contact(name)
        entry = f"Call to {contact.name} at number {contact.number} completed"
        self._calls.append(entry)
        logger.info("phone_call_placed", contact_id=contact.id.value)
        return entry

    def send_message(self, name: str, text: str) -> str:
        """
        Send a text message to a contact.

        Raises:
            ValidationError: If text is blank
            NotFoundError: If no contact has that name
        """
        body = require_text(text, "text", message="Message text is required")
        contact = self._require_contact(name)
        entry = f'Message to {contact.name} ({contact.number}): "{body}"'
        self._messages.append(entry)
        logger.info("phone_message_sent", contact_id=contact.id.value)
        return entry

    def mark_favorite(self, name: str) -> Contact:
        """Mark a contact as favourite. Marking it again changes nothing."""
        return self.mark_done(self._require_contact(name).id)

    def favorites(self) -> tuple[Contact, ...]:
        return self.filter_by_flag("favorite")

    def call_history(self) -> tuple[str, ...]:
        return tuple(self._calls)

    def message_history(self) -> tuple[str, ...]:
        return tuple(self._messages)

    def clear_call_history(self) -> None:
        self._calls.clear()

    def clear_message_history(self) -> None:
        self._messages.clear()

    def list_contacts(self) -> str:
        return "\n".join(contact.describe() for contact in self._items)

    def describe(self) -> str:
        sections = [
            render_block("CONTACTS:", [contact.describe() for contact in self._items]),
            render_block("CALLS:", self._calls),
            render_block(
                "FAVORITES:", [f"* {c.name} - {c.number}" for c in self.favorites()]
            ),
            render_block("MESSAGES:", self._messages),
        ]
        return "\n\n".join(sections)
