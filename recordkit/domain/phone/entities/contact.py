"""Phone contact entity."""

from dataclasses import dataclass

from recordkit.domain.common.entity import Entity
from recordkit.domain.common.id_sequence import IdSequence
from recordkit.domain.common.normalization import normalize_key
from recordkit.domain.common.validators import (
    require_bool,
    require_instance,
    require_integer,
    require_text,
)
from recordkit.domain.common.value_objects.ids import ContactId


@dataclass(eq=False)
class Contact(Entity[ContactId]):
    """
    Entry in a phone's contact list.

    Business Rules:
    - Name keeps its casing for display but is matched case-insensitively
    - Number is a positive integer
    - Favourite is a one-way flag
    """

    id: ContactId
    name: str
    number: int
    favorite: bool = False

    def __post_init__(self) -> None:
        require_instance(self.id, ContactId, "id")
        self.name = require_text(self.name, "name", message="Contact name is required")
        self.number = require_integer(
            self.number, "number", minimum=1, message="Phone number must be a positive integer"
        )
        self.favorite = require_bool(self.favorite, "favorite")

    def matches_name(self, name: str) -> bool:
        return normalize_key(self.name) == normalize_key(name)

    def mark_favorite(self) -> None:
        self.favorite = True

    def describe(self) -> str:
        return f"Name: {self.name}, Number: {self.number}"

    @classmethod
    def create(cls, name: str, number: int, *, ids: IdSequence) -> "Contact":
        contact = cls(id=ContactId.generate(), name=name, number=number)
        contact.id = ids.issue(ContactId)
        return contact

    @classmethod
    def create_with_id(
        cls, id: ContactId, name: str, number: int, favorite: bool = False
    ) -> "Contact":
        """Reconstitute a contact whose id was issued elsewhere."""
        return cls(id=id, name=name, number=number, favorite=favorite)
