"""Note entity."""

from dataclasses import dataclass

from recordkit.domain.common.entity import Entity
from recordkit.domain.common.id_sequence import IdSequence
from recordkit.domain.common.validators import require_instance, require_text
from recordkit.domain.common.value_objects.ids import NoteId


@dataclass(eq=False)
class Note(Entity[NoteId]):
    """One line of a notebook. Text is stored with collapsed whitespace."""

    id: NoteId
    text: str

    def __post_init__(self) -> None:
        require_instance(self.id, NoteId, "id")
        self.text = require_text(self.text, "text", message="Note text is required")

    def rewrite(self, text: str) -> None:
        """
        Replace the note text.

        Raises:
            ValidationError: If text is blank
        """
        self.text = require_text(text, "text", message="Note text is required")

    def describe(self) -> str:
        return self.text

    @classmethod
    def create(cls, text: str, *, ids: IdSequence) -> "Note":
        note = cls(id=NoteId.generate(), text=text)
        note.id = ids.issue(NoteId)
        return note

    @classmethod
    def create_with_id(cls, id: NoteId, text: str) -> "Note":
        return cls(id=id, text=text)
