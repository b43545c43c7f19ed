"""Application service for a notebook."""

from recordkit.application.common.collection_service import CollectionService
from recordkit.domain.common.formatting import numbered, render_block
from recordkit.domain.common.id_sequence import IdSequence
from recordkit.domain.common.validators import require_text
from recordkit.domain.common.value_objects.ids import NoteId
from recordkit.domain.notebook.entities.note import Note

RULE = "-" * 23


class NotebookService(CollectionService[Note]):
    """
    Titled list of notes.

    Notes keep the id they were created with; ``list_notes`` numbers them
    by position, so the numbers shown shift when a note is removed.
    """

    entity_type = Note
    id_type = NoteId
    entity_label = "Note"

    def __init__(self, title: str, ids: IdSequence | None = None) -> None:
        super().__init__(ids)
        self.title = require_text(title, "title", message="Notebook title is required")

    def add_note(self, text: str) -> Note:
        """
        Create a note and append it.

        Raises:
            ValidationError: If text is blank
        """
        return self.add(Note.create(text, ids=self.ids))

    def update_note(self, note_id: int | NoteId, text: str) -> Note:
        return self.update_field(note_id, lambda note: note.rewrite(text))

    def get_note(self, note_id: int | NoteId) -> Note:
        return self.get_by_id(note_id)

    def remove_note(self, note_id: int | NoteId) -> Note:
        return self.remove(note_id)

    def list_notes(self) -> str:
        """
        Render the notebook::

            Things to do
            -----------------------
            1. Go to the supermarket
            2. Watch a series
        """
        return render_block(
            self.title, numbered(note.text for note in self._items), rule=RULE
        )

    def describe(self) -> str:
        return self.list_notes()
