"""Author value object."""

from dataclasses import dataclass

from recordkit.domain.common.validators import require_letters
from recordkit.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class Author(ValueObject):
    """
    Book author, identified by name and nationality.

    Both fields are stored lowercased. Names may contain letters (accents
    included) and spaces; nationalities are a single word.
    """

    name: str
    nationality: str

    def __post_init__(self) -> None:
        self._normalize(
            "name",
            require_letters(
                self.name, "name", allow_spaces=True, message="Author name may only contain letters"
            ),
        )
        self._normalize(
            "nationality",
            require_letters(
                self.nationality, "nationality", message="Nationality may only contain letters"
            ),
        )
