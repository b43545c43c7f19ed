"""Chat user entity."""

from dataclasses import dataclass

from recordkit.domain.common.entity import Entity
from recordkit.domain.common.id_sequence import IdSequence
from recordkit.domain.common.validators import require_instance, require_key
from recordkit.domain.common.value_objects.ids import ChatUserId


@dataclass(eq=False)
class ChatUser(Entity[ChatUserId]):
    """Participant in a chat. The name is stored lowercased with collapsed whitespace."""

    id: ChatUserId
    name: str

    def __post_init__(self) -> None:
        require_instance(self.id, ChatUserId, "id")
        self.name = require_key(self.name, "name", message="User name is required")

    def describe(self) -> str:
        return f"ID: {self.id} - User: {self.name}"

    @classmethod
    def create(cls, name: str, *, ids: IdSequence) -> "ChatUser":
        user = cls(id=ChatUserId.generate(), name=name)
        user.id = ids.issue(ChatUserId)
        return user

    @classmethod
    def create_with_id(cls, id: ChatUserId, name: str) -> "ChatUser":
        return cls(id=id, name=name)
