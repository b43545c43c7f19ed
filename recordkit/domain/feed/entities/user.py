"""Feed user, identified by handle."""

from dataclasses import dataclass, field

from recordkit.domain.common.exceptions import DomainInvariantError, DuplicateIdError
from recordkit.domain.common.validators import require_instance, require_key


@dataclass(eq=False)
class User:
    """
    Account that follows other accounts.

    Business Rules:
    - The handle is the identity, stored lowercased
    - A user cannot follow themselves or follow the same user twice
    - Followed users are non-owning references
    """

    handle: str
    _following: list["User"] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        self.handle = require_key(self.handle, "handle", message="Handle is required")

    @property
    def following(self) -> tuple["User", ...]:
        return tuple(self._following)

    def follows(self, other: "User") -> bool:
        return other in self._following

    def follow(self, other: "User") -> None:
        """
        Start following another user.

        Raises:
            ValidationError: If other is not a User
            DomainInvariantError: If other is this same user
            DuplicateIdError: If other is already followed
        """
        require_instance(other, User, "user")
        if other == self:
            raise DomainInvariantError("User", "a user cannot follow themselves")
        if self.follows(other):
            raise DuplicateIdError("Followed user", other.handle, key="handle")
        self._following.append(other)

    def following_handles(self) -> list[str]:
        return [user.handle for user in self._following]

    def describe(self) -> str:
        return f"@{self.handle}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return False
        return self.handle == other.handle

    def __hash__(self) -> int:
        return hash(("User", self.handle))
