"""Tweet entity."""

from dataclasses import dataclass, field

from recordkit.domain.common.entity import Entity
from recordkit.domain.common.id_sequence import IdSequence
from recordkit.domain.common.validators import require_instance, require_text
from recordkit.domain.common.value_objects.ids import TweetId
from recordkit.domain.feed.entities.user import User


def _toggle(users: list[User], user: User) -> bool:
    """Add user if absent, remove it otherwise. Returns whether the user is now present."""
    if user in users:
        users.remove(user)
        return False
    users.append(user)
    return True


@dataclass(eq=False)
class Tweet(Entity[TweetId]):
    """
    A published message.

    Likes and retweets are toggles: a second like from the same user takes
    the first one back. Higher ids are newer tweets.
    """

    id: TweetId
    author: User
    text: str
    _likes: list[User] = field(default_factory=list, repr=False)
    _retweets: list[User] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        require_instance(self.id, TweetId, "id")
        self.author = require_instance(self.author, User, "author")
        self.text = require_text(self.text, "text", message="Tweet text is required")

    @property
    def likes(self) -> tuple[User, ...]:
        return tuple(self._likes)

    @property
    def retweets(self) -> tuple[User, ...]:
        return tuple(self._retweets)

    def like(self, user: User) -> bool:
        """
        Toggle a like from user.

        Returns:
            True if the tweet is now liked by user, False if the like was removed
        """
        return _toggle(self._likes, require_instance(user, User, "user"))

    def retweet(self, user: User) -> bool:
        """Toggle a retweet from user. Same contract as like()."""
        return _toggle(self._retweets, require_instance(user, User, "user"))

    def is_liked_by_any(self, users: tuple[User, ...]) -> bool:
        return any(user in self._likes for user in users)

    def is_retweeted_by_any(self, users: tuple[User, ...]) -> bool:
        return any(user in self._retweets for user in users)

    def describe(self) -> str:
        return f"[{self.id}] @{self.author.handle}: {self.text}"

    @classmethod
    def create(cls, author: User, text: str, *, ids: IdSequence) -> "Tweet":
        tweet = cls(id=TweetId.generate(), author=author, text=text)
        tweet.id = ids.issue(TweetId)
        return tweet

    @classmethod
    def create_with_id(cls, id: TweetId, author: User, text: str) -> "Tweet":
        """Reconstitute a tweet whose id was issued elsewhere."""
        return cls(id=id, author=author, text=text)
