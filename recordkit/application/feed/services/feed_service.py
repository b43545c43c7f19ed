"""Application service for published tweets and timelines."""

from recordkit.application.common.collection_service import CollectionService
from recordkit.domain.common.validators import require_instance
from recordkit.domain.common.value_objects.ids import TweetId
from recordkit.domain.feed.entities.tweet import Tweet
from recordkit.domain.feed.entities.user import User


class FeedService(CollectionService[Tweet]):
    """All published tweets, in publication order."""

    entity_type = Tweet
    id_type = TweetId
    entity_label = "Tweet"

    def publish(self, tweet: Tweet) -> Tweet:
        """
        Publish a tweet.

        Raises:
            DuplicateIdError: If the tweet was already published
        """
        return self.add(tweet)

    def published_by_followed(self, user: User) -> tuple[Tweet, ...]:
        following = user.following
        return self.filter_where(lambda tweet: tweet.author in following)

    def liked_by_followed(self, user: User) -> tuple[Tweet, ...]:
        following = user.following
        return self.filter_where(lambda tweet: tweet.is_liked_by_any(following))

    def retweeted_by_followed(self, user: User) -> tuple[Tweet, ...]:
        following = user.following
        return self.filter_where(lambda tweet: tweet.is_retweeted_by_any(following))

    def timeline(self, user: User) -> tuple[Tweet, ...]:
        """
        Build a user's timeline.

        The timeline holds every tweet published, liked or retweeted by
        someone the user follows, each tweet once, newest first.

        Args:
            user: Reader of the timeline

        Returns:
            Tweets sorted by id descending

        Raises:
            ValidationError: If user is not a User
        """
        require_instance(user, User, "user")
        return self.merge_unique(
            self.published_by_followed(user),
            self.liked_by_followed(user),
            self.retweeted_by_followed(user),
        )
